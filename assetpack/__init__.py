"""Fingerprinted static-asset groups for web applications."""

from assetpack.asset import Asset, AssetClass
from assetpack.collection import Collection
from assetpack.discovery import (
    DEFAULT_EXTENSIONS,
    GroupAssigner,
    collect_assets,
    default_group_assigner,
)
from assetpack.errors import (
    AssetError,
    DiscoveryError,
    IngestError,
    MinifyError,
    PersistenceError,
)
from assetpack.fingerprint import compute_aggregate_hash, compute_file_hash, compute_hash
from assetpack.group import Group
from assetpack.minify import Minifiers, minify_css, minify_js

__all__ = [
    "DEFAULT_EXTENSIONS",
    "Asset",
    "AssetClass",
    "AssetError",
    "Collection",
    "DiscoveryError",
    "Group",
    "GroupAssigner",
    "IngestError",
    "Minifiers",
    "MinifyError",
    "PersistenceError",
    "collect_assets",
    "compute_aggregate_hash",
    "compute_file_hash",
    "compute_hash",
    "default_group_assigner",
    "minify_css",
    "minify_js",
]
