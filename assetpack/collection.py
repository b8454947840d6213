"""Collection of asset groups: build orchestration and manifest persistence."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from assetpack.discovery import (
    DEFAULT_EXTENSIONS,
    GroupAssigner,
    collect_assets,
    default_group_assigner,
    fixed_group_assigner,
)
from assetpack.errors import PersistenceError
from assetpack.group import Group
from assetpack.manifest import decode_manifest, encode_manifest
from assetpack.minify import Minifiers

if TYPE_CHECKING:
    from assetpack.config.models import AssetsConfig

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_PATH = Path("secrets/assets.json")


class Collection:
    """All asset groups of an application, keyed by name in insertion order."""

    def __init__(
        self,
        production: bool = False,
        manifest_path: Path = DEFAULT_MANIFEST_PATH,
        assign_group: GroupAssigner = default_group_assigner,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        minifiers: Minifiers | None = None,
    ) -> None:
        self.production = production
        self.manifest_path = Path(manifest_path)
        self.assign_group = assign_group
        self.extensions = tuple(extensions)
        self.minifiers = minifiers or Minifiers()
        self.groups: dict[str, Group] = {}

    @classmethod
    def from_config(cls, cfg: AssetsConfig) -> Collection:
        return cls(
            production=cfg.production,
            manifest_path=Path(cfg.manifest.path),
            assign_group=fixed_group_assigner(cfg.build.default_group),
            extensions=cfg.build.extensions,
        )

    # ------------------------------------------------------------------
    # Groups
    # ------------------------------------------------------------------

    def group(self, name: str) -> Group:
        """Return the named group, or an empty unregistered one."""
        return self.groups.get(name) or Group(name)

    def fetch_or_create_group(self, name: str) -> Group:
        if name not in self.groups:
            self.groups[name] = Group(name)
        return self.groups[name]

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def compile(self, src: Path, dst: Path) -> None:
        """Build every group from *src* into *dst* and save the manifest.

        Not atomic: when a group fails, bundles already written for earlier
        groups stay on disk and the manifest is not updated.
        """
        src = Path(src)
        dst = Path(dst)
        self.groups = {}

        files = collect_assets(src, self.extensions)
        for path in files:
            group = self.fetch_or_create_group(self.assign_group(path))
            group.ingest(path, dst)

        for group in self.groups.values():
            group.compile(dst, self.minifiers)

        self.save()
        logger.info(
            "Compiled %d file(s) in %d group(s) from %s to %s",
            len(files),
            len(self.groups),
            src,
            dst,
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        return encode_manifest(self.groups.values())

    def save(self) -> None:
        """Write the manifest to ``manifest_path``."""
        try:
            self.manifest_path.parent.mkdir(parents=True, exist_ok=True)
            self.manifest_path.write_text(self.to_json(), encoding="utf-8")
        except OSError as e:
            raise PersistenceError("write manifest", self.manifest_path, e) from e
        logger.debug("Saved manifest %s", self.manifest_path)

    def load(self) -> None:
        """Replace all groups with those recorded in the manifest.

        On failure the collection is left with no groups.
        """
        self.groups = {}
        try:
            raw = self.manifest_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError("read manifest", self.manifest_path, e) from e
        try:
            self.groups = decode_manifest(raw)
        except ValueError as e:
            raise PersistenceError("decode manifest", self.manifest_path, e) from e
        logger.debug("Loaded %d group(s) from %s", len(self.groups), self.manifest_path)
