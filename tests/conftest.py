"""Shared test fixtures for assetpack."""

from pathlib import Path

import pytest

from assetpack.collection import Collection
from assetpack.config.models import AssetsConfig
from assetpack.minify import Minifiers


def _identity(data: bytes) -> bytes:
    return data


@pytest.fixture
def sample_config():
    return AssetsConfig()


@pytest.fixture
def identity_minifiers():
    """Minifiers that return their input, so bundle bytes are predictable."""
    return Minifiers(style=_identity, script=_identity)


@pytest.fixture
def src_tree(tmp_path: Path) -> Path:
    """A source tree with one stylesheet, one script and one image."""
    src = tmp_path / "src"
    (src / "app" / "assets" / "styles").mkdir(parents=True)
    (src / "app" / "assets" / "scripts").mkdir(parents=True)
    (src / "app" / "images").mkdir(parents=True)
    (src / "app" / "assets" / "styles" / "a.css").write_bytes(b"body{}")
    (src / "app" / "assets" / "scripts" / "b.js").write_bytes(b"var x=1;")
    (src / "app" / "images" / "logo.png").write_bytes(b"\x89PNG fake")
    return src


@pytest.fixture
def collection(tmp_path: Path, identity_minifiers) -> Collection:
    return Collection(
        manifest_path=tmp_path / "secrets" / "assets.json",
        minifiers=identity_minifiers,
    )
