"""Asset groups: named bundles compiled into one script and one style file."""

from __future__ import annotations

import logging
from pathlib import Path

from assetpack.asset import Asset
from assetpack.errors import AssetError, IngestError
from assetpack.fingerprint import compute_aggregate_hash
from assetpack.minify import Minifiers

logger = logging.getLogger(__name__)

# Written after every file in a concatenated bundle
_SEPARATOR = b"\n\n"


class Group:
    """An ordered collection of assets sharing an output namespace."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.assets: list[Asset] = []
        self.style_hash = ""
        self.script_hash = ""

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def styles(self) -> list[Asset]:
        return [a for a in self.assets if a.is_style()]

    def scripts(self) -> list[Asset]:
        return [a for a in self.assets if a.is_script()]

    def asset(self, name: str) -> Asset | None:
        """Return the asset called *name*, or None."""
        for a in self.assets:
            if a.name == name:
                return a
        return None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, asset: Asset) -> bool:
        """Add *asset*; a later asset with the same name replaces the earlier one.

        Returns True when an earlier asset was replaced.
        """
        for i, existing in enumerate(self.assets):
            if existing.name == asset.name:
                logger.warning(
                    "Group %s: %s replaces earlier %s",
                    self.name,
                    asset.source_path or asset.name,
                    existing.source_path or existing.name,
                )
                self.assets[i] = asset
                return True
        self.assets.append(asset)
        return False

    def add_asset(self, name: str, hash: str) -> Asset:
        """Register an asset known only by name and hash (manifest load)."""
        asset = Asset(name=name, hash=hash)
        self.add(asset)
        return asset

    def ingest(self, path: Path, dst: Path) -> Asset:
        """Fingerprint the file at *path*, add it, and copy it to *dst* if stale."""
        asset = Asset.from_path(path)
        replaced = self.add(asset)

        # The copy on disk may belong to the asset just replaced, whatever its mtime
        dest = asset.destination(dst)
        if replaced or asset.needs_copy(dest):
            asset.copy(dest)
        return asset

    def sort(self) -> None:
        self.assets.sort(key=lambda a: a.name)

    # ------------------------------------------------------------------
    # Compile
    # ------------------------------------------------------------------

    def compile(self, dst: Path, minifiers: Minifiers | None = None) -> None:
        """Concatenate, minify and write this group's bundles under *dst*.

        The aggregate hashes come from the member fingerprints, not from the
        minified output. Styles are written before scripts, so a script
        failure can leave a new style bundle on disk without its script.
        """
        minifiers = minifiers or Minifiers()
        styles = self.styles()
        scripts = self.scripts()

        self.style_hash = compute_aggregate_hash([a.hash for a in styles])
        self.script_hash = compute_aggregate_hash([a.hash for a in scripts])

        try:
            if styles:
                self._write_bundle(self.style_path(dst), minifiers.style(_concat(styles)))
            if scripts:
                self._write_bundle(self.script_path(dst), minifiers.script(_concat(scripts)))
        finally:
            for a in self.assets:
                a.release()
            self.sort()

        logger.info(
            "Compiled group %s: %d style(s), %d script(s)",
            self.name,
            len(styles),
            len(scripts),
        )

    def _write_bundle(self, path: Path, data: bytes) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise IngestError("write", path, e) from e
        logger.debug("Wrote %s (%d bytes)", path, len(data))

    # ------------------------------------------------------------------
    # Output names
    # ------------------------------------------------------------------

    def style_name(self) -> str:
        return f"{self.name}-{self.style_hash}.min.css"

    def style_path(self, dst: Path) -> Path:
        return Path(dst) / "assets" / "styles" / self.style_name()

    def script_name(self) -> str:
        return f"{self.name}-{self.script_hash}.min.js"

    def script_path(self, dst: Path) -> Path:
        return Path(dst) / "assets" / "scripts" / self.script_name()

    def __str__(self) -> str:
        return f"{self.name}:{len(self.assets)}"


def _concat(assets: list[Asset]) -> bytes:
    """Join the raw bytes of *assets* in order, each followed by a blank line."""
    parts: list[bytes] = []
    for a in assets:
        if a.data is None:
            raise AssetError("concatenate", a.source_path or a.name, ValueError("bytes already released"))
        parts.append(a.data)
        parts.append(_SEPARATOR)
    return b"".join(parts)
