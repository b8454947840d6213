"""A single asset file: name, fingerprint and (transiently) its bytes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from assetpack.errors import IngestError
from assetpack.fingerprint import compute_hash

logger = logging.getLogger(__name__)


class AssetClass(str, Enum):
    STYLE = "style"
    SCRIPT = "script"
    OTHER = "other"


# Output folder under <dst>/assets; everything but scripts shares styles/
_FOLDERS = {
    AssetClass.STYLE: "styles",
    AssetClass.SCRIPT: "scripts",
    AssetClass.OTHER: "styles",
}


@dataclass
class Asset:
    """An asset known by name and content hash.

    ``source_path`` and ``data`` are only set while a build is running; an
    asset reconstructed from the manifest carries just ``name`` and ``hash``.
    """

    name: str
    hash: str
    source_path: Path | None = None
    data: bytes | None = field(default=None, repr=False)

    @classmethod
    def from_path(cls, path: Path) -> Asset:
        """Read *path* and fingerprint its bytes."""
        try:
            data = path.read_bytes()
        except OSError as e:
            raise IngestError("read", path, e) from e
        return cls(name=path.name, hash=compute_hash(data), source_path=path, data=data)

    @property
    def asset_class(self) -> AssetClass:
        if self.name.endswith(".css"):
            return AssetClass.STYLE
        if self.name.endswith(".js"):
            return AssetClass.SCRIPT
        return AssetClass.OTHER

    def is_style(self) -> bool:
        return self.asset_class is AssetClass.STYLE

    def is_script(self) -> bool:
        return self.asset_class is AssetClass.SCRIPT

    def destination(self, dst: Path) -> Path:
        """Path of the uncompiled per-file copy under *dst*."""
        return Path(dst) / "assets" / _FOLDERS[self.asset_class] / self.name

    def needs_copy(self, dest: Path) -> bool:
        """True when the source is newer than *dest* or *dest* is missing.

        Any stat failure other than a missing destination means no copy.
        """
        if self.source_path is None:
            return False
        try:
            src_mtime = self.source_path.stat().st_mtime_ns
        except OSError:
            return False
        try:
            dst_mtime = dest.stat().st_mtime_ns
        except FileNotFoundError:
            return True
        except OSError as e:
            logger.warning("Skipping copy of %s, cannot stat %s: %s", self.name, dest, e)
            return False
        return src_mtime > dst_mtime

    def copy(self, dest: Path) -> None:
        """Write the raw bytes verbatim to *dest*."""
        if self.data is None:
            raise IngestError("copy", dest, ValueError(f"no bytes loaded for {self.name}"))
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(self.data)
        except OSError as e:
            raise IngestError("copy", dest, e) from e
        logger.debug("Copied %s -> %s", self.source_path, dest)

    def release(self) -> None:
        """Drop the in-memory bytes once they have been concatenated."""
        self.data = None

    def __str__(self) -> str:
        return f"{self.name}:{self.hash}"
