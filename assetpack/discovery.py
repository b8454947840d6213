"""Bounded-depth discovery of asset files and group assignment."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from assetpack.errors import DiscoveryError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("js", "css", "jpg", "png")
DEFAULT_GROUP = "app"

# Files must sit 2-4 directories below the source root, e.g.
#   src/app/images/img.png
#   src/app/assets/images/img.png
#   src/app/assets/images/group/img.png
# Anything shallower or deeper is ignored on purpose.
_DEPTH_PATTERNS = ("*/*/*", "*/*/*/*", "*/*/*/*/*")

GroupAssigner = Callable[[Path], str]


def default_group_assigner(path: Path) -> str:
    """Put every discovered file in the ``app`` group."""
    return DEFAULT_GROUP


def fixed_group_assigner(name: str) -> GroupAssigner:
    """Return an assigner that puts every file in group *name*."""

    def _assign(path: Path) -> str:
        return name

    return _assign


def collect_assets(src: Path, extensions: Iterable[str]) -> list[Path]:
    """Find files with the given extensions 2-4 levels below *src*.

    Extensions are processed in order and each depth pattern is sorted, so
    the result is deterministic for a given tree. A filesystem failure aborts
    the whole scan with ``DiscoveryError``.
    """
    src = Path(src)
    # Path.glob skips unreadable directories silently, so list the root
    # up front to surface permission errors on it
    try:
        next(src.iterdir(), None)
    except FileNotFoundError:
        return []
    except OSError as e:
        raise DiscoveryError("list", src, e) from e

    assets: list[Path] = []
    for ext in extensions:
        ext = ext.lstrip(".")
        for depth in _DEPTH_PATTERNS:
            pattern = f"{depth}.{ext}"
            try:
                matches = sorted(p for p in src.glob(pattern) if p.is_file())
            except (OSError, ValueError) as e:
                raise DiscoveryError("glob", src / pattern, e) from e
            assets.extend(matches)
    logger.debug("Discovered %d asset(s) under %s", len(assets), src)
    return assets
