"""Content fingerprints used for cache-busting names and manifest identity."""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Sequence
from pathlib import Path


def compute_hash(content: bytes) -> str:
    """SHA-1 digest encoded as unpadded URL-safe base64 (27 characters)."""
    digest = hashlib.sha1(content).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


def compute_file_hash(path: Path) -> str:
    """Read a file from disk and return its fingerprint."""
    return compute_hash(path.read_bytes())


def compute_aggregate_hash(hashes: Sequence[str]) -> str:
    """Fingerprint the in-order concatenation of *hashes*.

    Unlike a merkle parent hash the input is not sorted: reordering the
    constituents changes the result. An empty sequence yields ``""``.
    """
    if not hashes:
        return ""
    return compute_hash("".join(hashes).encode("ascii"))
