"""Error taxonomy for the asset pipeline."""

from __future__ import annotations

from pathlib import Path


class AssetError(Exception):
    """Wraps a failure in the pipeline with the operation and path involved."""

    def __init__(
        self, operation: str, path: str | Path, cause: Exception | None = None
    ) -> None:
        self.operation = operation
        self.path = str(path)
        message = f"{operation} failed for {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.__cause__ = cause


class DiscoveryError(AssetError):
    """Pattern matching or filesystem failure while scanning a source tree."""


class IngestError(AssetError):
    """A source file could not be read or copied."""


class MinifyError(AssetError):
    """A minifier rejected its input."""


class PersistenceError(AssetError):
    """The manifest could not be written, read or decoded."""
