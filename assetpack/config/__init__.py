from .loader import load_config
from .models import (
    AssetsConfig,
    BuildConfig,
    ManifestConfig,
)

__all__ = [
    "AssetsConfig",
    "BuildConfig",
    "ManifestConfig",
    "load_config",
]
