"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import AssetsConfig

CONFIG_FILENAME = "assetpack.yaml"


def _candidate_paths(cli_path: str | None) -> list[Path]:
    """Config locations in priority order: CLI > project-local > user-global."""
    paths = [Path(CONFIG_FILENAME), Path.home() / ".assetpack" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def load_config(cli_path: str | None = None) -> AssetsConfig:
    """Load the first non-empty config file found, else the defaults.

    Raises ValueError when a file is not valid YAML or fails validation.
    """
    for path in _candidate_paths(cli_path):
        if not path.is_file():
            continue
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: expected a mapping")
        try:
            return AssetsConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return AssetsConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `assetpack config init`
DEFAULT_CONFIG_TEMPLATE = """\
# assetpack.yaml

# Build
build:
  src: "src"                   # source root, assets sit 2-4 folders below it
  dst: "public"                # output root, bundles go to <dst>/assets/...
  extensions: ["js", "css", "jpg", "png"]
  default_group: "app"

# Manifest read by the serving process at startup
manifest:
  path: "secrets/assets.json"

# Link compiled bundles instead of individual files
production: false

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
