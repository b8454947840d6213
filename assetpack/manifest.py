"""Manifest codec: groups <-> ``{group: {scripts, styles, files}}`` JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from assetpack.group import Group


class GroupEntry(BaseModel):
    """One group as persisted in the manifest."""

    scripts: str = ""
    styles: str = ""
    files: dict[str, str] = Field(default_factory=dict)


_MANIFEST = TypeAdapter(dict[str, GroupEntry])


def encode_manifest(groups: Iterable[Group]) -> str:
    """Serialize *groups* in iteration order, files sorted by name."""
    data = {
        g.name: {
            "scripts": g.script_hash,
            "styles": g.style_hash,
            "files": {a.name: a.hash for a in sorted(g.assets, key=lambda a: a.name)},
        }
        for g in groups
    }
    return json.dumps(data, indent=2) + "\n"


def decode_manifest(raw: str) -> dict[str, Group]:
    """Rebuild groups from manifest text.

    Assets come back with name and hash only, sorted by name. Raises
    ``ValueError`` when the text is not JSON or not shaped like a manifest.
    """
    try:
        entries = _MANIFEST.validate_json(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid manifest: {e}") from e

    groups: dict[str, Group] = {}
    for name, entry in entries.items():
        group = Group(name)
        group.script_hash = entry.scripts
        group.style_hash = entry.styles
        for file_name, file_hash in entry.files.items():
            group.add_asset(file_name, file_hash)
        group.sort()
        groups[name] = group
    return groups
