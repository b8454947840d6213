"""Tests for the manifest codec."""

from __future__ import annotations

import json

import pytest

from assetpack.group import Group
from assetpack.manifest import decode_manifest, encode_manifest


def _group(name: str, scripts: str, styles: str, files: list[tuple[str, str]]) -> Group:
    g = Group(name)
    g.script_hash = scripts
    g.style_hash = styles
    for n, h in files:
        g.add_asset(n, h)
    return g


def test_encode_shape_and_file_order():
    g = _group("app", "J", "S", [("z.js", "h3"), ("a.css", "h1"), ("m.png", "h2")])
    data = json.loads(encode_manifest([g]))

    assert data == {"app": {"scripts": "J", "styles": "S", "files": {"a.css": "h1", "m.png": "h2", "z.js": "h3"}}}
    assert list(data["app"]["files"]) == ["a.css", "m.png", "z.js"]


def test_encode_keeps_group_order():
    groups = [_group("zeta", "", "", []), _group("alpha", "", "", [])]
    assert list(json.loads(encode_manifest(groups))) == ["zeta", "alpha"]


def test_encode_is_deterministic():
    g1 = _group("app", "J", "S", [("b.js", "2"), ("a.css", "1")])
    g2 = _group("app", "J", "S", [("a.css", "1"), ("b.js", "2")])
    assert encode_manifest([g1]) == encode_manifest([g2])


def test_decode_rebuilds_sorted_groups():
    raw = json.dumps(
        {
            "admin": {"scripts": "", "styles": "S2", "files": {"y.css": "hy"}},
            "app": {"scripts": "J", "styles": "S", "files": {"z.js": "hz", "a.css": "ha"}},
        }
    )
    groups = decode_manifest(raw)

    assert list(groups) == ["admin", "app"]
    app = groups["app"]
    assert app.script_hash == "J"
    assert app.style_hash == "S"
    assert [(a.name, a.hash) for a in app.assets] == [("a.css", "ha"), ("z.js", "hz")]
    assert all(a.source_path is None and a.data is None for a in app.assets)


def test_decode_defaults_missing_members():
    groups = decode_manifest('{"app": {}}')
    assert groups["app"].script_hash == ""
    assert groups["app"].style_hash == ""
    assert groups["app"].assets == []


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        '{"app": []}',
        '{"app": {"scripts": 5}}',
        '{"app": {"files": {"a.css": 1}}}',
        '{"app": {"files": ["a.css"]}}',
    ],
)
def test_decode_rejects_malformed(raw: str):
    with pytest.raises(ValueError):
        decode_manifest(raw)


def test_round_trip():
    g = _group("app", "J", "S", [("b.js", "hb"), ("a.css", "ha")])
    back = decode_manifest(encode_manifest([g]))["app"]
    assert (back.script_hash, back.style_hash) == ("J", "S")
    assert {a.name: a.hash for a in back.assets} == {"a.css": "ha", "b.js": "hb"}
