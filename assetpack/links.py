"""HTML link tags for compiled bundles or their individual files."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from markupsafe import Markup

if TYPE_CHECKING:
    from assetpack.collection import Collection

STYLE_TEMPLATE = Markup(
    '<link href="/assets/styles/{}" media="all" rel="stylesheet" type="text/css" />'
)
SCRIPT_TEMPLATE = Markup('<script src="/assets/scripts/{}" type="text/javascript" ></script>')


def style_link(name: str) -> Markup:
    """A stylesheet tag for *name*, appending ``.css`` when missing."""
    if not name.endswith(".css"):
        name = name + ".css"
    return STYLE_TEMPLATE.format(quote(name))


def script_link(name: str) -> Markup:
    """A script tag for *name*, appending ``.js`` when missing."""
    if not name.endswith(".js"):
        name = name + ".js"
    return SCRIPT_TEMPLATE.format(quote(name))


def style_links(collection: Collection, *names: str) -> Markup:
    """Stylesheet tags for the named groups.

    A group with a compiled style bundle links the bundle in production and
    each of its stylesheets otherwise. Names without a bundle are linked as
    plain files.
    """
    html = Markup("")
    for name in names:
        group = collection.group(name)
        if not group.style_hash:
            html += style_link(name)
        elif collection.production:
            html += style_link(group.style_name())
        else:
            for asset in group.styles():
                html += style_link(asset.name) + Markup("\n")
    return html


def script_links(collection: Collection, *names: str) -> Markup:
    """Script tags for the named groups, following the same rules as styles."""
    html = Markup("")
    for name in names:
        group = collection.group(name)
        if not group.script_hash:
            html += script_link(name)
        elif collection.production:
            html += script_link(group.script_name())
        else:
            for asset in group.scripts():
                html += script_link(asset.name) + Markup("\n")
    return html
