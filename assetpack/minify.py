"""CSS/JS minifier adapters wrapping rcssmin and rjsmin."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import rcssmin
import rjsmin

from assetpack.errors import MinifyError

Minify = Callable[[bytes], bytes]


def minify_css(data: bytes) -> bytes:
    """Minify a UTF-8 stylesheet buffer."""
    try:
        return rcssmin.cssmin(data.decode("utf-8")).encode("utf-8")
    except (UnicodeDecodeError, ValueError) as e:
        raise MinifyError("minify css", "<styles>", e) from e


def minify_js(data: bytes) -> bytes:
    """Minify a UTF-8 script buffer."""
    try:
        return rjsmin.jsmin(data.decode("utf-8")).encode("utf-8")
    except (UnicodeDecodeError, ValueError) as e:
        raise MinifyError("minify js", "<scripts>", e) from e


@dataclass(frozen=True)
class Minifiers:
    """The pair of minifiers a group compile uses, one per asset class."""

    style: Minify = field(default=minify_css)
    script: Minify = field(default=minify_js)
