"""Badge color resolution.

Maps shields.io color names, their aliases and CSS color literals to RGBA
values, and scores colors by perceived brightness.
"""

from __future__ import annotations

import logging
import math
import re
from bisect import bisect_left
from dataclasses import dataclass

from PIL import ImageColor

from shield_maker.markup import format_value

logger = logging.getLogger(__name__)

# Both tables are searched by bisection. Keep them sorted by key.
NAMED_COLORS: tuple[tuple[str, str], ...] = (
    ("blue", "#007ec6"),
    ("brightgreen", "#4c1"),
    ("green", "#97ca00"),
    ("grey", "#555"),
    ("lightgrey", "#9f9f9f"),
    ("orange", "#fe7d37"),
    ("red", "#e05d44"),
    ("yellow", "#dfb317"),
    ("yellowgreen", "#a4a61d"),
)

ALIASES: tuple[tuple[str, str], ...] = (
    ("critical", "red"),
    ("gray", "grey"),
    ("important", "orange"),
    ("inactive", "lightgrey"),
    ("informational", "blue"),
    ("lightgray", "lightgrey"),
    ("success", "brightgreen"),
)

_NAMED_KEYS = tuple(k for k, _ in NAMED_COLORS)
_ALIAS_KEYS = tuple(k for k, _ in ALIASES)

assert list(_NAMED_KEYS) == sorted(_NAMED_KEYS), "NAMED_COLORS must be sorted"
assert list(_ALIAS_KEYS) == sorted(_ALIAS_KEYS), "ALIASES must be sorted"

# CSS alpha is 0..1; Pillow reads rgba() alpha as a 0..255 integer and has
# no hsla(). Out-of-range numbers are clamped, as in CSS.
_CSS_RGB = re.compile(
    r"rgba?\(\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*(?:,\s*(-?\d*\.?\d+)\s*)?\)$"
)
_CSS_HSLA = re.compile(
    r"hsla\(\s*(\d+\.?\d*)\s*,\s*(\d+\.?\d*)%\s*,\s*(\d+\.?\d*)%\s*,\s*(-?\d*\.?\d+)\s*\)$"
)


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1.0


def _lookup(keys: tuple[str, ...], table: tuple[tuple[str, str], ...], name: str) -> str | None:
    idx = bisect_left(keys, name)
    if idx < len(keys) and keys[idx] == name:
        return table[idx][1]
    return None


def find_named_color(name: str) -> str | None:
    """Return the hex string for a shields.io color name, or None."""
    return _lookup(_NAMED_KEYS, NAMED_COLORS, name)


def find_color_by_alias(name: str) -> str | None:
    """Return the hex string an alias points at, or None."""
    target = _lookup(_ALIAS_KEYS, ALIASES, name)
    if target is None:
        return None
    return find_named_color(target)


def parse_css_color(value: str) -> Color | None:
    """Parse a CSS color literal. Returns None when it isn't one."""
    text = value.strip().lower()
    if text == "transparent":
        return Color(0, 0, 0, 0.0)
    alpha = 1.0
    m = _CSS_RGB.match(text)
    if m:
        channels = tuple(int(m.group(i)) for i in (1, 2, 3))
        if m.group(4) is not None:
            alpha = float(m.group(4))
    else:
        m = _CSS_HSLA.match(text)
        if m:
            text = f"hsl({m.group(1)},{m.group(2)}%,{m.group(3)}%)"
            alpha = float(m.group(4))
        try:
            parsed = ImageColor.getrgb(text)
        except ValueError:
            return None
        channels = parsed[:3]
        if len(parsed) == 4:
            alpha = parsed[3] / 255
    r, g, b = (min(max(c, 0), 255) for c in channels)
    return Color(r, g, b, a=min(max(alpha, 0.0), 1.0))


def color_by_name(name: str | None) -> Color | None:
    """Resolve a color override.

    Aliases are checked first, then named colors, then the raw value is parsed
    as a CSS color. Returns None when nothing matches; the caller applies its
    default.
    """
    if name is None:
        return None
    literal = find_color_by_alias(name) or find_named_color(name) or name
    color = parse_css_color(literal)
    if color is None:
        logger.debug("could not resolve color %r", name)
    return color


def color_to_string(color: Color) -> str:
    """Format as an SVG-ready ``rgba(r,g,b,a)`` string."""
    return f"rgba({color.r},{color.g},{color.b},{format_value(float(color.a))})"


def brightness(color: Color) -> float:
    """Perceived lightness in [0, 1], truncated to two decimals. Ignores alpha."""
    luma = abs(color.r * 299 + color.g * 587 + color.b * 114) / 255000
    return math.trunc(luma * 100) / 100
