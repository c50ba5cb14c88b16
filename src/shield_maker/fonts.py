"""Text measurement for badge layout.

The compositor only needs the advance width of a string at 11px. Hosts with a
font file use TrueTypeFontMetrics (Pillow); EstimatedFontMetrics covers the
no-font case with a per-character table.
"""

from __future__ import annotations

import logging
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import Protocol

from PIL import ImageFont

logger = logging.getLogger(__name__)

FONT_SIZE = 11
# Pillow rounds advances at small sizes; measure large and scale down.
_OVERSAMPLE = 10


class FontFamily(str, Enum):
    DEFAULT = "Verdana,Geneva,DejaVu Sans,sans-serif"
    DEJAVU_SANS = "DejaVu Sans,Verdana,Geneva,sans-serif"

    @classmethod
    def parse(cls, value: str) -> FontFamily:
        """Accept a member name (``dejavu_sans``) or a CSS family list."""
        key = value.strip().upper().replace("-", "_")
        if key in cls.__members__:
            return cls[key]
        return cls(value)


class FontMetrics(Protocol):
    def measure_width(self, text: str, font_family: FontFamily) -> float:
        """Advance width of ``text`` in pixels at 11px."""
        ...


class TrueTypeFontMetrics:
    """Measures text with a TrueType/OpenType font through Pillow."""

    def __init__(self, source: str | Path | bytes, size: int = FONT_SIZE) -> None:
        if isinstance(source, bytes):
            handle = BytesIO(source)
        else:
            handle = str(source)
        self.size = size
        self._font = ImageFont.truetype(handle, size * _OVERSAMPLE)
        logger.debug("loaded font %s", self._font.getname())

    def measure_width(self, text: str, font_family: FontFamily) -> float:
        return self._font.getlength(text) / _OVERSAMPLE


# Approximate Verdana advances at 11px.
_ESTIMATED_WIDTHS: dict[str, float] = {
    "f": 3.9, "i": 3.1, "j": 3.4, "l": 3.1, "r": 4.7, "t": 4.3,
    "m": 10.7, "w": 8.9, "W": 11.0, "M": 9.9,
    " ": 3.9, ".": 3.6, ",": 3.6, ":": 4.6, ";": 4.6, "!": 4.6,
    "|": 4.6, "'": 3.0, "/": 4.6, "-": 4.6, "%": 11.9,
}
_ESTIMATED_DEFAULT = 7.0


class EstimatedFontMetrics:
    """Font-free estimate for hosts that can't ship a font file."""

    def measure_width(self, text: str, font_family: FontFamily) -> float:
        return sum(_ESTIMATED_WIDTHS.get(ch, _ESTIMATED_DEFAULT) for ch in text)


def load_font_metrics(font_path: str | Path | None = None) -> FontMetrics:
    """Return metrics for ``font_path``, or the estimate when it is None.

    Raises OSError when the font file can't be read or parsed.
    """
    if font_path is None:
        logger.debug("no font configured, using estimated metrics")
        return EstimatedFontMetrics()
    return TrueTypeFontMetrics(Path(font_path).expanduser())
