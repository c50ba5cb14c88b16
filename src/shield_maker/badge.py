"""SVG badge composition.

Builds a shields.io-style badge: a label box and a message box side by side,
text centered in each, decorated by the selected style.

    >>> from shield_maker.badge import Metadata, Renderer, Style
    >>> from shield_maker.fonts import EstimatedFontMetrics
    >>> svg = Renderer.render(Metadata(
    ...     style=Style.FLAT, label="coverage", message="100%",
    ...     font=EstimatedFontMetrics()))

Text is drawn at 10x size under ``scale(.1)`` so that positions keep one
decimal of precision while staying integers in the markup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shield_maker.color import (
    ALIASES,
    NAMED_COLORS,
    Color,
    brightness,
    color_by_name,
    color_to_string,
)
from shield_maker.fonts import FontFamily, FontMetrics
from shield_maker.markup import Document, Node, render as render_document
from shield_maker.styles import Style, badger_for

logger = logging.getLogger(__name__)

DEFAULT_LABEL_COLOR = "grey"
DEFAULT_COLOR = "brightgreen"

HORIZONTAL_PADDING = 5
BRIGHTNESS_THRESHOLD = 0.69

_TEXT_SCALE = 10
_TEXT_BASELINE = 140
_SHADOW_BASELINE = 150
_FONT_SIZE = 110

_LIGHT_TEXT = ("#fff", "#010101")
_DARK_TEXT = ("#333", "#ccc")


@dataclass(frozen=True)
class Metadata:
    style: Style
    label: str
    message: str
    font: FontMetrics
    font_family: FontFamily = FontFamily.DEFAULT
    label_color: str | None = None
    color: str | None = None


def preferred_width(text: str, font: FontMetrics, font_family: FontFamily) -> int:
    """Measured width truncated to an integer, rounded up to odd.

    An odd width centers text on a whole pixel once padding is added.
    """
    if not text:
        return 0
    width = int(font.measure_width(text, font_family))
    return width + 1 if width % 2 == 0 else width


def text_colors(background: Color) -> tuple[str, str]:
    """Return (text fill, shadow fill) legible on ``background``."""
    if brightness(background) <= BRIGHTNESS_THRESHOLD:
        return _LIGHT_TEXT
    return _DARK_TEXT


def describe_colors() -> list[dict]:
    """One row per named color and alias, with the text color each gets."""
    rows: list[dict] = []
    entries = [(name, "") for name, _ in NAMED_COLORS] + list(ALIASES)
    for name, target in entries:
        color = color_by_name(name)
        rows.append({
            "name": name,
            "target": target,
            "hex": f"#{color.r:02x}{color.g:02x}{color.b:02x}",
            "rgba": color_to_string(color),
            "brightness": brightness(color),
            "text": text_colors(color)[0],
        })
    return rows


def _resolve(name: str | None, default: str) -> Color:
    color = color_by_name(name)
    if color is None:
        if name is not None:
            logger.debug("falling back to %s for color %r", default, name)
        color = color_by_name(default)
    return color


class Renderer:
    """Lays out one badge and assembles its document.

    Styles call back into ``make_clip_path_element``,
    ``make_background_group_element`` and ``make_foreground_group_element``.
    """

    def __init__(self, metadata: Metadata) -> None:
        self.metadata = metadata
        self.badger = badger_for(metadata.style)

        self.label_color = _resolve(metadata.label_color, DEFAULT_LABEL_COLOR)
        self.color = _resolve(metadata.color, DEFAULT_COLOR)

        self.label_width = preferred_width(metadata.label, metadata.font, metadata.font_family)
        self.message_width = preferred_width(metadata.message, metadata.font, metadata.font_family)

        has_label = bool(metadata.label)
        self.left_width = self.label_width + 2 * HORIZONTAL_PADDING if has_label else 0
        self.right_width = self.message_width + 2 * HORIZONTAL_PADDING
        self.width = self.left_width + self.right_width

        self.label_margin = 1
        self.message_margin = self.left_width - 1 if has_label else 0

    @property
    def height(self) -> float:
        return self.badger.height

    @property
    def accessible_text(self) -> str:
        if self.metadata.label:
            return f"{self.metadata.label}: {self.metadata.message}"
        return self.metadata.message

    def make_clip_path_element(self, rx: float) -> Node:
        """``<clipPath id="r">`` rounding the badge corners by ``rx``."""
        clip_path = Node.with_attributes("clipPath", [("id", "r")])
        clip_path.push_node(Node.with_attributes("rect", [
            ("width", self.width),
            ("height", self.height),
            ("rx", rx),
            ("fill", "#fff"),
        ]))
        return clip_path

    def make_background_group_element(
        self, with_gradient: bool, attributes: list[tuple[str, str]]
    ) -> Node:
        """Label and message boxes, plus the gradient overlay when asked."""
        group = Node.with_attributes("g", attributes)
        if self.left_width:
            group.push_node(Node.with_attributes("rect", [
                ("width", self.left_width),
                ("height", self.height),
                ("fill", color_to_string(self.label_color)),
            ]))
        group.push_node(Node.with_attributes("rect", [
            ("x", self.left_width),
            ("width", self.right_width),
            ("height", self.height),
            ("fill", color_to_string(self.color)),
        ]))
        if with_gradient:
            group.push_node(Node.with_attributes("rect", [
                ("width", self.width),
                ("height", self.height),
                ("fill", "url(#s)"),
            ]))
        return group

    def make_foreground_group_element(self) -> Node:
        group = Node.with_attributes("g", [
            ("fill", "#fff"),
            ("text-anchor", "middle"),
            ("font-family", self.metadata.font_family.value),
            ("text-rendering", "geometricPrecision"),
            ("font-size", _FONT_SIZE),
        ])
        group.push_nodes(self._make_text_elements(
            self.label_margin, self.metadata.label, self.label_width, self.label_color,
        ))
        group.push_nodes(self._make_text_elements(
            self.message_margin, self.metadata.message, self.message_width, self.color,
        ))
        return group

    def _make_text_elements(
        self, left_margin: int, content: str, text_width: int, background: Color
    ) -> list[Node]:
        if not content:
            return []
        text_fill, shadow_fill = text_colors(background)
        x = _TEXT_SCALE * (left_margin + 0.5 * text_width + HORIZONTAL_PADDING)
        text_length = _TEXT_SCALE * text_width
        y_offset = self.badger.vertical_margin

        nodes = []
        if self.badger.shadow:
            shadow = Node.with_attributes("text", [
                ("aria-hidden", "true"),
                ("x", x),
                ("y", _SHADOW_BASELINE + y_offset),
                ("fill", shadow_fill),
                ("fill-opacity", ".3"),
                ("transform", "scale(.1)"),
                ("textLength", text_length),
            ])
            shadow.push_text(content)
            nodes.append(shadow)
        text = Node.with_attributes("text", [
            ("x", x),
            ("y", _TEXT_BASELINE + y_offset),
            ("transform", "scale(.1)"),
            ("fill", text_fill),
            ("textLength", text_length),
        ])
        text.push_text(content)
        nodes.append(text)
        return nodes

    def make_document(self) -> Document:
        document = Document()
        svg = document.push_node_named("svg")
        svg.add_attrs([
            ("xmlns", "http://www.w3.org/2000/svg"),
            ("xmlns:xlink", "http://www.w3.org/1999/xlink"),
            ("width", self.width),
            ("height", self.height),
            ("role", "img"),
            ("aria-label", self.accessible_text),
        ])
        svg.push_node_named("title").push_text(self.accessible_text)
        svg.push_nodes(self.badger.render(self))
        return document

    @staticmethod
    def render(metadata: Metadata) -> str:
        """Render ``metadata`` to an SVG string."""
        return render_document(Renderer(metadata).make_document())


def render_badge(
    label: str,
    message: str,
    *,
    font: FontMetrics,
    style: Style | str = Style.FLAT,
    font_family: FontFamily = FontFamily.DEFAULT,
    label_color: str | None = None,
    color: str | None = None,
) -> str:
    """Keyword convenience around ``Renderer.render``."""
    if isinstance(style, str) and not isinstance(style, Style):
        style = Style.parse(style)
    return Renderer.render(Metadata(
        style=style,
        label=label,
        message=message,
        font=font,
        font_family=font_family,
        label_color=label_color,
        color=color,
    ))
