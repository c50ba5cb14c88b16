"""Badge styles: flat, flat-square and plastic.

Each style is a stateless strategy. The compositor owns layout and text; a
style only picks its height, text offset and shadow, and decides which
decorations (gradient, clip path, background attributes) wrap the shared
background and foreground groups.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from shield_maker.markup import Node

if TYPE_CHECKING:
    from shield_maker.badge import Renderer


class Style(str, Enum):
    FLAT = "flat"
    FLAT_SQUARE = "flat-square"
    PLASTIC = "plastic"

    @classmethod
    def parse(cls, value: str) -> Style:
        """Accept ``flat-square``, ``flat_square`` or ``FlatSquare``."""
        key = value.strip().lower().replace("_", "-")
        if key == "flatsquare":
            key = "flat-square"
        return cls(key)


@dataclass(frozen=True)
class GradientStop:
    offset: str
    stop_color: str
    stop_opacity: str

    def into_attributes(self, node: Node) -> None:
        node.add_attrs([
            ("offset", self.offset),
            ("stop-color", self.stop_color),
            ("stop-opacity", self.stop_opacity),
        ])


def make_gradient_element(stops: list[GradientStop]) -> Node:
    """Vertical ``<linearGradient id="s">`` used by the shadowed styles."""
    def build(node: Node) -> None:
        node.add_attrs([("id", "s"), ("x2", "0"), ("y2", "100%")])
        for stop in stops:
            node.push_node_named("stop", stop.into_attributes)

    return Node.with_name_and("linearGradient", build)


class Badger(ABC):
    vertical_margin: float = 0.0
    height: float = 20.0
    shadow: bool = True

    @abstractmethod
    def render(self, parent: Renderer) -> list[Node]:
        """Style fragments in document order."""


class Flat(Badger):
    vertical_margin = 0.0
    height = 20.0
    shadow = True

    def render(self, parent: Renderer) -> list[Node]:
        gradient = make_gradient_element([
            GradientStop("0", "#bbb", ".1"),
            GradientStop("1", "#000", ".1"),
        ])
        return [
            gradient,
            parent.make_clip_path_element(3.0),
            parent.make_background_group_element(True, [("clip-path", "url(#r)")]),
            parent.make_foreground_group_element(),
        ]


class FlatSquare(Badger):
    vertical_margin = 0.0
    height = 20.0
    shadow = False

    def render(self, parent: Renderer) -> list[Node]:
        return [
            parent.make_background_group_element(False, [("shape-rendering", "crispEdges")]),
            parent.make_foreground_group_element(),
        ]


class Plastic(Badger):
    vertical_margin = -10.0
    height = 18.0
    shadow = True

    def render(self, parent: Renderer) -> list[Node]:
        gradient = make_gradient_element([
            GradientStop("0", "#fff", ".7"),
            GradientStop(".1", "#aaa", ".1"),
            GradientStop(".9", "#000", ".3"),
            GradientStop("1", "#000", ".5"),
        ])
        return [
            gradient,
            parent.make_clip_path_element(4.0),
            parent.make_background_group_element(True, [("clip-path", "url(#r)")]),
            parent.make_foreground_group_element(),
        ]


_BADGERS: dict[Style, Badger] = {
    Style.FLAT: Flat(),
    Style.FLAT_SQUARE: FlatSquare(),
    Style.PLASTIC: Plastic(),
}


def badger_for(style: Style) -> Badger:
    """Return the strategy for a style."""
    return _BADGERS[Style(style)]
