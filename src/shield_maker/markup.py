"""Minimal XML document model and serializer used to build badge SVGs.

Output is a single line with no inserted whitespace. Attribute and child
order is exactly insertion order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Union
from xml.sax.saxutils import escape

_ENTITIES = {'"': "&quot;", "'": "&apos;"}


@dataclass(frozen=True)
class Text:
    """Character data, escaped on output."""
    content: str


@dataclass(frozen=True)
class Raw:
    """Pre-formed markup, written verbatim."""
    content: str


Element = Union[Text, Raw, "Node"]


def format_value(value: Any) -> str:
    """Format an attribute value: ``20.0`` -> ``"20"``, ``0.5`` -> ``"0.5"``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters."""
    return escape(text, _ENTITIES)


class Pusher(ABC):
    """Child-appending helpers shared by Node and Document."""

    @abstractmethod
    def push_element(self, element: Element) -> None:
        ...

    def push_text(self, text: str) -> None:
        self.push_element(Text(text))

    def push_raw(self, content: str) -> None:
        self.push_element(Raw(content))

    def push_node(self, node: Node) -> None:
        self.push_element(node)

    def push_nodes(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.push_node(node)

    def push_node_and(self, node: Node, build: Callable[[Node], None]) -> Node:
        build(node)
        self.push_node(node)
        return node

    def push_node_named(self, name: str, build: Callable[[Node], None] | None = None) -> Node:
        node = Node.with_name(name)
        if build is not None:
            build(node)
        self.push_node(node)
        return node


class Node(Pusher):
    """An element with ordered attributes and optional children.

    ``content is None`` renders ``<name/>``; an empty list renders
    ``<name></name>``.
    """

    def __init__(
        self,
        name: str,
        attributes: list[tuple[str, str]] | None = None,
        content: list[Element] | None = None,
    ) -> None:
        self.name = name
        self.attributes = attributes
        self.content = content

    def __repr__(self) -> str:
        return f"Node({self.name!r}, attributes={self.attributes!r}, content={self.content!r})"

    @classmethod
    def with_name(cls, name: str) -> Node:
        return cls(name)

    @classmethod
    def with_attributes(cls, name: str, attributes: Iterable[tuple[str, Any]]) -> Node:
        node = cls(name)
        node.add_attrs(attributes)
        return node

    @classmethod
    def with_name_and(cls, name: str, build: Callable[[Node], None]) -> Node:
        node = cls(name)
        build(node)
        return node

    def add_attr(self, name: str, value: Any) -> None:
        if self.attributes is None:
            self.attributes = []
        self.attributes.append((name, format_value(value)))

    def add_attrs(self, attributes: Iterable[tuple[str, Any]]) -> None:
        for name, value in attributes:
            self.add_attr(name, value)

    def push_element(self, element: Element) -> None:
        if self.content is None:
            self.content = []
        self.content.append(element)


class Document(Pusher):
    """Root container of top-level elements."""

    def __init__(self) -> None:
        self.elements: list[Element] = []

    def push_element(self, element: Element) -> None:
        self.elements.append(element)


def _write_node(out: list[str], node: Node) -> None:
    out.append(f"<{node.name}")
    for name, value in node.attributes or ():
        out.append(f' {name}="{escape_xml(value)}"')
    if node.content is None:
        out.append("/>")
        return
    out.append(">")
    for child in node.content:
        _write_element(out, child)
    out.append(f"</{node.name}>")


def _write_element(out: list[str], element: Element) -> None:
    if isinstance(element, Text):
        out.append(escape_xml(element.content))
    elif isinstance(element, Raw):
        out.append(element.content)
    else:
        _write_node(out, element)


def render(document: Document) -> str:
    """Serialize a document to a string."""
    out: list[str] = []
    for element in document.elements:
        _write_element(out, element)
    return "".join(out)
