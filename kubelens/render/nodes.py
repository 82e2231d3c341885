"""Declarative tree vocabulary for the overview document.

Renderers describe what should be on screen as a tree of these nodes and the
evaluator turns that tree into a ``Document``. The vocabulary is closed: the
evaluator rejects any value that is not one of the classes below.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from kubelens.constants.enums import Face
from kubelens.constants.ui import ATTR_FACE


@dataclass(frozen=True)
class Fragment:
    """A run of text carrying its own attributes inside a single line."""

    text: str
    attrs: Mapping[str, Any] = field(default_factory=dict)


def styled(text: str, face: Face) -> Fragment:
    """Build a fragment rendered with the given face."""
    return Fragment(text, {ATTR_FACE: face})


LineContent = Union[str, Fragment, Sequence[Fragment]]


@dataclass(frozen=True)
class Heading:
    """Section heading line; must be the first thing its section emits."""

    text: LineContent


@dataclass(frozen=True)
class Section:
    """Collapsible section with a stable identity.

    ``hidden`` is only the default used when no collapse state was recorded
    for this identity in an earlier redraw.
    """

    identity: Hashable
    children: tuple[Node, ...] = ()
    hidden: bool = False


@dataclass(frozen=True)
class Indent:
    """Evaluate children one nesting level deeper."""

    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Line:
    """A single line of text at the current indentation."""

    text: LineContent


@dataclass(frozen=True)
class KeyValue:
    """Aligned ``key: value`` detail line with the key padded to ``width``."""

    width: int
    key: str
    value: str


@dataclass(frozen=True)
class Padding:
    """A blank line."""


@dataclass(frozen=True)
class Propertize:
    """Attach attributes to every character produced by the children."""

    attrs: Mapping[str, Any]
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class NavProp:
    """Attach navigation metadata without changing visual style."""

    props: Mapping[str, Any]
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class CopyProp:
    """Attach a clipboard payload to the children's output."""

    value: str
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class MarkForDelete:
    """Render children with the delete-mark style."""

    children: tuple[Node, ...] = ()


Node = Union[
    Heading,
    Section,
    Indent,
    Line,
    KeyValue,
    Padding,
    Propertize,
    NavProp,
    CopyProp,
    MarkForDelete,
]

__all__ = [
    "CopyProp",
    "Fragment",
    "Heading",
    "Indent",
    "KeyValue",
    "Line",
    "LineContent",
    "MarkForDelete",
    "NavProp",
    "Node",
    "Padding",
    "Propertize",
    "Section",
    "styled",
]
