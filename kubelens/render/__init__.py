"""Declarative rendering engine.

Renderers build trees from ``kubelens.render.nodes``; ``render_document``
evaluates them into a ``Document`` whose section collapse flags are restored
from a ``SectionMemory`` shared across redraws.
"""

from kubelens.render.document import (
    Document,
    DocumentLine,
    SectionMemory,
    SectionNode,
    Span,
)
from kubelens.render.evaluator import evaluate, render_document
from kubelens.render.nodes import (
    CopyProp,
    Fragment,
    Heading,
    Indent,
    KeyValue,
    Line,
    MarkForDelete,
    NavProp,
    Node,
    Padding,
    Propertize,
    Section,
    styled,
)

__all__ = [
    "CopyProp",
    "Document",
    "DocumentLine",
    "Fragment",
    "Heading",
    "Indent",
    "KeyValue",
    "Line",
    "MarkForDelete",
    "NavProp",
    "Node",
    "Padding",
    "Propertize",
    "Section",
    "SectionMemory",
    "SectionNode",
    "Span",
    "evaluate",
    "render_document",
    "styled",
]
