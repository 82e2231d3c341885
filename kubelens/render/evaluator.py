"""Evaluator turning an overview tree into a ``Document``.

Evaluation is recursive and order preserving. Each node only appends to the
document; no node reads what its siblings produced. Attributes attached by an
enclosing node take precedence over attributes of the same key set further
in, so a pending-deletion style applied to a whole line wins over the dimmed
columns inside it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from kubelens.constants.enums import Face
from kubelens.constants.ui import (
    ATTR_COPY,
    ATTR_DELETE_MARK,
    ATTR_FACE,
    ATTR_HEADING,
    ATTR_NAV,
)
from kubelens.exceptions import ContractViolation
from kubelens.render.document import Document, DocumentLine, SectionMemory, Span
from kubelens.render.nodes import (
    CopyProp,
    Fragment,
    Heading,
    Indent,
    KeyValue,
    Line,
    LineContent,
    MarkForDelete,
    NavProp,
    Node,
    Padding,
    Propertize,
    Section,
)

logger = logging.getLogger(__name__)

_EMPTY_ATTRS: Mapping[str, Any] = MappingProxyType({})

DELETE_MARK_ATTRS: Mapping[str, Any] = MappingProxyType(
    {ATTR_FACE: Face.DELETE_MARK, ATTR_DELETE_MARK: True}
)


def _fragments(content: LineContent, default_attrs: Mapping[str, Any]) -> list[Fragment]:
    if isinstance(content, str):
        return [Fragment(content, dict(default_attrs))]
    if isinstance(content, Fragment):
        return [content]
    if isinstance(content, Sequence):
        fragments = list(content)
        if all(isinstance(fragment, Fragment) for fragment in fragments):
            return fragments
    raise ContractViolation(f"Invalid line content: {content!r}")


def _emit(
    document: Document,
    content: LineContent,
    depth: int,
    context: Mapping[str, Any],
    default_attrs: Mapping[str, Any] = _EMPTY_ATTRS,
) -> None:
    text_parts: list[str] = []
    spans: list[Span] = []
    column = 0
    for fragment in _fragments(content, default_attrs):
        attrs = {**fragment.attrs, **context}
        end = column + len(fragment.text)
        if attrs and end > column:
            spans.append(Span(column, end, attrs))
        text_parts.append(fragment.text)
        column = end
    document.append_line(DocumentLine("".join(text_parts), depth, spans))


def _evaluate_all(
    children: Iterable[Node],
    document: Document,
    depth: int,
    context: Mapping[str, Any],
) -> None:
    for child in children:
        evaluate(child, document, depth, context)


def evaluate(
    node: Node,
    document: Document,
    depth: int = 0,
    context: Mapping[str, Any] = _EMPTY_ATTRS,
) -> None:
    """Append the visual representation of ``node`` to ``document``.

    Args:
        node: Tree node from the closed vocabulary in ``kubelens.render.nodes``.
        document: Document being built.
        depth: Current indentation depth.
        context: Attributes inherited from enclosing nodes.

    Raises:
        ContractViolation: If the tree contains an unknown node, a misplaced
            heading or duplicate sibling section identities.
    """
    if isinstance(node, Line):
        _emit(document, node.text, depth, context)
    elif isinstance(node, Heading):
        if document.current_section.has_output:
            raise ContractViolation(
                f"Heading must be the first child of section "
                f"{document.current_section.path!r}"
            )
        _emit(
            document,
            node.text,
            depth,
            {**context, ATTR_HEADING: True},
            {ATTR_FACE: Face.HEADING},
        )
    elif isinstance(node, Section):
        document.open_section(node.identity, node.hidden)
        _evaluate_all(node.children, document, depth, context)
        document.close_section()
    elif isinstance(node, Indent):
        _evaluate_all(node.children, document, depth + 1, context)
    elif isinstance(node, KeyValue):
        label = f"{node.key + ':':<{node.width}}"
        _emit(
            document,
            (Fragment(label, {ATTR_FACE: Face.HEADER}), Fragment(node.value)),
            depth,
            context,
        )
    elif isinstance(node, Padding):
        document.append_line(DocumentLine("", depth))
    elif isinstance(node, Propertize):
        _evaluate_all(node.children, document, depth, {**node.attrs, **context})
    elif isinstance(node, NavProp):
        _evaluate_all(node.children, document, depth, {ATTR_NAV: dict(node.props), **context})
    elif isinstance(node, CopyProp):
        _evaluate_all(node.children, document, depth, {ATTR_COPY: node.value, **context})
    elif isinstance(node, MarkForDelete):
        _evaluate_all(node.children, document, depth, {**DELETE_MARK_ATTRS, **context})
    else:
        raise ContractViolation(f"Unknown tree node: {node!r}")


def render_document(nodes: Iterable[Node], memory: SectionMemory | None = None) -> Document:
    """Evaluate top-level nodes into a fresh document.

    Args:
        nodes: Top-level tree nodes, usually one section per resource kind.
        memory: Collapse flags remembered from earlier redraws.

    Returns:
        The sealed document.
    """
    document = Document(memory)
    _evaluate_all(nodes, document, 0, _EMPTY_ATTRS)
    return document.finish()


__all__ = [
    "DELETE_MARK_ATTRS",
    "evaluate",
    "render_document",
]
