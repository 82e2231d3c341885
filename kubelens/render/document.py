"""Append-only document produced by evaluating an overview tree.

The document is rebuilt from scratch on every redraw. Transient view state
(which sections are collapsed) lives in ``SectionMemory`` and is keyed by
section identity paths, so it survives the rebuild even though every line
and section object is new.

Attributes are kept in a side-table of spans per line instead of being baked
into a styling primitive; the terminal surface decides how a face looks.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from kubelens.constants.ui import INDENT_WIDTH
from kubelens.exceptions import ContractViolation

logger = logging.getLogger(__name__)

SectionPath = tuple[Hashable, ...]


@dataclass(frozen=True)
class Span:
    """Attribute bag covering ``text[start:end]`` of a line."""

    start: int
    end: int
    attrs: Mapping[str, Any]


@dataclass
class DocumentLine:
    """A rendered line: content, nesting depth and attribute spans."""

    text: str
    depth: int = 0
    spans: list[Span] = field(default_factory=list)

    @property
    def prefix(self) -> str:
        """Indentation emitted before the content."""
        if not self.text:
            return ""
        return " " * (INDENT_WIDTH * self.depth)

    @property
    def rendered(self) -> str:
        """Full line as displayed, indentation included."""
        return self.prefix + self.text

    def attrs_at(self, column: int) -> dict[str, Any]:
        """Merged attributes covering a content column."""
        merged: dict[str, Any] = {}
        for span in self.spans:
            if span.start <= column < span.end:
                merged.update(span.attrs)
        return merged

    def line_attrs(self) -> dict[str, Any]:
        """Merged attributes of every span on the line, leftmost first."""
        merged: dict[str, Any] = {}
        for span in reversed(self.spans):
            merged.update(span.attrs)
        return merged


@dataclass(eq=False)
class SectionNode:
    """A collapsible region of the document."""

    identity: Hashable
    path: SectionPath
    hidden: bool
    start: int
    end: int = -1
    parent: SectionNode | None = None
    children: list[SectionNode] = field(default_factory=list)
    has_output: bool = False

    def contains(self, index: int) -> bool:
        """Return True when the line index falls inside this section."""
        return self.start <= index < self.end

    def walk(self) -> Iterator[SectionNode]:
        """Yield this section and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


class SectionMemory:
    """Remembered collapse flags keyed by section identity path."""

    def __init__(self) -> None:
        self._hidden: dict[SectionPath, bool] = {}

    def get(self, path: SectionPath, default: bool = False) -> bool:
        """Return the remembered flag, or ``default`` when never recorded."""
        return self._hidden.get(path, default)

    def remember(self, path: SectionPath, hidden: bool) -> None:
        """Record the collapse flag for a section path."""
        self._hidden[path] = hidden

    def clear(self) -> None:
        """Forget every recorded flag."""
        self._hidden.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._hidden

    def __len__(self) -> int:
        return len(self._hidden)


class Document:
    """Lines plus the section tree, built by the evaluator.

    Builder operations (``append_line``, ``open_section``, ``close_section``)
    are only used while evaluating. Query operations are used by the surface
    after the tree has been fully evaluated.
    """

    def __init__(self, memory: SectionMemory | None = None) -> None:
        self.memory = memory if memory is not None else SectionMemory()
        self.lines: list[DocumentLine] = []
        self.root = SectionNode(identity=None, path=(), hidden=False, start=0)
        self._stack: list[SectionNode] = [self.root]

    # =========================================================================
    # Builder
    # =========================================================================

    @property
    def current_section(self) -> SectionNode:
        """Innermost open section."""
        return self._stack[-1]

    def append_line(self, line: DocumentLine) -> int:
        """Append a line and return its index."""
        self.lines.append(line)
        for section in self._stack:
            section.has_output = True
        return len(self.lines) - 1

    def open_section(self, identity: Hashable, default_hidden: bool = False) -> SectionNode:
        """Open a child section of the current one.

        Raises:
            ContractViolation: If a sibling already uses the same identity.
        """
        parent = self.current_section
        if any(child.identity == identity for child in parent.children):
            raise ContractViolation(
                f"Duplicate section identity {identity!r} under {parent.path!r}"
            )
        path = (*parent.path, identity)
        section = SectionNode(
            identity=identity,
            path=path,
            hidden=self.memory.get(path, default_hidden),
            start=len(self.lines),
            parent=parent,
        )
        parent.children.append(section)
        self._stack.append(section)
        return section

    def close_section(self) -> SectionNode:
        """Close the innermost open section."""
        if len(self._stack) == 1:
            raise ContractViolation("close_section called with no open section")
        section = self._stack.pop()
        section.end = len(self.lines)
        return section

    def finish(self) -> Document:
        """Seal the document after evaluation."""
        if len(self._stack) != 1:
            raise ContractViolation(
                f"Unclosed section {self.current_section.path!r} at end of document"
            )
        self.root.end = len(self.lines)
        return self

    # =========================================================================
    # Queries
    # =========================================================================

    def sections(self) -> Iterator[SectionNode]:
        """All sections in document order, root excluded."""
        for child in self.root.children:
            yield from child.walk()

    def find_section(self, path: SectionPath) -> SectionNode | None:
        """Find a section by identity path."""
        for section in self.sections():
            if section.path == path:
                return section
        return None

    def section_at(self, index: int) -> SectionNode | None:
        """Innermost section containing the line index."""
        found: SectionNode | None = None
        children = self.root.children
        while True:
            for child in children:
                if child.contains(index):
                    found = child
                    children = child.children
                    break
            else:
                return found

    def is_visible(self, index: int) -> bool:
        """A line is hidden when a collapsed ancestor section contains it.

        The first line of a collapsed section stays visible as its summary.
        """
        section = self.section_at(index)
        while section is not None:
            if section.hidden and index != section.start:
                return False
            section = section.parent
        return True

    def visible_lines(self) -> list[int]:
        """Indices of lines shown with the current collapse flags."""
        hidden: set[int] = set()
        for section in self.sections():
            if section.hidden:
                hidden.update(range(section.start + 1, section.end))
        return [index for index in range(len(self.lines)) if index not in hidden]

    def set_hidden(self, path: SectionPath, hidden: bool) -> bool:
        """Collapse or expand a section and remember the choice."""
        section = self.find_section(path)
        if section is None:
            logger.debug("No section at %r to update", path)
            return False
        section.hidden = hidden
        self.memory.remember(path, hidden)
        return True

    def toggle_section(self, path: SectionPath) -> bool | None:
        """Flip a section's collapse flag; returns the new flag."""
        section = self.find_section(path)
        if section is None:
            return None
        self.set_hidden(path, not section.hidden)
        return section.hidden

    def attrs_at(self, index: int) -> dict[str, Any]:
        """Merged attribute bag for a line, used for navigation lookups."""
        if not 0 <= index < len(self.lines):
            return {}
        return self.lines[index].line_attrs()

    def text(self, visible_only: bool = False) -> str:
        """Plain-text rendering of the document."""
        indices = self.visible_lines() if visible_only else range(len(self.lines))
        return "\n".join(self.lines[index].rendered for index in indices)

    def __len__(self) -> int:
        return len(self.lines)


__all__ = [
    "Document",
    "DocumentLine",
    "SectionMemory",
    "SectionNode",
    "SectionPath",
    "Span",
]
