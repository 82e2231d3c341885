"""Overview presenter - redraw, cursor and lookup logic for the overview screen.

The presenter owns the ``SectionMemory`` shared by every redraw and keeps the
cursor anchored to a section identity, so a full regeneration of the document
does not move the selection or reopen collapsed sections.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from rich.text import Text

from kubelens.constants.enums import ResourceKind
from kubelens.constants.ui import ATTR_COPY, ATTR_FACE, ATTR_NAV, CURSOR_STYLE, FACE_STYLES
from kubelens.models.state.app_settings import AppSettings
from kubelens.models.state.resource_state import ResourceState
from kubelens.render.document import Document, SectionMemory, SectionPath
from kubelens.render.evaluator import render_document
from kubelens.renderers.overview import render_overview

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OverviewPresenter:
    """Presenter for OverviewScreen - rendering and cursor handling."""

    def __init__(
        self,
        state: ResourceState,
        settings: AppSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the presenter.

        Args:
            state: Resource state store to render.
            settings: Application settings (kinds shown, completed pods flag).
            clock: Source of the per-redraw reference time.
        """
        self._state = state
        self._settings = settings
        self._clock = clock
        self.memory = SectionMemory()
        self.document: Document | None = None
        self.cursor = 0

    # =========================================================================
    # Redraw
    # =========================================================================

    def redraw(self) -> Document:
        """Regenerate the document from the current state.

        Raises:
            ContractViolation: If a renderer produced an invalid tree. The
                previous document is kept in that case.
        """
        snapshot = self._state.snapshot(
            self._clock(), show_completed_pods=self._settings.show_completed_pods
        )
        anchor = self._cursor_anchor()
        document = render_document(
            render_overview(snapshot, self._settings.kinds), self.memory
        )
        self.document = document
        self._restore_cursor(document, anchor)
        return document

    def _cursor_anchor(self) -> tuple[SectionPath, int] | None:
        if self.document is None:
            return None
        section = self.document.section_at(self.cursor)
        if section is None:
            return None
        return section.path, self.cursor - section.start

    def _restore_cursor(
        self, document: Document, anchor: tuple[SectionPath, int] | None
    ) -> None:
        last = max(len(document) - 1, 0)
        if anchor is not None:
            path, offset = anchor
            section = document.find_section(path)
            if section is not None:
                self.cursor = min(section.start + offset, max(section.end - 1, section.start))
        self.cursor = min(self.cursor, last)
        self._snap_to_visible()

    def _snap_to_visible(self) -> None:
        if self.document is None or self.document.is_visible(self.cursor):
            return
        section = self.document.section_at(self.cursor)
        while section is not None and not self.document.is_visible(section.start):
            section = section.parent
        self.cursor = section.start if section is not None else 0

    # =========================================================================
    # Cursor
    # =========================================================================

    def visible_lines(self) -> list[int]:
        return self.document.visible_lines() if self.document else []

    def cursor_row(self) -> int:
        """Row of the cursor among visible lines."""
        visible = self.visible_lines()
        return visible.index(self.cursor) if self.cursor in visible else 0

    def move_cursor(self, delta: int) -> None:
        visible = self.visible_lines()
        if not visible:
            return
        row = max(0, min(self.cursor_row() + delta, len(visible) - 1))
        self.cursor = visible[row]

    def toggle_section_at_cursor(self) -> bool | None:
        """Collapse or expand the innermost section under the cursor."""
        if self.document is None:
            return None
        section = self.document.section_at(self.cursor)
        if section is None:
            return None
        hidden = self.document.toggle_section(section.path)
        if hidden:
            self.cursor = section.start
        return hidden

    def resource_at_cursor(self) -> tuple[ResourceKind, str] | None:
        """Resource identified by the navigation metadata under the cursor."""
        if self.document is None:
            return None
        nav = self.document.attrs_at(self.cursor).get(ATTR_NAV)
        if not nav:
            return None
        return ResourceKind(nav["kind"]), nav["name"]

    def copy_payload_at_cursor(self) -> str | None:
        if self.document is None:
            return None
        return self.document.attrs_at(self.cursor).get(ATTR_COPY)

    # =========================================================================
    # Output
    # =========================================================================

    def to_rich_text(self) -> Text:
        """Visible lines as rich Text, faces mapped to styles."""
        if self.document is None:
            return Text()
        lines = []
        for index in self.visible_lines():
            line = self.document.lines[index]
            offset = len(line.prefix)
            text = Text(line.rendered)
            for span in line.spans:
                style = _face_style(span.attrs)
                if style:
                    text.stylize(style, offset + span.start, offset + span.end)
            if index == self.cursor:
                text.stylize(CURSOR_STYLE)
            lines.append(text)
        return Text("\n").join(lines)


def _face_style(attrs: dict[str, Any] | Any) -> str | None:
    face = attrs.get(ATTR_FACE)
    return FACE_STYLES.get(face) if face is not None else None


__all__ = ["OverviewPresenter", "utc_now"]
