"""Overview screen - the live resource document.

The screen is a thin surface: it forwards user intents to the app's state
store, coordinator and orchestrator, and repaints whatever the presenter
renders.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from kubelens.exceptions import ContractViolation, UnknownResource
from kubelens.keyboard.navigation import OVERVIEW_SCREEN_BINDINGS
from kubelens.screens.overview.presenter import OverviewPresenter

if TYPE_CHECKING:
    from kubelens.app import KubelensApp

logger = logging.getLogger(__name__)


class OverviewScreen(Screen[None]):
    """Scrollable overview of every configured resource kind."""

    BINDINGS = OVERVIEW_SCREEN_BINDINGS

    DEFAULT_CSS = """
    #overview-scroll {
        height: 1fr;
    }

    #overview-document {
        width: auto;
        padding: 0 1;
    }
    """

    _SCROLL_MARGIN = 3

    def __init__(self, presenter: OverviewPresenter) -> None:
        super().__init__()
        self.presenter = presenter

    @property
    def lens_app(self) -> KubelensApp:
        return self.app  # type: ignore[return-value]

    def compose(self) -> ComposeResult:
        yield Header()
        with VerticalScroll(id="overview-scroll"):
            yield Static(id="overview-document")
        yield Footer()

    def on_mount(self) -> None:
        self.redraw()

    # =========================================================================
    # Rendering
    # =========================================================================

    def redraw(self) -> None:
        """Regenerate the document and repaint."""
        try:
            self.presenter.redraw()
        except ContractViolation:
            logger.exception("Overview redraw aborted")
            self.notify("Redraw failed, see log for details", severity="error")
            return
        self.repaint()

    def repaint(self) -> None:
        """Repaint the current document without regenerating it."""
        self.query_one("#overview-document", Static).update(self.presenter.to_rich_text())
        row = self.presenter.cursor_row()
        scroll = self.query_one("#overview-scroll", VerticalScroll)
        if row < scroll.scroll_y + self._SCROLL_MARGIN:
            scroll.scroll_to(y=max(row - self._SCROLL_MARGIN, 0), animate=False)
        elif row > scroll.scroll_y + scroll.size.height - self._SCROLL_MARGIN:
            scroll.scroll_to(y=row - scroll.size.height + self._SCROLL_MARGIN, animate=False)

    # =========================================================================
    # Actions
    # =========================================================================

    def action_cursor_down(self) -> None:
        self.presenter.move_cursor(1)
        self.repaint()

    def action_cursor_up(self) -> None:
        self.presenter.move_cursor(-1)
        self.repaint()

    def action_toggle_section(self) -> None:
        if self.presenter.toggle_section_at_cursor() is not None:
            self.repaint()

    def action_refresh(self) -> None:
        self.lens_app.refresh_resources()

    def action_mark(self) -> None:
        target = self.presenter.resource_at_cursor()
        if target is None:
            return
        kind, name = target
        try:
            self.lens_app.resource_state.lookup(kind, name)
        except UnknownResource as exc:
            self.notify(str(exc), severity="warning")
            return
        self.lens_app.resource_state.mark(kind, name)
        self.presenter.move_cursor(1)
        self.redraw()

    def action_unmark(self) -> None:
        target = self.presenter.resource_at_cursor()
        if target is None:
            return
        self.lens_app.resource_state.unmark(*target)
        self.redraw()

    def action_unmark_all(self) -> None:
        for kind in self.lens_app.settings.kinds:
            self.lens_app.resource_state.unmark_all(kind)
        self.redraw()

    def action_delete_marked(self) -> None:
        if not self.lens_app.delete_marked():
            self.notify("Nothing marked for deletion", severity="warning")

    def action_copy(self) -> None:
        payload = self.presenter.copy_payload_at_cursor()
        if payload is None:
            return
        self.app.copy_to_clipboard(payload)
        self.notify(f"Copied {payload}")

    def action_toggle_completed(self) -> None:
        settings = self.lens_app.settings
        settings.show_completed_pods = not settings.show_completed_pods
        state = "shown" if settings.show_completed_pods else "hidden"
        self.notify(f"Completed pods {state}")
        self.redraw()


__all__ = ["OverviewScreen"]
