"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Overview screen
# ============================================================================

OVERVIEW_SCREEN_BINDINGS: list[Binding] = [
    Binding("j,down", "cursor_down", "Down", show=False),
    Binding("k,up", "cursor_up", "Up", show=False),
    Binding("tab", "toggle_section", "Fold", priority=True),
    Binding("g", "refresh", "Refresh"),
    Binding("D", "mark", "Mark"),
    Binding("u", "unmark", "Unmark"),
    Binding("U", "unmark_all", "Unmark all", show=False),
    Binding("x", "delete_marked", "Delete marked"),
    Binding("w", "copy", "Copy name"),
    Binding("c", "toggle_completed", "Completed pods"),
]

__all__ = [
    "OVERVIEW_SCREEN_BINDINGS",
]
