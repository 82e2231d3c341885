"""UI-related constants for the rendered overview document."""

from typing import Final

from kubelens.constants.enums import Face

# ============================================================================
# Attribute keys attached to rendered spans
# ============================================================================

ATTR_FACE: Final = "face"
ATTR_HEADING: Final = "heading"
ATTR_NAV: Final = "nav"
ATTR_COPY: Final = "copy"
ATTR_DELETE_MARK: Final = "delete-mark"

# ============================================================================
# Layout
# ============================================================================

INDENT_WIDTH: Final = 2
DETAIL_LABEL_WIDTH: Final = 14

# ============================================================================
# Face -> rich style
# ============================================================================

FACE_STYLES: Final[dict[Face, str]] = {
    Face.HEADING: "bold",
    Face.SECTION_HEADING: "bold underline",
    Face.HEADER: "bold cyan",
    Face.DIMMED: "dim",
    Face.PROGRESS: "italic yellow",
    Face.PENDING_DELETION: "strike dim red",
    Face.DELETE_MARK: "bold red",
    Face.SUCCESS: "green",
    Face.WARNING: "yellow",
    Face.ERROR: "bold red",
}

CURSOR_STYLE: Final = "reverse"

__all__ = [
    "ATTR_COPY",
    "ATTR_DELETE_MARK",
    "ATTR_FACE",
    "ATTR_HEADING",
    "ATTR_NAV",
    "CURSOR_STYLE",
    "DETAIL_LABEL_WIDTH",
    "FACE_STYLES",
    "INDENT_WIDTH",
]
