"""Shared rendering for resource collections.

Every kind renders the same three-way shape:

- never fetched: heading without a count, the column header and a
  ``Fetching...`` progress line
- fetched, nothing visible: ``Title (0)`` heading and a dimmed ``None.``
- items: ``Title (N)`` heading, the column header, then one collapsible
  section per item holding a summary line and aligned detail lines

A kind only describes its columns and detail pairs through ``ResourceView``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

from kubelens.constants.enums import Face, ResourceKind
from kubelens.constants.ui import ATTR_FACE, DETAIL_LABEL_WIDTH
from kubelens.constants.values import FETCHING_TEXT, NONE_TEXT
from kubelens.models.state.resource_state import (
    ResourceItem,
    StateSnapshot,
    resource_name,
)
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
    Propertize,
    Section,
    styled,
)
from kubelens.utils.formatting import (
    ellipsize,
    format_utc_timestamp,
    parse_utc_timestamp,
    time_diff_string,
)

CellValue = Callable[[ResourceItem, StateSnapshot], str]
CellFace = Callable[[ResourceItem], "Face | None"]
DetailPairs = Callable[[ResourceItem], Sequence[tuple[str, "str | None"]]]


@dataclass(frozen=True)
class Column:
    """One column of a summary line."""

    header: str
    width: int
    value: CellValue
    align: Literal["left", "right"] = "right"
    face: Face | None = Face.DIMMED
    face_for: CellFace | None = None

    def pad(self, text: str) -> str:
        text = ellipsize(text, self.width)
        if self.align == "left":
            return f"{text:<{self.width}}"
        return f"{text:>{self.width}}"

    def cell_face(self, item: ResourceItem) -> Face | None:
        if self.face_for is not None:
            return self.face_for(item)
        return self.face


@dataclass(frozen=True)
class ResourceView:
    """How one resource kind is rendered."""

    kind: ResourceKind
    title: str
    columns: tuple[Column, ...]
    details: DetailPairs
    visible: Callable[[ResourceItem, StateSnapshot], bool] | None = None

    def visible_items(self, collection: Sequence[ResourceItem], snapshot: StateSnapshot) -> list[ResourceItem]:
        if self.visible is None:
            return list(collection)
        return [item for item in collection if self.visible(item, snapshot)]


# =============================================================================
# Item field helpers
# =============================================================================


def metadata(item: ResourceItem) -> dict[str, Any]:
    return item.get("metadata") or {}


def spec(item: ResourceItem) -> dict[str, Any]:
    return item.get("spec") or {}


def status(item: ResourceItem) -> dict[str, Any]:
    return item.get("status") or {}


def created_at(item: ResourceItem) -> datetime | None:
    """Creation time of an item, or None when missing or malformed."""
    try:
        return parse_utc_timestamp(metadata(item).get("creationTimestamp", ""))
    except ValueError:
        return None


def item_age(item: ResourceItem, snapshot: StateSnapshot) -> str:
    """Age relative to the redraw's reference clock."""
    created = created_at(item)
    if created is None:
        return "?"
    return time_diff_string(created, snapshot.now)


def name_column(width: int) -> Column:
    return Column(
        "Name",
        width,
        lambda item, _snapshot: resource_name(item),
        align="left",
        face=None,
    )


AGE_COLUMN = Column("Age", 6, item_age)


def common_details(item: ResourceItem) -> list[tuple[str, str | None]]:
    """Namespace and creation time, shown first for every kind."""
    created = created_at(item)
    return [
        ("Namespace", metadata(item).get("namespace")),
        ("Created", format_utc_timestamp(created) if created else None),
    ]


def join_labels(labels: dict[str, Any] | None) -> str | None:
    if not labels:
        return None
    return ", ".join(f"{key}={value}" for key, value in labels.items())


# =============================================================================
# Rendering
# =============================================================================


def column_header(view: ResourceView) -> Line:
    text = " ".join(column.pad(column.header) for column in view.columns)
    return Line(styled(text, Face.SECTION_HEADING))


def summary_line(view: ResourceView, item: ResourceItem, snapshot: StateSnapshot) -> Line:
    fragments: list[Fragment] = []
    for index, column in enumerate(view.columns):
        if index:
            fragments.append(Fragment(" "))
        text = column.pad(column.value(item, snapshot))
        face = column.cell_face(item)
        fragments.append(Fragment(text, {ATTR_FACE: face} if face else {}))
    return Line(tuple(fragments))


def render_item(view: ResourceView, item: ResourceItem, snapshot: StateSnapshot) -> Section:
    """Collapsible section for one item: summary line plus details."""
    name = resource_name(item)
    line: Node = summary_line(view, item, snapshot)
    if snapshot.is_pending_deletion(view.kind, name):
        line = Propertize({ATTR_FACE: Face.PENDING_DELETION}, (line,))
    elif snapshot.is_marked(view.kind, name):
        line = MarkForDelete((line,))

    details = tuple(
        KeyValue(DETAIL_LABEL_WIDTH, key, value)
        for key, value in view.details(item)
        if value is not None
    )
    return Section(
        (view.kind.value, name),
        (
            NavProp(
                {"kind": view.kind.value, "name": name},
                (CopyProp(name, (line,)), Indent(details)),
            ),
        ),
    )


def render_collection(view: ResourceView, snapshot: StateSnapshot) -> Section:
    """Render a kind's collection from the snapshot."""
    identity = f"{view.kind.value}-container"
    collection = snapshot.collection(view.kind)

    if collection is None:
        return Section(
            identity,
            (
                Heading(view.title),
                Indent((column_header(view), Line(styled(FETCHING_TEXT, Face.PROGRESS)))),
            ),
        )

    items = view.visible_items(collection, snapshot)
    heading = Heading((styled(view.title, Face.HEADING), Fragment(f" ({len(items)})")))
    if not items:
        return Section(identity, (heading, Indent((Line(styled(NONE_TEXT, Face.DIMMED)),))))

    return Section(
        identity,
        (
            heading,
            Indent(
                (
                    column_header(view),
                    *(render_item(view, item, snapshot) for item in items),
                )
            ),
        ),
    )


__all__ = [
    "AGE_COLUMN",
    "Column",
    "ResourceView",
    "column_header",
    "common_details",
    "created_at",
    "item_age",
    "join_labels",
    "metadata",
    "name_column",
    "render_collection",
    "render_item",
    "spec",
    "status",
    "summary_line",
]
