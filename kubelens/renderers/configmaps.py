"""ConfigMaps and Secrets renderers; both list their data keys."""

from __future__ import annotations

from kubelens.constants.enums import ResourceKind
from kubelens.models.state.resource_state import ResourceItem, StateSnapshot
from kubelens.render.nodes import Section
from kubelens.renderers.base import (
    AGE_COLUMN,
    Column,
    ResourceView,
    common_details,
    name_column,
    render_collection,
)


def data_keys(item: ResourceItem) -> list[str]:
    keys = list((item.get("data") or {}).keys())
    keys.extend((item.get("binaryData") or {}).keys())
    return sorted(keys)


def _data_count(item: ResourceItem, _snapshot: StateSnapshot) -> str:
    return str(len(data_keys(item)))


def _configmap_details(item: ResourceItem) -> list[tuple[str, str | None]]:
    return [*common_details(item), ("Keys", ", ".join(data_keys(item)) or None)]


def _secret_details(item: ResourceItem) -> list[tuple[str, str | None]]:
    return [
        *common_details(item),
        ("Type", item.get("type")),
        ("Keys", ", ".join(data_keys(item)) or None),
    ]


CONFIGMAPS_VIEW = ResourceView(
    kind=ResourceKind.CONFIGMAPS,
    title="Configmaps",
    columns=(name_column(45), Column("Data", 6, _data_count), AGE_COLUMN),
    details=_configmap_details,
)

SECRETS_VIEW = ResourceView(
    kind=ResourceKind.SECRETS,
    title="Secrets",
    columns=(
        name_column(45),
        Column("Type", 30, lambda item, _s: item.get("type") or ""),
        Column("Data", 6, _data_count),
        AGE_COLUMN,
    ),
    details=_secret_details,
)


def render_configmaps(snapshot: StateSnapshot) -> Section:
    return render_collection(CONFIGMAPS_VIEW, snapshot)


def render_secrets(snapshot: StateSnapshot) -> Section:
    return render_collection(SECRETS_VIEW, snapshot)
