"""Deployments renderer."""

from __future__ import annotations

from kubelens.constants.enums import Face, ResourceKind
from kubelens.models.state.resource_state import ResourceItem, StateSnapshot
from kubelens.render.nodes import Section
from kubelens.renderers.base import (
    AGE_COLUMN,
    Column,
    ResourceView,
    common_details,
    join_labels,
    name_column,
    render_collection,
    spec,
    status,
)


def desired_replicas(item: ResourceItem) -> int:
    replicas = spec(item).get("replicas")
    return 1 if replicas is None else int(replicas)


def ready_replicas(item: ResourceItem) -> str:
    return f"{int(status(item).get('readyReplicas') or 0)}/{desired_replicas(item)}"


def ready_face(item: ResourceItem) -> Face | None:
    if int(status(item).get("readyReplicas") or 0) < desired_replicas(item):
        return Face.WARNING
    return Face.SUCCESS


def _deployment_details(item: ResourceItem) -> list[tuple[str, str | None]]:
    deployment_spec = spec(item)
    return [
        *common_details(item),
        ("Replicas", str(desired_replicas(item))),
        ("Strategy", (deployment_spec.get("strategy") or {}).get("type")),
        ("Selector", join_labels((deployment_spec.get("selector") or {}).get("matchLabels"))),
    ]


DEPLOYMENTS_VIEW = ResourceView(
    kind=ResourceKind.DEPLOYMENTS,
    title="Deployments",
    columns=(
        name_column(45),
        Column("Ready", 10, lambda item, _s: ready_replicas(item), face_for=ready_face),
        Column("Up-to-date", 10, lambda item, _s: str(int(status(item).get("updatedReplicas") or 0))),
        Column("Available", 10, lambda item, _s: str(int(status(item).get("availableReplicas") or 0))),
        AGE_COLUMN,
    ),
    details=_deployment_details,
)


def render_deployments(snapshot: StateSnapshot) -> Section:
    return render_collection(DEPLOYMENTS_VIEW, snapshot)
