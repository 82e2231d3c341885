"""Pods renderer.

Completed pods (phase ``Succeeded``) are hidden unless the snapshot asks for
them; the heading count only includes visible pods. Other terminal phases
such as ``Failed`` are always shown.
"""

from __future__ import annotations

from kubelens.constants.enums import Face, PodPhase, ResourceKind
from kubelens.models.state.resource_state import ResourceItem, StateSnapshot
from kubelens.render.nodes import Section
from kubelens.renderers.base import (
    AGE_COLUMN,
    Column,
    ResourceView,
    common_details,
    metadata,
    name_column,
    render_collection,
    spec,
    status,
)

_PHASE_FACES = {
    PodPhase.RUNNING.value: None,
    PodPhase.SUCCEEDED.value: Face.DIMMED,
    PodPhase.PENDING.value: Face.WARNING,
    PodPhase.FAILED.value: Face.ERROR,
    PodPhase.UNKNOWN.value: Face.WARNING,
}


def pod_phase(item: ResourceItem) -> str:
    return status(item).get("phase") or PodPhase.UNKNOWN.value


def pod_status(item: ResourceItem) -> str:
    """Display status: terminating, a waiting container's reason, or the phase."""
    if metadata(item).get("deletionTimestamp"):
        return "Terminating"
    for container in status(item).get("containerStatuses") or []:
        reason = (container.get("state") or {}).get("waiting", {}).get("reason")
        if reason:
            return reason
    return pod_phase(item)


def pod_status_face(item: ResourceItem) -> Face | None:
    text = pod_status(item)
    if text in _PHASE_FACES:
        return _PHASE_FACES[text]
    return Face.WARNING


def ready_count(item: ResourceItem) -> str:
    containers = status(item).get("containerStatuses") or []
    ready = sum(1 for container in containers if container.get("ready"))
    total = len(spec(item).get("containers") or containers)
    return f"{ready}/{total}"


def restart_count(item: ResourceItem) -> str:
    containers = status(item).get("containerStatuses") or []
    return str(sum(int(container.get("restartCount") or 0) for container in containers))


def is_visible_pod(item: ResourceItem, snapshot: StateSnapshot) -> bool:
    return snapshot.show_completed_pods or pod_phase(item) != PodPhase.SUCCEEDED.value


def _pod_details(item: ResourceItem) -> list[tuple[str, str | None]]:
    pod_status_data = status(item)
    details = [
        *common_details(item),
        ("Node", spec(item).get("nodeName")),
        ("Host IP", pod_status_data.get("hostIP")),
        ("Pod IP", pod_status_data.get("podIP")),
    ]
    for container in spec(item).get("containers") or []:
        details.append(("Container", f"{container.get('name', '?')} ({container.get('image', '?')})"))
    return details


PODS_VIEW = ResourceView(
    kind=ResourceKind.PODS,
    title="Pods",
    columns=(
        name_column(45),
        Column("Status", 10, lambda item, _s: pod_status(item), face_for=pod_status_face),
        Column("Ready", 5, lambda item, _s: ready_count(item)),
        Column("Restarts", 8, lambda item, _s: restart_count(item)),
        AGE_COLUMN,
    ),
    details=_pod_details,
    visible=is_visible_pod,
)


def render_pods(snapshot: StateSnapshot) -> Section:
    return render_collection(PODS_VIEW, snapshot)
