"""Overview renderer: context header followed by one section per kind."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from kubelens.constants.enums import Face, ResourceKind
from kubelens.constants.ui import DETAIL_LABEL_WIDTH
from kubelens.constants.values import FETCHING_TEXT, UNKNOWN_TEXT
from kubelens.models.state.resource_state import StateSnapshot
from kubelens.render.nodes import (
    Heading,
    Indent,
    KeyValue,
    Line,
    Node,
    Padding,
    Section,
    styled,
)
from kubelens.renderers.configmaps import render_configmaps, render_secrets
from kubelens.renderers.deployments import render_deployments
from kubelens.renderers.pods import render_pods
from kubelens.renderers.services import render_services

Renderer = Callable[[StateSnapshot], Section]

RENDERERS: dict[ResourceKind, Renderer] = {
    ResourceKind.SERVICES: render_services,
    ResourceKind.PODS: render_pods,
    ResourceKind.CONFIGMAPS: render_configmaps,
    ResourceKind.SECRETS: render_secrets,
    ResourceKind.DEPLOYMENTS: render_deployments,
}

DEFAULT_NAMESPACE_LABEL = "(kubeconfig default)"


def _target_pair(key: str, value: str | None) -> Node:
    if value is None:
        label = f"{key + ':':<{DETAIL_LABEL_WIDTH}}"
        return Line((styled(label, Face.HEADER), styled(UNKNOWN_TEXT, Face.DIMMED)))
    return KeyValue(DETAIL_LABEL_WIDTH, key, value)


def render_context(snapshot: StateSnapshot) -> Section:
    """Current context, cluster and namespace.

    Shows progress only while the lookup is outstanding; a lookup that found
    nothing renders as unknown.
    """
    if not snapshot.target_resolved:
        body: tuple[Node, ...] = (Line(styled(FETCHING_TEXT, Face.PROGRESS)),)
    else:
        body = (
            _target_pair("Context", snapshot.context),
            _target_pair("Cluster", snapshot.cluster),
            KeyValue(
                DETAIL_LABEL_WIDTH,
                "Namespace",
                snapshot.namespace or DEFAULT_NAMESPACE_LABEL,
            ),
        )
    return Section("context-container", (Heading("Context"), Indent(body)))


def render_overview(snapshot: StateSnapshot, kinds: Iterable[ResourceKind]) -> list[Node]:
    """Top-level nodes for the whole overview document."""
    nodes: list[Node] = [render_context(snapshot)]
    for kind in kinds:
        nodes.append(Padding())
        nodes.append(RENDERERS[kind](snapshot))
    return nodes
