"""Services renderer."""

from __future__ import annotations

from typing import Any

from kubelens.constants.enums import ResourceKind
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


def external_ips(item: ResourceItem) -> list[str]:
    """External IPs plus load balancer ingress addresses."""
    addresses = list(spec(item).get("externalIPs") or [])
    for ingress in status(item).get("loadBalancer", {}).get("ingress") or []:
        address = ingress.get("ip") or ingress.get("hostname")
        if address:
            addresses.append(address)
    return addresses


def format_port(port: dict[str, Any]) -> str:
    """Render a service port as ``name 80/TCP -> 8080``."""
    text = f"{port.get('port', '?')}/{port.get('protocol', 'TCP')}"
    target = port.get("targetPort")
    if target is not None and str(target) != str(port.get("port")):
        text += f" -> {target}"
    if port.get("nodePort"):
        text += f" (node {port['nodePort']})"
    if port.get("name"):
        text = f"{port['name']} {text}"
    return text


def _service_details(item: ResourceItem) -> list[tuple[str, str | None]]:
    service_spec = spec(item)
    ports = service_spec.get("ports") or []
    return [
        *common_details(item),
        ("Type", service_spec.get("type")),
        ("Selector", join_labels(service_spec.get("selector"))),
        ("Cluster IP", service_spec.get("clusterIP")),
        ("External IPs", ", ".join(external_ips(item)) or None),
        ("Ports", ", ".join(format_port(port) for port in ports) or None),
    ]


SERVICES_VIEW = ResourceView(
    kind=ResourceKind.SERVICES,
    title="Services",
    columns=(
        name_column(30),
        Column("Internal IP", 15, lambda item, _s: spec(item).get("clusterIP") or ""),
        Column("External IP", 15, lambda item, _s: ", ".join(external_ips(item))),
        AGE_COLUMN,
    ),
    details=_service_details,
)


def render_services(snapshot: StateSnapshot) -> Section:
    return render_collection(SERVICES_VIEW, snapshot)
