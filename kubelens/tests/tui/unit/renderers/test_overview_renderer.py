"""Tests for the remaining kinds and the overview layout."""

from __future__ import annotations

from datetime import datetime

from kubelens.constants.enums import Face, ResourceKind
from kubelens.constants.ui import ATTR_FACE
from kubelens.models.state.resource_state import ResourceState
from kubelens.render import render_document
from kubelens.render.nodes import Padding, Section
from kubelens.renderers import RENDERERS, render_context, render_overview
from kubelens.renderers.configmaps import data_keys, render_configmaps, render_secrets
from kubelens.renderers.deployments import ready_face, ready_replicas, render_deployments

CREATED = "2024-01-01T12:00:00Z"


def _deployment(name: str, replicas: int | None, ready: int) -> dict:
    spec: dict = {
        "strategy": {"type": "RollingUpdate"},
        "selector": {"matchLabels": {"app": name}},
    }
    if replicas is not None:
        spec["replicas"] = replicas
    return {
        "metadata": {"name": name, "namespace": "default", "creationTimestamp": CREATED},
        "spec": spec,
        "status": {"readyReplicas": ready, "updatedReplicas": ready, "availableReplicas": ready},
    }


class TestConfigMapsAndSecrets:
    """Tests for configmaps and secrets."""

    def test_configmap_keys(self, state: ResourceState, now: datetime) -> None:
        state.update_collection(
            ResourceKind.CONFIGMAPS,
            [
                {
                    "metadata": {"name": "settings", "creationTimestamp": CREATED},
                    "data": {"b.yaml": "", "a.yaml": ""},
                    "binaryData": {"logo.png": ""},
                }
            ],
        )

        document = render_document([render_configmaps(state.snapshot(now))])

        assert document.lines[0].text == "Configmaps (1)"
        summary = document.lines[2].text
        assert summary[46:52] == "3".rjust(6)
        assert document.lines[-1].text == "Keys:         a.yaml, b.yaml, logo.png"

    def test_secret_type_column(self, state: ResourceState, now: datetime) -> None:
        state.update_collection(
            ResourceKind.SECRETS,
            [
                {
                    "metadata": {"name": "tls", "creationTimestamp": CREATED},
                    "type": "kubernetes.io/tls",
                    "data": {"tls.crt": "", "tls.key": ""},
                }
            ],
        )

        document = render_document([render_secrets(state.snapshot(now))])

        assert document.lines[0].text == "Secrets (1)"
        assert "kubernetes.io/tls" in document.lines[2].text

    def test_data_keys_empty(self) -> None:
        assert data_keys({}) == []


class TestDeployments:
    """Tests for deployments."""

    def test_ready_column(self, state: ResourceState, now: datetime) -> None:
        state.update_collection(ResourceKind.DEPLOYMENTS, [_deployment("web", 3, 1)])

        document = render_document([render_deployments(state.snapshot(now))])

        summary = document.lines[2]
        assert summary.text[46:56] == "1/3".rjust(10)
        assert summary.attrs_at(50)[ATTR_FACE] is Face.WARNING

    def test_replicas_default_to_one(self) -> None:
        deployment = _deployment("web", None, 1)
        assert ready_replicas(deployment) == "1/1"
        assert ready_face(deployment) is Face.SUCCESS


class TestOverview:
    """Tests for the whole overview tree."""

    def test_every_kind_has_a_renderer(self) -> None:
        assert set(RENDERERS) == set(ResourceKind)

    def test_overview_nodes(self, state: ResourceState, now: datetime) -> None:
        nodes = render_overview(
            state.snapshot(now), [ResourceKind.SERVICES, ResourceKind.PODS]
        )

        assert len(nodes) == 5
        assert isinstance(nodes[0], Section)
        assert isinstance(nodes[1], Padding)
        assert [node.identity for node in nodes if isinstance(node, Section)] == [
            "context-container",
            "services-container",
            "pods-container",
        ]

    def test_context_section(self, state: ResourceState, now: datetime) -> None:
        state.set_target("minikube", "kind-minikube")

        document = render_document([render_context(state.snapshot(now))])

        assert [line.rendered for line in document.lines] == [
            "Context",
            "  Context:      minikube",
            "  Cluster:      kind-minikube",
            "  Namespace:    default",
        ]

    def test_context_pending_until_lookup_finishes(
        self, state: ResourceState, now: datetime
    ) -> None:
        document = render_document([render_context(state.snapshot(now))])

        assert document.lines[1].text == "Fetching..."
        assert document.lines[1].attrs_at(0)[ATTR_FACE] is Face.PROGRESS

    def test_failed_lookup_renders_unknown(self, now: datetime) -> None:
        state = ResourceState()
        state.set_target(None, None)

        document = render_document([render_context(state.snapshot(now))])

        texts = [line.text for line in document.lines]
        assert "Fetching..." not in texts
        assert texts[1:] == [
            "Context:      (unknown)",
            "Cluster:      (unknown)",
            "Namespace:    (kubeconfig default)",
        ]
        assert document.lines[1].attrs_at(14)[ATTR_FACE] is Face.DIMMED
        assert document.lines[1].attrs_at(0)[ATTR_FACE] is Face.HEADER

    def test_reset_forgets_lookup(self, state: ResourceState, now: datetime) -> None:
        state.set_target("minikube", "kind-minikube")
        state.reset("minikube", "default")

        snapshot = state.snapshot(now)

        assert snapshot.target_resolved is False
        assert snapshot.cluster is None

    def test_whole_document_renders(self, state: ResourceState, now: datetime) -> None:
        kinds = list(ResourceKind)

        document = render_document(render_overview(state.snapshot(now), kinds))

        top_level = [section.identity for section in document.root.children]
        assert top_level == ["context-container", *(f"{kind.value}-container" for kind in kinds)]
        # One progress line per kind plus the unresolved context.
        assert sum(1 for line in document.lines if line.text == "Fetching...") == len(kinds) + 1
