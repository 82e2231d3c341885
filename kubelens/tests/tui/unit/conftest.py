"""Shared fixtures for kubelens unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from kubelens.models.state.resource_state import ResourceState

NOW = datetime(2024, 2, 6, 12, 0, 0, tzinfo=timezone.utc)
CREATED = "2024-01-01T12:00:00Z"  # 36 days before NOW


@pytest.fixture
def now() -> datetime:
    """Reference clock used by renderer tests."""
    return NOW


@pytest.fixture
def state() -> ResourceState:
    """Empty resource state store."""
    return ResourceState(context="minikube", namespace="default")


@pytest.fixture
def make_service() -> Callable[..., dict[str, Any]]:
    """Factory for raw service objects."""

    def _make(
        name: str,
        cluster_ip: str = "10.0.0.1",
        external_ips: list[str] | None = None,
        created: str = CREATED,
    ) -> dict[str, Any]:
        return {
            "metadata": {
                "name": name,
                "namespace": "default",
                "creationTimestamp": created,
            },
            "spec": {
                "type": "ClusterIP",
                "clusterIP": cluster_ip,
                "externalIPs": external_ips or [],
                "selector": {"app": name},
                "ports": [{"port": 80, "protocol": "TCP", "targetPort": 8080}],
            },
            "status": {"loadBalancer": {}},
        }

    return _make


@pytest.fixture
def make_pod() -> Callable[..., dict[str, Any]]:
    """Factory for raw pod objects."""

    def _make(
        name: str,
        phase: str = "Running",
        ready: bool = True,
        restarts: int = 0,
        created: str = CREATED,
    ) -> dict[str, Any]:
        return {
            "metadata": {
                "name": name,
                "namespace": "default",
                "creationTimestamp": created,
            },
            "spec": {
                "nodeName": "node-1",
                "containers": [{"name": "app", "image": "nginx:1.25"}],
            },
            "status": {
                "phase": phase,
                "hostIP": "192.168.1.10",
                "podIP": "172.17.0.5",
                "containerStatuses": [
                    {"name": "app", "ready": ready, "restartCount": restarts, "state": {}}
                ],
            },
        }

    return _make
