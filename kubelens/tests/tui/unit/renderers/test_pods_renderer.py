"""Tests for the pods renderer."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from kubelens.constants.enums import Face, ResourceKind
from kubelens.constants.ui import ATTR_FACE
from kubelens.models.state.resource_state import ResourceState
from kubelens.render import render_document
from kubelens.renderers.pods import (
    pod_status,
    pod_status_face,
    ready_count,
    render_pods,
    restart_count,
)

PODS = ResourceKind.PODS

STATUS_COLUMN = 46


class TestCompletedPods:
    """Succeeded pods are hidden unless requested."""

    def test_completed_pods_hidden_by_default(
        self,
        state: ResourceState,
        now: datetime,
        make_pod: Callable[..., dict[str, Any]],
    ) -> None:
        state.update_collection(
            PODS,
            [
                make_pod("web-1"),
                make_pod("job-1", phase="Succeeded", ready=False),
                make_pod("web-2", phase="Failed", ready=False),
            ],
        )

        document = render_document([render_pods(state.snapshot(now))])

        assert document.lines[0].text == "Pods (2)"
        names = [section.identity[1] for section in document.sections() if len(section.path) == 2]
        assert names == ["web-1", "web-2"]

    def test_completed_pods_shown_when_requested(
        self,
        state: ResourceState,
        now: datetime,
        make_pod: Callable[..., dict[str, Any]],
    ) -> None:
        state.update_collection(
            PODS, [make_pod("web-1"), make_pod("job-1", phase="Succeeded", ready=False)]
        )

        document = render_document(
            [render_pods(state.snapshot(now, show_completed_pods=True))]
        )

        assert document.lines[0].text == "Pods (2)"

    def test_only_completed_pods_renders_none(
        self,
        state: ResourceState,
        now: datetime,
        make_pod: Callable[..., dict[str, Any]],
    ) -> None:
        state.update_collection(PODS, [make_pod("job-1", phase="Succeeded")])

        document = render_document([render_pods(state.snapshot(now))])

        assert [line.text for line in document.lines] == ["Pods (0)", "None."]


class TestPodColumns:
    """Summary columns and their faces."""

    def test_summary_columns(
        self,
        state: ResourceState,
        now: datetime,
        make_pod: Callable[..., dict[str, Any]],
    ) -> None:
        state.update_collection(PODS, [make_pod("web-1", restarts=3)])

        summary = render_document([render_pods(state.snapshot(now))]).lines[2]

        assert summary.text[:45] == "web-1".ljust(45)
        assert summary.text[STATUS_COLUMN:STATUS_COLUMN + 10] == "Running".rjust(10)
        assert summary.text[57:62] == "1/1".rjust(5)
        assert summary.text[63:71] == "3".rjust(8)
        assert summary.text[72:] == "36d".rjust(6)
        assert ATTR_FACE not in summary.attrs_at(STATUS_COLUMN + 9)

    def test_failed_status_uses_error_face(
        self,
        state: ResourceState,
        now: datetime,
        make_pod: Callable[..., dict[str, Any]],
    ) -> None:
        state.update_collection(PODS, [make_pod("web-1", phase="Failed")])

        summary = render_document([render_pods(state.snapshot(now))]).lines[2]

        assert summary.attrs_at(STATUS_COLUMN + 9)[ATTR_FACE] is Face.ERROR

    def test_details_list_containers(
        self,
        state: ResourceState,
        now: datetime,
        make_pod: Callable[..., dict[str, Any]],
    ) -> None:
        state.update_collection(PODS, [make_pod("web-1")])

        details = [line.text for line in render_document([render_pods(state.snapshot(now))]).lines[3:]]

        assert "Node:         node-1" in details
        assert "Pod IP:       172.17.0.5" in details
        assert details[-1] == "Container:    app (nginx:1.25)"


class TestPodHelpers:
    """Tests for pod field helpers."""

    def test_waiting_reason_overrides_phase(self) -> None:
        pod = {
            "status": {
                "phase": "Running",
                "containerStatuses": [
                    {"ready": False, "state": {"waiting": {"reason": "CrashLoopBackOff"}}}
                ],
            }
        }
        assert pod_status(pod) == "CrashLoopBackOff"
        assert pod_status_face(pod) is Face.WARNING

    def test_terminating_pod(self) -> None:
        pod = {"metadata": {"deletionTimestamp": "2024-01-01T00:00:00Z"}, "status": {"phase": "Running"}}
        assert pod_status(pod) == "Terminating"

    def test_missing_status_is_unknown(self) -> None:
        assert pod_status({}) == "Unknown"
        assert ready_count({}) == "0/0"
        assert restart_count({}) == "0"

    def test_ready_count_uses_spec_containers(self) -> None:
        pod = {
            "spec": {"containers": [{"name": "a"}, {"name": "b"}]},
            "status": {"containerStatuses": [{"ready": True, "restartCount": 2}]},
        }
        assert ready_count(pod) == "1/2"
        assert restart_count(pod) == "2"
