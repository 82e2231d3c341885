"""Tests for OverviewPresenter."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from kubelens.constants.enums import ResourceKind
from kubelens.models.state.app_settings import AppSettings
from kubelens.models.state.resource_state import ResourceState
from kubelens.screens.overview.presenter import OverviewPresenter

SERVICES = ResourceKind.SERVICES

# Context section (4 lines) and the padding line come first.
HEADING_ROW = 5
SVC_A_ROW = 7
DETAILS_PER_SERVICE = 6
SVC_B_ROW = SVC_A_ROW + 1 + DETAILS_PER_SERVICE


@pytest.fixture
def presenter(
    state: ResourceState,
    now: datetime,
    make_service: Callable[..., dict[str, Any]],
) -> OverviewPresenter:
    state.set_target("minikube", "kind-minikube")
    state.update_collection(SERVICES, [make_service("svc-a"), make_service("svc-b")])
    settings = AppSettings(overview_kinds=["services"])
    presenter = OverviewPresenter(state, settings, clock=lambda: now)
    presenter.redraw()
    return presenter


class TestRedraw:
    """Tests for document regeneration."""

    def test_layout(self, presenter: OverviewPresenter) -> None:
        document = presenter.document
        assert document is not None
        assert document.lines[0].text == "Context"
        assert document.lines[HEADING_ROW].text == "Services (2)"
        assert document.lines[SVC_A_ROW].text.startswith("svc-a")
        assert document.lines[SVC_B_ROW].text.startswith("svc-b")

    def test_collapse_survives_redraw(
        self,
        presenter: OverviewPresenter,
        state: ResourceState,
        make_service: Callable[..., dict[str, Any]],
    ) -> None:
        presenter.cursor = SVC_A_ROW
        assert presenter.toggle_section_at_cursor() is True
        assert SVC_A_ROW + 1 not in presenter.visible_lines()

        state.update_collection(
            SERVICES,
            [make_service("svc-a"), make_service("svc-b"), make_service("svc-c")],
        )
        document = presenter.redraw()

        section = document.find_section(("services-container", ("services", "svc-a")))
        assert section is not None
        assert section.hidden is True
        visible = presenter.visible_lines()
        assert section.start in visible
        assert all(index not in visible for index in range(section.start + 1, section.end))
        assert document.lines[HEADING_ROW].text == "Services (3)"

    def test_cursor_follows_its_section(
        self,
        presenter: OverviewPresenter,
        state: ResourceState,
        make_service: Callable[..., dict[str, Any]],
    ) -> None:
        presenter.cursor = SVC_B_ROW
        state.update_collection(
            SERVICES, [make_service("svc-0"), make_service("svc-a"), make_service("svc-b")]
        )

        document = presenter.redraw()

        assert document.lines[presenter.cursor].text.startswith("svc-b")

    def test_cursor_stays_in_bounds_when_section_disappears(
        self, presenter: OverviewPresenter, state: ResourceState
    ) -> None:
        presenter.cursor = SVC_B_ROW + DETAILS_PER_SERVICE
        state.update_collection(SERVICES, [])

        document = presenter.redraw()

        assert 0 <= presenter.cursor < len(document)


    def test_first_redraw_clamps_cursor(self, state: ResourceState, now: datetime) -> None:
        presenter = OverviewPresenter(
            state, AppSettings(overview_kinds=["services"]), clock=lambda: now
        )
        presenter.cursor = 500

        document = presenter.redraw()

        assert presenter.cursor == len(document) - 1


class TestCursor:
    """Tests for cursor movement and lookups."""

    def test_move_skips_collapsed_lines(self, presenter: OverviewPresenter) -> None:
        presenter.cursor = SVC_A_ROW
        presenter.toggle_section_at_cursor()

        presenter.move_cursor(1)

        assert presenter.cursor == SVC_B_ROW

    def test_move_is_clamped(self, presenter: OverviewPresenter) -> None:
        presenter.move_cursor(-5)
        assert presenter.cursor == 0
        presenter.move_cursor(1000)
        assert presenter.cursor == presenter.visible_lines()[-1]

    def test_collapse_from_detail_line_moves_cursor_to_summary(
        self, presenter: OverviewPresenter
    ) -> None:
        presenter.cursor = SVC_A_ROW + 2

        assert presenter.toggle_section_at_cursor() is True
        assert presenter.cursor == SVC_A_ROW

        assert presenter.toggle_section_at_cursor() is False
        assert SVC_A_ROW + 2 in presenter.visible_lines()

    def test_resource_at_cursor(self, presenter: OverviewPresenter) -> None:
        presenter.cursor = SVC_A_ROW + 1
        assert presenter.resource_at_cursor() == (SERVICES, "svc-a")

        presenter.cursor = HEADING_ROW
        assert presenter.resource_at_cursor() is None

    def test_copy_payload_only_on_summary_line(self, presenter: OverviewPresenter) -> None:
        presenter.cursor = SVC_B_ROW
        assert presenter.copy_payload_at_cursor() == "svc-b"

        presenter.cursor = SVC_B_ROW + 1
        assert presenter.copy_payload_at_cursor() is None


class TestRichText:
    """Tests for the terminal rendering."""

    def test_rich_text_contains_visible_lines(self, presenter: OverviewPresenter) -> None:
        presenter.cursor = SVC_A_ROW
        presenter.toggle_section_at_cursor()

        text = presenter.to_rich_text()

        rendered = text.plain.split("\n")
        assert rendered[0] == "Context"
        assert rendered[HEADING_ROW] == "Services (2)"
        assert rendered[SVC_A_ROW].startswith("  svc-a")
        assert rendered[SVC_A_ROW + 1].startswith("  svc-b")
        assert any(str(span.style) == "reverse" for span in text.spans)

    def test_empty_before_first_redraw(self, state: ResourceState) -> None:
        presenter = OverviewPresenter(state, AppSettings())
        assert presenter.to_rich_text().plain == ""
        assert presenter.resource_at_cursor() is None
        assert presenter.toggle_section_at_cursor() is None
