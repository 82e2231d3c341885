"""Unit tests for KubelensApp - class attributes, instantiation, wiring.

Tests avoid running the full Textual event loop; see the smoke tests for
end-to-end key handling.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from textual.app import App
from textual.binding import Binding

from kubelens.app import KubelensApp
from kubelens.constants import APP_TITLE
from kubelens.constants.enums import ResourceKind
from kubelens.controllers import KubectlExecutor, PollingCoordinator
from kubelens.keyboard.app import APP_BINDINGS
from kubelens.models.state.app_settings import AppSettings

# =============================================================================
# Class Attributes
# =============================================================================


class TestAppClassAttributes:
    """Test KubelensApp class-level attributes."""

    def test_app_bindings_are_binding_objects(self) -> None:
        for binding in KubelensApp.BINDINGS:
            assert isinstance(binding, Binding)

    def test_app_bindings_match_app_bindings_constant(self) -> None:
        assert KubelensApp.BINDINGS is APP_BINDINGS

    def test_app_title_set(self) -> None:
        assert KubelensApp.TITLE == APP_TITLE

    def test_app_inherits_from_textual_app(self) -> None:
        assert issubclass(KubelensApp, App)


# =============================================================================
# Instantiation
# =============================================================================


class TestAppInstantiation:
    """Test KubelensApp constructor and parameter handling."""

    def test_settings_are_used(self) -> None:
        settings = AppSettings(context="kind-dev", namespace="team-a")
        app = KubelensApp(settings=settings)

        assert app.settings is settings
        assert app.resource_state.context == "kind-dev"
        assert app.resource_state.namespace == "team-a"

    def test_default_executor_is_kubectl(self) -> None:
        app = KubelensApp(settings=AppSettings(namespace="team-a", command_timeout=20))

        assert isinstance(app.executor, KubectlExecutor)
        assert app.executor.namespace == "team-a"
        assert app.executor.command_timeout == 20

    def test_custom_executor(self) -> None:
        executor = MagicMock()
        app = KubelensApp(settings=AppSettings(), executor=executor)
        assert app.executor is executor

    def test_loads_settings_from_config_path(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("namespace: from-file\nrefresh_interval: 30\n")

        app = KubelensApp(config_path=config)

        assert app.settings.namespace == "from-file"
        assert app.settings.refresh_interval == 30

    def test_invalid_config_falls_back_to_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("refresh_interval: 0\n")

        app = KubelensApp(config_path=config)

        assert app.settings == AppSettings()


# =============================================================================
# Operations
# =============================================================================


class TestAppOperations:
    """Test operations the screens call on the app."""

    @pytest.mark.asyncio
    async def test_refresh_resources_polls_configured_kinds(self) -> None:
        executor = MagicMock()
        executor.list_resources = AsyncMock(return_value=[])
        app = KubelensApp(
            settings=AppSettings(overview_kinds=["pods", "services"]), executor=executor
        )
        app.poller = PollingCoordinator(
            app.resource_state, executor, MagicMock(), MagicMock()
        )

        app.refresh_resources()
        await app.poller.wait_idle()

        kinds = [call.args[0] for call in executor.list_resources.await_args_list]
        assert kinds == [ResourceKind.PODS, ResourceKind.SERVICES]

    def test_delete_marked_reports_nothing_marked(self) -> None:
        app = KubelensApp(settings=AppSettings(), executor=MagicMock())
        assert app.delete_marked() is False
