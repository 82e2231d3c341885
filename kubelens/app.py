"""Main application class for kubelens."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.timer import Timer

from kubelens.constants import APP_TITLE
from kubelens.controllers import (
    ClusterCommandExecutor,
    DeleteMarkedOrchestrator,
    KubectlExecutor,
    PollingCoordinator,
)
from kubelens.keyboard.app import APP_BINDINGS
from kubelens.models.state.app_settings import AppSettings
from kubelens.models.state.config_manager import ConfigLoadError, ConfigManager
from kubelens.models.state.resource_state import ResourceState
from kubelens.screens.overview import OverviewPresenter, OverviewScreen

logger = logging.getLogger(__name__)


class KubelensApp(App[None]):
    """Main TUI application for kubelens."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings
    resource_state: ResourceState

    def __init__(
        self,
        settings: AppSettings | None = None,
        config_path: Path | None = None,
        executor: ClusterCommandExecutor | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_path = config_path
        self.settings = settings if settings is not None else self._load_settings()

        self.resource_state = ResourceState(
            context=self.settings.context, namespace=self.settings.namespace
        )
        self.executor = executor or KubectlExecutor(
            kubectl=self.settings.kubectl_path,
            context=self.settings.context,
            namespace=self.settings.namespace,
            request_timeout=self.settings.request_timeout,
            command_timeout=self.settings.command_timeout,
        )
        self.poller = PollingCoordinator(
            self.resource_state, self.executor, self.request_redraw, self.notify
        )
        self.deleter = DeleteMarkedOrchestrator(
            self.resource_state, self.executor, self.request_redraw, self.notify
        )
        self.presenter = OverviewPresenter(self.resource_state, self.settings)
        self._refresh_timer: Timer | None = None
        self._redraw_scheduled = False

    def _load_settings(self) -> AppSettings:
        """Load application settings from persistent storage."""
        try:
            return ConfigManager.load(self.config_path)
        except ConfigLoadError:
            logger.exception("Falling back to default settings")
            return AppSettings()

    def on_mount(self) -> None:
        self.push_screen(OverviewScreen(self.presenter))
        self.run_worker(self._connect(), group="connect", exclusive=True)
        self.refresh_resources()
        if self.settings.auto_refresh:
            self._refresh_timer = self.set_interval(
                self.settings.refresh_interval, self.refresh_resources
            )

    async def _connect(self) -> None:
        if not await self.executor.check_connection():
            self.notify(
                "Cluster is not reachable, fetches will fail until it is",
                severity="warning",
            )
        context = self.resource_state.context
        resolve_context = getattr(self.executor, "current_context", None)
        if context is None and resolve_context is not None:
            context = await resolve_context()
        resolve_cluster = getattr(self.executor, "current_cluster", None)
        cluster = await resolve_cluster() if resolve_cluster is not None else None

        self.resource_state.set_target(context, cluster)
        self.sub_title = context or ""
        self.request_redraw()

    # =========================================================================
    # Operations exposed to the screens
    # =========================================================================

    def refresh_resources(self) -> None:
        """Poll every configured kind; kinds already in flight are skipped."""
        self.poller.refresh_all(self.settings.kinds)

    def delete_marked(self) -> bool:
        """Delete marked resources of every kind; False when nothing was marked."""
        return bool(self.deleter.delete_all_marked(self.settings.kinds))

    def reconnect(self) -> None:
        """Forget fetched collections and marks, then reconnect and refetch."""
        self.resource_state.reset(self.settings.context, self.settings.namespace)
        self.sub_title = self.settings.context or ""
        self.request_redraw()
        self.run_worker(self._connect(), group="connect", exclusive=True)
        self.refresh_resources()

    def request_redraw(self) -> None:
        """Schedule a redraw; bursts of requests collapse into one."""
        if self._redraw_scheduled:
            return
        self._redraw_scheduled = True
        self.call_later(self._redraw)

    def _redraw(self) -> None:
        self._redraw_scheduled = False
        if isinstance(self.screen, OverviewScreen):
            self.screen.redraw()

    def action_show_help(self) -> None:
        """Show keyboard help."""
        self.notify(
            "j/k: Move  Tab: Fold/unfold  g: Refresh\n"
            "D: Mark  u: Unmark  U: Unmark all  x: Delete marked\n"
            "w: Copy name  c: Toggle completed pods  r: Reconnect  q: Quit",
            severity="information",
            title="Help",
        )

    def action_reconnect(self) -> None:
        self.reconnect()

    def on_unmount(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()


__all__ = [
    "KubelensApp",
]
