"""kubectl-backed cluster command executor."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import subprocess
from typing import Any

from kubelens.constants.enums import ResourceKind
from kubelens.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    CONTEXT_LOOKUP_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubelens.controllers.base import ClusterCommandExecutor
from kubelens.exceptions import DeleteFailure, FetchFailure

logger = logging.getLogger(__name__)


class KubectlCommandError(RuntimeError):
    """Raised when a kubectl process fails or cannot be started."""


class KubectlExecutor(ClusterCommandExecutor):
    """Runs kubectl in a worker thread and parses its JSON output."""

    def __init__(
        self,
        kubectl: str = "kubectl",
        context: str | None = None,
        namespace: str | None = None,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        command_timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> None:
        """Initialize the executor.

        Args:
            kubectl: kubectl executable name or path.
            context: Optional Kubernetes context name.
            namespace: Namespace to scope commands to; kubeconfig default if None.
            request_timeout: Value for kubectl ``--request-timeout``.
            command_timeout: Process timeout in seconds.
        """
        self.kubectl = kubectl
        self.context = context
        self.namespace = namespace
        self.request_timeout = request_timeout
        self.command_timeout = command_timeout

    def _build_command(self, args: tuple[str, ...], *, namespaced: bool = True) -> list[str]:
        cmd = [self.kubectl]
        if self.context:
            cmd.extend(["--context", self.context])
        if namespaced and self.namespace:
            cmd.extend(["--namespace", self.namespace])
        cmd.extend(args)
        return cmd

    def _command_timeout(self) -> int:
        # Keep subprocess timeouts tight under pytest so stray worker threads
        # do not outlive the test.
        if os.environ.get("PYTEST_CURRENT_TEST"):
            return min(self.command_timeout, 10)
        return self.command_timeout

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        *,
        namespaced: bool = True,
        timeout: int | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_command(args, namespaced=namespaced)
        effective_timeout = timeout if timeout is not None else self._command_timeout()
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except FileNotFoundError as exc:
            raise KubectlCommandError(f"{self.kubectl} not found") from exc
        except subprocess.TimeoutExpired as exc:
            raise KubectlCommandError(
                f"kubectl timed out after {effective_timeout}s"
            ) from exc
        except OSError as exc:
            raise KubectlCommandError(f"cannot run {self.kubectl}: {exc}") from exc
        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise KubectlCommandError(stderr or "kubectl command failed")
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...], *, namespaced: bool = True) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args, namespaced=namespaced)

    async def check_connection(self) -> bool:
        try:
            await self._run_kubectl(
                ("version", f"--request-timeout={self.request_timeout}", "-o", "json"),
                namespaced=False,
            )
        except KubectlCommandError as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True

    async def list_resources(self, kind: ResourceKind) -> list[dict[str, Any]]:
        args = ("get", kind.value, "-o", "json", f"--request-timeout={self.request_timeout}")
        try:
            output = await self._run_kubectl(args)
        except KubectlCommandError as exc:
            raise FetchFailure(kind, str(exc)) from exc

        try:
            data = json.loads(output or "{}")
        except json.JSONDecodeError as exc:
            raise FetchFailure(kind, f"invalid JSON from kubectl: {exc}") from exc

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise FetchFailure(kind, "kubectl response has no items list")
        return items

    async def delete_resource(self, kind: ResourceKind, name: str) -> None:
        args = ("delete", kind.value, name, f"--request-timeout={self.request_timeout}")
        try:
            await self._run_kubectl(args)
        except KubectlCommandError as exc:
            raise DeleteFailure(kind, name, str(exc)) from exc

    async def current_context(self) -> str | None:
        """Resolve the active context name, honouring an explicit override."""
        if self.context:
            return self.context
        try:
            output = await asyncio.to_thread(
                self._run_kubectl_sync,
                ("config", "current-context"),
                namespaced=False,
                timeout=CONTEXT_LOOKUP_TIMEOUT,
            )
        except KubectlCommandError as exc:
            logger.warning("Could not resolve current context: %s", exc)
            return None
        return output.strip() or None

    async def current_cluster(self) -> str | None:
        """Name of the cluster the active context points at."""
        try:
            output = await asyncio.to_thread(
                self._run_kubectl_sync,
                ("config", "view", "--minify", "-o", "jsonpath={.clusters[0].name}"),
                namespaced=False,
                timeout=CONTEXT_LOOKUP_TIMEOUT,
            )
        except KubectlCommandError as exc:
            logger.warning("Could not resolve current cluster: %s", exc)
            return None
        return output.strip() or None


__all__ = ["KubectlCommandError", "KubectlExecutor"]
