"""kubectl-backed executor."""

from kubelens.controllers.kubectl.executor import KubectlCommandError, KubectlExecutor

__all__ = ["KubectlCommandError", "KubectlExecutor"]
