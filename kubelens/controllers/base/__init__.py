"""Base classes for cluster controllers."""

from kubelens.controllers.base.base_controller import ClusterCommandExecutor

__all__ = ["ClusterCommandExecutor"]
