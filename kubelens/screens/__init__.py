"""Screens for the kubelens TUI."""

from kubelens.screens.overview import OverviewPresenter, OverviewScreen

__all__ = ["OverviewPresenter", "OverviewScreen"]
