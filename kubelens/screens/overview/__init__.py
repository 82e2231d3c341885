"""Overview screen package."""

from kubelens.screens.overview.overview_screen import OverviewScreen
from kubelens.screens.overview.presenter import OverviewPresenter

__all__ = ["OverviewPresenter", "OverviewScreen"]
