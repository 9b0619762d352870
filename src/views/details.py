"""
Details screen binding.

Connects the restaurant descriptor and the review statistics to a
details view.
"""

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from src.data.repository import RestaurantRepository
from src.models.restaurant import Restaurant
from src.models.stats import ReviewStats
from src.reactive.observable import LifetimeScope
from src.stats.aggregator import ReviewStatsAggregator

logger = logging.getLogger(__name__)

# Monday first, matching date.weekday()
FRENCH_WEEKDAYS = ["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"]


def current_day_label(today: Optional[date] = None) -> str:
    """Return the day of the week in French."""
    today = today or date.today()
    return FRENCH_WEEKDAYS[today.weekday()]


class DetailsView(ABC):
    """Rendering surface of the details screen."""

    @abstractmethod
    def render_restaurant(self, restaurant: Restaurant, day_label: str) -> None:
        """Show the restaurant profile."""

    @abstractmethod
    def render_stats(self, stats: ReviewStats) -> None:
        """Show average rating, review count and star distribution."""


class DetailsBinder:
    """
    Feeds a DetailsView from the repository and the stats aggregator.

    Each emission is rendered as a whole record.
    """

    def __init__(
        self,
        view: DetailsView,
        repository: RestaurantRepository,
        aggregator: ReviewStatsAggregator
    ):
        self.view = view
        self.repository = repository
        self.aggregator = aggregator

    def bind(self, scope: LifetimeScope) -> None:
        """Start observing for the lifetime of scope."""
        self.repository.restaurant().subscribe(scope, self._on_restaurant)
        self.aggregator.stats.subscribe(scope, self._on_stats)
        logger.debug(f"Details view bound to scope '{scope.name}'")

    def _on_restaurant(self, restaurant: Restaurant) -> None:
        if restaurant is None:
            return
        self.view.render_restaurant(restaurant, current_day_label())

    def _on_stats(self, stats: ReviewStats) -> None:
        if stats is None:
            return
        self.view.render_stats(stats)
