"""
Application wiring.

Builds the store, the stats aggregator and the submission controller once,
and binds screens to them.
"""

import logging
from typing import Optional

from src.data.repository import RestaurantRepository
from src.data.restaurant_api import RestaurantApi, RestaurantFakeApi
from src.reactive.observable import LifetimeScope
from src.stats.aggregator import ReviewStatsAggregator
from src.submission.controller import ReviewSubmissionController
from src.views.details import DetailsBinder, DetailsView
from src.views.reviews import ReviewListBinder, ReviewListView

logger = logging.getLogger(__name__)


class TajMahalApp:
    """
    Process-wide components, passed explicitly to every screen.

    The repository and the aggregator live as long as the app; each
    screen gets its own LifetimeScope that ends when the screen closes.
    """

    def __init__(self, restaurant_api: Optional[RestaurantApi] = None, user_provider=None):
        """
        Initialize application components.

        Args:
            restaurant_api: Data source (defaults to the in-memory fake)
            user_provider: Current user source (defaults to the fixed user)
        """
        logger.info("Initializing Taj Mahal app...")

        self.restaurant_api = restaurant_api or RestaurantFakeApi()
        self.repository = RestaurantRepository(self.restaurant_api)
        self.aggregator = ReviewStatsAggregator(self.repository)
        self.controller = ReviewSubmissionController(self.repository, user_provider)

        logger.info("App initialized successfully")

    def open_details(self, view: DetailsView, scope: Optional[LifetimeScope] = None) -> LifetimeScope:
        """Bind a details view; returns the scope to close when it goes away."""
        scope = scope or LifetimeScope("details")
        DetailsBinder(view, self.repository, self.aggregator).bind(scope)
        return scope

    def open_reviews(
        self,
        view: ReviewListView,
        scope: Optional[LifetimeScope] = None
    ) -> ReviewListBinder:
        """Bind a review list view; the binder handles form submissions."""
        scope = scope or LifetimeScope("reviews")
        binder = ReviewListBinder(view, self.repository, self.controller)
        binder.bind(scope)
        return binder

    def shutdown(self) -> None:
        self.aggregator.close()
        logger.info("App shut down")
