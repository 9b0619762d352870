"""
Restaurant Repository - Single source of truth for restaurant and reviews.

Wraps the RestaurantApi data source and exposes its data as observables.
"""

import logging
from typing import List

from src.data.restaurant_api import RestaurantApi
from src.models.restaurant import Restaurant
from src.models.review import Review
from src.reactive.observable import Observable, ReadOnlyObservable

logger = logging.getLogger(__name__)


class RestaurantRepository:
    """
    Owns the review list for the lifetime of the process.

    Every change is published as a new list instance, so observers that
    compare by identity always see it, and no observer ever holds the
    list the repository keeps mutating.
    """

    def __init__(self, restaurant_api: RestaurantApi):
        """
        Initialize the repository from the data source.

        Args:
            restaurant_api: Data source for the restaurant and its reviews
        """
        self.restaurant_api = restaurant_api
        self._restaurant: Observable = Observable(
            restaurant_api.get_restaurant(), name="restaurant"
        )
        self._reviews: Observable = Observable(
            list(restaurant_api.get_reviews()), name="reviews"
        )

        logger.info(
            f"Loaded restaurant '{self._restaurant.current().name}' "
            f"with {len(self._reviews.current())} reviews"
        )

    def restaurant(self) -> ReadOnlyObservable:
        """Observable holding the seed restaurant descriptor."""
        return self._restaurant.as_readonly()

    def reviews(self) -> ReadOnlyObservable:
        """Observable holding the current review list snapshot."""
        return self._reviews.as_readonly()

    def current_reviews(self) -> List[Review]:
        """Return a copy of the latest review list."""
        return list(self._reviews.current())

    def append(self, review: Review) -> None:
        """
        Add a review and publish the updated list.

        No validation happens here. If the data source fails, nothing is
        published and the error propagates to the caller.

        Args:
            review: Review to add
        """
        try:
            self.restaurant_api.add_review(review)
            updated = list(self.restaurant_api.get_reviews())
        except Exception as e:
            logger.error(f"Failed to add review: {e}")
            raise

        logger.info(f"Added review by {review.username} ({review.rate}/5), {len(updated)} reviews")
        self._reviews.set(updated)

    def get_restaurant(self) -> Restaurant:
        """Return the restaurant descriptor itself."""
        return self._restaurant.current()
