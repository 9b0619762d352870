"""
Review list screen binding.

Connects the review list, the restaurant name and the submission outcome
to a review list view, and forwards the review form to the controller.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from src.data.repository import RestaurantRepository
from src.models.review import Review
from src.reactive.observable import LifetimeScope
from src.submission.controller import ReviewSubmissionController
from src.submission.user import CurrentUser
from src.views.adapter import ReviewListAdapter
import config.settings as settings

logger = logging.getLogger(__name__)


class ReviewListView(ABC):
    """Rendering surface of the review list screen."""

    @abstractmethod
    def show_restaurant_name(self, name: str) -> None:
        """Show the restaurant name in the header."""

    @abstractmethod
    def show_current_user(self, user: CurrentUser) -> None:
        """Show the author block next to the review form."""

    @abstractmethod
    def show_reviews(self, reviews: List[Review]) -> None:
        """Redraw the list from the adapter's items."""

    @abstractmethod
    def scroll_to_top(self) -> None:
        """Bring the first review into the viewport."""

    @abstractmethod
    def show_comment_error(self, message: Optional[str]) -> None:
        """Show the comment field error, or clear it when message is None."""

    @abstractmethod
    def show_message(self, message: str) -> None:
        """Show a short transient message."""

    @abstractmethod
    def clear_form(self) -> None:
        """Empty the comment field and reset the rating bar."""


class ReviewListBinder:
    """
    Feeds a ReviewListView and relays its form to the submission controller.
    """

    def __init__(
        self,
        view: ReviewListView,
        repository: RestaurantRepository,
        controller: ReviewSubmissionController,
        adapter: Optional[ReviewListAdapter] = None
    ):
        self.view = view
        self.repository = repository
        self.controller = controller
        self.adapter = adapter or ReviewListAdapter()

    def bind(self, scope: LifetimeScope) -> None:
        """Start observing for the lifetime of scope."""
        self.view.show_current_user(self.controller.current_user())

        self.repository.restaurant().subscribe(scope, self._on_restaurant)
        self.repository.reviews().subscribe(scope, self._on_reviews)
        self.controller.comment_error.subscribe(scope, self.view.show_comment_error)
        self.controller.rating_error.subscribe(scope, self._on_rating_error)
        self.controller.success_event.subscribe(scope, self._on_success)
        logger.debug(f"Review list view bound to scope '{scope.name}'")

    def submit(self, raw_comment: str, raw_rating: float) -> Optional[Review]:
        """
        Handle the validate button.

        Args:
            raw_comment: Comment field content
            raw_rating: Rating bar value (fractions are truncated)

        Returns:
            The added Review, or None if it was rejected
        """
        comment = (raw_comment or "").strip()
        return self.controller.process(comment, int(raw_rating))

    def _on_restaurant(self, restaurant) -> None:
        if restaurant is None:
            return
        self.view.show_restaurant_name(restaurant.name)

    def _on_reviews(self, reviews: List[Review]) -> None:
        self.adapter.submit_list(reviews, self._on_list_committed)

    def _on_list_committed(self) -> None:
        self.view.show_reviews(self.adapter.items)
        self.view.scroll_to_top()

    def _on_rating_error(self, message: Optional[str]) -> None:
        if message is not None:
            self.view.show_message(message)

    def _on_success(self, is_success: bool) -> None:
        if not is_success:
            return
        self.view.clear_form()
        self.view.show_message(settings.REVIEW_ADDED_MESSAGE)
        self.controller.reset_success_event()
