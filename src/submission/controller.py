"""
Review Submission Controller.

Validates reviews entered by the current user, adds accepted ones to the
repository and reports the outcome through observables.
"""

import logging
from typing import Optional

from src.data.repository import RestaurantRepository
from src.models.review import Review
from src.reactive.observable import Observable, ReadOnlyObservable
from src.submission.user import StaticUserProvider
from src.submission.validation import ReviewValidationError, validate_review_input

logger = logging.getLogger(__name__)


class ReviewSubmissionController:
    """
    Gate-keeps new reviews.

    Exposes three observables to the view:
    - comment_error: message when the comment is rejected, else None
    - rating_error: message when the rating is rejected, else None
    - success_event: True after a review is added, until reset_success_event()
    """

    def __init__(self, repository: RestaurantRepository, user_provider=None):
        """
        Initialize controller.

        Args:
            repository: Store that receives accepted reviews
            user_provider: Source of the current user (defaults to the fixed user)
        """
        self.repository = repository
        self.user_provider = user_provider or StaticUserProvider()

        self._comment_error: Observable = Observable(name="comment-error")
        self._rating_error: Observable = Observable(name="rating-error")
        self._success_event: Observable = Observable(False, name="review-added")

    @property
    def comment_error(self) -> ReadOnlyObservable:
        return self._comment_error.as_readonly()

    @property
    def rating_error(self) -> ReadOnlyObservable:
        return self._rating_error.as_readonly()

    @property
    def success_event(self) -> ReadOnlyObservable:
        return self._success_event.as_readonly()

    def process(self, raw_comment: str, raw_rating: int) -> Optional[Review]:
        """
        Validate input and add the review if valid.

        Comment errors take precedence; when the comment is rejected the
        rating is not checked and rating_error is cleared. Data source
        failures propagate without touching success_event.

        Args:
            raw_comment: Comment text from the form
            raw_rating: Star count from the rating bar (0 = not selected)

        Returns:
            The added Review, or None if the input was rejected
        """
        comment = (raw_comment or "").strip()
        rating = raw_rating

        error = validate_review_input(comment, rating)

        if error is ReviewValidationError.EMPTY_COMMENT:
            self._comment_error.set(error.message)
            self._rating_error.set(None)
            logger.warning("Rejected review: empty comment")
            return None
        self._comment_error.set(None)

        if error is ReviewValidationError.MISSING_RATING:
            self._rating_error.set(error.message)
            logger.warning("Rejected review: no rating selected")
            return None
        self._rating_error.set(None)

        user = self.user_provider.current_user()
        review = Review(
            username=user.name,
            picture=user.picture,
            comment=comment,
            rate=rating
        )
        self.repository.append(review)

        self._success_event.set(True)
        return review

    def reset_success_event(self) -> None:
        """Mark the success event as handled. Idempotent."""
        self._success_event.set(False)

    def current_user(self):
        """Current user, for display next to the review form."""
        return self.user_provider.current_user()
