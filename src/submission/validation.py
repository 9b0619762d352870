"""
Review input validation.

Checks a (comment, rating) pair coming from the review form.
"""

from enum import Enum
from typing import Optional

import config.settings as settings


class ReviewValidationError(Enum):
    """Reasons a review submission is rejected, with their user message."""

    EMPTY_COMMENT = "empty_comment"
    MISSING_RATING = "missing_rating"

    @property
    def message(self) -> str:
        if self is ReviewValidationError.EMPTY_COMMENT:
            return settings.EMPTY_COMMENT_MESSAGE
        return settings.MISSING_RATING_MESSAGE


def validate_review_input(comment: str, rating: int) -> Optional[ReviewValidationError]:
    """
    Validate form input. The first failing check wins.

    Args:
        comment: Comment text, already trimmed
        rating: Star count from the rating bar (0 = nothing selected)

    Returns:
        The validation error, or None if the input is valid
    """
    if not comment:
        return ReviewValidationError.EMPTY_COMMENT

    if rating == settings.NO_RATING:
        return ReviewValidationError.MISSING_RATING

    return None
