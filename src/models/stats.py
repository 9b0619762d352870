"""
Review statistics data model.

Aggregates computed over the review list, ready to be displayed.
"""

from dataclasses import dataclass
from typing import Tuple

import config.settings as settings


@dataclass(frozen=True)
class ReviewStats:
    """
    Derived statistics over a list of reviews.

    Index i of both distributions refers to (i + 1)-star reviews.
    """
    average_rating: float
    review_count: int
    rating_distribution: Tuple[int, ...]  # Count of reviews per star level
    percent_distribution: Tuple[int, ...]  # Floor percentage per star level

    def __post_init__(self):
        # Accept lists from callers but store tuples
        object.__setattr__(self, "rating_distribution", tuple(self.rating_distribution))
        object.__setattr__(self, "percent_distribution", tuple(self.percent_distribution))

        if self.review_count < 0:
            raise ValueError(f"Invalid review_count: {self.review_count}. Must be >= 0")

        for name in ("rating_distribution", "percent_distribution"):
            values = getattr(self, name)
            if len(values) != settings.STAR_LEVELS:
                raise ValueError(
                    f"Invalid {name}: expected {settings.STAR_LEVELS} values, got {len(values)}"
                )

    @classmethod
    def empty(cls) -> "ReviewStats":
        """Statistics for a list with no reviews."""
        zeros = (0,) * settings.STAR_LEVELS
        return cls(0.0, 0, zeros, zeros)
