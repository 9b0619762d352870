"""
Review Statistics Aggregator.

Derives average rating, review count and the per-star distribution from
the review list, and keeps them in sync with the repository.
"""

import logging
from typing import List, Optional

import pandas as pd

from src.data.repository import RestaurantRepository
from src.models.review import Review
from src.models.stats import ReviewStats
from src.reactive.observable import LifetimeScope, ReadOnlyObservable, derive
import config.settings as settings

logger = logging.getLogger(__name__)


def compute_review_stats(reviews: Optional[List[Review]]) -> ReviewStats:
    """
    Compute statistics over a review list.

    Reviews rated outside 1..STAR_LEVELS are left out of the average sum and
    of the distribution, but still count towards review_count, so the
    average and the percentages are relative to all reviews.

    Args:
        reviews: Review list (None is treated as empty)

    Returns:
        Fresh ReviewStats
    """
    if not reviews:
        return ReviewStats.empty()

    total = 0
    distribution = [0] * settings.STAR_LEVELS
    for review in reviews:
        rate = review.rate
        if 1 <= rate <= settings.STAR_LEVELS:
            distribution[rate - 1] += 1
            total += rate

    count = len(reviews)
    average = total / count
    percent = [(100 * n) // count for n in distribution]

    return ReviewStats(
        average_rating=average,
        review_count=count,
        rating_distribution=tuple(distribution),
        percent_distribution=tuple(percent)
    )


def distribution_frame(stats: ReviewStats) -> pd.DataFrame:
    """
    Tabulate the star distribution, highest rating first.

    Columns: Stars, Count, Percent.
    """
    rows = [
        {
            "Stars": stars,
            "Count": stats.rating_distribution[stars - 1],
            "Percent": stats.percent_distribution[stars - 1]
        }
        for stars in range(settings.STAR_LEVELS, 0, -1)
    ]
    return pd.DataFrame(rows, columns=["Stars", "Count", "Percent"])


class ReviewStatsAggregator:
    """
    Keeps an Observable[ReviewStats] in sync with the repository's reviews.

    Stats are recomputed synchronously on every review list emission, so
    a stats update always follows the review update that caused it.
    """

    def __init__(self, repository: RestaurantRepository, scope: Optional[LifetimeScope] = None):
        """
        Initialize aggregator and subscribe to the review list.

        Args:
            repository: Store publishing the review list
            scope: Lifetime of the subscription (defaults to a scope owned
                   by the aggregator, living as long as the repository)
        """
        self.repository = repository
        self.scope = scope or LifetimeScope("review-stats")
        self._stats = derive(
            repository.reviews(),
            self._recompute,
            self.scope,
            name="review-stats"
        )

    @property
    def stats(self) -> ReadOnlyObservable:
        """Observable holding the latest ReviewStats."""
        return self._stats.as_readonly()

    def close(self) -> None:
        """Stop following the repository."""
        self.scope.close()

    def _recompute(self, reviews: List[Review]) -> ReviewStats:
        stats = compute_review_stats(reviews)
        logger.debug(
            f"Recomputed stats: {stats.review_count} reviews, "
            f"average {stats.average_rating:.2f}, distribution {list(stats.rating_distribution)}"
        )
        return stats
