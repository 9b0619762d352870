"""
Unit tests for review statistics.
"""

import pytest
from src.data.repository import RestaurantRepository
from src.data.restaurant_api import RestaurantFakeApi
from src.models.review import Review
from src.models.stats import ReviewStats
from src.reactive.observable import LifetimeScope
from src.stats.aggregator import ReviewStatsAggregator, compute_review_stats, distribution_frame


def make_reviews(*rates):
    return [Review(f"user_{i}", "pic", f"comment {i}", rate) for i, rate in enumerate(rates)]


@pytest.fixture
def scope():
    scope = LifetimeScope("test")
    yield scope
    scope.close()


def test_empty_reviews():
    """Empty or missing lists give all-zero stats."""
    assert compute_review_stats([]) == ReviewStats(0.0, 0, (0, 0, 0, 0, 0), (0, 0, 0, 0, 0))
    assert compute_review_stats(None) == ReviewStats.empty()


def test_mixed_ratings():
    stats = compute_review_stats(make_reviews(5, 5, 4, 3, 1))

    assert stats.average_rating == pytest.approx(3.6)
    assert stats.review_count == 5
    assert stats.rating_distribution == (1, 0, 1, 1, 2)
    assert stats.percent_distribution == (20, 0, 20, 20, 40)


def test_out_of_range_rates():
    """Out-of-range rates count towards the total only."""
    stats = compute_review_stats(make_reviews(3, 0, 6))

    assert stats.average_rating == pytest.approx(1.0)
    assert stats.review_count == 3
    assert stats.rating_distribution == (0, 0, 1, 0, 0)
    assert stats.percent_distribution == (0, 0, 33, 0, 0)


def test_percentages_are_floored():
    stats = compute_review_stats(make_reviews(1, 2, 3))

    assert stats.percent_distribution == (33, 33, 33, 0, 0)
    assert sum(stats.percent_distribution) == 99


@pytest.mark.parametrize("rates", [
    (1,),
    (5, 5, 5),
    (2, 4, -1, 0, 5, 7),
    (3,) * 7 + (1,) * 2,
])
def test_stats_invariants(rates):
    reviews = make_reviews(*rates)
    stats = compute_review_stats(reviews)
    in_range = [r for r in rates if 1 <= r <= 5]

    assert stats.review_count == len(reviews)
    assert sum(stats.rating_distribution) == len(in_range)
    assert all(n >= 0 for n in stats.rating_distribution)
    assert all(0 <= p <= 100 for p in stats.percent_distribution)
    assert stats.average_rating == pytest.approx(sum(in_range) / len(reviews))


def test_distribution_frame():
    """Frame lists stars from highest to lowest."""
    stats = compute_review_stats(make_reviews(5, 5, 4, 3, 1))

    frame = distribution_frame(stats)

    assert list(frame.columns) == ["Stars", "Count", "Percent"]
    assert frame["Stars"].tolist() == [5, 4, 3, 2, 1]
    assert frame["Count"].tolist() == [2, 1, 1, 0, 1]
    assert frame["Percent"].tolist() == [40, 20, 20, 0, 20]


def test_aggregator_initial_stats():
    repository = RestaurantRepository(RestaurantFakeApi(reviews=make_reviews(5, 4)))
    aggregator = ReviewStatsAggregator(repository)

    stats = aggregator.stats.current()

    assert stats.review_count == 2
    assert stats.average_rating == pytest.approx(4.5)


def test_aggregator_recomputes_after_append(scope):
    """Appending one review adds exactly one to the count and its star bucket."""
    repository = RestaurantRepository(RestaurantFakeApi(reviews=make_reviews(5, 3)))
    aggregator = ReviewStatsAggregator(repository)
    emissions = []
    aggregator.stats.subscribe(scope, emissions.append)
    before = aggregator.stats.current()

    repository.append(Review("Manon Garcia", "pic", "Très bon service", 4))

    after = aggregator.stats.current()
    assert len(emissions) == 2
    assert after is not before
    assert after.review_count == before.review_count + 1
    deltas = [a - b for a, b in zip(after.rating_distribution, before.rating_distribution)]
    assert deltas == [0, 0, 0, 1, 0]


def test_aggregator_append_out_of_range(scope):
    repository = RestaurantRepository(RestaurantFakeApi(reviews=make_reviews(5)))
    aggregator = ReviewStatsAggregator(repository)
    before = aggregator.stats.current()

    repository.append(Review("John Doe", "pic", "?", 0))

    after = aggregator.stats.current()
    assert after.review_count == 2
    assert after.rating_distribution == before.rating_distribution


def test_stats_delivered_after_reviews(scope):
    """The stats update follows the reviews emission that caused it."""
    repository = RestaurantRepository(RestaurantFakeApi(reviews=[]))
    events = []
    repository.reviews().subscribe(scope, lambda r: events.append(("reviews", len(r))))
    aggregator = ReviewStatsAggregator(repository)
    aggregator.stats.subscribe(scope, lambda s: events.append(("stats", s.review_count)))
    events.clear()

    repository.append(Review("John Doe", "pic", "Bon", 4))

    assert events.index(("stats", 1)) > events.index(("reviews", 1))


def test_aggregator_close_stops_updates():
    repository = RestaurantRepository(RestaurantFakeApi(reviews=[]))
    aggregator = ReviewStatsAggregator(repository)

    aggregator.close()
    repository.append(Review("John Doe", "pic", "Bon", 4))

    assert aggregator.stats.current().review_count == 0
