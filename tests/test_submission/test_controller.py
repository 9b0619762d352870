"""
Unit tests for review submission.

Controller tests use a mocked repository where only the calls matter,
and the in-memory fake API where the published list matters.
"""

import pytest
from unittest.mock import MagicMock
from src.data.repository import RestaurantRepository
from src.data.restaurant_api import RestaurantApiError, RestaurantFakeApi
from src.models.review import Review
from src.reactive.observable import LifetimeScope
from src.submission.controller import ReviewSubmissionController
from src.submission.user import StaticUserProvider
from src.submission.validation import ReviewValidationError, validate_review_input

EMPTY_COMMENT = "Désolés, le commentaire ne peut pas être vide"
MISSING_RATING = "Merci de donner une note"
USER_NAME = "Manon Garcia"
USER_PICTURE = "https://xsgames.co/randomusers/assets/avatars/female/20.jpg"


@pytest.fixture
def mock_repository():
    return MagicMock(spec=RestaurantRepository)


@pytest.fixture
def controller(mock_repository):
    return ReviewSubmissionController(mock_repository)


@pytest.fixture
def repository():
    return RestaurantRepository(RestaurantFakeApi(reviews=[]))


@pytest.fixture
def scope():
    scope = LifetimeScope("test")
    yield scope
    scope.close()


def test_validate_review_input():
    assert validate_review_input("", 5) is ReviewValidationError.EMPTY_COMMENT
    assert validate_review_input("", 0) is ReviewValidationError.EMPTY_COMMENT
    assert validate_review_input("Bon", 0) is ReviewValidationError.MISSING_RATING
    assert validate_review_input("Bon", 3) is None


def test_validation_messages():
    assert ReviewValidationError.EMPTY_COMMENT.message == EMPTY_COMMENT
    assert ReviewValidationError.MISSING_RATING.message == MISSING_RATING


def test_initial_state(controller):
    assert controller.success_event.current() is False
    assert not controller.comment_error.has_value
    assert not controller.rating_error.has_value


def test_valid_data_calls_repository(controller, mock_repository):
    controller.process("Great restaurant!", 4)

    mock_repository.append.assert_called_once()
    assert isinstance(mock_repository.append.call_args[0][0], Review)


def test_repository_called_with_current_user(controller, mock_repository):
    """The new review carries the current user's identity."""
    controller.process("Très bon service", 4)

    mock_repository.append.assert_called_once_with(
        Review(USER_NAME, USER_PICTURE, "Très bon service", 4)
    )


def test_empty_comment_sets_comment_error(controller, mock_repository):
    """Empty comment is rejected before the rating is looked at."""
    controller.process("", 5)

    assert controller.comment_error.current() == EMPTY_COMMENT
    assert controller.rating_error.current() is None
    assert controller.success_event.current() is False
    mock_repository.append.assert_not_called()


def test_whitespace_comment_is_empty(controller, mock_repository):
    controller.process("   \n", 5)

    assert controller.comment_error.current() == EMPTY_COMMENT
    mock_repository.append.assert_not_called()


def test_empty_comment_clears_previous_rating_error(controller):
    controller.process("Great restaurant!", 0)
    assert controller.rating_error.current() == MISSING_RATING

    controller.process("", 0)

    assert controller.comment_error.current() == EMPTY_COMMENT
    assert controller.rating_error.current() is None


def test_zero_rating_sets_rating_error(controller, mock_repository):
    controller.process("Great restaurant!", 0)

    assert controller.comment_error.current() is None
    assert controller.rating_error.current() == MISSING_RATING
    mock_repository.append.assert_not_called()


def test_out_of_range_rating_is_added(repository):
    """Only 0 means no rating; other values reach the store unchanged."""
    controller = ReviewSubmissionController(repository)

    added = controller.process("Great restaurant!", 6)

    assert repository.current_reviews() == [added]
    assert added.rate == 6
    assert controller.rating_error.current() is None
    assert controller.success_event.current() is True


def test_at_most_one_error_after_any_call(controller):
    for comment, rating in [("", 0), ("ok", 0), ("", 3), ("ok", 3), ("ok", 0), ("", 5)]:
        controller.process(comment, rating)
        errors = [controller.comment_error.current(), controller.rating_error.current()]
        assert sum(e is not None for e in errors) <= 1


def test_valid_submission_end_to_end(repository, scope):
    """A valid review is published in a new list and success is signalled."""
    controller = ReviewSubmissionController(repository)
    emissions = []
    repository.reviews().subscribe(scope, emissions.append)

    added = controller.process("Très bon service", 4)

    assert len(emissions) == 2
    published = emissions[-1]
    assert published is not emissions[0]
    assert len(published) == 1
    assert published[0].username == USER_NAME
    assert published[0].picture == USER_PICTURE
    assert published[0].comment == "Très bon service"
    assert published[0].rate == 4
    assert published[0] == added
    assert controller.success_event.current() is True
    assert controller.comment_error.current() is None
    assert controller.rating_error.current() is None


def test_comment_is_trimmed(repository):
    controller = ReviewSubmissionController(repository)

    controller.process("  Délicieux  ", 5)

    assert repository.current_reviews()[0].comment == "Délicieux"


def test_reset_success_event(repository, scope):
    """Reset sets the event back to False; late subscribers see False."""
    controller = ReviewSubmissionController(repository)
    controller.process("Très bon service", 4)
    assert controller.success_event.current() is True

    controller.reset_success_event()

    assert controller.success_event.current() is False
    seen = []
    controller.success_event.subscribe(scope, seen.append)
    assert seen == [False]


def test_reset_success_event_is_idempotent(controller):
    controller.reset_success_event()
    controller.reset_success_event()

    assert controller.success_event.current() is False


def test_resubmission_after_success_validates_again(repository):
    controller = ReviewSubmissionController(repository)
    controller.process("Très bon service", 4)

    controller.process("", 4)

    assert controller.comment_error.current() == EMPTY_COMMENT
    assert len(repository.current_reviews()) == 1


def test_repository_failure_propagates(controller, mock_repository):
    """Data source errors reach the caller; success is not signalled."""
    mock_repository.append.side_effect = RestaurantApiError("storage unavailable")

    with pytest.raises(RestaurantApiError):
        controller.process("Great restaurant!", 4)

    assert controller.success_event.current() is False
    assert controller.comment_error.current() is None
    assert controller.rating_error.current() is None


def test_custom_user_provider(mock_repository):
    controller = ReviewSubmissionController(
        mock_repository, StaticUserProvider("Jane Smith", "https://example.com/image2.jpg")
    )

    controller.process("Excellent service!", 5)

    review = mock_repository.append.call_args[0][0]
    assert review.username == "Jane Smith"
    assert review.picture == "https://example.com/image2.jpg"
