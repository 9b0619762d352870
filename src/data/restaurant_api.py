"""
Restaurant API.

Data source for the restaurant descriptor and its reviews.
Ships an in-memory implementation seeded with the Taj Mahal data.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from src.models.restaurant import Restaurant
from src.models.review import Review

logger = logging.getLogger(__name__)


class RestaurantApiError(Exception):
    """Raised when the restaurant data source cannot serve a request."""


class RestaurantApi(ABC):
    """
    Data source seam used by the repository.

    Implementations own the underlying review storage.
    """

    @abstractmethod
    def get_restaurant(self) -> Restaurant:
        """Return the restaurant descriptor."""

    @abstractmethod
    def get_reviews(self) -> List[Review]:
        """Return the current reviews, most recent first."""

    @abstractmethod
    def add_review(self, review: Review) -> None:
        """Store a new review."""


# Seed data
TAJ_MAHAL = {
    "name": "Taj Mahal",
    "type": "Indien",
    "hours": "11h30 - 14h30・18h30 - 22h00",
    "address": "12 Avenue de la Brique - 75010 Paris",
    "website": "http://www.tajmahal.fr",
    "phone_number": "06 12 34 56 78",
    "dine_in": True,
    "take_away": False,
}

SEED_REVIEWS = [
    {
        "username": "Ranjit Singh",
        "picture": "https://xsgames.co/randomusers/assets/avatars/male/71.jpg",
        "comment": "Service très rapide et nourriture délicieuse, nous mangeons ici chaque week-end, "
                   "c'est très rapide et savoureux. Continuez ainsi!",
        "rate": 5,
    },
    {
        "username": "Martyna Siddeswara",
        "picture": "https://xsgames.co/randomusers/assets/avatars/female/31.jpg",
        "comment": "Un service excellent et des plats incroyablement savoureux. "
                   "Nous sommes vraiment satisfaits de notre expérience au restaurant.",
        "rate": 4,
    },
    {
        "username": "Komala Alanazi",
        "picture": "https://xsgames.co/randomusers/assets/avatars/male/46.jpg",
        "comment": "La cuisine est délicieuse et le service est également très bon. "
                   "Le personnel est très accueillant et attentif.",
        "rate": 3,
    },
    {
        "username": "David John",
        "picture": "https://xsgames.co/randomusers/assets/avatars/male/67.jpg",
        "comment": "Les currys étaient délicieux mais l'attente a été un peu longue ce soir-là.",
        "rate": 4,
    },
    {
        "username": "Emilie Hood",
        "picture": "https://xsgames.co/randomusers/assets/avatars/female/12.jpg",
        "comment": "Très bon restaurant indien, je recommande le poulet tikka masala !",
        "rate": 5,
    },
]


class RestaurantFakeApi(RestaurantApi):
    """
    In-memory data source.

    New reviews are inserted at the head of the list so the latest
    review is shown first.
    """

    def __init__(
        self,
        restaurant: Optional[Restaurant] = None,
        reviews: Optional[List[Review]] = None
    ):
        """
        Initialize the fake API.

        Args:
            restaurant: Descriptor to serve (defaults to the Taj Mahal)
            reviews: Initial reviews (defaults to the seeded reviews)
        """
        self._restaurant = restaurant or Restaurant.from_dict(TAJ_MAHAL)
        if reviews is None:
            reviews = [Review.from_dict(data) for data in SEED_REVIEWS]
        self._reviews: List[Review] = list(reviews)

        logger.info(
            f"Initialized RestaurantFakeApi for '{self._restaurant.name}' "
            f"with {len(self._reviews)} reviews"
        )

    def get_restaurant(self) -> Restaurant:
        return self._restaurant

    def get_reviews(self) -> List[Review]:
        # Live list; callers that keep it must copy
        return self._reviews

    def add_review(self, review: Review) -> None:
        if not isinstance(review, Review):
            raise RestaurantApiError(f"Cannot store {type(review).__name__} as a review")
        self._reviews.insert(0, review)
        logger.debug(f"Stored review by {review.username} ({len(self._reviews)} total)")
