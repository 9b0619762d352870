"""
Console views.

Text renderings of the details and review list screens, used by the CLI.
"""

import sys
from typing import List, Optional

from src.models.restaurant import Restaurant
from src.models.review import Review
from src.models.stats import ReviewStats
from src.stats.aggregator import distribution_frame
from src.submission.user import CurrentUser
from src.views.details import DetailsView
from src.views.reviews import ReviewListView
import config.settings as settings


def star_bar(rate: int) -> str:
    """Render a rating as filled/empty stars."""
    filled = max(0, min(rate, settings.STAR_LEVELS))
    return "★" * filled + "☆" * (settings.STAR_LEVELS - filled)


class ConsoleDetailsView(DetailsView):
    """Prints the restaurant profile and the rating summary."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def render_restaurant(self, restaurant: Restaurant, day_label: str) -> None:
        services = []
        if restaurant.dine_in:
            services.append("Sur place")
        if restaurant.take_away:
            services.append("À emporter")

        self._print("=" * 60)
        self._print(restaurant.name)
        self._print(f"Restaurant {restaurant.type}")
        self._print(f"{day_label.capitalize()} : {restaurant.hours}")
        self._print(restaurant.address)
        self._print(restaurant.phone_number)
        self._print(restaurant.website)
        if services:
            self._print(" · ".join(services))
        self._print("=" * 60)

    def render_stats(self, stats: ReviewStats) -> None:
        self._print(f"{stats.average_rating:.1f} ({stats.review_count})")
        frame = distribution_frame(stats)
        for row in frame.itertuples(index=False):
            percent = int(row.Percent)
            bar = "#" * (percent // 5)
            self._print(f"{int(row.Stars)} {bar:<20} {percent:>3}% ({int(row.Count)})")

    def _print(self, text: str) -> None:
        print(text, file=self.stream)


class ConsoleReviewListView(ReviewListView):
    """Prints the review list and the form feedback."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self.comment_error: Optional[str] = None
        self.form_cleared = False
        self.scroll_count = 0

    def show_restaurant_name(self, name: str) -> None:
        self._print(f"--- Avis : {name} ---")

    def show_current_user(self, user: CurrentUser) -> None:
        self._print(f"Connecté en tant que {user.name}")

    def show_reviews(self, reviews: List[Review]) -> None:
        for review in reviews:
            comment = review.comment
            if len(comment) > settings.COMMENT_PREVIEW_LENGTH:
                comment = comment[:settings.COMMENT_PREVIEW_LENGTH - 1] + "…"
            self._print(f"{star_bar(review.rate)}  {review.username}")
            self._print(f"    {comment}")

    def scroll_to_top(self) -> None:
        self.scroll_count += 1

    def show_comment_error(self, message: Optional[str]) -> None:
        self.comment_error = message
        if message is not None:
            self._print(f"Commentaire : {message}")

    def show_message(self, message: str) -> None:
        self._print(f">> {message}")

    def clear_form(self) -> None:
        self.form_cleared = True

    def _print(self, text: str) -> None:
        print(text, file=self.stream)
