"""
Taj Mahal Reviews

CLI entry point: shows the restaurant details and its reviews, and
optionally submits a new review as the current user.
"""

import argparse
import logging
import sys

from src.app import TajMahalApp
from src.reactive.observable import LifetimeScope
from src.views.console import ConsoleDetailsView, ConsoleReviewListView
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Taj Mahal - restaurant details and customer reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the restaurant and its reviews
  python main.py

  # Add a review as the current user
  python main.py --comment "Très bon service" --rating 4
        """
    )

    parser.add_argument(
        "--comment",
        help="Comment of the review to add"
    )

    parser.add_argument(
        "--rating",
        type=float,
        default=settings.NO_RATING,
        help=f"Star rating of the review to add, 1-{settings.STAR_LEVELS} (default: none)"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        app = TajMahalApp()

        with LifetimeScope("details") as details_scope:
            app.open_details(ConsoleDetailsView(), details_scope)

        with LifetimeScope("reviews") as reviews_scope:
            reviews_view = ConsoleReviewListView()
            binder = app.open_reviews(reviews_view, reviews_scope)

            if args.comment is not None or args.rating != settings.NO_RATING:
                review = binder.submit(args.comment or "", args.rating)
                if review is None:
                    sys.exit(1)

        app.shutdown()
        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Failed: {e}", exc_info=True)
        print(f"\n❌ Failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
