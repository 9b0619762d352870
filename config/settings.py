"""
Configuration settings for Taj Mahal Reviews.

Centralized configuration for the review store, submission flow and views.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent

# Current user (fixed until a user repository exists)
CURRENT_USER_NAME = "Manon Garcia"
CURRENT_USER_PICTURE = "https://xsgames.co/randomusers/assets/avatars/female/20.jpg"

# User-visible messages
EMPTY_COMMENT_MESSAGE = "Désolés, le commentaire ne peut pas être vide"
MISSING_RATING_MESSAGE = "Merci de donner une note"
REVIEW_ADDED_MESSAGE = "Avis ajouté avec succès"

# Ratings
STAR_LEVELS = 5  # Ratings run from 1 to STAR_LEVELS
NO_RATING = 0  # Rating bar value when nothing is selected

# Views
COMMENT_PREVIEW_LENGTH = 80  # Console list truncates comments to this width

# Logging
LOG_LEVEL = os.getenv("TAJMAHAL_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "tajmahal.log"
