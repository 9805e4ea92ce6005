"""Constants and configuration values for EcoScore."""

# Category Scoring Constants
class ScoringConstants:
    """Constants for keyword-weighted category scoring."""

    BASE_SCORE = 2.5  # neutral midpoint
    HIGH_WEIGHT = 0.6  # per high-tier keyword present
    MEDIUM_WEIGHT = 0.3  # per medium-tier keyword present
    NEGATIVE_WEIGHT = 0.4  # per negative-tier keyword present

    MIN_SCORE = 1.0
    MAX_SCORE = 5.0

    MIN_CATEGORY_TEXT_LENGTH = 10  # chars; shorter text carries no signal
    MIN_REVIEW_TEXT_LENGTH = 5  # review text must be longer than this
    MIN_COMBINED_TEXT_LENGTH = 50  # chars of combined name/description/reviews

# Confidence Constants
class ConfidenceConstants:
    """Constants for confidence level calculation."""

    BASE_CONFIDENCE = 1.0
    DEFAULT_CONFIDENCE = 2.0  # unverified baseline scores
    MIN_VALID_REVIEW_LENGTH = 10  # review text must be longer than this

    # (threshold, bonus) pairs, highest bracket first
    REVIEW_COUNT_BRACKETS = ((50, 2.0), (20, 1.5), (10, 1.0), (5, 0.5))
    REVIEW_LENGTH_BRACKETS = ((200, 1.0), (100, 0.5))
    KEYWORD_MATCH_BRACKETS = ((20, 1.0), (10, 0.5), (5, 0.25))

    QUALITY_RATIO_WEIGHT = 0.5

# Error Messages
class ErrorMessages:
    """Messages surfaced in result metadata."""

    NO_REVIEWS = "No reviews available"
    NO_VALID_TEXT = "No valid review text found"
    INSUFFICIENT_TEXT = "Insufficient text for analysis"
    ANALYSIS_FAILED = "Analysis failed: {error}"

# Places API Constants
class PlacesConstants:
    """Constants for the Google Places integration."""

    DETAILS_FIELDS = (
        "name,formatted_address,formatted_phone_number,rating,photos,"
        "reviews,price_level,website,opening_hours,editorial_summary"
    )
    AUTOCOMPLETE_TYPES = "establishment"
    MAX_PHOTOS = 5
    PHOTO_MAX_WIDTH = 800
    DEFAULT_PRICE_LEVEL = 2

# Data Source Labels
class DataSource:
    """Where a venue's eco scores came from."""

    GOOGLE_PLACES = "google_places"
    DEFAULT = "default"
    DEFAULT_FALLBACK = "default_fallback"

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
