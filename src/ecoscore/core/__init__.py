"""Core modules for EcoScore."""

from .models import *
from .config import settings
from .lexicon import ECO_KEYWORDS, LexiconCategory
from .scoring import (
    analyze_eco_scores,
    calculate_category_score,
    calculate_confidence_level,
    count_keyword_matches,
)
from .defaults import DEFAULT_ECO_SCORES, get_default_eco_scores

__all__ = [
    "settings",
    "Review",
    "PlaceDetails",
    "PlacePrediction",
    "EcoScores",
    "EcoScoreMetadata",
    "EcoScoreResult",
    "ECO_KEYWORDS",
    "LexiconCategory",
    "DEFAULT_ECO_SCORES",
    "analyze_eco_scores",
    "calculate_category_score",
    "calculate_confidence_level",
    "count_keyword_matches",
    "get_default_eco_scores",
]
