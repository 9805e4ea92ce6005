"""EcoScore - keyword-based eco scoring of venue reviews."""

__version__ = "1.0.0"
__author__ = "EcoScore Team"

from .core.models import *
from .core.config import settings
from .core.scoring import analyze_eco_scores, calculate_category_score, calculate_confidence_level
from .core.defaults import get_default_eco_scores

__all__ = [
    "settings",
    "analyze_eco_scores",
    "calculate_category_score",
    "calculate_confidence_level",
    "get_default_eco_scores",
]
