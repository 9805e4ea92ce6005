"""Baseline eco scores for venues without usable review text."""

import logging
from types import MappingProxyType
from typing import Mapping, Tuple

from .constants import ConfidenceConstants
from .models import EcoScores, EcoScoreMetadata, EcoScoreResult

logger = logging.getLogger(__name__)

DEFAULT_VENUE_TYPE = "hotel"

# energy, waste, water, local sourcing, carbon
DEFAULT_ECO_SCORES: Mapping[str, Tuple[int, int, int, int, int]] = MappingProxyType({
    "eco-lodge": (4, 4, 4, 4, 4),
    "resort": (3, 3, 3, 3, 2),
    "hotel": (3, 3, 3, 3, 3),
    "hostel": (3, 3, 3, 3, 3),
    "guesthouse": (3, 3, 3, 4, 3),
    "apartment": (3, 3, 3, 3, 3),
})


def get_default_eco_scores(venue_type: str = DEFAULT_VENUE_TYPE) -> EcoScoreResult:
    """Return the baseline scores for a venue type.

    Unknown or missing types use the hotel baseline. Confidence is fixed at 2
    so defaults are distinguishable from failed analyses (confidence 1).
    """
    values = DEFAULT_ECO_SCORES.get(venue_type) if isinstance(venue_type, str) else None
    if values is None:
        logger.debug(f"No default eco scores for venue type {venue_type!r}, using hotel")
        values = DEFAULT_ECO_SCORES[DEFAULT_VENUE_TYPE]

    return EcoScoreResult(
        scores=EcoScores(*values),
        metadata=EcoScoreMetadata(
            reviews_analyzed=0,
            confidence_level=ConfidenceConstants.DEFAULT_CONFIDENCE,
            keyword_matches=0,
            is_default=True,
        ),
    )
