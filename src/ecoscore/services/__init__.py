"""Services for EcoScore."""

from .google_client import GooglePlacesService
from .place_scoring import EcoScoreRefresher, needs_rescore, score_place_details

__all__ = [
    "GooglePlacesService",
    "EcoScoreRefresher",
    "needs_rescore",
    "score_place_details",
]
