"""Data models for EcoScore."""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Optional, List, Dict


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Review:
    """Represents a single review."""
    text: str
    author: Optional[str] = None
    rating: Optional[float] = None
    time: Optional[int] = None


@dataclass
class PlaceDetails:
    """Place information as returned by the Places client."""
    place_id: Optional[str] = None
    name: str = ""
    description: str = ""
    address: str = ""
    phone: str = ""
    website: str = ""
    rating: float = 0.0
    price_level: int = 2
    reviews: List[Review] = field(default_factory=list)
    photos: List[str] = field(default_factory=list)
    opening_hours: List[str] = field(default_factory=list)


@dataclass
class PlacePrediction:
    """Autocomplete prediction for a place search."""
    place_id: str
    description: str


@dataclass
class EcoScores:
    """Scores for the five eco categories; None means no data."""
    energy_efficiency_score: Optional[float] = None
    waste_management_score: Optional[float] = None
    water_conservation_score: Optional[float] = None
    local_sourcing_score: Optional[float] = None
    carbon_footprint_score: Optional[float] = None

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def values(self) -> List[Optional[float]]:
        return list(self.as_dict().values())

    def valid_count(self) -> int:
        return sum(1 for score in self.values() if score is not None)

    def eco_rating(self) -> Optional[float]:
        """Average of the available category scores."""
        present = [score for score in self.values() if score is not None]
        if not present:
            return None
        return sum(present) / len(present)


@dataclass
class EcoScoreMetadata:
    """Diagnostics describing how a set of scores was produced."""
    reviews_analyzed: int = 0
    total_reviews: int = 0
    confidence_level: float = 1.0
    last_calculated: datetime = field(default_factory=utc_now)
    keyword_matches: int = 0
    valid_scores: int = 0
    text_length: int = 0
    error: Optional[str] = None
    is_default: bool = False
    google_place_id: Optional[str] = None


@dataclass
class EcoScoreResult:
    """Scores plus metadata. A result with an error carries no scores."""
    scores: EcoScores
    metadata: EcoScoreMetadata

    @property
    def ok(self) -> bool:
        return self.metadata.error is None

    @classmethod
    def failure(cls, error: str, reviews_analyzed: int = 0, total_reviews: int = 0,
                text_length: int = 0) -> "EcoScoreResult":
        """All-absent scores with the reason in metadata."""
        return cls(
            scores=EcoScores(),
            metadata=EcoScoreMetadata(
                reviews_analyzed=reviews_analyzed,
                total_reviews=total_reviews,
                confidence_level=1.0,
                text_length=text_length,
                error=error,
            ),
        )

