"""Venue-level eco scoring: analysis with default fallback and batch refresh."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from ..core.config import settings
from ..core.constants import DataSource
from ..core.defaults import DEFAULT_VENUE_TYPE, get_default_eco_scores
from ..core.exceptions import EcoScoreError
from ..core.models import EcoScoreMetadata, EcoScoreResult, PlaceDetails, utc_now
from ..core.scoring import analyze_eco_scores
from .google_client import GooglePlacesService

logger = logging.getLogger(__name__)


@dataclass
class ScoredPlace:
    """Eco scores for a place and where they came from."""
    place: PlaceDetails
    result: EcoScoreResult
    data_source: str


@dataclass
class VenueRef:
    """A stored venue to refresh."""
    venue_id: str
    venue_type: str = DEFAULT_VENUE_TYPE
    google_place_id: Optional[str] = None
    metadata: Optional[EcoScoreMetadata] = None


@dataclass
class VenueOutcome:
    """Result of refreshing one venue."""
    venue_id: str
    status: str  # "success", "skipped" or "error"
    data_source: Optional[str] = None
    result: Optional[EcoScoreResult] = None
    error: Optional[str] = None


@dataclass
class RescoreSummary:
    """Counts for a batch refresh."""
    total: int = 0
    success: int = 0
    error: int = 0
    skipped: int = 0
    by_data_source: Dict[str, int] = field(default_factory=lambda: {
        DataSource.GOOGLE_PLACES: 0,
        DataSource.DEFAULT: 0,
        DataSource.DEFAULT_FALLBACK: 0,
    })
    outcomes: List[VenueOutcome] = field(default_factory=list)

    def record(self, outcome: VenueOutcome) -> None:
        self.outcomes.append(outcome)
        setattr(self, outcome.status, getattr(self, outcome.status) + 1)
        if outcome.data_source:
            self.by_data_source[outcome.data_source] = self.by_data_source.get(outcome.data_source, 0) + 1


def score_place_details(place: PlaceDetails, venue_type: str = DEFAULT_VENUE_TYPE) -> ScoredPlace:
    """Analyze a place's reviews, falling back to type defaults when there is no usable text."""
    result = analyze_eco_scores(place.reviews, place)

    if result.ok:
        data_source = DataSource.GOOGLE_PLACES
    else:
        logger.info(f"No eco scores from reviews for {place.name or place.place_id!r} "
                    f"({result.metadata.error}), using {venue_type} defaults")
        result = get_default_eco_scores(venue_type)
        data_source = DataSource.DEFAULT

    result.metadata.google_place_id = place.place_id
    return ScoredPlace(place=place, result=result, data_source=data_source)


def needs_rescore(metadata: Optional[EcoScoreMetadata], now: Optional[datetime] = None,
                  force: bool = False) -> bool:
    """Whether stored scores are stale or too uncertain to keep."""
    if force or metadata is None or metadata.last_calculated is None:
        return True

    now = now or utc_now()
    last_calculated = metadata.last_calculated
    if last_calculated.tzinfo is None:
        last_calculated = last_calculated.replace(tzinfo=timezone.utc)

    if now - last_calculated > timedelta(days=settings.rescore_max_age_days):
        return True
    return metadata.confidence_level < settings.rescore_min_confidence


class EcoScoreRefresher:
    """Recomputes eco scores for stored venues."""

    def __init__(self, places: Optional[GooglePlacesService] = None, max_workers: Optional[int] = None):
        self.places = places or GooglePlacesService()
        self.max_workers = max(1, max_workers or settings.max_workers)

    def rescore_venue(self, venue: VenueRef, force: bool = False) -> VenueOutcome:
        """Refresh one venue from Google Places, or from defaults when that is not possible."""
        if not needs_rescore(venue.metadata, force=force):
            logger.debug(f"Skipping {venue.venue_id}: recent high-confidence scores")
            return VenueOutcome(venue_id=venue.venue_id, status="skipped")

        if not venue.google_place_id:
            result = get_default_eco_scores(venue.venue_type)
            return VenueOutcome(venue_id=venue.venue_id, status="success",
                                data_source=DataSource.DEFAULT, result=result)

        try:
            place = self.places.get_place_details(venue.google_place_id)
        except EcoScoreError as e:
            logger.warning(f"Google Places error for {venue.venue_id}: {e}")
            result = get_default_eco_scores(venue.venue_type)
            result.metadata.google_place_id = venue.google_place_id
            return VenueOutcome(venue_id=venue.venue_id, status="success",
                                data_source=DataSource.DEFAULT_FALLBACK, result=result)

        scored = score_place_details(place, venue.venue_type)
        return VenueOutcome(venue_id=venue.venue_id, status="success",
                            data_source=scored.data_source, result=scored.result)

    def rescore(self, venues: List[VenueRef], force: bool = False) -> RescoreSummary:
        """Refresh venues in parallel and summarize the outcomes."""
        summary = RescoreSummary(total=len(venues))
        if not venues:
            return summary

        logger.info(f"Rescoring {len(venues)} venues with {self.max_workers} workers")
        start_time = time.time()

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_venue = {
                executor.submit(self.rescore_venue, venue, force): venue
                for venue in venues
            }

            for future in as_completed(future_to_venue):
                venue = future_to_venue[future]
                try:
                    outcome = future.result()
                except Exception as e:
                    logger.error(f"Rescoring {venue.venue_id} failed: {e}")
                    outcome = VenueOutcome(venue_id=venue.venue_id, status="error", error=str(e))
                summary.record(outcome)

        elapsed_time = time.time() - start_time
        logger.info(f"Rescored {summary.success} venues, skipped {summary.skipped}, "
                    f"{summary.error} errors in {elapsed_time:.1f}s")
        return summary
