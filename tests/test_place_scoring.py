"""Tests for venue scoring, refresh policy and batch rescoring."""

from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from ecoscore.core.constants import DataSource
from ecoscore.core.exceptions import PlacesAPIError
from ecoscore.core.models import EcoScoreMetadata, PlaceDetails, Review
from ecoscore.services.place_scoring import (
    EcoScoreRefresher,
    VenueRef,
    needs_rescore,
    score_place_details,
)

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def _eco_place(place_id="place-eco"):
    return PlaceDetails(
        place_id=place_id,
        name="Green Valley Eco Lodge",
        description="Sustainable accommodation with renewable energy and local sourcing",
        reviews=[
            Review(text="Solar panels on the roof, excellent recycling and composting, "
                        "and breakfast is farm to table with local produce."),
            Review(text="Rainwater harvesting for the gardens and low flow showers. Very walkable area."),
        ],
    )


class TestScorePlaceDetails:
    """Test analysis with default fallback."""

    def test_scores_from_reviews(self):
        scored = score_place_details(_eco_place())

        assert scored.data_source == DataSource.GOOGLE_PLACES
        assert scored.result.ok
        assert scored.result.metadata.reviews_analyzed == 2
        assert scored.result.metadata.google_place_id == "place-eco"
        assert scored.result.scores.waste_management_score >= 3.5

    def test_falls_back_to_defaults(self):
        place = PlaceDetails(place_id="place-empty", name="Sea View", reviews=[])

        scored = score_place_details(place, "resort")

        assert scored.data_source == DataSource.DEFAULT
        assert scored.result.metadata.is_default is True
        assert scored.result.metadata.google_place_id == "place-empty"
        assert scored.result.scores.carbon_footprint_score == 2


class TestNeedsRescore:
    """Test the refresh policy."""

    def test_missing_metadata(self):
        assert needs_rescore(None, now=NOW)

    def test_recent_confident_scores_are_kept(self):
        meta = EcoScoreMetadata(confidence_level=3, last_calculated=NOW - timedelta(days=2))
        assert not needs_rescore(meta, now=NOW)

    def test_low_confidence(self):
        meta = EcoScoreMetadata(confidence_level=2.5, last_calculated=NOW - timedelta(days=1))
        assert needs_rescore(meta, now=NOW)

    def test_stale_scores(self):
        meta = EcoScoreMetadata(confidence_level=4.5, last_calculated=NOW - timedelta(days=8))
        assert needs_rescore(meta, now=NOW)

    def test_force(self):
        meta = EcoScoreMetadata(confidence_level=5, last_calculated=NOW)
        assert needs_rescore(meta, now=NOW, force=True)

    def test_naive_timestamp(self):
        meta = EcoScoreMetadata(confidence_level=4, last_calculated=datetime(2026, 5, 31, 12, 0))
        assert not needs_rescore(meta, now=NOW)


class TestEcoScoreRefresher:
    """Test batch rescoring."""

    def setup_method(self):
        self.places = Mock()
        self.refresher = EcoScoreRefresher(places=self.places, max_workers=2)

    def _get_place_details(self, place_id):
        if place_id == "place-down":
            raise PlacesAPIError("Google Places returned UNKNOWN_ERROR")
        if place_id == "place-broken":
            raise RuntimeError("unexpected payload")
        return _eco_place(place_id)

    def test_rescore_summary(self):
        self.places.get_place_details.side_effect = self._get_place_details
        fresh = EcoScoreMetadata(confidence_level=4, last_calculated=datetime.now(timezone.utc))
        venues = [
            VenueRef("v1", "eco-lodge"),
            VenueRef("v2", "hotel", google_place_id="place-eco"),
            VenueRef("v3", "guesthouse", google_place_id="place-down"),
            VenueRef("v4", "hotel", google_place_id="place-eco", metadata=fresh),
            VenueRef("v5", "hotel", google_place_id="place-broken"),
        ]

        summary = self.refresher.rescore(venues)

        assert summary.total == 5
        assert summary.success == 3
        assert summary.skipped == 1
        assert summary.error == 1
        assert summary.by_data_source == {
            DataSource.GOOGLE_PLACES: 1,
            DataSource.DEFAULT: 1,
            DataSource.DEFAULT_FALLBACK: 1,
        }

        outcomes = {o.venue_id: o for o in summary.outcomes}
        assert outcomes["v1"].result.scores.energy_efficiency_score == 4
        assert outcomes["v3"].result.metadata.google_place_id == "place-down"
        assert outcomes["v3"].result.scores.local_sourcing_score == 4
        assert outcomes["v5"].error == "unexpected payload"
        assert outcomes["v4"].result is None

    def test_force_rescores_fresh_venues(self):
        self.places.get_place_details.side_effect = self._get_place_details
        fresh = EcoScoreMetadata(confidence_level=5, last_calculated=datetime.now(timezone.utc))

        summary = self.refresher.rescore([VenueRef("v1", google_place_id="place-eco", metadata=fresh)],
                                         force=True)

        assert summary.success == 1
        assert summary.outcomes[0].data_source == DataSource.GOOGLE_PLACES

    def test_empty_batch(self):
        summary = self.refresher.rescore([])
        assert summary.total == 0
        assert summary.outcomes == []
        self.places.get_place_details.assert_not_called()
