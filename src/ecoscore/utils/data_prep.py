"""Data preparation for storing and exporting eco scores."""

import json
from datetime import datetime
from typing import Dict, Any, List

from ..core.models import EcoScoreResult

# Record field names used by the venue documents
SCORE_FIELDS = {
    "energy_efficiency_score": "energyEfficiencyScore",
    "waste_management_score": "wasteManagementScore",
    "water_conservation_score": "waterConservationScore",
    "local_sourcing_score": "localSourcingScore",
    "carbon_footprint_score": "carbonFootprintScore",
}


def result_to_record(result: EcoScoreResult) -> Dict[str, Any]:
    """Convert a result into venue record fields.

    Category scores become top-level fields; metadata goes under
    ``ecoScoreMetadata``. Optional metadata keys are only written when set.
    """
    record: Dict[str, Any] = {
        SCORE_FIELDS[name]: score for name, score in result.scores.as_dict().items()
    }
    record["ecoRating"] = result.scores.eco_rating()

    meta = result.metadata
    metadata: Dict[str, Any] = {
        "reviewsAnalyzed": meta.reviews_analyzed,
        "totalReviews": meta.total_reviews,
        "confidenceLevel": meta.confidence_level,
        "lastCalculated": meta.last_calculated.isoformat(),
        "keywordMatches": meta.keyword_matches,
        "validScores": meta.valid_scores,
        "textLength": meta.text_length,
        "isDefault": meta.is_default,
    }
    if meta.error is not None:
        metadata["error"] = meta.error
    if meta.google_place_id is not None:
        metadata["googlePlaceId"] = meta.google_place_id
    record["ecoScoreMetadata"] = metadata

    return record


def prepare_export(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap venue records for JSON export."""
    return {
        "records": records,
        "metadata": {
            "exportTimestamp": None,  # Will be set by export_to_json
            "count": len(records),
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["exportTimestamp"] = datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
