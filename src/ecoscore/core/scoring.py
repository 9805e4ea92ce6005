"""Keyword-weighted eco scoring of review text."""

import logging
import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from .constants import ScoringConstants, ConfidenceConstants, ErrorMessages
from .lexicon import ECO_KEYWORDS, LexiconCategory
from .models import EcoScores, EcoScoreMetadata, EcoScoreResult

logger = logging.getLogger(__name__)


def _round_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up."""
    return math.floor(value * 2 + 0.5) / 2


def _clamp(value: float, lo: float = ScoringConstants.MIN_SCORE, hi: float = ScoringConstants.MAX_SCORE) -> float:
    return max(lo, min(hi, value))


def _count_present(text: str, keywords: Iterable[str]) -> int:
    """Number of distinct keywords contained in already lower-cased text."""
    return sum(1 for keyword in keywords if keyword.lower() in text)


def _bracket_bonus(value: float, brackets: Sequence[Tuple[float, float]]) -> float:
    """Bonus of the first (highest) bracket whose threshold is reached."""
    for threshold, bonus in brackets:
        if value >= threshold:
            return bonus
    return 0.0


def _review_text(review: Any) -> Optional[str]:
    """Text of a review object or a {"text": ...} mapping."""
    if isinstance(review, Mapping):
        return review.get("text")
    return getattr(review, "text", None)


def _is_valid_review(review: Any) -> bool:
    text = _review_text(review)
    return isinstance(text, str) and len(text.strip()) > ScoringConstants.MIN_REVIEW_TEXT_LENGTH


def _place_field(place_details: Any, name: str) -> str:
    if place_details is None:
        return ""
    if isinstance(place_details, Mapping):
        value = place_details.get(name)
    else:
        value = getattr(place_details, name, None)
    return value if isinstance(value, str) else ""


def calculate_category_score(text: Optional[str], category: Optional[LexiconCategory]) -> Optional[float]:
    """
    Score one eco category from free text.

    Starts at the neutral midpoint and moves up for each high or medium tier
    keyword present and down for each negative keyword present. The result is
    clamped to [1, 5] and rounded to the nearest half point.

    Returns None when the text is missing or too short to carry signal, or if
    scoring fails.
    """
    if not text or category is None:
        return None

    try:
        clean_text = text.lower().strip()
        if len(clean_text) < ScoringConstants.MIN_CATEGORY_TEXT_LENGTH:
            return None

        high_matches = _count_present(clean_text, category.high)
        medium_matches = _count_present(clean_text, category.medium)
        negative_matches = _count_present(clean_text, category.negative)

        score = ScoringConstants.BASE_SCORE
        score += high_matches * ScoringConstants.HIGH_WEIGHT
        score += medium_matches * ScoringConstants.MEDIUM_WEIGHT
        score -= negative_matches * ScoringConstants.NEGATIVE_WEIGHT

        return _round_half(_clamp(score))
    except Exception as e:
        logger.error(f"Category scoring failed: {e}")
        return None


def count_keyword_matches(text: str, lexicon: Mapping[str, LexiconCategory] = ECO_KEYWORDS) -> int:
    """Total keywords present in text across every tier of every category."""
    clean_text = (text or "").lower()
    return sum(_count_present(clean_text, category.all_keywords()) for category in lexicon.values())


def calculate_confidence_level(reviews: Optional[Sequence[Any]], total_matches: int) -> float:
    """
    Confidence in a set of scores, from 1 to 5 in half steps.

    Rewards more reviews, longer reviews, more eco keyword hits and a higher
    share of reviews with meaningful text.
    """
    try:
        if not reviews:
            return ConfidenceConstants.BASE_CONFIDENCE

        review_count = len(reviews)
        valid_texts = [
            text for text in (_review_text(r) for r in reviews)
            if isinstance(text, str) and len(text.strip()) > ConfidenceConstants.MIN_VALID_REVIEW_LENGTH
        ]
        avg_review_length = sum(len(text) for text in valid_texts) / max(len(valid_texts), 1)

        confidence = ConfidenceConstants.BASE_CONFIDENCE
        confidence += _bracket_bonus(review_count, ConfidenceConstants.REVIEW_COUNT_BRACKETS)
        confidence += _bracket_bonus(avg_review_length, ConfidenceConstants.REVIEW_LENGTH_BRACKETS)
        confidence += _bracket_bonus(total_matches, ConfidenceConstants.KEYWORD_MATCH_BRACKETS)

        quality_ratio = len(valid_texts) / max(review_count, 1)
        confidence += quality_ratio * ConfidenceConstants.QUALITY_RATIO_WEIGHT

        return _clamp(_round_half(confidence))
    except Exception as e:
        logger.error(f"Confidence calculation failed: {e}")
        return ConfidenceConstants.BASE_CONFIDENCE


def _combined_text(valid_reviews: List[Any], place_details: Any) -> str:
    sources = [
        _place_field(place_details, "name"),
        _place_field(place_details, "description"),
        *(_review_text(review) for review in valid_reviews),
    ]
    return " ".join(text for text in sources if text.strip()).lower()


def analyze_eco_scores(reviews: Any, place_details: Any = None) -> EcoScoreResult:
    """
    Analyze reviews and calculate eco scores for all categories.

    Every category is scored against the same combined text made of the
    place name, its description and all valid review texts. This function
    never raises: empty input, missing text and unexpected failures all come
    back as a result with no scores and ``metadata.error`` set.

    Args:
        reviews: List of reviews, each a ``Review`` or a mapping with ``text``
        place_details: Optional ``PlaceDetails`` or mapping with ``name`` and
            ``description``

    Returns:
        EcoScoreResult with the five category scores and metadata
    """
    try:
        if not isinstance(reviews, (list, tuple)):
            logger.warning("analyze_eco_scores: reviews is not a list, using empty list")
            reviews = []

        if not reviews:
            return EcoScoreResult.failure(ErrorMessages.NO_REVIEWS)

        valid_reviews = [review for review in reviews if _is_valid_review(review)]
        if not valid_reviews:
            return EcoScoreResult.failure(
                ErrorMessages.NO_VALID_TEXT,
                reviews_analyzed=len(reviews),
                total_reviews=len(reviews),
            )

        all_text = _combined_text(valid_reviews, place_details)
        if len(all_text.strip()) < ScoringConstants.MIN_COMBINED_TEXT_LENGTH:
            return EcoScoreResult.failure(
                ErrorMessages.INSUFFICIENT_TEXT,
                reviews_analyzed=len(valid_reviews),
                total_reviews=len(reviews),
                text_length=len(all_text),
            )

        scores = EcoScores(**{
            field_name: calculate_category_score(all_text, category)
            for field_name, category in ECO_KEYWORDS.items()
        })
        total_matches = count_keyword_matches(all_text)
        confidence_level = calculate_confidence_level(valid_reviews, total_matches)

        logger.debug(
            f"Analyzed {len(valid_reviews)}/{len(reviews)} reviews: "
            f"{total_matches} keyword matches, confidence {confidence_level}"
        )

        return EcoScoreResult(
            scores=scores,
            metadata=EcoScoreMetadata(
                reviews_analyzed=len(valid_reviews),
                total_reviews=len(reviews),
                confidence_level=confidence_level,
                keyword_matches=total_matches,
                valid_scores=scores.valid_count(),
                text_length=len(all_text),
            ),
        )
    except Exception as e:
        logger.error(f"Eco score analysis failed: {e}")
        return EcoScoreResult.failure(ErrorMessages.ANALYSIS_FAILED.format(error=e))
