"""Google Places client supplying place details and review text."""

import logging
from typing import List, Dict, Any, Optional

import requests
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import PlacesConstants
from ..core.exceptions import PlacesAPIError
from ..core.models import PlaceDetails, PlacePrediction, Review

logger = logging.getLogger(__name__)


class GooglePlacesService:
    """Google Places data collection service using the Places web API."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.api_key = api_key if api_key is not None else settings.effective_places_key
        self.base_url = (base_url or settings.places_base_url).rstrip("/")
        # None means each request uses requests.get
        self.session = session

    @retry(
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(multiplier=settings.retry_delay, max=settings.retry_backoff * 10),
        reraise=True,
    )
    def _fetch(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        get = self.session.get if self.session is not None else requests.get
        response = get(
            f"{self.base_url}/{endpoint}",
            params={**params, "key": self.api_key},
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
        return response.json()

    def _get(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET an endpoint and check the Places status field."""
        if not self.api_key:
            raise PlacesAPIError("Google Places API key is not configured")

        try:
            data = self._fetch(endpoint, params)
        except requests.RequestException as e:
            logger.error(f"Google Places request to {endpoint} failed: {e}")
            raise PlacesAPIError(f"Google Places request failed: {e}") from e

        status = data.get("status", "OK")
        if status not in ("OK", "ZERO_RESULTS"):
            message = data.get("error_message", status)
            logger.error(f"Google Places {endpoint} returned {status}: {message}")
            raise PlacesAPIError(f"Google Places returned {status}: {message}")
        return data

    def get_place_details(self, place_id: str) -> PlaceDetails:
        """Fetch name, description, reviews and display fields for a place."""
        data = self._get("details/json", {
            "place_id": place_id,
            "fields": PlacesConstants.DETAILS_FIELDS,
        })
        place = data.get("result") or {}
        details = self._to_place_details(place_id, place)
        logger.info(f"Retrieved {len(details.reviews)} reviews for place {place_id}")
        return details

    def search_places(self, text: str) -> List[PlacePrediction]:
        """Autocomplete establishments matching the input text."""
        data = self._get("autocomplete/json", {
            "input": text,
            "types": PlacesConstants.AUTOCOMPLETE_TYPES,
        })
        predictions = [
            PlacePrediction(place_id=p["place_id"], description=p.get("description", ""))
            for p in data.get("predictions", [])
            if p.get("place_id")
        ]
        logger.info(f"Found {len(predictions)} places for input: {text}")
        return predictions

    def _to_place_details(self, place_id: str, place: Dict[str, Any]) -> PlaceDetails:
        reviews = [
            Review(
                text=r.get("text", ""),
                author=r.get("author_name"),
                rating=r.get("rating"),
                time=r.get("time"),
            )
            for r in place.get("reviews") or []
        ]
        photos = [
            self._photo_url(photo["photo_reference"])
            for photo in (place.get("photos") or [])[:PlacesConstants.MAX_PHOTOS]
            if photo.get("photo_reference")
        ]
        summary = place.get("editorial_summary") or {}
        price_level = place.get("price_level")

        return PlaceDetails(
            place_id=place_id,
            name=place.get("name") or "",
            description=summary.get("overview") or "",
            address=place.get("formatted_address") or "",
            phone=place.get("formatted_phone_number") or "",
            website=place.get("website") or "",
            rating=place.get("rating") or 0.0,
            price_level=price_level if price_level is not None else PlacesConstants.DEFAULT_PRICE_LEVEL,
            reviews=reviews,
            photos=photos,
            opening_hours=(place.get("opening_hours") or {}).get("weekday_text", []),
        )

    def _photo_url(self, reference: str) -> str:
        return (
            f"{self.base_url}/photo?maxwidth={PlacesConstants.PHOTO_MAX_WIDTH}"
            f"&photoreference={reference}&key={self.api_key}"
        )
