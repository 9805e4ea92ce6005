"""Exceptions raised by EcoScore collaborators."""


class EcoScoreError(Exception):
    """Base error for EcoScore collaborators."""


class PlacesAPIError(EcoScoreError):
    """Google Places request failed or returned an error status."""
