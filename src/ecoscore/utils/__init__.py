"""Utility modules for EcoScore."""

from .data_prep import export_to_json, result_to_record

__all__ = [
    "export_to_json",
    "result_to_record",
]
