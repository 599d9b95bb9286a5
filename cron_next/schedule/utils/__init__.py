"""Utility modules for schedule evaluation."""

from .year_field import MAX_YEAR, MIN_YEAR, parse_year_field

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "parse_year_field",
]
