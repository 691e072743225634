"""Hypothesis strategies for moneymask property-based testing.

Usage:
    from tests.strategies import amounts, masking_locales, formatted_field_edits
"""

from .money import (
    MASKING_LOCALES,
    PREFIX_LOCALES,
    SUFFIX_LOCALES,
    amounts,
    amounts_by_magnitude,
    field_edits,
    formatted_field_edits,
    masking_locales,
    raw_field_text,
)

__all__ = [
    "MASKING_LOCALES",
    "PREFIX_LOCALES",
    "SUFFIX_LOCALES",
    "amounts",
    "amounts_by_magnitude",
    "field_edits",
    "formatted_field_edits",
    "masking_locales",
    "raw_field_text",
]
