"""Enumerations for moneymask type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class SymbolPosition(StrEnum):
    """Where a locale places the currency symbol relative to the number.

    StrEnum provides automatic string conversion: str(SymbolPosition.PREFIX) == "prefix"
    """

    PREFIX = "prefix"
    """Symbol before the digits: $1,234.56"""

    SUFFIX = "suffix"
    """Symbol after the digits: 1.234,56 €"""


class EditKind(StrEnum):
    """Classification of a single text edit for caret placement."""

    ZEROED = "zeroed"
    """Edit left the field with amount zero."""

    LEADING_EDGE = "leading_edge"
    """Edit at the tail of the number, next to a trailing symbol."""

    DELETION = "deletion"
    """Pure delete somewhere in the middle of the number."""

    MIDDLE_INSERT = "middle_insert"
    """Insert into the middle of a field long enough to hold grouping."""

    OTHER = "other"
    """Anything else (short fields, replacements near the start)."""


__all__ = [
    "EditKind",
    "SymbolPosition",
]
