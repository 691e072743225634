"""Value types exchanged between the formatting provider and the masking core.

Defines:
    - LocaleMetadata: Separators, fraction digits and symbol placement for a locale
    - RenderedAmount: Provider output (formatted text plus the metadata used)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from moneymask.enums import SymbolPosition

__all__ = [
    "LocaleMetadata",
    "RenderedAmount",
]


@dataclass(frozen=True, slots=True)
class LocaleMetadata:
    """Locale formatting facts the caret algorithm relies on.

    Attributes:
        grouping_separator: Thousands delimiter ("," in en_US, "." in de_DE)
        decimal_separator: Fraction delimiter ("." in en_US, "," in de_DE)
        max_fraction_digits: Minor-unit digits of the currency (2 for USD, 0 for JPY)
        symbol_position: Where the currency symbol sits in the standard pattern
        currency: ISO 4217 code rendered for this locale

    Example:
        >>> meta = LocaleMetadata(",", ".", 2, SymbolPosition.PREFIX, "USD")
        >>> meta.minor_unit_scale
        100
    """

    grouping_separator: str
    decimal_separator: str
    max_fraction_digits: int
    symbol_position: SymbolPosition
    currency: str

    @property
    def minor_unit_scale(self) -> int:
        """Number of minor units in one major unit."""
        return 10**self.max_fraction_digits


@dataclass(frozen=True, slots=True)
class RenderedAmount:
    """Result of one provider render call.

    Attributes:
        text: Locale-formatted currency string, verbatim
        metadata: Locale metadata the text was rendered with
    """

    text: str
    metadata: LocaleMetadata

    @property
    def grouping_separator(self) -> str:
        return self.metadata.grouping_separator

    @property
    def decimal_separator(self) -> str:
        return self.metadata.decimal_separator

    @property
    def max_fraction_digits(self) -> int:
        return self.metadata.max_fraction_digits
