"""Amount codec: raw field text <-> minor units <-> formatted currency.

- unmask() keeps ASCII digits only and reads them as minor units
- mask() renders minor units through the locale's formatting provider
- Neither direction raises for bad data: non-digits are discarded and
  provider failures degrade to a plain fallback string

Round-trip law: for every amount ``a >= 0`` and locale ``L``,
``unmask(mask(a, L)) == a``.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from moneymask.diagnostics import FormattingError
from moneymask.runtime.locale_context import LocaleContext
from moneymask.runtime.value_types import RenderedAmount

__all__ = [
    "AmountCodec",
    "mask",
    "to_major_units",
    "unmask",
]

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def unmask(raw_text: str) -> int:
    """Extract a minor-unit amount from raw or formatted field text.

    Every character that is not an ASCII digit is discarded; the remaining
    digits are read as an integer count of minor units.

    Args:
        raw_text: Field text, possibly containing symbols and separators

    Returns:
        Non-negative minor-unit amount (0 when no digits remain)

    Examples:
        >>> unmask("$1,234.56")
        123456
        >>> unmask("ab12cd")
        12
        >>> unmask("")
        0
    """
    digits = _NON_DIGITS.sub("", raw_text)
    return int(digits) if digits else 0


def to_major_units(amount: int, fraction_digits: int) -> Decimal:
    """Scale a minor-unit amount to an exact Decimal in major units.

    Built from a string so no context precision rounding applies.

    Example:
        >>> to_major_units(5, 2)
        Decimal('0.05')
        >>> to_major_units(1234, 0)
        Decimal('1234')
    """
    if fraction_digits <= 0:
        return Decimal(amount)
    return Decimal(f"{amount}E-{fraction_digits}")


class AmountCodec:
    """Codec bound to one locale context.

    Example:
        >>> codec = AmountCodec.for_locale("en_US")
        >>> codec.mask(999999)
        '$9,999.99'
        >>> codec.extract_value("$12.34")
        Decimal('12.34')
    """

    __slots__ = ("_context",)

    def __init__(self, context: LocaleContext) -> None:
        self._context = context

    @classmethod
    def for_locale(cls, locale_code: str | None = None, *, currency: str | None = None) -> AmountCodec:
        return cls(LocaleContext.create(locale_code, currency=currency))

    @property
    def context(self) -> LocaleContext:
        return self._context

    @staticmethod
    def unmask(raw_text: str) -> int:
        return unmask(raw_text)

    def render(self, amount: int) -> RenderedAmount:
        """Render a minor-unit amount, falling back to plain text on failure."""
        metadata = self._context.metadata
        major = to_major_units(amount, metadata.max_fraction_digits)
        try:
            return self._context.render(major)
        except FormattingError as e:
            logger.warning("%s. Using fallback '%s'", e, e.fallback_value)
            return RenderedAmount(text=e.fallback_value, metadata=metadata)

    def mask(self, amount: int) -> str:
        """Render a minor-unit amount as the locale's currency string."""
        return self.render(amount).text

    def extract_value(self, label: str) -> Decimal:
        """Read a field label as an amount in major units."""
        return to_major_units(unmask(label), self._context.metadata.max_fraction_digits)

    def format_value(self, value: Decimal | int | float) -> str:
        """Render an amount given in major units.

        Floats are converted through ``str`` so ``0.1`` stays ``0.1``.
        Values with more fraction digits than the currency allows are
        rounded by Babel (half-even).
        """
        major = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        try:
            return self._context.render(major).text
        except FormattingError as e:
            logger.warning("%s. Using fallback '%s'", e, e.fallback_value)
            return e.fallback_value


def mask(amount: int, locale_code: str | None = None) -> str:
    """Render a minor-unit amount for a locale.

    Args:
        amount: Minor-unit amount (cents for USD)
        locale_code: Locale identifier; None or unknown uses the default locale

    Returns:
        Locale-formatted currency string, verbatim from the provider

    Examples:
        >>> mask(0, "en_US")
        '$0.00'
        >>> mask(5, "en_US")
        '$0.05'
    """
    return AmountCodec.for_locale(locale_code).mask(amount)
