"""Public entry points mirroring the money input component's operations.

- format_money(value, locale) - major units -> currency string
- extract_value(label, locale) - currency string -> major units
- initialize_mask(field, locale=...) - turn a text field into a money field

All three follow the lenient policy: unknown locales fall back to the
default locale and malformed labels read as zero.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

from moneymask.host.field import (
    ChangeCallback,
    FocusListener,
    MaskRegistry,
    MoneyFieldController,
    TextField,
    TextListener,
)
from moneymask.masking.codec import AmountCodec
from moneymask.runtime.mask_config import MaskConfig

__all__ = [
    "extract_value",
    "format_money",
    "get_default_registry",
    "initialize_mask",
]

_DEFAULT_REGISTRY = MaskRegistry()


def get_default_registry() -> MaskRegistry:
    """Registry used by initialize_mask() when none is passed."""
    return _DEFAULT_REGISTRY


def format_money(
    value: Decimal | int | float, locale: str | None = None, *, currency: str | None = None
) -> str:
    """Format an amount in major units as a currency string.

    Args:
        value: Amount in major units (``12.34`` dollars)
        locale: Locale identifier; None or unknown uses the default locale
        currency: ISO 4217 override; None derives it from the locale

    Examples:
        >>> format_money(1234.5, "en_US")
        '$1,234.50'
        >>> format_money(Decimal("1234.5"), "de_DE")
        '1.234,50\\xa0€'
    """
    return AmountCodec.for_locale(locale, currency=currency).format_value(value)


def extract_value(label: str, locale: str | None = None, *, currency: str | None = None) -> Decimal:
    """Read a field label as an amount in major units.

    Every non-digit is discarded and the digits are read as minor units of
    the locale's currency.

    Examples:
        >>> extract_value("$1,234.56", "en_US")
        Decimal('1234.56')
        >>> extract_value("garbage", "en_US")
        Decimal('0.00')
    """
    return AmountCodec.for_locale(locale, currency=currency).extract_value(label)


def initialize_mask(
    field: TextField,
    *,
    locale: str | None = None,
    currency: str | None = None,
    on_change: ChangeCallback | None = None,
    next_listener: TextListener | None = None,
    focus_listener: FocusListener | None = None,
    registry: MaskRegistry | None = None,
) -> MoneyFieldController:
    """Install a money mask on a field (replacing any earlier mask).

    Args:
        field: Host widget adapter
        locale: Locale identifier for the field
        currency: ISO 4217 override
        on_change: Called with ``(value, label)`` after every applied edit
        next_listener: Edit listener to forward to after masking
        focus_listener: Focus listener to forward to after caret tidy-up
        registry: Registry to install into; defaults to the module registry

    Returns:
        The installed controller
    """
    target = registry if registry is not None else _DEFAULT_REGISTRY
    return target.install(
        field,
        MaskConfig(locale=locale, currency=currency),
        on_change=on_change,
        next_listener=next_listener,
        focus_listener=focus_listener,
    )
