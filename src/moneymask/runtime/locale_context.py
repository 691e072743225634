"""Locale context: the currency formatting provider.

This module renders amounts as locale-formatted currency strings and exposes
the locale facts (separators, fraction digits, symbol placement) the caret
algorithm needs. Uses Babel for CLDR-compliant currency formatting.

Architecture:
    - LocaleContext: Immutable locale + currency configuration container
    - Rendering uses Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module for formatting (avoids global state)
    - Instances are cached per (locale, currency, default locale)

Design Principles:
    - Explicit over implicit (locale and currency always visible)
    - Immutable by default (frozen dataclass)
    - Lenient construction: unknown locales fall back to the default locale
      with a logged warning; create_or_raise() is the strict variant

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers
from babel.core import get_global, parse_locale

from moneymask.constants import (
    CURRENCY_PLACEHOLDER,
    DEFAULT_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
)
from moneymask.diagnostics import FormattingError, LocaleResolutionError
from moneymask.enums import SymbolPosition
from moneymask.locale_utils import get_babel_locale, get_default_locale, normalize_locale
from moneymask.runtime.value_types import LocaleMetadata, RenderedAmount

if TYPE_CHECKING:
    from moneymask.runtime.mask_config import MaskConfig

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

_CacheKey: TypeAlias = tuple[str, str | None, str]


def _territory_currency(babel_locale: Locale) -> str | None:
    """Currency in legal tender today for the locale's territory.

    Bare language codes ("en", "de") have no territory; CLDR likely subtags
    supply one ("en" -> "en_Latn_US"). The expanded tag is only split, not
    loaded: Babel has no locale data for some expansions ("no_Latn_NO").
    """
    territory = babel_locale.territory
    if territory is None:
        likely = get_global("likely_subtags").get(babel_locale.language)
        if likely:
            territory = parse_locale(likely)[1]
    if territory is None:
        return None
    currencies = babel_numbers.get_territory_currencies(territory, tender=True)
    return currencies[0] if currencies else None


def _symbol_position(babel_locale: Locale) -> SymbolPosition:
    """Read symbol placement from the locale's standard currency pattern."""
    pattern = babel_locale.currency_formats.get("standard")
    raw = getattr(pattern, "pattern", "") or ""
    positive = raw.split(";", 1)[0]
    symbol_at = positive.find(CURRENCY_PLACEHOLDER)
    digit_positions = [i for i, ch in enumerate(positive) if ch in "#0"]
    if symbol_at == -1 or not digit_positions:
        logger.debug("Currency pattern %r has no placeholder; assuming prefix", raw)
        return SymbolPosition.PREFIX
    if symbol_at < digit_positions[0]:
        return SymbolPosition.PREFIX
    return SymbolPosition.SUFFIX


def _build_metadata(babel_locale: Locale, currency: str) -> LocaleMetadata:
    return LocaleMetadata(
        grouping_separator=babel_numbers.get_group_symbol(babel_locale),
        decimal_separator=babel_numbers.get_decimal_symbol(babel_locale),
        max_fraction_digits=babel_numbers.get_currency_precision(currency),
        symbol_position=_symbol_position(babel_locale),
        currency=currency,
    )


def _parse_default(default_locale: str) -> Locale:
    """Parse the fallback locale, falling back to en_US if it is itself bad."""
    try:
        return get_babel_locale(default_locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.warning(
            "Default locale '%s' is not usable: %s. Falling back to %s",
            default_locale,
            e,
            DEFAULT_LOCALE,
        )
        return get_babel_locale(DEFAULT_LOCALE)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for currency rendering.

    Use LocaleContext.create() to construct instances; direct construction
    bypasses locale validation and currency resolution.

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en_US')
        >>> ctx.render(Decimal('1234.56')).text
        '$1,234.56'

        >>> ctx = LocaleContext.create('de_DE')
        >>> ctx.render(Decimal('1234.56')).text
        '1.234,56\\xa0€'

        >>> # Invalid locales fall back to the default locale with a warning
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.locale_code  # Requested code, normalized
        'invalid_locale'
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable. Cache operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[_CacheKey, LocaleContext]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    metadata: LocaleMetadata
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(key[0] for key in cls._cache),
            }

    @classmethod
    def create(
        cls,
        locale_code: str | None = None,
        *,
        currency: str | None = None,
        default_locale: str | None = None,
    ) -> LocaleContext:
        """Create LocaleContext with graceful fallback for invalid locales.

        For absent identifiers the default locale is used silently. For
        unknown or malformed identifiers a warning is logged and the default
        locale is used. This method always succeeds - use create_or_raise()
        if you need strict validation.

        Args:
            locale_code: Locale identifier (``"en_US"``, ``"en-US"``) or None
            currency: ISO 4217 override; None derives it from the locale
            default_locale: Fallback locale; None reads get_default_locale()

        Returns:
            LocaleContext instance. locale_code holds the requested identifier
            in POSIX form, so every spelling that shares a cache entry reports
            the same code. For unknown/invalid locales it is kept for
            debugging and is_fallback is True.
        """
        default = normalize_locale(default_locale or get_default_locale())
        requested = locale_code if locale_code and locale_code.strip() else default
        cache_key: _CacheKey = (normalize_locale(requested), currency, default)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key[0])
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to %s", requested, e, default)
            babel_locale = _parse_default(default)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s", requested, e, default
            )
            babel_locale = _parse_default(default)
            used_fallback = True

        resolved_currency = (
            currency
            or _territory_currency(babel_locale)
            or _territory_currency(get_babel_locale(DEFAULT_LOCALE))
        )
        ctx = cls(
            locale_code=cache_key[0],
            _babel_locale=babel_locale,
            metadata=_build_metadata(babel_locale, str(resolved_currency)),
            is_fallback=used_fallback,
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str, *, currency: str | None = None) -> LocaleContext:
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: Locale identifier (``"en_US"``, ``"en-US"``)
            currency: ISO 4217 override; None derives it from the locale

        Returns:
            LocaleContext instance with a valid locale

        Raises:
            LocaleResolutionError: If the identifier is malformed, unknown,
                or has no territory currency and no override was given
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise LocaleResolutionError(msg, locale_code=locale_code) from None
        except (ValueError, TypeError, AttributeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise LocaleResolutionError(msg, locale_code=locale_code) from None

        resolved_currency = currency or _territory_currency(babel_locale)
        if resolved_currency is None:
            msg = f"No currency in use for locale '{locale_code}'; pass currency explicitly"
            raise LocaleResolutionError(msg, locale_code=locale_code)
        return cls(
            locale_code=normalize_locale(locale_code),
            _babel_locale=babel_locale,
            metadata=_build_metadata(babel_locale, resolved_currency),
        )

    @classmethod
    def from_config(cls, config: MaskConfig) -> LocaleContext:
        """Create the (cached) context described by a MaskConfig."""
        return cls.create(
            config.resolved_locale,
            currency=config.currency,
            default_locale=config.default_locale,
        )

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale actually used for rendering (after any fallback)."""
        return self._babel_locale

    @property
    def currency(self) -> str:
        return self.metadata.currency

    def render(self, amount_major: Decimal) -> RenderedAmount:
        """Render an amount in major units as a currency string.

        Args:
            amount_major: Amount in major units (dollars, euros), exact Decimal

        Returns:
            RenderedAmount with the verbatim Babel output and locale metadata

        Raises:
            FormattingError: If Babel cannot render the value. The error
                carries a plain ``"<CODE> <amount>"`` fallback whose digits
                still unmask to the same minor-unit amount.

        Examples:
            >>> LocaleContext.create('en_US').render(Decimal('0.05')).text
            '$0.05'

        CLDR Compliance:
            Uses Babel's format_currency() with currency_digits=True, so the
            number of fraction digits always equals
            ``metadata.max_fraction_digits``.
        """
        try:
            text = babel_numbers.format_currency(
                amount_major,
                self.currency,
                locale=self._babel_locale,
                currency_digits=True,
                format_type="standard",
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            fallback = f"{self.currency} {amount_major}"
            msg = f"Currency formatting failed for '{self.currency} {amount_major}': {e}"
            raise FormattingError(msg, fallback_value=fallback) from e
        return RenderedAmount(text=str(text), metadata=self.metadata)
