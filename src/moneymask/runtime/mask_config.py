"""Configuration for a masked money field.

Provides a single frozen dataclass that carries the options a host hands
over when it turns a text field into a money field. Mirrors the
``{ locale }`` options object of the wrapper component, plus an explicit
currency override and the fallback locale.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from moneymask.diagnostics import MaskConfigError
from moneymask.locale_utils import get_default_locale, normalize_locale

__all__ = ["MaskConfig"]

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3


@dataclass(frozen=True, slots=True)
class MaskConfig:
    """Immutable configuration for one masked field.

    All fields have sensible defaults; ``MaskConfig()`` formats in the
    process default locale with that locale's currency.

    Attributes:
        locale: Locale identifier for the field (``"en_US"``, ``"de-DE"``).
            ``None`` means the default locale.
        currency: ISO 4217 override (``"EUR"``). ``None`` derives the
            currency from the locale's territory.
        default_locale: Fallback for absent or unknown locales. Defaults to
            ``MONEYMASK_DEFAULT_LOCALE`` from the environment, else ``en_US``.

    Example:
        >>> config = MaskConfig(locale="de-DE")
        >>> config.resolved_locale
        'de_DE'
        >>> MaskConfig(locale="en_US", currency="EUR").currency
        'EUR'
    """

    locale: str | None = None
    currency: str | None = None
    default_locale: str = field(default_factory=get_default_locale)

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            MaskConfigError: If currency is not a 3-letter uppercase code or
                default_locale is empty.
        """
        if self.currency is not None and not (
            len(self.currency) == ISO_CURRENCY_CODE_LENGTH
            and self.currency.isascii()
            and self.currency.isalpha()
            and self.currency.isupper()
        ):
            msg = f"currency must be a 3-letter uppercase ISO 4217 code, got {self.currency!r}"
            raise MaskConfigError(msg)
        if not self.default_locale or not self.default_locale.strip():
            msg = "default_locale must be a non-empty locale identifier"
            raise MaskConfigError(msg)

    @property
    def resolved_locale(self) -> str:
        """Locale identifier to format with, normalized to POSIX form."""
        if self.locale is None or not self.locale.strip():
            return normalize_locale(self.default_locale)
        return normalize_locale(self.locale)
