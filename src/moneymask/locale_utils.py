"""Locale utilities for identifier normalization and default resolution.

Centralizes locale format normalization used throughout the codebase.
Host platforms hand over identifiers in several shapes (``en_US``,
``en-US``, ``de_DE.UTF-8``, ``sr_RS@latin``); everything is converted to the
POSIX form Babel expects at the system boundary, so cache keys and lookups
stay consistent.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from moneymask.constants import (
    DEFAULT_LOCALE,
    DEFAULT_LOCALE_ENV_VAR,
    SYSTEM_LOCALE_SENTINEL,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_default_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a host locale identifier to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    POSIX environment values may also carry an encoding (``.UTF-8``) or a
    modifier (``@euro``); both are dropped.

    Args:
        locale_code: Locale identifier (e.g., "en-US", "pt_BR.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0].strip()
    return code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_LOCALE.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and normalize_locale(value) not in ("C", "POSIX", ""):
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE


def get_default_locale() -> str:
    """Resolve the process-wide fallback locale.

    ``MONEYMASK_DEFAULT_LOCALE`` overrides the built-in ``en_US``. The value
    ``system`` defers to :func:`get_system_locale`.

    Returns:
        Locale code in POSIX format.

    Example:
        >>> get_default_locale()  # MONEYMASK_DEFAULT_LOCALE unset
        'en_US'
    """
    configured = os.environ.get(DEFAULT_LOCALE_ENV_VAR, "").strip()
    if not configured:
        return DEFAULT_LOCALE
    if configured.lower() == SYSTEM_LOCALE_SENTINEL:
        return get_system_locale()
    return normalize_locale(configured)
