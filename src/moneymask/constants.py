"""Shared constants for moneymask.

This module provides centralized configuration constants used across the
runtime (locale formatting), masking (codec and caret tracking) and host
adapter packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Fallback locale and its environment override
- Cache limits: Memory bounds for the locale context cache
- Caret policy: Thresholds used to classify edits

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_LOCALE_ENV_VAR",
    "SYSTEM_LOCALE_SENTINEL",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Caret policy
    "PREFIX_LEADING_EDGE_THRESHOLD",
    "SUFFIX_LEADING_EDGE_THRESHOLD",
    "SUFFIX_PADDING",
    "PREFIX_PADDING",
    "MIN_MIDDLE_INSERT_LENGTH",
    # Characters
    "ASCII_DIGITS",
    "CURRENCY_PLACEHOLDER",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when an identifier is absent, malformed or unknown to CLDR.
DEFAULT_LOCALE: str = "en_US"

# Environment variable overriding DEFAULT_LOCALE for the whole process.
DEFAULT_LOCALE_ENV_VAR: str = "MONEYMASK_DEFAULT_LOCALE"

# Value of DEFAULT_LOCALE_ENV_VAR that requests OS locale detection.
SYSTEM_LOCALE_SENTINEL: str = "system"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# CARET POLICY
# ============================================================================
#
# A formatted amount ends either with a digit (prefix symbol, "$1.00") or with
# a currency symbol and its separator ("1,00 €"). The thresholds below decide
# how close to the end of the previous text an edit must start to count as an
# edit on the leading edge of the number.

# Prefix-symbol locales: only the last character counts as the leading edge.
PREFIX_LEADING_EDGE_THRESHOLD: int = 1

# Suffix-symbol locales: the last digit plus the separator and symbol.
SUFFIX_LEADING_EDGE_THRESHOLD: int = 3

# End-of-input offset relative to the formatted length.
SUFFIX_PADDING: int = -2
PREFIX_PADDING: int = 1

# Previous text must be longer than this for an edit to count as a middle insert.
MIN_MIDDLE_INSERT_LENGTH: int = 3

# ============================================================================
# CHARACTERS
# ============================================================================

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# CLDR currency sign placeholder in number patterns (U+00A4).
CURRENCY_PLACEHOLDER: str = "\xa4"
