"""Error types for moneymask.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    FormattingError,
    LocaleResolutionError,
    MaskConfigError,
    MoneyMaskError,
)

__all__ = [
    "FormattingError",
    "LocaleResolutionError",
    "MaskConfigError",
    "MoneyMaskError",
]
