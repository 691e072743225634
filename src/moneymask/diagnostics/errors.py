"""moneymask exception hierarchy.

The lenient entry points (unmask, mask, caret decisions, host callbacks)
never raise these for bad data; they recover and log instead. The
exceptions exist for strict entry points and for the boundary between the
formatting provider and the codec.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "FormattingError",
    "LocaleResolutionError",
    "MaskConfigError",
    "MoneyMaskError",
]


class MoneyMaskError(Exception):
    """Base exception for all moneymask errors."""


class LocaleResolutionError(MoneyMaskError, ValueError):
    """Locale identifier is malformed or unknown to CLDR.

    Raised only by strict constructors such as
    ``LocaleContext.create_or_raise()``. ``LocaleContext.create()`` falls
    back to the default locale instead.

    Attributes:
        locale_code: The identifier that failed to resolve
    """

    def __init__(self, message: str, *, locale_code: str) -> None:
        """Initialize LocaleResolutionError.

        Args:
            message: Human-readable error message
            locale_code: The identifier that failed to resolve
        """
        super().__init__(message)
        self.locale_code = locale_code


class FormattingError(MoneyMaskError):
    """Raised when locale-aware currency formatting fails.

    The error carries a fallback_value that the caller should display
    instead, so keystroke processing is never interrupted:
    - Error is logged and visible to whoever wants it
    - Output still contains usable content (the plain amount)

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class MaskConfigError(MoneyMaskError, ValueError):
    """Invalid MaskConfig value detected at construction time."""
