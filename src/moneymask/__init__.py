"""moneymask - Locale-aware currency masking for text input fields.

Formats what the user types into a money field as a locale currency string
on every keystroke, and places the caret so editing feels natural. Uses
Babel (CLDR) for currency formatting.

Public API:
    format_money - Major units -> currency string
    extract_value - Currency string -> major units
    initialize_mask - Install a money mask on a host text field
    unmask / mask - Minor-unit codec
    compute_caret_decision - One masking pass for an edit
    on_focus_gained - Caret tidy-up on focus
    EditDescriptor / CaretDecision - Input and output of a masking pass
    LocaleContext - Babel-backed formatting provider
    MaskConfig - Per-field configuration

Exceptions:
    MoneyMaskError - Base exception class
    LocaleResolutionError - Strict locale validation failed
    FormattingError - Provider could not render a value
    MaskConfigError - Invalid configuration

Submodules:
    moneymask.masking - Codec and caret algorithm
    moneymask.runtime - Formatting provider, metadata and config
    moneymask.host - Host widget adapter and mask registry
"""

from .api import extract_value, format_money, get_default_registry, initialize_mask
from .diagnostics import (
    FormattingError,
    LocaleResolutionError,
    MaskConfigError,
    MoneyMaskError,
)
from .masking import (
    AmountCodec,
    CaretDecision,
    CaretTracker,
    EditDescriptor,
    compute_caret_decision,
    mask,
    on_focus_gained,
    on_selection_changed,
    unmask,
)
from .runtime import LocaleContext, LocaleMetadata, MaskConfig

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneymask")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AmountCodec",
    "CaretDecision",
    "CaretTracker",
    "EditDescriptor",
    "FormattingError",
    "LocaleContext",
    "LocaleMetadata",
    "LocaleResolutionError",
    "MaskConfig",
    "MaskConfigError",
    "MoneyMaskError",
    "__version__",
    "compute_caret_decision",
    "extract_value",
    "format_money",
    "get_default_registry",
    "initialize_mask",
    "mask",
    "on_focus_gained",
    "on_selection_changed",
    "unmask",
]
