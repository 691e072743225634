"""moneymask runtime package.

Provides the Babel-backed currency formatting provider, its value types and
the per-field configuration object.

Python 3.13+.
"""

from .locale_context import LocaleContext
from .mask_config import MaskConfig
from .value_types import LocaleMetadata, RenderedAmount

__all__ = [
    "LocaleContext",
    "LocaleMetadata",
    "MaskConfig",
    "RenderedAmount",
]
