"""Host widget adapter.

Python 3.13+.
"""

from .field import (
    ChangeCallback,
    FieldState,
    FocusListener,
    MaskRegistry,
    MoneyFieldController,
    TextField,
    TextListener,
)

__all__ = [
    "ChangeCallback",
    "FieldState",
    "FocusListener",
    "MaskRegistry",
    "MoneyFieldController",
    "TextField",
    "TextListener",
]
