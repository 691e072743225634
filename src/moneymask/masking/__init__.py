"""Currency masking: amount codec and caret tracking.

Public API:
    unmask - Raw or formatted text -> minor units (never raises)
    mask - Minor units -> locale-formatted currency string
    AmountCodec - Codec bound to one locale context
    CaretTracker - Caret placement for each edit of a masked field
    compute_caret_decision - One masking pass for an edit and a locale
    on_focus_gained - Caret tidy-up when a field regains focus
    on_selection_changed - Keep a user-moved caret out of a suffix symbol

Python 3.13+.
"""

from .caret import (
    CaretTracker,
    anchor_caret,
    caret_boundary,
    classify_edit,
    compute_caret_decision,
    end_of_input,
    grouping_drift,
    has_suffix_symbol,
    on_focus_gained,
    on_selection_changed,
)
from .codec import AmountCodec, mask, to_major_units, unmask
from .types import CaretDecision, EditDescriptor

__all__ = [
    "AmountCodec",
    "CaretDecision",
    "CaretTracker",
    "EditDescriptor",
    "anchor_caret",
    "caret_boundary",
    "classify_edit",
    "compute_caret_decision",
    "end_of_input",
    "grouping_drift",
    "has_suffix_symbol",
    "mask",
    "on_focus_gained",
    "on_selection_changed",
    "to_major_units",
    "unmask",
]
