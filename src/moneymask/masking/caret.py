"""Caret tracking for masked money fields.

Every text change in a money field is re-formatted, which moves characters
around: grouping separators appear and disappear, and the currency symbol
may sit after the digits. This module decides where the caret goes after
the host replaces the field text with the formatted string, so that:

- digits typed at the end stay at the end, next to any trailing symbol
- deleting in the middle keeps the caret where the deleted digit was
- separators inserted by formatting do not push the caret off its digit

Algorithm (one pass per edit, no state between calls):
    1. Apply the edit to the previous text and unmask the result
    2. Render the amount; note whether it ends in a suffix symbol
    3. Compute the end-of-input boundary (before the suffix symbol)
    4. Classify the edit and pick an anchor (first match wins):
       zero amount, leading edge, deletion, middle insert, other
    5. Shift the anchor by the change in grouping separators before it
    6. Clamp to the boundary and to the new text length

Python 3.13+.
"""

from __future__ import annotations

import logging

from moneymask.constants import (
    ASCII_DIGITS,
    MIN_MIDDLE_INSERT_LENGTH,
    PREFIX_LEADING_EDGE_THRESHOLD,
    PREFIX_PADDING,
    SUFFIX_LEADING_EDGE_THRESHOLD,
    SUFFIX_PADDING,
)
from moneymask.enums import EditKind
from moneymask.masking.codec import AmountCodec, unmask
from moneymask.masking.types import CaretDecision, EditDescriptor

__all__ = [
    "CaretTracker",
    "anchor_caret",
    "caret_boundary",
    "classify_edit",
    "compute_caret_decision",
    "end_of_input",
    "grouping_drift",
    "has_suffix_symbol",
    "on_focus_gained",
    "on_selection_changed",
]

logger = logging.getLogger(__name__)


def has_suffix_symbol(text: str) -> bool:
    """True when text ends with something other than an ASCII digit."""
    return bool(text) and text[-1] not in ASCII_DIGITS


def end_of_input(formatted: str) -> int:
    """Raw numeric boundary of a formatted amount.

    Suffix-symbol strings end two characters early (separator and symbol).
    Prefix-symbol strings report one past the end; callers clamp it.

    Examples:
        >>> end_of_input("$0.05")
        6
        >>> end_of_input("0,05\\xa0€")
        4
    """
    if has_suffix_symbol(formatted):
        return len(formatted) + SUFFIX_PADDING
    return len(formatted) + PREFIX_PADDING


def caret_boundary(formatted: str) -> int:
    """end_of_input() bounded to a valid offset in ``formatted``."""
    return max(0, min(end_of_input(formatted), len(formatted)))


def classify_edit(edit: EditDescriptor, amount: int, suffix_symbol: bool) -> EditKind:
    """Classify an edit for caret placement; first matching rule wins.

    Args:
        edit: The edit being processed
        amount: Minor-unit amount after the edit
        suffix_symbol: Whether the newly formatted text ends in a symbol

    Returns:
        EditKind for the tie-break policy
    """
    previous_length = len(edit.previous_text)
    start, _ = edit.replaced_range
    threshold = SUFFIX_LEADING_EDGE_THRESHOLD if suffix_symbol else PREFIX_LEADING_EDGE_THRESHOLD
    is_leading_edge = start >= previous_length - threshold
    is_insert = previous_length > MIN_MIDDLE_INSERT_LENGTH and not edit.is_deletion and not is_leading_edge

    if amount == 0:
        return EditKind.ZEROED
    if is_leading_edge:
        return EditKind.LEADING_EDGE
    if edit.is_deletion:
        return EditKind.DELETION
    if is_insert:
        # TODO: track the inserted digit's position instead of re-anchoring to the end
        return EditKind.MIDDLE_INSERT
    return EditKind.OTHER


def anchor_caret(kind: EditKind, edit: EditDescriptor, formatted: str) -> int:
    """Caret chosen by the tie-break policy, before separator drift."""
    if kind is EditKind.DELETION:
        return edit.replaced_range[0]
    return end_of_input(formatted)


def grouping_drift(formatted: str, previous_text: str, caret: int, separator: str) -> int:
    """Change in grouping separators left of the caret.

    Counts separators in the first ``caret - 1`` characters of the new and
    the previous text.

    Example:
        >>> grouping_drift("$9,999.99", "$999.99", 10, ",")
        1
    """
    if caret <= 0 or not separator:
        return 0
    after = formatted[: caret - 1].count(separator)
    before = previous_text[: caret - 1].count(separator)
    return after - before


class CaretTracker:
    """Caret algorithm bound to one field's codec.

    The tracker keeps no per-edit state; one instance can serve any number
    of edits (and fields) in the same locale.

    Example:
        >>> tracker = CaretTracker.for_locale("en_US")
        >>> decision = tracker.compute(EditDescriptor("", 0, 0, "5"))
        >>> decision.display_text, decision.caret_offset
        ('$0.05', 5)
    """

    __slots__ = ("_codec",)

    def __init__(self, codec: AmountCodec) -> None:
        self._codec = codec

    @classmethod
    def for_locale(cls, locale_code: str | None = None, *, currency: str | None = None) -> CaretTracker:
        return cls(AmountCodec.for_locale(locale_code, currency=currency))

    @property
    def codec(self) -> AmountCodec:
        return self._codec

    def compute(self, edit: EditDescriptor) -> CaretDecision:
        """Format the edited text and place the caret.

        Never raises for malformed edits: offsets are clamped, non-digits
        are discarded and the caret is bounded to the new text.

        Args:
            edit: The edit reported by the host

        Returns:
            CaretDecision with the formatted text and caret offset
        """
        raw_text = edit.apply()
        amount = unmask(raw_text)
        rendered = self._codec.render(amount)
        formatted = rendered.text

        suffix_symbol = has_suffix_symbol(formatted)
        boundary = end_of_input(formatted)
        kind = classify_edit(edit, amount, suffix_symbol)
        caret = anchor_caret(kind, edit, formatted)

        # A zeroed field always parks at the boundary.
        drift = 0
        if kind is not EditKind.ZEROED:
            drift = grouping_drift(formatted, edit.previous_text, caret, rendered.grouping_separator)
            if drift > 0 or kind is not EditKind.LEADING_EDGE:
                caret += drift

        caret = max(0, min(caret, boundary, len(formatted)))
        logger.debug(
            "Edit %r -> %r: kind=%s drift=%d caret=%d",
            edit.previous_text,
            formatted,
            kind,
            drift,
            caret,
        )
        return CaretDecision(caret_offset=caret, display_text=formatted, amount=amount, kind=kind)

    def on_focus_gained(self, current_text: str, stored_caret: int | None = None) -> int:
        return on_focus_gained(current_text, stored_caret)

    def on_selection_changed(self, current_text: str, caret: int) -> int:
        return on_selection_changed(current_text, caret)


def compute_caret_decision(edit: EditDescriptor, locale_code: str | None = None) -> CaretDecision:
    """Run one masking pass for an edit in the given locale.

    Examples:
        >>> d = compute_caret_decision(EditDescriptor("$999.99", 7, 0, "9"), "en_US")
        >>> d.display_text, d.caret_offset
        ('$9,999.99', 9)
    """
    return CaretTracker.for_locale(locale_code).compute(edit)


def on_focus_gained(current_text: str, stored_caret: int | None = None) -> int:
    """Tidy the caret when a field regains focus or is touched.

    Empty text, no stored caret, or a stored caret past the end of the text
    resets to the end of the text (one before a trailing suffix symbol).
    A valid stored caret is kept; with a suffix symbol it is never let into
    the symbol.

    Args:
        current_text: Text currently in the field
        stored_caret: Caret kept from the last decision, if any

    Returns:
        Caret offset within ``0..len(current_text)``

    Examples:
        >>> on_focus_gained("$1.00")
        5
        >>> on_focus_gained("$124.56", stored_caret=3)
        3
        >>> on_focus_gained("1,00 €", stored_caret=2)
        2
        >>> on_focus_gained("1,00 €", stored_caret=99)
        5
    """
    length = len(current_text)
    suffix_symbol = has_suffix_symbol(current_text)
    reset_to = length - 1 if suffix_symbol else length
    if not current_text or stored_caret is None or stored_caret > length or stored_caret < 0:
        return max(0, reset_to)
    if suffix_symbol:
        return min(stored_caret, reset_to)
    return stored_caret


def on_selection_changed(current_text: str, caret: int) -> int:
    """Keep a user-moved caret out of a trailing currency symbol.

    Examples:
        >>> on_selection_changed("1,00 €", 6)
        4
        >>> on_selection_changed("$1.00", 2)
        2
    """
    caret = max(0, min(caret, len(current_text)))
    if has_suffix_symbol(current_text):
        return min(caret, max(0, len(current_text) + SUFFIX_PADDING))
    return caret
