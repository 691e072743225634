"""Property-based tests for the codec and the caret algorithm.

Properties:
- Round-trip: unmask(mask(a, L)) == a for every non-negative amount
- Idempotence: re-masking the unmasked formatted text is a fixed point
- Non-negativity: unmask never returns a negative amount
- Boundedness: the caret always lies within the formatted text
- Zero reset: a zeroed field parks the caret at the input boundary
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, event, example, given, settings
from hypothesis import strategies as st

from moneymask.enums import EditKind
from moneymask.masking.caret import caret_boundary, compute_caret_decision
from moneymask.masking.codec import mask, unmask
from moneymask.masking.types import EditDescriptor
from tests.strategies import (
    amounts,
    amounts_by_magnitude,
    formatted_field_edits,
    masking_locales,
    raw_field_text,
)

# ============================================================================
# CODEC
# ============================================================================


class TestCodecProperties:
    @given(amount=amounts_by_magnitude(), locale=masking_locales)
    @example(amount=0, locale="en_US")
    @example(amount=5, locale="en_US")
    @example(amount=123456, locale="de_DE")
    def test_round_trip(self, amount: int, locale: str) -> None:
        """Formatting never adds or drops a digit."""
        event(f"locale={locale}")
        assert unmask(mask(amount, locale)) == amount

    @given(text=raw_field_text, locale=masking_locales)
    def test_idempotent_masking(self, text: str, locale: str) -> None:
        """Masking a masked string changes nothing."""
        formatted = mask(unmask(text), locale)
        assert mask(unmask(formatted), locale) == formatted

    @given(text=st.text(max_size=40))
    @example(text="-$12.00")
    def test_unmask_is_non_negative(self, text: str) -> None:
        assert unmask(text) >= 0


# ============================================================================
# CARET
# ============================================================================


class TestCaretProperties:
    @settings(suppress_health_check=[HealthCheck.too_slow])
    @given(case=formatted_field_edits())
    def test_caret_is_bounded(self, case: tuple[str, EditDescriptor]) -> None:
        """The caret is a valid offset into the text the host will show."""
        locale, edit = case
        decision = compute_caret_decision(edit, locale)

        event(f"kind={decision.kind}")
        assert 0 <= decision.caret_offset <= len(decision.display_text)
        assert decision.caret_offset <= caret_boundary(decision.display_text)

    @settings(suppress_health_check=[HealthCheck.too_slow])
    @given(case=formatted_field_edits())
    def test_display_text_is_masked_amount(self, case: tuple[str, EditDescriptor]) -> None:
        locale, edit = case
        decision = compute_caret_decision(edit, locale)

        assert decision.amount == unmask(edit.apply())
        assert decision.display_text == mask(decision.amount, locale)

    @given(amount=amounts, locale=masking_locales)
    def test_clearing_field_resets_caret(self, amount: int, locale: str) -> None:
        """Deleting everything leaves the caret at the boundary of the zero string."""
        previous_text = mask(amount, locale)
        decision = compute_caret_decision(EditDescriptor(previous_text, 0, len(previous_text)), locale)

        assert decision.kind is EditKind.ZEROED
        assert decision.display_text == mask(0, locale)
        assert decision.caret_offset == caret_boundary(decision.display_text)

    @pytest.mark.fuzz
    @settings(max_examples=5000, suppress_health_check=[HealthCheck.too_slow])
    @given(
        previous_text=raw_field_text,
        start=st.integers(min_value=-5, max_value=40),
        length=st.integers(min_value=-5, max_value=40),
        inserted=raw_field_text,
        locale=masking_locales,
    )
    def test_arbitrary_edits_never_raise(
        self, previous_text: str, start: int, length: int, inserted: str, locale: str
    ) -> None:
        """Garbage offsets and text still produce a bounded decision."""
        decision = compute_caret_decision(
            EditDescriptor(previous_text, start, length, inserted), locale
        )
        assert 0 <= decision.caret_offset <= len(decision.display_text)
