"""Input and output types of one masking pass.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from moneymask.enums import EditKind

__all__ = [
    "CaretDecision",
    "EditDescriptor",
]


@dataclass(frozen=True, slots=True)
class EditDescriptor:
    """One discrete text-change event reported by the host widget.

    Describes "replace ``length`` characters of ``previous_text`` starting at
    ``start`` with ``inserted_text``". A pure insert has ``length == 0``, a
    pure delete has an empty ``inserted_text``.

    Attributes:
        previous_text: Field text before the edit
        start: Offset where the edit begins
        length: Number of characters replaced
        inserted_text: Characters typed or pasted (empty for deletes)

    Example:
        >>> edit = EditDescriptor("$1,234.56", start=4, length=1, inserted_text="")
        >>> edit.apply()
        '$1,24.56'
    """

    previous_text: str
    start: int
    length: int = 0
    inserted_text: str = ""

    @classmethod
    def from_text_change(
        cls, previous_text: str, start: int, before: int, count: int, new_text: str
    ) -> EditDescriptor:
        """Build a descriptor from a "text changed" style callback.

        Some widgets report the text after the change together with
        ``(start, before, count)``: ``before`` characters at ``start`` were
        replaced by ``count`` new characters.

        Args:
            previous_text: Field text before the change
            start: Offset where the change begins
            before: Number of characters removed
            count: Number of characters added
            new_text: Field text after the change
        """
        return cls(
            previous_text=previous_text,
            start=start,
            length=before,
            inserted_text=new_text[start : start + count],
        )

    @property
    def replaced_range(self) -> tuple[int, int]:
        """``(start, length)`` clamped to the bounds of ``previous_text``."""
        size = len(self.previous_text)
        start = min(max(self.start, 0), size)
        length = min(max(self.length, 0), size - start)
        return (start, length)

    @property
    def is_deletion(self) -> bool:
        return not self.inserted_text

    def apply(self) -> str:
        """Return the raw text after the edit.

        Out-of-range offsets are clamped rather than rejected.
        """
        start, length = self.replaced_range
        return self.previous_text[:start] + self.inserted_text + self.previous_text[start + length :]


@dataclass(frozen=True, slots=True)
class CaretDecision:
    """Output of one masking pass; the host applies text and caret together.

    Attributes:
        caret_offset: Where to place the caret in display_text
        display_text: Locale-formatted currency string to show
        amount: Minor-unit amount display_text was rendered from
        kind: How the edit was classified
    """

    caret_offset: int
    display_text: str
    amount: int = 0
    kind: EditKind = EditKind.OTHER
