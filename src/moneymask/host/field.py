"""Host adapter: drives the caret algorithm from a text widget.

The masking core is a pure function of one edit. Everything stateful lives
here, per field:

- the field is held through a weak reference; once the widget is gone
  every callback is a no-op
- writing the formatted text back into the widget would fire the widget's
  own change notification, so the controller detaches itself, applies text
  and caret, and reattaches on every exit path
- other observers are chained by composition: the controller handles the
  event, then forwards it to the next listener

Python 3.13+.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, Generator
from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, TypeAlias

from moneymask.masking.caret import CaretTracker, on_focus_gained, on_selection_changed
from moneymask.masking.codec import AmountCodec
from moneymask.masking.types import CaretDecision, EditDescriptor
from moneymask.runtime.locale_context import LocaleContext
from moneymask.runtime.mask_config import MaskConfig

__all__ = [
    "ChangeCallback",
    "FieldState",
    "FocusListener",
    "MaskRegistry",
    "MoneyFieldController",
    "TextField",
    "TextListener",
]

logger = logging.getLogger(__name__)

ChangeCallback: TypeAlias = Callable[[Decimal, str], None]
FocusListener: TypeAlias = Callable[[bool], None]


class TextListener(Protocol):
    """Receives one EditDescriptor per user edit."""

    def on_edit(self, edit: EditDescriptor) -> CaretDecision | None:
        """Handle a text edit reported by the widget."""
        ...


class TextField(Protocol):
    """Minimal widget surface the controller needs.

    Implementations wrap a real toolkit widget. ``set_selection`` may raise
    IndexError for an offset the widget does not accept; the controller
    treats that as a no-op. Fields must be hashable by identity and support
    weak references (the default for plain classes).
    """

    @property
    def text(self) -> str:
        """Full text currently shown."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the full text (fires change notifications)."""
        ...

    def set_selection(self, offset: int) -> None:
        """Place a collapsed caret at offset."""
        ...

    def add_text_listener(self, listener: TextListener) -> None:
        """Subscribe to edits."""
        ...

    def remove_text_listener(self, listener: TextListener) -> None:
        """Unsubscribe from edits."""
        ...


@dataclass(slots=True)
class FieldState:
    """What the controller remembers about its field between events.

    Attributes:
        text: Text the controller last wrote
        caret: Caret the controller last placed (None before the first edit)
    """

    text: str = ""
    caret: int | None = None


class MoneyFieldController:
    """Turns a plain text field into a money field.

    Example:
        >>> controller = MoneyFieldController(field, CaretTracker.for_locale("en_US"))
        >>> controller.attach()
        >>> controller.on_edit(EditDescriptor("", 0, 0, "5"))
        >>> field.text
        '$0.05'
    """

    __slots__ = (
        "_attached",
        "_field",
        "_focus_listener",
        "_next_listener",
        "_on_change",
        "_tracker",
        "state",
    )

    def __init__(
        self,
        field: TextField,
        tracker: CaretTracker,
        *,
        on_change: ChangeCallback | None = None,
        next_listener: TextListener | None = None,
        focus_listener: FocusListener | None = None,
    ) -> None:
        self._field: weakref.ref[TextField] = weakref.ref(field)
        self._tracker = tracker
        self._on_change = on_change
        self._next_listener = next_listener
        self._focus_listener = focus_listener
        self._attached = False
        self.state = FieldState(text=field.text)

    @property
    def field(self) -> TextField | None:
        """The widget, or None once it has been garbage collected."""
        return self._field()

    @property
    def attached(self) -> bool:
        """Whether the controller is subscribed to its field's edits."""
        return self._attached

    @property
    def tracker(self) -> CaretTracker:
        return self._tracker

    @property
    def codec(self) -> AmountCodec:
        return self._tracker.codec

    def attach(self) -> None:
        """Subscribe to the field's edits (no-op if already subscribed)."""
        field = self.field
        if field is None or self._attached:
            return
        field.add_text_listener(self)
        self._attached = True

    def detach(self) -> None:
        """Unsubscribe from the field's edits (no-op if not subscribed)."""
        field = self.field
        if field is not None and self._attached:
            field.remove_text_listener(self)
        self._attached = False

    @contextmanager
    def _detached(self, field: TextField) -> Generator[None]:
        """Suppress our own listener while the field is being rewritten.

        Only a subscribed controller is re-subscribed on exit; a controller
        removed from the field before or during the rewrite stays removed.
        """
        was_attached = self._attached
        if was_attached:
            field.remove_text_listener(self)
        try:
            yield
        finally:
            if was_attached and self._attached:
                field.add_text_listener(self)

    def _place_caret(self, field: TextField, caret: int) -> None:
        if not 0 <= caret <= len(field.text):
            logger.debug("Caret %d outside field text; not applied", caret)
            return
        try:
            field.set_selection(caret)
        except IndexError:
            logger.debug("Field rejected caret %d; selection left unchanged", caret)

    def on_edit(self, edit: EditDescriptor) -> CaretDecision | None:
        """Mask the edited text and move the caret.

        Returns:
            The decision that was applied, or None if the field is gone
        """
        field = self.field
        if field is None:
            logger.debug("Edit on a field that no longer exists; ignored")
            return None

        decision = self._tracker.compute(edit)
        with self._detached(field):
            field.set_text(decision.display_text)
            self._place_caret(field, decision.caret_offset)
        self.state.text = decision.display_text
        self.state.caret = decision.caret_offset

        if self._on_change is not None:
            self._on_change(self.codec.extract_value(decision.display_text), decision.display_text)
        if self._next_listener is not None:
            self._next_listener.on_edit(edit)
        return decision

    def tidy_caret(self) -> int | None:
        """Pull the caret back inside the number (focus gain or touch).

        A caret remembered for different text than the field now shows is
        stale and is discarded.
        """
        field = self.field
        if field is None:
            return None
        text = field.text
        stored = self.state.caret if text == self.state.text else None
        caret = on_focus_gained(text, stored)
        self._place_caret(field, caret)
        self.state.text = text
        self.state.caret = caret
        return caret

    def on_focus_change(self, has_focus: bool) -> None:
        if has_focus:
            self.tidy_caret()
        if self._focus_listener is not None:
            self._focus_listener(has_focus)

    def on_touch(self) -> None:
        self.tidy_caret()

    def on_selection_change(self, caret: int) -> int | None:
        """Keep a caret moved by the user out of a trailing symbol."""
        field = self.field
        if field is None:
            return None
        adjusted = on_selection_changed(field.text, caret)
        if adjusted != caret:
            self._place_caret(field, adjusted)
        self.state.caret = adjusted
        return adjusted


class MaskRegistry:
    """Installs at most one controller per field.

    Keyed by field identity through weak references, so registering a field
    does not keep it alive.

    Example:
        >>> registry = MaskRegistry()
        >>> controller = registry.install(field, MaskConfig(locale="de_DE"))
        >>> registry.controller_for(field) is controller
        True
    """

    __slots__ = ("_controllers",)

    def __init__(self) -> None:
        self._controllers: weakref.WeakKeyDictionary[TextField, MoneyFieldController] = (
            weakref.WeakKeyDictionary()
        )

    def install(
        self,
        field: TextField,
        config: MaskConfig | None = None,
        *,
        on_change: ChangeCallback | None = None,
        next_listener: TextListener | None = None,
        focus_listener: FocusListener | None = None,
    ) -> MoneyFieldController:
        """Attach a money mask to a field, replacing any previous one."""
        self.uninstall(field)
        tracker = CaretTracker(AmountCodec(LocaleContext.from_config(config or MaskConfig())))
        controller = MoneyFieldController(
            field,
            tracker,
            on_change=on_change,
            next_listener=next_listener,
            focus_listener=focus_listener,
        )
        controller.attach()
        self._controllers[field] = controller
        return controller

    def uninstall(self, field: TextField) -> bool:
        """Detach the mask from a field. Returns False if none was installed."""
        controller = self._controllers.pop(field, None)
        if controller is None:
            return False
        controller.detach()
        return True

    def controller_for(self, field: TextField) -> MoneyFieldController | None:
        return self._controllers.get(field)

    def __len__(self) -> int:
        return len(self._controllers)
