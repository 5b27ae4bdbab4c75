"""Currency input widget with live digit grouping and bounds checking."""

from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import TYPE_CHECKING, Iterator

from textual.events import Blur, Focus, Paste
from textual.message import Message
from textual.suggester import Suggester
from textual.widgets import Input

from currency_input.controller import CurrencyController, ValueCallback
from currency_input.models import (
    DEFAULT_CURRENCY_SPACING,
    CurrencyType,
    EditEvent,
    FormatConfig,
    State,
)
from currency_input.stream import ValueStream

if TYPE_CHECKING:
    from rich.text import Text


class GhostSuggester(Suggester):
    """Suggests the text followed by its padding zeros and currency glyph.

    Textual draws the part of a suggestion past the typed text in the dimmed
    ``input--suggestion`` style, which is how the not-yet-committed zeros and
    the currency symbol appear after the amount.
    """

    def __init__(self, controller: CurrencyController) -> None:
        super().__init__(use_cache=False, case_sensitive=True)
        self._controller = controller

    async def get_suggestion(self, value: str) -> str | None:
        """Return *value* with the ghost suffix appended."""
        return value + self._controller.ghost_suffix(value)


class CurrencyInput(Input):
    """An Input for money amounts, regrouped in threes as the user types.

    Typed characters are checked against the amount format before they are
    inserted and the text is regrouped after every edit.  Leaving the field
    (blur, or Enter) clamps the value into ``[min_value, max_value]``, fits it
    to ``digits_after_dot`` and reports it as ``State.APPLIED``.

    Every change is reported three ways: the callback registered with
    :meth:`set_on_value_changed`, a :class:`CurrencyInput.ValueChanged`
    message, and :attr:`value_stream`.
    """

    class ValueChanged(Message):
        """Posted when the amount or its state changes."""

        def __init__(
            self, currency_input: CurrencyInput, amount: Decimal | None, state: State
        ) -> None:
            super().__init__()
            self.currency_input = currency_input
            self.amount = amount
            self.state = state

        @property
        def control(self) -> CurrencyInput:
            """The CurrencyInput that changed."""
            return self.currency_input

    def __init__(
        self,
        *,
        min_value: Decimal | None = None,
        max_value: Decimal | None = None,
        digits_after_dot: int | None = None,
        start_value: Decimal = Decimal(0),
        currency_type: CurrencyType = CurrencyType.RUR,
        currency_spacing: int = DEFAULT_CURRENCY_SPACING,
        config: FormatConfig | None = None,
        **kwargs,
    ) -> None:
        """Initialize the currency input.

        Args:
            min_value: Smallest accepted amount, or None for no limit.
            max_value: Largest accepted amount, or None for no limit.
            digits_after_dot: Fractional digits allowed, or None for no limit.
            start_value: Amount shown when the widget is mounted.
            currency_type: Currency whose glyph follows the amount.
            currency_spacing: Blank cells between the amount and the glyph.
            config: A complete configuration; overrides the individual
                arguments above when given.
            **kwargs: Passed through to :class:`textual.widgets.Input`.
        """
        if config is None:
            config = FormatConfig(
                min_value=min_value,
                max_value=max_value,
                digits_after_dot=digits_after_dot,
                start_value=start_value,
                currency_type=currency_type,
                currency_spacing=currency_spacing,
            )
        kwargs.setdefault("placeholder", "0")
        kwargs.setdefault("select_on_focus", False)
        self._value_callback: ValueCallback | None = None
        # The suggester needs the controller and the controller needs the
        # field, so the suggester is attached after Input.__init__.
        super().__init__(**kwargs)
        self.controller = CurrencyController(self, config, on_value_changed=self._notify)
        self.suggester = GhostSuggester(self.controller)

    # -- public surface -----------------------------------------------------

    @property
    def amount(self) -> Decimal | None:
        """The numeric value shown in the field."""
        return self.controller.value

    @amount.setter
    def amount(self, value: Decimal | int | str | float) -> None:
        self.controller.set_value(value)

    @property
    def state(self) -> State:
        """The state reported with the most recent change."""
        return self.controller.state

    @property
    def value_stream(self) -> ValueStream:
        """Read-only stream of the last reported amount."""
        return self.controller.stream

    @property
    def min_value(self) -> Decimal | None:
        return self.controller.min_value

    @min_value.setter
    def min_value(self, value: Decimal | None) -> None:
        self.controller.min_value = value

    @property
    def max_value(self) -> Decimal | None:
        return self.controller.max_value

    @max_value.setter
    def max_value(self, value: Decimal | None) -> None:
        self.controller.max_value = value

    @property
    def digits_after_dot(self) -> int | None:
        return self.controller.digits_after_dot

    @digits_after_dot.setter
    def digits_after_dot(self, value: int | None) -> None:
        self.controller.digits_after_dot = value
        self._refresh_ghost()

    @property
    def start_value(self) -> Decimal:
        return self.controller.start_value

    @start_value.setter
    def start_value(self, value: Decimal) -> None:
        self.controller.start_value = value

    @property
    def currency_type(self) -> CurrencyType:
        return self.controller.currency_type

    @currency_type.setter
    def currency_type(self, value: CurrencyType) -> None:
        self.controller.currency_type = value
        self._refresh_ghost()

    @property
    def currency_spacing(self) -> int:
        return self.controller.currency_spacing

    @currency_spacing.setter
    def currency_spacing(self, value: int) -> None:
        self.controller.currency_spacing = value
        self._refresh_ghost()

    def set_on_value_changed(self, callback: ValueCallback | None) -> None:
        """Register the function called with ``(amount, state)`` on every change."""
        self._value_callback = callback

    # -- event handling -----------------------------------------------------

    def on_mount(self) -> None:
        """Show the start value once the widget is in the DOM."""
        self.controller.attach()

    async def _on_key(self, event) -> None:
        """Route printable keys through the filter and regrouping."""
        if not event.is_printable:
            await super()._on_key(event)
            return

        self._restart_blink()
        event.prevent_default()
        event.stop()
        start, end = sorted(self.selection)
        if not self.controller.insert(event.character, start, end):
            self.log.debug(f"CurrencyInput rejected {event.character!r}")

    def _on_paste(self, event: Paste) -> None:
        """Replace the content with a pasted amount."""
        event.prevent_default()
        event.stop()
        self._paste(event.text)

    def action_paste(self) -> None:
        """Paste from the app clipboard."""
        self._paste(self.app.clipboard)

    def _on_focus(self, event: Focus) -> None:
        """Bring the ghost suggestion back once Input has cleared it."""
        self.call_after_refresh(self._refresh_ghost)

    def _on_blur(self, event: Blur) -> None:
        """Commit the amount when the field loses focus."""
        self.controller.commit()

    async def action_submit(self) -> None:
        """Leave the field on Enter, which commits the amount."""
        self.blur()

    def action_cursor_right(self, select: bool = False) -> None:
        """Move right, without accepting the ghost text at the end."""
        if not select and self.cursor_position >= len(self.value):
            return
        super().action_cursor_right(select)

    def action_delete_left(self) -> None:
        with self._deleting():
            super().action_delete_left()

    def action_delete_right(self) -> None:
        with self._deleting():
            super().action_delete_right()

    def action_delete_left_word(self) -> None:
        with self._deleting():
            super().action_delete_left_word()

    def action_delete_right_word(self) -> None:
        with self._deleting():
            super().action_delete_right_word()

    def action_delete_left_all(self) -> None:
        with self._deleting():
            super().action_delete_left_all()

    def action_delete_right_all(self) -> None:
        with self._deleting():
            super().action_delete_right_all()

    def action_cut(self) -> None:
        with self._deleting():
            super().action_cut()

    # -- internals ----------------------------------------------------------

    @property
    def _value(self) -> Text:
        """The value as drawn, followed by the dimmed ghost suffix.

        A visible suggestion already ends with the suffix, so it is appended
        here only while the field is unfocused or has no suggestion yet.
        """
        text = super()._value
        suggested = self.has_focus and len(self._suggestion) > len(self.value)
        if self.is_mounted and self.value and not suggested:
            text.append(
                self.controller.ghost_suffix(),
                self.get_component_rich_style("input--suggestion"),
            )
        return text

    @contextmanager
    def _deleting(self) -> Iterator[None]:
        """Regroup after a default Input deletion action has run."""
        old = self.value
        yield
        if self.value != old:
            self.controller.text_modified(
                EditEvent("", self.value, old, self.cursor_position)
            )

    def _paste(self, text: str | None) -> None:
        if self.controller.paste(text):
            return
        if text:
            start, end = sorted(self.selection)
            self.controller.insert(text, start, end)

    def _refresh_ghost(self) -> None:
        if self.value:
            self._suggestion = self.value + self.controller.ghost_suffix()
        self.refresh(layout=True)

    def _notify(self, amount: Decimal | None, state: State) -> None:
        if state is State.APPLIED:
            self.log.debug(f"CurrencyInput applied {amount}")
        if self._value_callback is not None:
            self._value_callback(amount, state)
        self.post_message(self.ValueChanged(self, amount, state))
