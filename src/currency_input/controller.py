"""Orchestration of filtering, regrouping, bounds and commit for one field.

:class:`CurrencyController` knows nothing about any particular UI toolkit.
It drives any object that looks like a :class:`TextField` (Textual's
``Input`` does) and holds it only through a weak reference, so the field's
lifetime is never extended by its controller.
"""

from __future__ import annotations

import logging
import weakref
from decimal import Decimal
from typing import Callable, Protocol

from currency_input.accuracy import normalize, pad, prepare_to_show
from currency_input.bounds import check_bounds, clamp, evaluate
from currency_input.decimal_value import ZERO, parse_decimal, to_decimal, to_plain_string
from currency_input.errors import ConfigurationError
from currency_input.input_filter import CurrencyInputFilter, build_rule
from currency_input.models import (
    GROUP_SEPARATOR,
    EditEvent,
    FormatConfig,
    State,
)
from currency_input.reflow import reflow, regroup
from currency_input.stream import ValueStream

logger = logging.getLogger(__name__)

ValueCallback = Callable[[Decimal | None, State], None]


class TextField(Protocol):
    """The parts of a host text field the controller reads and writes."""

    value: str
    cursor_position: int

    @property
    def has_focus(self) -> bool: ...


class CurrencyController:
    """Keeps a text field's content a canonical, bounded amount.

    Every accepted edit is regrouped immediately and reported with its live
    :class:`State`.  :meth:`commit` (called when the field loses focus)
    clamps the value into bounds, fits it to ``digits_after_dot`` and
    reports it as ``State.APPLIED``.
    """

    def __init__(
        self,
        field: TextField,
        config: FormatConfig | None = None,
        on_value_changed: ValueCallback | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            field: The host text field.  Only a weak reference is kept.
            config: Initial formatting configuration.
            on_value_changed: Called with ``(value, state)`` after each change.
        """
        config = config or FormatConfig()
        self._field = weakref.ref(field)
        self._min_value = config.min_value
        self._max_value = config.max_value
        self._digits_after_dot = config.digits_after_dot
        self._input_filter = CurrencyInputFilter(config.digits_after_dot)
        self.start_value = config.start_value
        self.currency_type = config.currency_type
        self.currency_spacing = config.currency_spacing
        self.on_value_changed = on_value_changed
        self.state = State.OK
        self.stream = ValueStream(config.start_value)

    @property
    def field(self) -> TextField | None:
        """The host field, or None once it has been garbage collected."""
        return self._field()

    @property
    def text(self) -> str:
        """The displayed text, including group separators."""
        field = self.field
        return field.value if field is not None else ""

    @property
    def value(self) -> Decimal | None:
        """The numeric value of the displayed text, or None if it has none."""
        return parse_decimal(self.text.replace(GROUP_SEPARATOR, ""))

    @property
    def min_value(self) -> Decimal | None:
        return self._min_value

    @min_value.setter
    def min_value(self, value: Decimal | None) -> None:
        check_bounds(value, self._max_value)
        self._min_value = value
        current = self.value
        if value is not None and current is not None and current < value:
            self.set_value(value)

    @property
    def max_value(self) -> Decimal | None:
        return self._max_value

    @max_value.setter
    def max_value(self, value: Decimal | None) -> None:
        check_bounds(self._min_value, value)
        self._max_value = value
        current = self.value
        if value is not None and current is not None and current > value:
            self.set_value(value)

    @property
    def digits_after_dot(self) -> int | None:
        return self._digits_after_dot

    @digits_after_dot.setter
    def digits_after_dot(self, value: int | None) -> None:
        if value is not None and value < 0:
            raise ConfigurationError(f"digits_after_dot must be non-negative, got {value}")
        self._digits_after_dot = value
        self._input_filter = CurrencyInputFilter(value)
        field = self.field
        if field is None or build_rule(value).fullmatch(field.value):
            return
        # The text no longer fits the filter, so no keystroke could be accepted.
        current = self.value
        self.set_value(normalize(current if current is not None else ZERO, value))

    def attach(self) -> None:
        """Show the start value, fitted to the configured accuracy."""
        self.set_value(prepare_to_show(self.start_value, self._digits_after_dot))

    def set_value(self, value: Decimal | int | str | float) -> None:
        """Replace the field's content with *value*."""
        field = self.field
        if field is None:
            return
        text = to_plain_string(to_decimal(value))
        self.text_modified(EditEvent(text, text, field.value, len(text)))

    def insert(self, fragment: str, start: int | None = None, end: int | None = None) -> bool:
        """Replace ``text[start:end]`` with *fragment* if the result is an amount.

        *start* defaults to the cursor and *end* to *start*.

        Returns:
            True if the edit was accepted and applied.
        """
        field = self.field
        if field is None:
            return False
        old = field.value
        start = field.cursor_position if start is None else start
        end = start if end is None else end
        accepted = self._input_filter(fragment, old, start, end)
        if fragment and not accepted:
            return False
        new = old[:start] + accepted + old[end:]
        self.text_modified(EditEvent(accepted, new, old, start + len(accepted)))
        return True

    def paste(self, text: str | None) -> bool:
        """Replace the whole field with pasted text if it reads as an amount.

        Commas are read as decimal points and spaces are ignored.  Anything
        else is left to the regular :meth:`insert` path.

        Returns:
            True if the pasted amount replaced the field's content.
        """
        field = self.field
        if field is None or not text:
            return False
        parsed = parse_decimal(text.replace(",", ".").replace(" ", ""))
        if parsed is None:
            logger.debug("Ignoring non-numeric paste %r", text)
            return False
        flat = to_plain_string(prepare_to_show(parsed, self._digits_after_dot))
        if not self._input_filter(flat, "", 0, 0):
            logger.debug("Ignoring paste %r outside the accepted format", text)
            return False
        self.text_modified(EditEvent(flat, flat, field.value, len(flat)))
        return True

    def text_modified(self, event: EditEvent) -> None:
        """Regroup the field after *event* and report the new value.

        While the field has focus the live state is reported; a change made
        without focus (e.g. programmatically) is committed straight away.
        """
        field = self.field
        if field is None:
            return
        self._write(field, *reflow(event))
        if field.has_focus:
            value = self.value
            self._emit(value, evaluate(value, self._min_value, self._max_value))
        else:
            self.commit()

    def commit(self) -> Decimal | None:
        """Clamp, truncate and zero-pad the current value and report it applied.

        Returns:
            The committed value, or None if the field is gone.
        """
        field = self.field
        if field is None:
            return None
        value = clamp(self.value, self._min_value, self._max_value)
        shown = prepare_to_show(value, self._digits_after_dot)
        text = to_plain_string(shown)
        if text != field.value.replace(GROUP_SEPARATOR, ""):
            self._write(field, *regroup(text, len(text)))
        logger.debug("Committed %s", text)
        self._emit(shown, State.APPLIED)
        return shown

    def ghost_suffix(self, text: str | None = None) -> str:
        """Return what is drawn dimmed after *text* (the field's text by default).

        That is the zeros still missing to reach ``digits_after_dot``, then
        ``currency_spacing`` blanks and the currency glyph.
        """
        zeros = pad(self.text if text is None else text, self._digits_after_dot)
        return zeros + " " * self.currency_spacing + self.currency_type.symbol

    def _write(self, field: TextField, text: str, cursor: int) -> None:
        field.value = text
        field.cursor_position = cursor

    def _emit(self, value: Decimal | None, state: State) -> None:
        self.state = state
        if self.on_value_changed is not None:
            self.on_value_changed(value, state)
        self.stream.publish(value)
