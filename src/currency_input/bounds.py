"""Minimum/maximum checks for the current value."""

from __future__ import annotations

import logging
from decimal import Decimal

from currency_input.decimal_value import ZERO
from currency_input.errors import ConfigurationError
from currency_input.models import State

logger = logging.getLogger(__name__)


def check_bounds(min_value: Decimal | None, max_value: Decimal | None) -> None:
    """Validate that the minimum does not exceed the maximum.

    Raises:
        ConfigurationError: If both bounds are set and ``min_value > max_value``.
    """
    if min_value is not None and max_value is not None and min_value > max_value:
        logger.warning("Refusing bounds min=%s max=%s", min_value, max_value)
        raise ConfigurationError(
            f"Minimum value ({min_value}) is greater than maximum ({max_value})"
        )


def evaluate(
    value: Decimal | None,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> State:
    """Return the live validation state of *value*.

    An absent value is compared as zero.  The maximum is checked last, so a
    value violating both bounds reports ``ABOVE_MAX``.
    """
    current = ZERO if value is None else value
    state = State.OK
    if min_value is not None and current < min_value:
        state = State.BELOW_MIN
    if max_value is not None and current > max_value:
        state = State.ABOVE_MAX
    return state


def clamp(
    value: Decimal | None,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> Decimal:
    """Clamp *value* into ``[min_value, max_value]``; absent bounds do not clamp."""
    current = ZERO if value is None else value
    result = current
    if min_value is not None and result < min_value:
        result = min_value
    if max_value is not None and result > max_value:
        result = max_value
    if result is not current:
        logger.debug("Clamped %s to %s", current, result)
    return result
