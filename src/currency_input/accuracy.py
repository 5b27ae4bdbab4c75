"""Fit decimal values to a fixed number of fractional digits.

Extra digits are truncated, never rounded: typing ``1.239`` into a field
limited to two decimals yields ``1.23``.  Missing digits are shown as
"insignificant" zeros, which the widget draws dimmed while editing and
writes into the text on commit.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from currency_input.decimal_value import ZERO, parse_decimal, to_plain_string
from currency_input.models import DECIMAL_POINT, GROUP_SEPARATOR

logger = logging.getLogger(__name__)


def normalize(value: Decimal, digits_after_dot: int | None) -> Decimal:
    """Truncate the fractional part of *value* to *digits_after_dot* digits.

    Args:
        value: The value to adjust.
        digits_after_dot: Maximum fractional digits, or None for no limit.

    Returns:
        The truncated value, or *value* itself when nothing needs cutting.
    """
    if digits_after_dot is None:
        return value
    text = to_plain_string(value)
    integer_part, point, fraction = text.partition(DECIMAL_POINT)
    if not point or len(fraction) <= digits_after_dot:
        return value
    truncated = integer_part + (
        DECIMAL_POINT + fraction[:digits_after_dot] if digits_after_dot else ""
    )
    logger.debug("Truncated %s to %s", text, truncated)
    result = parse_decimal(truncated)
    return ZERO if result is None else result


def pad(text: str, digits_after_dot: int | None) -> str:
    """Return the zeros needed to give *text* exactly *digits_after_dot* decimals.

    Group separators in *text* are ignored, so displayed text can be passed
    as-is.

    Examples:
        >>> pad("5", 2)
        '.00'
        >>> pad("5.1", 2)
        '0'
        >>> pad("5.123", 2)
        ''
    """
    if not digits_after_dot:
        return ""
    flat = text.replace(GROUP_SEPARATOR, "")
    _, point, fraction = flat.partition(DECIMAL_POINT)
    if not point:
        return DECIMAL_POINT + "0" * digits_after_dot
    return "0" * max(0, digits_after_dot - len(fraction))


def prepare_to_show(value: Decimal, digits_after_dot: int | None) -> Decimal:
    """Truncate and zero-pad *value* to the configured accuracy.

    The returned Decimal carries the padded scale, so
    ``prepare_to_show(Decimal("5"), 2)`` prints as ``5.00``.
    """
    text = to_plain_string(normalize(value, digits_after_dot))
    result = parse_decimal(text + pad(text, digits_after_dot))
    return ZERO if result is None else result
