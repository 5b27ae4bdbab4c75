"""Exact decimal values: parsing, comparison and plain string output.

Values are :class:`decimal.Decimal` instances.  They keep the scale they were
written with (``Decimal("5.00")`` prints as ``5.00``), which is what lets the
widget show a committed amount with its insignificant zeros.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

ZERO = Decimal(0)


def to_decimal(value: Decimal | int | str | float) -> Decimal:
    """Convert a numeric literal to a Decimal without binary rounding.

    Floats go through their shortest ``repr`` so that ``0.1`` becomes
    ``Decimal("0.1")`` rather than the exact binary expansion.

    Raises:
        ValueError: If a string cannot be parsed as a decimal number.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, int):
        return Decimal(value)
    parsed = parse_decimal(value)
    if parsed is None:
        raise ValueError(f"Not a decimal number: {value!r}")
    return parsed


def parse_decimal(text: str | None) -> Decimal | None:
    """Parse user text into a Decimal, returning None instead of raising.

    Only plain numerals are accepted: an optional sign, digits and at most
    one decimal point.  ``"1."`` and ``".5"`` are valid; infinities, NaN and
    exponent notation are not.
    """
    if text is None:
        return None
    stripped = text.strip()
    if not stripped:
        return None
    body = stripped.lstrip("+-")
    if len(stripped) - len(body) > 1 or not body:
        return None
    if body.count(".") > 1 or not body.replace(".", "", 1).isdigit():
        return None
    try:
        return Decimal(stripped)
    except InvalidOperation:
        return None


def compare(a: Decimal, b: Decimal) -> int:
    """Return -1, 0 or 1 as *a* is less than, equal to, or greater than *b*."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def to_plain_string(value: Decimal) -> str:
    """Format a Decimal without grouping or exponent notation.

    Trailing zeros are kept exactly as the value's scale has them:
    ``Decimal("1.50")`` gives ``"1.50"`` and ``Decimal("1E+2")`` gives ``"100"``.
    """
    return format(value, "f")
