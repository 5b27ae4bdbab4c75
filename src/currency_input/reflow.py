"""Live regrouping of amount text while the user types.

Given the text before and after an edit, the inserted fragment and the
cursor, :func:`reflow` produces the canonical display text (integer digits
grouped in threes from the right, separated by single spaces) and moves the
cursor so that it stays right after the digit the user was editing.

Cursor adjustments happen in a fixed order: separators are removed first,
then leading zeros are stripped, then separators are inserted again.
"""

from __future__ import annotations

from currency_input.models import (
    DECIMAL_POINT,
    GROUP_SEPARATOR,
    GROUP_SIZE,
    EditEvent,
    Reflowed,
)


def strip_separators(text: str, cursor: int) -> tuple[str, int]:
    """Remove group separators, translating *cursor* into the flat text.

    Returns:
        The flattened text and the cursor offset inside it.
    """
    cursor = max(0, min(cursor, len(text)))
    flat = text.replace(GROUP_SEPARATOR, "")
    return flat, cursor - text.count(GROUP_SEPARATOR, 0, cursor)


def split_number(flat: str) -> tuple[str, str | None]:
    """Split flat text at the decimal point.

    The fractional part is ``None`` when no point was typed and ``""`` when
    the point is there but no digits follow it yet.
    """
    integer_part, point, fraction = flat.partition(DECIMAL_POINT)
    return integer_part, (fraction if point else None)


def _join(integer_part: str, fraction: str | None) -> str:
    if fraction is None:
        return integer_part
    return integer_part + DECIMAL_POINT + fraction


def regroup(flat: str, cursor: int) -> Reflowed:
    """Insert group separators into flat text and shift the cursor past them.

    Grouping always counts from the rightmost digit of the integer part.  A
    leading minus sign is kept outside the groups.

    Args:
        flat: Amount text without separators, e.g. ``"1234567.5"``.
        cursor: Cursor offset in *flat*.

    Returns:
        The grouped text (``"1 234 567.5"``) and the adjusted cursor.
    """
    integer_part, fraction = split_number(flat)
    sign = "-" if integer_part.startswith("-") else ""
    digits = integer_part[len(sign):]

    head = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i:i + GROUP_SIZE] for i in range(head, len(digits), GROUP_SIZE))

    # Every separator that lands before the cursor pushes it one cell right.
    boundaries = range(len(digits) - GROUP_SIZE, 0, -GROUP_SIZE)
    shift = sum(1 for i in boundaries if len(sign) + i < cursor)

    text = sign + GROUP_SEPARATOR.join(groups)
    return Reflowed(_join(text, fraction), cursor + shift)


def reflow(event: EditEvent) -> Reflowed:
    """Compute the canonical text and cursor after an edit.

    Args:
        event: The edit as seen by the host field.  ``event.new_text`` may
            still contain separators from before the edit.

    Returns:
        The regrouped text and cursor offset to write back to the field.
    """
    flat, cursor = strip_separators(event.new_text, event.cursor)
    integer_part, fraction = split_number(flat)

    # A lone placeholder zero is overwritten by the first typed character.
    inserted = event.inserted.replace(GROUP_SEPARATOR, "")
    old_flat = event.old_text.replace(GROUP_SEPARATOR, "")
    if inserted and old_flat == "0" and fraction is None and cursor == 1:
        return regroup(inserted, len(inserted))

    stripped = integer_part.lstrip("0")
    cursor = max(0, cursor - (len(integer_part) - len(stripped)))

    if not stripped:
        stripped = "0"
        if event.cursor != 0:
            cursor += 1

    return regroup(_join(stripped, fraction), cursor)
