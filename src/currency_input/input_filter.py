"""Accept or reject a replacement before it reaches the text field.

A replacement is accepted only when the text it would produce still reads as
an amount: digits and group separators, then optionally one decimal point
followed by a bounded number of digits.  Partial acceptance is not
supported; a rejected edit is dropped whole.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

_INTEGER_PART_RULE = r"[ \d]*"


@lru_cache(maxsize=None)
def build_rule(digits_after_dot: int | None) -> re.Pattern[str]:
    """Compile the amount pattern for a fractional-digit limit.

    Args:
        digits_after_dot: Maximum digits after the point; ``None`` means
            unlimited and ``0`` forbids the point entirely.
    """
    if digits_after_dot is None:
        decimal_part_rule = r"(?:\.\d*)?"
    elif digits_after_dot == 0:
        decimal_part_rule = ""
    else:
        decimal_part_rule = rf"(?:\.\d{{0,{digits_after_dot}}})?"
    return re.compile(_INTEGER_PART_RULE + decimal_part_rule, re.ASCII)


def filter_replacement(
    candidate: str,
    current_text: str,
    start: int,
    end: int,
    digits_after_dot: int | None = None,
) -> str:
    """Check a replacement of ``current_text[start:end]`` by *candidate*.

    Commas in *candidate* are treated as decimal points.

    Returns:
        The normalised candidate when the resulting text is a valid amount,
        otherwise an empty string.
    """
    normalized = candidate.replace(",", ".")
    prospective = current_text[:start] + normalized + current_text[end:]
    if build_rule(digits_after_dot).fullmatch(prospective):
        return normalized
    logger.debug("Rejected %r at %d:%d in %r", candidate, start, end, current_text)
    return ""


@dataclass(frozen=True)
class CurrencyInputFilter:
    """Input filter bound to a fractional-digit limit."""

    digits_after_dot: int | None = None

    def __call__(self, candidate: str, current_text: str, start: int, end: int) -> str:
        return filter_replacement(
            candidate, current_text, start, end, self.digits_after_dot
        )
