"""Data models for the currency input: states, currencies, edits and config."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import NamedTuple

from currency_input.errors import ConfigurationError

GROUP_SIZE = 3
GROUP_SEPARATOR = " "
DECIMAL_POINT = "."
DEFAULT_CURRENCY_SPACING = 1


class State(Enum):
    """Validation state reported alongside every value change."""

    OK = "ok"
    BELOW_MIN = "below_min"
    ABOVE_MAX = "above_max"
    APPLIED = "applied"

    @property
    def is_valid(self) -> bool:
        """Return True when the value is within bounds."""
        return self in (State.OK, State.APPLIED)


class CurrencyType(Enum):
    """Currency whose glyph is drawn after the amount."""

    RUR = "RUR"
    EUR = "EUR"
    USD = "USD"

    @property
    def symbol(self) -> str:
        """Return the glyph drawn after the amount."""
        match self:
            case CurrencyType.RUR:
                return "₽"
            case CurrencyType.EUR:
                return "€"
            case CurrencyType.USD:
                return "$"

    @classmethod
    def from_name(cls, name: str) -> CurrencyType:
        """Look up a currency by code, case-insensitively.

        Raises:
            ConfigurationError: If the code is not one of RUR, EUR or USD.
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise ConfigurationError(f"Unknown currency type: {name!r}") from None


@dataclass(frozen=True)
class EditEvent:
    """A single text mutation captured from the host field."""

    inserted: str
    new_text: str
    old_text: str
    cursor: int


class Reflowed(NamedTuple):
    """Canonical display text and the cursor offset inside it."""

    text: str
    cursor: int


@dataclass
class FormatConfig:
    """Formatting configuration for a currency input.

    ``None`` bounds mean "no limit" and ``digits_after_dot=None`` means an
    unbounded number of fractional digits.
    """

    min_value: Decimal | None = None
    max_value: Decimal | None = None
    digits_after_dot: int | None = None
    start_value: Decimal = Decimal(0)
    currency_type: CurrencyType = CurrencyType.RUR
    currency_spacing: int = DEFAULT_CURRENCY_SPACING

    def __post_init__(self) -> None:
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ConfigurationError(
                f"Minimum value ({self.min_value}) is greater than maximum ({self.max_value})"
            )
        if self.digits_after_dot is not None and self.digits_after_dot < 0:
            raise ConfigurationError(
                f"digits_after_dot must be non-negative, got {self.digits_after_dot}"
            )
