"""Live-formatting currency input for Textual."""

from __future__ import annotations

from currency_input.errors import ConfigurationError
from currency_input.models import CurrencyType, EditEvent, FormatConfig, Reflowed, State

__all__ = [
    "ConfigurationError",
    "CurrencyType",
    "EditEvent",
    "FormatConfig",
    "Reflowed",
    "State",
]
