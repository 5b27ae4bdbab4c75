"""Textual widgets for currency-input."""

from __future__ import annotations

from currency_input.widgets.currency_input import CurrencyInput, GhostSuggester

__all__ = ["CurrencyInput", "GhostSuggester"]
