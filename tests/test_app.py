"""Integration tests for the demo Textual app."""

from __future__ import annotations

from decimal import Decimal

import pytest
from textual.widgets import Input, Static

from currency_input.app import CurrencyDemoApp, _bounds_text
from currency_input.models import CurrencyType, FormatConfig, State
from currency_input.widgets import CurrencyInput


@pytest.fixture
def config() -> FormatConfig:
    """A bounded two-decimal euro configuration."""
    return FormatConfig(
        min_value=Decimal("100"),
        max_value=Decimal("1000"),
        digits_after_dot=2,
        currency_type=CurrencyType.EUR,
    )


class TestBoundsText:
    """Tests for the hint line under the field."""

    def test_unbounded(self):
        assert _bounds_text(FormatConfig()) == "Range [-∞, ∞], decimals: any"

    def test_bounded(self, config):
        assert _bounds_text(config) == "Range [100, 1000], decimals: 2"


class TestDemoApp:
    """Tests for the single-screen demo."""

    async def test_start_value_is_clamped_and_padded(self, config):
        app = CurrencyDemoApp(config)
        async with app.run_test() as pilot:
            await pilot.pause()
            amount = app.query_one("#amount", CurrencyInput)
            assert amount.value == "100.00"
            assert amount.amount == Decimal("100.00")

    async def test_status_marks_invalid_amount(self, config):
        app = CurrencyDemoApp(config)
        async with app.run_test() as pilot:
            amount = app.query_one("#amount", CurrencyInput)
            amount.focus()
            await pilot.pause()
            amount.amount = Decimal("5")
            await pilot.pause()
            assert amount.state is State.BELOW_MIN
            assert app.query_one("#status-bar", Static).has_class("-invalid")

    async def test_tab_away_commits(self, config):
        app = CurrencyDemoApp(config)
        async with app.run_test() as pilot:
            amount = app.query_one("#amount", CurrencyInput)
            amount.focus()
            await pilot.pause()
            amount.amount = Decimal("5000")
            await pilot.pause()
            assert app.query_one("#status-bar", Static).has_class("-invalid")

            await pilot.press("tab")
            await pilot.pause()
            assert app.focused is app.query_one("#note", Input)
            assert amount.value == "1 000.00"
            assert amount.state is State.APPLIED
            assert not app.query_one("#status-bar", Static).has_class("-invalid")
