"""Demo Textual application for the currency input."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, Label, Static

from currency_input.models import FormatConfig, State
from currency_input.widgets import CurrencyInput

_STATE_TEXTS: dict[State, str] = {
    State.OK: "Editing",
    State.BELOW_MIN: "Below minimum",
    State.ABOVE_MAX: "Above maximum",
    State.APPLIED: "Applied",
}


def _bounds_text(config: FormatConfig) -> str:
    """Describe the configured bounds and accuracy for the hint line."""
    low = "-∞" if config.min_value is None else str(config.min_value)
    high = "∞" if config.max_value is None else str(config.max_value)
    digits = "any" if config.digits_after_dot is None else str(config.digits_after_dot)
    return f"Range [{low}, {high}], decimals: {digits}"


class CurrencyDemoApp(App):
    """A single-screen app showing a CurrencyInput and its reported state."""

    TITLE = "currency-input"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, config: FormatConfig | None = None) -> None:
        """Initialize the app.

        Args:
            config: Configuration for the demo field.
        """
        super().__init__()
        self.config = config or FormatConfig()

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        with Vertical(id="demo-form"):
            yield Label("Amount:", classes="form-label")
            yield CurrencyInput(config=self.config, id="amount")
            yield Static(_bounds_text(self.config), id="bounds-bar")
            yield Label("Note:", classes="form-label")
            yield Input(placeholder="Tab here to commit the amount", id="note")
        yield Static("", id="status-bar")

    def on_currency_input_value_changed(self, event: CurrencyInput.ValueChanged) -> None:
        """Show the latest amount and its state."""
        amount = "—" if event.amount is None else str(event.amount)
        status = self.query_one("#status-bar", Static)
        status.update(f"{amount}  {_STATE_TEXTS[event.state]}")
        status.set_class(not event.state.is_valid, "-invalid")
