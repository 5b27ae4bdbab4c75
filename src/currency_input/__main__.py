"""Entry point for currency-input."""

from currency_input.app import CurrencyDemoApp
from currency_input.config import parse_args, resolve_widget_config


def main() -> None:
    """Run the currency-input demo application."""
    args = parse_args()
    config = resolve_widget_config(args)
    app = CurrencyDemoApp(config=config)
    app.run()


if __name__ == "__main__":
    main()
