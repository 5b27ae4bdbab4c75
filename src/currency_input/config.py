"""Configuration resolution for currency-input.

Priority order (highest to lowest):
1. Command-line options (--min, --max, --digits, --start, --currency, --spacing)
2. The ``[currency_input]`` section of the --config / -c file, or of
   ~/.config/currency-input/config.toml when no file is given
3. Built-in defaults (no bounds, unlimited decimals, start value 0, RUR)
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from decimal import Decimal
from pathlib import Path

from currency_input.decimal_value import to_decimal
from currency_input.errors import ConfigurationError
from currency_input.models import CurrencyType, FormatConfig

_CONFIG_PATH = Path.home() / ".config" / "currency-input" / "config.toml"
_SECTION = "currency_input"


def _load_config_dict(path: Path | None = None) -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    path = path or _CONFIG_PATH
    if not path.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def _decimal_setting(key: str, raw: object) -> Decimal | None:
    """Convert a config or CLI value to an exact Decimal.

    Raises:
        ConfigurationError: If the value is not a plain decimal number.
    """
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, (str, int, float, Decimal)):
        raise ConfigurationError(f"Invalid {key}: {raw!r}")
    try:
        return to_decimal(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid {key}: {raw!r}") from None


def _int_setting(key: str, raw: object) -> int | None:
    """Convert a config value to an int, rejecting booleans and strings."""
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigurationError(f"Invalid {key}: {raw!r}")
    return raw


def load_widget_config(path: Path | None = None) -> FormatConfig:
    """Build a FormatConfig from the ``[currency_input]`` section of config.toml.

    Example config.toml::

        [currency_input]
        currency_type = "EUR"
        currency_spacing = 1
        min_value = "100.125"
        max_value = "200.019"
        digits_after_dot = 2

    Args:
        path: Config file to read.  Defaults to
            ``~/.config/currency-input/config.toml``.

    Returns:
        The configuration; missing keys keep their defaults.

    Raises:
        ConfigurationError: If a value is malformed or the bounds are inverted.
    """
    section = _load_config_dict(path).get(_SECTION, {})
    if not isinstance(section, dict):
        return FormatConfig()

    settings: dict[str, object] = {}
    for key in ("min_value", "max_value", "start_value"):
        value = _decimal_setting(key, section.get(key))
        if value is not None:
            settings[key] = value
    for key in ("digits_after_dot", "currency_spacing"):
        value = _int_setting(key, section.get(key))
        if value is not None:
            settings[key] = value
    currency = section.get("currency_type")
    if currency is not None:
        settings["currency_type"] = CurrencyType.from_name(str(currency))
    return FormatConfig(**settings)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'config', 'min', 'max', 'digits', 'start',
        'currency' and 'spacing' attributes.
    """
    parser = argparse.ArgumentParser(
        prog="currency-input",
        description="A terminal demo of a live-formatting currency input field.",
    )
    parser.add_argument("-c", "--config", help="Path to a config.toml file.", default=None)
    parser.add_argument("--min", help="Minimum accepted amount.", default=None)
    parser.add_argument("--max", help="Maximum accepted amount.", default=None)
    parser.add_argument(
        "--digits", type=int, help="Digits allowed after the decimal point.", default=None
    )
    parser.add_argument("--start", help="Amount shown at startup.", default=None)
    parser.add_argument(
        "--currency",
        choices=[c.value for c in CurrencyType],
        type=str.upper,
        help="Currency glyph drawn after the amount.",
        default=None,
    )
    parser.add_argument(
        "--spacing", type=int, help="Blank cells before the currency glyph.", default=None
    )
    return parser.parse_args(argv)


def resolve_widget_config(args: argparse.Namespace) -> FormatConfig:
    """Merge the config file with command-line overrides.

    Args:
        args: Namespace returned by :func:`parse_args`.

    Returns:
        The resolved configuration.

    Raises:
        SystemExit: If the config file or an option is invalid.
    """
    path = Path(args.config).expanduser().resolve() if args.config else None
    if path is not None and not path.exists():
        print(f"Error: config file not found: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_widget_config(path)
        overrides: dict[str, object] = {}
        for key, raw in (
            ("min_value", args.min),
            ("max_value", args.max),
            ("start_value", args.start),
        ):
            value = _decimal_setting(key, raw)
            if value is not None:
                overrides[key] = value
        if args.digits is not None:
            overrides["digits_after_dot"] = args.digits
        if args.spacing is not None:
            overrides["currency_spacing"] = args.spacing
        if args.currency is not None:
            overrides["currency_type"] = CurrencyType.from_name(args.currency)
        return dataclasses.replace(config, **overrides)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
