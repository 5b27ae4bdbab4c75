"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from currency_input.controller import CurrencyController
from currency_input.models import FormatConfig, State


@dataclass(eq=False)
class FakeField:
    """Stand-in for a host text field."""

    value: str = ""
    cursor_position: int = 0
    has_focus: bool = True


@dataclass
class Recorder:
    """Collects ``(value, state)`` pairs reported by a controller."""

    calls: list[tuple[Decimal | None, State]] = field(default_factory=list)

    def __call__(self, value: Decimal | None, state: State) -> None:
        self.calls.append((value, state))

    @property
    def last(self) -> tuple[Decimal | None, State]:
        return self.calls[-1]


@pytest.fixture
def bounded_config() -> FormatConfig:
    """Bounds 100.125..200.019 with two decimals."""
    return FormatConfig(
        min_value=Decimal("100.125"),
        max_value=Decimal("200.019"),
        digits_after_dot=2,
    )


@pytest.fixture
def text_field() -> FakeField:
    """A focused field showing the placeholder zero."""
    return FakeField(value="0", cursor_position=1)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_controller(text_field: FakeField, recorder: Recorder):
    """Factory building a controller over ``text_field`` that reports to ``recorder``."""

    def _make(config: FormatConfig | None = None) -> CurrencyController:
        return CurrencyController(text_field, config, on_value_changed=recorder)

    return _make
