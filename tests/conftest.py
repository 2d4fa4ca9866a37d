from __future__ import annotations

from collections.abc import Iterable

import pytest

from passgen import PasswordGenerator


class ScriptedRandom:
    """Random source that replays fixed values and records each bound."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        value = self._values.pop(0)
        assert 0 <= value < stop, f'scripted value {value} outside [0, {stop})'
        return value


@pytest.fixture
def generator() -> PasswordGenerator:
    return PasswordGenerator()


@pytest.fixture
def scripted():
    def make(*values: int) -> tuple[PasswordGenerator, ScriptedRandom]:
        rng = ScriptedRandom(values)
        return PasswordGenerator(rng=rng), rng

    return make
