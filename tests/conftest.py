"""Shared fixtures for the card-duel test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

import pytest


class ScriptedRNG:
    """Stand-in for ``GameRNG`` that replays pre-set values.

    ``random_int`` pops from *ints*, ``random_float`` (and so ``chance``)
    pops from *floats*; once a script runs dry the matching default is
    returned.  ``random_choice`` always takes the first element and
    ``shuffle`` leaves lists untouched.
    """

    seed = 0

    def __init__(
        self,
        ints: Iterable[int] = (),
        floats: Iterable[float] = (),
        default_int: int = 1,
        default_float: float = 0.99,
    ) -> None:
        self._ints = list(ints)
        self._floats = list(floats)
        self._default_int = default_int
        self._default_float = default_float

    def random_int(self, low: int, high: int) -> int:
        value = self._ints.pop(0) if self._ints else self._default_int
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value

    def random_float(self) -> float:
        return self._floats.pop(0) if self._floats else self._default_float

    def chance(self, probability: float) -> bool:
        return self.random_float() < probability

    def random_choice(self, seq: Sequence[Any]) -> Any:
        return seq[0]

    def shuffle(self, lst: list[Any]) -> None:
        pass

    def fork(self, name: str) -> ScriptedRNG:
        return self


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRNG]:
    """Factory for :class:`ScriptedRNG` instances."""
    return ScriptedRNG
