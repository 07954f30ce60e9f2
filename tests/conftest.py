"""Shared fixtures for pathweaver tests."""

import itertools

import numpy as np
import pytest


class ScriptedRandom:
    """Random source that replays a fixed cycle of fractions in [0, 1).

    ``uniform(low, high)`` maps the next fraction onto [low, high) and
    ``random()`` returns it unchanged.
    """

    def __init__(self, fractions):
        self._fractions = itertools.cycle(fractions)
        self.calls = 0

    def _next(self) -> float:
        self.calls += 1
        return next(self._fractions)

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._next()

    def random(self) -> float:
        return self._next()


@pytest.fixture
def scripted_rng():
    """Factory for random sources that replay the given fractions."""
    return ScriptedRandom


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(1234)
