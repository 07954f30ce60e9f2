"""Tests for Interval class."""

import math
import pytest

from pathweaver.interval import Interval


class TestIntervalMembership:
    """Test contains/surrounds."""

    def test_contains_is_inclusive(self):
        interval = Interval(0.0, 1.0)
        assert interval.contains(0.0)
        assert interval.contains(1.0)
        assert interval.contains(0.5)
        assert not interval.contains(1.5)

    def test_surrounds_is_exclusive(self):
        interval = Interval(0.0, 1.0)
        assert not interval.surrounds(0.0)
        assert not interval.surrounds(1.0)
        assert interval.surrounds(0.5)

    def test_infinite_upper_bound(self):
        interval = Interval(0.001, math.inf)
        assert interval.surrounds(1e300)
        assert not interval.surrounds(0.0)


class TestIntervalClamp:
    """Test clamp."""

    def test_clamp_below(self):
        assert Interval(0.0, 0.999).clamp(-2.0) == 0.0

    def test_clamp_above(self):
        assert Interval(0.0, 0.999).clamp(5.0) == 0.999

    def test_clamp_inside(self):
        assert Interval(0.0, 0.999).clamp(0.25) == 0.25


class TestIntervalConstants:
    """Test EMPTY and UNIVERSE."""

    def test_default_is_empty(self):
        assert Interval() == Interval.EMPTY

    def test_empty_contains_nothing(self):
        assert not Interval.EMPTY.contains(0.0)
        assert Interval.EMPTY.size() < 0

    def test_universe_contains_everything(self):
        assert Interval.UNIVERSE.contains(-1e300)
        assert Interval.UNIVERSE.surrounds(1e300)
        assert Interval.UNIVERSE.size() == math.inf

    def test_size(self):
        assert Interval(1.0, 3.5).size() == 2.5
