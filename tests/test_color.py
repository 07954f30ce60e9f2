"""Tests for color conversion."""

import math
import pytest

from pathweaver.color import INTENSITY, linear_to_gamma, output_color, sky_color
from pathweaver.ray import Ray
from pathweaver.vec3 import Vec3, Point3, Color


class TestLinearToGamma:
    """Test gamma 2 transform."""

    def test_square_root(self):
        assert linear_to_gamma(0.25) == 0.5
        assert linear_to_gamma(1.0) == 1.0

    def test_non_positive_is_zero(self):
        assert linear_to_gamma(0.0) == 0.0
        assert linear_to_gamma(-0.5) == 0.0


class TestOutputColor:
    """Test 8-bit quantization."""

    def test_black(self):
        assert output_color(Color(0, 0, 0)) == (0, 0, 0)

    def test_white_maps_to_254(self):
        assert output_color(Color(1, 1, 1)) == (254, 254, 254)

    def test_overbright_never_wraps(self):
        assert output_color(Color(5.0, 100.0, INTENSITY.max)) == (254, 254, 254)

    def test_negative_clamps_to_zero(self):
        assert output_color(Color(-1.0, -0.1, 0.0)) == (0, 0, 0)

    def test_mid_grey(self):
        # sqrt(0.25) = 0.5 -> 127.5 -> 127
        assert output_color(Color(0.25, 0.25, 0.25)) == (127, 127, 127)

    def test_channels_are_independent(self):
        r, g, b = output_color(Color(0.1, 0.2, 0.3))
        assert r == int(255 * math.sqrt(0.1))
        assert g == int(255 * math.sqrt(0.2))
        assert b == int(255 * math.sqrt(0.3))

    def test_returns_ints(self):
        assert all(isinstance(c, int) for c in output_color(Color(0.3, 0.6, 0.9)))


class TestSkyColor:
    """Test background gradient."""

    def test_zenith_is_blue(self):
        assert sky_color(Ray(Point3(0, 0, 0), Vec3(0, 1, 0))) == Color(0.5, 0.7, 1.0)

    def test_nadir_is_white(self):
        assert sky_color(Ray(Point3(0, 0, 0), Vec3(0, -3, 0))) == Color(1, 1, 1)

    def test_horizon_is_midway(self):
        assert sky_color(Ray(Point3(0, 0, 0), Vec3(0, 0, -1))) == Color(0.75, 0.85, 1.0)

    def test_ignores_direction_length(self):
        a = sky_color(Ray(Point3(0, 0, 0), Vec3(1, 1, -1)))
        b = sky_color(Ray(Point3(5, 5, 5), Vec3(10, 10, -10)))
        assert a == b
