"""
Color conversion for display.

Linear radiance values are gamma corrected (gamma 2, i.e. a square root)
and quantized to 8-bit channels.
"""

from __future__ import annotations
import math
from typing import Tuple

from .interval import Interval
from .ray import Ray
from .vec3 import Color


INTENSITY = Interval(0.000, 0.999)

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)


def linear_to_gamma(linear_component: float) -> float:
    """Apply gamma 2 correction; non-positive values map to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def output_color(color: Color) -> Tuple[int, int, int]:
    """Convert a linear color to 8-bit channels.

    Each channel is gamma corrected and clamped to ``INTENSITY`` before
    scaling, so the brightest representable channel is 254.

    Args:
        color: Linear RGB color (values nominally in [0, 1])

    Returns:
        (r, g, b) tuple of ints in [0, 254]
    """
    return tuple(
        int(255 * INTENSITY.clamp(linear_to_gamma(c)))
        for c in (color.r, color.g, color.b)
    )


def sky_color(ray: Ray) -> Color:
    """Background gradient from white at the horizon to blue at the zenith."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a
