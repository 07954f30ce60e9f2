"""
Camera module - generates primary rays and estimates pixel colors.

Implements:
- Pinhole projection from the origin looking down -Z
- Jittered anti-aliasing samples within each pixel
- Path tracing with a bounce budget
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional
import numpy as np

from .color import output_color, sky_color
from .image import enumerate_pixels
from .interval import Interval
from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .shapes import Hittable

logger = logging.getLogger(__name__)

# Lower bound for bounce hits, keeps rays from re-hitting their origin
SHADOW_ACNE_EPSILON = 0.001


@dataclass
class RenderSettings:
    """Configuration for a render."""
    width: int = 400
    height: int = 225
    samples_per_pixel: int = 10
    max_depth: int = 10
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")


class Camera:
    """A pinhole camera at the origin with a focal length of 1."""

    def __init__(
        self,
        image_width: int,
        image_height: int,
        samples_per_pixel: int = 10,
        max_depth: int = 10,
        rng=None
    ):
        """Create a camera.

        Args:
            image_width: Image width in pixels
            image_height: Image height in pixels
            samples_per_pixel: Number of jittered samples averaged per pixel
            max_depth: Maximum number of bounces per camera ray
            rng: Random source with ``uniform`` and ``random`` methods
                (defaults to a fresh ``numpy.random.Generator``)
        """
        self.image_width = image_width
        self.image_height = image_height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.rng = rng if rng is not None else np.random.default_rng()
        self._progress_callback: Optional[Callable[[float], None]] = None

        self.center = Point3(0, 0, 0)

        # Viewport dimensions follow the actual image aspect ratio
        focal_length = 1.0
        viewport_height = 2.0
        viewport_width = viewport_height * (image_width / image_height)

        # Edge vectors: u runs left to right, v runs top to bottom
        viewport_u = Vec3(viewport_width, 0, 0)
        viewport_v = Vec3(0, -viewport_height, 0)

        self.pixel_delta_u = viewport_u / image_width
        self.pixel_delta_v = viewport_v / image_height

        viewport_upper_left = (
            self.center
            - Vec3(0, 0, focal_length)
            - viewport_u / 2
            - viewport_v / 2
        )
        # Pixel centers are inset by half a pixel from the viewport edges
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

    @classmethod
    def from_settings(cls, settings: RenderSettings) -> Camera:
        """Create a camera from render settings, seeding its generator."""
        return cls(
            settings.width,
            settings.height,
            samples_per_pixel=settings.samples_per_pixel,
            max_depth=settings.max_depth,
            rng=np.random.default_rng(settings.seed)
        )

    @property
    def pixel_samples_scale(self) -> float:
        """Color scale factor for a sum of pixel samples."""
        return 1.0 / self.samples_per_pixel

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, image: np.ndarray, world: Hittable) -> np.ndarray:
        """Render the world into an 8-bit image buffer.

        Args:
            image: uint8 array of shape (height, width, 3), written in place
            world: The scene to render (any Hittable)

        Returns:
            The image buffer
        """
        height, width = image.shape[:2]
        logger.debug(
            "Rendering %dx%d, %d samples/pixel, max depth %d",
            width, height, self.samples_per_pixel, self.max_depth
        )

        for x, y in enumerate_pixels(image):
            pixel_color = Color(0, 0, 0)
            for _ in range(self.samples_per_pixel):
                ray = self.get_ray(x, y)
                pixel_color = pixel_color + self.ray_color(ray, self.max_depth, world)

            image[y, x] = output_color(pixel_color * self.pixel_samples_scale)

            if x == width - 1 and self._progress_callback:
                self._progress_callback((y + 1) / height)

        logger.debug("Render finished")
        return image

    def get_ray(self, i: float, j: float) -> Ray:
        """Construct a ray through a random point in the unit square around pixel (i, j)."""
        offset = self.sample_square()
        pixel_sample = (
            self.pixel00_loc
            + self.pixel_delta_u * (i + offset.x)
            + self.pixel_delta_v * (j + offset.y)
        )
        return Ray(self.center, pixel_sample - self.center)

    def sample_square(self) -> Vec3:
        """Return a random offset in [-0.5, 0.5) x [-0.5, 0.5).

        Points on the right and bottom edges of the square are excluded.
        """
        return Vec3(self.rng.uniform(-0.5, 0.5), self.rng.uniform(-0.5, 0.5), 0)

    def ray_color(self, ray: Ray, depth: int, world: Hittable) -> Color:
        """Estimate the radiance carried back along a ray.

        Args:
            ray: The ray to trace
            world: The scene to trace against
            depth: Remaining bounce budget

        Returns:
            The computed color for this ray
        """
        throughput = Color(1, 1, 1)

        # One iteration per bounce; throughput holds the product of attenuations so far
        for _ in range(depth):
            hit_record = world.hit(ray, Interval(SHADOW_ACNE_EPSILON, math.inf))

            if hit_record is None:
                return throughput * sky_color(ray)

            if hit_record.material is None:
                # No material - return normal as color (for debugging)
                return throughput * (hit_record.normal + Color(1, 1, 1)) * 0.5

            scatter_result = hit_record.material.scatter(ray, hit_record, self.rng)
            if scatter_result is None:
                return Color(0, 0, 0)

            attenuation, ray = scatter_result
            throughput = throughput * attenuation

        # Bounce budget exhausted, no more light is gathered
        return Color(0, 0, 0)

    def __repr__(self) -> str:
        return (
            f"Camera({self.image_width}x{self.image_height}, "
            f"samples_per_pixel={self.samples_per_pixel}, max_depth={self.max_depth})"
        )
