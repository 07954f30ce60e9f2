"""
Pathweaver - A Python Path Tracer

A small recursive Monte-Carlo path tracer with:
- Sphere primitives with nearest-hit testing
- Lambertian, metal and dielectric materials
- Jittered anti-aliasing and a bounded bounce budget
- Gamma-corrected 8-bit output
"""

__version__ = "0.1.0"
__author__ = "Pathweaver Team"

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .interval import Interval
from .shapes import Sphere, HittableList, HitRecord, Hittable
from .materials import Material, Lambertian, Metal, Dielectric, ScatterResult
from .camera import Camera, RenderSettings
from .color import output_color, linear_to_gamma, sky_color
from .image import new_image, enumerate_pixels, save_image
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
