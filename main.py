#!/usr/bin/env python3
"""
Pathweaver - A Python Path Tracer

Main entry point for rendering scenes.
"""

import argparse
import dataclasses
import logging
import sys
import time

from pathweaver.vec3 import Color, Point3
from pathweaver.camera import Camera, RenderSettings
from pathweaver.shapes import Sphere, HittableList
from pathweaver.materials import Lambertian, Metal, Dielectric
from pathweaver.image import new_image, save_image
from pathweaver.scene_parser import SceneParseError, load_scene


def create_demo_scene() -> HittableList:
    """Create the demo scene: a ground plane and three spheres of different materials."""
    world = HittableList()

    ground = Lambertian(Color(0.8, 0.8, 0.0))
    center = Lambertian(Color(0.1, 0.2, 0.5))
    glass = Dielectric(1.5)
    bubble = Dielectric(1.0 / 1.5)
    gold = Metal(Color(0.8, 0.6, 0.2), 1.0)

    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, ground))
    world.add(Sphere(Point3(0.0, 0.0, -1.2), 0.5, center))
    # Hollow glass: an air bubble inside a glass sphere
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, glass))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.4, bubble))
    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, gold))

    return world


def create_spheres_scene() -> HittableList:
    """Create a two-sphere scene: one diffuse sphere resting on a diffuse ground."""
    world = HittableList()

    grey = Lambertian(Color(0.5, 0.5, 0.5))
    world.add(Sphere(Point3(0, 0, -1), 0.5, grey))
    world.add(Sphere(Point3(0, -100.5, -1), 100, grey))

    return world


SCENES = {
    'demo': create_demo_scene,
    'spheres': create_spheres_scene,
}


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Pathweaver - A Python Path Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene demo --output render.png
  python main.py --width 800 --height 450 --samples 100 --depth 50 --output hd.png
  python main.py --scene scenes/glass.yaml --seed 42
        '''
    )

    parser.add_argument('--scene', type=str, default='demo',
                        help='Built-in scene (demo, spheres) or a YAML/JSON scene file (default: demo)')
    parser.add_argument('--width', type=int, help='Image width (default: 400)')
    parser.add_argument('--height', type=int, help='Image height (default: 225)')
    parser.add_argument('--samples', type=int, help='Samples per pixel (default: 10)')
    parser.add_argument('--depth', type=int, help='Max ray depth (default: 10)')
    parser.add_argument('--seed', type=int, help='Random seed for a reproducible render')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        if args.scene in SCENES:
            world = SCENES[args.scene]()
            settings = RenderSettings()
        else:
            world, _, settings = load_scene(args.scene)

        overrides = {
            'width': args.width,
            'height': args.height,
            'samples_per_pixel': args.samples,
            'max_depth': args.depth,
            'seed': args.seed,
        }
        settings = dataclasses.replace(
            settings, **{k: v for k, v in overrides.items() if v is not None}
        )
    except (SceneParseError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("Pathweaver Path Tracer")
    print("=" * 60)

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Samples: {settings.samples_per_pixel}")
    print(f"  Max Depth: {settings.max_depth}")
    print(f"  Seed: {settings.seed if settings.seed is not None else 'random'}")
    print(f"\nScene: {args.scene}")
    print(f"  Objects in scene: {len(world)}")

    camera = Camera.from_settings(settings)
    image = new_image(settings.width, settings.height)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    camera.set_progress_callback(progress_callback)

    print("\nRendering...")
    start_time = time.time()

    camera.render(image, world)

    elapsed = time.time() - start_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        print(f"  Samples per second: {(settings.width * settings.height * settings.samples_per_pixel) / elapsed:.0f}")

    print(f"\nSaving to: {args.output}")
    save_image(image, args.output)

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
