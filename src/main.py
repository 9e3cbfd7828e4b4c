# main.py
import argparse
import logging
import os
import random
import sys
from typing import List, Optional

import numpy as np

from renderer.raytracer import MAX_DEPTH, Renderer
from renderer.progress import RenderProgress
from renderer.image_io import save_image, write_ppm
from scenes.presets import SCENES
from scenes.loader import SceneError, load_scene
from utilities.logconfig import setup_logging

logger = logging.getLogger(__name__)

# Samples per pixel for each quality level; every level keeps the full bounce cap
QUALITY_LEVELS = {
    "interactive": {"samples": 4},
    "balanced": {"samples": 32},
    "high_quality": {"samples": 100},
}

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Offline Monte Carlo path tracer for sphere scenes.")
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=400)
    p.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="high_quality",
                   help="preset for samples per pixel")
    p.add_argument("--samples", type=int, default=None,
                   help="samples per pixel (overrides --quality)")
    p.add_argument("--max-depth", type=int, default=None,
                   help=f"maximum scattering events per path (default: {MAX_DEPTH})")
    scene = p.add_mutually_exclusive_group()
    scene.add_argument("--scene", choices=sorted(SCENES), default="three_spheres")
    scene.add_argument("--scene-file", help="JSON scene description")
    p.add_argument("--workers", type=int, default=None,
                   help="worker processes (default: one per CPU)")
    p.add_argument("--seed", type=int, default=None,
                   help="seed for reproducible renders")
    p.add_argument("--output", "-o", default=None,
                   help="output image (.ppm or any Pillow format); PPM on stdout if omitted")
    p.add_argument("--preview", action="store_true",
                   help="show the finished image in a window")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    p.add_argument("--log-file", default=None)
    return p.parse_args(argv)

def build_scene(args: argparse.Namespace):
    aspect_ratio = args.width / args.height
    if args.scene_file:
        return load_scene(args.scene_file, aspect_ratio)
    return SCENES[args.scene](aspect_ratio, rng=random.Random(args.seed))

def show_preview(image: np.ndarray, max_size: int = 1280) -> None:
    """
    Displays a rendered (height, width, 3) image until the window is closed
    or Escape is pressed.
    """
    # Imported here so the pygame banner never lands in PPM written to stdout
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        height, width, _ = image.shape
        scale = max(1, max_size // max(width, height))
        screen = pygame.display.set_mode((width * scale, height * scale))
        pygame.display.set_caption("Path Tracer Preview")

        # pygame surfaces are indexed [x, y]
        surf = pygame.surfarray.make_surface(image.swapaxes(0, 1))
        surf = pygame.transform.scale(surf, (width * scale, height * scale))
        screen.blit(surf, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()

def log_progress(progress: RenderProgress) -> None:
    logger.debug("%5.1f%% (%d/%d pixels)", 100.0 * progress.fraction,
                 progress.completed, progress.total)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    quality = QUALITY_LEVELS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else MAX_DEPTH

    try:
        renderer = Renderer(args.width, args.height, samples_per_pixel=samples,
                            workers=args.workers, seed=args.seed, max_depth=max_depth)
        world, camera = build_scene(args)
    except (SceneError, ValueError, OSError) as e:
        logger.error("Cannot start render: %s", e)
        return 1

    logger.info("Scene: %d object(s), %r", len(world), camera)
    progress = RenderProgress(args.width * args.height, listener=log_progress)
    image = renderer.render(world, camera, progress)

    try:
        if args.output is None:
            write_ppm(image, sys.stdout)
            sys.stdout.flush()
        else:
            save_image(image, args.output)
    except (OSError, ValueError) as e:
        logger.error("Failed to write image: %s", e)
        return 1

    if args.preview:
        show_preview(image)
    return 0

if __name__ == "__main__":
    sys.exit(main())
