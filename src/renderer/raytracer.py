# renderer/raytracer.py
import logging
import math
import numbers
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional

import numpy as np

from core.ray import Ray
from core.vector import Vector3
from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.progress import RenderProgress
from renderer.tone_mapping import gamma_tone_mapping

logger = logging.getLogger(__name__)

# Maximum number of scattering events along one path
MAX_DEPTH = 50
# Lower ray parameter bound; keeps scattered rays off their own surface
T_MIN = 0.001

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

def background(direction: Vector3) -> Vector3:
    """
    Vertical sky gradient: white at the horizon, sky blue at the zenith.
    """
    unit_direction = direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, rng, depth: int = 0,
              max_depth: int = MAX_DEPTH) -> Vector3:
    """
    Returns the radiance arriving along the ray. Each bounce multiplies in the
    material's attenuation; absorption and the bounce cap both return black.
    """
    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray.direction)

    if depth < max_depth:
        scatter_result = rec.material.scatter(ray, rec, rng)
        if scatter_result is not None:
            attenuation, scattered = scatter_result
            return attenuation * ray_color(scattered, world, rng, depth + 1, max_depth)
    return BLACK

def render_row(world: Hittable, camera: Camera, j: int, width: int, height: int,
               samples: int, rng, max_depth: int = MAX_DEPTH) -> np.ndarray:
    """
    Renders image row j (j = 0 is the bottom row) and returns its averaged
    linear colors as a (width, 3) array.
    """
    row = np.empty((width, 3), dtype=np.float64)
    for i in range(width):
        r = g = b = 0.0
        for _ in range(samples):
            u = (i + rng.random()) / width
            v = (j + rng.random()) / height
            col = ray_color(camera.get_ray(u, v, rng), world, rng, 0, max_depth)
            r += col.x
            g += col.y
            b += col.z
        row[i, 0] = r / samples
        row[i, 1] = g / samples
        row[i, 2] = b / samples
    return row

###############################################################################
# Process pool workers
###############################################################################
_worker_context = {}

def _init_worker(world, camera, width, height, samples, max_depth):
    # Runs once per worker process; the scene is read-only from here on.
    _worker_context.update(world=world, camera=camera, width=width,
                           height=height, samples=samples, max_depth=max_depth)

def _render_row_task(j: int, seed: int):
    ctx = _worker_context
    rng = random.Random(seed)
    row = render_row(ctx["world"], ctx["camera"], j, ctx["width"], ctx["height"],
                     ctx["samples"], rng, ctx["max_depth"])
    return j, row

def _is_positive_int(value) -> bool:
    # bool is an Integral too, but True is not a size
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value > 0

###############################################################################
# Renderer
###############################################################################
class Renderer:
    """
    Drives the per-pixel Monte Carlo estimate over the whole image.

    Rows are the unit of work. Every row gets its own random source seeded
    from ``seed``, so a seeded render gives the same image for any number of
    workers.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 max_depth: int = MAX_DEPTH):
        for name, value in (("width", width), ("height", height),
                            ("samples_per_pixel", samples_per_pixel)):
            if not _is_positive_int(value):
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if workers is None:
            workers = os.cpu_count() or 1
        if not _is_positive_int(workers):
            raise ValueError(f"workers must be a positive integer, got {workers!r}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth!r}")

        self.width = int(width)
        self.height = int(height)
        self.samples_per_pixel = int(samples_per_pixel)
        self.workers = int(workers)
        self.seed = seed
        self.max_depth = max_depth

    def row_seeds(self) -> List[int]:
        """
        One independent seed per row, indexed by j. Without a seed the
        sequence draws fresh OS entropy.
        """
        children = np.random.SeedSequence(self.seed).spawn(self.height)
        return [int(child.generate_state(1)[0]) for child in children]

    def render_linear(self, world: Hittable, camera: Camera,
                      progress: Optional[RenderProgress] = None) -> np.ndarray:
        """
        Returns the averaged linear radiance as a (height, width, 3) float
        array whose first row is the top of the image.
        """
        buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        seeds = self.row_seeds()
        workers = min(self.workers, self.height)
        logger.info("Rendering %dx%d at %d spp with %d worker(s), seed=%s",
                    self.width, self.height, self.samples_per_pixel, workers, self.seed)
        start = time.perf_counter()

        if workers == 1:
            for j in range(self.height - 1, -1, -1):
                row = render_row(world, camera, j, self.width, self.height,
                                 self.samples_per_pixel, random.Random(seeds[j]),
                                 self.max_depth)
                self._store_row(buffer, j, row, progress)
        else:
            initargs = (world, camera, self.width, self.height,
                        self.samples_per_pixel, self.max_depth)
            with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                     initargs=initargs) as executor:
                futures = [executor.submit(_render_row_task, j, seeds[j])
                           for j in range(self.height - 1, -1, -1)]
                for future in as_completed(futures):
                    j, row = future.result()
                    self._store_row(buffer, j, row, progress)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return buffer

    def render(self, world: Hittable, camera: Camera,
               progress: Optional[RenderProgress] = None) -> np.ndarray:
        """
        Renders and tone maps the image; returns (height, width, 3) uint8.
        """
        return gamma_tone_mapping(self.render_linear(world, camera, progress))

    def _store_row(self, buffer: np.ndarray, j: int, row: np.ndarray,
                   progress: Optional[RenderProgress]) -> None:
        # Image rows run top to bottom while j counts up from the bottom.
        buffer[self.height - 1 - j] = row
        if progress is not None:
            progress.advance(self.width)
        logger.debug("Row %d done", j)
