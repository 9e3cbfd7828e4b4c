# scenes/presets.py
import random
from typing import Callable, Dict, Optional, Tuple

from core.vector import Vector3
from camera.camera import Camera
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import ColorPresets, DielectricPresets

Scene = Tuple[HittableList, Camera]

UP = Vector3(0.0, 1.0, 0.0)

def three_spheres_scene(aspect_ratio: float, rng: Optional[random.Random] = None) -> Scene:
    """
    Diffuse sphere between a gold-ish metal sphere and a glass sphere, all
    resting on a large yellow ground sphere. The camera focuses on the
    middle sphere with a wide aperture.
    """
    world = HittableList([
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(ColorPresets.BLUE)),
        Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(ColorPresets.YELLOW)),
        Sphere(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.0)),
        Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass()),
    ])
    look_from = Vector3(3.0, 3.0, 2.0)
    look_at = Vector3(0.0, 0.0, -1.0)
    camera = Camera(look_from, look_at, UP, vfov=20.0, aspect_ratio=aspect_ratio,
                    aperture=2.0, focus_dist=(look_from - look_at).length())
    return world, camera

def single_sphere_scene(aspect_ratio: float, rng: Optional[random.Random] = None) -> Scene:
    """One diffuse sphere against the sky, seen through a pinhole camera."""
    world = HittableList([
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.7, 0.3, 0.3))),
    ])
    camera = Camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), UP,
                    vfov=90.0, aspect_ratio=aspect_ratio)
    return world, camera

def random_scene(aspect_ratio: float, rng: Optional[random.Random] = None,
                 grid: int = 11) -> Scene:
    """
    Ground plane covered with small random spheres plus three large ones
    (glass, diffuse, metal). Pass a seeded rng to get the same layout twice.
    """
    if rng is None:
        rng = random.Random()
    objects = [Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColorPresets.GRAY))]

    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vector3(rng.random() * rng.random(),
                                 rng.random() * rng.random(),
                                 rng.random() * rng.random())
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3(0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()),
                                 0.5 * (1 + rng.random()))
                material = Metal(albedo, fuzz=0.5 * rng.random())
            else:
                material = DielectricPresets.glass()
            objects.append(Sphere(center, 0.2, material))

    objects.append(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, Dielectric(1.5)))
    objects.append(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    objects.append(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)))

    camera = Camera(Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0), UP,
                    vfov=20.0, aspect_ratio=aspect_ratio, aperture=0.1, focus_dist=10.0)
    return HittableList(objects), camera

SCENES: Dict[str, Callable[..., Scene]] = {
    "three_spheres": three_spheres_scene,
    "single_sphere": single_sphere_scene,
    "random": random_scene,
}
