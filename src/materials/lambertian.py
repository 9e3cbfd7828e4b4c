# materials/lambertian.py
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Vector3, Ray]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (attenuation, scattered_ray); a diffuse surface never absorbs.
        """
        # Aim at a random point inside the unit sphere sitting on the normal tip.
        target = rec.p + rec.normal + random_in_unit_sphere(rng)
        scattered = Ray(rec.p, target - rec.p)
        return self.albedo, scattered

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"
