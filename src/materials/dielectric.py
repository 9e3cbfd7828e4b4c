# src/materials/dielectric.py
import math
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect
from geometry.hittable import HitRecord
from materials.material import Material

class Dielectric(Material):
    """
    Clear refractive material (glass, water, ...). Chooses between reflection
    and refraction with Schlick's approximation and never absorbs.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Vector3, Ray]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        direction = ray_in.direction
        d_dot_n = direction.dot(rec.normal)

        # Determine if we're exiting (positive) or entering the material
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            reflect_prob = 1.0
        else:
            reflect_prob = schlick(cosine, self.ref_idx)

        if rng.random() < reflect_prob:
            return attenuation, Ray(rec.p, reflect(direction, rec.normal))
        return attenuation, Ray(rec.p, refracted)

    def __repr__(self) -> str:
        return f"Dielectric(ref_idx={self.ref_idx})"

def refract(v: Vector3, n: Vector3, ni_over_nt: float) -> Optional[Vector3]:
    """
    Snell's law. Returns None when there is no real refraction root.
    """
    uv = v.normalize()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0:
        return (uv - n * dt) * ni_over_nt - n * math.sqrt(discriminant)
    return None

def schlick(cosine: float, ref_idx: float) -> float:
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
