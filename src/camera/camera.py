# camera/camera.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Positionable thin-lens camera. Built once from eye, target and up vectors
    and never modified afterwards, so it can be shared by every render worker.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: Optional[float] = None):
        if focus_dist is None:
            focus_dist = (look_from - look_at).length()

        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0

        theta = math.radians(vfov)
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.lower_left_corner = (self.origin -
                                  self.u * (half_width * focus_dist) -
                                  self.v * (half_height * focus_dist) -
                                  self.w * focus_dist)
        self.horizontal = self.u * (2.0 * half_width * focus_dist)
        self.vertical = self.v * (2.0 * half_height * focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through screen coordinates (s, t) with depth of field."""
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.origin)
            return Ray(self.origin, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)

        return Ray(ray_origin, ray_direction)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from!r}, look_at={self.look_at!r}, "
                f"vfov={self.vfov}, aspect_ratio={self.aspect_ratio}, "
                f"aperture={self.aperture}, focus_dist={self.focus_dist})")
