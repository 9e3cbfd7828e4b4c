# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None):
        self.p = p              # Intersection point
        self.normal = normal    # Outward unit normal at intersection
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray arrived from outside
        self.material = material

    def set_outward_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Stores the outward normal unchanged and records which side was hit.
        Materials decide entering/exiting from the normal themselves.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
