# src/geometry/world.py
from typing import Iterable, Iterator, Optional, Tuple
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray

class HittableList(Hittable):
    """
    An immutable collection of Hittable objects. hit() walks every member and
    returns the closest intersection, so member order never changes the result.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self._objects: Tuple[Hittable, ...] = tuple(objects)

    @property
    def objects(self) -> Tuple[Hittable, ...]:
        return self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self._objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
