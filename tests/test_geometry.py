"""Tests for sphere intersection and the scene aggregate."""

import itertools
import math

import pytest

from core.vector import Vector3
from core.ray import Ray
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal


MATTE = Lambertian(Vector3(0.5, 0.5, 0.5))


class TestSphere:
    """Ray/sphere intersection."""

    def test_head_on_hit(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE)
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p == pytest.approx(Vector3(0.0, 0.0, 1.0))
        assert rec.normal == pytest.approx(Vector3(0.0, 0.0, 1.0))
        assert rec.material is MATTE
        assert rec.front_face

    def test_unnormalized_direction_uses_smaller_root(self):
        sphere = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, MATTE)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -2.0))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec.t == pytest.approx(1.0)
        assert rec.p == pytest.approx(Vector3(0.0, 0.0, -2.0))

    def test_inside_hit_reports_far_root_with_outward_normal(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0, MATTE)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert rec.normal == pytest.approx(Vector3(1.0, 0.0, 0.0))
        assert not rec.front_face

    def test_normal_is_unit_length(self):
        sphere = Sphere(Vector3(1.0, 2.0, 3.0), 2.5, MATTE)
        ray = Ray(Vector3(-4.0, 1.0, 2.0), Vector3(1.0, 0.3, 0.1))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert rec.normal.length() == pytest.approx(1.0)
        # outward: points away from the center
        assert (rec.p - sphere.center).dot(rec.normal) > 0

    def test_miss(self):
        sphere = Sphere(Vector3(0.0, 0.0, -1.0), 0.5, MATTE)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0))
        assert sphere.hit(ray, 0.001, math.inf) is None

    def test_tangent_ray_is_a_miss(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE)
        ray = Ray(Vector3(-5.0, 1.0, 0.0), Vector3(1.0, 0.0, 0.0))
        assert sphere.hit(ray, 0.001, math.inf) is None

    def test_interval_bounds(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE)
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        # Both roots (4 and 6) are beyond t_max
        assert sphere.hit(ray, 0.001, 3.0) is None
        # The near root is excluded, the far root is accepted
        rec = sphere.hit(ray, 4.5, math.inf)
        assert rec.t == pytest.approx(6.0)
        # Sphere entirely behind the ray
        assert sphere.hit(ray, 7.0, math.inf) is None


class TestHittableList:
    """Closest-hit search over the scene."""

    def spheres(self):
        return [
            Sphere(Vector3(0.0, 0.0, -5.0), 1.0, MATTE),
            Sphere(Vector3(0.0, 0.0, -2.0), 0.5, Metal(Vector3(0.8, 0.8, 0.8), 0.0)),
            Sphere(Vector3(0.0, 0.0, -10.0), 3.0, MATTE),
        ]

    def test_closest_hit(self):
        world = HittableList(self.spheres())
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec = world.hit(ray, 0.001, math.inf)
        assert rec.t == pytest.approx(1.5)

    def test_order_independent(self):
        ray = Ray(Vector3(0.0, 0.1, 0.0), Vector3(0.0, 0.0, -1.0))
        results = set()
        for order in itertools.permutations(self.spheres()):
            rec = HittableList(order).hit(ray, 0.001, math.inf)
            results.add((rec.t, rec.p, rec.normal, id(rec.material)))
        assert len(results) == 1

    def test_empty_world_misses(self):
        world = HittableList()
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert world.hit(ray, 0.001, math.inf) is None
        assert len(world) == 0

    def test_objects_are_read_only(self):
        world = HittableList(self.spheres())
        assert isinstance(world.objects, tuple)
        assert len(list(world)) == 3
        with pytest.raises(AttributeError):
            world.objects = ()
