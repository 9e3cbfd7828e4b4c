"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the source root to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from geometry.world import HittableList  # noqa: E402
from camera.camera import Camera  # noqa: E402
from materials.lambertian import Lambertian  # noqa: E402


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def diffuse_world():
    """One diffuse sphere in front of the origin."""
    return HittableList([
        Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.7, 0.3, 0.3))),
    ])


@pytest.fixture
def pinhole_camera():
    """Pinhole camera at the origin looking down -z with a 2:1 aspect ratio."""
    return Camera(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0),
                  Vector3(0.0, 1.0, 0.0), vfov=90.0, aspect_ratio=2.0)
