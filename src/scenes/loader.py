# scenes/loader.py
"""
JSON scene files.

A scene file looks like::

    {
      "camera": {"look_from": [3, 3, 2], "look_at": [0, 0, -1], "up": [0, 1, 0],
                 "vfov": 20, "aperture": 0.5, "focus_dist": 5.2},
      "objects": [
        {"type": "sphere", "center": [0, 0, -1], "radius": 0.5,
         "material": {"type": "lambertian", "albedo": [0.1, 0.2, 0.5]}},
        {"type": "sphere", "center": [1, 0, -1], "radius": 0.5,
         "material": {"preset": "gold"}}
      ]
    }

Only "look_from" and "look_at" are required in the camera block.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from core.vector import Vector3
from camera.camera import Camera
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.material import Material
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from materials.presets import by_name

logger = logging.getLogger(__name__)

class SceneError(ValueError):
    """Raised when a scene description cannot be turned into a scene."""

def _vector(value: Any, field: str) -> Vector3:
    try:
        x, y, z = (float(c) for c in value)
    except (TypeError, ValueError):
        raise SceneError(f"{field} must be a list of three numbers, got {value!r}") from None
    return Vector3(x, y, z)

def _number(data: Dict[str, Any], key: str, field: str, default=None) -> float:
    value = data.get(key, default)
    if value is None:
        raise SceneError(f"{field}.{key} is required")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise SceneError(f"{field}.{key} must be a number, got {value!r}") from None

def parse_material(data: Dict[str, Any], field: str = "material") -> Material:
    if not isinstance(data, dict):
        raise SceneError(f"{field} must be an object, got {data!r}")
    if "preset" in data:
        try:
            return by_name(str(data["preset"]))
        except KeyError as e:
            raise SceneError(f"{field}: {e.args[0]}") from None

    kind = data.get("type")
    if kind == "lambertian":
        return Lambertian(_vector(data.get("albedo"), f"{field}.albedo"))
    if kind == "metal":
        return Metal(_vector(data.get("albedo"), f"{field}.albedo"),
                     _number(data, "fuzz", field, default=0.0))
    if kind == "dielectric":
        return Dielectric(_number(data, "refractive_index", field))
    raise SceneError(f"{field}.type must be lambertian, metal or dielectric, got {kind!r}")

def parse_camera(data: Dict[str, Any], aspect_ratio: float) -> Camera:
    if not isinstance(data, dict):
        raise SceneError(f"camera must be an object, got {data!r}")
    if "look_from" not in data or "look_at" not in data:
        raise SceneError("camera.look_from and camera.look_at are required")
    focus_dist = data.get("focus_dist")
    return Camera(
        look_from=_vector(data["look_from"], "camera.look_from"),
        look_at=_vector(data["look_at"], "camera.look_at"),
        vup=_vector(data.get("up", [0, 1, 0]), "camera.up"),
        vfov=_number(data, "vfov", "camera", default=90.0),
        aspect_ratio=aspect_ratio,
        aperture=_number(data, "aperture", "camera", default=0.0),
        focus_dist=None if focus_dist is None else _number(data, "focus_dist", "camera"),
    )

def parse_scene(data: Dict[str, Any], aspect_ratio: float) -> Tuple[HittableList, Camera]:
    """Builds the world and camera from an already decoded scene document."""
    if not isinstance(data, dict):
        raise SceneError("scene must be a JSON object")
    objects = data.get("objects", [])
    if not isinstance(objects, list):
        raise SceneError("objects must be a list")

    spheres = []
    for index, obj in enumerate(objects):
        field = f"objects[{index}]"
        if not isinstance(obj, dict):
            raise SceneError(f"{field} must be an object")
        kind = obj.get("type", "sphere")
        if kind != "sphere":
            raise SceneError(f"{field}.type {kind!r} is not supported; only spheres are")
        spheres.append(Sphere(_vector(obj.get("center"), f"{field}.center"),
                              _number(obj, "radius", field),
                              parse_material(obj.get("material"), f"{field}.material")))

    camera = parse_camera(data.get("camera"), aspect_ratio)
    logger.info("Loaded scene with %d sphere(s)", len(spheres))
    return HittableList(spheres), camera

def load_scene(path: Union[str, Path], aspect_ratio: float) -> Tuple[HittableList, Camera]:
    """Reads a JSON scene file. OSError from reading is left to the caller."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError(f"{path}: invalid JSON ({e})") from e
    return parse_scene(data, aspect_ratio)
