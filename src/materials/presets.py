# materials/presets.py
from core.vector import Vector3
from materials.material import Material
from materials.metal import Metal
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vector3(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Vector3(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def chrome() -> Metal:
        return Metal(Vector3(0.9, 0.9, 0.9), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.8, 0.8), fuzz=0.3)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def ice() -> Dielectric:
        return Dielectric(1.31)

    @staticmethod
    def sapphire() -> Dielectric:
        return Dielectric(1.77)

class ColorPresets:
    """Common color presets for materials."""

    YELLOW = Vector3(0.8, 0.8, 0.0)
    BLUE = Vector3(0.1, 0.2, 0.5)
    GRAY = Vector3(0.5, 0.5, 0.5)

PRESETS = {
    "gold": MetalPresets.gold,
    "silver": MetalPresets.silver,
    "copper": MetalPresets.copper,
    "chrome": MetalPresets.chrome,
    "brushed_metal": MetalPresets.brushed_metal,
    "glass": DielectricPresets.glass,
    "water": DielectricPresets.water,
    "diamond": DielectricPresets.diamond,
    "ice": DielectricPresets.ice,
    "sapphire": DielectricPresets.sapphire,
}

def by_name(name: str) -> Material:
    """Look up a preset material by name, e.g. "gold" or "glass"."""
    try:
        factory = PRESETS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown material preset {name!r}; choose from {sorted(PRESETS)}") from None
    return factory()
