"""Surface materials and procedural patterns."""

from .material import DIAMOND_INDEX, GLASS_INDEX, VACUUM_INDEX, WATER_INDEX, Material
from .pattern import Pattern, PatternKind

__all__ = [
    "Material",
    "Pattern",
    "PatternKind",
    "VACUUM_INDEX",
    "GLASS_INDEX",
    "WATER_INDEX",
    "DIAMOND_INDEX",
]
