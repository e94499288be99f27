from terrain_carver.models import (
    CarveEvent,
    PathResult,
    TerrainConfig,
    TerrainGrid,
    validate_config,
)
from terrain_carver.pipeline import Generation, generate, regenerate
from terrain_carver.rng import Rng

__all__ = [
    "CarveEvent",
    "Generation",
    "PathResult",
    "Rng",
    "TerrainConfig",
    "TerrainGrid",
    "generate",
    "regenerate",
    "validate_config",
]
