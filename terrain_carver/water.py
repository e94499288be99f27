# water.py
import numpy as np

from terrain_carver.models import TerrainGrid


def classify_water(heights: np.ndarray, water_level: int) -> np.ndarray:
    return heights < water_level


def mark_water(grid: TerrainGrid) -> TerrainGrid:
    """Recompute the submersion mask for every cell from the current heights."""
    grid.is_water[...] = classify_water(grid.heights, grid.water_level)
    return grid
