import numpy as np

from terrain_carver.models import TerrainConfig, TerrainGrid
from terrain_carver.water import mark_water


def grid_from_heights(heights, cfg: TerrainConfig) -> TerrainGrid:
    """Classified grid with hand-made heights, indexed [x, z]."""
    heights = np.asarray(heights, dtype=np.int64)
    assert heights.shape == (cfg.width, cfg.depth)
    grid = TerrainGrid.empty(cfg)
    grid.heights[...] = heights
    return mark_water(grid)


def is_4_connected(cells) -> bool:
    return all(abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1 for a, b in zip(cells, cells[1:]))
