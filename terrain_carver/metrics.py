# metrics.py
from typing import Any, Dict
import numpy as np

from terrain_carver.models import PathResult, TerrainGrid


def grid_summary(grid: TerrainGrid, path: PathResult) -> Dict[str, Any]:
    h = grid.heights
    return {
        "width": grid.width,
        "depth": grid.depth,
        "min_height": int(h.min()),
        "max_height": int(h.max()),
        "mean_height": float(np.mean(h)),
        "water_ratio": float(grid.is_water.mean()),
        "shore_cells": int(np.count_nonzero(h == grid.water_level)),
        "path_length": len(path),
        "path_cost": int(path.cost),
        "carves": len(path.carves),
        "used_fallback": bool(path.used_fallback),
    }
