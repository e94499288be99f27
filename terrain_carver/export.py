# region Imports
from __future__ import annotations
import json
from typing import Any, Dict

from terrain_carver.metrics import grid_summary
from terrain_carver.pipeline import Generation
# endregion

# region Grid Export
def grid_to_dict(gen: Generation) -> Dict[str, Any]:
    """
    Hand-off format for a renderer. Arrays are nested lists indexed [x][z];
    water fills from height+1 up to water_level-1 on submerged columns.
    """
    grid, path = gen.grid, gen.path
    return {
        "seed": gen.config.seed,
        "width": grid.width,
        "depth": grid.depth,
        "max_height": grid.max_height,
        "water_level": grid.water_level,
        "heights": grid.heights.tolist(),
        "is_water": grid.is_water.tolist(),
        "is_path": grid.is_path.tolist(),
        "path": [[int(x), int(z)] for x, z in path.cells],
        "carves": [
            {"cell": [int(c.cell[0]), int(c.cell[1])], "before": c.before, "after": c.after}
            for c in path.carves
        ],
        "summary": grid_summary(grid, path),
    }


def write_grid_json(gen: Generation, out_path: str = "terrain.json") -> str:
    with open(out_path, "w") as f:
        json.dump(grid_to_dict(gen), f)
    return out_path
# endregion
