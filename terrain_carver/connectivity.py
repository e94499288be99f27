# region Imports
from typing import List, Tuple

from terrain_carver.models import CarveEvent, Cell, TerrainGrid
# endregion

# region Fallback Trench
def fallback_trench(
    grid: TerrainGrid,
    start: Cell,
    goal: Cell,
    clearance: int,
) -> Tuple[List[Cell], List[CarveEvent]]:
    """
    Straight run along the start row from start.x to goal.x. Submerged cells
    on the line are raised to exactly water_level, so the line is always dry.
    """
    z = start[1]
    step = 1 if goal[0] >= start[0] else -1
    cells: List[Cell] = []
    carves: List[CarveEvent] = []
    for x in range(start[0], goal[0] + step, step):
        cells.append((x, z))
        if grid.heights[x, z] < grid.water_level:
            carves.append(grid.carve(x, z, grid.water_level, clearance))
    return cells, carves
# endregion
