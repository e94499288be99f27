# region Imports
from typing import List, Optional

from terrain_carver import config as C
from terrain_carver.models import CarveEvent, Cell, TerrainConfig, TerrainGrid
# endregion

# region Edge Cost Factory
def carving_edge_cost_factory(
    grid: TerrainGrid,
    cfg: TerrainConfig,
    carves: List[CarveEvent],
):
    """
    Edge costs for the path search. Pricing a step that climbs more than
    max_natural_step carves the target column down (or up) to one block above
    the current cell, permanently; each carve is appended to `carves`.
    """

    # region Edge-cost Function
    def edge_cost(u: Cell, v: Cell) -> Optional[int]:
        x1, z1 = v
        if grid.is_water[x1, z1]:
            return None

        h0 = grid.height_at(u)
        step = int(grid.heights[x1, z1]) - h0
        cost = C.BASE_STEP_COST

        if step > cfg.max_natural_step:
            carves.append(grid.carve(x1, z1, h0 + 1, cfg.tunnel_clearance))
            step = int(grid.heights[x1, z1]) - h0
            cost += C.CARVE_PENALTY
        elif step > 0:
            cost += cfg.uphill_penalty * step
        # stepping down any amount costs only the base step

        return cost
    # endregion

    return edge_cost
# endregion
