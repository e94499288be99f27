# planner.py: route from the west edge to the east edge, carving as it goes
from __future__ import annotations
from typing import Iterable, List
import structlog

from terrain_carver.astar_core import astar
from terrain_carver.connectivity import fallback_trench
from terrain_carver.costs import carving_edge_cost_factory
from terrain_carver.grid import manhattan, neighbors_4
from terrain_carver.models import CarveEvent, Cell, PathResult, TerrainConfig, TerrainGrid

logger = structlog.get_logger()


def stamp_path(grid: TerrainGrid, cells: Iterable[Cell]) -> int:
    """Mark route cells on the surface; submerged cells are never stamped."""
    stamped = 0
    for x, z in cells:
        if grid.is_water[x, z]:
            continue
        grid.is_path[x, z] = True
        stamped += 1
    return stamped


def plan_path(grid: TerrainGrid, cfg: TerrainConfig) -> PathResult:
    """
    Search from cfg.start to cfg.goal over `grid`, mutating it in place
    wherever a step needs carving, and stamp the route into grid.is_path.
    Never fails: an unreachable goal falls back to a straight trench.
    """
    start, goal = cfg.start, cfg.goal
    W, D = grid.width, grid.depth
    carves: List[CarveEvent] = []

    def neigh(u):
        return neighbors_4(u, W, D)

    edge_cost = carving_edge_cost_factory(grid, cfg, carves)
    path, cost, expansions = astar(start, goal, neigh, edge_cost, manhattan)

    if path is not None:
        stamp_path(grid, path)
        logger.debug(
            "Path found",
            length=len(path), cost=cost, expansions=expansions, carves=len(carves),
        )
        return PathResult(cells=path, cost=cost, expansions=expansions, carves=carves)

    logger.warning(
        "Path search failed; carving fallback trench path",
        start=start, goal=goal, expansions=expansions,
    )
    cells, trench_carves = fallback_trench(grid, start, goal, cfg.tunnel_clearance)
    carves.extend(trench_carves)
    for x, z in cells:
        grid.is_path[x, z] = True
    return PathResult(
        cells=cells,
        cost=len(cells) - 1,
        expansions=expansions,
        used_fallback=True,
        carves=carves,
    )
