# region Imports and Typing
from typing import Any, Callable, Dict, List, Optional, Set, Tuple
import heapq

from terrain_carver.models import Cell
# endregion

# region Path Reconstruction
def reconstruct(parent, goal):
    path = []
    v = goal
    while v is not None:
        path.append(v)
        v = parent.get(v)
    path.reverse()
    return path
# endregion

# region A* Algorithm
def astar(
    start: Cell,
    goal: Cell,
    neighbors_fn: Callable[[Cell], Any],
    edge_cost_fn: Callable[[Cell, Cell], Optional[int]],
    heuristic_fn: Callable[[Cell, Cell], int],
):
    """
    Best-first search over integer edge costs.

    Returns (path, total_cost, expansions); path is None when OPEN drains
    without reaching the goal.

    edge_cost_fn may mutate the terrain it prices (it is only called for
    neighbours that are not yet closed). Closed cells are never reopened,
    even if a cheaper route to one turns up later. Equal f values pop in
    the order cells first entered OPEN; a re-queued cell keeps its place.
    """
    counter = 0  # stable tie-breaker
    seq: Dict[Cell, int] = {start: counter}  # first insertion per cell
    openh: List[Tuple[int, int, Cell]] = []
    heapq.heappush(openh, (heuristic_fn(start, goal), seq[start], start))
    g: Dict[Cell, int] = {start: 0}
    parent: Dict[Cell, Optional[Cell]] = {start: None}
    closed: Set[Cell] = set()
    expansions = 0

    while openh:
        _, _, u = heapq.heappop(openh)

        if u == goal:
            return reconstruct(parent, u), g[u], expansions

        if u in closed:
            continue
        closed.add(u)
        expansions += 1

        gu = g[u]
        # region Neighbor Loop
        for v in neighbors_fn(u):
            if v in closed:
                continue
            c = edge_cost_fn(u, v)
            if c is None:
                continue
            alt = gu + c
            old = g.get(v)
            if old is None or alt < old:
                g[v] = alt
                parent[v] = u
                if v not in seq:
                    counter += 1
                    seq[v] = counter
                heapq.heappush(openh, (alt + heuristic_fn(v, goal), seq[v], v))
        # endregion

    return None, None, expansions
# endregion
