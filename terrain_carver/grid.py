# region Imports
from typing import Iterator
from terrain_carver.models import Cell
# endregion

# region Neighbor Generation
# +x, -x, +z, -z; expansion order is part of the search's tie-breaking
STEPS_4 = ((1, 0), (-1, 0), (0, 1), (0, -1))


def neighbors_4(u: Cell, W: int, D: int) -> Iterator[Cell]:
    x, z = u
    for dx, dz in STEPS_4:
        xx, zz = x + dx, z + dz
        if 0 <= xx < W and 0 <= zz < D:
            yield (xx, zz)
# endregion

# region Distances
def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
# endregion
