# models.py
from __future__ import annotations
from dataclasses import dataclass, field, fields, replace
from typing import Any, List, Mapping, Optional, Tuple
import numpy as np

from terrain_carver import config as C
from terrain_carver.errors import ConfigError

Cell = Tuple[int, int]  # (x, z)


# region Configuration
@dataclass(frozen=True)
class TerrainConfig:
    width: int = C.DEFAULT_WIDTH
    depth: int = C.DEFAULT_DEPTH
    max_height: int = C.DEFAULT_MAX_HEIGHT
    water_level: int = C.DEFAULT_WATER_LEVEL
    seed: Optional[int] = C.DEFAULT_SEED      # None -> caller picks one
    base_height: int = C.DEFAULT_BASE_HEIGHT
    height_span: int = C.DEFAULT_HEIGHT_SPAN
    max_step_per_walk: int = C.DEFAULT_MAX_STEP_PER_WALK
    plateau_chance: float = C.DEFAULT_PLATEAU_CHANCE
    smooth_passes: int = C.DEFAULT_SMOOTH_PASSES
    max_natural_step: int = C.DEFAULT_MAX_NATURAL_STEP
    tunnel_clearance: int = C.DEFAULT_TUNNEL_CLEARANCE
    uphill_penalty: int = C.DEFAULT_UPHILL_PENALTY

    @property
    def height_ceiling(self) -> int:
        return min(self.base_height + self.height_span, self.max_height - 1)

    @property
    def start(self) -> Cell:
        return (0, self.depth // 2)

    @property
    def goal(self) -> Cell:
        return (self.width - 1, self.depth // 2)

    def with_seed(self, seed: int) -> "TerrainConfig":
        return replace(self, seed=int(seed))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TerrainConfig":
        """
        Build a config from a JSON-like mapping. Unknown keys are ignored,
        missing keys take the defaults; "null"/"" seed means random.
        """
        kwargs = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            if f.name == "seed":
                kwargs["seed"] = None if raw in (None, "", "null") else _coerce(f.name, raw, int)
            elif f.name == "plateau_chance":
                kwargs[f.name] = _coerce(f.name, raw, float)
            else:
                kwargs[f.name] = _coerce(f.name, raw, int)
        return cls(**kwargs)


def _coerce(name: str, raw: Any, kind):
    if isinstance(raw, bool):
        raise ConfigError(name, f"expected {kind.__name__}, got bool")
    try:
        value = kind(raw)
    except (TypeError, ValueError):
        raise ConfigError(name, f"expected {kind.__name__}, got {raw!r}") from None
    if kind is int and isinstance(raw, float) and raw != value:
        raise ConfigError(name, f"expected an integer, got {raw!r}")
    return value


def validate_config(cfg: TerrainConfig) -> TerrainConfig:
    """Range checks done by callers; the generation core assumes they passed."""
    for name, (lo, hi) in C.CONFIG_RANGES.items():
        v = getattr(cfg, name)
        if v < lo:
            raise ConfigError(name, f"must be >= {lo}, got {v}")
        if v > hi:
            raise ConfigError(name, f"must be <= {hi}, got {v}")
    if not 0 <= cfg.water_level < cfg.max_height:
        raise ConfigError("water_level", f"must be in [0, {cfg.max_height}), got {cfg.water_level}")
    if cfg.base_height > cfg.max_height - 1:
        raise ConfigError("base_height", f"must be < max_height ({cfg.max_height}), got {cfg.base_height}")
    if cfg.seed is not None and not 0 <= cfg.seed < 2**63:
        raise ConfigError("seed", f"must be a non-negative 63-bit integer, got {cfg.seed}")
    return cfg
# endregion


# region Terrain Grid
@dataclass
class CarveEvent:
    cell: Cell
    before: int
    after: int


@dataclass
class TerrainGrid:
    heights: np.ndarray    # (W,D) int, top solid block per column
    is_water: np.ndarray   # (W,D) bool, heights < water_level when last classified
    is_path: np.ndarray    # (W,D) bool, final route footprint
    max_height: int
    water_level: int

    @classmethod
    def empty(cls, cfg: TerrainConfig) -> "TerrainGrid":
        shape = (cfg.width, cfg.depth)
        return cls(
            heights=np.zeros(shape, dtype=np.int64),
            is_water=np.zeros(shape, dtype=bool),
            is_path=np.zeros(shape, dtype=bool),
            max_height=cfg.max_height,
            water_level=cfg.water_level,
        )

    @property
    def width(self) -> int:
        return int(self.heights.shape[0])

    @property
    def depth(self) -> int:
        return int(self.heights.shape[1])

    def height_at(self, cell: Cell) -> int:
        return int(self.heights[cell[0], cell[1]])

    def carve(self, x: int, z: int, floor: int, clearance: int) -> CarveEvent:
        """
        Set the column at (x, z) to a walkable floor, leaving `clearance`
        blocks of headroom under max_height. The floor is clamped to
        [1, max_height - clearance] and the cell is always left dry.
        """
        before = int(self.heights[x, z])
        floor = max(1, min(int(floor), self.max_height - clearance))
        self.heights[x, z] = floor
        self.is_water[x, z] = False
        return CarveEvent(cell=(x, z), before=before, after=floor)
# endregion


# region Path Result
@dataclass
class PathResult:
    cells: List[Cell]                     # start -> goal, inclusive
    cost: int
    expansions: int = 0
    used_fallback: bool = False
    carves: List[CarveEvent] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)
# endregion
