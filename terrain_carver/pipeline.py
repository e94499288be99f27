# pipeline.py: seed + parameters -> heights, water mask, carved route
from __future__ import annotations
from dataclasses import dataclass
import structlog

from terrain_carver.heightfield import synthesize_heights
from terrain_carver.models import PathResult, TerrainConfig, TerrainGrid
from terrain_carver.planner import plan_path
from terrain_carver.rng import Rng, random_seed
from terrain_carver.water import mark_water

logger = structlog.get_logger()


@dataclass
class Generation:
    config: TerrainConfig   # seed always resolved
    grid: TerrainGrid
    path: PathResult


def generate(cfg: TerrainConfig) -> Generation:
    """
    Run the whole pipeline on a fresh grid. The config is assumed valid
    (see models.validate_config); a seed of None is replaced by a random one.
    """
    if cfg.seed is None:
        cfg = cfg.with_seed(random_seed())
        logger.info("Drew random seed", seed=cfg.seed)

    rng = Rng(cfg.seed)
    grid = TerrainGrid.empty(cfg)

    logger.info("Generating heights", seed=cfg.seed, width=cfg.width, depth=cfg.depth)
    grid.heights[...] = synthesize_heights(cfg, rng)

    logger.info("Marking water", water_level=cfg.water_level)
    mark_water(grid)

    logger.info("Planning path", start=cfg.start, goal=cfg.goal)
    path = plan_path(grid, cfg)

    logger.info(
        "Generation complete",
        seed=cfg.seed, path_length=len(path), carves=len(path.carves),
        used_fallback=path.used_fallback,
    )
    return Generation(config=cfg, grid=grid, path=path)


def regenerate(cfg: TerrainConfig, new_seed: bool = True) -> Generation:
    """Generate again, either with a freshly drawn seed or the same one."""
    if new_seed:
        cfg = cfg.with_seed(random_seed())
    return generate(cfg)
