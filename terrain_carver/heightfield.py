# heightfield.py: integer height field from two blended random walks
from __future__ import annotations
import numpy as np
import structlog

from terrain_carver.models import TerrainConfig
from terrain_carver.rng import Rng

logger = structlog.get_logger()


# region Random Walks
def _walk_rows(cfg: TerrainConfig, rng: Rng, n_lines: int, length: int) -> np.ndarray:
    """One 1D walk per line; returns (n_lines, length). Draw order: start, then deltas."""
    out = np.empty((n_lines, length), dtype=np.int64)
    m = cfg.max_step_per_walk
    for i in range(n_lines):
        v = cfg.base_height + rng.integer(0, cfg.height_span)
        deltas = rng.integers(-m, m + 1, length)
        out[i] = v + np.cumsum(deltas)
    return out


def ridge_fields(cfg: TerrainConfig, rng: Rng):
    # A) along X for each Z, B) along Z for each X; both indexed [x, z]
    walk_x = _walk_rows(cfg, rng, cfg.depth, cfg.width).T
    walk_z = _walk_rows(cfg, rng, cfg.width, cfg.depth)
    return walk_x, walk_z
# endregion


# region Plateau Jitter
def plateau_jitter(h: np.ndarray, chance: float, rng: Rng) -> np.ndarray:
    """
    Flatten random interior cells to their 3x3 mean, in place, scanning x
    then z. Neighbours already flattened earlier in the pass are read as-is.
    """
    W, D = h.shape
    if W < 3 or D < 3:
        return h
    rolls = rng.uniforms((W - 2, D - 2))  # one draw per interior cell, scan order
    for x in range(1, W - 1):
        for z in range(1, D - 1):
            if rolls[x - 1, z - 1] < chance:
                h[x, z] = int(h[x - 1:x + 2, z - 1:z + 2].sum()) // 9
    return h
# endregion


# region Box Blur
def box_blur(h: np.ndarray) -> np.ndarray:
    """3x3 mean over in-bounds neighbours (floor), computed from a snapshot."""
    W, D = h.shape
    padded = np.pad(h, 1, mode="constant", constant_values=0)
    ones = np.pad(np.ones_like(h), 1, mode="constant", constant_values=0)
    total = np.zeros_like(h)
    count = np.zeros_like(h)
    for dx in (0, 1, 2):
        for dz in (0, 1, 2):
            total += padded[dx:dx + W, dz:dz + D]
            count += ones[dx:dx + W, dz:dz + D]
    return total // count
# endregion


# region Synthesis
def synthesize_heights(cfg: TerrainConfig, rng: Rng) -> np.ndarray:
    walk_x, walk_z = ridge_fields(cfg, rng)
    h = (walk_x + walk_z) // 2

    h = plateau_jitter(h, cfg.plateau_chance, rng)
    h = np.clip(h, cfg.base_height, cfg.height_ceiling)

    for _ in range(cfg.smooth_passes):
        h = box_blur(h)

    logger.debug(
        "Height field synthesized",
        min=int(h.min()), max=int(h.max()), smooth_passes=cfg.smooth_passes,
    )
    return h.astype(np.int64)
# endregion
