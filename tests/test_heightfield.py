"""
Tests for height field synthesis.
"""

import numpy as np
import pytest

from terrain_carver.heightfield import box_blur, plateau_jitter, ridge_fields, synthesize_heights
from terrain_carver.models import TerrainConfig
from terrain_carver.rng import Rng


class TestBoxBlur:

    def test_center_spike(self):
        h = np.zeros((3, 3), dtype=np.int64)
        h[1, 1] = 9
        out = box_blur(h)
        # corners average 4 cells, edges 6, center 9
        assert out[0, 0] == 2
        assert out[0, 1] == 1
        assert out[1, 1] == 1
        assert h[1, 1] == 9  # input untouched

    def test_flat_field_unchanged(self):
        h = np.full((5, 4), 7, dtype=np.int64)
        assert np.array_equal(box_blur(h), h)

    def test_single_cell(self):
        h = np.array([[5]], dtype=np.int64)
        assert box_blur(h)[0, 0] == 5


class TestPlateauJitter:

    def test_zero_chance_leaves_field(self):
        h = np.arange(20, dtype=np.int64).reshape(4, 5)
        before = h.copy()
        plateau_jitter(h, 0.0, Rng(1))
        assert np.array_equal(h, before)

    def test_reads_cells_flattened_earlier_in_pass(self):
        h = np.zeros((3, 4), dtype=np.int64)
        h[1, 1] = 18
        plateau_jitter(h, 1.0, Rng(1))
        assert h[1, 1] == 2
        # (1, 2) sees the already-flattened 2, not the original 18
        assert h[1, 2] == 0

    def test_border_never_touched(self):
        h = np.zeros((4, 4), dtype=np.int64)
        h[0, :] = 9
        h[:, 0] = 9
        before = h.copy()
        plateau_jitter(h, 1.0, Rng(3))
        assert np.array_equal(h[0, :], before[0, :])
        assert np.array_equal(h[:, 0], before[:, 0])
        assert np.array_equal(h[-1, :], before[-1, :])
        assert np.array_equal(h[:, -1], before[:, -1])

    def test_tiny_grid_consumes_nothing(self):
        rng = Rng(9)
        h = np.ones((2, 5), dtype=np.int64)
        plateau_jitter(h, 1.0, rng)
        assert rng.uniform() == Rng(9).uniform()


class TestSynthesis:

    @pytest.mark.parametrize("seed", [0, 1, 17, 12345])
    def test_clamp_invariant(self, seed):
        cfg = TerrainConfig(width=32, depth=20, seed=seed)
        h = synthesize_heights(cfg, Rng(seed))
        assert h.shape == (32, 20)
        assert h.min() >= cfg.base_height
        assert h.max() <= min(cfg.base_height + cfg.height_span, cfg.max_height - 1)

    def test_ceiling_uses_max_height(self):
        cfg = TerrainConfig(width=16, depth=16, max_height=10, base_height=6, height_span=16, seed=4)
        h = synthesize_heights(cfg, Rng(4))
        assert h.max() <= 9

    def test_deterministic(self, small_config):
        a = synthesize_heights(small_config, Rng(small_config.seed))
        b = synthesize_heights(small_config, Rng(small_config.seed))
        assert np.array_equal(a, b)

    def test_walk_steps_bounded(self):
        cfg = TerrainConfig(width=30, depth=10, max_step_per_walk=2, seed=8)
        walk_x, walk_z = ridge_fields(cfg, Rng(8))
        assert walk_x.shape == (30, 10) and walk_z.shape == (30, 10)
        assert np.abs(np.diff(walk_x, axis=0)).max() <= 2
        assert np.abs(np.diff(walk_z, axis=1)).max() <= 2

    def test_no_smoothing_no_jitter_is_clamped_blend(self):
        cfg = TerrainConfig(width=12, depth=9, smooth_passes=0, plateau_chance=0.0, seed=21)
        walk_x, walk_z = ridge_fields(cfg, Rng(21))
        expected = np.clip((walk_x + walk_z) // 2, cfg.base_height, cfg.height_ceiling)
        assert np.array_equal(synthesize_heights(cfg, Rng(21)), expected)
