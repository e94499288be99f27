import pytest

from terrain_carver.models import TerrainConfig


@pytest.fixture
def small_config():
    return TerrainConfig(width=24, depth=16, seed=1234)


@pytest.fixture
def flat_config():
    return TerrainConfig(
        width=8, depth=3, max_height=24, water_level=2,
        max_natural_step=1, tunnel_clearance=3, uphill_penalty=3,
    )
