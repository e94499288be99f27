# region Imports
from typing import Optional
import numpy as np

from terrain_carver.config import SEED_MAX
# endregion


# region Seeded Source
class Rng:
    """
    One seeded stream for a whole generation run (PCG64 through numpy's
    Generator, reproducible across platforms). Every stage draws from the same
    instance, so the order of calls is part of the output.
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._gen = np.random.default_rng(self.seed)

    def integer(self, lo: int, hi: int) -> int:
        """Uniform int in [lo, hi); an empty range yields lo."""
        if hi <= lo:
            return int(lo)
        return int(self._gen.integers(lo, hi))

    def integers(self, lo: int, hi: int, size: int) -> np.ndarray:
        if hi <= lo:
            return np.full(size, lo, dtype=np.int64)
        return self._gen.integers(lo, hi, size=size, dtype=np.int64)

    def uniform(self) -> float:
        return float(self._gen.random())

    def uniforms(self, size) -> np.ndarray:
        return self._gen.random(size)
# endregion


# region Seed Helpers
def random_seed(source: Optional[np.random.Generator] = None) -> int:
    gen = source if source is not None else np.random.default_rng()
    return int(gen.integers(0, SEED_MAX))
# endregion
