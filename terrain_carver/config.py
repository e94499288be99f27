# config.py
# Defaults for one generation run (grid size, water, walks, pathing).

# World size
DEFAULT_WIDTH = 64
DEFAULT_DEPTH = 64
DEFAULT_MAX_HEIGHT = 24

# Water: cells whose surface is below this level are submerged
DEFAULT_WATER_LEVEL = 8

DEFAULT_SEED = 12345
# Upper bound (exclusive) for seeds drawn when the caller asks for a random one
SEED_MAX = 2**31 - 1

# Heights: dual random walks, plateau jitter, box blur
DEFAULT_BASE_HEIGHT = 6
DEFAULT_HEIGHT_SPAN = 16
DEFAULT_MAX_STEP_PER_WALK = 2
DEFAULT_PLATEAU_CHANCE = 0.12
DEFAULT_SMOOTH_PASSES = 3

# Pathing
DEFAULT_MAX_NATURAL_STEP = 1
DEFAULT_TUNNEL_CLEARANCE = 3
DEFAULT_UPHILL_PENALTY = 3

# Flat surcharge on a step that had to be carved
CARVE_PENALTY = 2
BASE_STEP_COST = 1

# Accepted ranges, checked by callers before generation (field -> (lo, hi)).
# Upper bounds follow the generator's inspector limits; grids may be smaller
# than its 16-cell minimum.
CONFIG_RANGES = {
    "width": (1, 256),
    "depth": (1, 256),
    "max_height": (8, 64),
    "base_height": (0, 32),
    "height_span": (1, 48),
    "max_step_per_walk": (1, 5),
    "plateau_chance": (0.0, 1.0),
    "smooth_passes": (0, 8),
    "max_natural_step": (1, 3),
    "tunnel_clearance": (2, 4),
    "uphill_penalty": (0, 10),
}
