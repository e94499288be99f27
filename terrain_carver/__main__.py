# __main__.py: command-line generation
from __future__ import annotations
import argparse
import json
from dataclasses import fields

from terrain_carver.errors import ConfigError
from terrain_carver.export import write_grid_json
from terrain_carver.logs import configure_logging
from terrain_carver.metrics import grid_summary
from terrain_carver.models import TerrainConfig, validate_config
from terrain_carver.pipeline import generate


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Generate a carved terrain grid with a walkable west-east path."
    )
    defaults = TerrainConfig()
    for f in fields(TerrainConfig):
        flag = "--" + f.name.replace("_", "-")
        if f.name == "seed":
            p.add_argument(flag, type=int, default=defaults.seed,
                           help="Seed (default: %(default)s). See --random-seed.")
            continue
        kind = float if f.name == "plateau_chance" else int
        p.add_argument(flag, type=kind, default=getattr(defaults, f.name),
                       help="default: %(default)s")
    p.add_argument("--random-seed", action="store_true", help="Ignore --seed and draw one.")
    p.add_argument("--out", type=str, default=None, help="Write the grid as JSON to this file.")
    p.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR"), default="INFO")
    p.add_argument("--log-format", choices=("plain", "json"), default="plain")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    values = {f.name: getattr(args, f.name) for f in fields(TerrainConfig)}
    if args.random_seed:
        values["seed"] = None
    try:
        cfg = validate_config(TerrainConfig(**values))
    except ConfigError as e:
        print(f"error: {e}")
        return 2

    gen = generate(cfg)
    if args.out:
        out = write_grid_json(gen, args.out)
        print(f"Wrote {gen.grid.width}x{gen.grid.depth} grid to {out}")
    else:
        print(json.dumps({"seed": gen.config.seed, **grid_summary(gen.grid, gen.path)}, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
