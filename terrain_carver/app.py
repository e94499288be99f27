# app.py: Slim Flask API around the terrain pipeline
# deps: pip install flask numpy structlog

from __future__ import annotations
from dataclasses import asdict
import structlog
from flask import Flask, request, jsonify

from terrain_carver.errors import ConfigError
from terrain_carver.export import grid_to_dict
from terrain_carver.metrics import grid_summary
from terrain_carver.models import TerrainConfig, validate_config
from terrain_carver.pipeline import generate

app = Flask(__name__)
logger = structlog.get_logger()

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp

@app.errorhandler(ConfigError)
def _bad_config(e: ConfigError):
    return jsonify({"error": str(e), "field": e.field}), 400

# ======= endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "generate": "/terrain/generate (POST JSON)", "defaults": asdict(TerrainConfig())}

@app.route("/terrain/generate", methods=["POST"])
def terrain_generate():
    """
    JSON body (all optional, defaults from config.py):
    {
      "width": 64, "depth": 64, "max_height": 24, "water_level": 8,
      "seed": 12345,                 // null -> random
      "base_height": 6, "height_span": 16, "max_step_per_walk": 2,
      "plateau_chance": 0.12, "smooth_passes": 3,
      "max_natural_step": 1, "tunnel_clearance": 3, "uphill_penalty": 3,
      "summary_only": false
    }
    """
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "JSON object body required"}), 400

    cfg = validate_config(TerrainConfig.from_mapping(data))
    logger.info("Terrain generation requested", seed=cfg.seed, width=cfg.width, depth=cfg.depth)
    gen = generate(cfg)

    if data.get("summary_only"):
        return jsonify({"seed": gen.config.seed, "summary": grid_summary(gen.grid, gen.path)})
    return jsonify(grid_to_dict(gen))


if __name__ == "__main__":
    from terrain_carver.logs import configure_logging
    configure_logging()
    app.run(host="0.0.0.0", port=8081, threaded=True)
