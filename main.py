"""
main.py — Algorithm Visualizer Flask App
=========================================
JSON API over the generator registry, the recorder and comparison mode.
Rendering happens in whatever front end consumes the step traces.

Routes:
  GET  /api/algorithms              – algorithm catalog, grouped by category
  GET  /api/algorithms/<key>        – one algorithm descriptor incl. source
  GET  /api/data-structures         – data-structure catalog, grouped
  GET  /api/data-structures/<key>   – one data-structure descriptor incl. source
  POST /api/run                     – run one generator, return the full trace
  POST /api/compare                 – run two generators on the same input

State management:
  None.  Traces are cheap and deterministic given the input (and the
  seed, when ALGOVIZ_SEED is set), so every request recomputes what it
  needs and the front end owns the playback cursor.
"""

import json
import math
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request

from algorithms import (
    ALGORITHM_CATEGORIES,
    DATA_STRUCTURE_CATEGORIES,
    get_algorithm,
    get_data_structure,
)
from algorithms.payloads import Number
from config import get_settings
from config.logging import get_logger, setup_logging
from engine import KIND_ALGORITHM, KINDS, Recorder, clamp_index, compare

logger = get_logger(__name__)

app = Flask(__name__)

INVALID_INPUT_MESSAGE = "Invalid input data. Please provide a valid JSON array."


class InputError(ValueError):
    """Request input is not a JSON array of numbers."""


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------
def parse_input(raw: Any) -> List[Number]:
    """
    Accept either an already-decoded list or a string holding a JSON
    array (the textarea form).  Every item must be a finite int or
    float; booleans are rejected even though they subclass int, and so
    are the NaN / Infinity tokens json.loads lets through.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError as exc:
            raise InputError(INVALID_INPUT_MESSAGE) from exc

    if not isinstance(raw, list):
        raise InputError(INVALID_INPUT_MESSAGE)

    for item in raw:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise InputError(INVALID_INPUT_MESSAGE)
        if isinstance(item, float) and not math.isfinite(item):
            raise InputError(INVALID_INPUT_MESSAGE)
    return raw


def _request_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def _request_values(body: Dict[str, Any]) -> List[Number]:
    raw = body.get("input")
    if raw is None:
        raw = get_settings().default_input
    return parse_input(raw)


def _request_kind(body: Dict[str, Any]) -> str:
    kind = body.get("kind", KIND_ALGORITHM)
    if kind not in KINDS:
        raise InputError(f"Unknown kind: {kind}")
    return kind


def _error(message: str, status: int) -> Tuple[Any, int]:
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# API: Catalog
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"categories": [cat.to_dict() for cat in ALGORITHM_CATEGORIES]})


@app.route("/api/algorithms/<key>")
def api_algorithm(key: str):
    info = get_algorithm(key)
    if info is None:
        return _error(f"Unknown algorithm: {key}", 404)
    return jsonify(info.to_dict(include_code=True))


@app.route("/api/data-structures")
def api_data_structures():
    return jsonify({"categories": [cat.to_dict() for cat in DATA_STRUCTURE_CATEGORIES]})


@app.route("/api/data-structures/<key>")
def api_data_structure(key: str):
    info = get_data_structure(key)
    if info is None:
        return _error(f"Unknown data structure: {key}", 404)
    return jsonify(info.to_dict(include_code=True))


# ---------------------------------------------------------------------------
# API: Run
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    body = _request_body()
    try:
        kind   = _request_kind(body)
        values = _request_values(body)
    except InputError as e:
        logger.warning(f"rejected /api/run input: {e}")
        return _error(str(e), 400)

    logger.debug(f"/api/run {kind} {body.get('key')} on {len(values)} values")
    rec = Recorder()
    try:
        rec.start(body.get("key", ""), values, kind=kind, rng=get_settings().make_rng())
    except ValueError as e:
        return _error(str(e), 404)

    metrics = rec.run_to_completion()
    return jsonify({
        "totalSteps": len(rec.steps),
        "steps":      [s.to_dict() for s in rec.steps],
        "metrics":    metrics.to_dict(),
    })


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    body = _request_body()
    try:
        kind   = _request_kind(body)
        values = _request_values(body)
        index  = int(body.get("index", 0))
    except (InputError, TypeError, ValueError) as e:
        logger.warning(f"rejected /api/compare input: {e}")
        return _error(str(e), 400)

    settings = get_settings()
    left, right = Recorder(), Recorder()
    try:
        left.start(body.get("key", ""), values, kind=kind, rng=settings.make_rng())
        right.start(body.get("secondKey", ""), values, kind=kind, rng=settings.make_rng())
    except ValueError as e:
        return _error(str(e), 404)

    left.run_to_completion()
    right.run_to_completion()
    result = compare(left, right)

    return jsonify({
        "index":      index,
        "comparison": result.to_dict(),
        "steps": {
            "left":  left.steps[clamp_index(index, len(left.steps))].to_dict(),
            "right": right.steps[clamp_index(index, len(right.steps))].to_dict(),
        },
    })


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file, console=settings.log_console)
    print("=" * 60)
    print("  Algorithm Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://localhost:{settings.port}")
    print("=" * 60)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
