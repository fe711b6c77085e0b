from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from tripuzzle_core.codec import json_to_state, state_to_json, step_to_json, board_to_json
from tripuzzle_core.errors import GameOverError
from tripuzzle_core.gameover import check_game_over, find_matching_slides
from tripuzzle_core.session import new_game, play_slide
from tripuzzle_core.state import GameState
from tripuzzle_core.settings import env_flag, load_settings

SETTINGS = load_settings()
MAX_ROWS = 30

if env_flag("TRIPUZZLE_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)

app = Flask(__name__)

# Request-shape problems surface as one of these; all become a 400.
_CLIENT_ERRORS = (ValueError, IndexError, KeyError, TypeError, GameOverError)


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise ValueError("JSON object body required")
    return body


def _rng_from(body: Dict[str, Any]) -> random.Random:
    seed = body.get("seed")
    if seed is not None and not isinstance(seed, int):
        raise ValueError("seed must be an integer")
    return random.Random(seed)


def _state_from(body: Dict[str, Any]) -> GameState:
    raw = body["state"]
    board = raw.get("board") if isinstance(raw, dict) else None
    if isinstance(board, list) and len(board) > MAX_ROWS:
        raise ValueError(f"board must have at most {MAX_ROWS} rows")
    return json_to_state(raw, SETTINGS.colors)


def _bad_request(e: Exception) -> Any:
    app.logger.info("rejected %s: %s", request.path, e)
    if isinstance(e, KeyError):
        msg = f"missing field: {e.args[0] if e.args else ''}"
    else:
        msg = str(e)
    return jsonify({"ok": False, "error": msg}), 400


@app.get("/api/settings")
def api_settings() -> Any:
    return jsonify({"ok": True, "settings": SETTINGS.to_json()})


@app.post("/api/new")
def api_new() -> Any:
    try:
        body = _body()
        rows: Optional[int] = body.get("rows")
        if rows is not None and isinstance(rows, int) and rows > MAX_ROWS:
            raise ValueError(f"rows must be at most {MAX_ROWS}")
        settings = load_settings(num_rows=rows)
        state = new_game(settings, _rng_from(body))
    except _CLIENT_ERRORS as e:
        return _bad_request(e)
    return jsonify({"ok": True, "state": state_to_json(state), "settings": settings.to_json()})


@app.post("/api/slide")
def api_slide() -> Any:
    try:
        body = _body()
        state = _state_from(body)
        row = body["row"]
        if isinstance(row, bool) or not isinstance(row, int):
            raise ValueError("row must be an integer")
        outcome = play_slide(state, row, body["direction"], _rng_from(body), SETTINGS)
    except _CLIENT_ERRORS as e:
        return _bad_request(e)
    return jsonify({
        "ok": True,
        "state": state_to_json(outcome.state),
        "slid": board_to_json(outcome.slid),
        "steps": [step_to_json(s) for s in outcome.steps],
        "gained": outcome.gained,
    })


@app.post("/api/game_over")
def api_game_over() -> Any:
    try:
        state = _state_from(_body())
    except _CLIENT_ERRORS as e:
        return _bad_request(e)
    return jsonify({"ok": True, "gameOver": check_game_over(state.board, SETTINGS.min_match_length)})


@app.post("/api/hints")
def api_hints() -> Any:
    try:
        state = _state_from(_body())
    except _CLIENT_ERRORS as e:
        return _bad_request(e)
    hints = find_matching_slides(state.board, SETTINGS.min_match_length)
    return jsonify({"ok": True, "hints": [[r, d] for (r, d) in hints]})


if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
