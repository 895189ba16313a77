from __future__ import annotations

from flask import Flask, jsonify, request
from typing import Optional
import logging
import random
import sys
from pathlib import Path

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from chessai import AIPlayer, EngineConfig, Game

LOGGER = logging.getLogger(__name__)

# Deeper full-width searches take too long to answer a request
MAX_ANALYSIS_DEPTH = 4


def _parse_depth(value) -> int:
    try:
        return int(value)
    except TypeError:
        raise ValueError(f"depth must be an integer, got {value!r}") from None


def create_app(config: Optional[EngineConfig] = None) -> Flask:
    cfg = config or EngineConfig.load()
    app = Flask(__name__)
    app.config["ENGINE"] = cfg

    game = Game(white=cfg.white_player, black=cfg.black_player, seed=cfg.seed)
    analysis_rng = random.Random(cfg.seed)

    @app.errorhandler(ValueError)
    def handle_value_error(exc: ValueError):
        LOGGER.warning("Rejected request to %s: %s", request.path, exc)
        return jsonify({"error": str(exc)}), 400

    @app.get("/api/state")
    def api_state():
        return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        game.reset(data.get("fen"), white=data.get("white"), black=data.get("black"))

        ai_move_uci = None
        pre_fen: Optional[str] = None
        # If an AI plays the side to move, it makes the first move immediately
        if game.current_player() != "human" and not game.is_game_over():
            # Capture starting position to allow frontend to animate the first AI move
            pre_fen = game.get_full_fen()
            ai_move_uci = game.play_ai_turn()

        snap = game.snapshot()
        snap["ai_move"] = ai_move_uci
        if pre_fen is not None:
            snap["pre_fen"] = pre_fen
        return jsonify(snap)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        uci = payload.get("move")
        if not uci:
            return jsonify({"error": "Missing move"}), 400
        if game.current_player() != "human":
            return jsonify({"error": f"It is not a human player's turn ({game.current_player()} to move)"}), 400

        game.push_uci(uci)

        ai_move_uci = None
        if not game.is_game_over() and game.current_player() != "human":
            ai_move_uci = game.play_ai_turn()

        snap = game.snapshot()
        snap["ai_move"] = ai_move_uci
        return jsonify(snap)

    @app.post("/api/step")
    def api_step():
        # One AI move per call; pacing AI-vs-AI games is the client's job
        ai_move_uci = game.play_ai_turn()
        snap = game.snapshot()
        snap["ai_move"] = ai_move_uci
        return jsonify(snap)

    @app.post("/api/best-move")
    def api_best_move():
        payload = request.get_json(silent=True) or {}
        depth = payload.get("depth")
        depth = cfg.default_depth if depth is None else _parse_depth(depth)
        if depth > MAX_ANALYSIS_DEPTH:
            raise ValueError(f"depth must be at most {MAX_ANALYSIS_DEPTH}, got {depth}")
        result = AIPlayer(rng=analysis_rng).analyse(game.position.copy(), depth)
        return jsonify({
            "move": result.best_move.uci() if result.best_move else None,
            "score": result.score if result.best_move else None,
            "nodes": result.nodes,
            "depth": depth,
        })

    return app


if __name__ == "__main__":
    engine_config = EngineConfig.load()
    logging.basicConfig(level=getattr(logging, engine_config.log_level, logging.INFO))
    create_app(engine_config).run(host=engine_config.host, port=engine_config.port, debug=True)
