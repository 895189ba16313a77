"""Player tiers: a human, a random mover, and minimax at depths 1 to 3."""

from __future__ import annotations

from typing import Optional

import random
import chess

from .ai import AIPlayer
from .position import Position

HUMAN = "human"
RANDOM = "random"

PLAYER_TYPES = (HUMAN, RANDOM, "minimax-1", "minimax-2", "minimax-3")


def validate_player_type(value: str) -> str:
    player_type = (value or "").strip().lower()
    if player_type not in PLAYER_TYPES:
        raise ValueError(f"Unknown player type: {value!r} (expected one of {', '.join(PLAYER_TYPES)})")
    return player_type


def is_ai(player_type: str) -> bool:
    return player_type != HUMAN


def search_depth(player_type: str) -> Optional[int]:
    if player_type.startswith("minimax-"):
        return int(player_type.split("-", 1)[1])
    return None


def pick_move(player_type: str, position: Position, rng: random.Random) -> Optional[chess.Move]:
    player_type = validate_player_type(player_type)
    if player_type == HUMAN:
        raise ValueError("A human player does not pick moves automatically")
    ai = AIPlayer(rng=rng)
    if player_type == RANDOM:
        return ai.random_move(position)
    return ai.choose_move(position, search_depth(player_type))
