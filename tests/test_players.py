from __future__ import annotations

import random

import chess
import pytest

from chessai import BoardPosition
from chessai.players import PLAYER_TYPES, is_ai, pick_move, search_depth, validate_player_type

from positions import HANGING_QUEEN_FEN


def test_validate_normalises_case_and_whitespace():
    assert validate_player_type(" Minimax-2 ") == "minimax-2"
    assert validate_player_type("HUMAN") == "human"


@pytest.mark.parametrize("value", ["", "minimax-4", "stockfish", None])
def test_validate_rejects_unknown_types(value):
    with pytest.raises(ValueError):
        validate_player_type(value)


def test_search_depths():
    assert [search_depth(p) for p in PLAYER_TYPES] == [None, None, 1, 2, 3]
    assert [is_ai(p) for p in PLAYER_TYPES] == [False, True, True, True, True]


def test_human_cannot_pick_a_move(start_position):
    with pytest.raises(ValueError):
        pick_move("human", start_position, random.Random(0))


def test_random_tier_returns_legal_move(start_position):
    move = pick_move("random", start_position, random.Random(0))
    assert move in start_position.legal_moves()


@pytest.mark.parametrize("tier", ["minimax-1", "minimax-2", "minimax-3"])
def test_minimax_tiers_take_the_hanging_queen(tier):
    position = BoardPosition.from_fen(HANGING_QUEEN_FEN)
    assert pick_move(tier, position, random.Random(0)) == chess.Move.from_uci("d2d5")
    assert position.fen() == HANGING_QUEEN_FEN
