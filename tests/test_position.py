from __future__ import annotations

import chess
import pytest

from chessai import BoardPosition

from positions import FOOLS_MATE_FEN, STALEMATE_FEN


def test_starting_position_has_twenty_moves(start_position):
    moves = start_position.legal_moves()
    assert len(moves) == 20
    assert chess.Move.from_uci("e2e4") in moves
    assert start_position.turn_to_move() == chess.WHITE


def test_apply_then_undo_restores_position(start_position, state_of):
    before = state_of(start_position)
    for move in start_position.legal_moves():
        start_position.apply(move)
        assert start_position.turn_to_move() == chess.BLACK
        start_position.undo()
        assert state_of(start_position) == before


def test_apply_rejects_illegal_move(start_position):
    with pytest.raises(chess.IllegalMoveError):
        start_position.apply(chess.Move.from_uci("e2e5"))
    assert start_position.fen() == chess.STARTING_FEN


def test_illegal_move_error_is_a_value_error(start_position):
    with pytest.raises(ValueError):
        start_position.apply(chess.Move.from_uci("a1a8"))


def test_undo_without_apply_raises(start_position):
    with pytest.raises(IndexError):
        start_position.undo()


def test_board_squares_orientation(start_position):
    squares = start_position.board_squares()
    assert len(squares) == 8 and all(len(row) == 8 for row in squares)
    assert squares[0][0] == chess.Piece(chess.ROOK, chess.BLACK)  # a8
    assert squares[7][4] == chess.Piece(chess.KING, chess.WHITE)  # e1
    assert squares[4][4] is None  # e4
    assert sum(piece is not None for row in squares for piece in row) == 32


def test_game_over_on_checkmate_and_stalemate():
    assert BoardPosition.from_fen(FOOLS_MATE_FEN).is_game_over()
    assert BoardPosition.from_fen(STALEMATE_FEN).is_game_over()
    assert not BoardPosition().is_game_over()


def test_threefold_repetition_ends_the_game(start_position):
    for uci in ["g1f3", "g8f6", "f3g1", "f6g8"] * 2:
        start_position.apply(chess.Move.from_uci(uci))
    assert start_position.legal_moves()
    assert start_position.is_game_over()


def test_copy_is_independent(start_position):
    copy = start_position.copy()
    copy.apply(chess.Move.from_uci("e2e4"))
    assert start_position.fen() == chess.STARTING_FEN
    assert copy.fen() != chess.STARTING_FEN


def test_claimable_repetition_does_not_end_the_game(start_position):
    for uci in ["g1f3", "g8f6", "f3g1", "f6g8", "g1f3", "g8f6", "f3g1"]:
        start_position.apply(chess.Move.from_uci(uci))
    assert not start_position.board.is_repetition(3)
    assert start_position.legal_moves()
    assert not start_position.is_game_over()


@pytest.mark.parametrize("halfmove_clock, over", [(99, False), (100, True)])
def test_fifty_move_rule_ends_the_game(halfmove_clock, over):
    position = BoardPosition.from_fen(f"4k3/8/8/8/8/8/8/4K2R w - - {halfmove_clock} 80")
    assert position.is_game_over() is over
