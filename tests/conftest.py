from __future__ import annotations

import pytest

from chessai import BoardPosition


@pytest.fixture
def start_position() -> BoardPosition:
    return BoardPosition()


def position_state(position: BoardPosition):
    board = position.board
    return (board.fen(), list(board.move_stack), [m.uci() for m in board.legal_moves])


@pytest.fixture
def state_of():
    return position_state
