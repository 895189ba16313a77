from __future__ import annotations

from typing import List, Optional, Protocol

import chess


Squares = List[List[Optional[chess.Piece]]]


class Position(Protocol):
    """Board state the search explores in place via apply/undo."""

    def legal_moves(self) -> List[chess.Move]: ...

    def apply(self, move: chess.Move) -> None: ...

    def undo(self) -> None: ...

    def is_game_over(self) -> bool: ...

    def turn_to_move(self) -> chess.Color: ...

    def board_squares(self) -> Squares: ...


class BoardPosition:
    """Position backed by a python-chess Board.

    `apply` rejects moves that are not legal right now; `undo` pops the
    last applied move and restores the board, turn, castling rights, en
    passant square and clocks exactly.
    """

    def __init__(self, board: Optional[chess.Board] = None) -> None:
        self.board = board if board is not None else chess.Board()

    @classmethod
    def from_fen(cls, fen: str) -> "BoardPosition":
        return cls(chess.Board(fen))

    def legal_moves(self) -> List[chess.Move]:
        return list(self.board.legal_moves)

    def apply(self, move: chess.Move) -> None:
        if not self.board.is_legal(move):
            raise chess.IllegalMoveError(f"illegal move {move.uci()} in {self.board.fen()}")
        self.board.push(move)

    def undo(self) -> None:
        self.board.pop()

    def is_game_over(self) -> bool:
        # A position seen three times or a hundred quiet plies ends the game,
        # but a draw that is only claimable with the next move does not
        return (
            self.board.is_game_over()
            or self.board.is_repetition(3)
            or self.board.halfmove_clock >= 100
        )

    def turn_to_move(self) -> chess.Color:
        return self.board.turn

    def board_squares(self) -> Squares:
        # Rank 8 first, files a..h
        return [
            [self.board.piece_at(chess.square(file, rank)) for file in range(8)]
            for rank in range(7, -1, -1)
        ]

    def copy(self) -> "BoardPosition":
        return BoardPosition(self.board.copy())

    def fen(self) -> str:
        return self.board.fen()
