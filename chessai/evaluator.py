from __future__ import annotations

from typing import Dict, Mapping, Optional

import chess

from .position import Position


class Evaluator:
    """Static material evaluation for chess positions.

    Positive scores favor White, negative scores favor Black, whichever side
    is to move. Only material counts: no mobility, king safety or pawn
    structure terms, and no special score for checkmate.
    """

    # Material values in pawns
    MATERIAL_VALUES: Dict[chess.PieceType, int] = {
        chess.PAWN: 1,
        chess.KNIGHT: 3,
        chess.BISHOP: 3,
        chess.ROOK: 5,
        chess.QUEEN: 9,
        chess.KING: 0,
    }

    # Same ordering at ten times the scale, with a weighted king
    SCALED_VALUES: Dict[chess.PieceType, int] = {
        chess.PAWN: 10,
        chess.KNIGHT: 30,
        chess.BISHOP: 30,
        chess.ROOK: 50,
        chess.QUEEN: 90,
        chess.KING: 900,
    }

    def __init__(self, piece_values: Optional[Mapping[chess.PieceType, int]] = None) -> None:
        values = self.MATERIAL_VALUES if piece_values is None else piece_values
        self.piece_values: Dict[chess.PieceType, int] = dict(values)

    def evaluate(self, position: Position) -> int:
        score = 0
        for row in position.board_squares():
            for piece in row:
                if piece is None:
                    continue
                value = self.piece_values.get(piece.piece_type, 0)
                score += value if piece.color == chess.WHITE else -value
        return score
