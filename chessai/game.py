from __future__ import annotations

from typing import List, Optional, Dict

import logging
import random
import chess

from .players import HUMAN, is_ai, pick_move, validate_player_type
from .position import BoardPosition

LOGGER = logging.getLogger(__name__)


class Game:
    """One game between two player tiers, on top of a BoardPosition.

    This class owns the mutable game state: the position, who plays each
    side, and the SAN move list. AI turns are played on demand through
    `play_ai_turn`; scheduling them is up to the caller.
    """

    def __init__(
        self,
        starting_fen: Optional[str] = None,
        white: str = HUMAN,
        black: str = "minimax-3",
        seed: Optional[int] = None,
    ) -> None:
        self._rng = random.Random(seed)
        self.white_player = validate_player_type(white)
        self.black_player = validate_player_type(black)
        self.reset(starting_fen)

    def reset(
        self,
        starting_fen: Optional[str] = None,
        white: Optional[str] = None,
        black: Optional[str] = None,
    ) -> None:
        # Validate everything before touching state
        board = chess.Board(fen=starting_fen) if starting_fen else chess.Board()
        white_player = validate_player_type(white) if white is not None else self.white_player
        black_player = validate_player_type(black) if black is not None else self.black_player

        self.position = BoardPosition(board)
        self.white_player = white_player
        self.black_player = black_player
        self.history: List[str] = []
        self.last_move_was_capture: bool = False

    @property
    def board(self) -> chess.Board:
        return self.position.board

    def get_full_fen(self) -> str:
        return self.position.fen()

    def get_turn_color(self) -> str:
        return "white" if self.board.turn == chess.WHITE else "black"

    def current_player(self) -> str:
        return self.white_player if self.board.turn == chess.WHITE else self.black_player

    def get_legal_moves(self) -> List[str]:
        return [move.uci() for move in self.position.legal_moves()]

    def is_game_over(self) -> bool:
        return self.position.is_game_over()

    def get_result(self) -> Optional[str]:
        if not self.is_game_over():
            return None
        outcome = self.board.outcome()
        # Repetition and fifty-move draws have no outcome from python-chess
        return outcome.result() if outcome is not None else "1/2-1/2"

    def status(self) -> str:
        if not self.is_game_over():
            return ""
        outcome = self.board.outcome()
        if outcome is None:
            return "Draw!"
        if outcome.termination == chess.Termination.CHECKMATE:
            winner = "White" if outcome.winner == chess.WHITE else "Black"
            player = self.white_player if outcome.winner == chess.WHITE else self.black_player
            name = winner if player == HUMAN else f"{winner} ({player})"
            return f"Checkmate! {name} wins!"
        if outcome.winner is None:
            return "Draw!"
        return "Game Over!"

    def push_uci(self, uci: str) -> None:
        try:
            move = chess.Move.from_uci(uci)
        except chess.InvalidMoveError as exc:
            raise ValueError(f"Illegal move: {uci}") from exc

        if self.board.is_legal(move):
            self._push(move)
            return

        # Auto-queen promotion if user sends e7e8 or similar without suffix
        if len(uci) == 4:
            piece = self.board.piece_at(move.from_square)
            if piece and piece.piece_type == chess.PAWN:
                to_rank = chess.square_rank(move.to_square)
                if (piece.color == chess.WHITE and to_rank == 7) or (
                    piece.color == chess.BLACK and to_rank == 0
                ):
                    promo_move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)
                    if self.board.is_legal(promo_move):
                        self._push(promo_move)
                        return

        raise ValueError(f"Illegal move: {uci}")

    def play_ai_turn(self) -> Optional[str]:
        """Play one move for the side to move if it is an AI tier.

        Returns the UCI string of the move played, or None when the game is
        already over.
        """
        player = self.current_player()
        if not is_ai(player):
            raise ValueError(f"It is {self.get_turn_color()}'s turn and {self.get_turn_color()} is human")
        if self.is_game_over():
            return None

        move = pick_move(player, self.position.copy(), self._rng)
        if move is None:
            return None
        self._push(move)
        return move.uci()

    def _push(self, move: chess.Move) -> None:
        san = self.board.san(move)
        self.last_move_was_capture = self.board.is_capture(move)
        self.position.apply(move)
        self.history.append(san)
        LOGGER.info("%s played %s (%s)", "White" if self.board.turn == chess.BLACK else "Black", san, move.uci())

    def pop(self) -> None:
        self.position.undo()
        self.history.pop()
        self.last_move_was_capture = False

    def snapshot(self) -> Dict[str, object]:
        last_uci: Optional[str] = None
        if self.board.move_stack:
            last_uci = self.board.move_stack[-1].uci()

        in_check = self.board.is_check()
        check_square: Optional[str] = None
        if in_check:
            king_sq = self.board.king(self.board.turn)
            if king_sq is not None:
                check_square = chess.SQUARE_NAMES[king_sq]

        return {
            "fen": self.get_full_fen(),
            "turn": self.get_turn_color(),
            "legal_moves": self.get_legal_moves(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "status": self.status(),
            "last_move": last_uci,
            "in_check": in_check,
            "check_square": check_square,
            "last_move_capture": self.last_move_was_capture,
            "white_player": self.white_player,
            "black_player": self.black_player,
            "history": list(self.history),
        }
