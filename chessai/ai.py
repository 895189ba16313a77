from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import logging
import math
import random
import chess

from .evaluator import Evaluator
from .position import Position

LOGGER = logging.getLogger(__name__)

DEFAULT_DEPTH = 3


@dataclass
class SearchResult:
    best_move: Optional[chess.Move]
    score: float
    nodes: int
    scored_moves: List[Tuple[chess.Move, float]] = field(default_factory=list)


class AIPlayer:
    """Fixed-depth minimax with alpha-beta pruning over a material evaluation.

    Root moves are shuffled before searching so that equally scored moves are
    chosen with equal probability. Pass `seed` or `rng` for reproducible
    choices.
    """

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        evaluator: Optional[Evaluator] = None,
        pruning: bool = True,
    ) -> None:
        self.depth = depth
        self._rng = rng if rng is not None else random.Random(seed)
        self.evaluator = evaluator or Evaluator()
        self.pruning = pruning
        self.nodes = 0

    def choose_move(self, position: Position, depth: Optional[int] = None) -> Optional[chess.Move]:
        """Return the best move for the side to move, or None if there is none."""
        result = self.analyse(position, self.depth if depth is None else depth)
        return result.best_move

    def analyse(self, position: Position, depth: int) -> SearchResult:
        moves = position.legal_moves()
        if not moves:
            LOGGER.debug("No legal moves; nothing to choose")
            return SearchResult(best_move=None, score=self.evaluator.evaluate(position), nodes=0)

        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")

        maximizing = position.turn_to_move() == chess.WHITE
        self._rng.shuffle(moves)
        self.nodes = 0

        best_move: Optional[chess.Move] = None
        best_score = -math.inf if maximizing else math.inf
        scored_moves: List[Tuple[chess.Move, float]] = []

        for move in moves:
            position.apply(move)
            try:
                score = self.search(position, depth - 1, -math.inf, math.inf, not maximizing)
            finally:
                position.undo()
            scored_moves.append((move, score))
            # Ties keep the earlier move
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = move

        if best_move is None:
            best_move = moves[0]

        LOGGER.debug(
            "Chose %s at depth %d (score=%s, nodes=%d)", best_move.uci(), depth, best_score, self.nodes
        )
        return SearchResult(best_move=best_move, score=best_score, nodes=self.nodes, scored_moves=scored_moves)

    def search(
        self,
        position: Position,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
    ) -> float:
        self.nodes += 1
        if depth <= 0 or position.is_game_over():
            return self.evaluator.evaluate(position)

        if maximizing:
            value = -math.inf
            for move in position.legal_moves():
                position.apply(move)
                try:
                    score = self.search(position, depth - 1, alpha, beta, False)
                finally:
                    position.undo()
                value = max(value, score)
                alpha = max(alpha, score)
                if self.pruning and beta <= alpha:
                    break
            return value
        else:
            value = math.inf
            for move in position.legal_moves():
                position.apply(move)
                try:
                    score = self.search(position, depth - 1, alpha, beta, True)
                finally:
                    position.undo()
                value = min(value, score)
                beta = min(beta, score)
                if self.pruning and beta <= alpha:
                    break
            return value

    def random_move(self, position: Position) -> Optional[chess.Move]:
        moves = position.legal_moves()
        if not moves:
            return None
        return self._rng.choice(moves)


def choose_move(
    position: Position, depth: int = DEFAULT_DEPTH, rng: Optional[random.Random] = None
) -> Optional[chess.Move]:
    return AIPlayer(depth=depth, rng=rng).choose_move(position)


def random_move(position: Position, rng: Optional[random.Random] = None) -> Optional[chess.Move]:
    return AIPlayer(rng=rng).random_move(position)
