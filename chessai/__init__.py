"""Chess AI package: material evaluation and alpha-beta move selection.

Modules:
- position: the Position capability the search explores, backed by python-chess
- evaluator: Material-only evaluation, White positive
- ai: Fixed-depth minimax with alpha-beta pruning, plus a random mover
- players: Player tiers (human, random, minimax-1..3)
- game: Game session driving the tiers for the web API
- config: Engine configuration loaded from TOML and the environment
"""

from .position import Position, BoardPosition
from .evaluator import Evaluator
from .ai import AIPlayer, SearchResult, choose_move, random_move
from .game import Game
from .config import EngineConfig

__all__ = [
    "Position",
    "BoardPosition",
    "Evaluator",
    "AIPlayer",
    "SearchResult",
    "choose_move",
    "random_move",
    "Game",
    "EngineConfig",
]
