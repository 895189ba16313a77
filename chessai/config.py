from dataclasses import dataclass, fields
from typing import Optional
import os
import tomllib

from .players import validate_player_type


@dataclass
class EngineConfig:
    default_depth: int = 3
    seed: Optional[int] = None  # None means a fresh entropy-seeded RNG
    white_player: str = "human"
    black_player: str = "minimax-3"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    def __post_init__(self) -> None:
        if self.default_depth < 1:
            raise ValueError(f"default_depth must be at least 1, got {self.default_depth}")
        self.white_player = validate_player_type(self.white_player)
        self.black_player = validate_player_type(self.black_player)
        self.log_level = self.log_level.upper()

    @staticmethod
    def load_from_toml(path: str = "chessai.toml") -> "EngineConfig":
        if not os.path.exists(path):
            return EngineConfig()
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        known = {f.name for f in fields(EngineConfig)}
        values = {k: v for k, v in raw.get("engine", {}).items() if k in known}
        return EngineConfig(**values)

    @staticmethod
    def load() -> "EngineConfig":
        """Load the TOML file named by CHESSAI_CONFIG_TOML, then apply env overrides."""
        cfg = EngineConfig.load_from_toml(os.environ.get("CHESSAI_CONFIG_TOML", "chessai.toml"))
        overrides = {}
        depth = os.environ.get("CHESSAI_DEPTH")
        if depth:
            overrides["default_depth"] = int(depth)
        seed = os.environ.get("CHESSAI_SEED")
        if seed:
            overrides["seed"] = int(seed)
        log_level = os.environ.get("CHESSAI_LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level
        if not overrides:
            return cfg
        values = {f.name: getattr(cfg, f.name) for f in fields(EngineConfig)}
        values.update(overrides)
        return EngineConfig(**values)
