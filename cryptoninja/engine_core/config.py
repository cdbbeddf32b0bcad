"""
Game Config - Tunables for the round rules.
"""

from __future__ import annotations
from dataclasses import dataclass
import os


@dataclass(frozen=True)
class GameConfig:
    """Round rules. Values are fixed per process."""
    round_duration: float = 60.0  # seconds, spans the whole game session
    lives_count: int = 3
    hazard_chance: float = 0.3
    options_count: int = 3

    def __post_init__(self):
        if self.round_duration <= 0:
            raise ValueError("round_duration must be positive")
        if self.lives_count < 1:
            raise ValueError("lives_count must be at least 1")
        if not 0.0 <= self.hazard_chance <= 1.0:
            raise ValueError("hazard_chance must be within [0, 1]")
        if self.options_count < 1:
            raise ValueError("options_count must be at least 1")

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build config from CRYPTONINJA_* environment variables."""
        return cls(
            round_duration=float(os.getenv("CRYPTONINJA_ROUND_DURATION", "60")),
            lives_count=int(os.getenv("CRYPTONINJA_LIVES", "3")),
            hazard_chance=float(os.getenv("CRYPTONINJA_HAZARD_CHANCE", "0.3")),
        )
