"""
Game State - The value that travels through the client between requests.

Design principles:
- Immutable-friendly: all mutations return new state
- Serializable: see codec.py for the wire form
- Server never owns it: every request gets it back from the client
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class Screen(Enum):
    """Screens of the frame state machine."""
    MENU = "menu"
    GAME = "game"
    RULES = "rules"
    LEADERBOARD = "leaderboard"
    SHOP = "shop"
    GAME_OVER = "game_over"


# Screens reached from the menu that only offer "play" or "back"
INFO_SCREENS = frozenset({Screen.RULES, Screen.LEADERBOARD, Screen.SHOP})


@dataclass(frozen=True)
class Coin:
    """
    A coin in the catalog.

    Coins are static definitions; a round references them by value.
    """
    name: str
    symbol: str
    glyph: str
    points: int
    is_hazard: bool = False

    @property
    def signed_points(self) -> str:
        return f"{self.points:+d}"


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through GameEngine.step().
    """
    score: int = 0
    lives: int = 3
    options: tuple[Coin, ...] = field(default_factory=tuple)
    combo: int = 1
    start_time: float = 0.0
    game_over: bool = False
    screen: Screen = Screen.MENU

    @property
    def hazard_count(self) -> int:
        return sum(1 for coin in self.options if coin.is_hazard)

    @property
    def in_game(self) -> bool:
        return self.screen == Screen.GAME

    def option(self, button_index: int) -> Coin | None:
        """Get the coin behind a 1-based button index, or None if out of range."""
        if 1 <= button_index <= len(self.options):
            return self.options[button_index - 1]
        return None

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            score=kwargs.get("score", self.score),
            lives=kwargs.get("lives", self.lives),
            options=kwargs.get("options", self.options),
            combo=kwargs.get("combo", self.combo),
            start_time=kwargs.get("start_time", self.start_time),
            game_over=kwargs.get("game_over", self.game_over),
            screen=kwargs.get("screen", self.screen),
        )

    def on_screen(self, screen: Screen) -> GameState:
        """Return new state showing a different screen."""
        return self._copy_with(screen=screen)

    def ended(self) -> GameState:
        """Return new state flagged as game over."""
        return self._copy_with(game_over=True, screen=Screen.GAME_OVER)
