"""
Game Engine - Applies button presses to game state.

The engine is the single point of state mutation.
All state changes go through step().

Design principles:
- Pure function: (state, button) -> (new_state, frame)
- Total: every input maps to a valid transition, nothing raises
- Clock and randomness are injected, never read globally
- Dispatches on the current screen, one handler per screen
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import random
import time

from .catalog import CoinCatalog
from .config import GameConfig
from .frames import Frame, render
from .state import GameState, Screen, INFO_SCREENS, Coin


@dataclass
class StepResult:
    """
    Result of applying a button press.

    Contains:
    - The state to hand back to the client
    - The frame to render
    - Human-readable changes (for logs and the terminal client)
    """
    state: GameState
    frame: Frame
    changes: list[str] = field(default_factory=list)

    @classmethod
    def showing(cls, state: GameState, *changes: str) -> StepResult:
        return cls(state=state, frame=render(state), changes=list(changes))


@dataclass
class GameEngine:
    """
    Screen state machine for Crypto Ninja.

    Stateless - all state is in GameState.

    Usage:
        engine = GameEngine()
        result = engine.step(None, 1)         # menu -> new game
        result = engine.step(result.state, 2) # pick the second coin
    """
    config: GameConfig = field(default_factory=GameConfig)
    catalog: CoinCatalog = field(default_factory=CoinCatalog.default)
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], float] = time.time

    def __post_init__(self):
        if len(self.catalog.safe_coins) < self.config.options_count:
            raise ValueError(
                f"Catalog has {len(self.catalog.safe_coins)} safe coins, "
                f"rounds need {self.config.options_count}"
            )

    # =========================================================================
    # Round generation
    # =========================================================================

    def new_round(
        self,
        score: int = 0,
        lives: int | None = None,
        combo: int = 1,
        start_time: float | None = None,
    ) -> GameState:
        """
        Deal a new set of options, carrying the given counters over.

        start_time is only reset when omitted; rounds inside one game
        share the game's start time.
        """
        shuffled = list(self.catalog.coins)
        self.rng.shuffle(shuffled)
        safe = [c for c in shuffled if not c.is_hazard]

        options = safe[: self.config.options_count - 1]
        if self.rng.random() < self.config.hazard_chance:
            options.append(self.catalog.hazard)
        else:
            options.append(safe[self.config.options_count - 1])
        self.rng.shuffle(options)

        return GameState(
            score=score,
            lives=self.config.lives_count if lives is None else lives,
            options=tuple(options),
            combo=combo,
            start_time=self.clock() if start_time is None else start_time,
            game_over=False,
            screen=Screen.GAME,
        )

    def new_game(self) -> GameState:
        """Fresh game: zeroed counters, full lives, timer starting now."""
        return self.new_round()

    def fresh_state(self) -> GameState:
        """Fresh state parked on the menu, used when the client has none."""
        return self.new_game().on_screen(Screen.MENU)

    # =========================================================================
    # Timer
    # =========================================================================

    def remaining(self, start_time: float) -> float:
        """Seconds left in the session, never negative."""
        elapsed = self.clock() - start_time
        return max(0.0, self.config.round_duration - elapsed)

    # =========================================================================
    # Step
    # =========================================================================

    def step(self, state: GameState | None, button_index: int) -> StepResult:
        """
        Apply a button press to the state.

        A missing state behaves like a fresh menu.
        """
        if state is None:
            state = self.fresh_state()

        handler = self._get_handler(state.screen)
        return handler(state, button_index)

    def entry(self) -> StepResult:
        """Entry frame for clients that have not pressed anything yet."""
        return StepResult.showing(self.fresh_state())

    def _get_handler(self, screen: Screen):
        """Get the handler function for a screen."""
        handlers = {
            Screen.MENU: self._handle_menu,
            Screen.GAME: self._handle_game,
            Screen.GAME_OVER: self._handle_game_over,
        }
        handlers.update({s: self._handle_info for s in INFO_SCREENS})
        return handlers[screen]

    def _start_game(self) -> StepResult:
        return StepResult.showing(self.new_game(), "Started a new game")

    def _handle_menu(self, state: GameState, button_index: int) -> StepResult:
        if button_index == 1:
            return self._start_game()

        targets = {2: Screen.RULES, 3: Screen.LEADERBOARD, 4: Screen.SHOP}
        target = targets.get(button_index)
        if target is None:
            return StepResult.showing(state)
        return StepResult.showing(state.on_screen(target), f"Opened {target.value}")

    def _handle_info(self, state: GameState, button_index: int) -> StepResult:
        """Rules, leaderboard and shop all offer play or back."""
        if button_index == 1:
            return self._start_game()
        if button_index == 2:
            return StepResult.showing(state.on_screen(Screen.MENU), "Back to menu")
        return StepResult.showing(state)

    def _handle_game_over(self, state: GameState, button_index: int) -> StepResult:
        if button_index == 1:
            return self._start_game()

        # Leaving the game-over screen discards the finished game
        targets = {2: Screen.LEADERBOARD, 3: Screen.MENU}
        target = targets.get(button_index)
        if target is None:
            return StepResult.showing(state)
        return StepResult.showing(self.fresh_state().on_screen(target), f"Opened {target.value}")

    def _handle_game(self, state: GameState, button_index: int) -> StepResult:
        # Already over: re-render without touching the counters
        if state.game_over:
            return StepResult.showing(state.ended())

        if state.lives <= 0:
            return StepResult.showing(state._copy_with(lives=0).ended(), "Out of lives")

        if self.remaining(state.start_time) <= 0:
            return StepResult.showing(state.ended(), "Time is up")

        coin = state.option(button_index)
        if coin is None:
            return StepResult.showing(state)
        return self._resolve_pick(state, coin)

    def _resolve_pick(self, state: GameState, coin: Coin) -> StepResult:
        """Score a picked coin and deal the next round (or end the game)."""
        combo = max(1, state.combo)

        if coin.is_hazard:
            lives = state.lives - 1
            score = max(0, state.score + coin.points)
            combo = 1
            change = f"Picked {coin.name}: lost a life, {coin.points} points"
        else:
            gained = coin.points * combo
            lives = state.lives
            score = state.score + gained
            combo += 1
            change = f"Picked {coin.name}: {gained:+d} points, combo x{combo}"

        if lives <= 0:
            final = state._copy_with(score=score, lives=max(0, lives), combo=combo).ended()
            return StepResult.showing(final, change, "Out of lives")

        next_round = self.new_round(
            score=score,
            lives=lives,
            combo=combo,
            start_time=state.start_time,
        )
        return StepResult.showing(next_round, change)
