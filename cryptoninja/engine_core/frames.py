"""
Frames - Projection of a GameState onto a renderable screen.

A Frame is what the client draws: an image, a title line and a row of
buttons. The engine only names the image by asset key; the presentation
layer maps keys to URLs and wraps buttons with transport action codes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .state import GameState, Screen, Coin


GAME_TITLE = "Crypto Ninja"
LIFE_GLYPH = "❤️"
HAZARD_MARKER = "☠️"


class FrameImage(Enum):
    """Image asset keys."""
    WELCOME = "welcome"
    GAME = "game"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class FrameButton:
    label: str
    action: str = "post"


@dataclass(frozen=True)
class Frame:
    """A rendered screen."""
    image: FrameImage
    title: str
    buttons: tuple[FrameButton, ...] = field(default_factory=tuple)

    @property
    def labels(self) -> list[str]:
        return [b.label for b in self.buttons]


def _buttons(*labels: str) -> tuple[FrameButton, ...]:
    return tuple(FrameButton(label=label) for label in labels)


def coin_label(coin: Coin) -> str:
    """Button label for a coin: glyph, name and signed points (or hazard marker)."""
    value = HAZARD_MARKER if coin.is_hazard else coin.signed_points
    return f"{coin.glyph} {coin.name} ({value})"


def menu_frame() -> Frame:
    return Frame(
        image=FrameImage.WELCOME,
        title=f"⚔️ {GAME_TITLE}",
        buttons=_buttons("🎮 Start Game", "📜 Rules", "🏆 Leaderboard", "🛒 Shop"),
    )


def rules_frame() -> Frame:
    return Frame(
        image=FrameImage.WELCOME,
        title="📜 Game Rules",
        buttons=_buttons("🎮 Start Game", "🏠 Menu"),
    )


def leaderboard_frame() -> Frame:
    # Placeholder screen, no scores are kept server-side
    return Frame(
        image=FrameImage.WELCOME,
        title="🏆 Leaderboard (coming soon)",
        buttons=_buttons("🎮 Start Game", "🏠 Menu"),
    )


def shop_frame() -> Frame:
    return Frame(
        image=FrameImage.WELCOME,
        title="🛒 Shop (coming soon)",
        buttons=_buttons("🎮 Start Game", "🏠 Menu"),
    )


def game_frame(state: GameState) -> Frame:
    lives = LIFE_GLYPH * max(0, state.lives)
    return Frame(
        image=FrameImage.GAME,
        title=f"Score: {state.score} | Lives: {lives} | Combo: x{state.combo}",
        buttons=tuple(FrameButton(label=coin_label(c)) for c in state.options),
    )


def game_over_frame(state: GameState) -> Frame:
    return Frame(
        image=FrameImage.GAME_OVER,
        title=f"🎮 Game Over! Final Score: {state.score}",
        buttons=_buttons("🔄 Play Again", "🏆 Leaderboard", "🏠 Menu"),
    )


def render(state: GameState) -> Frame:
    """
    Build the frame for the state's current screen.

    A game state that is already flagged over always renders the
    game-over frame, whatever screen it claims to be on.
    """
    if state.screen == Screen.GAME_OVER or (state.screen == Screen.GAME and state.game_over):
        return game_over_frame(state)
    if state.screen == Screen.GAME:
        return game_frame(state)
    if state.screen == Screen.RULES:
        return rules_frame()
    if state.screen == Screen.LEADERBOARD:
        return leaderboard_frame()
    if state.screen == Screen.SHOP:
        return shop_frame()
    return menu_frame()
