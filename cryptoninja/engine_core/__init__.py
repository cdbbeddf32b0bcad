"""
Engine Core - Deterministic game state management for Crypto Ninja.

The engine is the runtime that:
1. Decodes the client's opaque state blob (or starts fresh)
2. Checks the session timer
3. Applies a button press via the screen state machine
4. Renders the resulting frame
5. Encodes the new state for the client to echo back
"""

from .state import GameState, Coin, Screen
from .catalog import CoinCatalog, DEFAULT_COINS
from .config import GameConfig
from .frames import Frame, FrameButton, FrameImage, render
from .codec import StateCodec
from .engine import GameEngine, StepResult

__all__ = [
    "GameState",
    "Coin",
    "Screen",
    "CoinCatalog",
    "DEFAULT_COINS",
    "GameConfig",
    "Frame",
    "FrameButton",
    "FrameImage",
    "render",
    "StateCodec",
    "GameEngine",
    "StepResult",
]
