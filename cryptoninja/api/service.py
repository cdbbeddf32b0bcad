"""
API Service - Business logic layer between API and engine.

The service:
1. Decodes the client's state blob
2. Runs the engine step
3. Re-encodes the state
4. Formats the frame for the transport (image URLs, action codes)

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
It holds no per-client state: everything a request needs arrives in it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os

from ..engine_core import (
    GameEngine,
    StateCodec,
    StepResult,
    Frame,
    FrameImage,
)
from .schemas import FrameResponse, FrameInfo, ButtonInfo, ScreenName


LOGGER = logging.getLogger("cryptoninja.api.service")

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1593397899681-12c47155d9b8"
    "?q=80&w=1200&h=630&fit=crop"
)


def images_from_env() -> dict[FrameImage, str]:
    """Image URL per asset key, overridable per key from the environment."""
    return {
        FrameImage.WELCOME: os.getenv("CRYPTONINJA_WELCOME_IMAGE", DEFAULT_IMAGE_URL),
        FrameImage.GAME: os.getenv("CRYPTONINJA_GAME_IMAGE", DEFAULT_IMAGE_URL),
        FrameImage.GAME_OVER: os.getenv("CRYPTONINJA_GAME_OVER_IMAGE", DEFAULT_IMAGE_URL),
    }


@dataclass
class FrameService:
    """
    Main API service for frame clients.

    Usage:
        service = FrameService()

        # Entry frame (no state yet)
        response = service.entry()

        # Button press
        response = service.press(button_index=1, raw_state=None)
        response = service.press(button_index=2, raw_state=response.state)
    """
    engine: GameEngine = field(default_factory=GameEngine)
    images: dict[FrameImage, str] = field(default_factory=images_from_env)
    codec: StateCodec | None = None

    def __post_init__(self):
        if self.codec is None:
            self.codec = StateCodec(
                catalog=self.engine.catalog,
                fresh_state=self.engine.fresh_state,
                options_count=self.engine.config.options_count,
            )

    def entry(self) -> FrameResponse:
        """
        Entry frame.

        No state is handed out yet; the first press starts from a fresh one.
        """
        result = self.engine.entry()
        return FrameResponse(
            frame=self._convert_frame(result.frame),
            screen=ScreenName(result.state.screen.value),
        )

    def press(self, button_index: int, raw_state: str | None) -> FrameResponse:
        """Apply a button press to the client's state."""
        state = self.codec.decode(raw_state)
        before = state.screen.value

        result = self.engine.step(state, button_index)
        self._log_step(before, button_index, result)

        return FrameResponse(
            frame=self._convert_frame(result.frame),
            state=self.codec.encode(result.state),
            screen=ScreenName(result.state.screen.value),
        )

    def _log_step(self, before: str, button_index: int, result: StepResult):
        LOGGER.debug(
            "button %d: %s -> %s (score=%d lives=%d combo=%d)%s",
            button_index,
            before,
            result.state.screen.value,
            result.state.score,
            result.state.lives,
            result.state.combo,
            "".join(f"; {c}" for c in result.changes),
        )

    def _convert_frame(self, frame: Frame) -> FrameInfo:
        return FrameInfo(
            image=self.images.get(frame.image, DEFAULT_IMAGE_URL),
            title=frame.title,
            buttons=[ButtonInfo(label=b.label, action=b.action) for b in frame.buttons],
        )
