"""
Pydantic Schemas for API - Request/response models for the frame protocol.

The client POSTs the button it pressed together with the state blob it
received last time. The response carries the next frame and a new blob.

Request body (Farcaster frame shape):
    {"untrustedData": {"buttonIndex": 1, "state": "..."}}

The flat shape {"buttonIndex": 1, "state": "..."} is accepted too.

Error Codes:
- VALIDATION_ERROR: Request body does not carry a button index
- INTERNAL_ERROR: Unexpected server failure
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field, model_validator


FRAME_VERSION = "vNext"


# =============================================================================
# Enums
# =============================================================================

class ScreenName(str, Enum):
    """Screens a frame can show."""
    MENU = "menu"
    GAME = "game"
    RULES = "rules"
    LEADERBOARD = "leaderboard"
    SHOP = "shop"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class ButtonInfo(BaseModel):
    """A frame button."""
    label: str
    action: str = Field("post", description="Transport action code")


class FrameInfo(BaseModel):
    """A rendered frame."""
    version: str = FRAME_VERSION
    image: str = Field(description="Image URL")
    title: str
    buttons: list[ButtonInfo] = Field(default_factory=list)


# =============================================================================
# Request Models
# =============================================================================

class UntrustedData(BaseModel):
    """Client-supplied data. Nothing in here is trusted."""
    button_index: int = Field(..., alias="buttonIndex", description="1-based button index")
    state: Optional[str] = Field(None, description="State blob from the previous response")

    model_config = {"populate_by_name": True}


class FrameRequest(BaseModel):
    """
    Button press.

    POST /api/frame
    """
    untrusted_data: Optional[UntrustedData] = Field(None, alias="untrustedData")
    button_index: Optional[int] = Field(None, alias="buttonIndex")
    state: Optional[str] = None

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _require_button(self):
        if self.untrusted_data is None and self.button_index is None:
            raise ValueError("buttonIndex is required")
        return self

    @property
    def press(self) -> UntrustedData:
        """The button press, whichever shape it arrived in."""
        if self.untrusted_data is not None:
            return self.untrusted_data
        return UntrustedData(button_index=self.button_index, state=self.state)


# =============================================================================
# Response Models
# =============================================================================

class FrameResponse(BaseModel):
    """
    Next frame plus the state blob to echo back.

    state is absent only on the entry frame.
    """
    frame: FrameInfo
    state: Optional[str] = None
    screen: Optional[ScreenName] = Field(None, description="Screen the frame shows")


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
