"""
API Module - Frame protocol interface.

Exposes the engine via a REST endpoint for frame clients.
The client:
1. Fetches the entry frame
2. Posts each button press with the state blob it was last given
3. Renders the returned frame and keeps the new state blob

All state lives in the client. The server keeps nothing between requests.
"""

from .schemas import (
    # Requests
    FrameRequest,
    UntrustedData,
    # Responses
    FrameResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    FrameInfo,
    ButtonInfo,
    ErrorCode,
    ScreenName,
)
from .service import FrameService
from .app import create_app

__all__ = [
    # Requests
    "FrameRequest",
    "UntrustedData",
    # Responses
    "FrameResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "FrameInfo",
    "ButtonInfo",
    "ErrorCode",
    "ScreenName",
    # Service
    "FrameService",
    "create_app",
]
