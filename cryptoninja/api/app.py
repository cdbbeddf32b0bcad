"""
FastAPI Application - Frame endpoint for Crypto Ninja.

Endpoints:
    GET    /api/frame     Entry frame (no state)
    POST   /api/frame     Button press: state blob in, frame + state blob out
    GET    /health        Health check
    GET    /              API info

The server is stateless. Every POST carries the whole game in its
state blob and every response hands the whole game back.
"""

from typing import Optional
import logging
import os

# Environment configuration
CRYPTONINJA_ENV = os.getenv("CRYPTONINJA_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("CRYPTONINJA_LOG_LEVEL", "INFO")

LOGGER = logging.getLogger("cryptoninja.api.app")


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional FrameService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Request
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from ..engine_core import GameEngine, GameConfig
    from .service import FrameService
    from .schemas import (
        # Request models
        FrameRequest,
        # Response models
        FrameResponse,
        ErrorResponse,
        HealthResponse,
        # Enums
        ErrorCode,
    )

    app = FastAPI(
        title="Crypto Ninja Frame API",
        description="""
Slice the crypto coins! A turn-based frame game.

## Protocol

1. `GET /api/frame` returns the entry frame.
2. `POST /api/frame` with the pressed button and the `state` from the
   previous response. The response carries the next frame and a new `state`.

The `state` string is opaque. A missing or unreadable `state` starts a
fresh game at the menu.

## Error Codes

| Code | Description |
|------|-------------|
| `VALIDATION_ERROR` | Request body has no button index |
| `INTERNAL_ERROR` | Unexpected server failure |
        """,
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Service instance
    frame_service = service or FrameService(engine=GameEngine(config=GameConfig.from_env()))

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        LOGGER.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid frame request",
            status_code=422,
            details={"errors": [str(e.get("msg")) for e in exc.errors()]},
        )

    # =========================================================================
    # Frame Endpoints
    # =========================================================================

    @app.get(
        "/api/frame",
        response_model=FrameResponse,
        response_model_exclude_none=True,
        tags=["Frame"],
        summary="Entry frame",
    )
    async def get_frame() -> FrameResponse:
        """Entry frame. Carries no state."""
        return frame_service.entry()

    @app.post(
        "/api/frame",
        response_model=FrameResponse,
        responses={422: {"model": ErrorResponse, "description": "No button index"}},
        tags=["Frame"],
        summary="Press a button",
    )
    async def post_frame(body: FrameRequest) -> FrameResponse:
        """
        Apply a button press.

        **Request Body:**
        ```json
        {"untrustedData": {"buttonIndex": 1, "state": "..."}}
        ```
        """
        press = body.press
        return frame_service.press(press.button_index, press.state)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="cryptoninja",
            version="1.0.0",
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Crypto Ninja Frame API",
            "version": "1.0.0",
            "environment": CRYPTONINJA_ENV,
            "frame": "/api/frame",
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn cryptoninja.api.app:app
app = create_app()
