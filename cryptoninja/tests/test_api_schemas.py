"""
Tests for API Pydantic schemas.

Validates that:
- Requests accept both body shapes
- Responses serialize to the frame wire format
- Error codes are properly structured
"""

import pytest
from pydantic import ValidationError


class TestPydanticSchemas:
    """Tests for Pydantic schema validation."""

    def test_frame_request_untrusted_data(self):
        """FrameRequest reads the Farcaster body shape."""
        from cryptoninja.api.schemas import FrameRequest

        request = FrameRequest.model_validate(
            {"untrustedData": {"buttonIndex": 3, "state": "abc"}}
        )

        assert request.press.button_index == 3
        assert request.press.state == "abc"

    def test_frame_request_flat(self):
        from cryptoninja.api.schemas import FrameRequest

        request = FrameRequest.model_validate({"buttonIndex": 2})

        assert request.press.button_index == 2
        assert request.press.state is None

    def test_untrusted_data_wins_over_flat(self):
        from cryptoninja.api.schemas import FrameRequest

        request = FrameRequest.model_validate(
            {"buttonIndex": 1, "untrustedData": {"buttonIndex": 4}}
        )
        assert request.press.button_index == 4

    def test_frame_request_requires_button(self):
        from cryptoninja.api.schemas import FrameRequest

        with pytest.raises(ValidationError):
            FrameRequest.model_validate({"state": "abc"})

        with pytest.raises(ValidationError):
            FrameRequest.model_validate({"untrustedData": {"state": "abc"}})

    def test_frame_response_schema(self):
        """FrameResponse has the frame wire fields."""
        from cryptoninja.api.schemas import FrameResponse, FrameInfo, ButtonInfo, ScreenName

        response = FrameResponse(
            frame=FrameInfo(
                image="https://example.com/game.png",
                title="Score: 0 | Lives: ❤️❤️❤️ | Combo: x1",
                buttons=[ButtonInfo(label="₿ Bitcoin (+100)")],
            ),
            state="{}",
            screen=ScreenName.GAME,
        )

        data = response.model_dump(mode="json")
        assert data["frame"]["version"] == "vNext"
        assert data["frame"]["buttons"][0] == {"label": "₿ Bitcoin (+100)", "action": "post"}
        assert data["screen"] == "game"

    def test_error_response_schema(self):
        from cryptoninja.api.schemas import ErrorResponse, ErrorCode

        error = ErrorResponse(
            error="Invalid frame request",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": ["Field required"]},
        )

        data = error.model_dump(mode="json")
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["details"]["errors"] == ["Field required"]

    def test_screen_names_match_engine(self):
        from cryptoninja.api.schemas import ScreenName
        from cryptoninja.engine_core.state import Screen

        assert {s.value for s in ScreenName} == {s.value for s in Screen}


class TestOpenAPISchema:
    """Tests for the generated OpenAPI document."""

    def test_openapi_has_frame_paths(self):
        from cryptoninja.api.app import app
        from fastapi.openapi.utils import get_openapi

        schema = get_openapi(
            title=app.title,
            version=app.version,
            routes=app.routes,
        )

        assert "/api/frame" in schema["paths"]
        assert "get" in schema["paths"]["/api/frame"]
        assert "post" in schema["paths"]["/api/frame"]
        assert "/health" in schema["paths"]

    def test_openapi_has_frame_models(self):
        from cryptoninja.api.app import app
        from fastapi.openapi.utils import get_openapi

        schema = get_openapi(
            title=app.title,
            version=app.version,
            routes=app.routes,
        )

        models = schema["components"]["schemas"]
        assert "FrameResponse" in models
        assert "FrameRequest" in models
        assert "ErrorResponse" in models
