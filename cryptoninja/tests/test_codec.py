"""
Tests for the state codec.

Tests:
- Lossless encode/decode
- Fallback to a fresh state for absent, corrupt and forged blobs
"""

import json
import logging

import pytest

from ..engine_core.codec import StateCodec, SCHEMA_VERSION
from ..engine_core.state import GameState, Screen


def _assert_fresh(state: GameState, now: float):
    assert state.screen == Screen.MENU
    assert state.score == 0
    assert state.lives == 3
    assert state.combo == 1
    assert not state.game_over
    assert len(state.options) == 3
    assert state.hazard_count <= 1
    assert state.start_time == now


class TestRoundTrip:
    """decode(encode(s)) == s"""

    def test_game_state(self, codec, game_state):
        assert codec.decode(codec.encode(game_state)) == game_state

    def test_every_screen(self, codec, game_state):
        for screen in Screen:
            state = game_state._copy_with(screen=screen, score=1234, lives=1, combo=9)
            assert codec.decode(codec.encode(state)) == state

    def test_game_over_state(self, codec, game_state):
        state = game_state._copy_with(lives=0).ended()
        assert codec.decode(codec.encode(state)) == state

    def test_fractional_start_time(self, codec, game_state):
        state = game_state._copy_with(start_time=1700000000.123456)
        assert codec.decode(codec.encode(state)).start_time == 1700000000.123456

    def test_generated_rounds(self, codec, engine):
        for _ in range(50):
            state = engine.new_round(score=70, lives=2, combo=3)
            assert codec.decode(codec.encode(state)) == state

    def test_encoding_is_compact_json(self, codec, game_state):
        data = json.loads(codec.encode(game_state))
        assert data["v"] == SCHEMA_VERSION
        assert data["options"] == ["BTC", "ETH", "SCAM"]
        assert data["screen"] == "game"


class TestFallback:
    """Anything that is not a valid state decodes to a fresh one."""

    def test_absent(self, codec, clock):
        _assert_fresh(codec.decode(None), clock.now)

    def test_empty(self, codec, clock):
        _assert_fresh(codec.decode(""), clock.now)

    @pytest.mark.parametrize("raw", [
        "not json",
        "{",
        "[]",
        "42",
        "null",
        '"a string"',
        "{}",
    ])
    def test_garbage(self, codec, clock, raw):
        _assert_fresh(codec.decode(raw), clock.now)

    @pytest.mark.parametrize("change", [
        {"v": 0},
        {"v": None},
        {"score": "100"},
        {"score": True},
        {"lives": 2.5},
        {"combo": None},
        {"start": "yesterday"},
        {"start": float("inf")},
        {"over": "no"},
        {"screen": "credits"},
        {"options": ["BTC", "ETH"]},
        {"options": ["BTC", "ETH", "SOL", "DOGE"]},
        {"options": ["BTC", "ETH", "XRP"]},
        {"options": ["BTC", "ETH", 3]},
        {"options": "BTC,ETH,SOL"},
        {"options": ["SCAM", "SCAM", "ETH"]},
    ])
    def test_forged_fields(self, codec, game_state, clock, change):
        data = json.loads(codec.encode(game_state))
        data.update(change)
        _assert_fresh(codec.decode(json.dumps(data)), clock.now)

    def test_missing_field(self, codec, game_state, clock):
        data = json.loads(codec.encode(game_state))
        del data["lives"]
        _assert_fresh(codec.decode(json.dumps(data)), clock.now)

    def test_huge_number(self, codec, game_state, clock):
        raw = codec.encode(game_state).replace('"start":1700000000.0', '"start":1' + "0" * 400)
        _assert_fresh(codec.decode(raw), clock.now)

    def test_integer_past_digit_limit(self, codec, game_state, clock):
        """Integers longer than the interpreter's digit limit fall back too."""
        raw = codec.encode(game_state).replace('"score":0', '"score":1' + "0" * 5000)
        _assert_fresh(codec.decode(raw), clock.now)

    def test_legacy_blob_with_embedded_coins(self, codec, clock):
        """Blobs from the unversioned format start a new game."""
        legacy = {
            "score": 100,
            "lives": 3,
            "options": [{"name": "Bitcoin", "symbol": "BTC", "points": 100}],
            "gameOver": False,
            "startTime": 1700000000000,
            "combo": 2,
        }
        _assert_fresh(codec.decode(json.dumps(legacy)), clock.now)

    def test_implausible_values_survive(self, codec, game_state):
        """Only structure is checked; odd numbers are the engine's problem."""
        state = game_state._copy_with(score=-5, lives=99, combo=0)
        assert codec.decode(codec.encode(state)) == state

    def test_rejection_is_logged(self, codec, caplog):
        with caplog.at_level(logging.WARNING, logger="cryptoninja.engine_core.codec"):
            codec.decode("not json")
        assert "Discarding client state" in caplog.text

    def test_custom_option_count(self, engine, game_state, clock):
        codec = StateCodec(catalog=engine.catalog, fresh_state=engine.fresh_state, options_count=2)
        _assert_fresh(codec.decode(codec.encode(game_state)), clock.now)
