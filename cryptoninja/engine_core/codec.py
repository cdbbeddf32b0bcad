"""
State Codec - Opaque wire form of GameState.

The client echoes the encoded string back on every request. It is
untrusted: anything that does not parse into a structurally valid state
is treated as "no state" and replaced by a fresh one. Decoding never
raises.

Wire form (compact JSON):
    {"v": 1, "score": 0, "lives": 3, "options": ["BTC", "ETH", "SCAM"],
     "combo": 1, "start": 1700000000.0, "over": false, "screen": "menu"}

Coins are referenced by symbol and resolved against the catalog, so a
forged blob can not invent coins with arbitrary points.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
import json
import logging
import math

from .catalog import CoinCatalog
from .state import GameState, Screen, Coin


LOGGER = logging.getLogger("cryptoninja.engine_core.codec")

SCHEMA_VERSION = 1


class StateDecodeError(ValueError):
    """Raised internally when a blob is not a valid state."""


def _require_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    # bool is an int subclass, reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise StateDecodeError(f"{key} must be an integer")
    return value


@dataclass
class StateCodec:
    """
    Serializes GameState to and from the opaque client blob.

    Usage:
        codec = StateCodec(catalog, fresh_state=engine.fresh_state)
        state = codec.decode(raw)      # never raises
        raw = codec.encode(state)
    """
    catalog: CoinCatalog
    fresh_state: Callable[[], GameState]
    options_count: int = 3

    def encode(self, state: GameState) -> str:
        payload = {
            "v": SCHEMA_VERSION,
            "score": state.score,
            "lives": state.lives,
            "options": [coin.symbol for coin in state.options],
            "combo": state.combo,
            "start": state.start_time,
            "over": state.game_over,
            "screen": state.screen.value,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    def decode(self, raw: str | None) -> GameState:
        """
        Decode a client blob.

        Returns a fresh state if raw is absent or not a valid state.
        """
        if not raw:
            LOGGER.debug("No client state, starting fresh")
            return self.fresh_state()

        try:
            data = json.loads(raw)
            return self._state_from_dict(data)
        except (ValueError, OverflowError, RecursionError) as exc:
            LOGGER.warning("Discarding client state: %s", exc)
            return self.fresh_state()

    def _state_from_dict(self, data: Any) -> GameState:
        if not isinstance(data, dict):
            raise StateDecodeError("state must be an object")
        if _require_int(data, "v") != SCHEMA_VERSION:
            raise StateDecodeError(f"unsupported schema version {data.get('v')!r}")

        start = data.get("start")
        if not isinstance(start, (int, float)) or isinstance(start, bool) or not math.isfinite(start):
            raise StateDecodeError("start must be a finite number")

        over = data.get("over")
        if not isinstance(over, bool):
            raise StateDecodeError("over must be a boolean")

        try:
            screen = Screen(data.get("screen"))
        except ValueError:
            raise StateDecodeError(f"unknown screen {data.get('screen')!r}")

        return GameState(
            score=_require_int(data, "score"),
            lives=_require_int(data, "lives"),
            options=self._options_from_list(data.get("options")),
            combo=_require_int(data, "combo"),
            start_time=float(start),
            game_over=over,
            screen=screen,
        )

    def _options_from_list(self, symbols: Any) -> tuple[Coin, ...]:
        if not isinstance(symbols, list) or len(symbols) != self.options_count:
            raise StateDecodeError(f"options must be a list of {self.options_count} symbols")

        options = []
        for symbol in symbols:
            coin = self.catalog.get(symbol) if isinstance(symbol, str) else None
            if coin is None:
                raise StateDecodeError(f"unknown coin {symbol!r}")
            options.append(coin)

        if sum(1 for c in options if c.is_hazard) > 1:
            raise StateDecodeError("more than one hazard among options")
        return tuple(options)
