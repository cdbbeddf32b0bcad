"""
Pytest fixtures for Crypto Ninja tests.
"""

import random

import pytest

from ..engine_core import (
    CoinCatalog,
    GameConfig,
    GameEngine,
    GameState,
    Screen,
    StateCodec,
)
from ..api.service import FrameService


START = 1_700_000_000.0


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = START):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> CoinCatalog:
    return CoinCatalog.default()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def engine(config, catalog, clock) -> GameEngine:
    """Engine with a seeded random source and a fake clock."""
    return GameEngine(config=config, catalog=catalog, rng=random.Random(42), clock=clock)


@pytest.fixture
def codec(engine) -> StateCodec:
    return StateCodec(catalog=engine.catalog, fresh_state=engine.fresh_state)


@pytest.fixture
def service(engine) -> FrameService:
    return FrameService(engine=engine)


@pytest.fixture
def game_state(catalog, clock) -> GameState:
    """
    A game in progress with a known set of options.

    Buttons: 1 = Bitcoin (+100), 2 = Ethereum (+80), 3 = SCAM (-150)
    """
    return GameState(
        score=0,
        lives=3,
        options=(catalog.get("BTC"), catalog.get("ETH"), catalog.get("SCAM")),
        combo=1,
        start_time=clock.now,
        game_over=False,
        screen=Screen.GAME,
    )


@pytest.fixture
def safe_state(catalog, clock) -> GameState:
    """A game in progress with no hazard among the options."""
    return GameState(
        score=0,
        lives=3,
        options=(catalog.get("DOGE"), catalog.get("SOL"), catalog.get("BTC")),
        combo=1,
        start_time=clock.now,
        game_over=False,
        screen=Screen.GAME,
    )
