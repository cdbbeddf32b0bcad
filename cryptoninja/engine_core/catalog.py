"""
Coin Catalog - The fixed set of coins a round draws from.

The catalog is read-only configuration. It is passed into the codec and
the engine rather than looked up globally, so tests can hand in a
deterministic catalog.

Catalog structure:
- Ordered sequence of coins
- Exactly one hazard coin (negative points, costs a life)
- At least enough safe coins to fill a round
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import Coin


DEFAULT_COINS: tuple[Coin, ...] = (
    Coin(name="Bitcoin", symbol="BTC", glyph="₿", points=100),
    Coin(name="Ethereum", symbol="ETH", glyph="Ξ", points=80),
    Coin(name="Dogecoin", symbol="DOGE", glyph="Ð", points=50),
    Coin(name="Solana", symbol="SOL", glyph="◎", points=70),
    Coin(name="SCAM", symbol="SCAM", glyph="💣", points=-150, is_hazard=True),
)


@dataclass(frozen=True)
class CoinCatalog:
    """
    Immutable, ordered coin catalog.

    Usage:
        catalog = CoinCatalog.default()
        catalog.get("BTC")
        catalog.hazard
    """
    coins: tuple[Coin, ...]

    # Safe coins needed to fill a round that has no hazard
    min_safe_coins: int = 3

    def __post_init__(self):
        hazards = [c for c in self.coins if c.is_hazard]
        if len(hazards) != 1:
            raise ValueError(f"Catalog needs exactly one hazard coin, got {len(hazards)}")
        if len(self.safe_coins) < self.min_safe_coins:
            raise ValueError(
                f"Catalog needs at least {self.min_safe_coins} non-hazard coins"
            )
        symbols = [c.symbol for c in self.coins]
        if len(set(symbols)) != len(symbols):
            raise ValueError("Coin symbols must be unique")

    @classmethod
    def default(cls) -> CoinCatalog:
        return cls(coins=DEFAULT_COINS)

    @property
    def hazard(self) -> Coin:
        return next(c for c in self.coins if c.is_hazard)

    @property
    def safe_coins(self) -> tuple[Coin, ...]:
        return tuple(c for c in self.coins if not c.is_hazard)

    def get(self, symbol: str) -> Coin | None:
        """Get coin by symbol."""
        for coin in self.coins:
            if coin.symbol == symbol:
                return coin
        return None

    def __len__(self) -> int:
        return len(self.coins)

    def __iter__(self):
        return iter(self.coins)
