"""
Crypto Ninja - Stateless frame mini-game

Pick the real coins, dodge the scam. The engine is a pure state machine
driven by button presses; the whole game travels with the client as an
opaque state blob. The package provides:
- Game state and the coin catalog
- The screen state machine and scoring rules
- The state codec for the client blob
- A FastAPI frame endpoint and a terminal client
"""

__version__ = "0.1.0"
