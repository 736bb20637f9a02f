"""Game domain services: the ledger and round scoring.

This package contains the in-memory game logic that HTTP routes and socket
handlers call into, keeping transport concerns separated from scorekeeping.
"""

from .ledger import GameLedger
from .scoring import coerce_points, round_deltas

__all__ = ['GameLedger', 'coerce_points', 'round_deltas']
