from collections.abc import Mapping
from contextlib import contextmanager
from threading import RLock
from typing import Optional

from playcard.errors import NotFoundError, ValidationError
from playcard.models import Game, Round
from .scoring import round_deltas


class GameLedger:
    """In-memory record of every game created by this process.

    Holds the games in creation order plus a reference to the current game,
    which is the one new rounds are recorded against. Games are never
    removed; resetting only drops the current reference. Every operation
    runs under one lock so concurrent request threads see whole updates.
    """

    def __init__(self, min_players: int = 2):
        self.min_players = min_players
        self._games: list[Game] = []
        self._current: Optional[Game] = None
        self._lock = RLock()

    # ── games ───────────────────────────────────────────────
    def create_game(self, player_names) -> Game:
        if not isinstance(player_names, (list, tuple)) or len(player_names) < self.min_players:
            raise ValidationError(f'At least {self.min_players} players required')
        names = []
        for name in player_names:
            if not isinstance(name, str):
                raise ValidationError('Player names must be strings')
            name = name.strip()
            if not name:
                raise ValidationError('Player names must not be blank')
            names.append(name)

        with self._lock:
            game = Game(names)
            self._games.append(game)
            self._current = game
            return game

    def get_current_game(self) -> Optional[Game]:
        with self._lock:
            return self._current

    def get_game(self, game_id) -> Optional[Game]:
        with self._lock:
            for g in self._games:
                if g.id == game_id:
                    return g
            return None

    def list_games(self) -> list[Game]:
        with self._lock:
            return list(self._games)

    def reset_current(self) -> Optional[Game]:
        """Clear the current game and return whichever game was current."""
        with self._lock:
            previous, self._current = self._current, None
            return previous

    # ── rounds ──────────────────────────────────────────────
    def record_round(self, points) -> Game:
        with self._lock:
            game = self._current
            if game is None:
                raise NotFoundError('No active game')
            if not isinstance(points, Mapping):
                raise ValidationError('Invalid points data')

            # Resolve every delta first so a round is stored only with its totals
            deltas = round_deltas(game, points)
            game.rounds.append(Round(points))
            for player, delta in deltas:
                player.total_points += delta
            return game

    # ── snapshots ───────────────────────────────────────────
    @contextmanager
    def transaction(self):
        """Hold the ledger lock across several calls.

        Games are live objects; serialize them inside a transaction so the
        payload matches the update that produced it.
        """
        with self._lock:
            yield self

    def snapshot(self, game: Optional[Game]) -> Optional[dict]:
        with self._lock:
            return game.to_dict() if game else None
