import math
import re
from typing import Union

from playcard.models import Game, Player

# Raw per-player value as it arrives in a round payload
PointValue = Union[int, float, str, None]

_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def coerce_points(value: PointValue) -> int:
    """Turn a submitted point value into an integer delta.

    Integers pass through, floats are truncated toward zero, and strings
    contribute their leading ASCII integer ("7.9" -> 7, "12abc" -> 12).
    Missing, boolean, non-finite or otherwise unparseable values (including
    digit runs too long to convert) count as 0. Never raises.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return 0
        try:
            return int(match.group(1))
        except ValueError:
            return 0
    return 0


def round_deltas(game: Game, points: dict) -> list[tuple[Player, int]]:
    """Resolve ``points`` against the roster of ``game`` without mutating it.

    Keys that are not player ids of ``game`` are skipped.
    """
    deltas = []
    for player_id, value in points.items():
        player = game.get_player(player_id)
        if not player:
            continue
        deltas.append((player, coerce_points(value)))
    return deltas

