import uuid
from datetime import datetime, timezone


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2026-01-01T12:00:00.000Z"""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Player:
    __slots__ = ('id', 'name', 'total_points')

    def __init__(self, name: str):
        self.id: str = generate_id()
        self.name: str = name
        self.total_points: int = 0

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'totalPoints': self.total_points,
        }


class Round:
    __slots__ = ('id', 'points', 'timestamp')

    def __init__(self, points: dict):
        self.id: str = generate_id()
        # Stored as submitted; totals are derived from the coerced values
        self.points: dict = dict(points)
        self.timestamp: datetime = utcnow()

    def to_dict(self):
        return {
            'id': self.id,
            'points': dict(self.points),
            'timestamp': isoformat(self.timestamp),
        }


class Game:
    def __init__(self, player_names):
        self.id: str = generate_id()
        self.players: list[Player] = [Player(name) for name in player_names]
        self.rounds: list[Round] = []
        self.created_at: datetime = utcnow()

    def get_player(self, player_id):
        for p in self.players:
            if p.id == player_id:
                return p
        return None

    def to_dict(self):
        return {
            'id': self.id,
            'players': [p.to_dict() for p in self.players],
            'rounds': [r.to_dict() for r in self.rounds],
            'createdAt': isoformat(self.created_at),
        }
