from flask import Blueprint, jsonify, request, current_app
from playcard import socketio
from playcard.errors import InternalError, LedgerError
from playcard.services.games import GameLedger


games = Blueprint('games', __name__)


def get_ledger() -> GameLedger:
    return current_app.extensions['ledger']


def _request_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _broadcast(game_id, event: str, room: str | None = None) -> None:
    socketio.emit('state_update', {'game_id': game_id, 'event': event}, to=room, namespace='/ws')


@games.route('', methods=['POST'])
def create_game():
    data = _request_body()
    ledger = get_ledger()
    try:
        with ledger.transaction():
            payload = ledger.create_game(data.get('players')).to_dict()
    except LedgerError:
        raise
    except Exception as exc:
        current_app.logger.exception(f"[create] failed: {exc}")
        raise InternalError('Failed to create game')
    current_app.logger.info(f"[create] game={payload['id']} players={len(payload['players'])}")
    _broadcast(payload['id'], 'game_created')
    return jsonify(payload)


@games.route('', methods=['GET'])
def list_games():
    ledger = get_ledger()
    with ledger.transaction():
        payload = [g.to_dict() for g in ledger.list_games()]
    return jsonify(payload)


@games.route('/current', methods=['GET'])
def get_current_game():
    ledger = get_ledger()
    with ledger.transaction():
        payload = ledger.snapshot(ledger.get_current_game())
    return jsonify(payload)


@games.route('/current/round', methods=['POST'])
def add_round():
    data = _request_body()
    ledger = get_ledger()
    try:
        with ledger.transaction():
            game = ledger.record_round(data.get('points'))
            round_id = game.rounds[-1].id
            payload = game.to_dict()
    except LedgerError:
        raise
    except Exception as exc:
        current_app.logger.exception(f"[round] failed: {exc}")
        raise InternalError('Failed to add round')
    current_app.logger.info(f"[round] game={payload['id']} round={round_id} count={len(payload['rounds'])}")
    _broadcast(payload['id'], 'round_recorded', room=f"game:{payload['id']}")
    return jsonify(payload)


@games.route('/current', methods=['DELETE'])
def reset_current_game():
    previous = get_ledger().reset_current()
    if previous:
        current_app.logger.info(f"[reset] game={previous.id}")
        _broadcast(previous.id, 'current_reset')
    return jsonify({'success': True})
