from flask import Blueprint, jsonify, current_app
from .models import isoformat, utcnow

main = Blueprint('main', __name__)

ENDPOINTS = {
    'GET /': 'API status',
    'GET /health': 'Health check',
    'POST /api/games': 'Create new game',
    'GET /api/games/current': 'Get current game',
    'POST /api/games/current/round': 'Add round to current game',
    'GET /api/games': 'Get all games',
    'DELETE /api/games/current': 'Reset current game',
}


def endpoint_catalog():
    return {
        'name': current_app.config.get('API_NAME', 'Playcard API'),
        'version': current_app.config.get('API_VERSION', '1.0.0'),
        'endpoints': dict(ENDPOINTS),
    }


@main.route('/')
def index():
    return jsonify({'message': 'Playcard Backend API', 'status': 'running'})


@main.route('/health')
def health():
    return jsonify({'status': 'healthy', 'timestamp': isoformat(utcnow())})


@main.route('/api')
def api_info():
    return jsonify(endpoint_catalog())
