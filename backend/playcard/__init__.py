import json
import logging

import click
from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(getattr(logging, str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    origins = flask_app.config.get('CORS_ORIGINS') or '*'
    if origins == ['*']:
        origins = '*'
    CORS(
        flask_app,
        origins=origins,
        supports_credentials=False,
        methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
        allow_headers=['Content-Type', 'Authorization'],
    )
    socketio.init_app(flask_app, cors_allowed_origins=origins)

    # One ledger per app; handlers reach it through current_app
    from playcard.services.games import GameLedger
    flask_app.extensions['ledger'] = GameLedger(min_players=int(flask_app.config.get('MIN_PLAYERS', 2)))

    from playcard.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Import and register blueprints here
    from playcard.main import main
    flask_app.register_blueprint(main)

    from playcard.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from playcard.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('api-catalog')
    def api_catalog_command():
        """Prints the HTTP endpoint catalog."""
        from playcard.main import endpoint_catalog
        with flask_app.app_context():
            click.echo(json.dumps(endpoint_catalog(), indent=2))

    flask_app.cli.add_command(api_catalog_command)

    return flask_app
