from flask import jsonify, request, current_app
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound


class LedgerError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': self.message}


class ValidationError(LedgerError):
    status_code = 400


class NotFoundError(LedgerError):
    status_code = 404


class InternalError(LedgerError):
    status_code = 500


def endpoint_not_found():
    return jsonify({
        'error': 'Endpoint not found',
        'message': 'Visit /api for available endpoints',
        'requestedPath': request.full_path.rstrip('?'),
    }), 404


def register_error_handlers(flask_app) -> None:
    @flask_app.errorhandler(LedgerError)
    def handle_ledger_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    # Unknown paths and unsupported methods on known paths look the same to clients
    @flask_app.errorhandler(NotFound)
    @flask_app.errorhandler(MethodNotAllowed)
    def handle_not_found(exc):
        return endpoint_not_found()

    @flask_app.errorhandler(Exception)
    def handle_unexpected(exc):
        if isinstance(exc, HTTPException):
            return jsonify({'error': exc.description or exc.name}), exc.code or 500
        current_app.logger.exception(f"[error] unhandled {type(exc).__name__} on {request.path}")
        return jsonify({'error': 'Internal server error'}), 500
