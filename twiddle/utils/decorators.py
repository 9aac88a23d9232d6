"""
Endpoint Decorators

Contains decorators shared by the HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import request, jsonify
from flask_socketio import emit

from ..models.errors import GameNotFoundError
from .game_logger import game_logger


def require_game_service(action: str):
    """
    Decorator for HTTP endpoints that need the game service.

    Passes the service as ``game_service``, answers 500 when it is not
    initialized and 404 when the endpoint raises GameNotFoundError.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            from ..services.game_service import get_game_service

            game_service = get_game_service()
            if not game_service:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            try:
                return f(*args, game_service=game_service, **kwargs)
            except GameNotFoundError:
                game_id = kwargs.get('game_id')
                error_response = {
                    'success': False,
                    'error': 'Game not found'
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 404

        return decorated_function
    return decorator


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload names a game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('game_id'):
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            return f(*args, game_service=game_service, **kwargs)
        except GameNotFoundError:
            emit('error', {'error': 'Game not found', 'game_id': data['game_id']})

    return decorated_function
