"""
WebSocket Event Handlers

Real-time key presses: each key event is applied to the game and the
resulting state change is broadcast to everyone watching that game.
"""

from dataclasses import asdict

from flask import request
from flask_socketio import emit, join_room, leave_room

from ..models.errors import InvalidKeyError
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import alert_message


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket connected: {request.sid}")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.info(f"WebSocket disconnected: {request.sid}")

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join a game room to receive its state changes."""
        game_id = data['game_id']
        state = game_service.get_game_state(game_id)

        join_room(game_room(game_id))
        game_logger.log_user_action(request, 'join_game', game_id)

        emit('game_state', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None):
        """Leave a game room."""
        leave_room(game_room(data['game_id']))

    @socketio.on('key_pressed')
    @websocket_game_required
    def handle_key_pressed(data, game_service=None):
        """Apply one key press and broadcast the state change."""
        game_id = data['game_id']
        key = data.get('key')
        game_logger.log_user_action(request, 'key_pressed', game_id, key=key)

        try:
            change = game_service.enter_key(game_id, key)
        except InvalidKeyError as e:
            emit('error', {'error': str(e), 'game_id': game_id})
            return

        payload = {
            'game_id': game_id,
            'change': change.to_dict(),
            'alert': alert_message(change),
            'state': asdict(game_service.get_game_state(game_id))
        }
        game_logger.log_server_response(request, 'key_pressed', True, payload, game_id,
                                        change=change.kind.value)

        emit('state_change', payload, to=game_room(game_id))
