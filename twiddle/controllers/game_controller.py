"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from werkzeug.exceptions import HTTPException

from ..config import get_word_statistics
from ..models.errors import InvalidKeyError
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import alert_message

game_bp = Blueprint('game', __name__)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service('new_game')
def new_game(game_service):
    """Create a new game session."""
    game_logger.log_user_action(request, 'new_game')

    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'game_id': game_id,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, game_id,
        word_length=state.word_length, max_attempts=state.max_attempts
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service('get_state')
def get_state(game_id, game_service):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id,
        active_attempt_index=state.active_attempt_index, is_finished=state.is_finished
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@require_game_service('key_pressed')
def press_key(game_id, game_service):
    """Apply one key press (a letter, Enter or Backspace) to a game."""
    data = request.get_json(silent=True)
    if not data or 'key' not in data:
        error_response = {
            'success': False,
            'error': 'Key is required'
        }
        game_logger.log_server_response(request, 'key_pressed', False, error_response, game_id)
        return jsonify(error_response), 400

    key = data['key']
    game_logger.log_user_action(request, 'key_pressed', game_id, key=key)

    try:
        change = game_service.enter_key(game_id, key)
    except InvalidKeyError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_pressed', False, error_response, game_id)
        return jsonify(error_response), 400

    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'change': change.to_dict(),
        'alert': alert_message(change),
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'key_pressed', True, response_data, game_id,
        change=change.kind.value
    )
    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service('delete_game')
def delete_game(game_id, game_service):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)
    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_service = get_game_service()
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'active_games': game_service.active_game_count() if game_service else 0,
        'dictionary_size': len(game_service.dictionary) if game_service else 0,
        'word_list': get_word_statistics(list(game_service.dictionary)) if game_service else None,
        'log_stats': game_logger.get_log_stats(),
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)


@game_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    if isinstance(error, HTTPException):
        return error

    game_id = (request.view_args or {}).get('game_id')
    game_logger.log_error(request, error, request.endpoint or 'unknown', game_id)
    return jsonify({
        'success': False,
        'error': str(error)
    }), 500
