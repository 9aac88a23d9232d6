"""
Preferences Controller

Handles reading and writing player preferences (e.g. the color theme).
"""

from flask import Blueprint, request, jsonify

from ..services.preferences_service import PreferenceKeys, get_preferences_service
from ..utils.game_logger import game_logger

preferences_bp = Blueprint('preferences', __name__)


@preferences_bp.route('/preferences/<key>', methods=['GET'])
def get_preference(key):
    """Get one preference value, falling back to its default."""
    preferences_service = get_preferences_service()
    if not preferences_service:
        return jsonify({
            'success': False,
            'error': 'Preferences service unavailable'
        }), 500

    if key == PreferenceKeys.THEME:
        value = preferences_service.get_theme()
    else:
        value = preferences_service.get(key)

    return jsonify({
        'success': True,
        'key': key,
        'value': value
    })


@preferences_bp.route('/preferences/<key>', methods=['PUT'])
def set_preference(key):
    """Store one preference value."""
    preferences_service = get_preferences_service()
    if not preferences_service:
        return jsonify({
            'success': False,
            'error': 'Preferences service unavailable'
        }), 500

    data = request.get_json(silent=True)
    if not data or 'value' not in data:
        return jsonify({
            'success': False,
            'error': 'Value is required'
        }), 400

    game_logger.log_user_action(request, 'set_preference', key=key, value=data['value'])

    try:
        preferences_service.set(key, data['value'])
    except ValueError as e:
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'set_preference', False, error_response)
        return jsonify(error_response), 400

    response_data = {
        'success': True,
        'key': key,
        'value': data['value']
    }
    game_logger.log_server_response(request, 'set_preference', True, response_data)
    return jsonify(response_data)
