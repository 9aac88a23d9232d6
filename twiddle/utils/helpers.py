"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from flask import request

from ..models.game import AttemptValidated, GameError, InvalidAttempt, StateChange

NOT_IN_WORD_LIST = "Not in word list."
WIN_MESSAGE = "Yay, you win!"


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
        'session_id': getattr(request_obj, 'sid', None),
    }


def alert_message(change: StateChange) -> Optional[str]:
    """
    Text the alert box should show for a state change, if any.

    Adding or removing a letter shows nothing; a validated attempt only
    shows a message once the game is over.
    """
    if isinstance(change, GameError):
        return change.message
    if isinstance(change, InvalidAttempt):
        return NOT_IN_WORD_LIST
    if isinstance(change, AttemptValidated) and change.is_finished:
        if change.is_win:
            return WIN_MESSAGE
        return f"Sorry, you lose! We were looking for '{change.solution}'."
    return None
