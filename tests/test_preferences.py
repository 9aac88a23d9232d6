import pytest

from twiddle.models.game import AttemptValidated, CharState, GameError, InvalidAttempt, RemovedChar
from twiddle.services.preferences_service import PreferenceKeys, PreferencesService, Theme
from twiddle.utils.helpers import alert_message


def test_get_returns_default_when_unset():
    preferences = PreferencesService()

    assert preferences.get("font") is None
    assert preferences.get("font", "mono") == "mono"
    assert preferences.get_theme() == Theme.DARK


def test_set_and_get():
    preferences = PreferencesService()

    preferences.set(PreferenceKeys.THEME, Theme.LIGHT)
    preferences.set("font", "mono")

    assert preferences.get_theme() == Theme.LIGHT
    assert preferences.get("font") == "mono"


def test_unknown_theme_is_rejected():
    preferences = PreferencesService()

    with pytest.raises(ValueError):
        preferences.set(PreferenceKeys.THEME, "sepia")


def test_values_must_be_strings():
    with pytest.raises(ValueError):
        PreferencesService().set("font", 12)


def validated(is_finished, is_win):
    return AttemptValidated(
        attempt_index=0,
        char_states=(CharState.MISS,) * 5,
        word="TRAIN",
        is_finished=is_finished,
        is_win=is_win,
        solution="CRANE",
    )


def test_alert_messages():
    assert alert_message(RemovedChar(0)) is None
    assert alert_message(GameError("Row empty.")) == "Row empty."
    assert alert_message(InvalidAttempt()) == "Not in word list."
    assert alert_message(validated(False, False)) is None
    assert alert_message(validated(True, True)) == "Yay, you win!"
    assert alert_message(validated(True, False)) == "Sorry, you lose! We were looking for 'CRANE'."
