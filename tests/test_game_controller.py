"""
Testing the HTTP endpoints through the Flask test client.
"""


def new_game(game_service, solution="CRANE"):
    game_id = game_service.create_new_game(solution=solution)
    return game_id


def press(client, game_id, key):
    return client.post(f'/api/game/{game_id}/key', json={'key': key})


def test_new_game_endpoint(client):
    response = client.post('/api/new_game')
    data = response.get_json()

    assert response.status_code == 200
    assert data['success'] is True
    assert data['game_id']
    assert data['state']['active_attempt_index'] == 0
    assert data['state']['max_attempts'] == 2
    assert data['state']['word_length'] == 5
    assert data['state']['solution'] is None
    assert len(data['state']['attempts']) == 2


def test_get_state(client, game_service):
    game_id = new_game(game_service)

    response = client.get(f'/api/game/{game_id}/state')

    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_unknown_game_returns_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert press(client, 'nope', 'A').status_code == 404


def test_press_letter(client, game_service):
    game_id = new_game(game_service)

    response = press(client, game_id, 'c')
    data = response.get_json()

    assert response.status_code == 200
    assert data['change'] == {'type': 'added_char', 'attempt_index': 0, 'char': 'C'}
    assert data['alert'] is None
    assert data['state']['attempts'][0]['word'] == 'C'


def test_missing_key_is_bad_request(client, game_service):
    game_id = new_game(game_service)

    response = client.post(f'/api/game/{game_id}/key', json={})

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_invalid_key_is_bad_request(client, game_service):
    game_id = new_game(game_service)

    response = press(client, game_id, '12')

    assert response.status_code == 400


def test_row_empty_error_is_an_alert(client, game_service):
    game_id = new_game(game_service)

    data = press(client, game_id, 'Backspace').get_json()

    assert data['change'] == {'type': 'game_error', 'message': 'Row empty.'}
    assert data['alert'] == 'Row empty.'


def test_word_not_in_list(client, game_service):
    game_id = new_game(game_service)
    for letter in 'CRANS':
        press(client, game_id, letter)

    data = press(client, game_id, 'Enter').get_json()

    assert data['change'] == {'type': 'invalid_attempt'}
    assert data['alert'] == 'Not in word list.'
    assert data['state']['attempts'][0]['word'] == 'CRANS'


def test_validated_attempt_hides_solution_mid_game(client, game_service):
    game_id = new_game(game_service)
    for letter in 'TRAIN':
        press(client, game_id, letter)

    data = press(client, game_id, 'Enter').get_json()

    assert data['change']['type'] == 'attempt_validated'
    assert data['change']['char_states'] == ['Miss', 'Correct', 'Correct', 'Miss', 'Present']
    assert data['change']['is_finished'] is False
    assert data['change']['solution'] is None
    assert data['alert'] is None
    assert data['state']['active_attempt_index'] == 1


def test_loss_reveals_solution(client, game_service):
    game_id = new_game(game_service)
    for word in ('TRAIN', 'BRAVE'):
        for letter in word:
            press(client, game_id, letter)
        data = press(client, game_id, 'Enter').get_json()

    assert data['change']['is_finished'] is True
    assert data['change']['is_win'] is False
    assert data['change']['solution'] == 'CRANE'
    assert data['alert'] == "Sorry, you lose! We were looking for 'CRANE'."
    assert data['state']['solution'] == 'CRANE'


def test_win_message(client, game_service):
    game_id = new_game(game_service)
    for letter in 'CRANE':
        press(client, game_id, letter)

    data = press(client, game_id, '↵').get_json()

    assert data['change']['is_win'] is True
    assert data['alert'] == 'Yay, you win!'

    data = press(client, game_id, 'A').get_json()
    assert data['alert'] == 'Game already finished'


def test_delete_game(client, game_service):
    game_id = new_game(game_service)

    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': False}


def test_health_check(client, game_service):
    new_game(game_service)

    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['dictionary_size'] == 3
    assert data['word_list']['total_words'] == 3
    assert data['word_list']['word_length'] == 5


def test_theme_preference(client):
    assert client.get('/api/preferences/theme').get_json()['value'] == 'dark'

    response = client.put('/api/preferences/theme', json={'value': 'light'})
    assert response.status_code == 200

    assert client.get('/api/preferences/theme').get_json()['value'] == 'light'


def test_invalid_theme_is_rejected(client):
    response = client.put('/api/preferences/theme', json={'value': 'purple'})

    assert response.status_code == 400
    assert client.get('/api/preferences/theme').get_json()['value'] == 'dark'


def test_other_preferences_have_no_default(client):
    assert client.get('/api/preferences/font').get_json()['value'] is None

    client.put('/api/preferences/font', json={'value': 'mono'})

    assert client.get('/api/preferences/font').get_json()['value'] == 'mono'
