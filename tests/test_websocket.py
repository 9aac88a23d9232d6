"""
Testing the Socket.IO key press events.
"""


def received(socket_client, name):
    return [message['args'][0] for message in socket_client.get_received()
            if message['name'] == name]


def test_join_game_sends_state(socket_client, game_service):
    game_id = game_service.create_new_game(solution="CRANE")

    socket_client.emit('join_game', {'game_id': game_id})

    states = received(socket_client, 'game_state')
    assert len(states) == 1
    assert states[0]['game_id'] == game_id
    assert states[0]['state']['active_attempt_index'] == 0


def test_key_pressed_broadcasts_state_change(socket_client, game_service):
    game_id = game_service.create_new_game(solution="CRANE")
    socket_client.emit('join_game', {'game_id': game_id})
    socket_client.get_received()

    socket_client.emit('key_pressed', {'game_id': game_id, 'key': 'r'})

    changes = received(socket_client, 'state_change')
    assert len(changes) == 1
    assert changes[0]['change'] == {'type': 'added_char', 'attempt_index': 0, 'char': 'R'}
    assert changes[0]['state']['attempts'][0]['word'] == 'R'


def test_missing_game_id(socket_client):
    socket_client.emit('key_pressed', {'key': 'A'})

    errors = received(socket_client, 'error')
    assert errors == [{'error': 'Game ID is required'}]


def test_unknown_game(socket_client):
    socket_client.emit('key_pressed', {'game_id': 'nope', 'key': 'A'})

    errors = received(socket_client, 'error')
    assert errors[0]['error'] == 'Game not found'


def test_invalid_key(socket_client, game_service):
    game_id = game_service.create_new_game(solution="CRANE")

    socket_client.emit('key_pressed', {'game_id': game_id, 'key': '%'})

    errors = received(socket_client, 'error')
    assert errors[0]['game_id'] == game_id
    assert game_service.get_game(game_id).active_attempt.is_empty
