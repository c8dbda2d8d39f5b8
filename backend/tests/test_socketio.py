def _connected(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')
    # Flush any initial events
    sio_client.get_received('/ws')
    return sio_client


def _start_round(client, add_images):
    add_images(('west-seattle-01', 'west', 'Seattle'), ('east-miami-01', 'east', 'Miami'))
    return client.post('/api/rounds').get_json()


def test_socket_connect_and_ping(sio_client):
    _connected(sio_client)
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(pkt['name'] == 'pong' and pkt['args'][0] == {'n': 1} for pkt in received)


def test_join_round_sends_state(sio_client, client, add_images):
    state = _start_round(client, add_images)
    _connected(sio_client)
    sio_client.emit('join_round', {'round_code': state['round_code'].lower()}, namespace='/ws')
    received = sio_client.get_received('/ws')
    names = [pkt['name'] for pkt in received]
    assert 'joined' in names
    update = next(pkt for pkt in received if pkt['name'] == 'state_update')
    assert update['args'][0]['round_code'] == state['round_code']
    assert update['args'][0]['status'] == 'awaiting_guess'


def test_join_unknown_round_errors(sio_client):
    _connected(sio_client)
    sio_client.emit('join_round', {'round_code': 'ZZZZZZ'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert [pkt['name'] for pkt in received] == ['error']


def test_socket_guess_and_game_over(sio_client, client, scheduler, add_images):
    state = _start_round(client, add_images)
    code = state['round_code']
    current = state['current_image']
    wrong = 'east' if current['coast'] == 'west' else 'west'
    _connected(sio_client)
    sio_client.emit('join_round', {'round_code': code}, namespace='/ws')
    sio_client.get_received('/ws')

    sio_client.emit('submit_guess', {'round_code': code, 'guess': wrong}, namespace='/ws')
    received = sio_client.get_received('/ws')
    result = next(pkt for pkt in received if pkt['name'] == 'guess_result')
    assert result['args'][0] == {'accepted': True, 'round_code': code}
    updates = [pkt['args'][0] for pkt in received if pkt['name'] == 'state_update']
    assert updates[-1]['status'] == 'showing_feedback'

    scheduler.advance(1.5)
    received = sio_client.get_received('/ws')
    game_over = [pkt['args'][0] for pkt in received if pkt['name'] == 'game_over']
    assert game_over == [{
        'round_code': code,
        'final_score': 0,
        'offending_city': current['city'],
        'message': "Better luck next time!",
    }]


def test_socket_guess_validation(sio_client, client, add_images):
    state = _start_round(client, add_images)
    _connected(sio_client)
    sio_client.emit('submit_guess', {'round_code': state['round_code']}, namespace='/ws')
    sio_client.emit('submit_guess', {'round_code': state['round_code'], 'guess': 'south'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert [pkt['name'] for pkt in received] == ['error', 'error']


def test_leave_round(sio_client, client, add_images):
    state = _start_round(client, add_images)
    _connected(sio_client)
    sio_client.emit('join_round', {'round_code': state['round_code']}, namespace='/ws')
    sio_client.emit('leave_round', {'round_code': state['round_code']}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert received[-1]['name'] == 'left'


def test_socket_payload_must_be_an_object(sio_client, client, add_images):
    state = _start_round(client, add_images)
    _connected(sio_client)
    sio_client.emit('join_round', 'not-an-object', namespace='/ws')
    sio_client.emit('leave_round', ['round_code'], namespace='/ws')
    sio_client.emit('submit_guess', state['round_code'], namespace='/ws')
    sio_client.emit('submit_guess', {'round_code': 42, 'guess': 'west'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert [pkt['name'] for pkt in received] == ['error', 'error', 'error', 'error']
    assert client.get(f"/api/rounds/{state['round_code']}").get_json()['status'] == 'awaiting_guess'
