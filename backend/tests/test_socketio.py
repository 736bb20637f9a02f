def _names(received):
    return [pkt['name'] for pkt in received]


def test_socket_connect_and_ping(sio_client):
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')
    assert 'connected' in _names(sio_client.get_received('/ws'))

    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    pong = [pkt for pkt in received if pkt['name'] == 'pong']
    assert pong and pong[0]['args'][0] == {'n': 1}


def test_join_requires_known_game(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('join_game', {}, namespace='/ws')
    sio_client.emit('join_game', {'game_id': 'missing'}, namespace='/ws')
    errors = [pkt['args'][0]['message'] for pkt in sio_client.get_received('/ws') if pkt['name'] == 'error']
    assert errors == ['game_id is required', 'Game not found']


def test_game_created_is_broadcast(client, sio_client):
    sio_client.get_received('/ws')
    game = client.post('/api/games', json={'players': ['Alice', 'Bob']}).get_json()
    updates = [pkt['args'][0] for pkt in sio_client.get_received('/ws') if pkt['name'] == 'state_update']
    assert {'game_id': game['id'], 'event': 'game_created'} in updates


def test_round_is_pushed_to_game_room(client, sio_client):
    game = client.post('/api/games', json={'players': ['Alice', 'Bob']}).get_json()
    sio_client.emit('join_game', {'game_id': game['id']}, namespace='/ws')
    assert 'joined' in _names(sio_client.get_received('/ws'))

    pid = game['players'][0]['id']
    client.post('/api/games/current/round', json={'points': {pid: 4}})
    updates = [pkt['args'][0] for pkt in sio_client.get_received('/ws') if pkt['name'] == 'state_update']
    assert {'game_id': game['id'], 'event': 'round_recorded'} in updates

    # after leaving, round updates stop arriving
    sio_client.emit('leave_game', {'game_id': game['id']}, namespace='/ws')
    assert 'left' in _names(sio_client.get_received('/ws'))
    client.post('/api/games/current/round', json={'points': {pid: 1}})
    assert 'state_update' not in _names(sio_client.get_received('/ws'))


def test_reset_is_broadcast_once(client, sio_client):
    game = client.post('/api/games', json={'players': ['Alice', 'Bob']}).get_json()
    sio_client.get_received('/ws')
    client.delete('/api/games/current')
    client.delete('/api/games/current')
    updates = [pkt['args'][0] for pkt in sio_client.get_received('/ws') if pkt['name'] == 'state_update']
    assert updates == [{'game_id': game['id'], 'event': 'current_reset'}]
