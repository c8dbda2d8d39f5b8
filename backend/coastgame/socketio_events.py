from flask_socketio import join_room, leave_room, emit
from coastgame import socketio
from flask import current_app
from coastgame.api.rounds import apply_guess, room_for, serialize_round


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def _round_code(data):
    round_code = data.get('round_code') if isinstance(data, dict) else None
    return round_code if isinstance(round_code, str) else None


def handle_join_round(data):
    round_code = _round_code(data)
    if not round_code:
        emit('error', {'message': 'round_code is required'})
        return
    handle = current_app.extensions['rounds'].get(round_code)
    if handle is None:
        emit('error', {'message': f'Round {round_code.upper()} not found'})
        return
    room = room_for(round_code)
    join_room(room)
    emit('joined', {'room': room})
    emit('state_update', serialize_round(round_code.upper(), handle, current_app.config))


def handle_leave_round(data):
    round_code = _round_code(data)
    if not round_code:
        emit('error', {'message': 'round_code is required'})
        return
    room = room_for(round_code)
    leave_room(room)
    emit('left', {'room': room})


def handle_submit_guess(data):
    round_code = _round_code(data)
    if not round_code or not data.get('guess'):
        emit('error', {'message': 'round_code and guess are required'})
        return
    if current_app.extensions['rounds'].get(round_code) is None:
        emit('error', {'message': f'Round {round_code.upper()} not found'})
        return
    try:
        payload = apply_guess(round_code, data['guess'])
    except ValueError as exc:
        emit('error', {'message': str(exc)})
        return
    emit('guess_result', {'accepted': payload['accepted'], 'round_code': payload['round_code']})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    handlers = {
        'connect': handle_connect,
        'join_round': handle_join_round,
        'leave_round': handle_leave_round,
        'submit_guess': handle_submit_guess,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace=namespace)
