from flask import Blueprint, jsonify, request, current_app, abort
from coastgame import socketio
from coastgame.models import Image
from coastgame.services.rounds import Coast, start_round
from coastgame.services.rounds.scoring import game_over_message


rounds = Blueprint('rounds', __name__)


def room_for(round_code: str) -> str:
    return f"round:{round_code.upper()}"


def serialize_round(round_code, handle, config):
    payload = handle.to_dict()
    payload['round_code'] = round_code
    if payload['current_image']:
        payload['current_image']['url'] = f"/images/{payload['current_image']['file']}"
    payload['durations'] = {
        'correct_feedback_ms': int(config.get('CORRECT_FEEDBACK_MS', 1000)),
        'incorrect_feedback_ms': int(config.get('INCORRECT_FEEDBACK_MS', 1500)),
    }
    if handle.state.is_terminal:
        payload['message'] = game_over_message(handle.state.final_score, handle.state.offending_city)
    return payload


def get_round_or_404(round_code):
    handle = current_app.extensions['rounds'].get(round_code)
    if handle is None:
        abort(404)
    return handle


def apply_guess(round_code, raw_guess):
    """Shared guess path for HTTP and Socket.IO. Raises ValueError for a bad guess value."""
    handle = get_round_or_404(round_code)
    guess = Coast.parse(raw_guess)
    accepted = handle.submit_guess(guess)
    if not accepted:
        current_app.logger.info(f"[guess-ignored] round={round_code.upper()} status={handle.state.status.value}")
    payload = serialize_round(round_code.upper(), handle, current_app.config)
    payload['accepted'] = accepted
    return payload


def schedule_expiry(app, round_code, handle):
    """Forget a finished round once ROUND_RETENTION_SEC has passed."""
    retention = float(app.config.get('ROUND_RETENTION_SEC', 300))

    def expire():
        if app.extensions['rounds'].discard(round_code, handle):
            app.logger.info(f"[round-expire] round={round_code} reason=finished")

    app.extensions['round_scheduler'].call_later(retention, expire)


def schedule_idle_check(app, round_code, handle):
    """Forget a round whose state has not moved for ROUND_IDLE_TIMEOUT_SEC.

    Finished rounds are left to ``schedule_expiry``.
    """
    timeout = float(app.config.get('ROUND_IDLE_TIMEOUT_SEC', 1800))
    seen = handle.state

    def check():
        state = handle.state
        if state.is_terminal:
            return
        if state is not seen:
            schedule_idle_check(app, round_code, handle)
            return
        if app.extensions['rounds'].discard(round_code, handle):
            app.logger.info(f"[round-expire] round={round_code} reason=idle status={state.status.value}")

    app.extensions['round_scheduler'].call_later(timeout, check)


@rounds.route('', methods=['POST'])
def create_round():
    app = current_app._get_current_object()
    cfg = app.config
    images = [img.to_record() for img in Image.query.order_by(Image.id).all()]
    round_code = None

    def on_state_change(handle):
        socketio.emit('state_update', serialize_round(round_code, handle, cfg), to=room_for(round_code), namespace='/ws')

    def on_game_over(final_score, offending_city):
        app.logger.info(f"[game-over] round={round_code} final_score={final_score} offending_city={offending_city}")
        socketio.emit('game_over', {
            'round_code': round_code,
            'final_score': final_score,
            'offending_city': offending_city,
            'message': game_over_message(final_score, offending_city),
        }, to=room_for(round_code), namespace='/ws')
        schedule_expiry(app, round_code, handle)

    handle = start_round(
        images,
        scheduler=app.extensions['round_scheduler'],
        on_game_over=on_game_over,
        on_state_change=on_state_change,
        correct_delay=int(cfg.get('CORRECT_FEEDBACK_MS', 1000)) / 1000.0,
        incorrect_delay=int(cfg.get('INCORRECT_FEEDBACK_MS', 1500)) / 1000.0,
    )
    round_code = app.extensions['rounds'].add(handle)
    schedule_idle_check(app, round_code, handle)
    app.logger.info(
        f"[round-start] round={round_code} catalog={len(images)} sequence={len(handle.sequence)} status={handle.state.status.value}"
    )
    return jsonify(serialize_round(round_code, handle, cfg)), 201


@rounds.route('/<string:round_code>', methods=['GET'])
def get_round(round_code):
    handle = get_round_or_404(round_code)
    return jsonify(serialize_round(round_code.upper(), handle, current_app.config))


@rounds.route('/<string:round_code>/guess', methods=['POST'])
def submit_guess(round_code):
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data.get('guess'):
        return jsonify({'error': 'guess is required'}), 400
    try:
        payload = apply_guess(round_code, data['guess'])
    except ValueError as exc:
        return jsonify({'error': str(exc)}), 400
    return jsonify(payload)


@rounds.route('/<string:round_code>', methods=['DELETE'])
def leave_round(round_code):
    handle = current_app.extensions['rounds'].drop(round_code)
    if handle is None:
        abort(404)
    return jsonify({'message': 'Round closed', 'round_code': round_code.upper()})
