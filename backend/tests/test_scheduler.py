import threading
import time

from coastgame import create_app, socketio
from coastgame.services.rounds import Coast, ImageRecord, RoundHandle, RoundStatus, SocketIOScheduler

from conftest import TestConfig as BaseConfig

SEATTLE = ImageRecord(id='west-seattle-01', file='west/seattle-01.jpg', city='Seattle', coast=Coast.WEST)


def _wait_for(predicate, timeout=3.0):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_background_scheduler_is_used_when_enabled(tmp_path):
    class _Config(BaseConfig):
        ENABLE_SCHEDULER_IN_TESTS = True
        IMAGES_DIR = str(tmp_path / 'images')
        MANIFEST_PATH = str(tmp_path / 'images.json')

    application = create_app(_Config)
    assert isinstance(application.extensions['round_scheduler'], SocketIOScheduler)


def test_wrong_guess_terminates_on_background_timer(flask_app):
    games_over = []
    handle = RoundHandle(
        (SEATTLE,),
        scheduler=SocketIOScheduler(socketio),
        on_game_over=lambda score, city: games_over.append((score, city)),
        correct_delay=0.01,
        incorrect_delay=0.02,
    )
    assert handle.submit_guess(Coast.EAST)
    assert handle.state.status == RoundStatus.SHOWING_FEEDBACK
    assert _wait_for(lambda: games_over)
    assert handle.state.status == RoundStatus.TERMINATED
    assert handle.state.offending_city == 'Seattle'
    # no second timer is pending, so nothing else arrives
    time.sleep(0.1)
    assert games_over == [(0, 'Seattle')]


def test_failing_callback_is_logged(flask_app, caplog):
    fired = threading.Event()

    def explode():
        fired.set()
        raise RuntimeError('kaput')

    SocketIOScheduler(socketio).call_later(0.01, explode)
    assert fired.wait(3.0)
    assert _wait_for(lambda: any(
        rec.levelname == 'ERROR' and 'Deferred round transition failed' in rec.getMessage()
        for rec in caplog.records
    ))
