import os
import sys
import pytest

# Ensure the backend root (containing the `coastgame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from coastgame import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = 'DEBUG'
    CORRECT_FEEDBACK_MS = 1000
    INCORRECT_FEEDBACK_MS = 1500
    ROUND_RETENTION_SEC = 60
    ROUND_IDLE_TIMEOUT_SEC = 600
    UNSPLASH_ACCESS_KEY = None
    UNSPLASH_TIMEOUT_SEC = 5
    SEED_IMAGES_PER_TERM = 3
    SEED_MAX_IMAGES_PER_CITY = 8
    SEED_RATE_LIMIT_SEC = 0


@pytest.fixture()
def flask_app(tmp_path):
    class _Config(TestConfig):
        IMAGES_DIR = str(tmp_path / 'images')
        MANIFEST_PATH = str(tmp_path / 'images.json')

    application = create_app(_Config)
    with application.app_context():
        # Ensure models are imported so tables are created
        import coastgame.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def scheduler(flask_app):
    return flask_app.extensions['round_scheduler']


@pytest.fixture()
def add_images(flask_app):
    from coastgame.models import Image

    def _add(*entries):
        for image_id, coast, city in entries:
            db.session.add(Image(id=image_id, file=f'{coast}/{image_id}.jpg', city=city, coast=coast))
        db.session.commit()
    return _add


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
