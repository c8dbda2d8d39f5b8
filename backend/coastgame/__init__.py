import logging

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:5174",
    "http://127.0.0.1:5174",
]
socketio = SocketIO(cors_allowed_origins=allowed_origins, async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Live rounds and the timer that resolves their feedback windows
    from coastgame.services.rounds import ManualScheduler, SocketIOScheduler
    from coastgame.services.rounds.registry import RoundRegistry
    flask_app.extensions['rounds'] = RoundRegistry()
    if flask_app.config.get('TESTING') and not flask_app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        flask_app.extensions['round_scheduler'] = ManualScheduler()
    else:
        flask_app.extensions['round_scheduler'] = SocketIOScheduler(socketio)

    # Import and register blueprints here
    from coastgame.main import main
    flask_app.register_blueprint(main)

    from coastgame.api.rounds import rounds
    flask_app.register_blueprint(rounds, url_prefix='/api/rounds')

    # Register Socket.IO event handlers
    from coastgame.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('load-manifest')
    @click.option('--path', 'manifest_path', default=None, help='Manifest JSON (defaults to MANIFEST_PATH).')
    def load_manifest_command(manifest_path):
        """Imports the JSON image manifest into the image catalog."""
        from coastgame.manifest import load_manifest
        from coastgame.models import import_manifest
        manifest_path = manifest_path or flask_app.config['MANIFEST_PATH']
        added, updated, skipped = import_manifest(load_manifest(manifest_path))
        flask_app.logger.info(f"[manifest-load] path={manifest_path} added={added} updated={updated} skipped={skipped}")
        click.echo(f'Loaded {manifest_path}: {added} added, {updated} updated, {skipped} skipped')

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and reloads the image catalog."""
        from coastgame.manifest import load_manifest
        from coastgame.models import import_manifest
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            added, _, skipped = import_manifest(load_manifest(flask_app.config['MANIFEST_PATH']))
            click.echo(f'Database has been reset with {added} images ({skipped} skipped)!')

    @click.command('seed-images')
    @click.option('--per-term', type=int, default=None, help='Photos requested per search term.')
    @click.option('--max-per-city', type=int, default=None, help='Cap on images kept per city.')
    @click.option('--load/--no-load', default=True, help='Import the manifest into the catalog afterwards.')
    def seed_images_command(per_term, max_per_city, load):
        """Downloads downtown photos from Unsplash into IMAGES_DIR."""
        from coastgame.seeding.cli import run_seed
        logging.basicConfig(level=flask_app.config.get('LOG_LEVEL', 'INFO'), format='%(message)s')
        run_seed(flask_app, per_term=per_term, max_per_city=max_per_city, load=load)

    flask_app.cli.add_command(load_manifest_command)
    flask_app.cli.add_command(db_reset_command)
    flask_app.cli.add_command(seed_images_command)

    return flask_app
