from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

cors_methods = ['GET', 'POST', 'OPTIONS']
cors_headers = ['Content-Type']
socketio = SocketIO(cors_allowed_origins='*', async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    # Must be registered before Flask-CORS so it runs after it
    # (methods/headers on every response, not just preflight)
    @flask_app.after_request
    def add_cors_policy_headers(response):
        response.headers.setdefault('Access-Control-Allow-Origin', '*')
        response.headers.setdefault('Access-Control-Allow-Methods', ', '.join(cors_methods))
        response.headers.setdefault('Access-Control-Allow-Headers', ', '.join(cors_headers))
        return response

    CORS(flask_app, origins='*', send_wildcard=True, methods=cors_methods, allow_headers=cors_headers)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins='*')

    # Composition root: the store and limiter live exactly as long as this app
    from tapcoin.services.progress import CooldownLimiter, ProgressStore, SyncProcessor
    store = ProgressStore(on_create=lambda uid: flask_app.logger.info(f"[store-create] user={uid}"))
    limiter = CooldownLimiter(cooldown_ms=int(flask_app.config.get('SYNC_COOLDOWN_MS', 500)))
    flask_app.extensions['progress_store'] = store
    flask_app.extensions['sync_limiter'] = limiter
    flask_app.extensions['sync_processor'] = SyncProcessor(
        store,
        limiter,
        secret=flask_app.config.get('BOT_TOKEN', ''),
        max_coins_per_sync=int(flask_app.config.get('MAX_COINS_PER_SYNC', 50)),
        init_data_max_age_sec=int(flask_app.config.get('INIT_DATA_MAX_AGE_SEC', 0)),
        logger=flask_app.logger,
    )
    if not flask_app.config.get('BOT_TOKEN'):
        flask_app.logger.warning("[config] BOT_TOKEN is not set: initData verification is disabled")

    # Import and register blueprints here
    from tapcoin.main import main
    flask_app.register_blueprint(main)

    from tapcoin.api.progress import progress
    flask_app.register_blueprint(progress, url_prefix='/api')

    # Register Socket.IO event handlers
    from tapcoin.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('sign-init-data')
    @click.argument('fields', nargs=-1)
    def sign_init_data_command(fields):
        """Print an initData payload signed with BOT_TOKEN. FIELDS are KEY=VALUE."""
        from tapcoin.services.progress import sign_init_data
        token = flask_app.config.get('BOT_TOKEN')
        if not token:
            raise click.UsageError('BOT_TOKEN is not configured')
        pairs = {}
        for field in fields:
            key, sep, value = field.partition('=')
            if not sep or not key:
                raise click.BadParameter(f'expected KEY=VALUE, got {field!r}')
            pairs[key] = value
        click.echo(sign_init_data(pairs, token))

    flask_app.cli.add_command(sign_init_data_command)

    return flask_app
