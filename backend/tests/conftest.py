import os
import sys
import pytest

# Ensure the backend root (containing the `tapcoin` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from tapcoin import create_app, socketio
from tapcoin.services.progress import sign_init_data


BOT_TOKEN = 'test-bot-token'


class TestConfig:
    TESTING = True
    BOT_TOKEN = ''
    SYNC_COOLDOWN_MS = 500
    MAX_COINS_PER_SYNC = 50
    LEADERBOARD_SIZE = 100
    INIT_DATA_MAX_AGE_SEC = 0
    LOG_LEVEL = 'DEBUG'


class SignedConfig(TestConfig):
    BOT_TOKEN = BOT_TOKEN


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture()
def flask_app():
    return create_app(TestConfig)


@pytest.fixture()
def signed_app():
    return create_app(SignedConfig)


@pytest.fixture()
def clock(flask_app):
    # Swap the limiter clock so cooldown tests do not sleep
    fake = FakeClock()
    flask_app.extensions['sync_limiter']._clock = fake
    return fake


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def signed_client(signed_app):
    return signed_app.test_client()


@pytest.fixture()
def init_data():
    return sign_init_data({'auth_date': '1700000000', 'query_id': 'AAE1', 'user': '{"id":42}'}, BOT_TOKEN)


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
