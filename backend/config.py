import os

class Config:
    # Shared secret of the launcher bot. Empty disables initData verification,
    # which is only acceptable for local development.
    BOT_TOKEN = os.environ.get('BOT_TOKEN', '')
    PORT = int(os.environ.get('PORT', '3000'))
    # Anti-cheat limits
    SYNC_COOLDOWN_MS = int(os.environ.get('SYNC_COOLDOWN_MS', '500'))
    MAX_COINS_PER_SYNC = int(os.environ.get('MAX_COINS_PER_SYNC', '50'))
    LEADERBOARD_SIZE = int(os.environ.get('LEADERBOARD_SIZE', '100'))
    # Optional: reject signed payloads whose auth_date is older than this (sec). 0 disables.
    INIT_DATA_MAX_AGE_SEC = int(os.environ.get('INIT_DATA_MAX_AGE_SEC', '0'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
