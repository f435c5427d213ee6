"""Progress domain services: verification, throttling, merge and ranking.

This package holds the sync pipeline that HTTP routes and socket handlers
call into. Nothing here touches Flask request state, so every piece can be
exercised directly from tests.
"""

from .errors import AuthError, MalformedPayload, RateLimitError, SyncError, ValidationError
from .identity import sign_init_data, verify_init_data
from .leaderboard import top_n
from .progression import clamp_delta, level_for_coins
from .rate_limit import CooldownLimiter
from .store import ProgressStore
from .sync import SyncProcessor, TapRequest, decode_tap_request

__all__ = [
    'AuthError',
    'CooldownLimiter',
    'MalformedPayload',
    'ProgressStore',
    'RateLimitError',
    'SyncError',
    'SyncProcessor',
    'TapRequest',
    'ValidationError',
    'clamp_delta',
    'decode_tap_request',
    'level_for_coins',
    'sign_init_data',
    'top_n',
    'verify_init_data',
]
