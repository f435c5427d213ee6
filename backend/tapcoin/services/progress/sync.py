import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from tapcoin.models import ProgressRecord
from .errors import AuthError, RateLimitError, ValidationError
from .identity import verify_init_data
from .progression import clamp_delta, level_for_coins
from .rate_limit import CooldownLimiter
from .store import ProgressStore


@dataclass(frozen=True)
class TapRequest:
    user_id: str
    coins: float
    user_name: Optional[str] = None
    init_data: Optional[str] = None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_amount(value) -> bool:
    # ints of any size are fine; only floats can be nan/inf
    if not _is_number(value):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    return value > 0


def _optional_str(body: dict, key: str) -> Optional[str]:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f'{key} must be a string')
    return value


def decode_tap_request(body) -> TapRequest:
    """Turn a decoded JSON body into a TapRequest or raise ValidationError."""
    if not isinstance(body, dict):
        raise ValidationError('body must be an object')

    user_id = body.get('userId')
    if isinstance(user_id, int) and not isinstance(user_id, bool):
        user_id = str(user_id)
    if not isinstance(user_id, str) or not user_id:
        raise ValidationError('userId is required')

    coins = body.get('coins')
    if not _is_positive_amount(coins):
        raise ValidationError('coins must be a positive number')

    return TapRequest(
        user_id=user_id,
        coins=coins,
        user_name=_optional_str(body, 'userName'),
        init_data=_optional_str(body, 'initData'),
    )


class SyncProcessor:
    """Validate an untrusted "coins since last sync" report and merge it.

    Gates run in order: input validation, signature, cooldown. Each rejection
    raises before the store is touched, so a rejected sync never leaves a
    partial merge behind.
    """

    def __init__(self, store: ProgressStore, limiter: CooldownLimiter, secret: str = '',
                 max_coins_per_sync: int = 50, init_data_max_age_sec: int = 0,
                 logger: logging.Logger = None, clock: Callable[[], float] = time.time):
        self.store = store
        self.limiter = limiter
        self.secret = secret
        self.max_coins_per_sync = max_coins_per_sync
        self.init_data_max_age_sec = init_data_max_age_sec
        self.logger = logger or logging.getLogger(__name__)
        self._clock = clock

    def apply_sync(self, user_id, display_name, reported_delta, signed_payload=None) -> ProgressRecord:
        """Apply one sync and return a copy of the updated record."""
        if not user_id or not _is_positive_amount(reported_delta):
            self.logger.warning(f"[tap-rejected] user={user_id!r} reason=validation")
            raise ValidationError('userId and a positive coins value are required')

        if not verify_init_data(signed_payload, self.secret, self.init_data_max_age_sec):
            self.logger.warning(f"[tap-rejected] user={user_id} reason=auth")
            raise AuthError()

        if not self.limiter.allow(user_id):
            self.logger.warning(f"[tap-rejected] user={user_id} reason=rate_limit")
            raise RateLimitError()

        delta = clamp_delta(reported_delta, self.max_coins_per_sync)

        def _merge(record: ProgressRecord) -> ProgressRecord:
            if display_name:
                record.display_name = display_name
            record.total_coins += delta
            record.total_delta += delta
            record.level = level_for_coins(record.total_coins)
            record.last_sync_at = int(self._clock() * 1000)
            return record.copy()

        updated = self.store.mutate(user_id, _merge)
        self.logger.info(
            f"[tap-accepted] user={user_id} delta={delta} "
            f"total={updated.total_coins} level={updated.level}"
        )
        return updated

    def apply_request(self, request: TapRequest) -> ProgressRecord:
        return self.apply_sync(request.user_id, request.user_name, request.coins, request.init_data)
