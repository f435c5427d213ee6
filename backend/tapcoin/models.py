from dataclasses import dataclass, replace
from typing import Optional

DEFAULT_DISPLAY_NAME = 'Player'


@dataclass
class ProgressRecord:
    """Authoritative game progress of one user.

    ``level`` is derived from ``total_coins`` and is only ever written by the
    sync path, together with the coin counters.
    """
    user_id: str
    display_name: str = DEFAULT_DISPLAY_NAME
    total_coins: int = 0
    total_delta: int = 0
    level: int = 1
    tap_power: int = 1
    last_sync_at: Optional[int] = None  # epoch ms

    def copy(self) -> 'ProgressRecord':
        return replace(self)

    def to_dict(self):
        return {
            'userId': self.user_id,
            'displayName': self.display_name,
            'totalCoins': self.total_coins,
            'totalDelta': self.total_delta,
            'level': self.level,
            'tapPower': self.tap_power,
            'lastSyncAt': self.last_sync_at,
        }

    def to_leaderboard_entry(self):
        return {
            'userId': self.user_id,
            'userName': self.display_name,
            'coins': self.total_coins,
            'level': self.level,
        }
