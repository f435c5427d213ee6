import threading
import time
from typing import Callable, Dict


class CooldownLimiter:
    """Admit at most one call per user within ``cooldown_ms``.

    The marker moves forward whenever a call is admitted, regardless of what
    the caller does afterwards. Keys are never evicted.
    """

    def __init__(self, cooldown_ms: int = 500, clock: Callable[[], float] = time.monotonic):
        self.cooldown_ms = cooldown_ms
        self._clock = clock
        self._last_admitted: Dict[str, float] = {}
        self._lock = threading.Lock()

    def allow(self, user_id: str) -> bool:
        now = self._clock() * 1000.0
        with self._lock:
            last = self._last_admitted.get(user_id)
            if last is not None and now - last < self.cooldown_ms:
                return False
            self._last_admitted[user_id] = now
            return True

    def reset(self) -> None:
        with self._lock:
            self._last_admitted.clear()
