import threading
from typing import Callable, Dict, List, TypeVar

from tapcoin.models import ProgressRecord

T = TypeVar('T')


class ProgressStore:
    """In-memory map of user id -> ProgressRecord.

    The store is volatile: it lives as long as the process. A single lock
    guards the map and every mutation of a record made through ``mutate``,
    so concurrent syncs for one user cannot lose updates and snapshots never
    see a record half written.
    """

    def __init__(self, on_create: Callable[[str], None] = None):
        self._records: Dict[str, ProgressRecord] = {}
        self._lock = threading.RLock()
        self._on_create = on_create

    def get_or_create(self, user_id: str) -> ProgressRecord:
        """Return the live record for ``user_id``, creating a default one."""
        with self._lock:
            record = self._records.get(user_id)
            if record is None:
                record = ProgressRecord(user_id=user_id)
                self._records[user_id] = record
                if self._on_create:
                    self._on_create(user_id)
            return record

    get = get_or_create

    def mutate(self, user_id: str, fn: Callable[[ProgressRecord], T]) -> T:
        with self._lock:
            return fn(self.get_or_create(user_id))

    def view(self, user_id: str) -> dict:
        with self._lock:
            return self.get_or_create(user_id).to_dict()

    def snapshot(self) -> List[ProgressRecord]:
        # Copies, in insertion order
        with self._lock:
            return [record.copy() for record in self._records.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, user_id) -> bool:
        with self._lock:
            return user_id in self._records
