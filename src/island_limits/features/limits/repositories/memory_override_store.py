"""In-memory override store.

Implements override record storage in memory for development, testing
and single-instance deployments.
"""

import threading
from typing import Dict, List, Optional

from ....core.exceptions import OverrideStoreError
from ....core.value_objects import IslandId
from ..entities import OverrideRecord


class InMemoryOverrideStore:
    """Thread-safe in-memory override record storage.

    Records are copied on the way in and out so callers can only change
    stored state through ``set``.
    """

    def __init__(self):
        self._records: Dict[IslandId, OverrideRecord] = {}
        self._lock = threading.RLock()
        self._stats = {"gets": 0, "misses": 0, "sets": 0}

    def get(self, island_id: IslandId) -> Optional[OverrideRecord]:
        with self._lock:
            self._stats["gets"] += 1
            record = self._records.get(island_id)
            if record is None:
                self._stats["misses"] += 1
                return None
            return record.copy()

    def set(self, island_id: IslandId, record: OverrideRecord) -> None:
        if record.island_id != island_id:
            raise OverrideStoreError(
                f"Record for island {record.island_id} cannot be stored under {island_id}",
                details={"island_id": str(island_id), "record_island_id": str(record.island_id)}
            )
        with self._lock:
            self._records[island_id] = record.copy()
            self._stats["sets"] += 1

    def island_ids(self) -> List[IslandId]:
        """List the islands that have a stored record."""
        with self._lock:
            return list(self._records)

    def get_stats(self) -> Dict[str, int]:
        """Get operation counters."""
        with self._lock:
            return {**self._stats, "records": len(self._records)}

    def __contains__(self, island_id: object) -> bool:
        with self._lock:
            return island_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
