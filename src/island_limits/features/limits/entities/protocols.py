"""Protocol interfaces for the limits feature."""

from abc import abstractmethod
from typing import Optional, Protocol, runtime_checkable

from ....core.value_objects import IslandId
from .override_record import OverrideRecord


@runtime_checkable
class OverrideStore(Protocol):
    """Protocol for per-island override record persistence.

    The store owns persistence and storage lifetime; callers only read and
    write whole records through it.
    """

    @abstractmethod
    def get(self, island_id: IslandId) -> Optional[OverrideRecord]:
        """Get the override record for an island, None if none is stored."""
        ...

    @abstractmethod
    def set(self, island_id: IslandId, record: OverrideRecord) -> None:
        """Store the override record for an island."""
        ...
