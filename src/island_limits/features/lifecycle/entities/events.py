"""Lifecycle event records and the domain objects they carry.

Plain data records delivered by the world simulation's event source. Each
controller handler takes exactly one of these.
"""

from dataclasses import dataclass
from typing import Optional

from ....config.constants import IslandEventReason, RECOMPUTE_REASONS
from ....core.value_objects import IslandId, OccupantId, WorldName


@dataclass(frozen=True)
class Occupant:
    """A connected participant resolved to a display identity."""

    occupant_id: OccupantId
    name: str


@dataclass(frozen=True)
class Island:
    """A bounded territory in one world, owned by at most one occupant."""

    island_id: IslandId
    world: WorldName
    owner_id: Optional[OccupantId] = None


@dataclass(frozen=True)
class GameMode:
    """A managed world-variant with its own permission namespace."""

    name: str
    permission_prefix: str
    overworld: WorldName

    def is_configured(self) -> bool:
        """Check if both the display name and the permission prefix are set."""
        return bool(self.name) and bool(self.permission_prefix)


@dataclass(frozen=True)
class IslandEvent:
    """Island created, reset, registered, unregistered, etc."""

    island: Island
    reason: IslandEventReason
    owner_id: Optional[OccupantId] = None

    @property
    def effective_owner_id(self) -> Optional[OccupantId]:
        """Owner carried by the event, falling back to the island's owner."""
        return self.owner_id if self.owner_id is not None else self.island.owner_id

    def requires_recompute(self) -> bool:
        return self.reason in RECOMPUTE_REASONS

    def is_unregistration(self) -> bool:
        return self.reason is IslandEventReason.UNREGISTERED


@dataclass(frozen=True)
class OwnershipTransferred:
    """Island ownership moved from one occupant to another."""

    island: Island
    old_owner_id: Optional[OccupantId]
    new_owner_id: OccupantId


@dataclass(frozen=True)
class OccupantJoined:
    """An occupant connected to the simulation."""

    occupant_id: OccupantId
