"""Value objects for island-limits."""

from .identifiers import IslandId, OccupantId, WorldName
from .resource_kind import ResourceKind, BlockKind, EntityKind, AnyResourceKind

__all__ = [
    "IslandId",
    "OccupantId",
    "WorldName",
    "ResourceKind",
    "BlockKind",
    "EntityKind",
    "AnyResourceKind",
]
