"""Core layer for island-limits.

Exceptions and value objects shared by every feature. No business logic.
"""

from .exceptions import (
    IslandLimitsError,
    ValidationError,
    InvalidIdentifierError,
    InvalidLimitError,
    RecordFormatError,
    OverrideStoreError,
)

from .value_objects import (
    IslandId,
    OccupantId,
    WorldName,
    ResourceKind,
    BlockKind,
    EntityKind,
    AnyResourceKind,
)

__all__ = [
    # Exceptions
    "IslandLimitsError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidLimitError",
    "RecordFormatError",
    "OverrideStoreError",

    # Value Objects
    "IslandId",
    "OccupantId",
    "WorldName",
    "ResourceKind",
    "BlockKind",
    "EntityKind",
    "AnyResourceKind",
]
