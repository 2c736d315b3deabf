"""Constants and enums for island-limits.

This module defines the constants and enums shared by the grammar parser,
the limit merger and the lifecycle controller.
"""

from enum import Enum
from typing import Final, FrozenSet


class PermissionGrammar:
    """Shape of a limit capability string.

    ``<gamemode-prefix>island.limit.<RESOURCE>.<NUMBER>``
    """

    LIMIT_SUFFIX: Final[str] = "island.limit."
    SEPARATOR: Final[str] = "."
    WILDCARD: Final[str] = "*"
    SEGMENT_COUNT: Final[int] = 5
    RESOURCE_SEGMENT: Final[int] = 3
    LIMIT_SEGMENT: Final[int] = 4
    # Largest value a 32-bit signed limit can hold
    MAX_LIMIT: Final[int] = 2_147_483_647


class EntityTypes:
    """Entity types with special eligibility handling."""

    PAINTING: Final[str] = "PAINTING"
    ITEM_FRAME: Final[str] = "ITEM_FRAME"
    ALWAYS_ALLOWED: Final[FrozenSet[str]] = frozenset({PAINTING, ITEM_FRAME})


class ResourceCategory(str, Enum):
    """Resource kind variants a limit can apply to."""

    BLOCK = "block"
    ENTITY = "entity"


class RejectionReason(str, Enum):
    """Why a capability string was not turned into a grant."""

    WILDCARD = "wildcard"
    MALFORMED = "malformed"
    NOT_A_NUMBER = "not_a_number"
    UNKNOWN_RESOURCE = "unknown_resource"
    UNSUPPORTED_ENTITY = "unsupported_entity"


class IslandEventReason(str, Enum):
    """Island lifecycle reasons delivered with an island event."""

    CREATED = "created"
    RESETTED = "resetted"
    REGISTERED = "registered"
    UNREGISTERED = "unregistered"
    DELETED = "deleted"
    LOCKED = "locked"
    UNLOCKED = "unlocked"


# Reasons that trigger a recompute of the owner's overrides
RECOMPUTE_REASONS: Final[FrozenSet[IslandEventReason]] = frozenset({
    IslandEventReason.CREATED,
    IslandEventReason.RESETTED,
    IslandEventReason.REGISTERED,
})
