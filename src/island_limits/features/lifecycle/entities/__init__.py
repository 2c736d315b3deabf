"""Lifecycle entities package.

Event records, domain objects and collaborator protocols.
"""

from .events import (
    Occupant,
    Island,
    GameMode,
    IslandEvent,
    OwnershipTransferred,
    OccupantJoined,
)
from .protocols import (
    EventHandler,
    EventSource,
    CapabilityProvider,
    ConnectivityResolver,
    GameModeRegistry,
    IslandDirectory,
)

__all__ = [
    # Domain objects
    "Occupant",
    "Island",
    "GameMode",

    # Event records
    "IslandEvent",
    "OwnershipTransferred",
    "OccupantJoined",

    # Protocols
    "EventHandler",
    "EventSource",
    "CapabilityProvider",
    "ConnectivityResolver",
    "GameModeRegistry",
    "IslandDirectory",
]
