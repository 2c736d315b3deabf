"""Lifecycle feature for island-limits.

Event-driven recompute and clearing of island overrides:
- entities/: Event records, domain objects and collaborator protocols
- services/: Event handler registry and lifecycle controller
"""

from .entities import (
    Occupant, Island, GameMode,
    IslandEvent, OwnershipTransferred, OccupantJoined,
    EventHandler, EventSource, CapabilityProvider, ConnectivityResolver,
    GameModeRegistry, IslandDirectory
)

from .services import (
    EventHandlerRegistry,
    LimitsLifecycleController,
    create_lifecycle_controller,
)

__all__ = [
    # Entities
    "Occupant",
    "Island",
    "GameMode",
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

    # Services
    "EventHandlerRegistry",
    "LimitsLifecycleController",
    "create_lifecycle_controller",
]
