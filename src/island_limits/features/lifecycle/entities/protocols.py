"""Protocol interfaces for the lifecycle feature.

Collaborator contracts the lifecycle controller depends on. None of these
are implemented by the core beyond the in-process event registry.
"""

from abc import abstractmethod
from typing import Any, Callable, Optional, Protocol, Sequence, Type, runtime_checkable

from ....core.value_objects import OccupantId, WorldName
from .events import GameMode, Island, Occupant


EventHandler = Callable[[Any], None]


@runtime_checkable
class EventSource(Protocol):
    """Protocol for registering handlers for lifecycle event records."""

    @abstractmethod
    def subscribe(self, event_type: Type[Any], handler: EventHandler) -> None:
        """Call ``handler`` for every dispatched event of ``event_type``."""
        ...


@runtime_checkable
class CapabilityProvider(Protocol):
    """Protocol for enumerating the capabilities effectively granted to an occupant."""

    @abstractmethod
    def list_effective_capabilities(self, occupant_id: OccupantId) -> Sequence[str]:
        """List every capability string the occupant currently holds."""
        ...


@runtime_checkable
class ConnectivityResolver(Protocol):
    """Protocol for checking occupant connectivity."""

    @abstractmethod
    def is_connected(self, occupant_id: OccupantId) -> bool:
        """Check if the occupant is currently connected."""
        ...

    @abstractmethod
    def current_identity(self, occupant_id: OccupantId) -> Optional[Occupant]:
        """Resolve a connected occupant, None if unknown or offline."""
        ...


@runtime_checkable
class GameModeRegistry(Protocol):
    """Protocol for looking up managed game modes."""

    @abstractmethod
    def game_modes(self) -> Sequence[GameMode]:
        """List all managed game modes."""
        ...

    @abstractmethod
    def game_mode_for_world(self, world: WorldName) -> Optional[GameMode]:
        """Get the game mode managing a world, None if the world is unmanaged."""
        ...


@runtime_checkable
class IslandDirectory(Protocol):
    """Protocol for locating an occupant's island in a world."""

    @abstractmethod
    def get_island(self, world: WorldName, occupant_id: OccupantId) -> Optional[Island]:
        """Get the island the occupant belongs to in ``world``, None if none."""
        ...
