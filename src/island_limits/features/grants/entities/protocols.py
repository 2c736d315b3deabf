"""Protocol interfaces for the grants feature.

Contracts for resolving resource names and for reporting rejected
capability strings. Implementations live outside the core.
"""

from abc import abstractmethod
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ResourceResolver(Protocol):
    """Protocol for resolving resource names to block or entity identifiers."""

    @abstractmethod
    def resolve_block(self, name: str) -> Optional[str]:
        """Resolve an upper-cased name to a block material id, or None."""
        ...

    @abstractmethod
    def resolve_entity(self, name: str) -> Optional[str]:
        """Resolve an upper-cased name to an entity type id, or None."""
        ...

    @abstractmethod
    def is_spawnable(self, entity_type_id: str) -> bool:
        """Check if the entity type can be spawned at all."""
        ...

    @abstractmethod
    def is_disallowed(self, entity_type_id: str) -> bool:
        """Check if the entity type is explicitly excluded from limits."""
        ...


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Protocol for reporting rejected capability strings.

    Fire-and-forget: implementations must not raise into the caller's
    control flow.
    """

    @abstractmethod
    def log_rejection(self, occupant_name: str, raw_capability: str, reason: str) -> None:
        """Report that an occupant holds a capability that was ignored."""
        ...
