"""Value objects for identifiers in island-limits.

Immutable identifiers for islands, occupants and worlds used throughout
the grammar parser, the merger and the lifecycle controller.
"""

from dataclasses import dataclass
from uuid import UUID

from ..exceptions import InvalidIdentifierError


@dataclass(frozen=True)
class IslandId:
    """Island identifier value object with basic validation."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise InvalidIdentifierError("Island ID must be a non-empty string")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OccupantId:
    """Occupant identifier value object backed by a UUID."""
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            try:
                object.__setattr__(self, 'value', UUID(str(self.value)))
            except (ValueError, TypeError):
                raise InvalidIdentifierError(
                    f"OccupantId must be a valid UUID, got: {self.value}"
                )

    def __str__(self) -> str:
        """String representation."""
        return str(self.value)

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"OccupantId(value={self.value!r})"


@dataclass(frozen=True)
class WorldName:
    """World identifier value object with basic validation."""
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise InvalidIdentifierError("World name must be a non-empty string")

    def __str__(self) -> str:
        return self.value
