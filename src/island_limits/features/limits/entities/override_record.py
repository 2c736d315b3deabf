"""Override record entity for the island-limits limits feature.

Per-island mapping of resource kind to the effective ceiling derived from
the capabilities held by the island's relevant occupant(s).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ....core.exceptions import InvalidLimitError, RecordFormatError
from ....core.value_objects import (
    IslandId, ResourceKind, BlockKind, EntityKind, AnyResourceKind
)


def _validate_limit(kind: ResourceKind, limit: Any) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidLimitError(f"Limit for {kind} must be an integer, got: {limit!r}")
    if limit < 0:
        raise InvalidLimitError(f"Limit for {kind} must not be negative, got: {limit}")


@dataclass
class OverrideRecord:
    """Domain entity holding the limit overrides of one island.

    Created lazily with empty limits, raised by merging grants and
    emptied (not deleted) when ownership changes or the island is
    unregistered.
    """

    island_id: IslandId
    game_mode: str
    limits: Dict[AnyResourceKind, int] = field(default_factory=dict)

    def __post_init__(self):
        for kind, limit in self.limits.items():
            _validate_limit(kind, limit)

    def get_limit(self, kind: AnyResourceKind) -> Optional[int]:
        """Get the override for a resource kind, None if never granted."""
        return self.limits.get(kind)

    def set_limit(self, kind: AnyResourceKind, limit: int) -> None:
        """Set the override for a resource kind."""
        _validate_limit(kind, limit)
        self.limits[kind] = limit

    def clear_limits(self) -> None:
        """Replace the limits with an empty mapping."""
        self.limits = {}

    def is_empty(self) -> bool:
        return not self.limits

    @property
    def block_limits(self) -> Dict[str, int]:
        """Block overrides keyed by material id."""
        return {
            kind.material_id: limit
            for kind, limit in self.limits.items()
            if isinstance(kind, BlockKind)
        }

    @property
    def entity_limits(self) -> Dict[str, int]:
        """Entity overrides keyed by entity type id."""
        return {
            kind.entity_type_id: limit
            for kind, limit in self.limits.items()
            if isinstance(kind, EntityKind)
        }

    def copy(self) -> "OverrideRecord":
        """Copy with an independent limits mapping."""
        return OverrideRecord(
            island_id=self.island_id,
            game_mode=self.game_mode,
            limits=dict(self.limits)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-compatible dictionary."""
        return {
            "island_id": str(self.island_id),
            "game_mode": self.game_mode,
            "limits": [
                {**kind.to_dict(), "limit": limit}
                for kind, limit in sorted(self.limits.items(), key=lambda item: str(item[0]))
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverrideRecord":
        """Create OverrideRecord from dictionary representation."""
        try:
            island_id = IslandId(data["island_id"])
            game_mode = data.get("game_mode", "")
            entries = data.get("limits", [])
            limits = {
                ResourceKind.from_dict(entry): entry["limit"]
                for entry in entries
            }
        except (KeyError, TypeError) as e:
            raise RecordFormatError(f"Invalid override record: {e}") from e

        return cls(island_id=island_id, game_mode=game_mode, limits=limits)

    def __str__(self) -> str:
        return f"OverrideRecord({self.island_id}, {self.game_mode}, {len(self.limits)} limits)"
