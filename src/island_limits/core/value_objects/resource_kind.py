"""Resource kind value objects.

A limit applies either to a block material or to an entity type. The two
variants share the ``ResourceKind`` base so they can be mixed as keys of a
single limits mapping without colliding.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from ...config.constants import ResourceCategory
from ..exceptions import InvalidIdentifierError, RecordFormatError


@dataclass(frozen=True)
class ResourceKind:
    """Base for the block and entity resource variants."""

    def __post_init__(self):
        if not self.key or not isinstance(self.key, str):
            raise InvalidIdentifierError(
                f"{self.category.value} identifier must be a non-empty string"
            )

    @property
    def category(self) -> ResourceCategory:
        raise NotImplementedError

    @property
    def key(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, str]:
        return {"category": self.category.value, "key": self.key}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "AnyResourceKind":
        """Rebuild a resource kind from its ``to_dict`` form."""
        try:
            category = ResourceCategory(data["category"])
            key = data["key"]
        except (KeyError, TypeError, ValueError) as e:
            raise RecordFormatError(f"Invalid resource kind: {data!r}") from e

        if category is ResourceCategory.BLOCK:
            return BlockKind(key)
        return EntityKind(key)

    def __str__(self) -> str:
        return f"{self.category.value}:{self.key}"


@dataclass(frozen=True)
class BlockKind(ResourceKind):
    """Block material, e.g. ``STONE`` or ``HOPPER``."""
    material_id: str

    @property
    def category(self) -> ResourceCategory:
        return ResourceCategory.BLOCK

    @property
    def key(self) -> str:
        return self.material_id


@dataclass(frozen=True)
class EntityKind(ResourceKind):
    """Entity type, e.g. ``COW`` or ``ITEM_FRAME``."""
    entity_type_id: str

    @property
    def category(self) -> ResourceCategory:
        return ResourceCategory.ENTITY

    @property
    def key(self) -> str:
        return self.entity_type_id


AnyResourceKind = Union[BlockKind, EntityKind]
