"""Static resource resolver.

In-memory catalog of block and entity names for deployments where the
resource registry is known up front, and for tests.
"""

from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional


class StaticResourceResolver:
    """Resource resolver backed by fixed name catalogs."""

    def __init__(
        self,
        blocks: Iterable[str] = (),
        entities: Optional[Mapping[str, bool]] = None,
        disallowed_entities: Iterable[str] = ()
    ):
        """Initialize the catalogs.

        Args:
            blocks: Known block material names
            entities: Known entity type names mapped to their spawnable flag
            disallowed_entities: Entity types excluded from limits
        """
        self._blocks: FrozenSet[str] = frozenset(name.upper() for name in blocks)
        self._entities: Dict[str, bool] = {
            name.upper(): bool(spawnable) for name, spawnable in (entities or {}).items()
        }
        self._disallowed: FrozenSet[str] = frozenset(name.upper() for name in disallowed_entities)

    @classmethod
    def from_catalog(cls, catalog: Mapping[str, Any]) -> "StaticResourceResolver":
        """Build a resolver from a plain mapping, e.g. loaded from JSON.

        Expected keys: ``blocks`` (list), ``entities`` (name -> spawnable)
        and ``disallowed_entities`` (list). Missing keys are treated as empty.
        """
        return cls(
            blocks=catalog.get("blocks", ()),
            entities=catalog.get("entities", {}),
            disallowed_entities=catalog.get("disallowed_entities", ())
        )

    def resolve_block(self, name: str) -> Optional[str]:
        key = name.upper()
        return key if key in self._blocks else None

    def resolve_entity(self, name: str) -> Optional[str]:
        key = name.upper()
        return key if key in self._entities else None

    def is_spawnable(self, entity_type_id: str) -> bool:
        return self._entities.get(entity_type_id.upper(), False)

    def is_disallowed(self, entity_type_id: str) -> bool:
        return entity_type_id.upper() in self._disallowed
