"""Lifecycle controller for permission-based island limits.

Decides, for each island lifecycle event, whose capabilities to merge into
which island's override record and when a record must be cleared.
"""

import logging
from typing import Optional

from ....config.settings import LimitsSettings, get_settings
from ....core.value_objects import IslandId, OccupantId
from ...grants.services import GrantParser
from ...limits.entities import OverrideRecord, OverrideStore
from ...limits.services import LimitMerger
from ..entities import (
    Island, IslandEvent, OwnershipTransferred, OccupantJoined, Occupant,
    EventSource, CapabilityProvider, ConnectivityResolver,
    GameModeRegistry, IslandDirectory
)


logger = logging.getLogger(__name__)


class LimitsLifecycleController:
    """Recomputes and clears island override records on lifecycle events.

    Holds no state of its own; everything is read from and written to the
    injected collaborators. Handlers assume events are dispatched one at a
    time, since a recompute is a read-modify-write on the override store.
    """

    def __init__(
        self,
        store: OverrideStore,
        capabilities: CapabilityProvider,
        connectivity: ConnectivityResolver,
        game_modes: GameModeRegistry,
        islands: IslandDirectory,
        parser: GrantParser,
        merger: Optional[LimitMerger] = None,
        settings: Optional[LimitsSettings] = None
    ):
        self._store = store
        self._capabilities = capabilities
        self._connectivity = connectivity
        self._game_modes = game_modes
        self._islands = islands
        self._parser = parser
        self._merger = merger or LimitMerger()
        self._settings = settings or get_settings()

    def register(self, events: EventSource) -> None:
        """Subscribe every handler on an event source."""
        events.subscribe(IslandEvent, self.on_new_island)
        events.subscribe(IslandEvent, self.on_island_unregistered)
        events.subscribe(OwnershipTransferred, self.on_owner_change)
        events.subscribe(OccupantJoined, self.on_occupant_join)

    # Event handlers

    def on_new_island(self, event: IslandEvent) -> None:
        """Island created, reset or registered: apply the owner's limits."""
        if not event.requires_recompute():
            return
        self._set_owner_limits(event.island, event.effective_owner_id)

    def on_owner_change(self, event: OwnershipTransferred) -> None:
        """Ownership moved: drop the old owner's limits, apply the new owner's."""
        self._clear_owner_limits(event.island)
        self._set_owner_limits(event.island, event.new_owner_id)

    def on_island_unregistered(self, event: IslandEvent) -> None:
        """Island unregistered: drop its limits."""
        if not event.is_unregistration():
            return
        self._clear_owner_limits(event.island)

    def on_occupant_join(self, event: OccupantJoined) -> None:
        """Occupant connected: apply their limits to their island in every game mode."""
        occupant = self._connectivity.current_identity(event.occupant_id)
        if occupant is None:
            logger.debug(f"Joined occupant {event.occupant_id} could not be resolved, skipping")
            return

        for game_mode in self._game_modes.game_modes():
            island = self._islands.get_island(game_mode.overworld, event.occupant_id)
            if island is None:
                continue
            if not game_mode.is_configured():
                logger.debug(f"Game mode '{game_mode.name}' has no permission prefix, skipping")
                continue
            self.recompute(
                occupant,
                self._settings.build_prefix(game_mode.permission_prefix),
                island.island_id,
                game_mode.name
            )

    # Operations

    def recompute(
        self,
        occupant: Occupant,
        prefix: str,
        island_id: IslandId,
        game_mode: str
    ) -> bool:
        """Merge an occupant's current capabilities into an island's record.

        Returns:
            True if the record changed and was written back
        """
        record = self._store.get(island_id)
        if record is None:
            record = OverrideRecord(island_id=island_id, game_mode=game_mode)

        capabilities = self._capabilities.list_effective_capabilities(occupant.occupant_id) or ()
        grants = self._parser.parse_all(capabilities, prefix, occupant.name)
        result = self._merger.merge(record, grants)

        if not result.changed:
            return False

        self._store.set(island_id, result.record)
        logger.info(
            f"Updated limits for island {island_id} from {occupant.name}'s permissions",
            extra={
                "island_id": str(island_id),
                "occupant_id": str(occupant.occupant_id),
                "game_mode": game_mode,
                "changed": len(result.changed_kinds)
            }
        )
        return True

    def clear(self, island_id: IslandId) -> bool:
        """Empty an island's stored limits; the record itself is kept.

        Returns:
            True if a non-empty record was cleared
        """
        record = self._store.get(island_id)
        if record is None or record.is_empty():
            return False

        record.clear_limits()
        self._store.set(island_id, record)
        logger.info(f"Cleared limits for island {island_id}", extra={"island_id": str(island_id)})
        return True

    # Helpers

    def _clear_owner_limits(self, island: Island) -> bool:
        if self._game_modes.game_mode_for_world(island.world) is None:
            return False
        return self.clear(island.island_id)

    def _set_owner_limits(self, island: Island, owner_id: Optional[OccupantId]) -> bool:
        game_mode = self._game_modes.game_mode_for_world(island.world)
        if game_mode is None or owner_id is None:
            return False

        if not self._connectivity.is_connected(owner_id):
            logger.debug(f"Owner {owner_id} of island {island.island_id} is offline, skipping")
            return False
        owner = self._connectivity.current_identity(owner_id)
        if owner is None:
            return False

        if not game_mode.is_configured():
            logger.debug(f"Game mode '{game_mode.name}' has no permission prefix, skipping")
            return False

        return self.recompute(
            owner,
            self._settings.build_prefix(game_mode.permission_prefix),
            island.island_id,
            game_mode.name
        )


# Factory function for dependency injection
def create_lifecycle_controller(
    store: OverrideStore,
    capabilities: CapabilityProvider,
    connectivity: ConnectivityResolver,
    game_modes: GameModeRegistry,
    islands: IslandDirectory,
    parser: GrantParser,
    events: Optional[EventSource] = None,
    settings: Optional[LimitsSettings] = None
) -> LimitsLifecycleController:
    """Create lifecycle controller, registering it on ``events`` when given."""
    controller = LimitsLifecycleController(
        store=store,
        capabilities=capabilities,
        connectivity=connectivity,
        game_modes=game_modes,
        islands=islands,
        parser=parser,
        settings=settings
    )
    if events is not None:
        controller.register(events)
    return controller
