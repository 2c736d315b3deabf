"""Pytest configuration and fixtures for island-limits tests."""

import pytest
from typing import Dict, List, Optional, Sequence, Tuple
from unittest.mock import MagicMock
from uuid import uuid4

from island_limits.config.settings import LimitsSettings
from island_limits.core.value_objects import IslandId, OccupantId, WorldName
from island_limits.features.grants import GrantParser, StaticResourceResolver
from island_limits.features.limits import InMemoryOverrideStore, LimitMerger
from island_limits.features.lifecycle import (
    EventHandlerRegistry, GameMode, Island, LimitsLifecycleController, Occupant
)


class FakeCapabilityProvider:
    """Capability provider returning fixed capability lists per occupant."""

    def __init__(self):
        self.capabilities: Dict[OccupantId, List[str]] = {}
        self.calls: List[OccupantId] = []

    def list_effective_capabilities(self, occupant_id: OccupantId) -> Sequence[str]:
        self.calls.append(occupant_id)
        return list(self.capabilities.get(occupant_id, []))


class FakeConnectivity:
    """Connectivity resolver backed by a dict of online occupants."""

    def __init__(self):
        self.online: Dict[OccupantId, Occupant] = {}

    def connect(self, occupant: Occupant) -> None:
        self.online[occupant.occupant_id] = occupant

    def disconnect(self, occupant_id: OccupantId) -> None:
        self.online.pop(occupant_id, None)

    def is_connected(self, occupant_id: OccupantId) -> bool:
        return occupant_id in self.online

    def current_identity(self, occupant_id: OccupantId) -> Optional[Occupant]:
        return self.online.get(occupant_id)


class FakeGameModes:
    """Game mode registry over a fixed list of game modes."""

    def __init__(self, *game_modes: GameMode):
        self.modes: List[GameMode] = list(game_modes)

    def game_modes(self) -> Sequence[GameMode]:
        return list(self.modes)

    def game_mode_for_world(self, world: WorldName) -> Optional[GameMode]:
        for game_mode in self.modes:
            if game_mode.overworld == world:
                return game_mode
        return None


class FakeIslandDirectory:
    """Island directory keyed by (world, occupant)."""

    def __init__(self):
        self.islands: Dict[Tuple[WorldName, OccupantId], Island] = {}

    def add_member(self, island: Island, occupant_id: OccupantId) -> None:
        self.islands[(island.world, occupant_id)] = island

    def get_island(self, world: WorldName, occupant_id: OccupantId) -> Optional[Island]:
        return self.islands.get((world, occupant_id))


@pytest.fixture
def settings():
    """Grammar settings with defaults."""
    return LimitsSettings()


@pytest.fixture
def resolver():
    """Resource resolver with a small block and entity catalog."""
    return StaticResourceResolver(
        blocks=["STONE", "HOPPER", "DIRT"],
        entities={
            "COW": True,
            "ZOMBIE": True,
            "WITHER": True,
            "ENDER_DRAGON": False,
            "PAINTING": False,
            "ITEM_FRAME": False,
        },
        disallowed_entities=["WITHER"]
    )


@pytest.fixture
def diagnostics():
    """Mock diagnostics sink."""
    return MagicMock()


@pytest.fixture
def parser(resolver, diagnostics, settings):
    """Grant parser reporting to the mock diagnostics sink."""
    return GrantParser(resolver, diagnostics=diagnostics, settings=settings)


@pytest.fixture
def merger():
    return LimitMerger()


@pytest.fixture
def store():
    return InMemoryOverrideStore()


@pytest.fixture
def capabilities():
    return FakeCapabilityProvider()


@pytest.fixture
def connectivity():
    return FakeConnectivity()


@pytest.fixture
def world():
    return WorldName("bskyblock_world")


@pytest.fixture
def game_mode(world):
    return GameMode(name="BSkyBlock", permission_prefix="prefix.", overworld=world)


@pytest.fixture
def game_modes(game_mode):
    return FakeGameModes(game_mode)


@pytest.fixture
def islands():
    return FakeIslandDirectory()


@pytest.fixture
def owner():
    return Occupant(OccupantId(uuid4()), "tastybento")


@pytest.fixture
def other_occupant():
    return Occupant(OccupantId(uuid4()), "poslovitch")


@pytest.fixture
def island(world, owner):
    return Island(IslandId("island-1"), world, owner.occupant_id)


@pytest.fixture
def controller(store, capabilities, connectivity, game_modes, islands, parser, settings):
    """Lifecycle controller wired to the fake collaborators."""
    return LimitsLifecycleController(
        store=store,
        capabilities=capabilities,
        connectivity=connectivity,
        game_modes=game_modes,
        islands=islands,
        parser=parser,
        settings=settings
    )


@pytest.fixture
def registry(controller):
    """Event registry with the controller's handlers subscribed."""
    events = EventHandlerRegistry()
    controller.register(events)
    return events
