"""Island-Limits - permission-driven island limit overrides.

This library turns limit capabilities held by occupants into per-island
block and entity limit overrides, and keeps those overrides in step with
island lifecycle events.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    LimitsSettings,
    get_settings,
    PermissionGrammar,
    EntityTypes,
    ResourceCategory,
    RejectionReason,
    IslandEventReason,
)

from .core import (
    # Exceptions
    IslandLimitsError,
    ValidationError,
    InvalidIdentifierError,
    InvalidLimitError,
    RecordFormatError,
    OverrideStoreError,

    # Value Objects
    IslandId,
    OccupantId,
    WorldName,
    ResourceKind,
    BlockKind,
    EntityKind,
)

from .features.grants import (
    Grant,
    RejectedGrant,
    ResourceResolver,
    DiagnosticsSink,
    GrantParser,
    StaticResourceResolver,
    LoggingDiagnosticsSink,
)

from .features.limits import (
    OverrideRecord,
    OverrideStore,
    LimitMerger,
    MergeResult,
    InMemoryOverrideStore,
)

from .features.lifecycle import (
    Occupant,
    Island,
    GameMode,
    IslandEvent,
    OwnershipTransferred,
    OccupantJoined,
    EventSource,
    CapabilityProvider,
    ConnectivityResolver,
    GameModeRegistry,
    IslandDirectory,
    EventHandlerRegistry,
    LimitsLifecycleController,
    create_lifecycle_controller,
)

__all__ = [
    "__version__",

    # Configuration
    "LimitsSettings",
    "get_settings",
    "PermissionGrammar",
    "EntityTypes",
    "ResourceCategory",
    "RejectionReason",
    "IslandEventReason",

    # Exceptions
    "IslandLimitsError",
    "ValidationError",
    "InvalidIdentifierError",
    "InvalidLimitError",
    "RecordFormatError",
    "OverrideStoreError",

    # Value Objects
    "IslandId",
    "OccupantId",
    "WorldName",
    "ResourceKind",
    "BlockKind",
    "EntityKind",

    # Grants
    "Grant",
    "RejectedGrant",
    "ResourceResolver",
    "DiagnosticsSink",
    "GrantParser",
    "StaticResourceResolver",
    "LoggingDiagnosticsSink",

    # Limits
    "OverrideRecord",
    "OverrideStore",
    "LimitMerger",
    "MergeResult",
    "InMemoryOverrideStore",

    # Lifecycle
    "Occupant",
    "Island",
    "GameMode",
    "IslandEvent",
    "OwnershipTransferred",
    "OccupantJoined",
    "EventSource",
    "CapabilityProvider",
    "ConnectivityResolver",
    "GameModeRegistry",
    "IslandDirectory",
    "EventHandlerRegistry",
    "LimitsLifecycleController",
    "create_lifecycle_controller",
]
