"""Configuration module for island-limits.

Constants, environment-driven settings and logging configuration.
"""

from .constants import (
    PermissionGrammar,
    EntityTypes,
    ResourceCategory,
    RejectionReason,
    IslandEventReason,
    RECOMPUTE_REASONS,
)

from .settings import LimitsSettings, get_settings

from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "PermissionGrammar",
    "EntityTypes",
    "ResourceCategory",
    "RejectionReason",
    "IslandEventReason",
    "RECOMPUTE_REASONS",

    # Settings
    "LimitsSettings",
    "get_settings",

    # Logging
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
