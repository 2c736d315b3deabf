"""Lifecycle services package."""

from .event_handler_registry import EventHandlerRegistry
from .lifecycle_controller import LimitsLifecycleController, create_lifecycle_controller

__all__ = [
    "EventHandlerRegistry",
    "LimitsLifecycleController",
    "create_lifecycle_controller",
]
