"""Event handler registry.

Synchronous, in-process event source. Events are dispatched one at a time
and each handler runs to completion before the next one starts.
"""

import logging
from typing import Any, Dict, List, Type

from ..entities.protocols import EventHandler


logger = logging.getLogger(__name__)


class EventHandlerRegistry:
    """Registry mapping event record types to their handlers."""

    def __init__(self):
        self._handlers: Dict[Type[Any], List[EventHandler]] = {}

    def subscribe(self, event_type: Type[Any], handler: EventHandler) -> None:
        """Register ``handler`` for ``event_type`` and its subclasses."""
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(
                f"Subscribed {getattr(handler, '__qualname__', handler)!s} to {event_type.__name__}"
            )

    def unsubscribe(self, event_type: Type[Any], handler: EventHandler) -> bool:
        """Remove a handler; returns True if it was registered."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def handlers_for(self, event: Any) -> List[EventHandler]:
        """Get handlers for an event in subscription order, most specific type first."""
        matched: List[EventHandler] = []
        for event_type in type(event).__mro__:
            for handler in self._handlers.get(event_type, []):
                if handler not in matched:
                    matched.append(handler)
        return matched

    def dispatch(self, event: Any) -> int:
        """Deliver an event to its handlers.

        A failing handler is logged and skipped so the remaining handlers
        still run.

        Returns:
            Number of handlers that completed without raising
        """
        completed = 0
        for handler in self.handlers_for(event):
            try:
                handler(event)
                completed += 1
            except Exception:
                logger.exception(
                    f"Handler {getattr(handler, '__qualname__', handler)!s} failed for {type(event).__name__}",
                    extra={"event_type": type(event).__name__}
                )
        return completed
