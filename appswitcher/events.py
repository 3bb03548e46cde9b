"""Refresh notifications from the switcher service to display surfaces."""
from enum import Enum
from typing import Callable, Any, Dict, List, TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .models import UsageRecord


class Event(Enum):
    """Switcher-wide events."""
    SWITCHER_LOADED = "switcher_loaded"
    SWITCHER_UPDATED = "switcher_updated"


class EventContext:
    """Base context for event handlers."""
    pass


class SwitcherUpdatedContext(EventContext):
    """Context passed to SWITCHER_LOADED and SWITCHER_UPDATED handlers."""
    def __init__(
        self,
        most_used: List['UsageRecord'],
        recent: List['UsageRecord'],
        reason: str = ''
    ) -> None:
        self.most_used = most_used
        self.recent = recent
        self.reason = reason


ContextT = TypeVar('ContextT', bound=EventContext)


class EventBus:
    """Central event dispatcher."""

    def __init__(self) -> None:
        # Store handlers with Any type to allow different context subtypes
        self._handlers: Dict[Event, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        """Subscribe to an event with a typed handler."""
        if event not in self._handlers:
            self._handlers[event] = []
        self._handlers[event].append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)  # type: ignore[arg-type]

    def emit(self, event: Event, context: EventContext) -> None:
        """Emit an event to all subscribers."""
        for handler in self._handlers.get(event, []):
            try:
                handler(context)
            except Exception as e:
                print(f"Event handler error ({event.value}): {e}")
