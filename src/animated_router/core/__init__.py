"""Core framework components for animated_router."""

from .state import NavigationState, NavigationStateMachine, Settled, Transitioning
from .events import EventBus, Event, EventType

__all__ = [
    "NavigationState",
    "NavigationStateMachine",
    "Settled",
    "Transitioning",
    "EventBus",
    "Event",
    "EventType",
]
