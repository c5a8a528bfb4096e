"""
Navigation state machine for animated route transitions.

States:
    Settled(route): the outlet renders a single route, nothing is animating
    Transitioning(from_route, to_route): the outlet renders both routes while
        the departing layer animates out and the arriving layer animates in

Flow:
    Settled(A) --set_target_route(B)--> Transitioning(A, B)
    Transitioning(A, B) --set_target_route(C)--> Transitioning(B, C)
    Transitioning(A, B) --settle()--> Settled(B)
"""

from dataclasses import dataclass
from collections.abc import Hashable
from typing import Callable
import logging

logger = logging.getLogger(__name__)

RouteId = Hashable


@dataclass(frozen=True)
class Settled:
    """Resting in a single route."""
    route: RouteId

    @property
    def target_route(self) -> RouteId:
        return self.route


@dataclass(frozen=True)
class Transitioning:
    """Animating from one route to another."""
    from_route: RouteId
    to_route: RouteId

    @property
    def target_route(self) -> RouteId:
        return self.to_route


NavigationState = Settled | Transitioning

StateListener = Callable[[NavigationState, NavigationState], None]


class NavigationStateMachine:
    """
    Holds the navigation state of one animated outlet.

    The state is replaced (never mutated in place) on every change, so
    listeners and renderers can keep references to old states safely.
    """

    def __init__(self, initial_route: RouteId) -> None:
        self._initial_route = initial_route
        self._state: NavigationState = Settled(initial_route)
        self._listeners: list[StateListener] = []
        logger.info(f"NavigationStateMachine initialized in route: {initial_route}")

    @property
    def state(self) -> NavigationState:
        """Get current state."""
        return self._state

    @property
    def is_transitioning(self) -> bool:
        return isinstance(self._state, Transitioning)

    def target_route(self) -> RouteId:
        """The destination route: to_route while transitioning, else the settled route."""
        return self._state.target_route

    def set_target_route(self, route: RouteId) -> bool:
        """
        Request navigation to a route.

        From Settled(old) this starts Transitioning(old, route). While already
        transitioning, the previous destination becomes the departure point:
        Transitioning(_, old_to) becomes Transitioning(old_to, route).

        Args:
            route: Destination route

        Returns:
            True if the state changed, False if route was already the target
        """
        current = self._state

        if route == current.target_route:
            return False

        if isinstance(current, Settled):
            self._set_state(Transitioning(current.route, route))
        else:
            logger.info(f"Re-targeting transition: {current.to_route} -> {route}")
            self._set_state(Transitioning(current.to_route, route))
        return True

    def settle(self) -> bool:
        """
        Collapse an in-flight transition into its destination.

        Returns:
            True if the state changed, False if already settled
        """
        current = self._state
        if isinstance(current, Transitioning):
            self._set_state(Settled(current.to_route))
            return True
        return False

    def reset(self, route: RouteId | None = None) -> None:
        """Force Settled(route), defaulting to the initial route."""
        target = self._initial_route if route is None else route
        self._set_state(Settled(target))
        logger.info(f"NavigationStateMachine reset to {target}")

    def _set_state(self, new_state: NavigationState) -> None:
        old_state = self._state
        self._state = new_state

        logger.info(f"Navigation state: {old_state} -> {new_state}")

        # Notify listeners
        for listener in list(self._listeners):
            try:
                listener(old_state, new_state)
            except Exception as e:
                logger.error(f"Error in navigation state listener: {e}")

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
