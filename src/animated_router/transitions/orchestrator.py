"""Transition orchestrator: drives route transitions frame by frame.

Per tick, in order:
    1. apply queued navigation events to the state machine
    2. (re)start the layer interpolations if the target route changed
    3. advance every interpolation by the frame delta
    4. settle the state machine once nothing is running
    5. hand the resulting frame to the renderer callback
"""

from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional, TYPE_CHECKING
import logging

from animated_router.animation.interpolation import Interpolation
from animated_router.animation.motion import MotionModel, Spring
from animated_router.animation.transform import Transform
from animated_router.core.events import Event, EventBus, EventType
from animated_router.core.state import NavigationStateMachine, RouteId, Settled, Transitioning
from animated_router.transitions.policy import TransitionPolicy
from animated_router.transitions.variants import (
    DEFAULT_MOTION,
    TransitionConfig,
    TransitionVariant,
    variant_to_config,
)

if TYPE_CHECKING:
    from animated_router.config.settings import TransitionSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerState:
    """What the renderer needs to paint one route layer."""

    route: RouteId
    transform: Transform
    opacity: float


@dataclass(frozen=True)
class TransitionFrame:
    """Both layers of an in-flight transition."""

    from_layer: LayerState
    to_layer: LayerState
    variant: TransitionVariant
    elapsed_ms: float

    @property
    def from_route(self) -> RouteId:
        return self.from_layer.route

    @property
    def to_route(self) -> RouteId:
        return self.to_layer.route


@dataclass(frozen=True)
class PassThrough:
    """No transition: render the settled route alone, untransformed."""

    route: RouteId

    @property
    def layer(self) -> LayerState:
        return LayerState(self.route, Transform.identity(), 1.0)


Frame = TransitionFrame | PassThrough
FrameCallback = Callable[[Frame], None]


def _clamp_opacity(value: float) -> float:
    return max(0.0, min(1.0, value))


class TransitionOrchestrator:
    """Connects navigation state, transition policy and interpolation.

    The host loop calls tick() once per display frame. Route changes arrive
    through navigate() (or ROUTE_CHANGED events on the bus) and are applied
    at the start of the next tick, never in the middle of one.
    """

    def __init__(
        self,
        state_machine: NavigationStateMachine,
        policy: TransitionPolicy,
        motion: Optional[MotionModel] = None,
        event_bus: Optional[EventBus] = None,
        on_frame: Optional[FrameCallback] = None,
        max_transition_ms: Optional[float] = 3000.0,
    ):
        self.state_machine = state_machine
        self.policy = policy
        self.motion = motion or DEFAULT_MOTION
        self.event_bus = event_bus
        self.on_frame = on_frame
        self.max_transition_ms = max_transition_ms

        self._pending: deque[RouteId] = deque()

        # One interpolation per animated quantity
        self._from_transform = Interpolation(Transform.identity(), name="from_transform")
        self._to_transform = Interpolation(Transform.identity(), name="to_transform")
        self._from_opacity = Interpolation(1.0, name="from_opacity")
        self._to_opacity = Interpolation(1.0, name="to_opacity")
        self._channels = (
            self._from_transform,
            self._to_transform,
            self._from_opacity,
            self._to_opacity,
        )

        self._variant: Optional[TransitionVariant] = None
        self._config: Optional[TransitionConfig] = None
        self._animating = False
        self._elapsed_ms = 0.0
        self._settle_count = 0

        state = state_machine.state
        # A machine handed over mid-transition starts animating on the first tick
        self._observed_state = state if isinstance(state, Settled) else None
        self._frame: Frame = PassThrough(state_machine.target_route())

        self._subscriptions: list[Callable[[], None]] = []
        if event_bus is not None:
            self._subscriptions = [
                event_bus.subscribe(EventType.ROUTE_CHANGED, self._on_route_changed),
                event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown),
            ]

        logger.debug("TransitionOrchestrator initialized")

    @classmethod
    def from_settings(
        cls,
        state_machine: NavigationStateMachine,
        policy: TransitionPolicy,
        settings: "TransitionSettings",
        event_bus: Optional[EventBus] = None,
        on_frame: Optional[FrameCallback] = None,
    ) -> "TransitionOrchestrator":
        """Build an orchestrator using the configured motion and duration ceiling."""
        return cls(
            state_machine,
            policy,
            motion=settings.motion_model(),
            event_bus=event_bus,
            on_frame=on_frame,
            max_transition_ms=settings.max_transition_ms,
        )

    # Router side
    def navigate(self, route: RouteId) -> None:
        """Queue a route change; it takes effect at the next tick."""
        self._pending.append(route)

    def _on_route_changed(self, event: Event) -> None:
        route = event.data.get("route")
        if route is None:
            logger.warning(f"ROUTE_CHANGED event without a route from {event.source}")
            return
        self.navigate(route)

    def _on_shutdown(self, event: Event) -> None:
        logger.info(f"Shutdown requested by {event.source}, detaching from event bus")
        self.close()

    # Frame loop
    def tick(self, delta_ms: float) -> Frame:
        """Advance the transition by one frame.

        Args:
            delta_ms: Time elapsed since the previous frame in milliseconds

        Returns:
            The frame the renderer should paint
        """
        self._apply_navigation()
        self._sync_with_state()

        if self._animating:
            delta_ms = max(0.0, delta_ms)
            self._elapsed_ms += delta_ms
            for channel in self._channels:
                channel.tick(delta_ms)

            if not any(channel.is_running for channel in self._channels):
                self._complete(forced=False)
            elif self.max_transition_ms is not None and self._elapsed_ms >= self.max_transition_ms:
                logger.warning(
                    f"Transition {self._variant} exceeded {self.max_transition_ms:.0f}ms, forcing settle"
                )
                self._stop_channels()
                self._complete(forced=True)

        self._frame = self._build_frame()

        if self.on_frame:
            self.on_frame(self._frame)

        return self._frame

    def frame(self) -> Frame:
        """The most recent frame, without advancing time."""
        return self._frame

    def _apply_navigation(self) -> None:
        while self._pending:
            self.state_machine.set_target_route(self._pending.popleft())

    def _sync_with_state(self) -> None:
        state = self.state_machine.state

        if isinstance(state, Transitioning):
            # Compare whole states: C -> B after A -> B also needs a restart
            if state != self._observed_state:
                self._begin(state)
            return

        # Settled from outside (e.g. reset) while animating: drop the animation
        if self._animating:
            logger.debug(f"State settled externally in {state.route}, dropping animation")
            self._stop_channels()
            self._animating = False
        self._observed_state = state

    def _begin(self, state: Transitioning) -> None:
        retarget = self._animating
        variant = self.policy.resolve(state.from_route, state.to_route)
        config = variant_to_config(variant, self.motion)

        if isinstance(config.motion, Spring) and not config.motion.settles:
            logger.warning(
                f"Spring {config.motion} never comes to rest; relying on max_transition_ms"
            )

        from_transform, from_opacity = config.initial_from, config.opacity_from[0]
        previous = self._observed_state
        if retarget and isinstance(previous, Transitioning) and previous.to_route == state.from_route:
            # The departing layer was the arriving one: leave it where it is on screen
            from_transform = self._to_transform.value
            from_opacity = _clamp_opacity(self._to_opacity.value)

        # Fresh start for every channel; progress toward a stale target is discarded
        self._from_transform.start(from_transform, config.final_from, config.motion)
        self._from_opacity.start(from_opacity, config.opacity_from[1], config.motion)
        self._to_transform.start(config.initial_to, config.final_to, config.motion)
        self._to_opacity.start(config.opacity_to[0], config.opacity_to[1], config.motion)

        self._variant = variant
        self._config = config
        self._animating = True
        self._elapsed_ms = 0.0
        self._observed_state = state

        event_type = EventType.TRANSITION_RETARGETED if retarget else EventType.TRANSITION_STARTED
        logger.info(
            f"Transition {'re-targeted' if retarget else 'started'}: "
            f"{state.from_route} -> {state.to_route} ({variant})"
        )
        self._emit(event_type, {
            "from_route": state.from_route,
            "to_route": state.to_route,
            "variant": variant,
        })

    def _complete(self, forced: bool) -> None:
        self._animating = False
        route = self.state_machine.target_route()
        self.state_machine.settle()
        self._settle_count += 1

        logger.info(f"Transition settled in {route} after {self._elapsed_ms:.0f}ms")
        self._emit(EventType.TRANSITION_SETTLED, {
            "route": route,
            "variant": self._variant,
            "elapsed_ms": self._elapsed_ms,
            "forced": forced,
        })

    def _stop_channels(self) -> None:
        for channel in self._channels:
            channel.finish()

    def _build_frame(self) -> Frame:
        state = self.state_machine.state
        if not self._animating or not isinstance(state, Transitioning):
            return PassThrough(state.target_route)

        return TransitionFrame(
            from_layer=LayerState(
                state.from_route,
                self._from_transform.value,
                _clamp_opacity(self._from_opacity.value),
            ),
            to_layer=LayerState(
                state.to_route,
                self._to_transform.value,
                _clamp_opacity(self._to_opacity.value),
            ),
            variant=self._variant,
            elapsed_ms=self._elapsed_ms,
        )

    def _emit(self, event_type: EventType, data: dict) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data, source="orchestrator"))

    # State
    @property
    def is_animating(self) -> bool:
        return self._animating

    @property
    def variant(self) -> Optional[TransitionVariant]:
        """Variant of the current (or last) transition."""
        return self._variant

    @property
    def config(self) -> Optional[TransitionConfig]:
        return self._config

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def settle_count(self) -> int:
        """How many transitions have completed."""
        return self._settle_count

    @property
    def pending_navigation(self) -> int:
        return len(self._pending)

    def close(self) -> None:
        """Detach from the event bus."""
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []
