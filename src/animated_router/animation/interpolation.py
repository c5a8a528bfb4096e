"""Interpolation engine for animated transition values.

An Interpolation owns one animated quantity (a scalar such as opacity, or a
whole Transform) and advances it toward a target under a motion model:

    Tween   value = start + (target - start) * easing(elapsed / duration)
    Spring  a = (-k * (x - target) - c * v) / m, semi-implicit Euler

Values are kept as numpy vectors internally so scalars and transforms share
one code path. Springs are considered at rest once every component is within
REST_DISPLACEMENT of the target and slower than REST_VELOCITY.
"""

from typing import Optional
import logging
import math

import numpy as np
from numpy.typing import NDArray

from animated_router.animation.motion import MotionModel, Spring, Tween
from animated_router.animation.transform import Transform

logger = logging.getLogger(__name__)

Value = float | Transform

REST_DISPLACEMENT = 0.01
REST_VELOCITY = 0.05  # units per second

# Longest single integration step; longer frames are split into sub-steps
MAX_SPRING_STEP_MS = 1000.0 / 60.0


class Interpolation:
    """A single animated value.

    Usage:
        opacity = Interpolation(1.0, name="from_opacity")
        opacity.start(1.0, 0.0, Tween(duration_ms=300))
        while opacity.is_running:
            value = opacity.tick(16.7)
    """

    def __init__(self, initial: Value = 0.0, name: str = ""):
        self.name = name
        self._is_transform = isinstance(initial, Transform)
        self._origin_is_transform = self._is_transform
        self._origin: NDArray[np.float64] = self._to_vector(initial)
        self._start = self._origin.copy()
        self._current = self._origin.copy()
        self._target = self._origin.copy()
        self._velocity = np.zeros_like(self._origin)
        self._model: Optional[MotionModel] = None
        self._elapsed_ms = 0.0
        self._running = False

    # Control
    def start(self, initial: Value, target: Value, model: MotionModel) -> "Interpolation":
        """Begin moving from initial toward target, discarding prior progress.

        Args:
            initial: Starting value (float or Transform)
            target: Value to arrive at; must be the same kind as initial
            model: Tween or Spring driving the motion

        Returns:
            Self for method chaining
        """
        if isinstance(initial, Transform) != isinstance(target, Transform):
            raise TypeError(
                f"Cannot interpolate between {type(initial).__name__} and {type(target).__name__}"
            )

        self._is_transform = isinstance(initial, Transform)
        self._start = self._to_vector(initial)
        self._current = self._start.copy()
        self._target = self._to_vector(target)
        self._velocity = np.zeros_like(self._start)
        self._model = model
        self._elapsed_ms = 0.0
        self._running = True

        if isinstance(model, Spring):
            self._velocity = self._launch_velocity(model)

        logger.debug(f"Interpolation started: {self.name or 'anonymous'} ({type(model).__name__})")
        return self

    def animate_to(self, target: Value, model: MotionModel) -> "Interpolation":
        """Start from wherever the value currently is."""
        return self.start(self.value, target, model)

    def tick(self, delta_ms: float) -> Value:
        """Advance by delta_ms milliseconds and return the new value.

        Once the motion has finished this keeps returning the target exactly.
        """
        if not self._running or self._model is None:
            return self.value

        delta_ms = max(0.0, delta_ms)
        if math.isinf(delta_ms):
            # Unbounded frame: every model has arrived
            return self.finish()
        self._elapsed_ms += delta_ms

        if isinstance(self._model, Tween):
            self._step_tween(self._model)
        else:
            self._step_spring(self._model, delta_ms)

        return self.value

    def finish(self) -> Value:
        """Jump straight to the target and stop."""
        self._current = self._target.copy()
        self._velocity = np.zeros_like(self._current)
        self._running = False
        return self.value

    def reset(self) -> None:
        """Return to the value given at construction and stop."""
        self._is_transform = self._origin_is_transform
        self._start = self._origin.copy()
        self._current = self._origin.copy()
        self._target = self._origin.copy()
        self._velocity = np.zeros_like(self._origin)
        self._elapsed_ms = 0.0
        self._running = False

    # State
    @property
    def value(self) -> Value:
        """Current value, same kind as the last start value."""
        return self._from_vector(self._current)

    @property
    def target(self) -> Value:
        return self._from_vector(self._target)

    @property
    def velocity(self) -> Value:
        """Current velocity in units per second (zero for tweens)."""
        return self._from_vector(self._velocity)

    @property
    def is_running(self) -> bool:
        """True until the motion model reports completion."""
        return self._running

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def model(self) -> Optional[MotionModel]:
        return self._model

    # Motion models
    def _step_tween(self, model: Tween) -> None:
        if model.duration_ms <= 0 or self._elapsed_ms >= model.duration_ms:
            self._current = self._target.copy()
            self._running = False
            return

        t = self._elapsed_ms / model.duration_ms
        eased = model.easing_func(t)
        self._current = self._start + (self._target - self._start) * eased

    def _step_spring(self, model: Spring, delta_ms: float) -> None:
        steps = max(1, math.ceil(delta_ms / MAX_SPRING_STEP_MS - 1e-9))
        dt = delta_ms / 1000.0 / steps

        for _ in range(steps):
            displacement = self._current - self._target
            force = -model.stiffness * displacement - model.damping * self._velocity
            # Semi-implicit Euler: velocity first, then position with the new velocity
            self._velocity = self._velocity + (force / model.mass) * dt
            self._current = self._current + self._velocity * dt

            if self._at_rest():
                self._current = self._target.copy()
                self._velocity = np.zeros_like(self._current)
                self._running = False
                return

    def _at_rest(self) -> bool:
        return bool(
            np.all(np.abs(self._current - self._target) < REST_DISPLACEMENT)
            and np.all(np.abs(self._velocity) < REST_VELOCITY)
        )

    def _launch_velocity(self, model: Spring) -> NDArray[np.float64]:
        """Initial velocity vector: model.velocity along the direction of travel."""
        direction = self._target - self._start
        distance = float(np.linalg.norm(direction))
        if distance == 0.0 or model.velocity == 0.0:
            return np.zeros_like(self._start)
        return direction / distance * model.velocity

    # Conversion
    @staticmethod
    def _to_vector(value: Value) -> NDArray[np.float64]:
        if isinstance(value, Transform):
            return value.to_array()
        return np.array([float(value)], dtype=np.float64)

    def _from_vector(self, vector: NDArray[np.float64]) -> Value:
        if self._is_transform:
            return Transform.from_array(vector)
        return float(vector[0])

    def __repr__(self) -> str:
        state = "running" if self._running else "idle"
        return f"Interpolation({self.name!r}, {state}, value={self.value!r})"
