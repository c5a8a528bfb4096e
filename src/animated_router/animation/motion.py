"""Motion models: how an interpolation moves from its start to its target."""

from dataclasses import dataclass
import math

from animated_router.animation.easing import DEFAULT_EASING, Easing, EasingFunc, get_easing


@dataclass(frozen=True)
class Tween:
    """Duration-based motion along an easing curve.

    Attributes:
        duration_ms: Total duration in milliseconds
        easing: Easing enum, name or normalized callable
    """

    duration_ms: float = 500.0
    easing: Easing | str | EasingFunc = DEFAULT_EASING

    def __post_init__(self):
        # Resolve early so a bad name fails at construction, not mid-frame
        get_easing(self.easing)

    @property
    def easing_func(self) -> EasingFunc:
        return get_easing(self.easing)


@dataclass(frozen=True)
class Spring:
    """Mass-spring-damper motion.

    Attributes:
        stiffness: Spring constant k
        damping: Damping coefficient c. Zero never settles.
        mass: Mass m
        velocity: Initial speed along the direction of travel, units/second
    """

    stiffness: float = 160.0
    damping: float = 20.0
    mass: float = 1.5
    velocity: float = 0.0

    @classmethod
    def critically_damped(cls, stiffness: float = 170.0, mass: float = 1.0, velocity: float = 0.0) -> "Spring":
        """Spring that returns to rest as fast as possible without overshoot."""
        return cls(
            stiffness=stiffness,
            damping=2.0 * math.sqrt(stiffness * mass),
            mass=mass,
            velocity=velocity,
        )

    @property
    def damping_ratio(self) -> float:
        """zeta = c / (2 * sqrt(k * m)); < 1 oscillates, >= 1 does not."""
        if self.stiffness <= 0 or self.mass <= 0:
            return math.inf
        return self.damping / (2.0 * math.sqrt(self.stiffness * self.mass))

    @property
    def settles(self) -> bool:
        """False for configurations that oscillate forever or diverge."""
        return self.damping > 0 and self.stiffness > 0 and self.mass > 0


MotionModel = Tween | Spring


class SpringPresets:
    """Factory for common spring configurations."""

    @staticmethod
    def page() -> Spring:
        """Weighted, slightly bouncy handoff between pages."""
        return Spring(stiffness=160.0, damping=20.0, mass=1.5, velocity=10.0)

    @staticmethod
    def gentle() -> Spring:
        """Soft, slow settle for large surfaces."""
        return Spring(stiffness=120.0, damping=22.0, mass=1.0)

    @staticmethod
    def snappy() -> Spring:
        """Quick, firm response for small offsets."""
        return Spring(stiffness=300.0, damping=30.0, mass=1.0)

    @staticmethod
    def critical() -> Spring:
        """No overshoot at all."""
        return Spring.critically_damped()
