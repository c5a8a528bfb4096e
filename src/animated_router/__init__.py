"""Animated route transitions: navigation state, transition policy and motion."""

from animated_router.animation import Interpolation, Spring, Transform, Tween
from animated_router.core import NavigationStateMachine, Settled, Transitioning
from animated_router.transitions import (
    PassThrough,
    TransitionFrame,
    TransitionOrchestrator,
    TransitionPolicy,
    TransitionVariant,
    variant_to_config,
)

__version__ = "0.1.0"

__all__ = [
    "Interpolation",
    "Spring",
    "Transform",
    "Tween",
    "NavigationStateMachine",
    "Settled",
    "Transitioning",
    "PassThrough",
    "TransitionFrame",
    "TransitionOrchestrator",
    "TransitionPolicy",
    "TransitionVariant",
    "variant_to_config",
]
