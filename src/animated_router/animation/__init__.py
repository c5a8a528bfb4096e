"""Animation module for animated_router."""

from animated_router.animation.easing import Easing, get_easing, interpolate
from animated_router.animation.transform import Transform
from animated_router.animation.motion import MotionModel, Spring, SpringPresets, Tween
from animated_router.animation.interpolation import Interpolation

__all__ = [
    # Easing
    "Easing",
    "get_easing",
    "interpolate",
    # Values
    "Transform",
    # Motion models
    "MotionModel",
    "Tween",
    "Spring",
    "SpringPresets",
    # Engine
    "Interpolation",
]
