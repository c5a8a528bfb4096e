"""Easing curves for tween-driven transitions.

Every curve maps a normalized time t (0.0 to 1.0) to a normalized progress.
Curves start at 0 and end at 1; the "back" family briefly leaves [0, 1].
"""

from enum import Enum
from typing import Callable
import math


# Type alias for easing functions
EasingFunc = Callable[[float], float]


class Easing(Enum):
    """Named easing curves. The value is the lookup name used in settings."""

    LINEAR = "linear"

    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_IN_OUT_QUAD = "ease_in_out_quad"

    EASE_IN_CUBIC = "ease_in_cubic"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_IN_OUT_CUBIC = "ease_in_out_cubic"

    EASE_IN_QUART = "ease_in_quart"
    EASE_OUT_QUART = "ease_out_quart"
    EASE_IN_OUT_QUART = "ease_in_out_quart"

    EASE_IN_SINE = "ease_in_sine"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_IN_OUT_SINE = "ease_in_out_sine"

    EASE_IN_EXPO = "ease_in_expo"
    EASE_OUT_EXPO = "ease_out_expo"
    EASE_IN_OUT_EXPO = "ease_in_out_expo"

    EASE_IN_BACK = "ease_in_back"
    EASE_OUT_BACK = "ease_out_back"
    EASE_IN_OUT_BACK = "ease_in_out_back"


DEFAULT_EASING = Easing.EASE_IN_OUT_CUBIC


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - pow(-2 * t + 2, 2) / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - pow(1 - t, 3)


def ease_in_out_cubic(t: float) -> float:
    """Accelerate through the first half, decelerate through the second.

    This is the default curve for route transitions.
    """
    if t < 0.5:
        return 4 * t * t * t
    return 1 - pow(-2 * t + 2, 3) / 2


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    return 1 - pow(1 - t, 4)


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8 * t * t * t * t
    return 1 - pow(-2 * t + 2, 4) / 2


def ease_in_sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_expo(t: float) -> float:
    return 0.0 if t <= 0 else pow(2, 10 * t - 10)


def ease_out_expo(t: float) -> float:
    return 1.0 if t >= 1 else 1 - pow(2, -10 * t)


def ease_in_out_expo(t: float) -> float:
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    if t < 0.5:
        return pow(2, 20 * t - 10) / 2
    return (2 - pow(2, -20 * t + 10)) / 2


# Overshoot amount shared by the "back" family
_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1


def ease_in_back(t: float) -> float:
    """Pull back slightly before moving toward the target."""
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


def ease_out_back(t: float) -> float:
    """Overshoot the target slightly, then settle onto it."""
    return 1 + _BACK_C3 * pow(t - 1, 3) + _BACK_C1 * pow(t - 1, 2)


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        return (pow(2 * t, 2) * ((_BACK_C2 + 1) * 2 * t - _BACK_C2)) / 2
    return (pow(2 * t - 2, 2) * ((_BACK_C2 + 1) * (t * 2 - 2) + _BACK_C2) + 2) / 2


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,
    Easing.EASE_IN_QUAD: ease_in_quad,
    Easing.EASE_OUT_QUAD: ease_out_quad,
    Easing.EASE_IN_OUT_QUAD: ease_in_out_quad,
    Easing.EASE_IN_CUBIC: ease_in_cubic,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,
    Easing.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    Easing.EASE_IN_QUART: ease_in_quart,
    Easing.EASE_OUT_QUART: ease_out_quart,
    Easing.EASE_IN_OUT_QUART: ease_in_out_quart,
    Easing.EASE_IN_SINE: ease_in_sine,
    Easing.EASE_OUT_SINE: ease_out_sine,
    Easing.EASE_IN_OUT_SINE: ease_in_out_sine,
    Easing.EASE_IN_EXPO: ease_in_expo,
    Easing.EASE_OUT_EXPO: ease_out_expo,
    Easing.EASE_IN_OUT_EXPO: ease_in_out_expo,
    Easing.EASE_IN_BACK: ease_in_back,
    Easing.EASE_OUT_BACK: ease_out_back,
    Easing.EASE_IN_OUT_BACK: ease_in_out_back,
}


def get_easing(easing: Easing | str | EasingFunc) -> EasingFunc:
    """Resolve an easing curve.

    Args:
        easing: Easing enum value, its string name (e.g. "ease_out_cubic")
            or a callable taking and returning a normalized float

    Returns:
        The easing function

    Raises:
        ValueError: If a name is not recognized
    """
    if callable(easing):
        return easing

    if isinstance(easing, str):
        try:
            easing = Easing(easing.lower())
        except ValueError:
            raise ValueError(f"Unknown easing function: {easing}") from None

    return _EASING_FUNCTIONS[easing]


def from_penner(func: Callable[[float, float, float, float], float]) -> EasingFunc:
    """Adapt a Penner-style curve f(t, b, c, d) to the normalized form.

    Penner curves take elapsed time, start value, change and duration. With
    b=0, c=1, d=1 they return the same normalized progress used here.
    """
    def normalized(t: float) -> float:
        return func(t, 0.0, 1.0, 1.0)

    return normalized


def interpolate(start: float, end: float, t: float, easing: Easing | str | EasingFunc = Easing.LINEAR) -> float:
    """Interpolate between two values using an easing function.

    Args:
        start: Starting value
        end: Ending value
        t: Progress (0.0 to 1.0), clamped
        easing: Easing function to use

    Returns:
        Interpolated value
    """
    easing_func = get_easing(easing)
    eased_t = easing_func(max(0.0, min(1.0, t)))
    return start + (end - start) * eased_t
