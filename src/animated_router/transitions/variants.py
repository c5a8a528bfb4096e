"""Transition variants and their endpoint table.

Offsets are in percent of the viewport. Each variant describes where the
departing ("from") layer and the arriving ("to") layer start and end, along
with their opacity endpoints.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Optional

from animated_router.animation.motion import MotionModel, Tween
from animated_router.animation.transform import Transform


class VariantKind(Enum):
    """Families of visual treatment."""

    SLIDE_LEFT = "slide_left"
    SLIDE_RIGHT = "slide_right"
    SLIDE_UP = "slide_up"
    SLIDE_DOWN = "slide_down"
    FADE = "fade"
    SCALE = "scale"
    CUSTOM = "custom"


_RECIPROCAL_KINDS = {
    VariantKind.SLIDE_LEFT: VariantKind.SLIDE_RIGHT,
    VariantKind.SLIDE_RIGHT: VariantKind.SLIDE_LEFT,
    VariantKind.SLIDE_UP: VariantKind.SLIDE_DOWN,
    VariantKind.SLIDE_DOWN: VariantKind.SLIDE_UP,
}


@dataclass(frozen=True)
class TransitionVariant:
    """The visual treatment of one transition.

    Built-in variants are available as class constants
    (TransitionVariant.SLIDE_LEFT, ...). Custom variants carry the transform
    the departing layer animates to.
    """

    kind: VariantKind
    transform: Optional[Transform] = None

    @classmethod
    def custom(cls, transform: Transform) -> "TransitionVariant":
        return cls(VariantKind.CUSTOM, transform)

    @classmethod
    def from_name(cls, name: str) -> "TransitionVariant":
        """Look up a built-in variant by name, e.g. "slide_left"."""
        kind = VariantKind(name.lower())
        if kind is VariantKind.CUSTOM:
            raise ValueError("Custom variants need a transform; use TransitionVariant.custom()")
        return cls(kind)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def is_custom(self) -> bool:
        return self.kind is VariantKind.CUSTOM

    def reciprocal(self) -> "TransitionVariant":
        """The variant that plays when travelling back the same way.

        Slides swap direction; fade, scale and custom variants are their own
        reciprocal.
        """
        kind = _RECIPROCAL_KINDS.get(self.kind)
        if kind is None:
            return self
        return TransitionVariant(kind)

    def __str__(self) -> str:
        if self.is_custom:
            return f"custom({self.transform})"
        return self.name


TransitionVariant.SLIDE_LEFT = TransitionVariant(VariantKind.SLIDE_LEFT)
TransitionVariant.SLIDE_RIGHT = TransitionVariant(VariantKind.SLIDE_RIGHT)
TransitionVariant.SLIDE_UP = TransitionVariant(VariantKind.SLIDE_UP)
TransitionVariant.SLIDE_DOWN = TransitionVariant(VariantKind.SLIDE_DOWN)
TransitionVariant.FADE = TransitionVariant(VariantKind.FADE)
TransitionVariant.SCALE = TransitionVariant(VariantKind.SCALE)


DEFAULT_MOTION = Tween(duration_ms=500.0)


@dataclass(frozen=True)
class TransitionConfig:
    """Start and end state of both layers for one transition.

    Attributes:
        initial_from: Departing layer transform at the start
        final_from: Departing layer transform at the end
        initial_to: Arriving layer transform at the start
        final_to: Arriving layer transform at the end
        opacity_from: (start, end) opacity of the departing layer
        opacity_to: (start, end) opacity of the arriving layer
        motion: Motion model driving every animated quantity
    """

    initial_from: Transform
    final_from: Transform
    initial_to: Transform
    final_to: Transform
    opacity_from: tuple[float, float] = (1.0, 1.0)
    opacity_to: tuple[float, float] = (1.0, 1.0)
    motion: MotionModel = DEFAULT_MOTION


_IDENTITY = Transform.identity()

VARIANT_TABLE: dict[VariantKind, TransitionConfig] = {
    VariantKind.SLIDE_LEFT: TransitionConfig(
        initial_from=_IDENTITY,
        final_from=Transform(x=-100.0),
        initial_to=Transform(x=100.0),
        final_to=_IDENTITY,
    ),
    VariantKind.SLIDE_RIGHT: TransitionConfig(
        initial_from=_IDENTITY,
        final_from=Transform(x=100.0),
        initial_to=Transform(x=-100.0),
        final_to=_IDENTITY,
    ),
    VariantKind.SLIDE_UP: TransitionConfig(
        initial_from=_IDENTITY,
        final_from=Transform(y=-100.0),
        initial_to=Transform(y=100.0),
        final_to=_IDENTITY,
    ),
    VariantKind.SLIDE_DOWN: TransitionConfig(
        initial_from=_IDENTITY,
        final_from=Transform(y=100.0),
        initial_to=Transform(y=-100.0),
        final_to=_IDENTITY,
    ),
    VariantKind.FADE: TransitionConfig(
        initial_from=_IDENTITY,
        final_from=_IDENTITY,
        initial_to=_IDENTITY,
        final_to=_IDENTITY,
        opacity_from=(1.0, 0.0),
        opacity_to=(0.0, 1.0),
    ),
    VariantKind.SCALE: TransitionConfig(
        initial_from=_IDENTITY,
        final_from=Transform(scale=0.5),
        initial_to=_IDENTITY,
        final_to=_IDENTITY,
        opacity_from=(1.0, 0.0),
        opacity_to=(0.0, 1.0),
    ),
}


def variant_to_config(
    variant: TransitionVariant,
    motion: Optional[MotionModel] = None,
    table: Mapping[VariantKind, TransitionConfig] = VARIANT_TABLE,
) -> TransitionConfig:
    """Resolve a variant to concrete layer endpoints.

    Args:
        variant: Variant to resolve
        motion: Motion model to attach; the table entry's model if None
        table: Endpoint table for built-in variants

    Returns:
        The TransitionConfig for this variant
    """
    if variant.is_custom:
        config = TransitionConfig(
            initial_from=_IDENTITY,
            final_from=variant.transform or _IDENTITY,
            initial_to=_IDENTITY,
            final_to=_IDENTITY,
            opacity_from=(1.0, 0.0),
            opacity_to=(0.0, 1.0),
        )
    else:
        config = table[variant.kind]

    if motion is not None:
        config = replace(config, motion=motion)
    return config
