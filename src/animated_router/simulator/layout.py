"""Geometry for painting transformed route layers."""

from typing import NamedTuple

from animated_router.animation.transform import Transform


class Rect(NamedTuple):
    """Pixel rectangle (left, top, width, height)."""

    left: int
    top: int
    width: int
    height: int


def layer_rect(transform: Transform, viewport: Rect) -> Rect:
    """Place a full-viewport layer under a transform.

    Offsets are percentages of the viewport size; scaling is about the
    viewport centre, so a scale of 0.5 leaves a centred half-size card.
    """
    width = viewport.width * transform.scale
    height = viewport.height * transform.scale
    left = viewport.left + (viewport.width - width) / 2 + viewport.width * transform.x / 100.0
    top = viewport.top + (viewport.height - height) / 2 + viewport.height * transform.y / 100.0
    return Rect(round(left), round(top), max(0, round(width)), max(0, round(height)))


def opacity_to_alpha(opacity: float) -> int:
    """Map an opacity in [0, 1] to an 8-bit surface alpha."""
    return round(max(0.0, min(1.0, opacity)) * 255)
