"""Desktop preview for animated_router transitions."""

from .layout import Rect, layer_rect, opacity_to_alpha

__all__ = ["Rect", "layer_rect", "opacity_to_alpha"]
