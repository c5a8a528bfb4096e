"""Transform value type applied to a route layer."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Transform:
    """Visual offset and scale of one layer.

    Attributes:
        x: Horizontal offset in percent of the viewport width
        y: Vertical offset in percent of the viewport height
        scale: Uniform scale factor (1.0 = natural size)
        rotation: Rotation in degrees, only used by custom variants
    """

    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        """The resting transform: no offset, natural size."""
        return cls()

    @classmethod
    def from_array(cls, values: NDArray[np.float64]) -> "Transform":
        """Build a transform from a 4-component vector (x, y, scale, rotation)."""
        x, y, scale, rotation = (float(v) for v in values)
        return cls(x=x, y=y, scale=scale, rotation=rotation)

    def to_array(self) -> NDArray[np.float64]:
        """Vector form used by the interpolation engine."""
        return np.array([self.x, self.y, self.scale, self.rotation], dtype=np.float64)

    @property
    def is_identity(self) -> bool:
        return self == Transform.identity()
