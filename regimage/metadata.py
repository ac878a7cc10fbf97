"""Physical-space metadata of an image: origin, spacing and direction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from regimage.direction import Direction
from regimage.spatial import Point, Spacing

__all__ = ["ImageMetadata"]


@dataclass
class ImageMetadata:
    """How image indices map to physical coordinates."""

    origin: Point
    spacing: Spacing
    direction: Direction

    @classmethod
    def default(cls, dim: int) -> "ImageMetadata":
        """Zero origin, unit spacing and identity direction."""
        return cls(
            origin=Point.origin(dim),
            spacing=Spacing.uniform(1.0, dim),
            direction=Direction.identity(dim),
        )

    @classmethod
    def for_shape(cls, shape: Sequence[int]) -> "ImageMetadata":
        """Default metadata for an image of the given shape."""
        return cls.default(len(shape))

    @property
    def dim(self) -> int:
        return len(self.origin)