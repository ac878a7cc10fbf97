"""Integer-factor downsampling that keeps every Nth pixel."""

from __future__ import annotations

from typing import Sequence

from regimage.image import Image
from regimage.spatial import Spacing

__all__ = ["DownsampleFilter"]


class DownsampleFilter:
    """Reduce an image by keeping every Nth pixel along each axis.

    ``factors`` gives the factor per dimension; dimensions beyond its length use
    the first factor. Factors of 1 or less leave that axis unchanged. Spacing
    grows by the factor; the origin stays, since sampling starts at index 0.
    """

    def __init__(self, factors: Sequence[int]) -> None:
        self.factors = [int(f) for f in factors]
        if not self.factors:
            raise ValueError("at least one downsampling factor is required")

    def _factor(self, axis: int) -> int:
        return self.factors[axis] if axis < len(self.factors) else self.factors[0]

    def apply(self, image: Image) -> Image:
        """Return the downsampled image."""
        data = image.data
        spacing = image.spacing.to_list()
        for axis in range(image.ndim):
            factor = self._factor(axis)
            if factor <= 1:
                continue
            selector = [slice(None)] * image.ndim
            selector[axis] = slice(None, None, factor)
            data = data[tuple(selector)]
            spacing[axis] *= factor
        return Image(data.copy(), image.origin, Spacing(spacing), image.direction)