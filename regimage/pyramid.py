"""Multi-resolution image pyramids for coarse-to-fine registration."""

from __future__ import annotations

from typing import Iterator, Sequence

from regimage.downsample import DownsampleFilter
from regimage.gaussian import GaussianFilter
from regimage.image import Image

__all__ = ["MultiResolutionPyramid"]

_SIGMA_EPS = 1e-6


class MultiResolutionPyramid:
    """A sequence of smoothed and downsampled copies of one image.

    Level i is the input smoothed with ``smoothing_sigmas[i]`` and then shrunk
    by ``shrink_factors[i]``. A level with all factors 1 and all sigmas at or
    below 1e-6 is the input itself.
    """

    def __init__(
        self,
        image: Image,
        shrink_factors: Sequence[Sequence[int]],
        smoothing_sigmas: Sequence[Sequence[float]],
    ) -> None:
        if len(shrink_factors) != len(smoothing_sigmas):
            raise ValueError("schedule lengths must match")
        self._images = [
            self._build_level(image, factors, sigmas)
            for factors, sigmas in zip(shrink_factors, smoothing_sigmas)
        ]

    @staticmethod
    def _build_level(
        image: Image, factors: Sequence[int], sigmas: Sequence[float]
    ) -> Image:
        identity_shrink = all(f == 1 for f in factors)
        identity_smooth = all(s <= _SIGMA_EPS for s in sigmas)
        result = image
        if not identity_smooth:
            result = GaussianFilter(sigmas).apply(result)
        if not identity_shrink:
            result = DownsampleFilter(factors).apply(result)
        return result

    def level(self, index: int) -> Image:
        """The image at the given level."""
        return self._images[index]

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[Image]:
        return iter(self._images)

    @staticmethod
    def default_schedule(
        levels: int, dim: int
    ) -> tuple[list[list[int]], list[list[float]]]:
        """Power-of-two schedule, coarsest first.

        Level i shrinks by 2 ** (levels - 1 - i) and smooths with half the
        factor, or 0 when the factor is 1.
        """
        if levels < 0:
            raise ValueError("levels must be non-negative")
        shrink_factors: list[list[int]] = []
        smoothing_sigmas: list[list[float]] = []
        for i in range(levels):
            factor = 2 ** (levels - 1 - i)
            sigma = 0.5 * factor if factor > 1 else 0.0
            shrink_factors.append([factor] * dim)
            smoothing_sigmas.append([sigma] * dim)
        return shrink_factors, smoothing_sigmas