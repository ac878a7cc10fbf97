"""Separable Gaussian smoothing that respects physical pixel spacing."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from regimage.image import Image

__all__ = ["GaussianFilter", "gaussian_kernel"]

_SIGMA_EPS = 1e-6


def gaussian_kernel(sigma: float, radius: int) -> np.ndarray:
    """A normalised Gaussian kernel of length 2 * radius + 1."""
    if radius < 0:
        raise ValueError("radius must be non-negative")
    x = np.arange(-radius, radius + 1, dtype=np.float64)
    values = np.exp(-(x * x) / (2.0 * sigma * sigma))
    return values / values.sum()


def _correlate_axis(data: np.ndarray, kernel: np.ndarray, axis: int) -> np.ndarray:
    """Same-size correlation along one axis with zero padding."""
    radius = (len(kernel) - 1) // 2
    pad = [(0, 0)] * data.ndim
    pad[axis] = (radius, radius)
    padded = np.pad(data, pad)
    length = data.shape[axis]
    out = np.zeros_like(data)
    for offset, weight in enumerate(kernel):
        window = [slice(None)] * data.ndim
        window[axis] = slice(offset, offset + length)
        out += weight * padded[tuple(window)]
    return out


class GaussianFilter:
    """Smooth an image with 1D Gaussian convolutions along each axis.

    ``sigmas`` are standard deviations in physical units per axis; axes beyond
    the list use the first sigma. Axes with sigma at or below 1e-6 are left
    alone. Kernels are at most ``max_kernel_width`` wide, made odd by taking
    one off. Values beyond the array edge count as zero.
    """

    def __init__(self, sigmas: Sequence[float], max_kernel_width: int = 32) -> None:
        self.sigmas = [float(s) for s in sigmas]
        if not self.sigmas:
            raise ValueError("at least one sigma is required")
        if max_kernel_width < 1:
            raise ValueError("max_kernel_width must be at least 1")
        self.max_kernel_width = int(max_kernel_width)

    def _sigma(self, axis: int) -> float:
        return self.sigmas[axis] if axis < len(self.sigmas) else self.sigmas[0]

    def apply(self, image: Image) -> Image:
        """Return a smoothed copy of ``image`` with the same metadata."""
        data = self.apply_array(image.data, image.spacing.to_list())
        return Image(data, image.origin, image.spacing, image.direction)

    def apply_array(self, data: np.ndarray, spacing: Sequence[float]) -> np.ndarray:
        """Smooth an array whose pixels have the given physical spacing."""
        result = np.array(data, dtype=np.float64)
        spacing = [float(s) for s in spacing]
        if len(spacing) != result.ndim:
            raise ValueError(
                f"spacing has {len(spacing)} components, data has {result.ndim} dimensions"
            )
        for axis, spacing_val in enumerate(spacing):
            sigma = self._sigma(axis)
            if sigma <= _SIGMA_EPS:
                continue
            pixel_sigma = sigma / spacing_val
            radius = math.ceil(3.0 * pixel_sigma)
            width = min(2 * radius + 1, self.max_kernel_width)
            if width % 2 == 0:
                width -= 1
            kernel = gaussian_kernel(pixel_sigma, (width - 1) // 2)
            result = _correlate_axis(result, kernel, axis)
        return result