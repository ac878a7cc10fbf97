"""Grids of continuous indices covering every pixel of an image."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["generate_grid", "generate_grid_2d", "generate_grid_3d"]


def _check_shape(shape: Sequence[int], dim: int) -> tuple[int, ...]:
    dims = tuple(int(s) for s in shape)
    if len(dims) != dim:
        raise ValueError(f"shape must be {dim}D, got {len(dims)}D")
    if any(s < 0 for s in dims):
        raise ValueError("shape sizes must be non-negative")
    return dims


def generate_grid_3d(shape: Sequence[int]) -> np.ndarray:
    """Indices of a [D, H, W] volume as an [N, 3] array of (x, y, z) rows.

    Rows run with x fastest, then y, then z.
    """
    dims = _check_shape(shape, 3)
    zz, yy, xx = np.indices(dims, dtype=np.float64)
    return np.stack([xx.ravel(), yy.ravel(), zz.ravel()], axis=1)


def generate_grid_2d(shape: Sequence[int]) -> np.ndarray:
    """Indices of an [H, W] image as an [N, 2] array of (x, y) rows.

    Rows run with x fastest, then y.
    """
    dims = _check_shape(shape, 2)
    yy, xx = np.indices(dims, dtype=np.float64)
    return np.stack([xx.ravel(), yy.ravel()], axis=1)


def generate_grid(shape: Sequence[int]) -> np.ndarray:
    """Index grid for a 2D or 3D shape; raises ValueError for other ranks."""
    rank = len(shape)
    if rank == 3:
        return generate_grid_3d(shape)
    if rank == 2:
        return generate_grid_2d(shape)
    raise ValueError("only 2D and 3D grids are supported")