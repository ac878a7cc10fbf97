"""Images: pixel arrays carrying the metadata that places them in physical space."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from regimage.direction import Direction
from regimage.spatial import Point, Spacing, Vector

__all__ = ["Image"]


class Image:
    """A pixel array with origin, spacing and direction.

    Index space is the discrete grid of the array; physical space is continuous.
    The mapping between them is ``point = origin + direction @ (index * spacing)``.
    Arrays are stored in [Z, Y, X] (or [Y, X]) order while index and physical
    coordinates list x first.
    """

    __slots__ = ("data", "origin", "spacing", "direction")

    def __init__(
        self,
        data: np.ndarray,
        origin: Point,
        spacing: Vector,
        direction: Direction,
    ) -> None:
        array = np.asarray(data, dtype=np.float64)
        dim = array.ndim
        if len(origin) != dim:
            raise ValueError(f"origin has {len(origin)} coordinates, image has {dim} dimensions")
        if len(spacing) != dim:
            raise ValueError(f"spacing has {len(spacing)} components, image has {dim} dimensions")
        if direction.dim != dim:
            raise ValueError(f"direction is {direction.dim}D, image has {dim} dimensions")
        self.data = array
        self.origin = Point(origin)
        self.spacing = Spacing(spacing)
        self.direction = direction

    @property
    def shape(self) -> tuple[int, ...]:
        """The size of the pixel array along each axis."""
        return tuple(self.data.shape)

    @property
    def ndim(self) -> int:
        """The number of image dimensions."""
        return self.data.ndim

    def _check_point(self, point: Iterable[float]) -> np.ndarray:
        values = np.array(list(point), dtype=np.float64)
        if values.shape != (self.ndim,):
            raise ValueError(f"expected {self.ndim} coordinates, got {values.size}")
        return values

    def _check_rows(self, rows: np.ndarray) -> np.ndarray:
        array = np.asarray(rows, dtype=np.float64)
        if array.ndim != 2 or array.shape[1] != self.ndim:
            raise ValueError(f"expected an [N, {self.ndim}] array, got shape {array.shape}")
        return array

    def _origin_array(self) -> np.ndarray:
        return np.array(self.origin.to_list(), dtype=np.float64)

    def _spacing_array(self) -> np.ndarray:
        return np.array(self.spacing.to_list(), dtype=np.float64)

    def physical_point_to_index(self, point: Point) -> Point:
        """Continuous index of a physical point.

        Raises ValueError if the direction matrix is not invertible.
        """
        diff = self._check_point(point) - self._origin_array()
        inv_dir = self.direction.inverse().matrix
        return Point((inv_dir @ diff) / self._spacing_array())

    def index_to_physical_point(self, index: Point) -> Point:
        """Physical point of a continuous index."""
        scaled = self._check_point(index) * self._spacing_array()
        return Point(self._origin_array() + self.direction.matrix @ scaled)

    def world_to_index(self, points: np.ndarray) -> np.ndarray:
        """Map an [N, D] array of physical points to continuous indices."""
        rows = self._check_rows(points)
        inv_dir = self.direction.inverse().matrix
        return ((rows - self._origin_array()) @ inv_dir.T) / self._spacing_array()

    def index_to_world(self, indices: np.ndarray) -> np.ndarray:
        """Map an [N, D] array of continuous indices to physical points."""
        rows = self._check_rows(indices)
        return (rows * self._spacing_array()) @ self.direction.matrix.T + self._origin_array()

    def __repr__(self) -> str:
        return (
            f"Image(shape={self.shape}, origin={self.origin!r}, "
            f"spacing={self.spacing!r}, direction={self.direction!r})"
        )