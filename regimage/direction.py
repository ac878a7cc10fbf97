"""Direction matrices describing the orientation of image axes."""

from __future__ import annotations

from typing import Iterable, Sequence, Union

import numpy as np

from regimage.spatial import Vector

__all__ = ["Direction"]

_ORTHOGONAL_TOL = 1e-6
_PIVOT_TOL = 1e-10


class Direction:
    """A square D x D matrix whose column i is the direction of image axis i."""

    __slots__ = ("_m",)

    def __init__(self, matrix: Union[Sequence[Sequence[float]], np.ndarray]) -> None:
        m = np.array(matrix, dtype=np.float64)
        if m.ndim != 2 or m.shape[0] != m.shape[1]:
            raise ValueError(f"direction matrix must be square, got shape {m.shape}")
        self._m = m

    @classmethod
    def identity(cls, dim: int) -> "Direction":
        """The identity orientation (no rotation)."""
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        return cls(np.eye(dim))

    @classmethod
    def zeros(cls, dim: int) -> "Direction":
        """A matrix of zeros."""
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        return cls(np.zeros((dim, dim)))

    @property
    def dim(self) -> int:
        return self._m.shape[0]

    @property
    def matrix(self) -> np.ndarray:
        """A copy of the underlying matrix."""
        return self._m.copy()

    def is_orthogonal(self) -> bool:
        """True if M @ M^T is the identity within 1e-6."""
        product = self._m @ self._m.T
        return bool(np.all(np.abs(product - np.eye(self.dim)) < _ORTHOGONAL_TOL))

    def is_proper_rotation(self) -> bool:
        """True if orthogonal with determinant 1."""
        return self.is_orthogonal() and abs(self.determinant() - 1.0) < _ORTHOGONAL_TOL

    def determinant(self) -> float:
        """Determinant by cofactor expansion for 2 and 3, elimination otherwise."""
        m = self._m
        if self.dim == 2:
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        if self.dim == 3:
            a, b, c = m[0]
            d, e, f = m[1]
            g, h, i = m[2]
            return float(a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g))
        return self._eliminate_determinant()

    def _eliminate_determinant(self) -> float:
        m = self._m.copy()
        det = 1.0
        for i in range(self.dim):
            pivot_idx = i + int(np.argmax(np.abs(m[i:, i])))
            if abs(m[pivot_idx, i]) < _PIVOT_TOL:
                return 0.0
            if pivot_idx != i:
                m[[i, pivot_idx]] = m[[pivot_idx, i]]
                det = -det
            det *= m[i, i]
            factors = m[i + 1 :, i] / m[i, i]
            m[i + 1 :, i:] -= np.outer(factors, m[i, i:])
        return float(det)

    def inverse(self) -> "Direction":
        """The inverse matrix; raises ValueError if the matrix is singular."""
        try:
            return Direction(np.linalg.inv(self._m))
        except np.linalg.LinAlgError as exc:
            raise ValueError("direction matrix is not invertible") from exc

    def axis_directions(self) -> list[Vector]:
        """The columns of the matrix, one vector per image axis."""
        return [Vector(self._m[:, i]) for i in range(self.dim)]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._m[index])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._m[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self._m.shape == other._m.shape and bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def __matmul__(self, other: Union["Direction", Vector]) -> Union["Direction", Vector]:
        if isinstance(other, Direction):
            if other.dim != self.dim:
                raise ValueError(f"dimension mismatch: {self.dim} != {other.dim}")
            return Direction(self._m @ other._m)
        if isinstance(other, Vector):
            if len(other) != self.dim:
                raise ValueError(f"dimension mismatch: {self.dim} != {len(other)}")
            return Vector(self._m @ np.array(other.to_list(), dtype=np.float64))
        return NotImplemented

    def __iter__(self) -> Iterable[list[float]]:
        return iter(self._m.tolist())

    def __repr__(self) -> str:
        return f"Direction({self._m.tolist()!r})"