"""Points, vectors and pixel spacing in D-dimensional physical space."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator

__all__ = ["Vector", "Spacing", "Point"]


def _as_floats(values: Iterable[float]) -> tuple[float, ...]:
    return tuple(float(v) for v in values)


def _check_same_dim(a: tuple[float, ...], b: tuple[float, ...]) -> None:
    if len(a) != len(b):
        raise ValueError(f"dimension mismatch: {len(a)} != {len(b)}")


class Vector:
    """An immutable vector of floats: a displacement, direction or offset."""

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[float]) -> None:
        self._components = _as_floats(components)

    @classmethod
    def zeros(cls, dim: int) -> "Vector":
        """Return the zero vector of the given dimension."""
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        return cls([0.0] * dim)

    @classmethod
    def _unit(cls, axis: int, dim: int) -> "Vector":
        if not 0 <= axis < dim:
            raise ValueError(f"axis {axis} does not exist in {dim} dimensions")
        return cls(1.0 if i == axis else 0.0 for i in range(dim))

    @classmethod
    def x_axis(cls, dim: int) -> "Vector":
        """Unit vector along the first axis."""
        return cls._unit(0, dim)

    @classmethod
    def y_axis(cls, dim: int) -> "Vector":
        """Unit vector along the second axis."""
        return cls._unit(1, dim)

    @classmethod
    def z_axis(cls, dim: int) -> "Vector":
        """Unit vector along the third axis."""
        return cls._unit(2, dim)

    def to_list(self) -> list[float]:
        return list(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(("Vector", self._components))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dim(self._components, other._components)
        return type(self)(a + b for a, b in zip(self, other))

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        _check_same_dim(self._components, other._components)
        return type(self)(a - b for a, b in zip(self, other))

    def __mul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(a * scalar for a in self)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(a / scalar for a in self)

    def __neg__(self) -> "Vector":
        return type(self)(-a for a in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._components)!r})"


class Spacing(Vector):
    """Physical distance between adjacent pixels along each axis."""

    __slots__ = ()

    @classmethod
    def uniform(cls, value: float, dim: int) -> "Spacing":
        """Spacing with the same value along every axis."""
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        return cls([value] * dim)

    def is_uniform(self) -> bool:
        """True if all components are equal within 1e-9."""
        if not self._components:
            return True
        first = self._components[0]
        return all(abs(v - first) < 1e-9 for v in self._components[1:])

    def min_spacing(self) -> float:
        return min(self._components, default=math.inf)

    def max_spacing(self) -> float:
        return max(self._components, default=-math.inf)


class Point:
    """An immutable position in physical space."""

    __slots__ = ("_coords",)

    def __init__(self, coords: Iterable[float]) -> None:
        self._coords = _as_floats(coords)

    @classmethod
    def origin(cls, dim: int) -> "Point":
        """The point with all coordinates zero."""
        if dim < 0:
            raise ValueError("dimension must be non-negative")
        return cls([0.0] * dim)

    def to_list(self) -> list[float]:
        return list(self._coords)

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords)

    def __getitem__(self, index: int) -> float:
        return self._coords[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._coords == other._coords

    def __hash__(self) -> int:
        return hash(("Point", self._coords))

    def __sub__(self, other: "Point") -> Vector:
        """Displacement from ``other`` to this point."""
        if not isinstance(other, Point):
            return NotImplemented
        _check_same_dim(self._coords, other._coords)
        return Vector(a - b for a, b in zip(self, other))

    def __add__(self, vector: Vector) -> "Point":
        """This point moved by ``vector``."""
        if not isinstance(vector, Vector):
            return NotImplemented
        _check_same_dim(self._coords, tuple(vector))
        return Point(a + b for a, b in zip(self, vector))

    def __repr__(self) -> str:
        return f"Point({list(self._coords)!r})"