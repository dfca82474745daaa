"""Small vector and matrix types for transforms, backed by numpy arrays."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterator, Sequence

import numpy as np

_NUMERIC_KINDS = "iuf"


def _as_numeric(values: Any) -> np.ndarray:
    array = np.array(values)
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"expected numeric components, got dtype {array.dtype}")
    return array


class Vector:
    """A fixed-length vector of numbers."""

    __slots__ = ("_data",)

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("a vector needs at least one component")
        if len(args) == 1 and isinstance(args[0], (Sequence, np.ndarray)):
            components = args[0]
        else:
            components = args
        data = _as_numeric(components)
        if data.ndim != 1 or data.size == 0:
            raise ValueError("a vector must be a non-empty sequence of numbers")
        self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Vector":
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    @classmethod
    def filled(cls, size: int, value: Real = 0) -> "Vector":
        """A vector of the given size with every component set to value."""
        if size < 1:
            raise ValueError("a vector needs at least one component")
        return cls(*([value] * size))

    def __len__(self) -> int:
        return int(self._data.size)

    def __iter__(self) -> Iterator[Any]:
        return (item.item() for item in self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index].item()

    def __setitem__(self, index: int, value: Real) -> None:
        self._data[index] = value

    def _check_same_length(self, other: "Vector") -> None:
        if len(self) != len(other):
            raise ValueError(f"vector lengths differ: {len(self)} and {len(other)}")

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other)
        return Vector._wrap(self._data + other._data)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_length(other)
        return Vector._wrap(self._data - other._data)

    def __mul__(self, scalar: Real) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector._wrap(self._data * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Real) -> "Vector":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector._wrap(self._data / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def to_array(self) -> np.ndarray:
        """A copy of the components as a numpy array."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(item) for item in self)})"


class Matrix:
    """A matrix of numbers, indexed by column like a transform matrix."""

    __slots__ = ("_data",)

    def __init__(self, columns: int = 4, rows: int = 4, value: Real = 1.0) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("a matrix needs at least one row and one column")
        if not isinstance(value, Real):
            raise TypeError(f"expected a number, got {type(value).__name__}")
        dtype = np.asarray(value).dtype
        self._data = np.eye(rows, columns, dtype=dtype) * value

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._data = data
        return matrix

    @classmethod
    def from_array(cls, array: Any) -> "Matrix":
        """Build a matrix from a two-dimensional array laid out as rows."""
        data = _as_numeric(array)
        if data.ndim != 2 or data.size == 0:
            raise ValueError("a matrix must be a non-empty two-dimensional array")
        return cls._wrap(data.copy())

    def _check_same_shape(self, other: "Matrix") -> None:
        if self._data.shape != other._data.shape:
            raise ValueError(
                f"matrix shapes differ: {self._data.shape} and {other._data.shape}"
            )

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._wrap(self._data + other._data)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix._wrap(self._data - other._data)

    def __mul__(self, other: Any) -> "Matrix":
        if isinstance(other, Matrix):
            if self._data.shape[1] != other._data.shape[0]:
                raise ValueError(
                    f"cannot multiply matrices of shapes {self._data.shape} "
                    f"and {other._data.shape}"
                )
            return Matrix._wrap(self._data @ other._data)
        if isinstance(other, Real):
            return Matrix._wrap(self._data * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Matrix":
        if isinstance(other, Real):
            return Matrix._wrap(self._data * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> Vector:
        """The column at index, as a vector."""
        return Vector._wrap(self._data[:, index].copy())

    def _require_4x4(self) -> None:
        if self._data.shape != (4, 4):
            raise ValueError("transforms need a 4x4 matrix")

    @staticmethod
    def _xyz(vector: Vector, what: str) -> np.ndarray:
        if len(vector) != 3:
            raise ValueError(f"{what} must have three components")
        return vector.to_array().astype(float)

    def translate(self, translation: Vector) -> "Matrix":
        """This matrix followed by a translation."""
        self._require_4x4()
        offset = np.eye(4)
        offset[:3, 3] = self._xyz(translation, "translation")
        return Matrix._wrap(self._data @ offset)

    def translate_inplace(self, translation: Vector) -> None:
        self._data = self.translate(translation)._data

    def rotate(self, angle: float, axis: Vector) -> "Matrix":
        """This matrix followed by a rotation of angle radians about axis."""
        self._require_4x4()
        direction = self._xyz(axis, "axis")
        length = float(np.linalg.norm(direction))
        if length == 0.0:
            raise ValueError("rotation axis must not be zero")
        x, y, z = direction / length
        c, s = math.cos(angle), math.sin(angle)
        t = 1.0 - c
        rotation = np.eye(4)
        rotation[:3, :3] = [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
        ]
        return Matrix._wrap(self._data @ rotation)

    def rotate_inplace(self, angle: float, axis: Vector) -> None:
        self._data = self.rotate(angle, axis)._data

    def scale(self, factors: Vector) -> "Matrix":
        """This matrix followed by a scale along each axis."""
        self._require_4x4()
        scaling = np.diag([*self._xyz(factors, "scale"), 1.0])
        return Matrix._wrap(self._data @ scaling)

    def scale_inplace(self, factors: Vector) -> None:
        self._data = self.scale(factors)._data

    def to_array(self) -> np.ndarray:
        """A copy of the entries, laid out as rows."""
        return self._data.copy()

    def __repr__(self) -> str:
        return f"Matrix.from_array({self._data.tolist()!r})"