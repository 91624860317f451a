# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Minimal 2D vector and linear map value types

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector used for position, velocity and acceleration.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: float
    y: float

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def scalar_multiply(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __mul__(self, scalar: float) -> "Vector2":
        if isinstance(scalar, Vector2):
            return NotImplemented
        return self.scalar_multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_numpy(cls, array) -> "Vector2":
        """Build a vector from any length-2 array-like."""
        arr = np.asarray(array, dtype=np.float64).ravel()
        if arr.shape != (2,):
            raise ValueError(f"Vector2 needs exactly 2 components, got shape {arr.shape}")
        return cls(float(arr[0]), float(arr[1]))


class LinearMap2:
    """
    Immutable 2x2 linear transformation acting on Vector2.

    Only used as an axis-wise scale-and-negate reflector at the walls,
    e.g. ``LinearMap2([[-0.8, 0], [0, 1]])`` bounces off a vertical wall.
    """

    __slots__ = ("_matrix",)

    def __init__(self, rows):
        matrix = np.array(rows, dtype=np.float64)
        if matrix.shape != (2, 2):
            raise ValueError(f"LinearMap2 must be 2x2, got shape {matrix.shape}")
        matrix.setflags(write=False)
        object.__setattr__(self, "_matrix", matrix)

    def __setattr__(self, name, value):
        raise AttributeError("LinearMap2 is immutable")

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the underlying 2x2 matrix."""
        return self._matrix

    def apply(self, vector: Vector2) -> Vector2:
        return Vector2.from_numpy(self._matrix @ vector.to_numpy())

    def __eq__(self, other):
        if not isinstance(other, LinearMap2):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self):
        return hash(self._matrix.tobytes())

    def __repr__(self):
        return f"LinearMap2({self._matrix.tolist()})"
