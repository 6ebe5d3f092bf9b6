from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from liectrl.lie.base import as_tangent


def wrap_angle(angle: float) -> float:
    """Map ``angle`` into ``(-pi, pi]``."""
    wrapped = math.remainder(float(angle), 2.0 * math.pi)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


class SO2:
    """Planar rotations, stored as a wrapped heading angle."""

    __slots__ = ("_angle",)

    dim: ClassVar[int] = 1

    def __init__(self, angle: float = 0.0) -> None:
        self._angle = wrap_angle(angle)

    @classmethod
    def identity(cls) -> "SO2":
        return cls(0.0)

    @classmethod
    def exp(cls, tangent: np.ndarray) -> "SO2":
        return cls(as_tangent(tangent, cls.dim)[0])

    @classmethod
    def from_matrix(cls, rotation: np.ndarray) -> "SO2":
        rotation = np.asarray(rotation, dtype=float)
        if rotation.shape != (2, 2):
            raise ValueError(f"rotation must be 2x2; got shape {rotation.shape}")
        return cls(math.atan2(rotation[1, 0], rotation[0, 0]))

    @property
    def angle(self) -> float:
        return self._angle

    def log(self) -> np.ndarray:
        return np.array([self._angle], dtype=float)

    def matrix(self) -> np.ndarray:
        c, s = math.cos(self._angle), math.sin(self._angle)
        return np.array([[c, -s], [s, c]], dtype=float)

    def inverse(self) -> "SO2":
        return SO2(-self._angle)

    def __mul__(self, other: "SO2") -> "SO2":
        if not isinstance(other, SO2):
            return NotImplemented
        return SO2(self._angle + other._angle)

    def __sub__(self, other: "SO2") -> np.ndarray:
        if not isinstance(other, SO2):
            return NotImplemented
        return np.array([wrap_angle(self._angle - other._angle)], dtype=float)

    def __add__(self, tangent: np.ndarray) -> "SO2":
        return SO2(self._angle + as_tangent(tangent, self.dim)[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SO2):
            return NotImplemented
        return self._angle == other._angle

    def __repr__(self) -> str:
        return f"SO2({self._angle:.6f})"


__all__ = ["SO2", "wrap_angle"]
