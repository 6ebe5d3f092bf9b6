from __future__ import annotations

import functools
from typing import ClassVar, Optional, Type

import numpy as np

from liectrl.lie.base import as_tangent


class Euclidean:
    """
    The additive group R^n.

    Composition is vector addition, so the tangent space coincides with the
    group and subtraction is the ordinary flat difference.  Use
    :func:`euclidean` to obtain the class for a given dimension.
    """

    __slots__ = ("_x",)

    dim: ClassVar[int] = 0

    def __init__(self, coords: Optional[np.ndarray] = None) -> None:
        if type(self).dim < 1:
            raise TypeError("Use euclidean(dim) to create a concrete R^n type")
        if coords is None:
            self._x = np.zeros(self.dim, dtype=float)
        else:
            self._x = as_tangent(coords, self.dim, name="coordinates")

    @classmethod
    def identity(cls) -> "Euclidean":
        return cls()

    @classmethod
    def exp(cls, tangent: np.ndarray) -> "Euclidean":
        return cls(tangent)

    def log(self) -> np.ndarray:
        return self._x.copy()

    @property
    def coords(self) -> np.ndarray:
        return self._x.copy()

    def inverse(self) -> "Euclidean":
        return type(self)(-self._x)

    def __mul__(self, other: "Euclidean") -> "Euclidean":
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(self._x + other._x)

    def __sub__(self, other: "Euclidean") -> np.ndarray:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._x - other._x

    def __add__(self, tangent: np.ndarray) -> "Euclidean":
        return type(self)(self._x + as_tangent(tangent, self.dim))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self._x, other._x))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._x.tolist()})"


@functools.lru_cache(maxsize=None)
def euclidean(dim: int) -> Type[Euclidean]:
    """Return the (cached) R^n group class of dimension ``dim``."""
    dim = int(dim)
    if dim < 1:
        raise ValueError(f"Euclidean dimension must be >= 1; got {dim}")
    return type(f"R{dim}", (Euclidean,), {"__slots__": (), "dim": dim})


R1 = euclidean(1)
R2 = euclidean(2)
R3 = euclidean(3)


__all__ = ["Euclidean", "euclidean", "R1", "R2", "R3"]
