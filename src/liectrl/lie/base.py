from __future__ import annotations

from typing import ClassVar, Protocol, TypeVar

import numpy as np

G = TypeVar("G", bound="LieGroup")


class LieGroup(Protocol):
    """
    Capabilities the controller expects from a state-space group type.

    Tangent vectors are 1-D float arrays of length ``dim``.  Subtraction is the
    right-minus ``a - b = log(b^-1 * a)`` and adding a tangent vector is the
    right-plus ``g + t = g * exp(t)``.
    """

    dim: ClassVar[int]

    @classmethod
    def identity(cls: type[G]) -> G: ...

    def __sub__(self: G, other: G) -> np.ndarray: ...

    def __add__(self: G, tangent: np.ndarray) -> G: ...

    def __mul__(self: G, other: G) -> G: ...

    def inverse(self: G) -> G: ...


def as_tangent(values, dim: int, *, name: str = "tangent vector") -> np.ndarray:
    """Return ``values`` as a fresh float array of shape ``(dim,)``."""
    vec = np.array(values, dtype=float)
    if vec.shape != (dim,):
        raise ValueError(f"{name} must have shape ({dim},); got {vec.shape}")
    return vec


__all__ = ["LieGroup", "as_tangent"]
