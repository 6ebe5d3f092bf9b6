from __future__ import annotations

from typing import Generic, Optional, TypeVar

import numpy as np

from liectrl.lie.base import LieGroup, as_tangent

G = TypeVar("G", bound=LieGroup)


class BodyAccelerationPlant(Generic[G]):
    """
    Double integrator on a Lie group driven by body acceleration.

    Integrates ``d^r x = v`` and ``dv/dt = u`` with explicit Euler steps.
    """

    def __init__(self, g0: G, v0: Optional[np.ndarray] = None) -> None:
        self._dim = type(g0).dim
        self.g = g0
        self.v = np.zeros(self._dim, dtype=float) if v0 is None else as_tangent(v0, self._dim, name="v0")

    def step(self, u: np.ndarray, dt: float) -> G:
        if not dt > 0.0:
            raise ValueError(f"dt must be positive; got {dt}")
        self.v = self.v + dt * as_tangent(u, self._dim, name="acceleration command")
        self.g = self.g + dt * self.v
        return self.g


__all__ = ["BodyAccelerationPlant"]
