from __future__ import annotations

import datetime
from typing import Any, Callable, ClassVar, NamedTuple, Optional, Protocol, Type

import numpy as np

from liectrl.lie.base import LieGroup, as_tangent


class TrajectoryPoint(NamedTuple):
    """Desired position, body velocity and body acceleration at one instant."""

    g: Any
    v: np.ndarray
    a: np.ndarray


Trajectory = Callable[[Any], TrajectoryPoint]


class Curve(Protocol):
    """
    A time-parametrised curve on a group.

    ``eval`` returns the position at curve time ``t`` (seconds) and writes the
    body velocity and acceleration into the supplied buffers.  ``dim`` may be
    omitted when the buffer size is supplied by the caller, as
    :meth:`LiePID.set_xdes` does.
    """

    dim: ClassVar[int]

    def eval(self, t: float, vel: np.ndarray, acc: np.ndarray) -> Any: ...


def duration_to_seconds(delta: Any) -> float:
    """Convert the difference of two time stamps to floating-point seconds."""
    if isinstance(delta, np.timedelta64):
        return float(delta / np.timedelta64(1, "s"))
    if isinstance(delta, datetime.timedelta) or hasattr(delta, "total_seconds"):
        return float(delta.total_seconds())
    return float(delta)


def constant_trajectory(
    g: Any,
    v: Optional[np.ndarray] = None,
    a: Optional[np.ndarray] = None,
) -> Trajectory:
    """Time-invariant reference; velocity and acceleration default to zero."""
    dim = type(g).dim
    v_des = np.zeros(dim) if v is None else as_tangent(v, dim, name="desired velocity")
    a_des = np.zeros(dim) if a is None else as_tangent(a, dim, name="desired acceleration")

    def _trajectory(_t: Any) -> TrajectoryPoint:
        return TrajectoryPoint(g, v_des.copy(), a_des.copy())

    return _trajectory


def identity_trajectory(group: Type[LieGroup]) -> Trajectory:
    """Hold the group identity with zero velocity and acceleration."""
    return constant_trajectory(group.identity())


def curve_trajectory(curve: Curve, t0: Any, dim: Optional[int] = None) -> Trajectory:
    """
    Wrap ``curve`` so that the desired state at time ``t`` is ``curve(t - t0)``.

    Position, velocity and acceleration are returned exactly as the curve
    reports them.  The velocity and acceleration buffers have length ``dim``,
    which defaults to ``curve.dim``.
    """
    if dim is None:
        dim = curve.dim
    dim = int(dim)

    def _trajectory(t: Any) -> TrajectoryPoint:
        vel = np.zeros(dim)
        acc = np.zeros(dim)
        g = curve.eval(duration_to_seconds(t - t0), vel, acc)
        return TrajectoryPoint(g, vel, acc)

    return _trajectory


__all__ = [
    "Curve",
    "Trajectory",
    "TrajectoryPoint",
    "constant_trajectory",
    "curve_trajectory",
    "duration_to_seconds",
    "identity_trajectory",
]
