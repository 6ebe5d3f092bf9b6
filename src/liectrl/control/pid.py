from __future__ import annotations

import logging
from typing import Any, Generic, Optional, Type, TypeVar

import numpy as np

from liectrl.config import ControlGains, GainValue, PIDParams
from liectrl.control.trajectory import (
    Trajectory,
    TrajectoryPoint,
    curve_trajectory,
    duration_to_seconds,
    identity_trajectory,
)
from liectrl.lie.base import LieGroup

LOG = logging.getLogger(__name__)

G = TypeVar("G", bound=LieGroup)


class LiePID(Generic[G]):
    """
    Proportional-Integral-Derivative controller on a Lie group.

    Designed for the plant ``d^r x = v``, ``dv/dt = u``: the command is the
    body acceleration

        u = a_des + kp * (g_des - g) + kd * (v_des - v) + ki * i_err

    where ``g_des - g`` is the group right-minus and ``i_err`` is the
    forward-Euler integral of the position error, clamped componentwise to
    ``[-windup_limit, windup_limit]``.

    The proportional and derivative gains start at 1 and the integral gains at
    0.  Until a reference is configured the controller regulates to the group
    identity.
    """

    def __init__(self, group: Type[G], params: Optional[PIDParams] = None) -> None:
        self._group = group
        self._dim = int(group.dim)
        if self._dim < 1:
            raise ValueError(f"Group {group.__name__} reports tangent dimension {self._dim}")
        self._params = params or PIDParams()

        self._kp = np.ones(self._dim, dtype=float)
        self._kd = np.ones(self._dim, dtype=float)
        self._ki = np.zeros(self._dim, dtype=float)

        self._i_err = np.zeros(self._dim, dtype=float)
        self._t_last: Optional[Any] = None

        self._x_des: Trajectory = identity_trajectory(group)

    @classmethod
    def from_config(
        cls,
        group: Type[G],
        params: Optional[PIDParams] = None,
        gains: Optional[ControlGains] = None,
    ) -> "LiePID[G]":
        controller = cls(group, params)
        if gains is not None:
            gains.apply(controller)
        return controller

    # ------------------------------------------------------------------ state
    @property
    def group(self) -> Type[G]:
        return self._group

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def params(self) -> PIDParams:
        return self._params

    @property
    def kp(self) -> np.ndarray:
        return self._kp.copy()

    @property
    def kd(self) -> np.ndarray:
        return self._kd.copy()

    @property
    def ki(self) -> np.ndarray:
        return self._ki.copy()

    @property
    def integral(self) -> np.ndarray:
        return self._i_err.copy()

    @property
    def t_last(self) -> Optional[Any]:
        return self._t_last

    @property
    def is_running(self) -> bool:
        return self._t_last is not None

    # ------------------------------------------------------------------ gains
    def _gain_vector(self, gain: GainValue, name: str) -> np.ndarray:
        if np.ndim(gain) == 0:
            return np.full(self._dim, float(gain), dtype=float)
        vec = np.array(gain, dtype=float)
        if vec.shape != (self._dim,):
            raise ValueError(f"{name} must be a scalar or length-{self._dim} vector; got shape {vec.shape}")
        return vec

    def set_kp(self, kp: GainValue) -> None:
        """Set proportional gains; a scalar applies to every tangent axis."""
        self._kp = self._gain_vector(kp, "kp")

    def set_kd(self, kd: GainValue) -> None:
        """Set derivative gains; a scalar applies to every tangent axis."""
        self._kd = self._gain_vector(kd, "kd")

    def set_ki(self, ki: GainValue) -> None:
        """Set integral gains; a scalar applies to every tangent axis."""
        self._ki = self._gain_vector(ki, "ki")

    def reset_integral(self) -> None:
        """Zero the integral state. The last time stamp is kept."""
        self._i_err[:] = 0.0

    # ------------------------------------------------------------------ reference
    def set_xdes(self, x_des: Any, t0: Optional[Any] = None) -> None:
        """
        Set the desired trajectory.

        Args:
            x_des: either a function from time to ``(position, velocity,
                acceleration)``, or a curve exposing ``eval(t, vel, acc)``.
                For a constant target the velocity and acceleration can be
                zero, see :func:`~liectrl.control.trajectory.constant_trajectory`.
            t0: curve start time, so that the desired state at time ``t`` is
                the curve evaluated at ``t - t0``.  Required for curves,
                rejected for plain functions.

        An object that is both callable and a curve is stored as a function
        when ``t0`` is omitted and wrapped as a curve when ``t0`` is given.
        """
        if t0 is None and callable(x_des):
            self._x_des = x_des
        elif hasattr(x_des, "eval"):
            if t0 is None:
                raise TypeError("set_xdes() requires t0 when given a curve")
            curve_dim = getattr(x_des, "dim", self._dim)
            if curve_dim != self._dim:
                raise ValueError(f"Curve dimension {curve_dim} does not match group dimension {self._dim}")
            self._x_des = curve_trajectory(x_des, t0, self._dim)
        elif callable(x_des):
            raise TypeError("t0 is only meaningful when set_xdes() is given a curve")
        else:
            raise TypeError(f"Desired trajectory must be callable or a curve; got {type(x_des).__name__}")

    # ------------------------------------------------------------------ runtime
    def __call__(self, t: Any, g: G, v: np.ndarray) -> np.ndarray:
        """
        Calculate the control input.

        Args:
            t: current time; any type whose differences convert to seconds.
            g: current state.
            v: current body velocity.

        Returns:
            Commanded body acceleration.
        """
        g_des, v_des, a_des = TrajectoryPoint(*self._x_des(t))

        g_err = np.asarray(g_des - g, dtype=float)

        if self._t_last is not None and t > self._t_last:
            dt = duration_to_seconds(t - self._t_last)
            self._i_err += dt * g_err
            saturated = np.abs(self._i_err) > self._params.windup_limit
            if np.any(saturated):
                LOG.debug("Integral state saturated on axes %s", np.flatnonzero(saturated).tolist())
            self._i_err = np.clip(self._i_err, -self._params.windup_limit, self._params.windup_limit)
        elif self._t_last is not None:
            LOG.debug("Time %r does not advance past %r; integral step skipped", t, self._t_last)
        self._t_last = t

        return (
            np.asarray(a_des, dtype=float)
            + self._kp * g_err
            + self._kd * (np.asarray(v_des, dtype=float) - np.asarray(v, dtype=float))
            + self._ki * self._i_err
        )


__all__ = ["LiePID"]
