"""
Configuration helpers and defaults for the Lie group PID controller.

The controller takes a single construction-time parameter (the anti-windup
limit) and three gain vectors that may be changed at any time.  The defaults
in this module reproduce a pure PD law (kp = kd = 1, ki = 0) with no integral
clamping.  Deployments can override them through environment variables, which
is how the demo script and on-robot launch files pass tuning values around.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

if TYPE_CHECKING:
    from liectrl.control.pid import LiePID

GainValue = Union[float, Sequence[float]]

WINDUP_LIMIT_ENV = "LIECTRL_WINDUP_LIMIT"
KP_ENV = "LIECTRL_KP"
KD_ENV = "LIECTRL_KD"
KI_ENV = "LIECTRL_KI"


@dataclass(frozen=True)
class PIDParams:
    """Construction-time parameters of the PID controller."""

    # maximal absolute value of every integral state component
    windup_limit: float = math.inf

    def __post_init__(self) -> None:
        limit = float(self.windup_limit)
        if math.isnan(limit) or limit < 0.0:
            raise ValueError(f"windup_limit must be non-negative; got {self.windup_limit!r}")
        object.__setattr__(self, "windup_limit", limit)


@dataclass(frozen=True)
class ControlGains:
    """Proportional, derivative and integral gains, scalar or per tangent axis."""

    kp: GainValue = 1.0
    kd: GainValue = 1.0
    ki: GainValue = 0.0

    def apply(self, controller: "LiePID") -> None:
        controller.set_kp(self.kp)
        controller.set_kd(self.kd)
        controller.set_ki(self.ki)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be a number; got {raw!r}") from exc


def build_default_params(windup_limit: Optional[float] = None) -> PIDParams:
    """
    Construct the controller parameters.

    Args:
        windup_limit: explicit limit; when omitted ``LIECTRL_WINDUP_LIMIT`` is
            consulted and, failing that, no clamping is applied.

    Returns:
        PIDParams: validated parameters.
    """

    if windup_limit is None:
        windup_limit = _env_float(WINDUP_LIMIT_ENV, math.inf)
    return PIDParams(windup_limit=windup_limit)


def build_default_gains() -> ControlGains:
    """Scalar gains from ``LIECTRL_KP``/``LIECTRL_KD``/``LIECTRL_KI``, else the PD defaults."""

    return ControlGains(
        kp=_env_float(KP_ENV, 1.0),
        kd=_env_float(KD_ENV, 1.0),
        ki=_env_float(KI_ENV, 0.0),
    )


__all__ = [
    "GainValue",
    "PIDParams",
    "ControlGains",
    "WINDUP_LIMIT_ENV",
    "KP_ENV",
    "KD_ENV",
    "KI_ENV",
    "build_default_params",
    "build_default_gains",
]
