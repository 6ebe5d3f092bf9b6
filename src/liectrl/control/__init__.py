"""Control-layer exports."""

from .pid import LiePID
from .plant import BodyAccelerationPlant
from .trajectory import (
    Curve,
    TrajectoryPoint,
    constant_trajectory,
    curve_trajectory,
    duration_to_seconds,
    identity_trajectory,
)

__all__ = [
    "LiePID",
    "BodyAccelerationPlant",
    "Curve",
    "TrajectoryPoint",
    "constant_trajectory",
    "curve_trajectory",
    "duration_to_seconds",
    "identity_trajectory",
]
