"""
State-space groups for the controller.

``base`` declares the protocol a group type must satisfy.  ``euclidean`` and
``so2`` are dependency-free groups; ``pinocchio_groups`` (SO(3), SE(3)) is
imported explicitly since it needs Pinocchio.
"""

from .base import LieGroup, as_tangent
from .euclidean import R1, R2, R3, Euclidean, euclidean
from .so2 import SO2, wrap_angle

__all__ = [
    "LieGroup",
    "as_tangent",
    "Euclidean",
    "euclidean",
    "R1",
    "R2",
    "R3",
    "SO2",
    "wrap_angle",
]
