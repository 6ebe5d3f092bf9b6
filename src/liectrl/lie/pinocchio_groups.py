from __future__ import annotations

from typing import ClassVar, Optional

import numpy as np

try:
    import pinocchio as pin
except ImportError as exc:  # pragma: no cover - executed only without Pinocchio
    raise ImportError(
        "Pinocchio is required for liectrl's SO(3)/SE(3) groups. "
        "Install it with `pip install pin` before using them."
    ) from exc

from liectrl.lie.base import as_tangent


class SO3:
    """
    3-D rotations backed by Pinocchio's exponential and logarithm maps.

    Tangent vectors are body-frame angular displacements ``[wx, wy, wz]``.
    """

    __slots__ = ("_rotation",)

    dim: ClassVar[int] = 3

    def __init__(self, rotation: Optional[np.ndarray] = None) -> None:
        if rotation is None:
            self._rotation = np.eye(3)
            return
        rotation = np.array(rotation, dtype=float)
        if rotation.shape != (3, 3):
            raise ValueError(f"rotation must be 3x3; got shape {rotation.shape}")
        self._rotation = rotation

    @classmethod
    def identity(cls) -> "SO3":
        return cls()

    @classmethod
    def exp(cls, tangent: np.ndarray) -> "SO3":
        return cls(pin.exp3(as_tangent(tangent, cls.dim)))

    @classmethod
    def from_quaternion(cls, w: float, x: float, y: float, z: float) -> "SO3":
        quat = pin.Quaternion(float(w), float(x), float(y), float(z)).normalized()
        return cls(quat.matrix())

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    def log(self) -> np.ndarray:
        return np.asarray(pin.log3(self._rotation), dtype=float).copy()

    def inverse(self) -> "SO3":
        return SO3(self._rotation.T)

    def __mul__(self, other: "SO3") -> "SO3":
        if not isinstance(other, SO3):
            return NotImplemented
        return SO3(self._rotation @ other._rotation)

    def __sub__(self, other: "SO3") -> np.ndarray:
        if not isinstance(other, SO3):
            return NotImplemented
        return np.asarray(pin.log3(other._rotation.T @ self._rotation), dtype=float).copy()

    def __add__(self, tangent: np.ndarray) -> "SO3":
        return SO3(self._rotation @ pin.exp3(as_tangent(tangent, self.dim)))

    def __repr__(self) -> str:
        return f"SO3(log={self.log().tolist()})"


class SE3:
    """
    Rigid-body poses wrapping :class:`pinocchio.SE3`.

    Tangent vectors follow Pinocchio's ordering ``[vx, vy, vz, wx, wy, wz]``
    (linear part first) and are expressed in the body frame.
    """

    __slots__ = ("_placement",)

    dim: ClassVar[int] = 6

    def __init__(self, placement: Optional["pin.SE3"] = None) -> None:
        if placement is None:
            placement = pin.SE3.Identity()
        self._placement = pin.SE3(placement)

    @classmethod
    def identity(cls) -> "SE3":
        return cls()

    @classmethod
    def exp(cls, tangent: np.ndarray) -> "SE3":
        return cls(pin.exp6(as_tangent(tangent, cls.dim)))

    @classmethod
    def from_rotation_translation(cls, rotation: np.ndarray, translation: np.ndarray) -> "SE3":
        rotation = np.asarray(rotation, dtype=float)
        if rotation.shape != (3, 3):
            raise ValueError(f"rotation must be 3x3; got shape {rotation.shape}")
        translation = as_tangent(translation, 3, name="translation")
        return cls(pin.SE3(rotation, translation))

    @property
    def placement(self) -> "pin.SE3":
        return pin.SE3(self._placement)

    @property
    def rotation(self) -> np.ndarray:
        return self._placement.rotation.copy()

    @property
    def translation(self) -> np.ndarray:
        return self._placement.translation.copy()

    def log(self) -> np.ndarray:
        return np.asarray(pin.log6(self._placement).vector, dtype=float).copy()

    def inverse(self) -> "SE3":
        return SE3(self._placement.inverse())

    def __mul__(self, other: "SE3") -> "SE3":
        if not isinstance(other, SE3):
            return NotImplemented
        return SE3(self._placement * other._placement)

    def __sub__(self, other: "SE3") -> np.ndarray:
        if not isinstance(other, SE3):
            return NotImplemented
        delta = other._placement.actInv(self._placement)
        return np.asarray(pin.log6(delta).vector, dtype=float).copy()

    def __add__(self, tangent: np.ndarray) -> "SE3":
        return SE3(self._placement * pin.exp6(as_tangent(tangent, self.dim)))

    def __repr__(self) -> str:
        return f"SE3(translation={self.translation.tolist()}, log_rotation={pin.log3(self.rotation).tolist()})"


__all__ = ["SO3", "SE3"]
