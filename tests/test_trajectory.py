import datetime

import numpy as np
import pytest

from liectrl.control.trajectory import (
    TrajectoryPoint,
    constant_trajectory,
    curve_trajectory,
    duration_to_seconds,
    identity_trajectory,
)
from liectrl.lie import R2, SO2


class CircleCurve:
    """Unit-rate rotation on SO2 reporting a fixed angular acceleration."""

    dim = 1

    def eval(self, t, vel, acc):
        vel[0] = 1.0
        acc[0] = -0.25
        return SO2(t)


@pytest.mark.parametrize(
    "delta, expected",
    [
        (2, 2.0),
        (0.125, 0.125),
        (datetime.timedelta(seconds=1, microseconds=500000), 1.5),
        (np.timedelta64(2500, "ms"), 2.5),
        (np.timedelta64(3, "us"), 3e-6),
        (np.float64(-0.5), -0.5),
    ],
)
def test_duration_to_seconds(delta, expected):
    assert duration_to_seconds(delta) == pytest.approx(expected)


def test_constant_trajectory_defaults_to_zero_rates():
    target = R2([1.0, 2.0])
    point = constant_trajectory(target)(42.0)

    assert isinstance(point, TrajectoryPoint)
    assert point.g == target
    np.testing.assert_array_equal(point.v, np.zeros(2))
    np.testing.assert_array_equal(point.a, np.zeros(2))


def test_constant_trajectory_returns_fresh_buffers():
    trajectory = constant_trajectory(R2.identity(), v=[1.0, 0.0])
    first = trajectory(0.0)
    first.v[:] = 99.0

    np.testing.assert_array_equal(trajectory(1.0).v, [1.0, 0.0])


def test_constant_trajectory_rejects_wrong_shape():
    with pytest.raises(ValueError):
        constant_trajectory(R2.identity(), a=[1.0, 2.0, 3.0])


def test_identity_trajectory():
    g, v, a = identity_trajectory(SO2)(5.0)

    assert g == SO2.identity()
    np.testing.assert_array_equal(v, [0.0])
    np.testing.assert_array_equal(a, [0.0])


def test_curve_trajectory_passes_curve_output_through():
    trajectory = curve_trajectory(CircleCurve(), t0=1.0)

    g, v, a = trajectory(1.75)

    assert g.angle == pytest.approx(0.75)
    np.testing.assert_array_equal(v, [1.0])
    np.testing.assert_array_equal(a, [-0.25])


def test_curve_trajectory_with_datetime_origin():
    t0 = datetime.datetime(2026, 3, 1)
    trajectory = curve_trajectory(CircleCurve(), t0=t0)

    g, _, _ = trajectory(t0 + datetime.timedelta(milliseconds=500))

    assert g.angle == pytest.approx(0.5)


def test_curve_trajectory_explicit_dimension():
    class Unsized:
        def eval(self, t, vel, acc):
            acc[:] = t
            return R2([t, -t])

    g, v, a = curve_trajectory(Unsized(), t0=0.0, dim=2)(1.5)

    assert g == R2([1.5, -1.5])
    np.testing.assert_array_equal(v, [0.0, 0.0])
    np.testing.assert_array_equal(a, [1.5, 1.5])
