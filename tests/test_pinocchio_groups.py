import numpy as np
import pytest

pin = pytest.importorskip("pinocchio")

from liectrl.control import BodyAccelerationPlant, LiePID, constant_trajectory  # noqa: E402
from liectrl.lie.pinocchio_groups import SE3, SO3  # noqa: E402


def test_so3_difference_from_identity_is_log():
    w = np.array([0.3, -0.2, 0.5])

    np.testing.assert_allclose(SO3.exp(w) - SO3.identity(), w, atol=1e-12)


def test_so3_plus_minus_consistency():
    a = SO3.exp(np.array([0.1, 1.2, -0.4]))
    b = SO3.exp(np.array([-0.7, 0.2, 0.9]))

    np.testing.assert_allclose((a + (b - a)).rotation, b.rotation, atol=1e-10)
    np.testing.assert_allclose((a * a.inverse()).rotation, np.eye(3), atol=1e-12)


def test_so3_from_quaternion_normalises():
    g = SO3.from_quaternion(2.0, 0.0, 0.0, 0.0)

    np.testing.assert_allclose(g.rotation, np.eye(3), atol=1e-12)


def test_so3_rejects_bad_matrix():
    with pytest.raises(ValueError):
        SO3(np.eye(2))


def test_se3_pure_translation_difference():
    a = SE3.from_rotation_translation(np.eye(3), [1.0, 2.0, 3.0])
    b = SE3.from_rotation_translation(np.eye(3), [0.5, 0.0, -1.0])

    np.testing.assert_allclose(a - b, [0.5, 2.0, 4.0, 0.0, 0.0, 0.0], atol=1e-12)


def test_se3_plus_minus_consistency():
    a = SE3.exp(np.array([1.0, 0.5, -0.2, 0.1, 0.2, 0.3]))
    b = SE3.exp(np.array([-0.3, 0.0, 0.8, -0.6, 0.1, 0.05]))

    c = a + (b - a)

    np.testing.assert_allclose(c.rotation, b.rotation, atol=1e-10)
    np.testing.assert_allclose(c.translation, b.translation, atol=1e-10)


def test_se3_placement_is_copied():
    g = SE3.from_rotation_translation(np.eye(3), [1.0, 0.0, 0.0])
    placement = g.placement
    placement.translation = np.array([9.0, 9.0, 9.0])

    np.testing.assert_allclose(g.translation, [1.0, 0.0, 0.0])


def test_pid_proportional_on_se3():
    target = SE3.exp(np.array([0.2, -0.1, 0.4, 0.3, 0.0, -0.2]))
    current = SE3.exp(np.array([0.0, 0.5, 0.0, 0.0, 0.1, 0.0]))
    pid = LiePID(SE3)
    pid.set_kd(0.0)
    pid.set_xdes(constant_trajectory(target))

    u = pid(0.0, current, np.zeros(6))

    np.testing.assert_allclose(u, target - current)


def test_closed_loop_converges_on_se3():
    target = SE3.exp(np.array([1.0, 0.5, -0.2, 0.1, 0.2, 0.3]))
    pid = LiePID(SE3)
    pid.set_kp(2.0)
    pid.set_kd(2.0)
    pid.set_xdes(constant_trajectory(target))
    plant = BodyAccelerationPlant(SE3.identity())

    dt = 0.01
    for k in range(2000):
        plant.step(pid(k * dt, plant.g, plant.v), dt)

    np.testing.assert_allclose(target - plant.g, np.zeros(6), atol=1e-4)
