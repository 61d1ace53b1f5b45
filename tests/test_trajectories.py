import numpy as np
import pytest

from wamdyn.trajectories import ConstVelTrajectory, SinJpTrajectory, TrajectorySample

START = np.array([0.0, 0.2, 0.0, -0.1, 0.0, 0.0, 0.0])
AMP = np.array([0.0, 0.4, 0.0, -0.4, 0.0, 0.0, 0.0])


def test_sin_starts_at_start_pose_at_rest():
    traj = SinJpTrajectory(START, AMP, 0.1)
    sample = traj.evaluate(0.0)
    assert isinstance(sample, TrajectorySample)
    np.testing.assert_allclose(sample.position, START)
    np.testing.assert_allclose(sample.velocity, np.zeros(7), atol=1e-15)


def test_sin_is_periodic():
    f = 0.25
    traj = SinJpTrajectory(START, AMP, f)
    a = traj.evaluate(1.3)
    b = traj.evaluate(1.3 + 1.0 / f)
    np.testing.assert_allclose(a.position, b.position, atol=1e-12)
    np.testing.assert_allclose(a.velocity, b.velocity, atol=1e-12)
    np.testing.assert_allclose(a.acceleration, b.acceleration, atol=1e-12)


def test_sin_half_period_reaches_far_extreme():
    f = 0.5
    traj = SinJpTrajectory(START, AMP, f)
    np.testing.assert_allclose(traj.evaluate(1.0 / (2 * f)).position, START - 2 * AMP, atol=1e-12)


@pytest.mark.parametrize("t", [0.0, 0.7, 2.3, 5.1])
def test_sin_derivatives_match_finite_differences(t):
    traj = SinJpTrajectory(START, AMP, 0.1)
    h = 1e-5
    before, now, after = traj.evaluate(t - h), traj.evaluate(t), traj.evaluate(t + h)
    np.testing.assert_allclose((after.position - before.position) / (2 * h), now.velocity, atol=1e-7)
    np.testing.assert_allclose((after.velocity - before.velocity) / (2 * h), now.acceleration, atol=1e-7)


def test_sin_stays_within_range():
    traj = SinJpTrajectory(START, AMP, 0.3)
    offsets = np.array(
        [traj.evaluate(t).position - START + AMP for t in np.linspace(0.0, 10.0, 101)]
    )
    largest = np.max(np.abs(offsets), axis=0)
    np.testing.assert_array_less(largest, np.abs(AMP) + 1e-12)


def test_sin_length_mismatch_rejected():
    with pytest.raises(ValueError):
        SinJpTrajectory(START, AMP[:4], 0.1)


def test_const_vel_linear_motion():
    v = np.array([0.1, -0.2, 0.0, 0.3, 0.0, 0.0, 0.05])
    traj = ConstVelTrajectory(START, v)
    for t in (0.0, 1.5, 4.0):
        sample = traj.evaluate(t)
        np.testing.assert_allclose(sample.position, START + v * t)
        np.testing.assert_allclose(sample.velocity, v)
        np.testing.assert_allclose(sample.acceleration, np.zeros(7))


def test_const_vel_samples_are_independent():
    v = np.ones(7)
    traj = ConstVelTrajectory(START, v)
    first = traj.evaluate(1.0)
    first.velocity[:] = 99.0
    first.acceleration[:] = 99.0
    second = traj.evaluate(1.0)
    np.testing.assert_allclose(second.velocity, v)
    np.testing.assert_allclose(second.acceleration, np.zeros(7))


def test_const_vel_length_mismatch_rejected():
    with pytest.raises(ValueError):
        ConstVelTrajectory(START, np.ones(3))


def test_empty_start_rejected():
    with pytest.raises(ValueError):
        ConstVelTrajectory([], [])