import numpy as np
import pytest

from wamdyn import params
from wamdyn.regressors import y_2d_gravity, y_4d, y_4d_gravity

STATES = [
    ([0.1, 0.4, -0.2, 0.7], [0.3, -0.5, 0.2, 1.1], [0.05, 0.8, -0.4, -0.6]),
    ([0.0, -1.2, 0.5, 2.0], [0.0, 0.02, 0.0, -0.03], [1.0, -0.2, 0.1, 0.3]),
    ([1.5, 0.9, 0.3, -0.8], [-1.0, 2.0, 0.5, 0.0], [0.0, 0.0, 0.0, 0.0]),
]


def test_shapes():
    q, dq, ddq = STATES[0]
    assert y_2d_gravity(q).shape == (2, 4)
    assert y_4d(q, dq, ddq).shape == (2, 12)
    assert y_4d_gravity(q, dq, ddq).shape == (2, 8)


def test_gravity_at_zero_pose():
    y = y_2d_gravity([0.0, 0.0, 0.0, 0.0])
    assert y[0, 1] == pytest.approx(-9.81)
    assert y[0, 2] == pytest.approx(-9.81)
    assert y[0, 0] == pytest.approx(0.0)


@pytest.mark.parametrize("q, dq, ddq", STATES)
def test_y4d_gravity_columns_match_gravity_regressor(q, dq, ddq):
    full = y_4d(q, dq, ddq)
    grav = y_2d_gravity(q)
    np.testing.assert_allclose(full[:, [3, 4, 6, 7]], grav)


@pytest.mark.parametrize("q, dq, ddq", STATES)
def test_y4d_gravity_is_y4d_without_gravity_columns(q, dq, ddq):
    full = y_4d(q, dq, ddq)
    reduced = y_4d_gravity(q, dq, ddq)
    np.testing.assert_allclose(full[:, [0, 1, 2, 5, 8, 9, 10, 11]], reduced)


@pytest.mark.parametrize("q, dq, ddq", STATES)
def test_gravity_rows_share_link_columns(q, dq, ddq):
    y = y_2d_gravity(q)
    np.testing.assert_allclose(y[0, :2], y[1, :2])
    np.testing.assert_allclose(y[1, 2:], [0.0, 0.0])


def test_joints_one_and_three_do_not_matter():
    q, dq, ddq = STATES[0]
    q2 = list(q)
    dq2 = list(dq)
    ddq2 = list(ddq)
    q2[0], q2[2] = 3.0, -3.0
    dq2[0], dq2[2] = 7.0, -7.0
    ddq2[0], ddq2[2] = 5.0, -5.0
    np.testing.assert_allclose(y_4d(q, dq, ddq), y_4d(q2, dq2, ddq2))


def test_static_pose_has_no_nongravity_torque():
    zero = np.zeros(4)
    q = [0.0, 0.6, 0.0, -0.4]
    torque = y_4d_gravity(q, zero, zero) @ params.pi_4d_gravity()
    np.testing.assert_allclose(torque, np.zeros(2), atol=1e-12)


def test_static_pose_torque_equals_gravity_part():
    zero = np.zeros(4)
    q = [0.0, 0.6, 0.0, -0.4]
    full = y_4d(q, zero, zero)
    grav = y_2d_gravity(q)
    p = np.arange(1.0, 13.0)
    np.testing.assert_allclose(full @ p, grav @ p[[3, 4, 6, 7]])


def test_friction_is_odd_in_velocity():
    q, dq, ddq = STATES[0]
    a = y_4d_gravity(q, dq, np.zeros(4))
    b = y_4d_gravity(q, -np.asarray(dq), np.zeros(4))
    np.testing.assert_allclose(a[0, 4:6], -b[0, 4:6])
    np.testing.assert_allclose(a[1, 6:8], -b[1, 6:8])


@pytest.mark.parametrize("bad", [[0.0, 0.0, 0.0], [0.0] * 7, []])
def test_wrong_length_rejected(bad):
    with pytest.raises(ValueError):
        y_2d_gravity(bad)
    with pytest.raises(ValueError):
        y_4d(bad, np.zeros(4), np.zeros(4))
    with pytest.raises(ValueError):
        y_4d_gravity(np.zeros(4), bad, np.zeros(4))