import numpy as np
import pytest

from wamdyn.ctc import (
    CTC_JT_LIMITS,
    CTC_LIMIT_SCALE,
    GravityCompController,
    JsCTCController,
)
from wamdyn.controllers import saturate_jt

ZERO7 = np.zeros(7)


def test_gravity_comp_zeroes_joints_two_and_four():
    ctrl = GravityCompController()
    ff = [0.0, 1.5, 0.0, -0.5, 0.0, 0.0, 0.0]
    grav = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
    out = ctrl.compute(ff, grav)
    np.testing.assert_allclose(out, [1.0, 1.5, 3.0, -0.5, 5.0, 6.0, 7.0])
    np.testing.assert_allclose(ctrl.last_output, out)


def test_gravity_comp_does_not_modify_input():
    grav = np.array([1.0, 2.0, 3.0, 4.0])
    GravityCompController().compute(np.zeros(4), grav)
    np.testing.assert_allclose(grav, [1.0, 2.0, 3.0, 4.0])


def test_gravity_comp_length_mismatch():
    with pytest.raises(ValueError):
        GravityCompController().compute(np.zeros(7), np.zeros(6))


def test_gravity_comp_too_few_joints():
    with pytest.raises(ValueError):
        GravityCompController().compute(np.zeros(3), np.zeros(3))


def test_ctc_feedforward_ignored_by_default():
    ctrl = JsCTCController()
    out = ctrl.compute(ZERO7, ZERO7, ZERO7, ZERO7, np.full(7, 100.0), ZERO7)
    np.testing.assert_allclose(out, ZERO7)


def test_ctc_feedforward_weight_applies():
    ctrl = JsCTCController(feedforward_weight=1.0)
    ff = np.arange(7, dtype=float)
    out = ctrl.compute(ZERO7, ZERO7, ZERO7, ZERO7, ff, ZERO7)
    np.testing.assert_allclose(out, ff)


def test_ctc_gravity_masked():
    ctrl = JsCTCController()
    grav = np.ones(7)
    out = ctrl.compute(ZERO7, ZERO7, ZERO7, ZERO7, ZERO7, grav)
    np.testing.assert_allclose(out, [1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0])


def test_ctc_pd_term_with_default_gains():
    ctrl = JsCTCController()
    jp_ref = np.full(7, 0.1)
    jv_ref = np.full(7, 1.0)
    out = ctrl.compute(jp_ref, jv_ref, ZERO7, ZERO7, ZERO7, ZERO7)
    expected = 0.1 * np.array([900, 2500, 600, 500, 50, 50, 8]) + np.array(
        [10, 20, 5, 2, 0.5, 0.5, 0.05]
    )
    np.testing.assert_allclose(out, expected)


def test_ctc_custom_gains():
    ctrl = JsCTCController(kp=[1, 2, 3, 4], kd=[0, 0, 0, 0])
    out = ctrl.compute([1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0], [5, 5, 5, 5],
                       [0, 0, 0, 0], [0, 0, 0, 0])
    np.testing.assert_allclose(out, [1, 2, 3, 4])


def test_ctc_requires_four_joints():
    with pytest.raises(ValueError):
        JsCTCController(kp=[1, 2, 3], kd=[1, 2, 3])


def test_ctc_wrong_input_length():
    ctrl = JsCTCController()
    with pytest.raises(ValueError):
        ctrl.compute(np.zeros(6), ZERO7, ZERO7, ZERO7, ZERO7, ZERO7)


def test_ctc_output_saturated_within_limits():
    ctrl = JsCTCController()
    out = ctrl.compute(np.full(7, 1.0), ZERO7, ZERO7, ZERO7, ZERO7, ZERO7)
    limits = CTC_LIMIT_SCALE * np.array(CTC_JT_LIMITS)
    sat = saturate_jt(out, limits)
    assert np.all(np.abs(sat) <= limits + 1e-12)
    assert np.isclose(np.max(np.abs(sat) / limits), 1.0)
    np.testing.assert_allclose(ctrl.last_output, out)