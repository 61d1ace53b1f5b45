"""Linear-in-parameters regressor matrices for joints 2 and 4 of the WAM."""

from __future__ import annotations

import math

import numpy as np

GRAVITY = 9.81


def _joint_vector(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (4,):
        raise ValueError(f"{name} must hold exactly 4 joint values, got {arr.size}")
    return arr


def _gravity_terms(theta: np.ndarray) -> tuple[float, float, float, float]:
    t2, t4 = theta[1], theta[3]
    return (
        GRAVITY * math.sin(t4 + t2),
        -GRAVITY * math.cos(t4 + t2),
        -math.cos(t2) * GRAVITY,
        math.sin(t2) * GRAVITY,
    )


def _inertial_terms(theta, thetad, thetadd):
    """Shared inertia/Coriolis columns for both rows."""
    s4, c4 = math.sin(theta[3]), math.cos(theta[3])
    td1, td3 = thetad[1], thetad[3]
    tdd1, tdd3 = thetadd[1], thetadd[3]
    row0 = (
        2.0 * c4 * td3 * td1 + c4 * td3**2 + 2.0 * s4 * tdd1 + s4 * tdd3,
        2.0 * c4 * tdd1 - s4 * td3**2 - 2.0 * s4 * td3 * td1 + c4 * tdd3,
        tdd3,
    )
    row1 = (
        s4 * tdd1 - c4 * td1**2,
        s4 * td1**2 + c4 * tdd1,
        tdd1 + tdd3,
    )
    return row0, row1


def y_2d_gravity(theta) -> np.ndarray:
    """Gravity-only regressor, shape (2, 4)."""
    theta = _joint_vector(theta, "theta")
    g14, g15, g17, g18 = _gravity_terms(theta)
    return np.array(
        [
            [g14, g15, g17, g18],
            [g14, g15, 0.0, 0.0],
        ]
    )


def y_4d(theta, thetad, thetadd) -> np.ndarray:
    """Full regressor including gravity and friction, shape (2, 12)."""
    theta = _joint_vector(theta, "theta")
    thetad = _joint_vector(thetad, "thetad")
    thetadd = _joint_vector(thetadd, "thetadd")
    (a0, a1, a2), (b0, b1, b2) = _inertial_terms(theta, thetad, thetadd)
    g14, g15, g17, g18 = _gravity_terms(theta)
    td1, td3 = thetad[1], thetad[3]
    return np.array(
        [
            [a0, a1, a2, g14, g15, thetadd[1], g17, g18,
             math.tanh(20 * td1), td1, 0.0, 0.0],
            [b0, b1, b2, g14, g15, 0.0, 0.0, 0.0,
             0.0, 0.0, math.tanh(20 * td3), td3],
        ]
    )


def y_4d_gravity(theta, thetad, thetadd) -> np.ndarray:
    """Regressor without gravity columns, shape (2, 8)."""
    theta = _joint_vector(theta, "theta")
    thetad = _joint_vector(thetad, "thetad")
    thetadd = _joint_vector(thetadd, "thetadd")
    (a0, a1, a2), (b0, b1, b2) = _inertial_terms(theta, thetad, thetadd)
    td1, td3 = thetad[1], thetad[3]
    return np.array(
        [
            [a0, a1, a2, thetadd[1], math.tanh(20 * td1), td1, 0.0, 0.0],
            [b0, b1, b2, 0.0, 0.0, 0.0, math.tanh(20 * td3), td3],
        ]
    )