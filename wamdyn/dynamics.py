"""Inverse-dynamics feed-forward models for the WAM arm.

Each model turns a joint state into a vector of joint torques of length
``dof``. The joints that a model does not cover stay at zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .params import beta, pi_2d_gravity, pi_4d_gravity
from .regressors import y_2d_gravity, y_4d_gravity
from .w_regressor import calculate_w

_MODEL_JOINTS = 4


def _check_dof(dof: int) -> int:
    dof = int(dof)
    if dof < _MODEL_JOINTS:
        raise ValueError(f"dof must be at least {_MODEL_JOINTS}, got {dof}")
    return dof


def _check_params(values, size: int) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.shape != (size,):
        raise ValueError(f"params must hold exactly {size} values, got {arr.size}")
    return arr


def _leading_joints(values, dof: int, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (dof,):
        raise ValueError(f"{name} must hold exactly {dof} joint values, got {arr.size}")
    return arr[:_MODEL_JOINTS]


@dataclass
class Dynamics2Dof:
    """Feed-forward for joints 2 and 4 without gravity (inertia, Coriolis, friction)."""

    dof: int = 7
    params: np.ndarray = field(default_factory=pi_4d_gravity)

    def __post_init__(self) -> None:
        self.dof = _check_dof(self.dof)
        self.params = _check_params(self.params, 8)

    def feedforward(self, jp, jv, ja) -> np.ndarray:
        """Joint torques of length ``dof``; only joints 2 and 4 are non-zero."""
        theta = _leading_joints(jp, self.dof, "jp")
        thetad = _leading_joints(jv, self.dof, "jv")
        thetadd = _leading_joints(ja, self.dof, "ja")
        torque2, torque4 = y_4d_gravity(theta, thetad, thetadd) @ self.params
        out = np.zeros(self.dof)
        out[1] = torque2
        out[3] = torque4
        return out


@dataclass
class GravityDynamics:
    """Gravity torques for joints 2 and 4, from joint positions alone."""

    dof: int = 7
    params: np.ndarray = field(default_factory=pi_2d_gravity)

    def __post_init__(self) -> None:
        self.dof = _check_dof(self.dof)
        self.params = _check_params(self.params, 4)

    def feedforward(self, jp) -> np.ndarray:
        """Joint torques of length ``dof``; only joints 2 and 4 are non-zero."""
        theta = _leading_joints(jp, self.dof, "jp")
        torque2, torque4 = y_2d_gravity(theta) @ self.params
        out = np.zeros(self.dof)
        out[1] = torque2
        out[3] = torque4
        return out


@dataclass
class Dynamics4Dof:
    """Full rigid-body feed-forward for joints 1-4 using the base regressor."""

    dof: int = 7
    params: np.ndarray = field(default_factory=beta)

    def __post_init__(self) -> None:
        self.dof = _check_dof(self.dof)
        self.params = _check_params(self.params, 30)

    def feedforward(self, jp, jv, ja) -> np.ndarray:
        """Joint torques of length ``dof``; joints beyond the fourth are zero."""
        q = _leading_joints(jp, self.dof, "jp")
        dq = _leading_joints(jv, self.dof, "jv")
        ddq = _leading_joints(ja, self.dof, "ja")
        out = np.zeros(self.dof)
        out[:_MODEL_JOINTS] = calculate_w(q, dq, ddq) @ self.params
        return out