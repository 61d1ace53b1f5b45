"""Joint-space inverse-dynamics controllers and torque saturation for the WAM."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

#: Proportional gains used by the inverse-dynamics experiments, joints 1-7.
DEFAULT_KP = (900.0, 2500.0, 600.0, 500.0, 50.0, 50.0, 8.0)
#: Damping gains used by the inverse-dynamics experiments, joints 1-7.
DEFAULT_KD = (10.0, 20.0, 5.0, 2.0, 0.5, 0.5, 0.05)
#: Torque limits applied in the inverse-dynamics tracking experiment.
ID_CONTROL_JT_LIMITS = (25.0, 20.0, 15.0, 15.0, 5.0, 5.0, 5.0)
#: Nominal torque limits of the dynamics compensation experiment (scaled by 0.5 there).
COMPENSATION_JT_LIMITS = (50.0, 40.0, 30.0, 30.0, 10.0, 10.0, 10.0)
#: Scale applied to :data:`COMPENSATION_JT_LIMITS` before saturating.
COMPENSATION_LIMIT_SCALE = 0.5


def _vector(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.size == 0:
        raise ValueError(f"{name} must not be empty")
    return arr


def _gain_matrix(values, name: str) -> np.ndarray:
    """Accept a vector of diagonal gains or a square gain matrix."""
    arr = np.array(values, dtype=float)
    if arr.ndim == 1:
        if arr.size == 0:
            raise ValueError(f"{name} must not be empty")
        return np.diag(arr)
    if arr.ndim == 2 and arr.shape[0] == arr.shape[1] and arr.size:
        return arr
    raise ValueError(f"{name} must be a vector or a square matrix, got shape {arr.shape}")


def saturate_jt(x, limit) -> np.ndarray:
    """Scale the torque vector ``x`` uniformly so no joint exceeds its limit.

    The smallest ratio ``limit / |x|`` over all joints is found; when it is
    below one the whole vector is multiplied by it, keeping its direction.
    Otherwise ``x`` is returned unchanged.
    """
    x = _vector(x, "x")
    limit = _vector(limit, "limit")
    if x.shape != limit.shape:
        raise ValueError("x and limit must have the same length")
    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = limit / np.abs(x)
    min_ratio = float(np.min(ratios))
    if min_ratio < 1.0:
        return min_ratio * x
    return x.copy()


@dataclass
class _PDController:
    kp: Any = field(default_factory=lambda: DEFAULT_KP)
    kd: Any = field(default_factory=lambda: DEFAULT_KD)
    last_output: np.ndarray | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.kp = _gain_matrix(self.kp, "kp")
        self.kd = _gain_matrix(self.kd, "kd")
        if self.kp.shape != self.kd.shape:
            raise ValueError("kp and kd must have the same size")

    @property
    def dof(self) -> int:
        return self.kp.shape[0]

    def _joints(self, values, name: str) -> np.ndarray:
        arr = _vector(values, name)
        if arr.shape != (self.dof,):
            raise ValueError(f"{name} must hold exactly {self.dof} joint values, got {arr.size}")
        return arr

    def _pd(self, jp_ref, jv_ref, jp, jv) -> np.ndarray:
        pos_err = self._joints(jp_ref, "jp_ref") - self._joints(jp, "jp")
        vel_err = self._joints(jv_ref, "jv_ref") - self._joints(jv, "jv")
        return self.kp @ pos_err + self.kd @ vel_err


@dataclass
class JsIDController(_PDController):
    """Inverse-dynamics feed-forward minus measured gravity plus a PD term."""

    def compute(self, jp_ref, jv_ref, jp, jv, feedforward, gravity) -> np.ndarray:
        """Control torque ``ff - gravity + Kp (p_ref - p) + Kd (v_ref - v)``."""
        out = (
            self._joints(feedforward, "feedforward")
            - self._joints(gravity, "gravity")
            + self._pd(jp_ref, jv_ref, jp, jv)
        )
        self.last_output = out
        return out.copy()


@dataclass
class DynamicsCompensationController(_PDController):
    """Inverse-dynamics feed-forward plus a PD term, with no gravity input."""

    def compute(self, jp_ref, jv_ref, jp, jv, feedforward) -> np.ndarray:
        """Control torque ``ff + Kp (p_ref - p) + Kd (v_ref - v)``."""
        out = self._joints(feedforward, "feedforward") + self._pd(jp_ref, jv_ref, jp, jv)
        self.last_output = out
        return out.copy()


@dataclass
class Multiplier:
    """Product of two signals: scalar scaling or matrix product."""

    last_output: Any = field(default=None, init=False)

    def compute(self, a, b):
        """Return ``a * b`` when either is a scalar, otherwise ``a @ b``."""
        if np.ndim(a) == 0 or np.ndim(b) == 0:
            result = np.multiply(a, b)
        else:
            result = np.asarray(a, dtype=float) @ np.asarray(b, dtype=float)
        self.last_output = result
        return result