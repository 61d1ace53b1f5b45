"""Joint-space computed-torque controllers that use the arm's gravity signal.

Both controllers drop the gravity contribution of joints 2 and 4, because
the identified models supply those joints' torques themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .controllers import _PDController

#: Joints whose measured gravity torque is replaced by the model (0-based).
MODELLED_GRAVITY_JOINTS = (1, 3)
#: Nominal torque limits of the computed-torque experiments, joints 1-7.
CTC_JT_LIMITS = (25.0, 20.0, 15.0, 15.0, 5.0, 5.0, 5.0)
#: Scale applied to :data:`CTC_JT_LIMITS` before saturating.
CTC_LIMIT_SCALE = 2.0

_MIN_JOINTS = max(MODELLED_GRAVITY_JOINTS) + 1


def _masked_gravity(gravity: np.ndarray) -> np.ndarray:
    out = gravity.copy()
    out[list(MODELLED_GRAVITY_JOINTS)] = 0.0
    return out


@dataclass
class JsCTCController(_PDController):
    """Weighted feed-forward plus gravity (joints 2 and 4 removed) plus a PD term.

    The feed-forward weight is zero by default, so the feed-forward input is
    accepted but has no effect on the output.
    """

    feedforward_weight: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.dof < _MIN_JOINTS:
            raise ValueError(f"gains must cover at least {_MIN_JOINTS} joints, got {self.dof}")
        self.feedforward_weight = float(self.feedforward_weight)

    def compute(self, jp_ref, jv_ref, jp, jv, feedforward, gravity) -> np.ndarray:
        """Control torque ``w*ff + g' + Kp (p_ref - p) + Kd (v_ref - v)``."""
        ff = self._joints(feedforward, "feedforward")
        grav = _masked_gravity(self._joints(gravity, "gravity"))
        out = self.feedforward_weight * ff + grav + self._pd(jp_ref, jv_ref, jp, jv)
        self.last_output = out
        return out.copy()


@dataclass
class GravityCompController:
    """Model feed-forward plus measured gravity with joints 2 and 4 removed."""

    last_output: np.ndarray | None = field(default=None, init=False)

    def compute(self, feedforward, gravity) -> np.ndarray:
        """Control torque ``ff + g'`` where ``g'`` has joints 2 and 4 zeroed."""
        ff = np.asarray(feedforward, dtype=float).reshape(-1)
        grav = np.array(gravity, dtype=float).reshape(-1)
        if ff.shape != grav.shape:
            raise ValueError("feedforward and gravity must have the same length")
        if ff.size < _MIN_JOINTS:
            raise ValueError(f"torque vectors must cover at least {_MIN_JOINTS} joints")
        out = ff + _masked_gravity(grav)
        self.last_output = out
        return out.copy()