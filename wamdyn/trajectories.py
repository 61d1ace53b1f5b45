"""Joint-space reference trajectories producing position, velocity and acceleration."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


@dataclass(frozen=True)
class TrajectorySample:
    """Reference position, velocity and acceleration at one instant."""

    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray


def _vector(values, name: str) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    if arr.size == 0:
        raise ValueError(f"{name} must not be empty")
    return arr


@dataclass
class SinJpTrajectory:
    """Cosine oscillation around a start pose: p(t) = A cos(2 pi f t) - A + p0."""

    start_pose: np.ndarray
    amplitude: np.ndarray
    frequency: float

    def __post_init__(self) -> None:
        self.start_pose = _vector(self.start_pose, "start_pose")
        self.amplitude = _vector(self.amplitude, "amplitude")
        if self.start_pose.shape != self.amplitude.shape:
            raise ValueError("start_pose and amplitude must have the same length")
        self.frequency = float(self.frequency)

    def evaluate(self, t: float) -> TrajectorySample:
        omega = 2 * math.pi * self.frequency
        phase = omega * t
        a = self.amplitude
        return TrajectorySample(
            position=a * math.cos(phase) - a + self.start_pose,
            velocity=-a * omega * math.sin(phase),
            acceleration=-a * omega**2 * math.cos(phase),
        )


@dataclass
class ConstVelTrajectory:
    """Straight-line motion at constant joint velocity from a start pose."""

    start_pose: np.ndarray
    velocity: np.ndarray
    _zero: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.start_pose = _vector(self.start_pose, "start_pose")
        self.velocity = _vector(self.velocity, "velocity")
        if self.start_pose.shape != self.velocity.shape:
            raise ValueError("start_pose and velocity must have the same length")
        self._zero = np.zeros_like(self.start_pose)

    def evaluate(self, t: float) -> TrajectorySample:
        return TrajectorySample(
            position=self.velocity * t + self.start_pose,
            velocity=self.velocity.copy(),
            acceleration=self._zero.copy(),
        )