# wamdyn

Identified rigid-body dynamics models, reference trajectories and joint-space
controllers for the first four joints of a seven-joint robot arm. The package
uses only NumPy. Joint vectors are 1-D arrays. Each dynamics regressor is a small
matrix that is multiplied by an identified parameter vector.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `wamdyn.params`

These functions return the identified parameter vectors as new float arrays:

- `pi_2d_gravity()`: shape (4,). Gravity-only model for joints 2 and 4.
- `pi_4d()`: shape (12,). Model for joints 2 and 4 with gravity and friction.
- `pi_4d_gravity()`: shape (8,). Model for joints 2 and 4 without gravity.
- `pi_4dof()`: shape (30,). Base parameters of the 4-DOF model.
- `beta()`: shape (30,). Base parameters for `calculate_w`.
- `beta_ols()`: shape (30,). Ordinary-least-squares estimate of the same base parameters.

### `wamdyn.regressors`

These are closed-form regressors for joints 2 and 4. Each argument must hold
exactly four joint values, otherwise the function raises `ValueError`.

- `y_2d_gravity(theta)`: gravity terms only, shape (2, 4).
- `y_4d(theta, thetad, thetadd)`: inertia, Coriolis, gravity and friction
  (`tanh(20 * velocity)` and viscous), shape (2, 12).
- `y_4d_gravity(theta, thetad, thetadd)`: the same without the gravity
  columns, shape (2, 8).

### `wamdyn.w_regressor`

`calculate_w(q, dq, ddq)` returns the 4×30 base-parameter regressor for
joints 1–4. The joint torques are `calculate_w(q, dq, ddq) @ beta()`. The
function first builds the regressor over all 48 standard link parameters and
then keeps the columns listed in `BASE_COLUMNS`. Coulomb friction is modelled
as `tanh(100 * velocity)`.

### `wamdyn.trajectories`

- `SinJpTrajectory(start_pose, amplitude, frequency)` gives the position
  `A cos(2πft) − A + p0`, together with its velocity and acceleration.
- `ConstVelTrajectory(start_pose, velocity)` gives the position `v t + p0`,
  a constant velocity and zero acceleration.

`evaluate(t)` returns a frozen `TrajectorySample` that has `position`,
`velocity` and `acceleration` arrays.

### `wamdyn.dynamics`

Each feed-forward model is a dataclass with a `dof` field (default 7, at
least 4) and a `params` field. The default for `params` is the matching vector
from `wamdyn.params`. Every input must have exactly `dof` values. The output is
a torque vector of length `dof`.

- `Dynamics2Dof.feedforward(jp, jv, ja)` uses `y_4d_gravity` and
  `pi_4d_gravity()`. Only joints 2 and 4 are non-zero.
- `GravityDynamics.feedforward(jp)` uses `y_2d_gravity` and
  `pi_2d_gravity()`. Only joints 2 and 4 are non-zero.
- `Dynamics4Dof.feedforward(jp, jv, ja)` uses `calculate_w` and `beta()`.
  Joints 1–4 are filled and the rest are zero.

### `wamdyn.controllers`

- `saturate_jt(x, limit)` scales `x` uniformly by the smallest ratio
  `limit / |x|` when that ratio is below one. Otherwise it returns a copy of
  `x`.
- `JsIDController(kp, kd).compute(jp_ref, jv_ref, jp, jv, feedforward, gravity)`
  returns `ff − gravity + Kp (p_ref − p) + Kd (v_ref − v)`.
- `DynamicsCompensationController(kp, kd).compute(jp_ref, jv_ref, jp, jv, feedforward)`
  returns `ff + Kp (p_ref − p) + Kd (v_ref − v)`.
- `Multiplier().compute(a, b)` returns `a * b` when either argument is a
  scalar, and `a @ b` otherwise.

The gains may be given as a vector of diagonal values or as a square matrix.
They default to `DEFAULT_KP` and `DEFAULT_KD`. The torque limits used in the
experiments are `ID_CONTROL_JT_LIMITS` and `COMPENSATION_JT_LIMITS`; the
latter is scaled by `COMPENSATION_LIMIT_SCALE`. Each controller and the
multiplier keep their most recent result in `last_output`.

### `wamdyn.ctc`

- `JsCTCController(kp, kd, feedforward_weight=0.0).compute(jp_ref, jv_ref, jp, jv, feedforward, gravity)`
  returns `w * ff + g' + Kp (p_ref − p) + Kd (v_ref − v)`. Here `g'` is the
  gravity vector with joints 2 and 4 (`MODELLED_GRAVITY_JOINTS`) set to zero.
  Because the weight defaults to zero, the feed-forward has no effect unless a
  weight is given.
- `GravityCompController().compute(feedforward, gravity)` returns `ff + g'`.

The torque limits used with these controllers are `CTC_JT_LIMITS` scaled by
`CTC_LIMIT_SCALE`.

## Example

```python
import numpy as np
from wamdyn.trajectories import SinJpTrajectory
from wamdyn.dynamics import Dynamics4Dof
from wamdyn.controllers import JsIDController, ID_CONTROL_JT_LIMITS, saturate_jt

start = np.zeros(7)
amplitude = np.array([0.0, 0.4, 0.0, -0.4, 0.0, 0.0, 0.0])
trajectory = SinJpTrajectory(start, amplitude, 0.1)
model = Dynamics4Dof()
controller = JsIDController()  # DEFAULT_KP / DEFAULT_KD on the diagonal

ref = trajectory.evaluate(1.0)
ff = model.feedforward(ref.position, ref.velocity, ref.acceleration)
torque = controller.compute(
    ref.position, ref.velocity, np.zeros(7), np.zeros(7), ff, np.zeros(7)
)
command = saturate_jt(torque, ID_CONTROL_JT_LIMITS)
```

## What it does not do

This is a computation library. It does not connect to an arm. It does not run
a real-time control loop, log data to files or provide a command-line program.
The caller supplies the measured joint states and the gravity torques, and
decides what to do with the torques the package returns.