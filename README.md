# quadwalk

Gait generation, leg kinematics and body state estimation for
four-legged robots, in plain Python with no dependencies beyond the
standard library.

Legs are always ordered left front, right front, left hind, right hind.
Times passed to the gait code are integers in microseconds.

## Modules

- `quadwalk.geometry`
  - `Point`: a 3-D vector with `+`, `-`, scalar `*`, negation,
    `magnitude()`, `dot()`, `cross()` and `copy()`.
  - `Rotation`: a 3x3 matrix indexed as `r[row, col]`, with
    `Rotation.identity()`, `Rotation.from_euler_angles(psi, theta, phi)`,
    `to_euler_angles()` (returns both solutions), in-place
    `rotate_x` / `rotate_y` / `rotate_z`, `transpose()`, `rows` and
    `r @ other` for a `Rotation` or a `Point`.
  - `Transformation`: a `rotation` plus a `position`, with `x`, `y`, `z`
    shortcuts, in-place `rotate_x` / `rotate_y` / `rotate_z` and
    `translate(x, y, z)` (each returns the transformation, so calls can
    be chained), composition with `a @ b`, and `t[row, col]` for the
    equivalent 4x4 homogeneous matrix.
- `quadwalk.joint`: `Joint`, a dataclass holding a joint's origin
  (`x`, `y`, `z`, `roll`, `pitch`, `yaw`) and its angle `theta`, with
  `set_translation`, `set_rotation` and `set_origin`.
- `quadwalk.leg`
  - `GaitConfig`: maximum velocities, swing height, stance depth and
    duration, nominal height, centre-of-mass x offset and so on.
  - `QuadrupedLeg`: `hip`, `upper_leg`, `lower_leg` and `foot` joints
    plus contact and gait-phase state, with forward kinematics
    (`foot_from_hip()`, `foot_from_base()`), `set_joints(hip,
    upper_leg, lower_leg)`, `zero_stance()` and `center_to_nominal()`.
- `quadwalk.phase_generator`: `PhaseGenerator` produces per-leg
  `stance_phase_signal` and `swing_phase_signal` lists for a trotting
  gait each time `run(target_velocity, step_length, time)` is called; a
  target velocity of zero resets all signals. `now_us()` gives the
  current monotonic time in microseconds and is used when no time is
  passed.
- `quadwalk.trajectory_planner`: `TrajectoryPlanner.generate(...)`
  returns a new foot target: a cosine curve while in stance and a
  12-point Bezier arc while swinging. The input transformation is not
  changed.
- `quadwalk.leg_controller`: `LegController(legs, gait_config=None,
  time=None)` turns a `VelocityCommand(linear_x, linear_y, angular_z)`
  into four foot targets with `velocity_command(foot_positions,
  command, time)`. The command is clamped to the gait's limits first
  (kept as `last_command`). Helpers `clamp_velocity`,
  `raibert_heuristic` and `transform_leg` are public. A `ValueError` is
  raised for anything other than four legs or four foot positions.
- `quadwalk.actuator`: `Actuator`, twelve simulated joints. Each
  `move_joint` / `move_joints` covers a random 70 % to 149 % of the
  remaining distance, so `joint_position` / `joint_positions` read back
  like noisy sensors. Pass a `random.Random` for reproducible results.
- `quadwalk.state_estimation`
  - `estimate_base_pose(foot_positions, contacts, imu_orientation=None)`
    returns a `BasePose` with the body height `z` and an `orientation`
    quaternion `(x, y, z, w)`, whose `w` component is negated. Three or
    more feet in contact define the ground plane; with fewer, the
    vertical comes from the IMU quaternion, or the body is taken as
    level when none is given.
  - `OdometryIntegrator`: `update(linear_x, linear_y, angular_z, dt)`
    integrates body-frame velocities into `x`, `y` and `heading`;
    `orientation` gives the heading as a quaternion.
  - `frame_prefix(namespace)`, `quaternion_from_rpy(roll, pitch, yaw)`
    and `quaternion_from_matrix(matrix)`.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from quadwalk.geometry import Transformation
from quadwalk.state_estimation import OdometryIntegrator, estimate_base_pose

foot = Transformation()
foot.translate(0.2, 0.1, -0.3).rotate_z(0.5)

odom = OdometryIntegrator()
x, y, heading = odom.update(linear_x=0.5, linear_y=0.0, angular_z=0.1, dt=0.02)

feet = [
    Transformation().translate(0.2, 0.1, -0.25),
    Transformation().translate(0.2, -0.1, -0.25),
    Transformation().translate(-0.2, 0.1, -0.25),
    Transformation().translate(-0.2, -0.1, -0.25),
]
pose = estimate_base_pose(feet, [True, True, True, True])
print(pose.z)  # 0.25
```

## What it does not do

- It has no inverse kinematics: foot targets from `LegController` are
  not turned into joint angles, and there is no body posture
  (roll/pitch/yaw) command.
- It does not read robot descriptions; legs and joints are set up by
  hand through `Joint` and `QuadrupedLeg`.
- It provides no command-line program, no message publishing and no
  hardware access. Feed it joint angles, contact flags and commands,
  and send what it returns wherever your robot needs.