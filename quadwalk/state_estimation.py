"""Body pose estimation from foot contacts and planar odometry integration."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Sequence

from quadwalk.geometry import Point, Rotation

LEG_COUNT = 4

Quaternion = tuple[float, float, float, float]


class _HasPosition(Protocol):
    x: float
    y: float
    z: float


def frame_prefix(namespace: str) -> str:
    """Turn a node namespace such as ``/robot`` into a frame prefix such as ``robot/``."""
    if len(namespace) > 1:
        return namespace[1:] + "/"
    return ""


def quaternion_from_rpy(roll: float, pitch: float, yaw: float) -> Quaternion:
    """Quaternion ``(x, y, z, w)`` of the rotation Rz(yaw) Ry(pitch) Rx(roll)."""
    cr, sr = math.cos(roll / 2.0), math.sin(roll / 2.0)
    cp, sp = math.cos(pitch / 2.0), math.sin(pitch / 2.0)
    cy, sy = math.cos(yaw / 2.0), math.sin(yaw / 2.0)
    return (
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
        cr * cp * cy + sr * sp * sy,
    )


def quaternion_from_matrix(matrix: Rotation | Sequence[Sequence[float]]) -> Quaternion:
    """Quaternion ``(x, y, z, w)`` of a 3x3 rotation matrix given by rows."""
    m = matrix.rows if isinstance(matrix, Rotation) else matrix
    if len(m) != 3 or any(len(row) != 3 for row in m):
        raise ValueError("a rotation matrix needs exactly 3 rows of 3 values")

    q = [0.0, 0.0, 0.0, 0.0]
    trace = m[0][0] + m[1][1] + m[2][2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0)
        q[3] = s * 0.5
        s = 0.5 / s
        q[0] = (m[2][1] - m[1][2]) * s
        q[1] = (m[0][2] - m[2][0]) * s
        q[2] = (m[1][0] - m[0][1]) * s
    else:
        if m[0][0] < m[1][1]:
            i = 2 if m[1][1] < m[2][2] else 1
        else:
            i = 2 if m[0][0] < m[2][2] else 0
        j = (i + 1) % 3
        k = (i + 2) % 3
        s = math.sqrt(m[i][i] - m[j][j] - m[k][k] + 1.0)
        q[i] = s * 0.5
        s = 0.5 / s
        q[3] = (m[k][j] - m[j][k]) * s
        q[j] = (m[j][i] + m[i][j]) * s
        q[k] = (m[k][i] + m[i][k]) * s
    return q[0], q[1], q[2], q[3]


def _normalized_quaternion(q: Quaternion) -> Quaternion:
    length = math.sqrt(sum(c * c for c in q))
    if length == 0.0:
        raise ValueError("a zero quaternion has no orientation")
    x, y, z, w = (c / length for c in q)
    return x, y, z, w


def _rotation_from_quaternion(q: Quaternion) -> Rotation:
    x, y, z, w = q
    d = x * x + y * y + z * z + w * w
    if d == 0.0:
        raise ValueError("a zero quaternion has no orientation")
    s = 2.0 / d
    xs, ys, zs = x * s, y * s, z * s
    wx, wy, wz = w * xs, w * ys, w * zs
    xx, xy, xz = x * xs, x * ys, x * zs
    yy, yz, zz = y * ys, y * zs, z * zs
    return Rotation(
        [
            [1.0 - (yy + zz), xy - wz, xz + wy],
            [xy + wz, 1.0 - (xx + zz), yz - wx],
            [xz - wy, yz + wx, 1.0 - (xx + yy)],
        ]
    )


def _unit(vector: Point) -> Point:
    length = vector.magnitude()
    if length == 0.0:
        raise ValueError("foot positions are degenerate: an axis has zero length")
    return vector * (1.0 / length)


@dataclass(frozen=True)
class BasePose:
    """Pose of the body relative to its footprint.

    ``z`` is the body height above the feet in contact; ``orientation`` is the
    quaternion ``(x, y, z, w)`` as published, with its ``w`` component negated.
    """

    z: float
    orientation: Quaternion


def estimate_base_pose(
    foot_positions: Sequence[_HasPosition],
    contacts: Sequence[bool],
    imu_orientation: Quaternion | None = None,
) -> BasePose:
    """Estimate body height and tilt from foot positions in the body frame.

    Legs are ordered left front, right front, left hind, right hind. Where the
    feet in contact do not define a plane, the vertical comes from
    ``imu_orientation`` when given, otherwise the body is assumed level.
    """
    feet = [Point(f.x, f.y, f.z) for f in foot_positions]
    if len(feet) != LEG_COUNT:
        raise ValueError(f"expected {LEG_COUNT} foot positions, got {len(feet)}")
    in_contact = [bool(c) for c in contacts]
    if len(in_contact) != LEG_COUNT:
        raise ValueError(f"expected {LEG_COUNT} contact flags, got {len(in_contact)}")

    touching = [foot for foot, contact in zip(feet, in_contact) if contact]
    no_contact = not touching
    if no_contact:
        touching = feet
    height = -(sum(foot.z for foot in touching) / len(touching))

    if imu_orientation is not None:
        imu_rotation = _rotation_from_quaternion(tuple(imu_orientation))
    else:
        imu_rotation = Rotation.identity()

    up = Point(0.0, 0.0, 1.0)
    x_axis = Point(1.0, 0.0, 0.0)
    y_axis = Point(0.0, 1.0, 0.0)
    z_axis = up.copy()
    count = len(touching)

    if count >= 3 and not no_contact:
        # any three touching feet define the ground plane
        x_axis = _unit(touching[0] - touching[2])
        y_axis = _unit(touching[1] - touching[2])
        z_axis = _unit(x_axis.cross(y_axis))
        if z_axis.dot(up) < 0:
            z_axis = -z_axis
        lateral = Point(0.0, 1.0, 0.0)
        y_axis = _unit(lateral - lateral.dot(z_axis) * z_axis)
        x_axis = y_axis.cross(z_axis)
    elif count == 2:
        lf, rf, lh, rh = in_contact
        z_axis = imu_rotation.transpose() @ z_axis
        if (lf and lh) or (rf and rh):
            # both feet on one side define the x axis
            x_axis = _unit(touching[0] - touching[1])
            y_axis = z_axis.cross(x_axis)
            x_axis = y_axis.cross(z_axis)
        elif (lf and rf) or (lh and rh):
            # both front or both hind feet define the y axis
            y_axis = _unit(touching[0] - touching[1])
            x_axis = y_axis.cross(z_axis)
            y_axis = z_axis.cross(x_axis)
        else:
            # diagonal feet: the line through them lies in the ground plane
            axis1 = _unit(touching[0] - touching[1])
            axis2 = z_axis.cross(axis1)
            z_axis = axis1.cross(axis2)
            x_axis = _unit(x_axis - x_axis.dot(z_axis) * z_axis)
            y_axis = z_axis.cross(x_axis)
    else:
        # one foot or none: only the vertical from the IMU is known
        z_axis = imu_rotation.transpose() @ z_axis
        x_axis = _unit(x_axis - x_axis.dot(z_axis) * z_axis)
        y_axis = z_axis.cross(x_axis)

    rows = [
        [x_axis.x, y_axis.x, z_axis.x],
        [x_axis.y, y_axis.y, z_axis.y],
        [x_axis.z, y_axis.z, z_axis.z],
    ]
    qx, qy, qz, qw = _normalized_quaternion(quaternion_from_matrix(rows))
    return BasePose(height, (qx, qy, qz, -qw))


@dataclass
class OdometryIntegrator:
    """Integrates body-frame velocities into a planar position and heading."""

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    @property
    def orientation(self) -> Quaternion:
        """Heading as a quaternion ``(x, y, z, w)``."""
        return quaternion_from_rpy(0.0, 0.0, self.heading)

    def update(
        self, linear_x: float, linear_y: float, angular_z: float, dt: float
    ) -> tuple[float, float, float]:
        """Advance by ``dt`` seconds and return ``(x, y, heading)``."""
        if dt < 0:
            raise ValueError("time step must not be negative")
        cos_h, sin_h = math.cos(self.heading), math.sin(self.heading)
        delta_heading = angular_z * dt
        delta_x = (linear_x * cos_h - linear_y * sin_h) * dt
        delta_y = (linear_x * sin_h + linear_y * cos_h) * dt
        self.x += delta_x
        self.y += delta_y
        self.heading += delta_heading
        return self.x, self.y, self.heading