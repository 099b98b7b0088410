"""Points, rotation matrices and rigid transformations in three dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence


def _rotate_pair(a: float, b: float, angle: float) -> tuple[float, float]:
    """Rotate the pair ``(a, b)`` by ``angle`` in the plane they span."""
    c, s = math.cos(angle), math.sin(angle)
    return a * c - b * s, b * c + a * s


@dataclass
class Point:
    """A coordinate in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        """Euclidean length of the point seen as a vector."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def dot(self, other: Point) -> float:
        """Scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point) -> Point:
        """Vector product with ``other``."""
        return Point(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def copy(self) -> Point:
        return Point(self.x, self.y, self.z)


class Rotation:
    """A 3x3 rotation matrix, indexed as ``rotation[row, col]``."""

    __slots__ = ("_m",)

    def __init__(self, rows: Sequence[Sequence[float]] | None = None) -> None:
        if rows is None:
            self._m = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
            return
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError("a rotation needs exactly 3 rows of 3 values")
        self._m = [[float(value) for value in row] for row in rows]

    @classmethod
    def identity(cls) -> Rotation:
        return cls()

    @classmethod
    def from_euler_angles(cls, psi: float, theta: float, phi: float) -> Rotation:
        """Build Rz(phi) @ Ry(theta) @ Rx(psi) from roll ``psi``, pitch ``theta``, yaw ``phi``."""
        cps, sps = math.cos(psi), math.sin(psi)
        cth, sth = math.cos(theta), math.sin(theta)
        cph, sph = math.cos(phi), math.sin(phi)
        return cls(
            [
                [cph * cth, cph * sps * sth - cps * sph, sps * sph + cps * cph * sth],
                [cth * sph, cps * cph + sps * sph * sth, cps * sph * sth - cph * sps],
                [-sth, cth * sps, cps * cth],
            ]
        )

    @property
    def rows(self) -> tuple[tuple[float, float, float], ...]:
        return tuple(tuple(row) for row in self._m)  # type: ignore[return-value]

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return self._m[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._m[row][col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented
        return self._m == other._m

    def __repr__(self) -> str:
        return f"Rotation({self._m!r})"

    def __matmul__(self, other):
        if isinstance(other, Rotation):
            return Rotation(
                [
                    [sum(self._m[i][k] * other._m[k][j] for k in range(3)) for j in range(3)]
                    for i in range(3)
                ]
            )
        if isinstance(other, Point):
            vector = tuple(other)
            x, y, z = (sum(a * b for a, b in zip(row, vector)) for row in self._m)
            return Point(x, y, z)
        return NotImplemented

    def transpose(self) -> Rotation:
        return Rotation([list(column) for column in zip(*self._m)])

    def to_euler_angles(
        self,
    ) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
        """Return both ``(psi, theta, phi)`` solutions that produce this matrix."""
        m = self._m
        if m[2][0] != 0:
            theta1 = -math.asin(m[2][0])
            theta2 = math.pi - theta1
            solutions = []
            for theta in (theta1, theta2):
                c = math.cos(theta)
                psi = math.atan2(m[2][1] / c, m[2][2] / c)
                phi = math.atan2(m[1][0] / c, m[0][0] / c)
                solutions.append((psi, theta, phi))
            return solutions[0], solutions[1]

        psi = math.atan2(-m[0][1], -m[0][2])
        solution = (psi, -math.pi / 2, 0.0)
        return solution, solution

    def _mix_rows(self, first: int, second: int, angle: float) -> Rotation:
        for col in range(3):
            self._m[first][col], self._m[second][col] = _rotate_pair(
                self._m[first][col], self._m[second][col], angle
            )
        return self

    def rotate_x(self, phi: float) -> Rotation:
        """Pre-multiply by a rotation of ``phi`` about the x axis, in place."""
        return self._mix_rows(1, 2, phi)

    def rotate_y(self, theta: float) -> Rotation:
        """Pre-multiply by a rotation of ``theta`` about the y axis, in place."""
        return self._mix_rows(2, 0, theta)

    def rotate_z(self, psi: float) -> Rotation:
        """Pre-multiply by a rotation of ``psi`` about the z axis, in place."""
        return self._mix_rows(0, 1, psi)

    def copy(self) -> Rotation:
        return Rotation(self._m)


@dataclass
class Transformation:
    """A rigid transformation: a rotation plus a translation."""

    rotation: Rotation = field(default_factory=Rotation.identity)
    position: Point = field(default_factory=Point)

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = value

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value

    @property
    def z(self) -> float:
        return self.position.z

    @z.setter
    def z(self, value: float) -> None:
        self.position.z = value

    def __getitem__(self, index: tuple[int, int]) -> float:
        """Element of the equivalent 4x4 homogeneous matrix."""
        row, col = index
        if not (0 <= row <= 3 and 0 <= col <= 3):
            raise IndexError("homogeneous matrix indices run from 0 to 3")
        if col == 3:
            return 1.0 if row == 3 else tuple(self.position)[row]
        return 0.0 if row == 3 else self.rotation[row, col]

    def __matmul__(self, other: Transformation) -> Transformation:
        if not isinstance(other, Transformation):
            return NotImplemented
        return Transformation(
            self.rotation @ other.rotation,
            self.rotation @ other.position + self.position,
        )

    def rotate_x(self, phi: float) -> Transformation:
        """Rotate both orientation and position about the x axis, in place."""
        self.rotation.rotate_x(phi)
        self.position.y, self.position.z = _rotate_pair(self.position.y, self.position.z, phi)
        return self

    def rotate_y(self, theta: float) -> Transformation:
        """Rotate both orientation and position about the y axis, in place."""
        self.rotation.rotate_y(theta)
        self.position.z, self.position.x = _rotate_pair(self.position.z, self.position.x, theta)
        return self

    def rotate_z(self, psi: float) -> Transformation:
        """Rotate both orientation and position about the z axis, in place."""
        self.rotation.rotate_z(psi)
        self.position.x, self.position.y = _rotate_pair(self.position.x, self.position.y, psi)
        return self

    def translate(self, x: float, y: float, z: float) -> Transformation:
        """Shift the position by ``(x, y, z)``, in place."""
        self.position.x += x
        self.position.y += y
        self.position.z += z
        return self

    def copy(self) -> Transformation:
        return Transformation(self.rotation.copy(), self.position.copy())