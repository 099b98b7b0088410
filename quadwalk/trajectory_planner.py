"""Foot trajectory generation for the stance and swing phases of a step."""

from __future__ import annotations

import math

from quadwalk.geometry import Transformation
from quadwalk.leg import QuadrupedLeg

_REFERENCE_SWING_HEIGHT = 0.15
_REFERENCE_STEP_LENGTH = 0.4
_REF_CONTROL_POINTS_X = (
    -0.15, -0.2805, -0.3, -0.3, -0.3, 0.0, 0.0, 0.0, 0.3032, 0.3032, 0.2826, 0.15,
)
_REF_CONTROL_POINTS_Y = (
    -0.5, -0.5, -0.3611, -0.3611, -0.3611, -0.3611, -0.3611, -0.3214, -0.3214, -0.3214, -0.5, -0.5,
)
_DEGREE = len(_REF_CONTROL_POINTS_X) - 1
_BINOMIALS = tuple(math.comb(_DEGREE, i) for i in range(_DEGREE + 1))


class TrajectoryPlanner:
    """Moves a foot along a line while in stance and a Bezier arc while swinging."""

    def __init__(self, leg: QuadrupedLeg) -> None:
        self.leg = leg
        self._control_points_x = [0.0] * len(_REF_CONTROL_POINTS_X)
        self._control_points_y = [0.0] * len(_REF_CONTROL_POINTS_Y)
        self._height_ratio = 0.0
        self._length_ratio = 0.0
        self._previous: Transformation | None = None

    def _update_height(self, swing_height: float) -> None:
        ratio = swing_height / _REFERENCE_SWING_HEIGHT
        if ratio != self._height_ratio:
            self._height_ratio = ratio
            self._control_points_y = [
                -(ref * ratio + 0.5 * ratio) for ref in _REF_CONTROL_POINTS_Y
            ]

    def _update_length(self, step_length: float) -> None:
        ratio = step_length / _REFERENCE_STEP_LENGTH
        if ratio != self._length_ratio:
            self._length_ratio = ratio
            points = [ref * ratio for ref in _REF_CONTROL_POINTS_X]
            points[0] = -step_length / 2.0
            points[-1] = step_length / 2.0
            self._control_points_x = points

    def _swing_offset(self, phase: float) -> tuple[float, float]:
        x = y = 0.0
        for i, (coeff, cx, cy) in enumerate(
            zip(_BINOMIALS, self._control_points_x, self._control_points_y)
        ):
            weight = coeff * phase**i * (1.0 - phase) ** (_DEGREE - i)
            x += weight * cx
            y -= weight * cy
        return x, y

    def generate(
        self,
        foot_position: Transformation,
        step_length: float,
        rotation: float,
        swing_phase_signal: float,
        stance_phase_signal: float,
    ) -> Transformation:
        """Return the foot target for the given phase; ``foot_position`` is not changed."""
        config = self.leg.gait_config
        self._update_height(config.swing_height)

        if self._previous is None:
            self._previous = foot_position.copy()

        if step_length == 0.0:
            self._previous = foot_position.copy()
            self.leg.gait_phase = True
            return foot_position.copy()

        self._update_length(step_length)

        x = y = 0.0
        if stance_phase_signal > swing_phase_signal:
            self.leg.gait_phase = True
            x = (step_length / 2.0) * (1.0 - 2.0 * stance_phase_signal)
            y = -config.stance_depth * math.cos(math.pi * x / step_length)
        elif stance_phase_signal < swing_phase_signal:
            self.leg.gait_phase = False
            x, y = self._swing_offset(swing_phase_signal)

        result = foot_position.copy()
        result.x += x * math.cos(rotation)
        result.y += x * math.sin(rotation)
        result.z += y

        if swing_phase_signal == 0.0 and stance_phase_signal == 0.0 and step_length > 0.0:
            result = self._previous.copy()

        self._previous = result.copy()
        return result