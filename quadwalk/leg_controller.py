"""Turns a body velocity command into foot positions for all four legs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from quadwalk.geometry import Transformation
from quadwalk.leg import GaitConfig, QuadrupedLeg
from quadwalk.phase_generator import PhaseGenerator
from quadwalk.trajectory_planner import TrajectoryPlanner

LEG_COUNT = 4


def clamp_velocity(velocity: float, min_velocity: float, max_velocity: float) -> float:
    """Limit ``velocity`` to the range ``[min_velocity, max_velocity]``."""
    if velocity < min_velocity:
        return min_velocity
    if velocity > max_velocity:
        return max_velocity
    return velocity


def raibert_heuristic(stance_duration: float, target_velocity: float) -> float:
    """Distance to step so the foot lands under the body halfway through stance."""
    return (stance_duration / 2.0) * target_velocity


def transform_leg(
    leg: QuadrupedLeg, step_x: float, step_y: float, theta: float
) -> tuple[float, float]:
    """Return ``(step_length, rotation)`` of the foot trajectory for one leg.

    The nominal foot position is shifted by ``(step_x, step_y)`` and turned by
    ``theta`` about the vertical axis; the step length is twice the distance
    moved, since that is only half of the full trajectory.
    """
    nominal = leg.zero_stance()
    moved = nominal.copy().translate(step_x, step_y, 0.0).rotate_z(theta)

    delta_x = moved.x - nominal.x
    delta_y = moved.y - nominal.y

    step_length = math.hypot(delta_x, delta_y) * 2.0
    rotation = math.atan2(delta_y, delta_x)
    return step_length, rotation


@dataclass
class VelocityCommand:
    """Requested body velocity: forward, sideways and turning rate."""

    linear_x: float = 0.0
    linear_y: float = 0.0
    angular_z: float = 0.0

    def _clamped(self, config: GaitConfig) -> VelocityCommand:
        return VelocityCommand(
            clamp_velocity(
                self.linear_x, -config.max_linear_velocity_x, config.max_linear_velocity_x
            ),
            clamp_velocity(
                self.linear_y, -config.max_linear_velocity_y, config.max_linear_velocity_y
            ),
            clamp_velocity(
                self.angular_z, -config.max_angular_velocity_z, config.max_angular_velocity_z
            ),
        )


class LegController:
    """Coordinates the phase generator and per-leg trajectory planners.

    ``legs`` are ordered left front, right front, left hind, right hind.
    """

    def __init__(
        self,
        legs: Sequence[QuadrupedLeg],
        gait_config: GaitConfig | None = None,
        time: int | None = None,
    ) -> None:
        if len(legs) != LEG_COUNT:
            raise ValueError(f"a quadruped needs exactly {LEG_COUNT} legs, got {len(legs)}")
        self.legs = tuple(legs)
        self.gait_config = gait_config if gait_config is not None else self.legs[0].gait_config
        self.phase_generator = PhaseGenerator(self.gait_config, time)
        self.trajectory_planners = tuple(TrajectoryPlanner(leg) for leg in self.legs)
        self.last_command = VelocityCommand()

    @property
    def lf(self) -> TrajectoryPlanner:
        return self.trajectory_planners[0]

    @property
    def rf(self) -> TrajectoryPlanner:
        return self.trajectory_planners[1]

    @property
    def lh(self) -> TrajectoryPlanner:
        return self.trajectory_planners[2]

    @property
    def rh(self) -> TrajectoryPlanner:
        return self.trajectory_planners[3]

    def velocity_command(
        self,
        foot_positions: Sequence[Transformation],
        command: VelocityCommand,
        time: int | None = None,
    ) -> list[Transformation]:
        """Return the foot targets that realise ``command`` at ``time`` (microseconds).

        The command is first limited to the gait's maximum velocities; the
        limited command is kept in ``last_command``.
        """
        if len(foot_positions) != LEG_COUNT:
            raise ValueError(
                f"expected {LEG_COUNT} foot positions, got {len(foot_positions)}"
            )

        config = self.gait_config
        command = command._clamped(config)
        self.last_command = command

        center_to_nominal = self.legs[0].center_to_nominal()
        if center_to_nominal == 0.0:
            raise ValueError("the left front leg has no horizontal offset from the body centre")

        tangential_velocity = command.angular_z * center_to_nominal
        velocity = math.hypot(command.linear_x, command.linear_y + tangential_velocity)

        step_x = raibert_heuristic(config.stance_duration, command.linear_x)
        step_y = raibert_heuristic(config.stance_duration, command.linear_y)
        step_theta = raibert_heuristic(config.stance_duration, tangential_velocity)

        theta = math.sin((step_theta / 2.0) / center_to_nominal) * 2.0

        steps = [transform_leg(leg, step_x, step_y, theta) for leg in self.legs]
        average_step = sum(length for length, _ in steps) / LEG_COUNT

        self.phase_generator.run(velocity, average_step, time)

        return [
            planner.generate(position, length, rotation, swing, stance)
            for planner, position, (length, rotation), swing, stance in zip(
                self.trajectory_planners,
                foot_positions,
                steps,
                self.phase_generator.swing_phase_signal,
                self.phase_generator.stance_phase_signal,
            )
        ]