"""Simulated joint actuators that follow commanded positions with noise."""

from __future__ import annotations

import random
from typing import Sequence

JOINT_COUNT = 12


class Actuator:
    """Stores commanded joint positions and reports them back as feedback.

    Each move covers a random 70 % to 149 % of the remaining distance, so the
    reported positions behave like noisy sensor readings.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._thetas = [0.0] * JOINT_COUNT

    def move_joints(self, joint_positions: Sequence[float]) -> None:
        """Command all twelve joints at once."""
        if len(joint_positions) != JOINT_COUNT:
            raise ValueError(
                f"expected {JOINT_COUNT} joint positions, got {len(joint_positions)}"
            )
        for joint_id, position in enumerate(joint_positions):
            self.move_joint(joint_id, position)

    def move_joint(self, joint_id: int, joint_position: float) -> None:
        """Command a single joint towards ``joint_position``."""
        self._check_id(joint_id)
        delta = joint_position - self._thetas[joint_id]
        gain = (self._rng.randrange(80) + 70) / 100.0
        self._thetas[joint_id] += delta * gain

    def joint_positions(self) -> list[float]:
        """Current positions of all twelve joints."""
        return list(self._thetas)

    def joint_position(self, joint_id: int) -> float:
        """Current position of one joint."""
        self._check_id(joint_id)
        return self._thetas[joint_id]

    @staticmethod
    def _check_id(joint_id: int) -> None:
        if not 0 <= joint_id < JOINT_COUNT:
            raise IndexError(f"joint id must be between 0 and {JOINT_COUNT - 1}")