"""Sawtooth phase signals that time the stance and swing of each leg."""

from __future__ import annotations

import time as _time

from quadwalk.leg import GaitConfig

SECONDS_TO_MICROS = 1_000_000
SWING_DURATION = 0.25


def now_us() -> int:
    """Current monotonic time in microseconds."""
    return _time.monotonic_ns() // 1000


class PhaseGenerator:
    """Produces per-leg stance and swing signals for a trotting gait."""

    def __init__(self, gait_config: GaitConfig, time: int | None = None) -> None:
        self.gait_config = gait_config
        self._last_touchdown = now_us() if time is None else time
        self._has_swung = False
        self.has_started = False
        self.stance_phase_signal = [0.0] * 4
        self.swing_phase_signal = [0.0] * 4

    def _reset(self) -> None:
        self._last_touchdown = 0
        self._has_swung = False
        self.stance_phase_signal = [0.0] * 4
        self.swing_phase_signal = [0.0] * 4

    def run(self, target_velocity: float, step_length: float, time: int | None = None) -> None:
        """Advance the signals to ``time`` (microseconds) for the requested velocity."""
        if time is None:
            time = now_us()

        swing_period = SWING_DURATION * SECONDS_TO_MICROS
        stance_period = self.gait_config.stance_duration * SECONDS_TO_MICROS
        stride_period = stance_period + swing_period

        if target_velocity == 0.0:
            self._reset()
            return

        if not self.has_started:
            self.has_started = True
            self._last_touchdown = time

        since_touchdown = time - self._last_touchdown
        if since_touchdown < 0 or since_touchdown >= stride_period:
            self._last_touchdown = time

        elapsed = time - self._last_touchdown
        offsets = (0.0, 0.5, 0.5, 0.0)
        clocks = [elapsed - offset * stride_period for offset in offsets]

        stance: list[float] = []
        swing: list[float] = []
        for clock in clocks:
            if 0 < clock < stance_period:
                stance.append(clock / stance_period)
            else:
                stance.append(0.0)

            if -swing_period < clock < 0:
                swing.append((clock + swing_period) / swing_period)
            elif stance_period < clock < stride_period:
                swing.append((clock - stance_period) / swing_period)
            else:
                swing.append(0.0)

        if not self._has_swung and stance[0] < 0.5:
            stance[0] = stance[3] = 0.0
            swing[1] = swing[2] = 0.0
        else:
            self._has_swung = True

        self.stance_phase_signal = stance
        self.swing_phase_signal = swing