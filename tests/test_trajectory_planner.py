import math

import pytest

from quadwalk.geometry import Transformation
from quadwalk.leg import GaitConfig, QuadrupedLeg
from quadwalk.trajectory_planner import TrajectoryPlanner


def make_planner(swing_height=0.04, stance_depth=0.01):
    leg = QuadrupedLeg(gait_config=GaitConfig(swing_height=swing_height, stance_depth=stance_depth))
    return leg, TrajectoryPlanner(leg)


def start(x=0.2, y=0.1, z=-0.3):
    foot = Transformation()
    foot.translate(x, y, z)
    return foot


def test_zero_step_length_keeps_position_and_stance():
    leg, planner = make_planner()
    leg.gait_phase = False
    foot = start()
    result = planner.generate(foot, 0.0, 0.0, 0.4, 0.0)
    assert (result.x, result.y, result.z) == (foot.x, foot.y, foot.z)
    assert leg.gait_phase is True


def test_input_is_not_modified():
    _, planner = make_planner()
    foot = start()
    planner.generate(foot, 0.1, 0.0, 0.5, 0.0)
    assert (foot.x, foot.y, foot.z) == (0.2, 0.1, -0.3)


def test_mid_stance_pushes_down_by_stance_depth():
    leg, planner = make_planner(stance_depth=0.02)
    foot = start()
    result = planner.generate(foot, 0.1, 0.0, 0.0, 0.5)
    assert result.x == pytest.approx(foot.x)
    assert result.z == pytest.approx(foot.z - 0.02)
    assert leg.gait_phase is True


def test_stance_moves_foot_backwards():
    _, planner = make_planner()
    foot = start()
    early = planner.generate(foot, 0.1, 0.0, 0.0, 0.1)
    late = planner.generate(foot, 0.1, 0.0, 0.0, 0.9)
    assert early.x > foot.x > late.x


def test_end_of_swing_reaches_front_of_step():
    leg, planner = make_planner()
    foot = start()
    result = planner.generate(foot, 0.1, 0.0, 1.0, 0.0)
    assert result.x == pytest.approx(foot.x + 0.1 / 2)
    assert result.z == pytest.approx(foot.z)
    assert leg.gait_phase is False


def test_rotation_turns_step_direction():
    _, planner = make_planner()
    foot = start()
    result = planner.generate(foot, 0.1, math.pi / 2, 1.0, 0.0)
    assert result.x == pytest.approx(foot.x, abs=1e-12)
    assert result.y == pytest.approx(foot.y + 0.1 / 2)


def test_swing_lifts_foot():
    _, planner = make_planner()
    foot = start()
    result = planner.generate(foot, 0.1, 0.0, 0.5, 0.0)
    assert result.z > foot.z


def test_lift_scales_with_swing_height():
    foot = start()
    _, low = make_planner(swing_height=0.04)
    _, high = make_planner(swing_height=0.08)
    lift_low = low.generate(foot, 0.1, 0.0, 0.5, 0.0).z - foot.z
    lift_high = high.generate(foot, 0.1, 0.0, 0.5, 0.0).z - foot.z
    assert lift_high == pytest.approx(2 * lift_low)


def test_no_phase_holds_previous_target():
    _, planner = make_planner()
    foot = start()
    previous = planner.generate(foot, 0.1, 0.0, 0.3, 0.0)
    held = planner.generate(start(x=5.0), 0.1, 0.0, 0.0, 0.0)
    assert (held.x, held.y, held.z) == (previous.x, previous.y, previous.z)