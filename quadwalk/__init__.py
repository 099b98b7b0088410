"""Geometry, leg kinematics, gait generation, simulated actuators and state estimation for quadruped robots."""

__version__ = "0.1.0"

__all__ = [
    "actuator",
    "geometry",
    "joint",
    "leg",
    "leg_controller",
    "phase_generator",
    "state_estimation",
    "trajectory_planner",
]