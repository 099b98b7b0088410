"""Gait parameters and the kinematic model of a single leg."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from quadwalk.geometry import Transformation
from quadwalk.joint import Joint


@dataclass
class GaitConfig:
    """Parameters shared by every leg that shape the walking gait."""

    pantograph_leg: bool = False
    max_linear_velocity_x: float = 0.5
    max_linear_velocity_y: float = 0.5
    max_angular_velocity_z: float = 1.0
    com_x_translation: float = 0.0
    swing_height: float = 0.04
    stance_depth: float = 0.0
    stance_duration: float = 0.25
    nominal_height: float = 0.2
    odom_scaler: float = 1.0


@dataclass
class QuadrupedLeg:
    """A leg made of a hip, an upper leg, a lower leg and a foot."""

    hip: Joint = field(default_factory=Joint)
    upper_leg: Joint = field(default_factory=Joint)
    lower_leg: Joint = field(default_factory=Joint)
    foot: Joint = field(default_factory=Joint)
    gait_config: GaitConfig = field(default_factory=GaitConfig)
    id: int = 0
    last_touchdown: int = 0
    in_contact: bool = True
    knee_direction: int = 0
    is_pantograph: bool = False
    gait_phase: bool = True

    @property
    def joint_chain(self) -> tuple[Joint, Joint, Joint, Joint]:
        """The joints ordered from the hip down to the foot."""
        return (self.hip, self.upper_leg, self.lower_leg, self.foot)

    def foot_from_hip(self) -> Transformation:
        """Forward kinematics of the foot in the hip frame, ignoring the hip angle."""
        chain = self.joint_chain
        foot_position = Transformation()
        for index in (3, 2, 1):
            joint = chain[index]
            foot_position.translate(joint.x, joint.y, joint.z)
            # the hip turns about a different axis and is applied separately
            if index > 1:
                foot_position.rotate_y(chain[index - 1].theta)
        return foot_position

    def foot_from_base(self) -> Transformation:
        """Forward kinematics of the foot in the body frame."""
        foot_position = Transformation()
        foot_position.position = self.foot_from_hip().position
        foot_position.rotate_x(self.hip.theta)
        foot_position.translate(self.hip.x, self.hip.y, self.hip.z)
        return foot_position

    def set_joints(self, hip: float, upper_leg: float, lower_leg: float) -> None:
        """Set the angles of the three actuated joints."""
        self.hip.theta = hip
        self.upper_leg.theta = upper_leg
        self.lower_leg.theta = lower_leg

    def zero_stance(self) -> Transformation:
        """Foot position when the leg is fully stretched straight down."""
        stance = Transformation()
        stance.x = self.hip.x + self.upper_leg.x + self.gait_config.com_x_translation
        stance.y = self.hip.y + self.upper_leg.y
        stance.z = self.hip.z + self.upper_leg.z + self.lower_leg.z + self.foot.z
        return stance

    def center_to_nominal(self) -> float:
        """Horizontal distance from the body centre to the nominal foot position."""
        x = self.hip.x + self.upper_leg.x
        y = self.hip.y + self.upper_leg.y
        return math.hypot(x, y)