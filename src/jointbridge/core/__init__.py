"""
Core module - Shared configuration, errors, and the kinematic robot model.
"""

from jointbridge.core.config import BoundDefaults, ConfigManager, ConversionConfig
from jointbridge.core.exceptions import (
    ConfigurationError,
    JointBridgeError,
    JointLookupError,
    RobotError,
)
from jointbridge.core.robot import (
    JointModel,
    JointModelGroup,
    RobotLoader,
    RobotModel,
    RobotState,
    VariableBounds,
)
from jointbridge.core.trajectory import RobotTrajectory

__all__ = [
    # Config
    "BoundDefaults",
    "ConfigManager",
    "ConversionConfig",
    # Exceptions
    "JointBridgeError",
    "ConfigurationError",
    "RobotError",
    "JointLookupError",
    # Robot
    "JointModel",
    "JointModelGroup",
    "RobotLoader",
    "RobotModel",
    "RobotState",
    "VariableBounds",
    # Trajectory
    "RobotTrajectory",
]
