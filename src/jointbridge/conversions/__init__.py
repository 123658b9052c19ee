"""
Conversions module - Bridging the kinematic and dynamics models.

This module provides:
- Name to ordinal index resolution for joint groups
- Dense position/velocity/acceleration/jerk bound vectors
- Waypoint trajectory to first-order hold conversion
- Continuous trajectory to waypoint resampling
"""

from jointbridge.conversions.bounds import (
    BoundQuantity,
    JointBounds,
    get_acceleration_bounds,
    get_bounds,
    get_jerk_bounds,
    get_joint_bounds,
    get_position_bounds,
    get_velocity_bounds,
)
from jointbridge.conversions.indexing import (
    get_joint_indices,
    get_joint_position_vector,
    get_joint_velocity_vector,
)
from jointbridge.conversions.trajectory import (
    get_piecewise_polynomial,
    get_robot_trajectory,
)

__all__ = [
    "BoundQuantity",
    "JointBounds",
    "get_acceleration_bounds",
    "get_bounds",
    "get_jerk_bounds",
    "get_joint_bounds",
    "get_joint_indices",
    "get_joint_position_vector",
    "get_joint_velocity_vector",
    "get_piecewise_polynomial",
    "get_position_bounds",
    "get_robot_trajectory",
    "get_velocity_bounds",
]
