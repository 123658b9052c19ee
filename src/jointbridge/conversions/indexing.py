"""
Name to ordinal index resolution.

The only place where joint names of the kinematic model are translated into
indices of the dense dynamics vectors. Indices are looked up on every call.
"""

import numpy as np

from jointbridge.core.robot import JointModelGroup, RobotState
from jointbridge.dynamics.model import DynamicsModel


def get_joint_indices(group: JointModelGroup, plant: DynamicsModel) -> list[int]:
    """
    Ordinal index of every active joint of ``group``, in group order.

    Raises:
        JointLookupError: If a joint of the group is missing from ``plant``
    """
    return [
        plant.get_joint_by_name(joint.name).ordinal
        for joint in group.active_joint_models
    ]


def get_joint_position_vector(
    state: RobotState, group_name: str, plant: DynamicsModel
) -> np.ndarray:
    """
    Dense position vector of ``plant`` filled from the group's joints.

    Entries not covered by the group stay zero.
    """
    group = state.robot_model.get_joint_model_group(group_name)
    assert plant.num_positions() >= len(group.active_joint_models)

    positions = np.zeros(plant.num_positions())
    for joint, index in zip(group.active_joint_models, get_joint_indices(group, plant)):
        positions[index] = state.get_variable_position(joint.name)
    return positions


def get_joint_velocity_vector(
    state: RobotState, group_name: str, plant: DynamicsModel
) -> np.ndarray:
    """Dense velocity vector of ``plant`` filled from the group's joints."""
    group = state.robot_model.get_joint_model_group(group_name)
    assert plant.num_velocities() >= len(group.active_joint_models)

    velocities = np.zeros(plant.num_velocities())
    for joint, index in zip(group.active_joint_models, get_joint_indices(group, plant)):
        velocities[index] = state.get_variable_velocity(joint.name)
    return velocities
