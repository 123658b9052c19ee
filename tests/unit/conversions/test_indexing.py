"""
Tests for name to ordinal index resolution.
"""

import numpy as np
import pytest

from jointbridge.conversions.indexing import (
    get_joint_indices,
    get_joint_position_vector,
    get_joint_velocity_vector,
)
from jointbridge.core.exceptions import JointLookupError, RobotError
from jointbridge.core.robot import RobotState
from jointbridge.dynamics.model import DynamicsModel


@pytest.fixture
def state(robot_model):
    """State with distinct values on every joint."""
    state = RobotState(robot_model)
    state.set_variable_positions({"j1": 0.1, "j2": 0.2, "j3": 0.3})
    for name, value in (("j1", -1.0), ("j2", -2.0), ("j3", -3.0)):
        state.set_variable_velocity(name, value)
    return state


class TestGetJointIndices:
    """Tests for get_joint_indices."""

    def test_indices_in_group_order(self, robot_model, plant):
        """Test ordinals are returned in group order."""
        group = robot_model.get_joint_model_group("arm")
        assert get_joint_indices(group, plant) == [2, 1]

    def test_lookup_failure_propagates(self, robot_model):
        """Test a missing joint raises JointLookupError."""
        group = robot_model.get_joint_model_group("arm")
        with pytest.raises(JointLookupError) as exc_info:
            get_joint_indices(group, DynamicsModel(["j1", "j3"]))
        assert exc_info.value.joint_name == "j2"


class TestJointVectors:
    """Tests for dense position and velocity vectors."""

    def test_position_vector(self, state, plant):
        """Test positions land at their ordinals, other entries stay zero."""
        positions = get_joint_position_vector(state, "arm", plant)

        assert positions.shape == (plant.num_positions(),)
        np.testing.assert_array_equal(positions, [0.0, 0.2, 0.1])

    def test_velocity_vector(self, state, plant):
        """Test velocities land at their ordinals, other entries stay zero."""
        velocities = get_joint_velocity_vector(state, "arm", plant)

        assert velocities.shape == (plant.num_velocities(),)
        np.testing.assert_array_equal(velocities, [0.0, -2.0, -1.0])

    def test_every_group_joint_at_resolved_index(self, state, robot_model, plant):
        """Test each active joint's value equals the entry at its ordinal."""
        group = robot_model.get_joint_model_group("all")
        positions = get_joint_position_vector(state, "all", plant)

        for joint in group.active_joint_models:
            index = plant.get_joint_by_name(joint.name).ordinal
            assert positions[index] == state.get_variable_position(joint.name)

    def test_larger_plant(self, state):
        """Test plants with extra joints get zero entries for them."""
        plant = DynamicsModel(["base_x", "j1", "base_y", "j2"])
        positions = get_joint_position_vector(state, "arm", plant)
        np.testing.assert_array_equal(positions, [0.0, 0.1, 0.0, 0.2])

    def test_dimension_mismatch_asserts(self, state):
        """Test a plant smaller than the group violates the precondition."""
        with pytest.raises(AssertionError):
            get_joint_position_vector(state, "arm", DynamicsModel(["j1"]))
        with pytest.raises(AssertionError):
            get_joint_velocity_vector(state, "arm", DynamicsModel(["j1"]))

    def test_unknown_group(self, state, plant):
        """Test an unknown group name raises RobotError."""
        with pytest.raises(RobotError):
            get_joint_position_vector(state, "legs", plant)
