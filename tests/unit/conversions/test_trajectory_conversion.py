"""
Tests for waypoint <-> continuous trajectory conversion.
"""

import numpy as np
import pytest

from jointbridge.conversions.trajectory import (
    get_piecewise_polynomial,
    get_robot_trajectory,
)
from jointbridge.core.exceptions import JointLookupError
from jointbridge.core.robot import RobotState
from jointbridge.core.trajectory import RobotTrajectory
from jointbridge.dynamics.model import DynamicsModel
from jointbridge.dynamics.polynomial import PiecewisePolynomial


def _waypoints(robot_model, rows, group="arm"):
    """Build a trajectory from (duration_from_previous, j1, j2) rows."""
    trajectory = RobotTrajectory(robot_model, group)
    for duration, j1, j2 in rows:
        state = RobotState(robot_model)
        state.set_variable_positions({"j1": j1, "j2": j2, "j3": 5.0})
        trajectory.add_suffix_waypoint(state, duration)
    return trajectory


@pytest.fixture
def uniform_trajectory(robot_model):
    """Three waypoints spaced 0.25 s apart."""
    return _waypoints(
        robot_model,
        [(0.0, 0.0, 0.0), (0.25, 1.0, -1.0), (0.25, 3.0, -1.0)],
    )


class TestGetPiecewisePolynomial:
    """Tests for waypoint to first-order hold conversion."""

    def test_breaks_are_durations_from_start(self, uniform_trajectory, plant):
        """Test one break per waypoint at its cumulative time."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)

        np.testing.assert_allclose(traj.breaks, [0.0, 0.25, 0.5])
        assert traj.rows == plant.num_positions()
        assert traj.end_time() == 0.5

    def test_passes_through_samples(self, uniform_trajectory, plant):
        """Test samples are dense vectors at the waypoint times."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)

        # Ordinals: j3 -> 0, j2 -> 1, j1 -> 2; j3 is outside the group
        np.testing.assert_allclose(traj.value(0.0), [0.0, 0.0, 0.0])
        np.testing.assert_allclose(traj.value(0.25), [0.0, -1.0, 1.0])
        np.testing.assert_allclose(traj.value(0.5), [0.0, -1.0, 3.0])

    def test_linear_segments(self, uniform_trajectory, plant):
        """Test values between samples are linear and slopes are piecewise constant."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)

        np.testing.assert_allclose(traj.value(0.125), [0.0, -0.5, 0.5])
        np.testing.assert_allclose(traj.eval_derivative(0.125), [0.0, -4.0, 4.0])
        np.testing.assert_allclose(traj.eval_derivative(0.375), [0.0, 0.0, 8.0])

    def test_non_uniform_times(self, robot_model, plant):
        """Test irregular waypoint spacing is preserved."""
        trajectory = _waypoints(
            robot_model, [(0.5, 0.0, 0.0), (1.0, 2.0, 0.0), (0.5, 2.0, 1.0)]
        )
        traj = get_piecewise_polynomial(trajectory, trajectory.group, plant)

        np.testing.assert_allclose(traj.breaks, [0.5, 1.5, 2.0])
        np.testing.assert_allclose(traj.value(1.0), [0.0, 0.0, 1.0])

    def test_empty_trajectory_rejected(self, robot_model, plant):
        """Test an empty trajectory fails in the interpolation routine."""
        trajectory = RobotTrajectory(robot_model, "arm")
        with pytest.raises(ValueError):
            get_piecewise_polynomial(trajectory, trajectory.group, plant)

    def test_lookup_failure(self, uniform_trajectory):
        """Test a joint missing from the plant raises JointLookupError."""
        with pytest.raises(JointLookupError):
            get_piecewise_polynomial(
                uniform_trajectory, uniform_trajectory.group, DynamicsModel(["j1", "j3"])
            )


class TestGetRobotTrajectory:
    """Tests for continuous trajectory to waypoint resampling."""

    def test_round_trip(self, uniform_trajectory, robot_model, plant):
        """Test resampling at the original spacing reproduces the waypoints."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)
        output = get_robot_trajectory(traj, 0.25, plant, RobotTrajectory(robot_model, "arm"))

        assert output.waypoint_count == uniform_trajectory.waypoint_count
        for i in range(output.waypoint_count):
            assert output.get_waypoint_duration_from_start(i) == pytest.approx(
                uniform_trajectory.get_waypoint_duration_from_start(i)
            )
            for joint in ("j1", "j2"):
                assert output.get_waypoint(i).get_variable_position(joint) == pytest.approx(
                    uniform_trajectory.get_waypoint(i).get_variable_position(joint)
                )

    def test_velocities_are_derivatives(self, uniform_trajectory, robot_model, plant):
        """Test written velocities equal the trajectory derivative."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)
        output = get_robot_trajectory(traj, 0.125, plant, RobotTrajectory(robot_model, "arm"))

        assert output.waypoint_count == 5
        velocities = [w.get_variable_velocity("j1") for w in output]
        assert velocities == pytest.approx([4.0, 4.0, 8.0, 8.0, 8.0])
        assert output.get_waypoint(1).get_variable_velocity("j2") == pytest.approx(-4.0)

    def test_sample_count_and_spacing(self, uniform_trajectory, robot_model, plant):
        """Test n = ceil(end / dt) + 1 evenly spaced samples ending at end_time."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)
        output = get_robot_trajectory(traj, 0.2, plant, RobotTrajectory(robot_model, "arm"))

        assert output.waypoint_count == 4
        durations = output.get_waypoint_durations()
        assert durations[0] == 0.0
        assert durations[1:] == pytest.approx([0.5 / 3] * 3)
        assert all(d >= 0.0 for d in durations)
        assert output.get_waypoint_duration_from_start(3) == pytest.approx(0.5)

    def test_output_is_cleared(self, uniform_trajectory, robot_model, plant):
        """Test existing waypoints in the output container are replaced."""
        output = _waypoints(robot_model, [(0.0, 9.0, 9.0)] * 7)
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)

        result = get_robot_trajectory(traj, 0.25, plant, output)

        assert result is output
        assert output.waypoint_count == 3
        assert output.get_waypoint(0).get_variable_position("j1") == 0.0

    def test_joints_outside_group_untouched(self, uniform_trajectory, robot_model, plant):
        """Test only the output group's joints are written."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)
        output = get_robot_trajectory(traj, 0.25, plant, RobotTrajectory(robot_model, "arm"))

        for waypoint in output:
            assert waypoint.get_variable_position("j3") == 0.0
            assert waypoint.get_variable_velocity("j3") == 0.0

    def test_zero_duration_single_sample(self, robot_model, plant):
        """Test end_time == 0 yields exactly one waypoint at t = 0."""
        traj = PiecewisePolynomial.first_order_hold([0.0], [np.array([0.0, 0.5, 1.5])])

        for delta_t in (0.01, 1.0, 10.0):
            output = get_robot_trajectory(
                traj, delta_t, plant, RobotTrajectory(robot_model, "arm")
            )
            assert output.waypoint_count == 1
            assert output.get_waypoint_durations() == [0.0]
            assert output.get_waypoint(0).get_variable_position("j1") == 1.5
            assert output.get_waypoint(0).get_variable_position("j2") == 0.5
            assert output.get_waypoint(0).get_variable_velocity("j1") == 0.0

    def test_single_waypoint_round_trip(self, robot_model, plant):
        """Test a one-waypoint trajectory survives conversion both ways."""
        trajectory = _waypoints(robot_model, [(0.0, 0.7, -0.3)])
        traj = get_piecewise_polynomial(trajectory, trajectory.group, plant)
        output = get_robot_trajectory(traj, 0.1, plant, RobotTrajectory(robot_model, "arm"))

        assert output.waypoint_count == 1
        assert output.get_waypoint(0).get_variable_position("j1") == pytest.approx(0.7)

    @pytest.mark.parametrize("delta_t", [0.0, -0.1])
    def test_non_positive_delta_t(self, delta_t, uniform_trajectory, robot_model, plant):
        """Test delta_t must be positive."""
        traj = get_piecewise_polynomial(uniform_trajectory, uniform_trajectory.group, plant)
        with pytest.raises(ValueError, match="delta_t"):
            get_robot_trajectory(traj, delta_t, plant, RobotTrajectory(robot_model, "arm"))

    def test_lookup_failure(self, robot_model):
        """Test a group joint missing from the plant raises JointLookupError."""
        traj = PiecewisePolynomial.first_order_hold([0.0, 1.0], [np.zeros(2), np.ones(2)])
        with pytest.raises(JointLookupError):
            get_robot_trajectory(
                traj, 0.5, DynamicsModel(["j1", "j3"]), RobotTrajectory(robot_model, "arm")
            )

    def test_late_start_holds_first_sample(self, robot_model, plant):
        """Test samples before the first waypoint time repeat the first waypoint."""
        trajectory = _waypoints(
            robot_model, [(0.5, 0.0, 0.0), (1.0, 2.0, 0.0), (0.5, 2.0, 1.0)]
        )
        traj = get_piecewise_polynomial(trajectory, trajectory.group, plant)
        output = get_robot_trajectory(traj, 0.5, plant, RobotTrajectory(robot_model, "arm"))

        assert output.waypoint_count == 5
        positions = [w.get_variable_position("j1") for w in output]
        assert positions == pytest.approx([0.0, 0.0, 1.0, 2.0, 2.0])
        assert all(0.0 <= p <= 2.0 for p in positions)
        assert output.get_waypoint(0).get_variable_position("j2") == pytest.approx(0.0)
