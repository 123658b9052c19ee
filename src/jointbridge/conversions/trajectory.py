"""
Conversion between waypoint trajectories and continuous trajectories.

``get_piecewise_polynomial`` turns the waypoints of a RobotTrajectory into a
first-order hold over dense position vectors. ``get_robot_trajectory``
resamples a continuous trajectory at a fixed step and writes positions and
velocities back into named joints.
"""

import math

from jointbridge.conversions.indexing import get_joint_indices, get_joint_position_vector
from jointbridge.core.logging import get_logger
from jointbridge.core.robot import JointModelGroup, RobotState
from jointbridge.core.trajectory import RobotTrajectory
from jointbridge.dynamics.model import DynamicsModel
from jointbridge.dynamics.polynomial import PiecewisePolynomial

_logger = get_logger(__name__)


def get_piecewise_polynomial(
    robot_trajectory: RobotTrajectory,
    group: JointModelGroup,
    plant: DynamicsModel,
) -> PiecewisePolynomial:
    """
    First-order hold through every waypoint of ``robot_trajectory``.

    Break times are the waypoint durations from start and are expected to be
    non-decreasing; the interpolation routine rejects malformed input.

    Args:
        robot_trajectory: Source waypoints
        group: Joint group whose positions are sampled
        plant: Dynamics model defining the dense vector layout

    Returns:
        Piecewise-linear trajectory passing through every sample
    """
    breaks = []
    samples = []
    for i in range(robot_trajectory.waypoint_count):
        state = robot_trajectory.get_waypoint(i)
        samples.append(get_joint_position_vector(state, group.name, plant))
        breaks.append(robot_trajectory.get_waypoint_duration_from_start(i))

    trajectory = PiecewisePolynomial.first_order_hold(breaks, samples)
    _logger.debug(
        "piecewise_polynomial_built",
        group=group.name,
        waypoints=len(breaks),
        end_time=trajectory.end_time(),
    )
    return trajectory


def _sample_times(end_time: float, delta_t: float) -> list[float]:
    num_points = int(math.ceil(end_time / delta_t)) + 1
    if num_points == 1:
        return [0.0]
    return [
        min(i / (num_points - 1), 1.0) * end_time
        for i in range(num_points)
    ]


def get_robot_trajectory(
    trajectory: PiecewisePolynomial,
    delta_t: float,
    plant: DynamicsModel,
    robot_trajectory: RobotTrajectory,
) -> RobotTrajectory:
    """
    Resample ``trajectory`` into ``robot_trajectory``.

    ``robot_trajectory`` is cleared, then refilled with
    ``ceil(end_time / delta_t) + 1`` evenly spaced waypoints from 0 to
    ``end_time``. A zero-duration trajectory yields a single waypoint at 0.
    Positions are trajectory values and velocities are its first
    derivative, written to the active joints of ``robot_trajectory.group``.

    Args:
        trajectory: Continuous trajectory over dense position vectors
        delta_t: Resampling step in seconds
        plant: Dynamics model defining the dense vector layout
        robot_trajectory: Output container, modified in place

    Returns:
        ``robot_trajectory``

    Raises:
        ValueError: If ``delta_t`` is not positive
        JointLookupError: If a group joint is missing from ``plant``
    """
    if delta_t <= 0:
        raise ValueError(f"delta_t must be positive, got {delta_t}")

    robot_trajectory.clear()

    active_joints = robot_trajectory.group.active_joint_models
    indices = get_joint_indices(robot_trajectory.group, plant)

    t_prev = 0.0
    for t in _sample_times(trajectory.end_time(), delta_t):
        positions = trajectory.value(t)
        velocities = trajectory.eval_derivative(t)
        waypoint = RobotState(robot_trajectory.robot_model)
        for joint, index in zip(active_joints, indices):
            waypoint.set_joint_positions(joint, [positions[index]])
            waypoint.set_joint_velocities(joint, [velocities[index]])

        robot_trajectory.add_suffix_waypoint(waypoint, t - t_prev)
        t_prev = t

    _logger.debug(
        "robot_trajectory_resampled",
        group=robot_trajectory.group_name,
        waypoints=robot_trajectory.waypoint_count,
        delta_t=delta_t,
    )
    return robot_trajectory
