"""
Waypoint trajectories over the kinematic robot model.

A RobotTrajectory is an ordered list of robot states, each stored with the
time elapsed since the previous waypoint.
"""

from pathlib import Path
from typing import Iterator

from jointbridge.core.config import load_waypoint_file
from jointbridge.core.robot import JointModelGroup, RobotModel, RobotState


class RobotTrajectory:
    """
    Discrete trajectory of robot states for one joint group.

    Example:
        >>> trajectory = RobotTrajectory(model, "arm")
        >>> trajectory.add_suffix_waypoint(RobotState(model), 0.0)
        >>> trajectory.add_suffix_waypoint(RobotState(model), 0.5)
        >>> trajectory.duration
        0.5
    """

    def __init__(self, robot_model: RobotModel, group: str | JointModelGroup) -> None:
        self.robot_model = robot_model
        if isinstance(group, str):
            group = robot_model.get_joint_model_group(group)
        self.group = group
        self._waypoints: list[RobotState] = []
        self._durations: list[float] = []

    @property
    def group_name(self) -> str:
        return self.group.name

    @property
    def waypoint_count(self) -> int:
        return len(self._waypoints)

    @property
    def duration(self) -> float:
        """Total time from the first to the last waypoint."""
        return float(sum(self._durations))

    def is_empty(self) -> bool:
        return not self._waypoints

    def clear(self) -> None:
        self._waypoints.clear()
        self._durations.clear()

    def add_suffix_waypoint(self, state: RobotState, duration_from_previous: float) -> None:
        """Append a waypoint reached ``duration_from_previous`` seconds after the last one."""
        self._waypoints.append(state)
        self._durations.append(float(duration_from_previous))

    def get_waypoint(self, index: int) -> RobotState:
        return self._waypoints[index]

    def get_last_waypoint(self) -> RobotState:
        return self._waypoints[-1]

    def get_waypoint_durations(self) -> list[float]:
        return list(self._durations)

    def get_waypoint_duration_from_previous(self, index: int) -> float:
        return self._durations[index]

    def get_waypoint_duration_from_start(self, index: int) -> float:
        """
        Cumulative time at waypoint ``index``.

        Indices past the end are clamped to the last waypoint.
        """
        if not self._durations:
            return 0.0
        index = min(index, len(self._durations) - 1)
        return float(sum(self._durations[: index + 1]))

    def __len__(self) -> int:
        return len(self._waypoints)

    def __iter__(self) -> Iterator[RobotState]:
        return iter(self._waypoints)

    def __repr__(self) -> str:
        return (
            f"RobotTrajectory(group='{self.group_name}', "
            f"waypoints={self.waypoint_count}, duration={self.duration:.3f})"
        )


def load_robot_trajectory(
    path: str | Path, robot_model: RobotModel, group: str
) -> RobotTrajectory:
    """
    Build a RobotTrajectory from a YAML trajectory file.

    Waypoint times in the file are measured from the start and converted to
    durations from the previous waypoint.

    Raises:
        ConfigurationError: If the file is missing or invalid
        RobotError: If the group or a joint name is unknown
    """
    waypoint_file = load_waypoint_file(path)
    trajectory = RobotTrajectory(robot_model, group)

    t_prev = 0.0
    for waypoint in waypoint_file.waypoints:
        state = RobotState(robot_model)
        state.set_variable_positions(waypoint.positions)
        for name, value in waypoint.velocities.items():
            state.set_variable_velocity(name, value)
        trajectory.add_suffix_waypoint(state, waypoint.time - t_prev)
        t_prev = waypoint.time
    return trajectory
