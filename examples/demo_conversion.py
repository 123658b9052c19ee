"""
Demonstration of jointbridge conversions.

This script shows how to:
1. Build a kinematic robot model and a dynamics model with a different joint order
2. Resolve dense position vectors for a joint group
3. Extract dense bound vectors
4. Convert a waypoint trajectory to a first-order hold and resample it
"""

from jointbridge.conversions import (
    get_joint_bounds,
    get_joint_position_vector,
    get_piecewise_polynomial,
    get_robot_trajectory,
)
from jointbridge.core.config import JointConfig, RobotConfig
from jointbridge.core.robot import RobotLoader, RobotState
from jointbridge.core.trajectory import RobotTrajectory
from jointbridge.dynamics.model import DynamicsModel


def main():
    """Run conversion demonstration."""
    print("=" * 60)
    print("jointbridge Conversion Demo")
    print("=" * 60)

    # 1. Models
    print("\n1. Building models")
    config = RobotConfig(
        name="planar_3dof",
        joints={
            "shoulder": JointConfig(position=(-2.9, 2.9), velocity=(-2.0, 2.0)),
            "elbow": JointConfig(position=(-2.5, 2.5)),
            "wrist": JointConfig(type="continuous"),
        },
        groups={"arm": ["shoulder", "elbow"]},
    )
    robot_model = RobotLoader.load_from_config(config)
    plant = DynamicsModel.from_robot_model(robot_model, order=["wrist", "shoulder", "elbow"])
    print(f"   [OK] {robot_model}")
    print(f"   [OK] {plant}, ordinal order: {plant.joint_names}")

    # 2. Dense vectors
    print("\n2. Resolving a state into a dense position vector")
    state = RobotState(robot_model)
    state.set_variable_positions({"shoulder": 0.3, "elbow": -0.7, "wrist": 1.0})
    print(f"   Dense positions: {get_joint_position_vector(state, 'arm', plant)}")
    print("   (wrist is outside the group and stays at zero)")

    # 3. Bounds
    print("\n3. Dense bounds")
    bounds = get_joint_bounds(robot_model.get_joint_model_group("arm"), plant)
    print(f"   Velocity lower: {bounds.lower_velocity}")
    print(f"   Velocity upper: {bounds.upper_velocity}")

    # 4. Trajectories
    print("\n4. Waypoints -> first-order hold -> waypoints")
    trajectory = RobotTrajectory(robot_model, "arm")
    for t, shoulder in ((0.0, 0.0), (0.5, 0.5), (0.5, 1.0)):
        waypoint = RobotState(robot_model)
        waypoint.set_variable_position("shoulder", shoulder)
        trajectory.add_suffix_waypoint(waypoint, t)

    continuous = get_piecewise_polynomial(trajectory, trajectory.group, plant)
    print(f"   {continuous}")

    resampled = get_robot_trajectory(continuous, 0.25, plant, RobotTrajectory(robot_model, "arm"))
    for i, waypoint in enumerate(resampled):
        print(
            f"   t={resampled.get_waypoint_duration_from_start(i):.2f}s "
            f"shoulder={waypoint.get_variable_position('shoulder'):.3f} "
            f"velocity={waypoint.get_variable_velocity('shoulder'):.3f}"
        )

    print("\n" + "=" * 60)
    print("[SUCCESS] Conversion demo completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
