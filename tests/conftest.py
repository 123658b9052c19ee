"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from jointbridge.core.robot import JointModel, RobotModel, VariableBounds
from jointbridge.dynamics.model import DynamicsModel


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_dir(temp_dir):
    """Create a sample configuration directory structure."""
    config_dir = temp_dir / "config"
    (config_dir / "robots").mkdir(parents=True)

    robot_config = """
robot:
  name: "Test Arm"

joints:
  j1:
    position: [-1.0, 1.0]
    velocity: 2.0
  j2:
    type: prismatic
    position: [0.0, 0.5]
    acceleration: [-3.0, 4.0]
  j3:
    type: continuous
    jerk: 40.0

groups:
  arm: [j1, j2]

dynamics:
  order: [j3, j2, j1]
"""
    (config_dir / "robots" / "test_arm.yaml").write_text(robot_config)

    conversion_config = """
conversion:
  delta_t: 0.25
  bound_defaults:
    max_velocity: 10.0
    max_acceleration: 20.0
    max_jerk: 30.0
"""
    (config_dir / "conversion.yaml").write_text(conversion_config)

    return config_dir


@pytest.fixture
def robot_model():
    """Three-joint robot with a two-joint 'arm' group and no declared bounds."""
    model = RobotModel(
        "test_arm",
        [JointModel("j1"), JointModel("j2"), JointModel("j3")],
    )
    model.add_group("arm", ["j1", "j2"])
    model.add_group("all", ["j1", "j2", "j3"])
    return model


@pytest.fixture
def bounded_robot_model():
    """Robot whose 'arm' joints declare position and velocity bounds."""
    j1 = JointModel(
        "j1",
        variable_bounds=[
            VariableBounds(
                min_position=-1.0,
                max_position=1.0,
                position_bounded=True,
                min_velocity=-2.0,
                max_velocity=2.0,
                velocity_bounded=True,
            )
        ],
    )
    j2 = JointModel(
        "j2",
        variable_bounds=[
            VariableBounds(
                min_acceleration=-3.0,
                max_acceleration=4.0,
                acceleration_bounded=True,
                min_jerk=-5.0,
                max_jerk=6.0,
                jerk_bounded=True,
            )
        ],
    )
    model = RobotModel("bounded_arm", [j1, j2, JointModel("j3")])
    model.add_group("arm", ["j1", "j2"])
    return model


@pytest.fixture
def plant():
    """Dynamics model whose ordinals differ from the kinematic joint order."""
    return DynamicsModel(["j3", "j2", "j1"])
