"""
Kinematic robot model for jointbridge.

Provides the name-addressed side of the conversion: joints with declared
variable bounds, named joint groups, and state snapshots holding joint
positions and velocities. Models are built from YAML configuration or
from URDF via compas_robots.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from compas_robots import RobotModel as UrdfRobotModel
from compas_robots.model import Joint as UrdfJoint

from jointbridge.core.config import JointConfig, RobotConfig
from jointbridge.core.exceptions import ConfigurationError, RobotError

DEFAULT_GROUP_NAME = "all"

# URDF joint type -> (joint_type, degrees of freedom)
_URDF_JOINT_TYPES = {
    UrdfJoint.REVOLUTE: ("revolute", 1),
    UrdfJoint.CONTINUOUS: ("continuous", 1),
    UrdfJoint.PRISMATIC: ("prismatic", 1),
    UrdfJoint.PLANAR: ("planar", 3),
    UrdfJoint.FLOATING: ("floating", 6),
}


@dataclass
class VariableBounds:
    """
    Declared limits of a single joint variable.

    A quantity only constrains the joint when its ``*_bounded`` flag is set;
    the min/max values are ignored otherwise.
    """

    min_position: float = 0.0
    max_position: float = 0.0
    position_bounded: bool = False
    min_velocity: float = 0.0
    max_velocity: float = 0.0
    velocity_bounded: bool = False
    min_acceleration: float = 0.0
    max_acceleration: float = 0.0
    acceleration_bounded: bool = False
    min_jerk: float = 0.0
    max_jerk: float = 0.0
    jerk_bounded: bool = False

    @classmethod
    def from_joint_config(cls, config: JointConfig) -> "VariableBounds":
        bounds = cls()
        for quantity in ("position", "velocity", "acceleration", "jerk"):
            limits = getattr(config, quantity)
            if limits is None:
                continue
            setattr(bounds, f"min_{quantity}", float(limits[0]))
            setattr(bounds, f"max_{quantity}", float(limits[1]))
            setattr(bounds, f"{quantity}_bounded", True)
        # Continuous joints wrap, position limits do not apply
        if config.type == "continuous":
            bounds.position_bounded = False
        return bounds


@dataclass
class JointModel:
    """
    A named joint of the kinematic model.

    Attributes:
        name: Joint name, unique within the robot model
        joint_type: One of ``revolute``, ``continuous``, ``prismatic``,
            or ``planar``/``floating`` for URDF multi-DOF joints
        variable_bounds: One entry per degree of freedom
    """

    name: str
    joint_type: str = "revolute"
    variable_bounds: list[VariableBounds] = field(
        default_factory=lambda: [VariableBounds()]
    )

    @property
    def variable_count(self) -> int:
        return len(self.variable_bounds)

    @property
    def variable_names(self) -> list[str]:
        if self.variable_count == 1:
            return [self.name]
        return [f"{self.name}/{i}" for i in range(self.variable_count)]


class JointModelGroup:
    """An ordered set of active joints treated as one actuation unit."""

    def __init__(self, name: str, joints: Sequence[JointModel]) -> None:
        self.name = name
        self._joints = list(joints)

    @property
    def active_joint_models(self) -> list[JointModel]:
        return list(self._joints)

    @property
    def active_joint_names(self) -> list[str]:
        return [joint.name for joint in self._joints]

    def has_joint(self, name: str) -> bool:
        return any(joint.name == name for joint in self._joints)

    def get_joint_model(self, name: str) -> JointModel:
        for joint in self._joints:
            if joint.name == name:
                return joint
        raise RobotError(
            f"Joint '{name}' is not part of group '{self.name}'",
            details={"available": self.active_joint_names},
        )

    def __len__(self) -> int:
        return len(self._joints)

    def __repr__(self) -> str:
        return f"JointModelGroup(name='{self.name}', joints={self.active_joint_names})"


class RobotModel:
    """
    Kinematic robot model: ordered joints and the named groups over them.

    Example:
        >>> model = RobotModel("arm", [JointModel("j1"), JointModel("j2")])
        >>> model.add_group("arm", ["j1", "j2"])
        >>> model.get_joint_model_group("arm").active_joint_names
        ['j1', 'j2']
    """

    def __init__(self, name: str, joints: Iterable[JointModel]) -> None:
        self.name = name
        self._joints: dict[str, JointModel] = {}
        for joint in joints:
            if joint.name in self._joints:
                raise ConfigurationError(f"Duplicate joint name: {joint.name}")
            self._joints[joint.name] = joint
        self._groups: dict[str, JointModelGroup] = {}

    def add_group(self, name: str, joint_names: Sequence[str]) -> JointModelGroup:
        """
        Register a joint group.

        Raises:
            ConfigurationError: If a joint name is unknown to the model
        """
        missing = [n for n in joint_names if n not in self._joints]
        if missing:
            raise ConfigurationError(
                f"Group '{name}' references unknown joints",
                details={"missing": missing},
            )
        group = JointModelGroup(name, [self._joints[n] for n in joint_names])
        self._groups[name] = group
        return group

    @property
    def joint_names(self) -> list[str]:
        return list(self._joints.keys())

    @property
    def joint_models(self) -> list[JointModel]:
        return list(self._joints.values())

    @property
    def variable_names(self) -> list[str]:
        return [v for joint in self._joints.values() for v in joint.variable_names]

    @property
    def group_names(self) -> list[str]:
        return list(self._groups.keys())

    def has_joint_model(self, name: str) -> bool:
        return name in self._joints

    def get_joint_model(self, name: str) -> JointModel:
        if name not in self._joints:
            raise RobotError(
                f"Joint '{name}' not found in robot model '{self.name}'"
            )
        return self._joints[name]

    def get_joint_model_group(self, name: str) -> JointModelGroup:
        if name not in self._groups:
            raise RobotError(
                f"Joint group '{name}' not found in robot model '{self.name}'",
                details={"available": self.group_names},
            )
        return self._groups[name]

    def __repr__(self) -> str:
        return (
            f"RobotModel(name='{self.name}', joints={len(self._joints)}, "
            f"groups={self.group_names})"
        )


class RobotState:
    """
    Snapshot of joint positions and velocities, addressed by variable name.

    All variables start at zero.
    """

    def __init__(self, robot_model: RobotModel) -> None:
        self.robot_model = robot_model
        names = robot_model.variable_names
        self._positions: dict[str, float] = dict.fromkeys(names, 0.0)
        self._velocities: dict[str, float] = dict.fromkeys(names, 0.0)

    def _check_variable(self, name: str) -> None:
        if name not in self._positions:
            raise RobotError(
                f"Variable '{name}' not found in robot model '{self.robot_model.name}'"
            )

    def get_variable_position(self, name: str) -> float:
        self._check_variable(name)
        return self._positions[name]

    def get_variable_velocity(self, name: str) -> float:
        self._check_variable(name)
        return self._velocities[name]

    def set_variable_position(self, name: str, value: float) -> None:
        self._check_variable(name)
        self._positions[name] = float(value)

    def set_variable_velocity(self, name: str, value: float) -> None:
        self._check_variable(name)
        self._velocities[name] = float(value)

    def set_variable_positions(self, values: dict[str, float]) -> None:
        for name, value in values.items():
            self.set_variable_position(name, value)

    def set_joint_positions(self, joint: JointModel, values: Sequence[float]) -> None:
        """Write the first ``variable_count`` entries of ``values`` to ``joint``."""
        for name, value in zip(joint.variable_names, values):
            self.set_variable_position(name, value)

    def set_joint_velocities(self, joint: JointModel, values: Sequence[float]) -> None:
        for name, value in zip(joint.variable_names, values):
            self.set_variable_velocity(name, value)

    def get_joint_positions(self, joint: JointModel) -> list[float]:
        return [self.get_variable_position(n) for n in joint.variable_names]

    def get_joint_velocities(self, joint: JointModel) -> list[float]:
        return [self.get_variable_velocity(n) for n in joint.variable_names]

    def copy(self) -> "RobotState":
        state = RobotState(self.robot_model)
        state._positions = dict(self._positions)
        state._velocities = dict(self._velocities)
        return state

    def __repr__(self) -> str:
        return f"RobotState(robot='{self.robot_model.name}', positions={self._positions})"


class RobotLoader:
    """
    Builds kinematic robot models from configuration or URDF files.

    URDF parsing goes through compas_robots.
    """

    @classmethod
    def load_from_config(cls, config: RobotConfig) -> RobotModel:
        """
        Build a robot model from a RobotConfig.

        Joints come from the ``joints`` section, or from ``urdf_path`` when
        no joints are listed.

        Raises:
            ConfigurationError: If the config describes no joints or a group
                references an unknown joint
        """
        if config.joints:
            joints = [
                JointModel(
                    name=name,
                    joint_type=joint_config.type,
                    variable_bounds=[VariableBounds.from_joint_config(joint_config)],
                )
                for name, joint_config in config.joints.items()
            ]
            model = RobotModel(config.name, joints)
            cls._add_groups(model, config.groups)
            return model

        if config.urdf_path:
            return cls.load_from_urdf(config.urdf_path, groups=config.groups, name=config.name)

        raise ConfigurationError(
            f"Robot '{config.name}' has neither joints nor a URDF path"
        )

    @classmethod
    def load_from_urdf(
        cls,
        urdf_path: str | Path,
        groups: dict[str, list[str]] | None = None,
        name: str | None = None,
    ) -> RobotModel:
        """
        Build a robot model from a URDF file.

        Args:
            urdf_path: Path to URDF file
            groups: Group name to joint names; defaults to one group holding
                every configurable joint
            name: Override for the robot name

        Raises:
            RobotError: If the file is missing or cannot be parsed
        """
        path = Path(urdf_path)
        if not path.exists():
            raise RobotError(f"URDF file not found: {path}")

        try:
            urdf_model = UrdfRobotModel.from_urdf_file(str(path))
        except Exception as e:
            raise RobotError(f"Failed to load URDF from {path}: {e}") from e

        return cls.from_urdf_model(urdf_model, groups=groups, name=name)

    @classmethod
    def from_urdf_model(
        cls,
        urdf_model: UrdfRobotModel,
        groups: dict[str, list[str]] | None = None,
        name: str | None = None,
    ) -> RobotModel:
        """Build a robot model from an already parsed compas_robots model."""
        joints = [
            cls._joint_from_urdf(joint)
            for joint in urdf_model.joints
            if joint.is_configurable()
        ]
        model = RobotModel(name or urdf_model.name, joints)
        cls._add_groups(model, groups or {DEFAULT_GROUP_NAME: model.joint_names})
        return model

    @staticmethod
    def _joint_from_urdf(joint: UrdfJoint) -> JointModel:
        if joint.type not in _URDF_JOINT_TYPES:
            raise RobotError(
                f"Unsupported URDF joint type for joint '{joint.name}'",
                details={"type": joint.type},
            )
        joint_type, dof = _URDF_JOINT_TYPES[joint.type]
        if dof > 1:
            # URDF limits do not apply to planar or floating joints
            return JointModel(
                name=joint.name,
                joint_type=joint_type,
                variable_bounds=[VariableBounds() for _ in range(dof)],
            )

        bounds = VariableBounds()
        limit = joint.limit
        if limit is not None:
            if joint_type != "continuous":
                bounds.min_position = float(limit.lower)
                bounds.max_position = float(limit.upper)
                bounds.position_bounded = True
            if limit.velocity and limit.velocity > 0:
                bounds.min_velocity = -float(limit.velocity)
                bounds.max_velocity = float(limit.velocity)
                bounds.velocity_bounded = True

        return JointModel(name=joint.name, joint_type=joint_type, variable_bounds=[bounds])

    @staticmethod
    def _add_groups(model: RobotModel, groups: dict[str, list[str]]) -> None:
        if not groups:
            model.add_group(DEFAULT_GROUP_NAME, model.joint_names)
            return
        for group_name, joint_names in groups.items():
            model.add_group(group_name, joint_names)
