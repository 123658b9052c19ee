"""
Dynamics model: joints addressed by dense ordinal indices.

The ordinal of a joint is the index of its scalar state inside the dense
position and velocity vectors handed to an optimizer. Ordinals are assigned
once, at construction, and are authoritative for every conversion.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from compas_robots import RobotModel as UrdfRobotModel

from jointbridge.core.exceptions import ConfigurationError, JointLookupError, RobotError
from jointbridge.core.robot import RobotModel


@dataclass(frozen=True)
class DynamicsJoint:
    """A joint of the dynamics model and its ordinal index."""

    name: str
    ordinal: int


class DynamicsModel:
    """
    Multibody model addressed by ordinal index.

    Every joint carries one position and one velocity degree of freedom, so
    ``num_positions == num_velocities == len(joints)``.

    Example:
        >>> plant = DynamicsModel(["shoulder", "elbow", "wrist"])
        >>> plant.get_joint_by_name("elbow").ordinal
        1
    """

    def __init__(self, joint_names: Iterable[str], name: str = "plant") -> None:
        self.name = name
        self._joints: dict[str, DynamicsJoint] = {}
        for ordinal, joint_name in enumerate(joint_names):
            if joint_name in self._joints:
                raise ConfigurationError(
                    f"Duplicate joint name in dynamics model: {joint_name}"
                )
            self._joints[joint_name] = DynamicsJoint(joint_name, ordinal)

    @classmethod
    def from_robot_model(
        cls, robot_model: RobotModel, order: Sequence[str] | None = None
    ) -> "DynamicsModel":
        """
        Build a dynamics model over the joints of a kinematic model.

        Args:
            robot_model: Kinematic model supplying the joint names
            order: Explicit ordinal order; defaults to the model's joint order

        Raises:
            ConfigurationError: If ``order`` names a joint the model lacks
        """
        if order is None:
            return cls(robot_model.joint_names, name=robot_model.name)

        unknown = [n for n in order if not robot_model.has_joint_model(n)]
        if unknown:
            raise ConfigurationError(
                "Dynamics order references unknown joints",
                details={"unknown": unknown},
            )
        return cls(order, name=robot_model.name)

    @classmethod
    def from_urdf(cls, urdf_path: str | Path) -> "DynamicsModel":
        """
        Build a dynamics model from the configurable joints of a URDF file.

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

        names = [joint.name for joint in urdf_model.joints if joint.is_configurable()]
        return cls(names, name=urdf_model.name)

    def num_positions(self) -> int:
        return len(self._joints)

    def num_velocities(self) -> int:
        return len(self._joints)

    def num_accelerations(self) -> int:
        return self.num_velocities()

    @property
    def joint_names(self) -> list[str]:
        """Joint names in ordinal order."""
        return list(self._joints.keys())

    def has_joint(self, name: str) -> bool:
        return name in self._joints

    def get_joint_by_name(self, name: str) -> DynamicsJoint:
        """
        Look up a joint by name.

        Raises:
            JointLookupError: If no joint of that name exists
        """
        try:
            return self._joints[name]
        except KeyError:
            raise JointLookupError(
                f"There is no joint named '{name}' in dynamics model '{self.name}'",
                joint_name=name,
                details={"available": self.joint_names},
            ) from None

    def __repr__(self) -> str:
        return f"DynamicsModel(name='{self.name}', positions={self.num_positions()})"
