"""
Dense bound vectors for the dynamics model.

Each extractor returns ``(lower, upper)`` arrays covering the whole dynamics
model. Entries start at a default and are overwritten at the ordinal of
every active joint that declares the quantity as bounded. Only the first
variable bound of each joint is read; joints are assumed to have one degree
of freedom.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from jointbridge.core.config import BoundDefaults
from jointbridge.core.logging import get_logger
from jointbridge.core.robot import JointModel, JointModelGroup, VariableBounds
from jointbridge.dynamics.model import DynamicsModel

_logger = get_logger(__name__)

_LOWEST = np.finfo(np.float64).min
_HIGHEST = np.finfo(np.float64).max


class BoundQuantity(Enum):
    """Physical quantities that carry joint bounds."""

    POSITION = "position"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"
    JERK = "jerk"


@dataclass
class JointBounds:
    """Lower and upper bound vectors for all four quantities."""

    lower_position: np.ndarray
    upper_position: np.ndarray
    lower_velocity: np.ndarray
    upper_velocity: np.ndarray
    lower_acceleration: np.ndarray
    upper_acceleration: np.ndarray
    lower_jerk: np.ndarray
    upper_jerk: np.ndarray

    def for_quantity(self, quantity: BoundQuantity | str) -> tuple[np.ndarray, np.ndarray]:
        name = BoundQuantity(quantity).value
        return getattr(self, f"lower_{name}"), getattr(self, f"upper_{name}")


def _first_variable_bounds(joint: JointModel) -> VariableBounds:
    if joint.variable_count > 1:
        _logger.warning(
            "multi_dof_joint_bounds_truncated",
            joint=joint.name,
            variable_count=joint.variable_count,
        )
    return joint.variable_bounds[0]


def _fill_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    size: int,
    quantity: BoundQuantity,
    default_lower: float,
    default_upper: float,
) -> tuple[np.ndarray, np.ndarray]:
    lower = np.full(size, default_lower, dtype=float)
    upper = np.full(size, default_upper, dtype=float)

    name = quantity.value
    for joint in group.active_joint_models:
        bounds = _first_variable_bounds(joint)
        index = plant.get_joint_by_name(joint.name).ordinal
        if getattr(bounds, f"{name}_bounded"):
            lower[index] = getattr(bounds, f"min_{name}")
            upper[index] = getattr(bounds, f"max_{name}")
    return lower, upper


def get_position_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    defaults: BoundDefaults | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Position bounds sized to ``plant.num_positions()``.

    Undeclared entries span the full float range. ``defaults`` is accepted
    for a uniform signature and not consulted.
    """
    assert plant.num_positions() >= len(group.active_joint_models)
    return _fill_bounds(
        group, plant, plant.num_positions(), BoundQuantity.POSITION, _LOWEST, _HIGHEST
    )


def get_velocity_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    defaults: BoundDefaults | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Velocity bounds sized to ``plant.num_velocities()``, default ±max_velocity."""
    defaults = defaults or BoundDefaults()
    assert plant.num_velocities() >= len(group.active_joint_models)
    return _fill_bounds(
        group,
        plant,
        plant.num_velocities(),
        BoundQuantity.VELOCITY,
        -defaults.max_velocity,
        defaults.max_velocity,
    )


def get_acceleration_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    defaults: BoundDefaults | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Acceleration bounds sized to ``plant.num_velocities()``, default ±max_acceleration."""
    defaults = defaults or BoundDefaults()
    assert plant.num_accelerations() >= len(group.active_joint_models)
    return _fill_bounds(
        group,
        plant,
        plant.num_velocities(),
        BoundQuantity.ACCELERATION,
        -defaults.max_acceleration,
        defaults.max_acceleration,
    )


def get_jerk_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    defaults: BoundDefaults | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Jerk bounds sized to ``plant.num_velocities()``, default ±max_jerk."""
    defaults = defaults or BoundDefaults()
    assert plant.num_velocities() >= len(group.active_joint_models)
    return _fill_bounds(
        group,
        plant,
        plant.num_velocities(),
        BoundQuantity.JERK,
        -defaults.max_jerk,
        defaults.max_jerk,
    )


_EXTRACTORS = {
    BoundQuantity.POSITION: get_position_bounds,
    BoundQuantity.VELOCITY: get_velocity_bounds,
    BoundQuantity.ACCELERATION: get_acceleration_bounds,
    BoundQuantity.JERK: get_jerk_bounds,
}


def get_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    quantity: BoundQuantity | str,
    defaults: BoundDefaults | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Bounds for one quantity, given as a BoundQuantity or its string value.

    Raises:
        ValueError: If ``quantity`` is not a known quantity
    """
    return _EXTRACTORS[BoundQuantity(quantity)](group, plant, defaults)


def get_joint_bounds(
    group: JointModelGroup,
    plant: DynamicsModel,
    defaults: BoundDefaults | None = None,
) -> JointBounds:
    """Bounds for all four quantities."""
    lower_p, upper_p = get_position_bounds(group, plant, defaults)
    lower_v, upper_v = get_velocity_bounds(group, plant, defaults)
    lower_a, upper_a = get_acceleration_bounds(group, plant, defaults)
    lower_j, upper_j = get_jerk_bounds(group, plant, defaults)
    return JointBounds(
        lower_position=lower_p,
        upper_position=upper_p,
        lower_velocity=lower_v,
        upper_velocity=upper_v,
        lower_acceleration=lower_a,
        upper_acceleration=upper_a,
        lower_jerk=lower_j,
        upper_jerk=upper_j,
    )
