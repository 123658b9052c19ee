"""
jointbridge - Conversions between kinematic joint models and dynamics models.

Maps name-addressed joint groups onto the dense, ordinal-addressed vectors of
a multibody dynamics model, and converts waypoint trajectories to and from
continuous piecewise-polynomial trajectories.
"""

__version__ = "0.1.0"
__author__ = "jointbridge Contributors"

from jointbridge.core.config import ConfigManager
from jointbridge.core.robot import RobotLoader
from jointbridge.dynamics.model import DynamicsModel

__all__ = [
    "__version__",
    "ConfigManager",
    "DynamicsModel",
    "RobotLoader",
]
