"""
Dynamics module - Ordinal-addressed multibody model and continuous trajectories.
"""

from jointbridge.dynamics.model import DynamicsJoint, DynamicsModel
from jointbridge.dynamics.polynomial import PiecewisePolynomial

__all__ = [
    "DynamicsJoint",
    "DynamicsModel",
    "PiecewisePolynomial",
]
