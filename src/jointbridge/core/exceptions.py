"""
Custom exceptions for jointbridge.

All jointbridge exceptions inherit from JointBridgeError for easy catching.
"""

from typing import Any


class JointBridgeError(Exception):
    """Base exception for all jointbridge errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(JointBridgeError):
    """Raised when configuration is invalid or missing."""

    pass


class RobotError(JointBridgeError):
    """Raised when a kinematic model lookup fails."""

    pass


class JointLookupError(RobotError):
    """Raised when a joint name has no counterpart in the dynamics model."""

    def __init__(
        self,
        message: str,
        joint_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.joint_name = joint_name
