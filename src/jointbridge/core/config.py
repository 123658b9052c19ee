"""
Configuration management for jointbridge.

Handles loading, validation, and access to robot descriptions and conversion
settings stored as YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from jointbridge.core.exceptions import ConfigurationError

# Large symmetric limits used where a joint declares no velocity, acceleration
# or jerk bound. Infinite limits make the downstream optimizer fail.
DEFAULT_MAX_VELOCITY = 100.0
DEFAULT_MAX_ACCELERATION = 100.0
DEFAULT_MAX_JERK = 100.0

DEFAULT_DELTA_T = 0.01


class BoundDefaults(BaseModel):
    """Default magnitudes for joints without declared derivative bounds."""

    max_velocity: float = Field(default=DEFAULT_MAX_VELOCITY, gt=0)
    max_acceleration: float = Field(default=DEFAULT_MAX_ACCELERATION, gt=0)
    max_jerk: float = Field(default=DEFAULT_MAX_JERK, gt=0)


class ConversionConfig(BaseModel):
    """Settings for trajectory conversion."""

    delta_t: float = Field(default=DEFAULT_DELTA_T, gt=0)
    bound_defaults: BoundDefaults = Field(default_factory=BoundDefaults)


class JointConfig(BaseModel):
    """
    Joint description model.

    Limits may be given as a ``[min, max]`` pair or as a single magnitude,
    which is expanded to ``[-magnitude, magnitude]``.
    """

    type: Literal["revolute", "continuous", "prismatic"] = "revolute"
    position: tuple[float, float] | None = None
    velocity: tuple[float, float] | None = None
    acceleration: tuple[float, float] | None = None
    jerk: tuple[float, float] | None = None

    @field_validator("position", "velocity", "acceleration", "jerk", mode="before")
    @classmethod
    def _expand_symmetric(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return (-abs(value), abs(value))
        return value

    @field_validator("position", "velocity", "acceleration", "jerk")
    @classmethod
    def _check_order(cls, value: tuple[float, float] | None) -> tuple[float, float] | None:
        if value is not None and value[0] > value[1]:
            raise ValueError(f"lower limit {value[0]} exceeds upper limit {value[1]}")
        return value


class RobotConfig(BaseModel):
    """Robot description model."""

    name: str
    urdf_path: str | None = None
    joints: dict[str, JointConfig] = Field(default_factory=dict)
    groups: dict[str, list[str]] = Field(default_factory=dict)
    dynamics_order: list[str] | None = None


@dataclass
class ConfigManager:
    """
    Central configuration manager for jointbridge.

    Loads and validates robot descriptions from ``robots/*.yaml`` and
    conversion settings from an optional ``conversion.yaml``.

    Example:
        >>> config = ConfigManager(config_dir=Path("config"))
        >>> robot = config.get_robot("panda")
        >>> conversion = config.get_conversion()
    """

    config_dir: Path
    _robots: dict[str, RobotConfig] = field(default_factory=dict, init=False)
    _conversion: ConversionConfig = field(default_factory=ConversionConfig, init=False)
    _loaded: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Initialize configuration manager."""
        self.config_dir = Path(self.config_dir)
        if not self.config_dir.exists():
            raise ConfigurationError(
                f"Configuration directory not found: {self.config_dir}"
            )

    def load(self) -> None:
        """Load all configurations from disk."""
        self._load_robots()
        self._load_conversion()
        self._loaded = True

    def _load_robots(self) -> None:
        """Load robot descriptions."""
        robots_dir = self.config_dir / "robots"
        if not robots_dir.exists():
            return

        for config_file in sorted(robots_dir.glob("*.yaml")):
            try:
                with open(config_file) as f:
                    data = yaml.safe_load(f)

                if data and "robot" in data:
                    robot_data = dict(data["robot"])
                    if "joints" in data:
                        robot_data["joints"] = data["joints"] or {}
                    if "groups" in data:
                        robot_data["groups"] = data["groups"] or {}
                    if "dynamics" in data:
                        robot_data["dynamics_order"] = (data["dynamics"] or {}).get("order")

                    self._robots[config_file.stem] = RobotConfig(**robot_data)
            except (yaml.YAMLError, ValidationError) as e:
                raise ConfigurationError(
                    f"Failed to load robot config: {config_file}",
                    details={"error": str(e)},
                )

    def _load_conversion(self) -> None:
        """Load conversion settings, keeping defaults when the file is absent."""
        config_file = self.config_dir / "conversion.yaml"
        if not config_file.exists():
            return

        try:
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            self._conversion = ConversionConfig(**data.get("conversion", {}))
        except (yaml.YAMLError, ValidationError) as e:
            raise ConfigurationError(
                f"Failed to load conversion config: {config_file}",
                details={"error": str(e)},
            )

    def get_robot(self, name: str) -> RobotConfig:
        """
        Get robot configuration by name.

        Args:
            name: Robot configuration name (without .yaml extension)

        Returns:
            RobotConfig instance

        Raises:
            ConfigurationError: If robot not found
        """
        if not self._loaded:
            self.load()

        if name not in self._robots:
            available = list(self._robots.keys())
            raise ConfigurationError(
                f"Robot configuration not found: {name}",
                details={"available": available},
            )
        return self._robots[name]

    def get_conversion(self) -> ConversionConfig:
        """Get conversion settings (defaults if no conversion.yaml exists)."""
        if not self._loaded:
            self.load()
        return self._conversion

    def list_robots(self) -> list[str]:
        """List available robot configurations."""
        if not self._loaded:
            self.load()
        return list(self._robots.keys())


class WaypointConfig(BaseModel):
    """One waypoint of a trajectory file."""

    time: float = Field(ge=0)
    positions: dict[str, float] = Field(default_factory=dict)
    velocities: dict[str, float] = Field(default_factory=dict)


class WaypointFileConfig(BaseModel):
    """Trajectory file: waypoints with times measured from the start."""

    waypoints: list[WaypointConfig] = Field(min_length=1)


def load_waypoint_file(path: str | Path) -> WaypointFileConfig:
    """
    Load and validate a YAML trajectory file.

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Trajectory file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return WaypointFileConfig(**data)
    except (yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigurationError(
            f"Failed to load trajectory file: {path}",
            details={"error": str(e)},
        )
