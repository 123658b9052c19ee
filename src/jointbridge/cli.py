"""
Command-line interface for jointbridge.

Provides commands to inspect configured robots, print the dense bound
vectors of a joint group, resample waypoint trajectories, and rewrite mesh
paths.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jointbridge import __version__
from jointbridge.conversions.bounds import get_joint_bounds
from jointbridge.conversions.indexing import get_joint_indices
from jointbridge.conversions.trajectory import (
    get_piecewise_polynomial,
    get_robot_trajectory,
)
from jointbridge.core.config import ConfigManager
from jointbridge.core.logging import bind_context, configure_logging
from jointbridge.core.robot import RobotLoader, RobotModel
from jointbridge.core.trajectory import RobotTrajectory, load_robot_trajectory
from jointbridge.dynamics.model import DynamicsModel
from jointbridge.geometry.mesh_paths import replace_stl_with_obj

console = Console()


def _format_bound(value: float) -> str:
    if abs(value) >= 1e300:
        return "-inf" if value < 0 else "inf"
    return f"{value:g}"


def _load_models(config_dir: Path, robot: str) -> tuple[RobotModel, DynamicsModel]:
    robot_config = ConfigManager(config_dir).get_robot(robot)
    robot_model = RobotLoader.load_from_config(robot_config)
    plant = DynamicsModel.from_robot_model(robot_model, order=robot_config.dynamics_order)
    return robot_model, plant


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config-dir",
    type=click.Path(path_type=Path),
    default="config",
    help="Configuration directory",
)
@click.option("--log-level", default="WARNING", help="Minimum log level")
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines")
@click.pass_context
def main(ctx: click.Context, config_dir: Path, log_level: str, json_logs: bool) -> None:
    """jointbridge - Kinematic/dynamics model conversions."""
    configure_logging(level=log_level, json_output=json_logs)
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir


@main.command("robots")
@click.pass_context
def robots(ctx: click.Context) -> None:
    """List configured robots."""
    try:
        config_mgr = ConfigManager(ctx.obj["config_dir"])
        names = config_mgr.list_robots()

        if not names:
            console.print("[yellow]No robot configurations found.[/yellow]")
            return

        table = Table(title="Available Robots")
        table.add_column("Name", style="cyan")
        table.add_column("Joints")
        table.add_column("Groups")

        for name in names:
            robot = config_mgr.get_robot(name)
            table.add_row(name, str(len(robot.joints)), ", ".join(robot.groups) or "-")

        console.print(table)

    except Exception as e:
        console.print(f"[red]✗[/red] Failed to list robots: {e}")
        raise SystemExit(1)


@main.command("bounds")
@click.argument("robot")
@click.argument("group")
@click.pass_context
def bounds(ctx: click.Context, robot: str, group: str) -> None:
    """Show the dense bound vectors of a joint group."""
    bind_context(robot=robot, group=group)
    try:
        config_dir = ctx.obj["config_dir"]
        robot_model, plant = _load_models(config_dir, robot)
        defaults = ConfigManager(config_dir).get_conversion().bound_defaults
        joint_group = robot_model.get_joint_model_group(group)
        joint_bounds = get_joint_bounds(joint_group, plant, defaults)

        table = Table(title=f"Bounds: {robot}/{group}")
        table.add_column("Index", justify="right")
        table.add_column("Joint", style="cyan")
        for quantity in ("position", "velocity", "acceleration", "jerk"):
            table.add_column(quantity.capitalize())

        names = plant.joint_names
        for index in range(plant.num_positions()):
            name = names[index]
            row = [str(index), name if joint_group.has_joint(name) else f"[dim]{name}[/dim]"]
            for quantity in ("position", "velocity", "acceleration", "jerk"):
                lower, upper = joint_bounds.for_quantity(quantity)
                row.append(escape(f"[{_format_bound(lower[index])}, {_format_bound(upper[index])}]"))
            table.add_row(*row)

        console.print(table)

    except Exception as e:
        console.print(f"[red]✗[/red] Failed to compute bounds: {e}")
        raise SystemExit(1)


@main.command("resample")
@click.argument("robot")
@click.argument("group")
@click.argument("trajectory_file", type=click.Path(exists=True, path_type=Path))
@click.option("--dt", type=float, default=None, help="Resampling step in seconds")
@click.pass_context
def resample(
    ctx: click.Context,
    robot: str,
    group: str,
    trajectory_file: Path,
    dt: Optional[float],
) -> None:
    """Resample a waypoint trajectory through a first-order hold."""
    bind_context(robot=robot, group=group)
    try:
        config_dir = ctx.obj["config_dir"]
        robot_model, plant = _load_models(config_dir, robot)
        delta_t = dt if dt is not None else ConfigManager(config_dir).get_conversion().delta_t

        source = load_robot_trajectory(trajectory_file, robot_model, group)
        continuous = get_piecewise_polynomial(source, source.group, plant)
        resampled = get_robot_trajectory(
            continuous, delta_t, plant, RobotTrajectory(robot_model, group)
        )

        joints = resampled.group.active_joint_models
        indices = get_joint_indices(resampled.group, plant)

        table = Table(title=f"Resampled: {trajectory_file.name} (dt={delta_t:g}s)")
        table.add_column("Time", justify="right")
        for joint, index in zip(joints, indices):
            table.add_column(escape(f"{joint.name} [{index}]"))

        for i, state in enumerate(resampled):
            row = [f"{resampled.get_waypoint_duration_from_start(i):.4f}"]
            for joint in joints:
                row.append(
                    f"{state.get_variable_position(joint.name):.4f} "
                    f"({state.get_variable_velocity(joint.name):+.4f})"
                )
            table.add_row(*row)

        console.print(table)

    except Exception as e:
        console.print(f"[red]✗[/red] Failed to resample trajectory: {e}")
        raise SystemExit(1)


@main.command("mesh-path")
@click.argument("path")
def mesh_path(path: str) -> None:
    """Rewrite STL mesh references in PATH to OBJ."""
    console.print(replace_stl_with_obj(path), markup=False, highlight=False, soft_wrap=True)


if __name__ == "__main__":
    main()
