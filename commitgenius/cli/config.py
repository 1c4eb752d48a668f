"""CLI commands for global configuration management."""

import typer
import yaml

from commitgenius import global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitgenius configuration in ~/.commitgenius/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration."""
    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    config_file = global_config.get_config_file_path()
    if global_config.is_configured():
        typer.echo(f"Current commitgenius configuration ({config_file}):")
    else:
        typer.echo(f"No configuration file found at {config_file}; showing defaults.")
    typer.echo()

    typer.echo(yaml.dump(config.model_dump(), default_flow_style=False, sort_keys=False).rstrip())


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Setting to read, e.g. model.default_model"),
) -> None:
    """Print a single configuration value."""
    try:
        value = global_config.get_config_value(key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if value is None:
        typer.echo(f"Unknown configuration key: {key}", err=True)
        raise typer.Exit(1)

    if isinstance(value, dict):
        typer.echo(yaml.dump(value, default_flow_style=False, sort_keys=False).rstrip())
    else:
        typer.echo(value)


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting to change, e.g. model.temperature"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    try:
        stored = global_config.set_config_value(key, value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error updating configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Set {key} = {stored}")


@config_app.command("reset")
def config_reset(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Reset without asking for confirmation",
    ),
) -> None:
    """Reset the configuration to default values."""
    if not yes and not typer.confirm("Reset all settings to their defaults?"):
        typer.echo("Reset cancelled.")
        return

    try:
        global_config.reset_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error resetting configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Configuration reset to defaults ({global_config.get_config_file_path()})")
