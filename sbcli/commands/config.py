"""Config commands."""

import click

from .. import ui
from ..config import ConfigManager
from ..utils import handle_errors


@click.group("config")
def config_command():
    """Manage sbcli configuration."""


@config_command.command("get")
@click.argument("key")
@handle_errors
def config_get_command(key: str):
    """Print the value of KEY (section.key)."""
    value = ConfigManager().get(key)
    if value is None:
        ui.error(f"Key '{key}' not found")
        return
    ui.print(value)


@config_command.command("set")
@click.argument("key")
@click.argument("value")
@handle_errors
def config_set_command(key: str, value: str):
    """Set KEY (section.key) to VALUE."""
    config = ConfigManager()
    config.set(key, value)
    ui.success(f"{key} = {config.get(key)}")


@config_command.command("unset")
@click.argument("key")
@handle_errors
def config_unset_command(key: str):
    """Remove KEY from the config file."""
    if not ConfigManager().unset(key):
        ui.error(f"Key '{key}' not found")
        return
    ui.success(f"Removed {key}")


@config_command.command("show")
@handle_errors
def config_show_command():
    """Show the entire configuration."""
    config = ConfigManager()
    data = config.as_dict()
    ui.dim(str(config.get_config_path()))
    if not data:
        ui.info("Configuration is empty")
        return
    for section, values in data.items():
        for key, value in values.items():
            ui.info(f"{section}.{key} = {value}")


@config_command.command("path")
@handle_errors
def config_path_command():
    """Print the config file location."""
    ui.print(str(ConfigManager().get_config_path()))
