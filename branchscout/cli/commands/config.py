"""
Config command group.

Usage: branchscout config [list|get|set] [key] [value]
"""

from __future__ import annotations

import click

from ...config import config_get, config_list, config_set, get_nested
from ..context import BranchscoutContext
from ..decorators import translate_errors


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View or set configuration.

    Values are written to the nearest .branchscout.toml, or to a new one
    in the working directory.

    \b
    Examples:
        branchscout config list
        branchscout config get git.default_branch
        branchscout config set parent.tie_policy latest
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
@click.pass_obj
def config_list_cmd(ctx: BranchscoutContext) -> None:
    """List all config options with their current values."""
    current = ctx.settings.to_dict()
    for key, info in config_list().items():
        click.echo(key)
        click.echo(f"    {info['description']}")
        click.echo(f"    Current: {get_nested(current, key)}  (default: {info['default']})")


@config.command("get")
@click.argument("key")
@click.pass_obj
@translate_errors
def config_get_cmd(ctx: BranchscoutContext, key: str) -> None:
    """Print the value of KEY (e.g. git.remote), or a whole section."""
    value = config_get(key, start_dir=ctx.path)
    click.echo(f"{key}: {'(not set)' if value is None else value}")


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@translate_errors
def config_set_cmd(ctx: BranchscoutContext, key: str, value: str) -> None:
    """Set KEY to VALUE; pass an empty VALUE to unset parent.lookback_days."""
    config_path, typed_value = config_set(key, value, start_dir=ctx.path)
    click.echo(f"Set {key} = {typed_value}")
    click.echo(f"Saved to {config_path}")
