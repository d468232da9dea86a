"""Entry point for the ``nestr`` command."""

from __future__ import annotations

import click

from nestr import __version__
from nestr.commands import register_commands
from nestr.commands._context import AppContext
from nestr.config.settings import NestrSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="nestr")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this config file instead of searching for nestr.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """nestr — work with strings that are never empty."""
    ctx.obj = AppContext(NestrSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
