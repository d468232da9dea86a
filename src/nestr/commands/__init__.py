"""Subcommand modules for nestr.

Provides register_commands() which uses deferred imports to keep
``nestr --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nestr.commands.decompose import inspect, words
    from nestr.commands.number import number
    from nestr.commands.search import drop, search, slice_cmd, take, trim
    from nestr.commands.transform import concat, pad, transform

    cli.add_command(inspect)
    cli.add_command(words)
    cli.add_command(transform)
    cli.add_command(pad)
    cli.add_command(concat)
    cli.add_command(slice_cmd)
    cli.add_command(take)
    cli.add_command(drop)
    cli.add_command(search)
    cli.add_command(trim)
    cli.add_command(number)
