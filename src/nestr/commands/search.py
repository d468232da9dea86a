"""Commands: substrings, search, and trimming (results may be empty)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestr.commands._base import NestrCommand
from nestr.domain.types import Side

if TYPE_CHECKING:
    from nestr.commands._context import AppContext

_END_CHOICE = click.Choice([Side.LEFT.value, Side.RIGHT.value])


@click.command(
    "slice",
    cls=NestrCommand,
    examples="""\
  nestr slice hello 1 3
  nestr slice hello -- -3""",
)
@click.argument("text")
@click.argument("start", type=int)
@click.argument("end", type=int, required=False)
@click.pass_obj
def slice_cmd(app: AppContext, text: str, start: int, end: int | None) -> None:
    """Characters of TEXT from START up to (not including) END.

    Negative indices count from the end.
    """
    app.emit(app.text.slice(text, start, end))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr take hello 2
  nestr take hello 2 --from right""",
)
@click.argument("text")
@click.argument("count", type=int)
@click.option("--from", "side", type=_END_CHOICE, default="left", show_default=True)
@click.pass_obj
def take(app: AppContext, text: str, count: int, side: str) -> None:
    """Keep the first (or last) COUNT characters of TEXT."""
    app.emit(app.text.take(text, count, side=Side(side)))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr drop hello 2
  nestr drop hello 2 --from right""",
)
@click.argument("text")
@click.argument("count", type=int)
@click.option("--from", "side", type=_END_CHOICE, default="left", show_default=True)
@click.pass_obj
def drop(app: AppContext, text: str, count: int, side: str) -> None:
    """Remove the first (or last) COUNT characters of TEXT."""
    app.emit(app.text.drop(text, count, side=Side(side)))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr search banana ana
  nestr --json search "hello world" o""",
)
@click.argument("text")
@click.argument("needle")
@click.pass_obj
def search(app: AppContext, text: str, needle: str) -> None:
    """Find every occurrence of NEEDLE in TEXT."""
    app.emit(app.text.search(text, needle))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr trim "  padded  "
  nestr trim "  padded  " --side left""",
)
@click.argument("text")
@click.option(
    "--side",
    type=click.Choice([s.value for s in Side]),
    default=Side.BOTH.value,
    show_default=True,
)
@click.pass_obj
def trim(app: AppContext, text: str, side: str) -> None:
    """Strip whitespace from TEXT. The result may be empty."""
    app.emit(app.text.trim(text, side=Side(side)))
