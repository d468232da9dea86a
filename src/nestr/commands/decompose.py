"""Commands: decompose text into head/tail, or into words."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestr.commands._base import NestrCommand

if TYPE_CHECKING:
    from nestr.commands._context import AppContext


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr inspect hello
  nestr --json inspect "hello world\"""",
)
@click.argument("text")
@click.pass_obj
def inspect(app: AppContext, text: str) -> None:
    """Show the head, tail, and length of TEXT."""
    app.emit(app.text.inspect(text))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr words "the quick  brown fox"
  nestr -q words "one two\"""",
)
@click.argument("text")
@click.pass_obj
def words(app: AppContext, text: str) -> None:
    """Split TEXT into whitespace-separated words."""
    app.emit(app.text.words(text))
