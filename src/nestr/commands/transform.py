"""Commands: transformations that always produce non-empty text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestr.commands._base import NestrCommand
from nestr.domain.types import Side, Transform

if TYPE_CHECKING:
    from nestr.commands._context import AppContext


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr transform reverse hello
  nestr -q transform upper "mixed Case\"""",
)
@click.argument("operation", type=click.Choice([t.value for t in Transform]))
@click.argument("text")
@click.pass_obj
def transform(app: AppContext, operation: str, text: str) -> None:
    """Apply a length-preserving OPERATION to TEXT."""
    app.emit(app.text.transform(text, Transform(operation)))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr pad ab 6 --fill "*"
  nestr pad 42 5 --side left --fill 0""",
)
@click.argument("text")
@click.argument("width", type=int)
@click.option(
    "--side",
    type=click.Choice([s.value for s in Side]),
    default=Side.BOTH.value,
    show_default=True,
    help="Where to add padding.",
)
@click.option("--fill", default=None, help="Fill character (default: [pad] fill).")
@click.pass_obj
def pad(app: AppContext, text: str, width: int, side: str, fill: str | None) -> None:
    """Pad TEXT to at least WIDTH characters."""
    app.emit(app.text.pad(text, width, side=Side(side), fill=fill))


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr concat Expected " test" " result"
  nestr concat a b c --separator ", \"""",
)
@click.argument("texts", nargs=-1, required=True)
@click.option("--separator", default="", help="Text inserted between values.")
@click.pass_obj
def concat(app: AppContext, texts: tuple[str, ...], separator: str) -> None:
    """Concatenate TEXTS in order."""
    app.emit(app.text.concat(list(texts), separator=separator))
