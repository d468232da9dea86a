"""Command: parse text as an integer or float."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestr.commands._base import NestrCommand
from nestr.domain.types import NumberKind

if TYPE_CHECKING:
    from nestr.commands._context import AppContext


@click.command(
    cls=NestrCommand,
    examples="""\
  nestr number 42
  nestr number 3.25 --kind float
  nestr number -- -17""",
)
@click.argument("text")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in NumberKind]),
    default=NumberKind.INT.value,
    show_default=True,
)
@click.pass_obj
def number(app: AppContext, text: str, kind: str) -> None:
    """Parse TEXT as a number and show its canonical form."""
    app.emit(app.text.parse_number(text, kind=NumberKind(kind)))
