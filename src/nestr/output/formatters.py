"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output), for pipelines
(``--quiet``: bare values only), or for machines (``--json``).
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from nestr.domain.string import NonEmptyString

if TYPE_CHECKING:
    from nestr.services.result import ServiceResult

THEME = Theme(
    {
        "nestr.ok": "bold green",
        "nestr.error": "bold red",
        "nestr.op": "bold cyan",
        "nestr.key": "dim",
        "nestr.text": "bold",
        "nestr.number": "magenta",
        "nestr.bool": "yellow",
    }
)

# Keys printed, tab-separated, by --quiet for results without a single value.
_QUIET_FIELDS: dict[str, tuple[str, ...]] = {
    "inspect": ("head", "tail", "length"),
    "search": ("contains", "starts_with", "ends_with", "indexes"),
}


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags resolved from the CLI."""

    json_output: bool = False
    quiet: bool = False
    indent: int = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display in the requested mode."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.indent or None)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result)


def render_quiet(result: ServiceResult) -> str:
    """Render bare values with no labels, for piping into other tools."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    data = result.data
    if "result" in data:
        return _plain(data["result"])
    if "words" in data:
        return "\n".join(data["words"])
    if "value" in data:
        return _plain(data["value"])
    keys = _QUIET_FIELDS.get(result.op)
    if keys:
        return "\t".join(_plain(data.get(key)) for key in keys)
    return f"OK: {result.op}"


def render_result(result: ServiceResult, *, width: int = 120) -> str:
    """Render a ServiceResult to a styled string via Rich.

    The console writes into a buffer, so output is plain text (no ANSI)
    unless a terminal is attached.
    """
    console = Console(file=StringIO(), theme=THEME, highlight=False, width=width)
    if result.ok:
        console.print(Text("OK", style="nestr.ok"), Text(f"  {result.op}", style="nestr.op"))
        for key, value in result.data.items():
            console.print(Text(f"  {key}: ", style="nestr.key"), _styled(value), sep="")
    else:
        msg = result.error.message if result.error else "Unknown error"
        console.print(Text("ERROR", style="nestr.error"), Text(f"  {result.op}", style="nestr.op"))
        console.print(Text(f"  {msg}"))
    assert isinstance(console.file, StringIO)
    return console.file.getvalue().rstrip("\n")


def _number(value: int | float) -> str:
    if isinstance(value, int):
        # ints beyond the interpreter's str() digit limit still format
        return NonEmptyString.from_int(value).to_string()
    return repr(value)


def _plain(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return _number(value)
    if isinstance(value, list):
        return ",".join(_plain(item) for item in value)
    return str(value)


def _styled(value: Any) -> Text:
    """Style one field value; strings are quoted so edge whitespace stays visible."""
    if isinstance(value, bool):
        return Text(str(value).lower(), style="nestr.bool")
    if isinstance(value, (int, float)):
        return Text(_number(value), style="nestr.number")
    if isinstance(value, str):
        return Text(_json.dumps(value, ensure_ascii=False), style="nestr.text")
    return Text(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
