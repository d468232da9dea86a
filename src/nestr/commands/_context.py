"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the text service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nestr.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from nestr.config.settings import NestrSettings
    from nestr.services.result import ServiceResult
    from nestr.services.text import TextService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: NestrSettings) -> None:
        self.settings = settings
        self._text: TextService | None = None

        from nestr.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def text(self) -> TextService:
        """The text service (created lazily on first access)."""
        if self._text is None:
            from nestr.services.text import TextService

            self._text = TextService(self.settings)
        return self._text

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            indent=self.settings.output.indent,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
