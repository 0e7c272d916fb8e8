"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Provides lazy catalog initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rulepred.config.logging import configure_logging
from rulepred.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rulepred.config.settings import RulePredSettings
    from rulepred.infrastructure.catalog import RuleCatalog
    from rulepred.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The catalog is created on first use, so ``--help`` and ``--version``
    never read the rule file.
    """

    def __init__(self, settings: RulePredSettings) -> None:
        self.settings = settings
        self._catalog: RuleCatalog | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> RuleCatalog:
        """The rule catalog (created lazily on first access)."""
        if self._catalog is None:
            from rulepred.infrastructure.catalog import RuleCatalog

            self._catalog = RuleCatalog(self.settings)
        return self._catalog

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are in the payload).
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
