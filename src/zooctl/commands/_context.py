"""AppContext — settings, logging and result emission for one invocation.

Provides a lazily built :class:`Zoo` and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zooctl.config.logging import configure_logging
from zooctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from zooctl.config.settings import ZooSettings
    from zooctl.domain.zoo import Zoo
    from zooctl.services.result import ServiceResult


class AppContext:
    """Shared state for a CLI invocation.

    The zoo is created on first use so ``--help`` and ``--version``
    never build any state.
    """

    def __init__(self, settings: ZooSettings) -> None:
        self.settings = settings
        self._zoo: Zoo | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def zoo(self) -> Zoo:
        if self._zoo is None:
            from zooctl.domain.zoo import Zoo

            self._zoo = Zoo(self.settings.ledger.canonical_categories)
        return self._zoo

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
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
