"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the lazily loaded :class:`Workspace` and the
single place where a ServiceResult becomes output and an exit code.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click
import structlog

from tierctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tierctl.config.settings import TierSettings
    from tierctl.infrastructure.workspace import Workspace
    from tierctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace (and with it the saved board) is only loaded when a
    command asks for it, so ``--help`` and ``--version`` never touch disk.
    """

    def __init__(self, settings: TierSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from tierctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        structlog.contextvars.bind_contextvars(workspace=str(settings.workspace_root))

        if settings.verbose:
            from tierctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def workspace(self) -> Workspace:
        if self._workspace is None:
            from tierctl.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def interactive(self) -> bool:
        """Whether a confirmation prompt can be shown and answered."""
        if self.settings.no_interact or self.settings.json_output:
            return False
        return sys.stdin.isatty()

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult and set the exit status.

        * ``ok``: rendered to stdout.  Warnings go to stderr (outside
          ``--json``, where they are part of the payload).
        * not ``ok``: rendered to stderr, then exit code 1.
        """
        output_settings = self.output_settings
        output = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
