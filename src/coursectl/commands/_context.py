"""AppContext — shared Click context for all commands.

Created once by the root group and handed to subcommands through
``@click.pass_obj``. Owns the lazily opened :class:`Database` and
routes results to stdout or stderr with the right exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coursectl.config.logging import configure_logging
from coursectl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from coursectl.config.settings import CourseSettings
    from coursectl.infrastructure.database.connection import Database
    from coursectl.services.course import CourseService
    from coursectl.services.result import ServiceResult


class AppContext:
    """State shared across the command hierarchy.

    The database opens on first access, so ``--help`` and ``--version``
    never touch storage.
    """

    def __init__(self, settings: CourseSettings) -> None:
        self.settings = settings
        self._database: Database | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def database(self) -> Database:
        if self._database is None:
            from coursectl.infrastructure.database.connection import Database

            cfg = self.settings.database
            self._database = Database(cfg.url, echo=cfg.echo)
        return self._database

    @property
    def courses(self) -> CourseService:
        from coursectl.services.course import CourseService

        return CourseService(self.database)

    def close(self) -> None:
        if self._database is not None:
            self._database.close()
            self._database = None

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult and exit 1 when it failed.

        Warnings go to stderr in human mode; JSON output already
        carries them.
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
