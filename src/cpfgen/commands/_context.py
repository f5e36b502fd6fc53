"""Per-invocation state handed from the root group to subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cpfgen.config.logging import configure_logging
from cpfgen.output.formatters import OutputSettings, format_result
from cpfgen.services.generate import GenerateService

if TYPE_CHECKING:
    from cpfgen.config.settings import CpfSettings
    from cpfgen.services.result import ServiceResult


class AppContext:
    """Resolved settings plus the helpers every command uses.

    Created by the root group and received via ``@click.pass_obj``.
    Building it configures logging for the whole run.
    """

    def __init__(self, settings: CpfSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def generate_service(self, seed: int | None = None) -> GenerateService:
        """Service over a fresh generator; *seed* beats ``[generator] seed``."""
        return GenerateService(seed=self.settings.generator.seed if seed is None else seed)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* on stdout, or on stderr and exit 1 if it failed."""
        output = format_result(result, settings=OutputSettings.from_settings(self.settings))
        click.echo(output, err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
