"""Pick the output mode for a ServiceResult: JSON, quiet, or Rich."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cpfgen.output.renderers import render_human, render_quiet

if TYPE_CHECKING:
    from cpfgen.config.settings import CpfSettings
    from cpfgen.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False

    @classmethod
    def from_settings(cls, settings: CpfSettings) -> OutputSettings:
        return cls(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """JSON wins over quiet; quiet wins over the Rich rendering."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_human(result, verbose=settings.verbose)
