"""Human and quiet renderings of a generation result.

Rich renders into a buffer; without a terminal attached (pipes, Click's
CliRunner) it emits plain text.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from cpfgen.services.result import ServiceResult

CPF_THEME = Theme(
    {
        "cpf.ok": "bold green",
        "cpf.error": "bold red",
        "cpf.op": "bold cyan",
        "cpf.number": "bold blue",
        "cpf.index": "dim",
    }
)


def render_human(result: ServiceResult, *, verbose: bool = False) -> str:
    """Status line, then one CPF per line (numbered when there are several)."""
    buffer = StringIO()
    console = Console(file=buffer, theme=CPF_THEME, highlight=False, width=120)
    if result.ok:
        _render_numbers(console, result, verbose=verbose)
    else:
        _render_error(console, result, verbose=verbose)
    return buffer.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Bare numbers, one per line, for piping into other tools."""
    if result.ok:
        return "\n".join(result.data["items"])
    message = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {message}"


def _render_numbers(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    items: list[str] = result.data["items"]
    console.print(Text.assemble(("OK", "cpf.ok"), "  ", (result.op, "cpf.op")))

    width = len(str(len(items)))
    for index, cpf in enumerate(items, start=1):
        label = f"{index:>{width}}  " if len(items) > 1 else ""
        console.print(Text.assemble("  ", (label, "cpf.index"), (cpf, "cpf.number")))

    if verbose and result.meta:
        for key, value in result.meta.items():
            console.print(Text(f"  {key}: {value}", style="dim"))


def _render_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "cpf.error"), "  ", (result.op, "cpf.op"), ": ", message)
    )
    if verbose and error:
        for key, value in error.detail.items():
            console.print(Text(f"  {key}: {value}", style="dim"))
