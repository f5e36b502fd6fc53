"""Command: generate one or more CPF numbers non-interactively."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cpfgen.commands._options import examples_option, seed_option

if TYPE_CHECKING:
    from cpfgen.commands._context import AppContext

_GENERATE_EXAMPLES = """\
  cpfgen generate
  cpfgen generate --count 10
  cpfgen generate -n 3 --seed 42
  cpfgen -q generate -n 100 > cpfs.txt
  cpfgen --json generate -n 2"""


@click.command()
@click.option(
    "-n",
    "--count",
    type=int,
    default=None,
    help="How many CPF numbers to generate (default: [generator] count).",
)
@seed_option
@examples_option(_GENERATE_EXAMPLES)
@click.pass_obj
def generate(app: AppContext, count: int | None, seed: int | None) -> None:
    """Generate valid CPF numbers."""
    if count is None:
        count = app.settings.generator.count
    app.emit(app.generate_service(seed).generate(count))
