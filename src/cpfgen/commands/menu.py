"""Command: interactive CPF generator menu.

Input is consumed as whitespace-separated tokens, so ``1 2`` on one line
runs option 1 and then option 2, and blank lines are skipped. The loop
ends on Exit or when stdin is closed.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from cpfgen.commands._options import examples_option, seed_option
from cpfgen.domain.menu import (
    EXIT_MESSAGE,
    INVALID_OPTION_MESSAGE,
    PROMPT,
    MenuOption,
    parse_choice,
    render_menu,
)

if TYPE_CHECKING:
    from cpfgen.commands._context import AppContext
    from cpfgen.services.generate import GenerateService

logger = logging.getLogger(__name__)

_MENU_EXAMPLES = """\
  cpfgen
  cpfgen menu
  cpfgen menu --seed 7
  printf '1 1 1 2' | cpfgen menu"""


def _read_stdin_line() -> str | None:
    line = click.get_text_stream("stdin").readline()
    return line if line else None


def run_menu(
    service: GenerateService,
    *,
    title: str = "CPF GENERATOR",
    read_line: Callable[[], str | None] = _read_stdin_line,
) -> None:
    """Drive the menu loop; *read_line* returns None at end of input."""
    pending: deque[str] = deque()
    while True:
        click.echo(render_menu(title))
        click.echo()
        click.echo(f"{PROMPT}: ", nl=False)

        while not pending:
            line = read_line()
            if line is None:
                click.echo()
                click.echo(EXIT_MESSAGE)
                return
            pending.extend(line.split())

        token = pending.popleft()
        parsed = parse_choice(token)
        if not parsed.ok:
            logger.debug("Rejected menu input %r", token)
            click.echo(parsed.error)
            continue

        option = parsed.option
        if option is MenuOption.GENERATE:
            click.echo()
            click.echo(f"CPF: {service.generate_one()}")
        elif option is MenuOption.EXIT:
            click.echo(EXIT_MESSAGE)
            return
        else:
            click.echo(INVALID_OPTION_MESSAGE)


@click.command()
@seed_option
@examples_option(_MENU_EXAMPLES)
@click.pass_obj
def menu(app: AppContext, seed: int | None) -> None:
    """Run the interactive generator menu."""
    service = app.generate_service(seed)
    try:
        run_menu(service, title=app.settings.menu.title)
    except Exception as exc:
        logger.debug("Menu loop failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc
