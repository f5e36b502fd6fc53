"""Options shared by cpfgen commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click

F = TypeVar("F", bound=Callable[..., Any])


def examples_option(text: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *text* and exits."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


def seed_option(func: F) -> F:
    """``--seed``: overrides ``[generator] seed`` for this run."""
    return click.option(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for repeatable output.",
    )(func)
