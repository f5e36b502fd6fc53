"""Root ``cpfgen`` command group and its global flags."""

from __future__ import annotations

import tomllib

import click
from pydantic import ValidationError

from cpfgen import __version__
from cpfgen.commands._context import AppContext
from cpfgen.commands.generate import generate
from cpfgen.commands.menu import menu
from cpfgen.config.settings import CpfSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cpfgen")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print bare CPF numbers only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and result metadata.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this cpfgen.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Generate valid Brazilian CPF numbers.

    Without a subcommand, starts the interactive menu.
    """
    try:
        settings = CpfSettings.load(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


cli.add_command(generate)
cli.add_command(menu)
