"""Root CLI group for rulepred with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from rulepred import __version__
from rulepred.commands import register_commands
from rulepred.commands._context import AppContext
from rulepred.config.settings import RulePredSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rulepred")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-r",
    "--rules",
    "rules_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Rule file to read (overrides [rules] path).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    rules_path: Path | None,
) -> None:
    """rulepred — filter rules by namespace and tags."""
    settings = RulePredSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        rules_path=rules_path,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
