"""zooctl entry point: replay a command file against a zoo and write the log."""

from __future__ import annotations

from pathlib import Path

import click

from zooctl import __version__
from zooctl.commands._base import ZooCommand
from zooctl.commands._context import AppContext
from zooctl.config.settings import ZooSettings

_PATH = click.Path(path_type=Path)


@click.command(
    cls=ZooCommand,
    examples="""\
  zooctl animals.txt persons.txt foods.txt commands.txt output.txt
  zooctl --json animals.txt persons.txt foods.txt commands.txt output.txt
  zooctl -v --log-json animals.txt persons.txt foods.txt commands.txt out.txt
  zooctl -c zooctl.toml animals.txt persons.txt foods.txt commands.txt out.txt""",
)
@click.version_option(version=__version__, prog_name="zooctl")
@click.argument("animals", required=False, type=_PATH)
@click.argument("persons", required=False, type=_PATH)
@click.argument("foods", required=False, type=_PATH)
@click.argument("commands", required=False, type=_PATH)
@click.argument("output", required=False, type=_PATH)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the output path.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and the full activity log.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    animals: Path | None,
    persons: Path | None,
    foods: Path | None,
    commands: Path | None,
    output: Path | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """zooctl — replay zoo commands and write the activity log.

    Takes the animals, persons, foods, commands and output files, in
    that order.
    """
    if animals is None or persons is None or foods is None or commands is None or output is None:
        click.echo(ctx.get_help())
        return

    settings = ZooSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    from zooctl.services.simulation import RunPaths, SimulationService

    paths = RunPaths(
        animals=animals,
        persons=persons,
        foods=foods,
        commands=commands,
        output=output,
    )
    app.emit(SimulationService(app.zoo, settings).run(paths))
