"""ansistrip CLI entrypoint."""

from typing import Optional

import click
from click.core import ParameterSource

from ansistrip import utils
from ansistrip.core.context import AnsiStripContext
from ansistrip.core.logging.levels import LogLevel
from ansistrip.core.stream import StreamStripper, open_sink, open_source
from ansistrip.settings import LOG_LEVELS, STDIO_PATH


def display_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Print the CLI version and exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"ansistrip {utils.cli_ver()}")
    ctx.exit()


@click.command()
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, allow_dash=True),
    default=STDIO_PATH,
    help="Write output to this file instead of stdout.",
)
@click.option(
    "-s/-S",
    "--strings/--no-strings",
    default=False,
    help="Also strip OSC, DCS, SOS, PM and APC sequences "
    "(terminal titles, hyperlinks, etc.).",
)
@click.option(
    "-l",
    "--line-buffered",
    is_flag=True,
    default=False,
    help="Strip and flush one line at a time.",
)
@click.option(
    "--version",
    is_flag=True,
    help="Show the version and exit.",
    expose_value=False,
    is_eager=True,
    callback=display_version,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Set the minimum log level (ERROR, WARN, INFO, DEBUG).",
)
@click.option(
    "-e",
    "--env",
    default=[],
    type=str,
    multiple=True,
    help="Override a setting (KEY=VALUE).",
)
@utils.exception_handler
@utils.pass_environment()
def cli(
    ctx: AnsiStripContext,
    files: tuple[str, ...],
    output: str,
    strings: bool,
    line_buffered: bool,
    verbose: bool,
    log_level: Optional[str],
    env: list[str],
) -> None:
    """Remove ANSI escape sequences from FILES (or stdin) and print the text.

    With no FILES, or when FILE is -, read standard input. Logs are written
    to stderr.
    """
    ctx._user_env_args = list(env)

    effective_log_level = None
    if verbose:
        effective_log_level = LogLevel.DEBUG
    elif log_level:
        effective_log_level = utils.parse_log_level(log_level)
    # Only an explicit flag overrides the STRINGS setting.
    strings_source = click.get_current_context().get_parameter_source("strings")
    ctx.initialize(
        log_level=effective_log_level,
        strings=None if strings_source is ParameterSource.DEFAULT else strings,
    )

    stripper = StreamStripper(ctx, line_buffered=line_buffered)
    removed = 0
    with open_sink(output) as sink:
        for path in files or (STDIO_PATH,):
            with open_source(path) as source:
                removed += stripper.strip(source, sink)
    ctx.logger.debug(f"Removed {removed} characters in total.")
