"""CLI adapter for ``myprog`` built on ``lib_cli_exit_tools``.

Purpose
-------
Parse the process arguments, resolve the layered configuration once, and hand
it explicitly to the code that consumes it.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – the ``myprog`` command (``-c/--config``, ``-v``, ``INPUT``).
* :func:`parse_options` – parse an argument vector into :class:`Options`
  without running the command.
* :func:`render_report` – consumer of the resolved configuration.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It is the only place where errors become
exit codes: ``lib_cli_exit_tools`` turns usage errors and
:class:`~myprog.domain.errors.FatalConfigError` into non-zero exits.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import initialize
from .domain.config import Configuration, FileConfiguration, Options
from .observability import stderr_logging, verbosity_level

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
PROG_NAME: Final[str] = "myprog"
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version(PROG_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _dump_defaults(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print the default file settings and stop before ``INPUT`` is validated."""

    if not value or ctx.resilient_parsing:
        return
    click.echo(FileConfiguration.dump_defaults())
    ctx.exit(0)


@click.command(
    PROG_NAME,
    help="Resolve layered configuration (defaults, .myprog.json files, command line) for INPUT",
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.version_option(
    version=_resolve_version(),
    prog_name=PROG_NAME,
    message="myprog version %(version)s",
)
@click.option(
    "--dump-defaults",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_dump_defaults,
    help="Print the default .myprog.json contents and exit",
)
@click.option(
    "-c",
    "--config",
    "config",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    metavar="FILE",
    help="Sets a custom config file",
)
@click.option("-v", "verbose", count=True, help="Sets the level of verbosity (repeatable)")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.argument("input_path", metavar="INPUT", type=click.Path(path_type=Path))
def cli(
    config: Optional[Path],
    verbose: int,
    traceback: bool,
    input_path: Path,
) -> None:
    """Resolve the configuration for ``INPUT`` and print it as JSON.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``; routes package
        logging to stderr while resolving.
    """

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    options = Options(input=input_path, config=config, verbose=verbose)
    with stderr_logging(verbosity_level(verbose)):
        configuration = initialize(options)
    click.echo(render_report(configuration, options))


def parse_options(argv: Sequence[str]) -> Options:
    """Parse *argv* with the ``myprog`` command definition without invoking it.

    Raises
    ------
    click.UsageError
        When arguments are invalid, e.g. ``INPUT`` is missing.

    Examples
    --------
    >>> options = parse_options(["-vv", "-c", "custom.json", "data.txt"])
    >>> options.verbose, options.config.name, options.input.name
    (2, 'custom.json', 'data.txt')
    """

    with cli.make_context(PROG_NAME, list(argv)) as ctx:
        params = dict(ctx.params)
    return Options(input=params["input_path"], config=params["config"], verbose=params["verbose"])


def render_report(configuration: Configuration, options: Options) -> str:
    """Describe the run: the input being processed and the configuration applied to it."""

    payload = {"input": str(options.input), "configuration": configuration.as_dict()}
    return json.dumps(payload, indent=2)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=PROG_NAME,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
