"""
Command-line interface for semrange.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from semrange.config import load_config
from semrange.__version__ import __version__
from semrange.context import SemRangeContext
from semrange.exceptions import ConfigError, SemRangeError
from semrange.utils.console import print_error, print_warning, reconfigure_console
from semrange.utils.logger import get_logger, setup_logging, verbosity_to_level

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="SEMRANGE_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="SEMRANGE_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="semrange",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """semrange: parse versions and normalize version ranges.

    \b
    Available commands:
      semrange parse VERSION...         Show the components of versions
      semrange range EXPR               Show the canonical form of a range
      semrange check EXPR VERSION...    Test versions against a range
      semrange compare A B              Compare two versions
      semrange select EXPR VERSION...   Pick the newest satisfying version

    \b
    Examples:
      semrange parse v1.2-rc.1
      semrange range "~1.2.3, !=1.2.5"
      semrange check "^1.2" 1.9.9 2.0.0
    """
    level = verbosity_to_level(verbose)
    setup_logging(level=level, verbose=verbose >= 2)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    semrange_ctx = SemRangeContext()
    semrange_ctx.config_path = config or loaded_config.source_path
    semrange_ctx.color = color
    semrange_ctx.verbose = verbose
    semrange_ctx.config = loaded_config
    ctx.obj = semrange_ctx

    # Respect NO_COLOR for the Rich console
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("semrange v%s", __version__)
    logger.debug("Config path: %s", semrange_ctx.config_path)
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


from semrange.commands.parse import parse  # noqa: E402
from semrange.commands.range import range_command  # noqa: E402
from semrange.commands.check import check  # noqa: E402
from semrange.commands.compare import compare  # noqa: E402
from semrange.commands.select import select  # noqa: E402

cli.add_command(parse)
cli.add_command(range_command)
cli.add_command(check)
cli.add_command(compare)
cli.add_command(select)


def main() -> int:
    """Main entry point for the semrange CLI.

    Returns:
        Exit code:
            0   Success
            1   Parse failure, unsatisfied check, or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        result = cli(standalone_mode=False)
        return result if isinstance(result, int) else 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except SemRangeError as exc:
        print_error(str(exc))
        logger.debug(
            "SemRangeError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
