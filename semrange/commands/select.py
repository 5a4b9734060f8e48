"""Select command implementation for semrange.

Picks the newest candidate version (in precedence order) that satisfies
a range expression.

Typical usage::

    $ semrange select "~1.2" 1.2.0 1.2.7 1.3.0
    $ semrange select --pre "^2" 2.0.0 2.1.0-rc.1
"""

from __future__ import annotations

import sys
from typing import Optional, Tuple

import click

from semrange.commands import format_option, parse_candidates, resolve_format
from semrange.context import SemRangeContext, pass_context
from semrange.core.grammar import parse_range
from semrange.exceptions import RangeParseError
from semrange.utils import (
    get_logger,
    print_error,
    print_json,
    print_success,
    print_warning,
)

logger = get_logger("commands.select")


@click.command()
@click.argument("expression")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--pre/--no-pre",
    "include_prereleases",
    default=None,
    help="Consider pre-release candidates (defaults to include_prereleases).",
)
@format_option
@pass_context
def select(
    ctx: SemRangeContext,
    expression: str,
    versions: Tuple[str, ...],
    include_prereleases: Optional[bool],
    output_format: Optional[str],
) -> None:
    """Print the newest of VERSIONS that satisfies EXPRESSION.

    Unparseable candidates are skipped with a warning. Exits 1 if no
    candidate qualifies.
    """
    if include_prereleases is None:
        include_prereleases = ctx.resolved_config().include_prereleases

    try:
        window = parse_range(expression)
    except RangeParseError as exc:
        print_error(str(exc))
        sys.exit(1)

    parsed, errors = parse_candidates(versions)
    for text, exc in errors.items():
        print_warning(f"Skipping {text!r}: {exc}")

    best = window.best_match(
        [version for _, version in parsed],
        include_prereleases=include_prereleases,
    )
    logger.debug("Best match for %s among %d candidate(s): %s", window, len(parsed), best)

    if resolve_format(ctx, output_format) == "json":
        print_json({"range": str(window), "selected": str(best) if best else None})
    elif best is not None:
        print_success(str(best), prefix="[SELECTED]")
    else:
        print_warning(f"No candidate satisfies {window}")

    sys.exit(0 if best is not None else 1)
