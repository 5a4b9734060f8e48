"""Check command implementation for semrange.

Tests candidate versions against a range expression.

Typical usage::

    $ semrange check "^1.2.3" 1.9.9 2.0.0
    $ semrange check --format json ">=1.0.0, <2.0.0, !=1.5.0" 1.4.0 1.5.0
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click

from semrange.commands import format_option, parse_candidates, resolve_format
from semrange.context import SemRangeContext, pass_context
from semrange.core.grammar import parse_range
from semrange.exceptions import RangeParseError
from semrange.utils import (
    colorize_verdict,
    get_logger,
    print_error,
    print_json,
    print_table,
    print_warning,
)

logger = get_logger("commands.check")


@click.command()
@click.argument("expression")
@click.argument("versions", nargs=-1, required=True)
@format_option
@pass_context
def check(
    ctx: SemRangeContext,
    expression: str,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Check whether each of VERSIONS satisfies EXPRESSION.

    Exits 0 only if every version parses and satisfies the range.
    """
    try:
        window = parse_range(expression)
    except RangeParseError as exc:
        print_error(str(exc))
        sys.exit(1)

    if not window.is_valid():
        print_warning(f"Range {expression!r} cannot be satisfied: {window}")

    parsed, errors = parse_candidates(versions)
    results: List[Dict[str, Any]] = [
        {"version": text, "satisfies": window.contains(version)}
        for text, version in parsed
    ]
    all_satisfied = not errors and all(row["satisfies"] for row in results)
    logger.debug(
        "%d of %d version(s) satisfy %s",
        sum(1 for row in results if row["satisfies"]),
        len(versions),
        window,
    )

    if resolve_format(ctx, output_format) == "json":
        print_json(
            {
                "range": str(window),
                "valid": window.is_valid(),
                "results": results,
                "errors": {text: str(exc) for text, exc in errors.items()},
            }
        )
    else:
        print_table(
            [
                {"version": row["version"], "result": colorize_verdict(row["satisfies"])}
                for row in results
            ],
            title=f"Range {window}",
        )
        for text, exc in errors.items():
            print_error(f"{text!r}: {exc}")

    sys.exit(0 if all_satisfied else 1)
