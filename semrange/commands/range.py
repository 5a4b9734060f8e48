"""Range command implementation for semrange.

Shows the canonical form of a range expression along with its bounds,
except/include sets, and predicates.

Typical usage::

    $ semrange range "~1.2.3, !=1.2.5"
    $ semrange range --format json ">=2.0.0 <1.0.0"
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from semrange.commands import format_option, resolve_format
from semrange.context import SemRangeContext, pass_context
from semrange.core.grammar import parse_range
from semrange.exceptions import RangeParseError
from semrange.utils import (
    get_logger,
    print_error,
    print_json,
    print_table,
    print_warning,
)

logger = get_logger("commands.range")


@click.command(name="range")
@click.argument("expression")
@format_option
@pass_context
def range_command(
    ctx: SemRangeContext,
    expression: str,
    output_format: Optional[str],
) -> None:
    """Normalize EXPRESSION and show its canonical form.

    Exits 0 for a valid range, 1 if the expression does not parse or its
    lower bound lies above its upper bound.
    """
    try:
        parsed = parse_range(expression)
    except RangeParseError as exc:
        print_error(str(exc))
        sys.exit(1)

    details = parsed.to_dict()
    logger.debug("Normalized %r to %s", expression, details["range"])

    if resolve_format(ctx, output_format) == "json":
        print_json({"input": expression, **details})
    else:
        print_table(
            [{"field": key, "value": value} for key, value in details.items()],
            title=f"Range {expression!r}",
        )

    if not parsed.is_valid():
        print_warning(f"Range {expression!r} cannot be satisfied: {details['range']}")
        sys.exit(1)
    sys.exit(0)
