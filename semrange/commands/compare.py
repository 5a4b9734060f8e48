"""Compare command implementation for semrange.

Compares two versions under every relation semrange defines: range order
(pre-release and build ignored), precedence order (pre-release counts),
structural identity (build counts), and the resulting update type.

Typical usage::

    $ semrange compare 2.0.0-alpha 2.0.0
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from semrange.commands import format_option, resolve_format
from semrange.context import SemRangeContext, pass_context
from semrange.core.grammar import parse_version
from semrange.exceptions import VersionParseError
from semrange.models.version import precedence_compare, range_compare
from semrange.utils import (
    colorize_update_type,
    get_logger,
    print_error,
    print_json,
    print_table,
)
from semrange.utils.version_utils import get_update_type

logger = get_logger("commands.compare")

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("left")
@click.argument("right")
@format_option
@pass_context
def compare(
    ctx: SemRangeContext,
    left: str,
    right: str,
    output_format: Optional[str],
) -> None:
    """Compare version LEFT with version RIGHT."""
    try:
        left_version = parse_version(left)
        right_version = parse_version(right)
    except VersionParseError as exc:
        print_error(str(exc))
        sys.exit(1)

    result = {
        "left": str(left_version),
        "right": str(right_version),
        "range_order": _SYMBOLS[range_compare(left_version, right_version)],
        "precedence_order": _SYMBOLS[precedence_compare(left_version, right_version)],
        "identical": left_version.is_same(right_version),
        "update_type": get_update_type(left, right),
    }
    logger.debug("Compared %s with %s: %s", left_version, right_version, result)

    if resolve_format(ctx, output_format) == "json":
        print_json(result)
    else:
        rows = [{"relation": key, "value": value} for key, value in result.items()]
        rows[-1]["value"] = colorize_update_type(result["update_type"])
        print_table(rows, title=f"{left_version} vs {right_version}")
