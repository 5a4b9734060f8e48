"""
Subcommands of the semrange CLI and the helpers they share.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import click

from semrange.constants import OUTPUT_FORMATS
from semrange.context import SemRangeContext
from semrange.core.grammar import parse_version
from semrange.exceptions import VersionParseError
from semrange.models.version import Version

#: ``--format`` option shared by every subcommand; ``None`` defers to config.
format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)


def resolve_format(ctx: SemRangeContext, output_format: Optional[str]) -> str:
    """Return the CLI flag if given, otherwise the configured format."""
    if output_format:
        return output_format.lower()
    return ctx.resolved_config().output_format


def parse_candidates(
    texts: Sequence[str],
) -> Tuple[List[Tuple[str, Version]], Dict[str, VersionParseError]]:
    """Parse candidate versions, separating successes from failures.

    Returns:
        ``(parsed, errors)`` where ``parsed`` keeps input order and
        ``errors`` maps each rejected input to its parse error.
    """
    parsed: List[Tuple[str, Version]] = []
    errors: Dict[str, VersionParseError] = {}
    for text in texts:
        try:
            parsed.append((text, parse_version(text)))
        except VersionParseError as exc:
            errors[text] = exc
    return parsed, errors
