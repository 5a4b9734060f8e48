"""Parse command implementation for semrange.

Shows the components of one or more version strings.

Typical usage::

    $ semrange parse 1.2.3 v2-rc.1+build.5
    $ semrange parse --format json 1.0.0.5
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click

from semrange.commands import format_option, parse_candidates, resolve_format
from semrange.context import SemRangeContext, pass_context
from semrange.utils import get_logger, print_error, print_json, print_table

logger = get_logger("commands.parse")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@format_option
@pass_context
def parse(
    ctx: SemRangeContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
) -> None:
    """Parse VERSIONS and show their components.

    Exits 0 if every version parsed, 1 otherwise.
    """
    parsed, errors = parse_candidates(versions)
    logger.debug("Parsed %d of %d version(s)", len(parsed), len(versions))

    if resolve_format(ctx, output_format) == "json":
        by_text = dict(parsed)
        payload: List[Dict[str, Any]] = []
        for text in versions:
            if text in errors:
                payload.append({"input": text, "error": str(errors[text])})
            else:
                payload.append({"input": text, **by_text[text].to_dict()})
        print_json(payload)
    else:
        print_table(
            [
                {
                    "input": text,
                    "version": str(version),
                    "major": version.major,
                    "minor": version.minor,
                    "patch": version.patch,
                    "extra": version.extra_version,
                    "pre-release": version.pre_release,
                    "build": version.build,
                }
                for text, version in parsed
            ],
            title="Versions",
        )
        for text, exc in errors.items():
            print_error(f"{text!r}: {exc}")

    sys.exit(1 if errors else 0)
