"""
semrange: version and version-range parsing

semrange turns version strings such as ``v1.4.0-rc.1+build.7`` into
immutable :class:`Version` values and range expressions such as
``^1.2, !=1.5.0`` into canonical :class:`Range` values (inclusive lower
bound, exclusive upper bound, except and include sets).

Typical usage::

    >>> from semrange import parse_range, parse_version
    >>> window = parse_range(">=1.0.0, <2.0.0, !=1.5.0")
    >>> window.contains(parse_version("1.4.0"))
    True
    >>> str(parse_range("~1.2.3"))
    '>=1.2.3,<1.3.0'
"""

from __future__ import annotations

from semrange.__version__ import __version__
from semrange.core import parse_range, parse_range_pairs, parse_version
from semrange.exceptions import (
    ConfigError,
    ParseError,
    RangeParseError,
    SemRangeError,
    VersionParseError,
)
from semrange.models import (
    Op,
    Range,
    Version,
    precedence_compare,
    range_compare,
    range_equal,
)

__license__ = "Apache-2.0"
__description__ = "Version and version-range parsing with canonical range normalization."

__all__ = [
    "__version__",
    "Op",
    "Range",
    "Version",
    "parse_range",
    "parse_version",
    "parse_range_pairs",
    "range_compare",
    "range_equal",
    "precedence_compare",
    "SemRangeError",
    "ParseError",
    "VersionParseError",
    "RangeParseError",
    "ConfigError",
]
