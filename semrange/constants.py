"""
Centralized constants for semrange.

This module defines immutable values used across semrange, including the
operator vocabulary of the range grammar, canonical rendering tokens,
configuration defaults, and logging formats. All values are intended to be
treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Range grammar
# ---------------------------------------------------------------------------

#: Operator tokens in the order the recognizer tries them. Longer tokens
#: come first so ``<=`` is never read as ``<`` followed by ``=``.
OPERATOR_TOKENS: Final[Sequence[str]] = (
    "==",
    "!=",
    "<=",
    ">=",
    "=",
    "<",
    ">",
    "~",
    "^",
)

#: Characters allowed between range items. Tab is accepted alongside the
#: space, comma and semicolon.
RANGE_SEPARATORS: Final[str] = " \t,;"

#: Canonical rendering of the unbounded range.
ANY_RANGE: Final[str] = "*"

#: Joiner used when rendering a range in canonical form.
RANGE_JOINER: Final[str] = ","

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Output formats understood by the CLI commands.
OUTPUT_FORMATS: Final[Sequence[str]] = ("table", "json")

#: Default output format.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

#: Whether ``select`` considers pre-release candidates by default.
DEFAULT_INCLUDE_PRERELEASES: Final[bool] = False

#: Dedicated configuration file name.
CONFIG_FILE_NAME: Final[str] = "semrange.toml"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
