"""Recognizer for version and range text.

Two surface syntaxes are recognized:

- **Version**::

      [ws] ["v"|"V"] [" "] MAJOR ["." MINOR ["." PATCH]] ["." EXTRA]
           ( ["-" PRE] ["+" BUILD]  |  "+" BUILD "-" PRE ) [ws] END

- **Range**: one or more ``<op> <version>`` items separated by runs of
  spaces, commas or semicolons. ``op`` is one of ``==, !=, <=, >=, =, <,
  >, ~, ^`` or empty (equality). A lone ``*`` is the unbounded range.

The recognizer never backtracks into a partially consumed token: a numeric
component glued to letters (``1.2.3a``) is an error rather than being
re-read as an extra component, and reversed operators (``=>``, ``=<``)
fail. The pre-release/build suffix is the only ordered choice; the
``pre`` then ``build`` alternative is tried first.

Typical usage::

    from semrange.core.grammar import parse_version, parse_range

    version = parse_version("v1.4.0-rc.1+build.7")
    pairs = parse_range_pairs(">=1.0.0 <2.0.0, !=1.5.0")
    window = parse_range("^1.2")

Failures raise :exc:`~semrange.exceptions.VersionParseError` or
:exc:`~semrange.exceptions.RangeParseError` carrying the offending text and
the offset where recognition stopped.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple, Type

from semrange.core.algebra import build_range
from semrange.constants import ANY_RANGE, OPERATOR_TOKENS, RANGE_SEPARATORS
from semrange.exceptions import ParseError, RangeParseError, VersionParseError
from semrange.models.operator import Op
from semrange.models.range import Range
from semrange.models.version import Version
from semrange.utils.logger import get_logger

logger = get_logger("core.grammar")

# ---------------------------------------------------------------------------
# Lexical rules
# ---------------------------------------------------------------------------

_WHITESPACE = re.compile(r"\s*")
_PREFIX = re.compile(r"[vV] ?")
_DIGITS = re.compile(r"[0-9]+")
_WORD_CHAR = re.compile(r"[A-Za-z0-9_]")
_TOKEN = re.compile(r"[A-Za-z0-9_]+(?:\.[A-Za-z0-9_]+)*")
_OPERATOR = re.compile("|".join(re.escape(token) for token in OPERATOR_TOKENS))
_ITEM_SPACES = re.compile(r"[ \t]*")
_SEPARATORS = re.compile(f"[{re.escape(RANGE_SEPARATORS)}]*")

#: Characters that may directly follow a version inside a range.
_ITEM_BOUNDARY = frozenset(RANGE_SEPARATORS) | {
    char for token in OPERATOR_TOKENS for char in token
}


class _Recognizer:
    """Single-use cursor over one input string."""

    def __init__(self, text: str, error_type: Type[ParseError]) -> None:
        self.text = text
        self.pos = 0
        self.error_type = error_type

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def fail(self, message: str, position: Optional[int] = None) -> ParseError:
        return self.error_type(
            message,
            text=self.text,
            position=self.pos if position is None else position,
        )

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def match(self, pattern: "re.Pattern[str]") -> Optional[str]:
        found = pattern.match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def skip_whitespace(self) -> None:
        self.match(_WHITESPACE)

    def number(self, what: str) -> int:
        start = self.pos
        digits = self.match(_DIGITS)
        if digits is None:
            raise self.fail(f"Expected {what} version number")
        if _WORD_CHAR.match(self.peek()):
            raise self.fail(f"Invalid {what} version number", position=start)
        return int(digits)

    def token(self, what: str) -> str:
        value = self.match(_TOKEN)
        if value is None:
            raise self.fail(f"Expected {what} identifier")
        return value

    # ------------------------------------------------------------------
    # Version rules
    # ------------------------------------------------------------------

    def version(self, *, in_range: bool) -> Version:
        self.match(_PREFIX)

        major = self.number("major")
        minor = patch = None
        if self.peek() == "." and _DIGITS.match(self.peek(1)):
            self.pos += 1
            minor = self.number("minor")
            if self.peek() == "." and _DIGITS.match(self.peek(1)):
                self.pos += 1
                patch = self.number("patch")

        extra = None
        if self.peek() == ".":
            self.pos += 1
            extra = self.token("extra version")

        pre_release, build = self.suffix(in_range=in_range)

        return Version(
            major,
            minor if minor is not None else 0,
            patch if patch is not None else 0,
            extra_version=extra,
            pre_release=pre_release,
            build=build,
        )

    def suffix(self, *, in_range: bool) -> Tuple[Optional[str], Optional[str]]:
        start = self.pos

        # First alternative: [-pre] [+build]
        pre_release = build = None
        if self.peek() == "-" and _TOKEN.match(self.peek(1)):
            self.pos += 1
            pre_release = self.token("pre-release")
        if self.peek() == "+" and _TOKEN.match(self.peek(1)):
            self.pos += 1
            build = self.token("build")
        if self.at_version_end(in_range=in_range):
            return pre_release, build
        furthest = self.pos

        # Second alternative: +build -pre
        self.pos = start
        if self.peek() == "+" and _TOKEN.match(self.peek(1)):
            self.pos += 1
            build = self.token("build")
            if self.peek() == "-" and _TOKEN.match(self.peek(1)):
                self.pos += 1
                pre_release = self.token("pre-release")
                if self.at_version_end(in_range=in_range):
                    return pre_release, build

        raise self.fail("Unexpected trailing characters", position=furthest)

    def at_version_end(self, *, in_range: bool) -> bool:
        if in_range:
            return self.at_end() or self.peek() in _ITEM_BOUNDARY or self.peek().isspace()
        rest = self.text[self.pos:]
        return not rest or rest.isspace()

    # ------------------------------------------------------------------
    # Range rules
    # ------------------------------------------------------------------

    def operator(self) -> Op:
        return Op.from_token(self.match(_OPERATOR) or "")

    def item(self) -> Tuple[Op, Version]:
        op = self.operator()
        self.match(_ITEM_SPACES)
        version = self.version(in_range=True)
        self.match(_ITEM_SPACES)
        return op, version

    def items(self) -> List[Tuple[Op, Version]]:
        self.skip_whitespace()
        if self.at_end():
            raise self.fail("Empty range expression")

        pairs = [self.item()]
        while True:
            separator_start = self.pos
            separators = self.match(_SEPARATORS) or ""
            if not self.text[self.pos:].strip():
                if separators.strip():
                    raise self.fail("Trailing separator", position=separator_start)
                return pairs
            pairs.append(self.item())


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_version(text: str) -> Version:
    """Parse a single version string.

    Args:
        text: Version text such as ``"1.2.3"``, ``"v2"`` or
            ``"1.0.0.5-rc.1+build.9"``. Surrounding whitespace is ignored.

    Returns:
        The parsed :class:`Version`; omitted minor/patch default to 0.

    Raises:
        VersionParseError: ``text`` is not a complete, well-formed version.

    Example::

        >>> parse_version("v1.2-beta")
        Version('1.2.0-beta')
    """
    recognizer = _Recognizer(text, VersionParseError)
    try:
        recognizer.skip_whitespace()
        version = recognizer.version(in_range=False)
    except ParseError as exc:
        logger.debug("Rejected version %r: %s", text, exc)
        raise
    return version


def parse_range_pairs(text: str) -> List[Tuple[Op, Version]]:
    """Parse a range expression into ``(operator, version)`` pairs.

    The pairs are returned in input order without any expansion.

    Raises:
        RangeParseError: ``text`` is empty, uses an unknown operator, or has
            trailing characters.
    """
    recognizer = _Recognizer(text, RangeParseError)
    try:
        pairs = recognizer.items()
    except ParseError as exc:
        logger.debug("Rejected range %r: %s", text, exc)
        raise
    logger.debug("Recognized %d range item(s) in %r", len(pairs), text)
    return pairs


def parse_range(text: str) -> Range:
    """Parse a range expression into a canonical :class:`Range`.

    ``"*"`` yields the unbounded range. Contradictory expressions are not
    rejected; check :meth:`Range.is_valid` on the result.

    Raises:
        RangeParseError: ``text`` is not a well-formed range expression.
    """
    if text.strip() == ANY_RANGE:
        return Range.any()
    return build_range(parse_range_pairs(text))
