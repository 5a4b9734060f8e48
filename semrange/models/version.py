"""
Version data model for semrange.

A :class:`Version` is an immutable value built by the grammar (or by
component substitution through the ``with_*`` helpers). It supports three
deliberately distinct relations:

- **Structural identity** (:meth:`Version.is_same`, ``==``): every field,
  build metadata included, must match.
- **Range order** (:func:`range_compare`): major, minor, patch, extra.
  Pre-release and build are ignored, so ``2.0.0-alpha`` and ``2.0.0`` are
  range-equal. Used for bounds, sorting and range membership.
- **Precedence order** (:func:`precedence_compare`): range order followed
  by pre-release, where a release is newer than any of its pre-releases.
  Used to decide whether one version is an upgrade over another.

The type intentionally defines no ``<``/``>`` operators so callers have to
pick one of the two orders by name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")

IdentifierKey = Tuple[Tuple[int, int, str], ...]


def _identifier_key(token: str) -> IdentifierKey:
    """Build a sort key for a dotted ``extra``/``pre-release`` token.

    Numeric identifiers compare numerically and sort before textual ones;
    textual identifiers compare lexically; a shorter prefix sorts first.
    """
    parts = []
    for part in token.split("."):
        if _NUMERIC_IDENTIFIER.fullmatch(part):
            parts.append((0, int(part), ""))
        else:
            parts.append((1, 0, part))
    return tuple(parts)


def _compare_keys(left: Tuple[Any, ...], right: Tuple[Any, ...]) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


@dataclass(frozen=True)
class Version:
    """A single concrete version.

    Attributes:
        major: Major component.
        minor: Minor component, ``0`` when omitted from the input.
        patch: Patch component, ``0`` when omitted from the input.
        extra_version: Optional fourth component (``1.1.0.5`` -> ``"5"``).
        pre_release: Optional pre-release tag (``1.0.0-rc.1`` -> ``"rc.1"``).
        build: Optional build metadata; never affects any ordering.
    """

    major: int
    minor: int = 0
    patch: int = 0
    extra_version: Optional[str] = None
    pre_release: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse version text.

        Raises:
            VersionParseError: ``text`` is not a well-formed version.
        """
        from semrange.core.grammar import parse_version

        return parse_version(text)

    def with_major(self, major: int) -> "Version":
        return replace(self, major=major)

    def with_minor(self, minor: int) -> "Version":
        return replace(self, minor=minor)

    def with_patch(self, patch: int) -> "Version":
        return replace(self, patch=patch)

    def with_extra_version(self, extra_version: Optional[str]) -> "Version":
        return replace(self, extra_version=extra_version)

    def with_pre_release(self, pre_release: Optional[str]) -> "Version":
        return replace(self, pre_release=pre_release)

    def with_build(self, build: Optional[str]) -> "Version":
        return replace(self, build=build)

    def release(self) -> "Version":
        """Return only the ``major.minor.patch`` part of this version."""
        return Version(self.major, self.minor, self.patch)

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    @property
    def is_prerelease(self) -> bool:
        return self.pre_release is not None

    def is_same(self, other: "Version") -> bool:
        """Return True if every field, build included, matches ``other``."""
        return self == other

    def range_key(self) -> Tuple[Any, ...]:
        """Sort key for range order (pre-release and build ignored)."""
        if self.extra_version is None:
            extra: Tuple[Any, ...] = (0, ())
        else:
            extra = (1, _identifier_key(self.extra_version))
        return (self.major, self.minor, self.patch, extra)

    def precedence_key(self) -> Tuple[Any, ...]:
        """Sort key for precedence order (build ignored)."""
        if self.pre_release is None:
            pre: Tuple[Any, ...] = (1, ())
        else:
            pre = (0, _identifier_key(self.pre_release))
        return self.range_key() + (pre,)

    def is_older_than(self, other: "Version") -> bool:
        """Return True if ``self`` precedes ``other`` in precedence order.

        ``1.0.0-rc.1`` is older than ``1.0.0`` even though the two are
        range-equal.
        """
        return precedence_compare(self, other) < 0

    def is_newer_than(self, other: "Version") -> bool:
        return precedence_compare(self, other) > 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "version": str(self),
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "extra_version": self.extra_version,
            "pre_release": self.pre_release,
            "build": self.build,
        }

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.extra_version is not None:
            text += f".{self.extra_version}"
        if self.pre_release is not None:
            text += f"-{self.pre_release}"
        if self.build is not None:
            text += f"+{self.build}"
        return text

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"


def range_compare(left: Version, right: Version) -> int:
    """Compare two versions in range order.

    Returns:
        ``-1``, ``0`` or ``1`` as ``left`` sorts before, equal to, or after
        ``right``.
    """
    return _compare_keys(left.range_key(), right.range_key())


def range_equal(left: Version, right: Version) -> bool:
    """Return True if the versions are equal under range order."""
    return left.range_key() == right.range_key()


def precedence_compare(left: Version, right: Version) -> int:
    """Compare two versions in precedence order.

    Components are compared in strict priority: major, then minor, patch,
    extra and finally pre-release, each only when all higher-priority
    components are equal.
    """
    return _compare_keys(left.precedence_key(), right.precedence_key())
