"""
Range data model for semrange.

A :class:`Range` is the canonical, queryable form of a range expression:
an inclusive lower bound, an exclusive upper bound, versions explicitly
excluded from that interval, and versions explicitly included regardless
of it. Ranges are built once by :func:`semrange.core.algebra.build_range`
and never mutated.

Construction never fails. A contradictory expression such as
``>=2.0.0, <1.0.0`` yields a range whose :meth:`Range.is_valid` is False;
callers should check it before trusting :meth:`Range.contains`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from semrange.constants import ANY_RANGE, RANGE_JOINER
from semrange.models.operator import Op
from semrange.models.version import (
    Version,
    precedence_compare,
    range_compare,
    range_equal,
)

_ZERO = Version(0, 0, 0)


@dataclass(frozen=True)
class Range:
    """Canonical version range.

    Attributes:
        min: Inclusive lower bound, or ``None`` when unbounded below.
        max: Exclusive upper bound, or ``None`` when unbounded above.
        excluded: Versions rejected even inside ``[min, max)``.
        included: Versions accepted even outside ``[min, max)``.
    """

    min: Optional[Version] = None
    max: Optional[Version] = None
    excluded: Tuple[Version, ...] = ()
    included: Tuple[Version, ...] = ()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Range":
        """Parse range text into a canonical range.

        Raises:
            RangeParseError: ``text`` is not a well-formed range expression.
        """
        from semrange.core.grammar import parse_range

        return parse_range(text)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Op, Version]]) -> "Range":
        """Build a range from parsed ``(operator, version)`` pairs."""
        from semrange.core.algebra import build_range

        return build_range(pairs)

    @classmethod
    def any(cls) -> "Range":
        """Return the unbounded range that accepts every version."""
        return cls()

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @property
    def has_interval(self) -> bool:
        """True if the range accepts versions beyond its include set.

        An expression made only of equality items (``=1.0.0 =2.0.0``)
        denotes exactly those versions and has no interval part.
        """
        return self.min is not None or self.max is not None or not self.included

    def contains(self, version: Version) -> bool:
        """Return True if ``version`` satisfies this range.

        Membership uses range order, so build metadata and pre-release tags
        never decide it: ``1.0.0+a`` and ``1.0.0-rc.1`` both satisfy
        ``=1.0.0``.
        """
        if any(range_equal(version, member) for member in self.included):
            return True

        if not self.has_interval:
            return False

        if self.min is not None and range_compare(version, self.min) < 0:
            return False

        if self.max is not None and range_compare(version, self.max) >= 0:
            return False

        return not any(range_equal(version, member) for member in self.excluded)

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, Version):
            return False
        return self.contains(version)

    def is_any(self) -> bool:
        """Return True if the range accepts every version.

        That is the case with no upper bound, no except/include members,
        and a lower bound that is absent or ``0.0.0``.
        """
        if self.max is not None or self.excluded or self.included:
            return False
        return self.min is None or range_equal(self.min, _ZERO)

    def is_valid(self) -> bool:
        """Return True unless the lower bound lies above the upper bound."""
        if self.min is None or self.max is None:
            return True
        return range_compare(self.min, self.max) <= 0

    def is_exact_match(self) -> bool:
        """Return True if the range denotes exactly one version.

        Only equality items without bounds qualify. A non-empty interval
        always holds more than one version: ``>=1.2.3, <1.2.4`` also admits
        ``1.2.3.7``, and except members cannot remove every extra release.
        Members differing only in pre-release or build count once.
        """
        if not self.included or self.min is not None or self.max is not None:
            return False
        return len({member.range_key() for member in self.included}) == 1

    # ------------------------------------------------------------------
    # Candidate selection
    # ------------------------------------------------------------------

    def filter(self, versions: Iterable[Version]) -> List[Version]:
        """Return the candidates that satisfy this range, in input order."""
        return [version for version in versions if self.contains(version)]

    def best_match(
        self,
        versions: Sequence[Version],
        *,
        include_prereleases: bool = False,
    ) -> Optional[Version]:
        """Return the newest satisfying candidate in precedence order.

        Args:
            versions: Candidate versions.
            include_prereleases: Consider pre-release candidates too.

        Returns:
            The newest satisfying version, or ``None`` if none qualifies.
        """
        best: Optional[Version] = None
        for version in self.filter(versions):
            if version.is_prerelease and not include_prereleases:
                continue
            if best is None or precedence_compare(version, best) > 0:
                best = version
        return best

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "range": str(self),
            "min": str(self.min) if self.min is not None else None,
            "max": str(self.max) if self.max is not None else None,
            "except": [str(v) for v in self.excluded],
            "include": [str(v) for v in self.included],
            "is_any": self.is_any(),
            "is_valid": self.is_valid(),
            "is_exact_match": self.is_exact_match(),
        }

    def __str__(self) -> str:
        if self.is_any():
            return ANY_RANGE

        parts: List[str] = []
        if self.min is not None:
            parts.append(f"{Op.GE}{self.min}")
        if self.max is not None:
            parts.append(f"{Op.LT}{self.max}")
        parts.extend(f"{Op.NE}{version}" for version in self.excluded)
        parts.extend(f"{Op.EQ}{version}" for version in self.included)
        return RANGE_JOINER.join(parts)

    def __repr__(self) -> str:
        return f"Range({str(self)!r})"
