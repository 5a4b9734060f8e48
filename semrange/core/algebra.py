"""Range normalization algebra.

Turns the flat ``(operator, version)`` list produced by the grammar into a
canonical :class:`~semrange.models.range.Range` in three steps:

1. **Expansion**: shorthand operators are rewritten to the canonical
   ``>=``/``<`` form::

       ~1.2.3   ->  >=1.2.3, <1.3.0
       ^1.2.3   ->  >=1.2.3, <2.0.0
       <=1.2.3  ->  <1.2.4
       >1.2.3   ->  >=1.2.4

   Synthesized boundaries keep only ``major.minor.patch``.

2. **Sorting**: pairs are sorted by range order (ties broken by
   pre-release, text and operator) so the result is
   independent of the order operators appeared in.

3. **Reduction**: every constraint must hold at once, so the effective
   lower bound is the *largest* ``>=`` version and the effective upper
   bound the *smallest* ``<`` version. ``!=`` versions form the except set
   and ``=`` versions the include set.

Typical usage::

    >>> from semrange.core.grammar import parse_range_pairs
    >>> str(build_range(parse_range_pairs("~1.2.3, !=1.2.5")))
    '>=1.2.3,<1.3.0,!=1.2.5'
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from semrange.models.operator import Op
from semrange.models.range import Range
from semrange.models.version import Version
from semrange.utils.logger import get_logger

logger = get_logger("core.algebra")

Pair = Tuple[Op, Version]


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


def tilde_to_pairs(version: Version) -> List[Pair]:
    """``~1.2.3`` -> ``>=1.2.3, <1.3.0``; ``~1`` means ``~1.0.0``."""
    return [
        (Op.GE, version),
        (Op.LT, Version(version.major, version.minor + 1, 0)),
    ]


def caret_to_pairs(version: Version) -> List[Pair]:
    """``^1.2.3`` -> ``>=1.2.3, <2.0.0``."""
    return [
        (Op.GE, version),
        (Op.LT, Version(version.major + 1, 0, 0)),
    ]


def le_to_pairs(version: Version) -> List[Pair]:
    """``<=1.2.3`` -> ``<1.2.4``; there is no inclusive upper bound."""
    return [(Op.LT, Version(version.major, version.minor, version.patch + 1))]


def gt_to_pairs(version: Version) -> List[Pair]:
    """``>1.2.3`` -> ``>=1.2.4``."""
    return [(Op.GE, Version(version.major, version.minor, version.patch + 1))]


_EXPANSIONS = {
    Op.TILDE: tilde_to_pairs,
    Op.CARET: caret_to_pairs,
    Op.LE: le_to_pairs,
    Op.GT: gt_to_pairs,
}


def expand_pair(op: Op, version: Version) -> List[Pair]:
    """Rewrite one pair into canonical ``GE``/``LT``/``NE``/``EQ`` pairs."""
    if op.is_canonical:
        return [(op, version)]
    return _EXPANSIONS[op](version)


def expand_pairs(pairs: Iterable[Pair]) -> List[Pair]:
    """Expand every pair, preserving input order."""
    expanded: List[Pair] = []
    for op, version in pairs:
        expanded.extend(expand_pair(op, version))
    return expanded


# ---------------------------------------------------------------------------
# Sorting & reduction
# ---------------------------------------------------------------------------


def sort_pairs(pairs: Iterable[Pair]) -> List[Pair]:
    """Sort pairs by the range order of their versions.

    Range-equal versions are ordered by precedence, then by their text, so
    the result does not depend on the order items were written in.
    """
    return sorted(
        pairs,
        key=lambda pair: (pair[1].precedence_key(), str(pair[1]), pair[0].value),
    )


def _dedupe(versions: Iterable[Version]) -> Tuple[Version, ...]:
    seen: List[Version] = []
    for version in versions:
        if version not in seen:
            seen.append(version)
    return tuple(seen)


def build_range(pairs: Iterable[Pair]) -> Range:
    """Reduce parsed pairs to a canonical :class:`Range`.

    Never raises: contradictory constraints produce a range whose
    :meth:`Range.is_valid` returns False.

    Args:
        pairs: ``(operator, version)`` items in input order.

    Returns:
        The canonical range.
    """
    ordered = sort_pairs(expand_pairs(pairs))

    lower_bounds = [version for op, version in ordered if op is Op.GE]
    upper_bounds = [version for op, version in ordered if op is Op.LT]

    # Sorted ascending: tightest lower bound is last, tightest upper first.
    minimum: Optional[Version] = lower_bounds[-1] if lower_bounds else None
    maximum: Optional[Version] = upper_bounds[0] if upper_bounds else None

    result = Range(
        min=minimum,
        max=maximum,
        excluded=_dedupe(version for op, version in ordered if op is Op.NE),
        included=_dedupe(version for op, version in ordered if op is Op.EQ),
    )

    logger.debug("Built range %s from %d canonical pair(s)", result, len(ordered))
    if not result.is_valid():
        logger.debug("Range %s has its lower bound above its upper bound", result)
    return result
