"""Unit tests for semrange.core.algebra.

Test Coverage:
- Shorthand expansion (tilde, caret, <=, >) and boundary synthesis
- Pass-through of canonical operators
- Deterministic sorting regardless of input order
- Reduction of multiple bounds to the tightest interval
- Except/include collection and deduplication
"""

from __future__ import annotations

import itertools
from typing import List, Tuple

import pytest

from semrange.core.algebra import (
    build_range,
    caret_to_pairs,
    expand_pair,
    expand_pairs,
    gt_to_pairs,
    le_to_pairs,
    sort_pairs,
    tilde_to_pairs,
)
from semrange.models import Op, Range, Version


def v(text: str) -> Version:
    return Version.parse(text)


@pytest.mark.unit
class TestExpansion:
    """Tests for shorthand operator expansion."""

    @pytest.mark.parametrize(
        "base,upper",
        [("1.2.3", "1.3.0"), ("1.2", "1.3.0"), ("1", "1.1.0"), ("0.0.9", "0.1.0")],
    )
    def test_tilde_floats_patch(self, base: str, upper: str) -> None:
        assert tilde_to_pairs(v(base)) == [(Op.GE, v(base)), (Op.LT, v(upper))]

    @pytest.mark.parametrize(
        "base,upper",
        [("1.2.3", "2.0.0"), ("1.2", "2.0.0"), ("0.2.3", "1.0.0")],
    )
    def test_caret_floats_minor_and_patch(self, base: str, upper: str) -> None:
        assert caret_to_pairs(v(base)) == [(Op.GE, v(base)), (Op.LT, v(upper))]

    @pytest.mark.parametrize(
        "base,upper",
        [("1.2.3", "1.2.4"), ("1.2", "1.2.1"), ("1", "1.0.1")],
    )
    def test_le_becomes_exclusive_upper(self, base: str, upper: str) -> None:
        assert le_to_pairs(v(base)) == [(Op.LT, v(upper))]

    @pytest.mark.parametrize(
        "base,lower",
        [("1.2.3", "1.2.4"), ("1.2", "1.2.1"), ("1", "1.0.1")],
    )
    def test_gt_becomes_inclusive_lower(self, base: str, lower: str) -> None:
        assert gt_to_pairs(v(base)) == [(Op.GE, v(lower))]

    def test_synthesized_bounds_drop_suffixes(self) -> None:
        pairs = expand_pair(Op.TILDE, v("1.2.3.4-rc.1+build"))

        assert pairs[0] == (Op.GE, v("1.2.3.4-rc.1+build"))
        assert pairs[1][1].is_same(Version(1, 3, 0))

    def test_le_drops_suffixes(self) -> None:
        [(op, bound)] = expand_pair(Op.LE, v("1.2.3-beta+b1"))

        assert op is Op.LT
        assert bound.is_same(Version(1, 2, 4))

    @pytest.mark.parametrize("op", [Op.EQ, Op.NE, Op.GE, Op.LT])
    def test_canonical_operators_pass_through(self, op: Op) -> None:
        assert expand_pair(op, v("1.0.0")) == [(op, v("1.0.0"))]

    def test_expand_pairs_keeps_order(self) -> None:
        assert expand_pairs([(Op.NE, v("1.1")), (Op.CARET, v("1.0"))]) == [
            (Op.NE, v("1.1")),
            (Op.GE, v("1.0")),
            (Op.LT, v("2.0")),
        ]


@pytest.mark.unit
class TestSortPairs:
    """Tests for sort_pairs."""

    def test_sorts_by_range_order(self) -> None:
        pairs = [(Op.LT, v("2.0")), (Op.GE, v("1.0")), (Op.NE, v("1.5"))]

        assert sort_pairs(pairs) == [
            (Op.GE, v("1.0")),
            (Op.NE, v("1.5")),
            (Op.LT, v("2.0")),
        ]

    def test_extra_sorts_after_plain_release(self) -> None:
        pairs = [(Op.EQ, v("1.0.0.1")), (Op.EQ, v("1.0.0"))]

        assert [version for _, version in sort_pairs(pairs)] == [v("1.0.0"), v("1.0.0.1")]

    def test_range_equal_versions_are_ordered_deterministically(self) -> None:
        pairs = [(Op.GE, v("1.0.0")), (Op.GE, v("1.0.0-rc.1")), (Op.GE, v("1.0.0+b"))]

        results = {tuple(sort_pairs(list(p))) for p in itertools.permutations(pairs)}

        assert len(results) == 1


@pytest.mark.unit
class TestBuildRange:
    """Tests for build_range reduction."""

    def test_simple_interval(self) -> None:
        result = build_range([(Op.GE, v("1.0")), (Op.LT, v("2.0"))])

        assert result == Range(min=v("1.0"), max=v("2.0"))

    def test_tightest_lower_bound_wins(self) -> None:
        result = build_range([(Op.GE, v("1.0")), (Op.GE, v("1.5")), (Op.GE, v("1.2"))])

        assert result.min == v("1.5")
        assert result.max is None

    def test_tightest_upper_bound_wins(self) -> None:
        result = build_range([(Op.LT, v("3.0")), (Op.LT, v("2.0")), (Op.LE, v("2.5"))])

        assert result.max == v("2.0")
        assert result.min is None

    def test_tilde_and_caret_intersect(self) -> None:
        result = build_range([(Op.CARET, v("1.2.0")), (Op.TILDE, v("1.4.2"))])

        assert result.min == v("1.4.2")
        assert result.max == v("1.5.0")

    def test_except_and_include_sets(self) -> None:
        result = build_range(
            [
                (Op.NE, v("1.5.0")),
                (Op.EQ, v("0.9.0")),
                (Op.NE, v("1.2.0")),
                (Op.GE, v("1.0.0")),
            ]
        )

        assert result.excluded == (v("1.2.0"), v("1.5.0"))
        assert result.included == (v("0.9.0"),)

    def test_duplicate_members_collapse(self) -> None:
        result = build_range([(Op.NE, v("1.5")), (Op.NE, v("1.5.0"))])

        assert result.excluded == (v("1.5.0"),)

    def test_builds_differing_only_in_build_are_kept(self) -> None:
        result = build_range([(Op.EQ, v("1.0.0+a")), (Op.EQ, v("1.0.0+b"))])

        assert result.included == (v("1.0.0+a"), v("1.0.0+b"))

    def test_no_pairs_is_any(self) -> None:
        assert build_range([]).is_any()

    def test_contradiction_yields_invalid_range(self) -> None:
        result = build_range([(Op.GE, v("2.0.0")), (Op.LT, v("1.0.0"))])

        assert result.min == v("2.0.0")
        assert result.max == v("1.0.0")
        assert not result.is_valid()

    def test_input_order_does_not_matter(self) -> None:
        pairs: List[Tuple[Op, Version]] = [
            (Op.GE, v("1.0.0")),
            (Op.LT, v("2.0.0")),
            (Op.NE, v("1.5.0")),
            (Op.TILDE, v("1.4.0")),
            (Op.EQ, v("3.0.0")),
        ]

        results = {build_range(list(p)) for p in itertools.permutations(pairs)}

        assert len(results) == 1
        assert str(results.pop()) == ">=1.4.0,<1.5.0,!=1.5.0,=3.0.0"

    def test_from_pairs_classmethod(self) -> None:
        pairs = [(Op.CARET, v("1.2.3"))]

        assert Range.from_pairs(pairs) == build_range(pairs)
