"""Unit tests for semrange.models.version.

Test Coverage:
- Construction defaults and component validation
- Immutability and with_* substitution
- Structural identity vs. range order vs. precedence order
- Identifier ordering for extra and pre-release components
- Text rendering and round trips through the grammar
"""

from __future__ import annotations

import dataclasses
import itertools

import pytest

from semrange.models.version import (
    Version,
    precedence_compare,
    range_compare,
    range_equal,
)


def v(text: str) -> Version:
    return Version.parse(text)


@pytest.mark.unit
class TestConstruction:
    """Tests for Version construction and substitution."""

    def test_defaults(self) -> None:
        version = Version(3)

        assert (version.major, version.minor, version.patch) == (3, 0, 0)
        assert version.extra_version is None
        assert version.pre_release is None
        assert version.build is None

    @pytest.mark.parametrize("field", ["major", "minor", "patch"])
    def test_negative_component_rejected(self, field: str) -> None:
        kwargs = {"major": 1, "minor": 1, "patch": 1, field: -1}

        with pytest.raises(ValueError):
            Version(**kwargs)

    @pytest.mark.parametrize("value", ["1", 1.0, True, None])
    def test_non_int_component_rejected(self, value: object) -> None:
        with pytest.raises(TypeError):
            Version(value)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        version = Version(1, 2, 3)

        with pytest.raises(dataclasses.FrozenInstanceError):
            version.major = 2  # type: ignore[misc]

    def test_with_helpers_return_new_values(self) -> None:
        original = v("1.2.3.4-rc+b")

        assert original.with_major(9) == v("9.2.3.4-rc+b")
        assert original.with_minor(9) == v("1.9.3.4-rc+b")
        assert original.with_patch(9) == v("1.2.9.4-rc+b")
        assert original.with_extra_version(None) == v("1.2.3-rc+b")
        assert original.with_pre_release("beta") == v("1.2.3.4-beta+b")
        assert original.with_build(None) == v("1.2.3.4-rc")
        assert original == v("1.2.3.4-rc+b")

    def test_with_helpers_validate(self) -> None:
        with pytest.raises(ValueError):
            Version(1).with_patch(-1)

    def test_release_strips_suffixes(self) -> None:
        assert v("1.2.3.4-rc+b").release().is_same(Version(1, 2, 3))


@pytest.mark.unit
class TestStructuralIdentity:
    """Tests for is_same / == / hash."""

    def test_identical_versions(self) -> None:
        assert v("1.0.0-rc+b").is_same(v("1.0.0-rc+b"))

    def test_build_distinguishes_identity(self) -> None:
        left, right = v("1.0.0+a"), v("1.0.0+b")

        assert not left.is_same(right)
        assert left != right
        assert range_equal(left, right)

    def test_defaulted_fields_match_explicit_ones(self) -> None:
        assert v("1").is_same(v("1.0.0"))

    def test_hash_follows_identity(self) -> None:
        assert len({v("1.0.0"), v("1.0"), v("1.0.0+b")}) == 2

    def test_no_builtin_ordering(self) -> None:
        with pytest.raises(TypeError):
            v("1.0.0") < v("2.0.0")  # type: ignore[operator]


@pytest.mark.unit
class TestRangeOrder:
    """Tests for range_compare / range_equal."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("1.0.0", "2.0.0", -1),
            ("1.2.0", "1.1.9", 1),
            ("1.1.5", "1.2.0", -1),
            ("1.0.1", "1.0.0", 1),
            ("1.0.0", "1.0.0.1", -1),
            ("1.0.0.2", "1.0.0.10", -1),
            ("1.0.0.10", "1.0.0.a", -1),
            ("1.0.0.a", "1.0.0.b", -1),
            ("1.0.0.1", "1.0.0.1.0", -1),
            ("2.0.0-alpha", "2.0.0", 0),
            ("1.0.0+a", "1.0.0+b", 0),
            ("1.0.0-rc+x", "1.0.0", 0),
        ],
    )
    def test_range_compare(self, left: str, right: str, expected: int) -> None:
        assert range_compare(v(left), v(right)) == expected
        assert range_compare(v(right), v(left)) == -expected

    def test_range_equal_ignores_prerelease_and_build(self) -> None:
        assert range_equal(v("2.0.0-alpha+1"), v("2.0.0"))
        assert not range_equal(v("2.0.0.1"), v("2.0.0"))

    def test_total_order(self) -> None:
        samples = [v(t) for t in ["0.0.1", "1.0.0", "1.0.0-rc", "1.0.0.1", "1.1", "2"]]

        for left, right in itertools.product(samples, repeat=2):
            outcomes = [
                range_compare(left, right) < 0,
                range_compare(left, right) == 0,
                range_compare(left, right) > 0,
            ]
            assert outcomes.count(True) == 1


@pytest.mark.unit
class TestPrecedenceOrder:
    """Tests for precedence_compare / is_older_than / is_newer_than."""

    def test_prerelease_older_than_release(self) -> None:
        assert v("2.0.0-alpha").is_older_than(v("2.0.0"))
        assert v("2.0.0").is_newer_than(v("2.0.0-alpha"))

    def test_higher_priority_component_decides(self) -> None:
        assert not v("1.2.0").is_older_than(v("1.1.5"))
        assert v("1.1.5").is_older_than(v("1.2.0"))

    def test_major_beats_everything(self) -> None:
        assert v("1.9.9").is_older_than(v("2.0.0-alpha"))
        assert not v("2.0.0-alpha").is_older_than(v("1.9.9"))

    @pytest.mark.parametrize(
        "older,newer",
        [
            ("1.0.0-alpha", "1.0.0-alpha.1"),
            ("1.0.0-alpha.1", "1.0.0-alpha.beta"),
            ("1.0.0-alpha.beta", "1.0.0-beta"),
            ("1.0.0-beta.2", "1.0.0-beta.11"),
            ("1.0.0-rc.1", "1.0.0"),
            ("1.0.0", "1.0.0.1-rc"),
        ],
    )
    def test_prerelease_identifier_order(self, older: str, newer: str) -> None:
        assert v(older).is_older_than(v(newer))
        assert not v(newer).is_older_than(v(older))

    def test_build_ignored(self) -> None:
        assert precedence_compare(v("1.0.0+a"), v("1.0.0+b")) == 0
        assert not v("1.0.0+a").is_older_than(v("1.0.0+b"))

    def test_equal_versions_not_older(self) -> None:
        assert not v("1.0.0").is_older_than(v("1.0.0"))


@pytest.mark.unit
class TestRendering:
    """Tests for __str__, __repr__ and to_dict."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", "1.0.0"),
            ("v1.2", "1.2.0"),
            ("1.2.3.4", "1.2.3.4"),
            ("1.2.3-rc.1", "1.2.3-rc.1"),
            ("1.2.3+b", "1.2.3+b"),
            ("1.2.3+b-rc", "1.2.3-rc+b"),
            ("1.2.3.x-rc+b", "1.2.3.x-rc+b"),
        ],
    )
    def test_str(self, text: str, expected: str) -> None:
        assert str(v(text)) == expected

    @pytest.mark.parametrize(
        "version",
        [
            Version(0),
            Version(1, 2, 3),
            Version(1, 2, 3, "4"),
            Version(1, 2, 3, "a.b", "rc.1", "sha.5"),
            Version(7, 0, 0, None, None, "exp"),
        ],
    )
    def test_round_trip(self, version: Version) -> None:
        assert Version.parse(str(version)).is_same(version)

    def test_idempotent_rendering(self) -> None:
        first = v(" V 3.1+b-pre ")

        assert str(v(str(first))) == str(first)

    def test_repr(self) -> None:
        assert repr(v("1.2-rc")) == "Version('1.2.0-rc')"

    def test_to_dict(self) -> None:
        assert v("1.2.3-rc+b").to_dict() == {
            "version": "1.2.3-rc+b",
            "major": 1,
            "minor": 2,
            "patch": 3,
            "extra_version": None,
            "pre_release": "rc",
            "build": "b",
        }
