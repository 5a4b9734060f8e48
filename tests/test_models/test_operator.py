"""Unit tests for semrange.models.operator."""

from __future__ import annotations

import pytest

from semrange.exceptions import RangeParseError
from semrange.models.operator import Op


@pytest.mark.unit
class TestOpFromToken:
    """Tests for Op.from_token."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("==", Op.EQ),
            ("=", Op.EQ),
            ("", Op.EQ),
            ("!=", Op.NE),
            (">", Op.GT),
            ("<", Op.LT),
            (">=", Op.GE),
            ("<=", Op.LE),
            ("~", Op.TILDE),
            ("^", Op.CARET),
        ],
    )
    def test_known_tokens(self, token: str, expected: Op) -> None:
        assert Op.from_token(token) is expected

    @pytest.mark.parametrize("token", ["=>", "=<", "~>", "<>", "===", " "])
    def test_unknown_tokens_raise(self, token: str) -> None:
        with pytest.raises(RangeParseError) as exc_info:
            Op.from_token(token)

        assert exc_info.value.text == token


@pytest.mark.unit
class TestOpProperties:
    """Tests for Op rendering and classification."""

    def test_str_is_canonical_token(self) -> None:
        assert str(Op.GE) == ">="
        assert f"{Op.NE}1.0.0" == "!=1.0.0"
        assert str(Op.EQ) == "="

    @pytest.mark.parametrize("op", [Op.EQ, Op.NE, Op.GE, Op.LT])
    def test_canonical(self, op: Op) -> None:
        assert op.is_canonical

    @pytest.mark.parametrize("op", [Op.GT, Op.LE, Op.TILDE, Op.CARET])
    def test_shorthand(self, op: Op) -> None:
        assert not op.is_canonical
