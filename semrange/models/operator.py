"""
Range operator model for semrange.

An :class:`Op` is a pure tag paired with a :class:`~semrange.models.version.Version`
inside a range expression. Its value is the canonical token used when the
pair is rendered back to text.
"""

from __future__ import annotations

from enum import Enum

from semrange.exceptions import RangeParseError


class Op(Enum):
    """Comparison operator of a single range item."""

    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    TILDE = "~"
    CARET = "^"

    @classmethod
    def from_token(cls, token: str) -> "Op":
        """Map a grammar token to an operator.

        ``"=="``, ``"="`` and the empty string all mean equality. Reversed
        comparisons such as ``"=>"`` are not recognized.

        Args:
            token: Operator text as it appeared in the input.

        Returns:
            The matching :class:`Op`.

        Raises:
            RangeParseError: ``token`` is not a known operator.
        """
        if token in _ALIASES:
            return _ALIASES[token]
        try:
            return cls(token)
        except ValueError:
            raise RangeParseError(
                f"Unknown range operator {token!r}", text=token
            ) from None

    @property
    def is_canonical(self) -> bool:
        """True for operators that survive range expansion unchanged."""
        return self in (Op.EQ, Op.NE, Op.GE, Op.LT)

    def __str__(self) -> str:
        return self.value


_ALIASES = {
    "==": Op.EQ,
    "": Op.EQ,
}
