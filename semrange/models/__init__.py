"""
Unified data model exports for semrange.

This module re-exports the value types so callers can import them from
``semrange.models`` instead of individual submodules.

Example:
    >>> from semrange.models import Version, Range, Op
"""

from __future__ import annotations

from semrange.models.operator import Op
from semrange.models.range import Range
from semrange.models.version import (
    Version,
    precedence_compare,
    range_compare,
    range_equal,
)

__all__ = [
    "Op",
    "Range",
    "Version",
    "range_compare",
    "range_equal",
    "precedence_compare",
]
