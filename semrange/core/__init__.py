"""
Core functionality exports for semrange.

The grammar turns text into values and the algebra reduces parsed range
items to canonical ranges:

    from semrange.core import parse_range, parse_version
"""

from __future__ import annotations

from semrange.core.algebra import build_range, expand_pairs, sort_pairs
from semrange.core.grammar import parse_range, parse_range_pairs, parse_version

__all__ = [
    "parse_version",
    "parse_range",
    "parse_range_pairs",
    "build_range",
    "expand_pairs",
    "sort_pairs",
]
