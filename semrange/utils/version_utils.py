"""
Version comparison utilities for semrange.

This module classifies the move from one version to another using the
precedence order, where a pre-release is older than its final release.
"""

from __future__ import annotations

from typing import Optional

from semrange.exceptions import VersionParseError
from semrange.core.grammar import parse_version
from semrange.models.version import Version, precedence_compare


def get_update_type(
    current_version: Optional[str],
    target_version: Optional[str],
) -> str:
    """Determine the update type between two version strings.

    Args:
        current_version: Currently used version, or ``None`` if there is none.
        target_version: Version being moved to.

    Returns:
        One of:
            - ``"new"``       : No current version exists
            - ``"same"``      : Versions have equal precedence
            - ``"downgrade"`` : Target precedes current
            - ``"major"``     : Major component changes
            - ``"minor"``     : Minor component changes
            - ``"patch"``     : Patch component changes
            - ``"update"``    : Only the extra or pre-release part changes
            - ``"unknown"``   : Missing target or unparseable input

    Examples:
        >>> get_update_type("1.0.0", "2.0.0")
        'major'
        >>> get_update_type("1.0.0-rc.1", "1.0.0")
        'update'
        >>> get_update_type("1.2.3+a", "1.2.3+b")
        'same'
    """
    if target_version is None:
        return "unknown"

    if current_version is None:
        try:
            parse_version(target_version)
        except VersionParseError:
            return "unknown"
        return "new"

    try:
        current = parse_version(current_version)
        target = parse_version(target_version)
    except VersionParseError:
        return "unknown"

    order = precedence_compare(target, current)
    if order == 0:
        return "same"
    if order < 0:
        return "downgrade"
    return _classify_upgrade(current, target)


def _classify_upgrade(current: Version, target: Version) -> str:
    """Classify an upgrade between two parsed versions."""
    if current.major != target.major:
        return "major"

    if current.minor != target.minor:
        return "minor"

    if current.patch != target.patch:
        return "patch"

    # Extra component or pre-release -> release
    return "update"
