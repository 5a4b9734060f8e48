"""
Utility helpers for semrange.

This package provides reusable utilities used across semrange:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Update classification (:mod:`semrange.utils.version_utils`, imported
  directly since it depends on :mod:`semrange.core`)

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from semrange.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
    verbosity_to_level,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from semrange.utils.console import (
    colorize_update_type,
    colorize_verdict,
    get_raw_console,
    print_error,
    print_json,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_json",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "colorize_verdict",
    "reconfigure_console",
    "colorize_update_type",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "verbosity_to_level",
    "is_logging_configured",
]
