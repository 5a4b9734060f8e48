"""
Shared context object for semrange CLI commands.

This module defines the Click context object used to share configuration
and runtime options across subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from semrange.config import SemRangeConfig


class SemRangeContext:
    """Per-invocation state shared by semrange commands.

    Attributes:
        config_path: Path to the configuration file, if one was loaded.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, or ``None`` before the group callback ran.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[SemRangeConfig] = None

    def resolved_config(self) -> SemRangeConfig:
        """Return the loaded configuration, or defaults if none was loaded."""
        return self.config if self.config is not None else SemRangeConfig()


#: Click decorator for injecting :class:`SemRangeContext` into commands.
pass_context = click.make_pass_decorator(SemRangeContext, ensure=True)
