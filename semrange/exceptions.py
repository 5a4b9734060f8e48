"""
Custom exception hierarchy for semrange.

This module defines structured exception types used across semrange.
All exceptions inherit from :class:`SemRangeError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class SemRangeError(Exception):
    """Base exception for all semrange errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 80) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


class ParseError(SemRangeError):
    """Raised when version or range text cannot be recognized.

    Args:
        message: Error description.
        text: The complete input that was being parsed.
        position: Character offset at which recognition failed.
    """

    __slots__ = ("text", "position")

    def __init__(
        self,
        message: str,
        *,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        if text is not None:
            details["input"] = repr(_truncate(text))
        _add_if(details, "position", position)

        super().__init__(message, details)

        self.text = text
        self.position = position


class VersionParseError(ParseError):
    """Raised when a single version string is malformed."""

    __slots__ = ()


class RangeParseError(ParseError):
    """Raised when a range expression is malformed."""

    __slots__ = ()


class ConfigError(SemRangeError):
    """Raised when a configuration file is missing, unreadable, or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
