"""Configuration file loader for the semrange CLI.

Supports two formats:

- ``semrange.toml``: settings under the ``[semrange]`` table
- ``pyproject.toml``: settings under the ``[tool.semrange]`` table

Discovery order:

1. Explicit path from ``--config`` or ``SEMRANGE_CONFIG``
2. ``semrange.toml`` in the current directory
3. ``pyproject.toml`` with a ``[tool.semrange]`` section

Configuration precedence: defaults < config file < CLI flags.

Example (``semrange.toml``)::

    [semrange]
    output_format = "json"
    include_prereleases = true

The library API (parsing and ranges) never reads configuration; only the
CLI commands do.
"""

from __future__ import annotations

import tomli
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from semrange.exceptions import ConfigError
from semrange.utils.logger import get_logger
from semrange.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_INCLUDE_PRERELEASES,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)

logger = get_logger("config")


@dataclass
class SemRangeConfig:
    """Parsed and validated semrange configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        output_format: Default ``--format`` for commands (``table`` or ``json``).
        include_prereleases: Let ``select`` pick pre-release candidates.
        source_path: Path to the loaded config file, or ``None`` for defaults.
    """

    output_format: str = DEFAULT_OUTPUT_FORMAT
    include_prereleases: bool = DEFAULT_INCLUDE_PRERELEASES

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return user-facing options for debug logging."""
        return {
            "output_format": self.output_format,
            "include_prereleases": self.include_prereleases,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to the config file, or ``None`` if none was found.

    Raises:
        ConfigError: ``explicit_path`` was given but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, dedicated)
        return dedicated

    pyproject = cwd / "pyproject.toml"
    if pyproject.is_file() and _pyproject_has_semrange_section(pyproject):
        logger.debug("Found [tool.semrange] in pyproject.toml: %s", pyproject)
        return pyproject

    logger.debug("No configuration file found")
    return None


def _pyproject_has_semrange_section(path: Path) -> bool:
    """Return True if ``path`` has a ``[tool.semrange]`` table.

    An unreadable or malformed pyproject.toml is treated as having no
    section; it belongs to the surrounding project, not to semrange.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable pyproject.toml: %s", exc)
        return False
    return "semrange" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> SemRangeConfig:
    """Load and validate semrange configuration.

    Args:
        config_path: Explicit path to a config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`SemRangeConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return SemRangeConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("semrange", {})
    else:
        section = raw.get("semrange", {})

    if not section:
        logger.debug("Config file has no semrange section, using defaults")
        return SemRangeConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: The file cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomli.load(fh)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> SemRangeConfig:
    """Validate a ``[semrange]`` / ``[tool.semrange]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    config = SemRangeConfig()

    known = {"output_format", "include_prereleases"}
    unknown = set(section.keys()) - known
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "output_format" in section:
        val = section["output_format"]
        if not isinstance(val, str) or val.lower() not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, got {val!r}",
                config_path=config_path,
                option="output_format",
            )
        config.output_format = val.lower()

    if "include_prereleases" in section:
        val = section["include_prereleases"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"include_prereleases must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="include_prereleases",
            )
        config.include_prereleases = val

    return config
