"""
Checker configuration models.

Parses the [checker] table of iocheck.toml, or the [tool.iocheck] table of
pyproject.toml, into a typed CheckerConfig.
"""

from __future__ import annotations

import logging
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "iocheck.toml"
PYPROJECT_FILENAME = "pyproject.toml"


class InputForm(StrEnum):
    """Input statement alternatives, tried in configured order."""

    SCANNER = "scanner"
    BUFFERED_READER = "buffered_reader"
    READ_CALL = "read_call"


class CheckerConfig(BaseModel):
    """Configuration for a checker run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    output_members: list[str] = Field(default_factory=lambda: ["out", "err"])
    input_forms: list[InputForm] = Field(default_factory=lambda: list(InputForm))
    show_traces: bool = True
    log_level: str = "WARNING"

    @field_validator("output_members")
    @classmethod
    def _members_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("output_members must name at least one member of System")
        return value

    @field_validator("input_forms")
    @classmethod
    def _forms_unique(cls, value: list[InputForm]) -> list[InputForm]:
        if len(set(value)) != len(value):
            raise ValueError("input_forms must not repeat a form")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level


def find_config_file(start: Path) -> Path | None:
    """
    Find the nearest configuration file at or above a directory.

    iocheck.toml wins over pyproject.toml in the same directory; a
    pyproject.toml only counts when it has a [tool.iocheck] table. A
    pyproject.toml that is not valid TOML is logged and skipped.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if not pyproject.is_file():
            continue
        try:
            data = _read_toml(pyproject)
        except ConfigError as e:
            logger.warning("Skipping unreadable %s: %s", pyproject, e.message)
            continue
        if "iocheck" in data.get("tool", {}):
            return pyproject
    return None


def load_config(path: Path | None = None, start: Path | None = None) -> CheckerConfig:
    """
    Load checker configuration.

    Args:
        path: Explicit configuration file (iocheck.toml or pyproject.toml)
        start: Directory to search upwards from when no path is given

    Returns:
        CheckerConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is missing, malformed, or has invalid values
    """
    if path is None:
        path = find_config_file(start or Path.cwd())
        if path is None:
            return CheckerConfig()
    elif not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")

    data = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("iocheck", {})
    else:
        section = data.get("checker", {})

    logger.debug("Loading configuration from %s", path)
    return config_from_dict(section, source=path)


def config_from_dict(section: dict[str, Any], source: Path | None = None) -> CheckerConfig:
    """Validate a raw configuration table."""
    try:
        return CheckerConfig.model_validate(section)
    except ValidationError as e:
        where = f" in {source}" if source else ""
        raise ConfigError(f"Invalid configuration{where}:\n{e}") from e


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed TOML in {path}: {e}") from e
