"""Configuration loading from pyproject.toml."""

import logging
import tomllib
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Self

from ._errors import ConfigError

logger = logging.getLogger(__name__)


class CycleDetection(StrEnum):
    """Strategy used by `DirectedGraph.is_cyclic`."""

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    GENERAL = (
        "general",
        "Three-colour depth-first search over every component. Reports any cycle, self-loops included.",
    )
    MUTUAL = (
        "mutual",
        "Only looks for pairs of vertices pointing directly at each other, "
        "reachable from the first inserted vertex.",
    )


@dataclass(slots=True, frozen=True)
class GraphSettings:
    """Behavioural settings of a graph, loaded from `[tool.arcgraph]`."""

    cycle_detection: CycleDetection = CycleDetection.GENERAL


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_cycle_detection(value: object) -> CycleDetection:
    if not isinstance(value, str):
        msg = "Invalid [tool.arcgraph].cycle-detection: expected string"
        raise ConfigError(msg)
    try:
        return CycleDetection(value)
    except ValueError as e:
        choices = ", ".join(f"'{member.value}'" for member in CycleDetection)
        msg = f"Invalid [tool.arcgraph].cycle-detection '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from e


def load_settings(pyproject_path: Path) -> GraphSettings:
    """Load and validate [tool.arcgraph] settings from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphSettings (defaults when the table is absent)

    Raises:
        ConfigError: If the file is not valid TOML or the settings are invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        msg = "Invalid [tool]: expected a table"
        raise ConfigError(msg)

    section = tool.get("arcgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.arcgraph]: expected a table"
        raise ConfigError(msg)

    if not section:
        return GraphSettings()

    settings = GraphSettings()
    if "cycle-detection" in section:
        settings = GraphSettings(cycle_detection=_parse_cycle_detection(section["cycle-detection"]))

    logger.debug(f"Loaded graph settings from {pyproject_path}: {settings}")
    return settings


def get_settings() -> GraphSettings:
    """Get settings from pyproject.toml in current directory or parents.

    Returns:
        GraphSettings (defaults if no pyproject.toml or no [tool.arcgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphSettings()
    return load_settings(pyproject_path)
