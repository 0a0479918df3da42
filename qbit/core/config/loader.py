"""
Configuration loader — reads qbit.yml / qbit.yaml / qbit.toml.

This is the primary entry point for loading project configuration.
It reads YAML or TOML, validates against Pydantic schemas, and returns
typed domain objects.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

from qbit.core.models.project import InstallSpec, ProjectConfig

logger = logging.getLogger(__name__)

# Candidate filenames, checked in this order in each directory.
CONFIG_CANDIDATES: tuple[str, ...] = ("qbit.yml", "qbit.yaml", "qbit.toml")

# Directory where discovery starts instead of the cwd.
PROJECT_ROOT_ENV_VAR = "QBIT_PROJECT_ROOT"


class ConfigError(Exception):
    """Raised when project configuration is invalid or unreadable."""


@dataclass
class LoadedProjectConfig:
    """A parsed config together with the file it came from."""

    path: Path
    data: ProjectConfig

    def script(self, name: str) -> list[str] | None:
        return self.data.script(name)

    def install_target(self, name: str) -> tuple[str, InstallSpec] | None:
        return self.data.install_target(name)


def default_start_dir() -> Path:
    """``QBIT_PROJECT_ROOT`` if set, else the current directory."""
    root = os.environ.get(PROJECT_ROOT_ENV_VAR)
    return Path(root) if root else Path.cwd()


def find_project_file(start_dir: Path | None = None) -> Path | None:
    """Search for a qbit config starting from the given directory, walking up.

    This allows running commands from subdirectories and still finding
    the project root.

    Args:
        start_dir: Directory to start searching from
            (default: ``QBIT_PROJECT_ROOT`` or cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or default_start_dir()).resolve()

    for _ in range(20):  # safety limit
        for name in CONFIG_CANDIDATES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _parse(path: Path, raw: str) -> Any:
    if path.suffix == ".toml":
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_project_config(path: Path | None = None) -> LoadedProjectConfig | None:
    """Load and validate project configuration.

    Args:
        path: Explicit config path. If None, searches upward and
            returns None when no config exists (config is optional).

    Returns:
        The loaded config, or None if none was found.

    Raises:
        ConfigError: If an explicit file is missing, or any file is
            unreadable or invalid.
    """
    if path is None:
        path = find_project_file()
        if path is None:
            logger.debug("No %s found", "/".join(CONFIG_CANDIDATES))
            return None
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading project config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    data = _parse(path, raw)
    if data is None:
        data = {}  # empty file
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    try:
        config = ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid project configuration in {path}: {e}") from e

    logger.info(
        "Loaded %s (%d scripts, %d install targets)",
        path.name, len(config.scripts), len(config.install),
    )
    return LoadedProjectConfig(path=path, data=config)
