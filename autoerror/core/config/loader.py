"""
Configuration loader — reads autoerror.yml into GeneratorSettings.

Settings are optional: with no file the defaults apply.  When a file
exists it must be valid YAML and validate against the Pydantic schema.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from autoerror.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default config filename
SETTINGS_FILE = "autoerror.yml"


class ConfigError(Exception):
    """Raised when a settings or declaration file is invalid or missing."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for autoerror.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to autoerror.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def read_yaml_mapping(path: Path) -> dict:
    """Read a YAML file that must contain a mapping.

    Raises:
        ConfigError: If the file is missing, unreadable, or not a mapping.
    """
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def load_settings(path: Path | None = None) -> GeneratorSettings:
    """Load generator settings.

    Args:
        path: Explicit path to autoerror.yml. If None, searches upward
            and falls back to defaults when nothing is found.

    Returns:
        Validated GeneratorSettings.

    Raises:
        ConfigError: If an explicit or discovered file is invalid.
    """
    if path is None:
        path = find_settings_file()
        if path is None:
            logger.debug("No %s found, using default settings", SETTINGS_FILE)
            return GeneratorSettings()

    logger.debug("Loading settings from %s", path)
    data = read_yaml_mapping(path)

    # Settings may sit under a "settings" key or at the top level
    settings_data = data.get("settings", data) if isinstance(data.get("settings"), dict) else data

    try:
        settings = GeneratorSettings.model_validate(settings_data)
    except Exception as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info(
        "Loaded settings: error names %s (%s)",
        settings.error_type_names, settings.error_match,
    )
    return settings
