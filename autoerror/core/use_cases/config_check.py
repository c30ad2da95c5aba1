"""
Config check use case — validate autoerror.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from autoerror.core.config.loader import (
    ConfigError,
    find_settings_file,
    load_settings,
    read_yaml_mapping,
)
from autoerror.core.models.settings import GeneratorSettings


@dataclass
class ConfigCheckResult:
    """Result of settings validation."""

    valid: bool = False
    settings: GeneratorSettings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "settings": self.settings.model_dump() if self.settings else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator settings and report issues.

    A missing autoerror.yml is not an error; defaults are reported
    with a warning.

    Args:
        config_path: Optional explicit path to autoerror.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_settings_file()

    if config_path is None:
        result.settings = GeneratorSettings()
        result.warnings.append("No autoerror.yml found, using defaults.")
        result.valid = True
        return result

    result.config_path = config_path

    try:
        settings = load_settings(config_path)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    raw = read_yaml_mapping(config_path)
    raw = raw.get("settings", raw) if isinstance(raw.get("settings"), dict) else raw
    unknown = sorted(set(raw) - set(GeneratorSettings.model_fields))
    if unknown:
        result.warnings.append(f"Unknown settings ignored: {', '.join(unknown)}")

    if not settings.error_type_names:
        result.warnings.append(
            "error_type_names is empty: no variant will be inferred as wrapping an error."
        )

    blank = [n for n in settings.error_type_names if not n.strip()]
    if blank:
        result.errors.append("error_type_names contains blank entries")

    if settings.error_match == "last_segment":
        qualified = [n for n in settings.error_type_names if "::" in n or "." in n]
        if qualified:
            result.warnings.append(
                f"Qualified names never match in last_segment mode: {', '.join(qualified)}"
            )

    result.valid = len(result.errors) == 0
    return result
