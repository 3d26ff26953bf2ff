"""
Config check use case — validate a node config file and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pubnode.core.config.loader import find_config_file, load_settings
from pubnode.core.config.validator import validate_config_file
from pubnode.core.errors import ConfigError
from pubnode.core.models.project import Structure


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    structure: Structure | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "projects": [p.name for p in self.structure.projects] if self.structure else [],
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate a config file, auto-detecting it when no path is given."""
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        result.errors.append("No config file found.")
        return result
    result.config_path = config_path

    try:
        result.structure = validate_config_file(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        if e.__cause__ is not None and str(e.__cause__) not in str(e):
            result.errors.append(str(e.__cause__))
        return result

    # The file parsed above, so only value errors can surface here
    try:
        settings = load_settings(config_path, env={})
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if settings.insecure:
        result.warnings.append(
            "Insecure mode is enabled: connections are not authenticated."
        )
    if not settings.secret:
        result.warnings.append("No admin secret set; admin tokens cannot be signed.")

    result.valid = not result.errors
    return result
