"""
Config show use case — load settings and resolve the node configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pubnode.core.config.loader import find_config_file, load_settings
from pubnode.core.config.resolver import resolve
from pubnode.core.errors import ConfigError
from pubnode.core.models.node import ResolvedConfig

_MASKED = ("password", "secret")


@dataclass
class ConfigShowResult:
    config: ResolvedConfig | None = None
    config_path: Path | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        data = self.config.model_dump() if self.config else {}
        for key in _MASKED:
            if data.get(key):
                data[key] = "********"
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "config": data,
        }


def show_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> ConfigShowResult:
    """Resolve the node configuration from a config file and the environment.

    Without an explicit or auto-detected file, defaults and environment
    overrides alone are used.
    """
    result = ConfigShowResult()
    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    try:
        settings = load_settings(config_path, env=env)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.config = resolve(settings)
    return result
