"""
Settings loader — reads a node config file into a typed Settings model.

The file may be JSON, TOML or YAML (picked by extension). Values from
the file are layered over built-in defaults, and ``PUBNODE_<KEY>``
environment variables are layered over the file.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from pubnode.core.config.paths import file_extension
from pubnode.core.errors import ConfigError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("json", "toml", "yaml", "yml")

# Default config file names, searched in this order
CONFIG_FILE_NAMES = tuple(f"config.{ext}" for ext in SUPPORTED_EXTENSIONS)

ENV_PREFIX = "PUBNODE_"


class Settings(BaseModel):
    """Raw node settings, before derived values are computed.

    Field names are the keys used in config files.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str = ""
    port: str = "8000"
    password: str = ""
    secret: str = ""

    channel_prefix: str = "pubnode"
    node_ping_interval: int = 5
    presence_ping_interval: int = 25
    presence_expire_interval: int = 60
    expired_connection_close_delay: int = 10

    private_channel_prefix: str = "$"
    namespace_channel_boundary: str = ":"
    user_channel_boundary: str = "#"
    user_channel_separator: str = ","

    insecure: bool = False

    # Left raw here; the project list is validated separately.
    projects: Any = Field(default_factory=list)


def _scalar_keys() -> list[str]:
    return [key for key in Settings.model_fields if key != "projects"]


def read_settings_file(path: Path) -> dict[str, Any]:
    """Parse a config file into a plain dict.

    Raises:
        ConfigError: If the file is missing, unreadable, has an
            unsupported extension, or does not parse to a mapping.
    """
    ext = file_extension(path)
    if ext not in SUPPORTED_EXTENSIONS:
        raise ConfigError(
            f"Unsupported config file extension '{ext}': {path}. "
            f"Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        if ext == "json":
            data = json.loads(raw)
        elif ext == "toml":
            data = tomllib.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid {ext.upper()} in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    return data


def _env_overrides(env: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key in _scalar_keys():
        value = env.get(ENV_PREFIX + key.upper())
        if value is not None:
            overrides[key] = value
    return overrides


def load_settings(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """Build Settings from defaults, an optional file, and the environment.

    Args:
        path: Config file to read. If None, only defaults and
            environment overrides apply.
        env: Environment mapping (default: ``os.environ``). Pass ``{}``
            to ignore the environment.

    Raises:
        ConfigError: If the file cannot be read or a value has the wrong type.
    """
    data: dict[str, Any] = {}
    if path is not None:
        logger.debug("Loading settings from %s", path)
        data.update(read_settings_file(path))

    overrides = _env_overrides(os.environ if env is None else env)
    if overrides:
        logger.debug("Environment overrides: %s", ", ".join(sorted(overrides)))
        data.update(overrides)

    try:
        return Settings.model_validate(data)
    except PydanticValidationError as e:
        source = path if path is not None else "environment"
        raise ConfigError(f"Invalid settings in {source}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for a config.<ext> file starting from *start_dir*, walking up.

    Returns:
        Path to the first config file found, or None.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for file_name in CONFIG_FILE_NAMES:
            candidate = current / file_name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None
