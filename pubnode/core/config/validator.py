"""
Config validator — re-reads a config file and checks its project list.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pubnode.core.config.loader import read_settings_file
from pubnode.core.errors import ConfigError, ValidationError
from pubnode.core.models.project import Structure

logger = logging.getLogger(__name__)


def validate_config_file(path: Path) -> Structure:
    """Parse *path* and validate the projects it declares.

    Any read or parse failure is reported as a single
    "unable to locate config file" error; the underlying cause is chained.
    Only the project list is checked; scalar settings are left to the loader.

    Returns:
        The validated project list.

    Raises:
        ValidationError: If the file cannot be parsed or the project list is invalid.
    """
    try:
        data = read_settings_file(Path(path))
    except ConfigError as e:
        logger.debug("Config parse failed for %s: %s", path, e)
        raise ValidationError("unable to locate config file") from e

    structure = Structure.from_settings(data.get("projects"))
    structure.validate()
    logger.debug("Validated %d project(s) in %s", len(structure.projects), path)
    return structure
