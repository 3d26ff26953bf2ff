"""
Config generate use case — scaffold a starter config file for the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from pubnode.core.config.generator import generate_config
from pubnode.core.errors import ConfigError, PromptError, ValidationError, WriteError

# Failures that happen once the name prompt has been written
_AFTER_PROMPT = (PromptError, WriteError, ValidationError)


@dataclass
class ConfigGenerateResult:
    """Outcome of one generation run."""

    path: Path
    ok: bool = False
    prompted: bool = False
    project_name: str = ""
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "path": str(self.path),
            "project_name": self.project_name,
            "error": self.error,
        }


def run_generate(
    path: Path,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> ConfigGenerateResult:
    """Generate a starter config at *path*, reporting errors in the result."""
    result = ConfigGenerateResult(path=path)
    try:
        request = generate_config(path, stdin=stdin, stdout=stdout)
    except ConfigError as e:
        result.error = str(e)
        result.prompted = isinstance(e, _AFTER_PROMPT)
        return result

    result.ok = True
    result.prompted = True
    result.project_name = request.project_name
    return result
