"""
Starter config generator — interactively scaffold a new node config file.

Steps, failing fast in this order:

    1. refuse an existing target
    2. refuse an unsupported extension
    3. create a random secret
    4. pick the template for the extension
    5. prompt for the project name on stdin
    6. render
    7. write the file
    8. validate it, deleting the file again if validation fails

The target is not created atomically: a crash during the write can
leave a partial file behind.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from pubnode.core.config.paths import file_extension, path_exists
from pubnode.core.config.templates import ProjectEntry, render, template_for
from pubnode.core.config.validator import validate_config_file
from pubnode.core.errors import GenerationError, PreconditionError, PromptError, WriteError

logger = logging.getLogger(__name__)

PROMPT = "Enter your project name: "

_FILE_MODE = 0o644


@dataclass(frozen=True)
class ConfigFileRequest:
    """Everything that went into one generated file."""

    path: Path
    ext: str
    project_name: str
    secret: str


def _read_project_name(stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(PROMPT)
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, ValueError) as e:
        raise PromptError(f"unable to read project name: {e}") from e
    if not line:
        raise PromptError("unable to read project name: end of input")
    return line.rstrip("\r\n").strip(" ")


def _write(path: Path, content: str) -> None:
    def opener(p: str, flags: int) -> int:
        return os.open(p, flags, _FILE_MODE)

    try:
        with open(path, "w", encoding="utf-8", opener=opener) as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"unable to write {path}: {e}") from e


def generate_config(
    path: Path | str,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    secret_factory: Callable[[], Any] = uuid.uuid4,
    validator: Callable[[Path], Any] = validate_config_file,
) -> ConfigFileRequest:
    """Create a starter config file at *path*.

    Args:
        path: Target file. Its extension picks the format.
        stdin: Where the project name is read from (default: ``sys.stdin``).
        stdout: Where the prompt is written (default: ``sys.stdout``).
        secret_factory: Returns the project secret; ``str()`` is applied.
        validator: Called with the written path; raising rolls the write back.

    Returns:
        The request that was written.

    Raises:
        PreconditionError: Target exists or has an unsupported extension.
        GenerationError: Secret creation or reading the name failed.
        WriteError: The file could not be written.
        ValidationError: The written file did not validate (it has been removed).
    """
    path = Path(path)

    try:
        exists = path_exists(path)
    except OSError as e:
        raise PreconditionError(f"cannot check output config file {path}: {e}") from e
    if exists:
        raise PreconditionError(f"output config file already exists: {path}")

    ext = file_extension(path)
    template_for(ext)

    try:
        secret = str(secret_factory())
    except Exception as e:
        raise GenerationError(f"unable to generate secret: {e}") from e

    name = _read_project_name(
        sys.stdin if stdin is None else stdin,
        sys.stdout if stdout is None else stdout,
    )

    request = ConfigFileRequest(path=path, ext=ext, project_name=name, secret=secret)
    content = render(ext, ProjectEntry(name=name, secret=secret))

    _write(path, content)
    logger.info("Wrote starter config: %s", path)

    try:
        validator(path)
    except Exception:
        logger.warning("Generated config %s failed validation, removing it", path)
        with contextlib.suppress(OSError):
            path.unlink()
        raise

    return request
