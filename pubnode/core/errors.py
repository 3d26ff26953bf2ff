"""
Configuration errors — one base class, one subclass per failure stage.

Callers that only care whether something went wrong catch ``ConfigError``.
The original cause (OSError, parse error, ...) is always chained.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when node configuration is invalid, missing, or unwritable."""


class PreconditionError(ConfigError):
    """Target already exists or has an unsupported extension. Nothing was touched."""


class GenerationError(ConfigError):
    """Secret creation or interactive input failed. No file was written yet."""


class WriteError(ConfigError):
    """The config file could not be written."""


class ValidationError(ConfigError):
    """A config file failed to parse or its project list is malformed."""


class PromptError(GenerationError):
    """Reading the project name failed after the prompt was shown."""
