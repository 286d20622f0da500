"""Errors raised while loading the configuration file.

Every failure is a ``ConfigError`` subclass tagged with an ``ErrorKind``. The
underlying exception, when there is one, is kept on ``cause`` and chained via
``raise ... from`` so callers can format or inspect it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    ENV_LOOKUP = "ENV_LOOKUP"
    IO = "IO"
    SCHEMA = "SCHEMA"


class ConfigError(Exception):
    """Base for all configuration loading errors."""

    kind: ErrorKind

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return format_error(self)

    @classmethod
    def from_os_error(cls, err: OSError) -> "ConfigError":
        """Translate an ``OSError``; a missing file becomes ``ConfigNotFoundError``."""
        if isinstance(err, FileNotFoundError):
            return ConfigNotFoundError()
        return ConfigIoError(err)


class ConfigNotFoundError(ConfigError):
    """No config file exists at any candidate path."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__(None)


class EnvironmentLookupError(ConfigError):
    """The home directory could not be read from the environment."""

    kind = ErrorKind.ENV_LOOKUP

    def __init__(self, cause: BaseException, variable: str = "HOME") -> None:
        super().__init__(cause)
        self.variable = variable


class ConfigIoError(ConfigError):
    """The config file exists but could not be read."""

    kind = ErrorKind.IO


class ConfigSchemaError(ConfigError):
    """Not valid YAML or missing/mistyped parameters."""

    kind = ErrorKind.SCHEMA


def _describe_env_cause(cause: Optional[BaseException]) -> str:
    if isinstance(cause, KeyError):
        return "environment variable not found"
    if isinstance(cause, UnicodeError):
        return f"environment variable was not valid unicode: {cause}"
    return str(cause)


def format_error(err: ConfigError) -> str:
    """Return a human readable message naming the failure and its cause."""
    if err.kind is ErrorKind.NOT_FOUND:
        return "could not locate config file"
    if err.kind is ErrorKind.ENV_LOOKUP:
        variable = getattr(err, "variable", "HOME")
        return f"could not read ${variable} environment variable: {_describe_env_cause(err.cause)}"
    if err.kind is ErrorKind.IO:
        return f"error reading config file: {err.cause}"
    return f"problem with config: {err.cause}"
