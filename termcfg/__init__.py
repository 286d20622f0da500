"""Terminal rendering configuration: discovery, defaults and loading."""

from .config import load_config, load_from
from .errors import (
    ConfigError,
    ConfigIoError,
    ConfigNotFoundError,
    ConfigSchemaError,
    EnvironmentLookupError,
    ErrorKind,
)
from .models import Config, Dpi, Font, FontOffset

__all__ = [
    "Config",
    "ConfigError",
    "ConfigIoError",
    "ConfigNotFoundError",
    "ConfigSchemaError",
    "Dpi",
    "EnvironmentLookupError",
    "ErrorKind",
    "Font",
    "FontOffset",
    "load_config",
    "load_from",
]
