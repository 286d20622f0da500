"""Runtime configuration loader.

The config file is loaded from the first file found in this list of paths:

1. ``$HOME/.config/alacritty.yml``
2. ``$HOME/.alacritty.yml``
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Tuple

import yaml
from pydantic import ValidationError

from .errors import (
    ConfigError,
    ConfigIoError,
    ConfigNotFoundError,
    ConfigSchemaError,
    EnvironmentLookupError,
)
from .models.config import Config

logger = logging.getLogger(__name__)

APP_NAME = "alacritty"
HOME_VAR = "HOME"


def home_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Resolve the user's home directory from the environment."""
    env = os.environ if environ is None else environ
    try:
        home = env[HOME_VAR]
        # Undecodable bytes survive in os.environ as lone surrogates.
        home.encode("utf-8")
    except (KeyError, UnicodeError) as err:
        raise EnvironmentLookupError(err, HOME_VAR) from err
    return Path(home)


def candidate_paths(home: Path) -> Tuple[Path, Path]:
    """Return the primary and fallback config paths, in probe order."""
    return home / ".config" / f"{APP_NAME}.yml", home / f".{APP_NAME}.yml"


def load_config(home: Optional[Path] = None) -> Config:
    """Load the config file from the first candidate path that exists.

    The fallback path is only tried when the primary file does not exist. Any
    other failure on the primary path is raised as-is.

    Raises:
        EnvironmentLookupError: ``home`` was not given and ``$HOME`` is unusable.
        ConfigNotFoundError: neither candidate file exists.
        ConfigIoError: a candidate file exists but could not be read.
        ConfigSchemaError: the file read is not valid YAML or has the wrong shape.
    """
    root = Path(home) if home is not None else home_dir()
    path, alt_path = candidate_paths(root)

    try:
        return load_from(path)
    except ConfigNotFoundError:
        logger.debug("No config at %s, trying %s", path, alt_path)
        return load_from(alt_path)


def load_from(path: Path) -> Config:
    """Read and deserialize a single config file."""
    raw = read_file(path)
    config = parse_config(raw)
    logger.debug("Loaded config from: %s", path)
    return config


def read_file(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except OSError as err:
        raise ConfigError.from_os_error(err) from err
    except UnicodeDecodeError as err:
        raise ConfigIoError(err) from err


def parse_config(raw: str) -> Config:
    """Deserialize YAML text into a ``Config``.

    An empty document yields the all-defaults config. Sections absent from the
    document get their whole-section defaults; present sections must be
    complete.

    Scalars follow YAML 1.1 resolution: a float needs a dot, and an exponent
    needs a sign (``1.0e+2``). ``1e2`` loads as a string and is rejected.
    """
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as err:
        raise ConfigSchemaError(err) from err

    if data is None:
        data = {}
    try:
        return Config.model_validate(data)
    except ValidationError as err:
        raise ConfigSchemaError(err) from err
