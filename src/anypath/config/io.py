import logging
import pathlib
from typing import Any

import ruamel.yaml

from anypath import exceptions
from anypath.config import models

logger = logging.getLogger(__name__)

# Options may live at the top level of the file or under this key
OPTIONS_SECTION = "anypath"


def _load_yaml(path: pathlib.Path) -> Any:
    """Load YAML with error handling."""
    try:
        yaml = ruamel.yaml.YAML(typ="safe")
        with path.open() as f:
            return yaml.load(f)
    except ruamel.yaml.YAMLError as e:
        raise exceptions.ConfigError(f"Invalid YAML in {path}: {e}") from e
    except PermissionError:
        raise exceptions.ConfigError(f"Permission denied reading {path}") from None
    except OSError as e:
        raise exceptions.ConfigError(f"Error reading {path}: {e}") from e


def load_options_file(path: pathlib.Path) -> models.FormatOptions:
    """Load FormatOptions from a YAML file, returns defaults if missing.

    The file holds a mapping of option names (snake_case or camelCase), either
    at the top level or nested under an ``anypath:`` key.
    """
    if not path.exists():
        return models.DEFAULT_OPTIONS

    data = _load_yaml(path)
    if data is None:
        return models.DEFAULT_OPTIONS
    if not isinstance(data, dict):
        raise exceptions.ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")
    if OPTIONS_SECTION in data:
        data = data[OPTIONS_SECTION]
        if not isinstance(data, dict):
            raise exceptions.ConfigError(f"'{OPTIONS_SECTION}' in {path} must be a mapping")

    options = models.resolve_options(data)
    logger.debug(f"Loaded path options from {path}")
    return options
