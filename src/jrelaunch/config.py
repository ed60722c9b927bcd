"""Configuration loading for jrelaunch.

Values are resolved in order, later sources winning:

1. built-in defaults (``jre``, ``lib`` and the bundled main class)
2. a JSON file, ``jrelaunch.json`` in the working directory or ``$JRELAUNCH_CONFIG``
3. ``JRELAUNCH_RUNTIME_DIR``, ``JRELAUNCH_LIB_DIR`` and ``JRELAUNCH_MAIN_CLASS``
4. explicit overrides (CLI flags)
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from jrelaunch.errors import ConfigError
from jrelaunch.models import LauncherConfig

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "jrelaunch.json"
CONFIG_PATH_ENV = "JRELAUNCH_CONFIG"

ENV_OVERRIDES = {
    "runtime_dir": "JRELAUNCH_RUNTIME_DIR",
    "lib_dir": "JRELAUNCH_LIB_DIR",
    "main_class": "JRELAUNCH_MAIN_CLASS",
}


def config_path() -> Path:
    """Return the config file path to read, from env or the working directory."""
    override = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override)
    return Path.cwd() / CONFIG_FILE_NAME


def _read_config_file(path: Path, required: bool) -> dict:
    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        log.debug("no config file at %s", path)
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    log.debug("loaded %s: %s", path, data)
    return data


def _env_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for field, env_key in ENV_OVERRIDES.items():
        value = os.environ.get(env_key)
        if value is not None:
            values[field] = value
    return values


def load_config(
    path: Path | None = None,
    overrides: dict[str, str | None] | None = None,
) -> LauncherConfig:
    """Build the effective launcher configuration.

    An explicit `path` must exist; the implicit default path is optional.
    `None` values in `overrides` are ignored.
    """
    required = path is not None or bool(os.environ.get(CONFIG_PATH_ENV, "").strip())
    values = _read_config_file(path or config_path(), required=required)
    values.update(_env_values())
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        config = LauncherConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    log.debug("effective config: %s", config)
    return config
