"""Configuration handling for tiapp."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from tiapp.errors import TiappConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".tiapp.toml"
STRICT_ENV_VAR = "TIAPP_STRICT"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class TiappSettings:
    """Settings that control how tiapp.xml files are parsed."""

    # Raise on malformed XML instead of letting the parser recover
    strict: bool = False
    path: Path | None = None  # Path to the settings file, if one was read


def find_config_file(start_path: Path | None = None) -> Path | None:
    """
    Search for .tiapp.toml configuration file.

    Searches upward from start_path (or cwd) until a config file is found.

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    current = Path(start_path).resolve()

    # Search upward until we hit the root
    while True:
        config_path = current / CONFIG_FILENAME
        if config_path.is_file():
            return config_path

        parent = current.parent
        if parent == current:  # Reached root
            break
        current = parent

    return None


def _parse_bool(value: str, source: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise TiappConfigError(f"Invalid boolean value {value!r} in {source}", value)


def load_settings(start_path: Path | None = None) -> TiappSettings:
    """
    Load tiapp settings.

    Values are resolved in order of precedence:
    1. TIAPP_STRICT environment variable
    2. [tiapp] table of the nearest .tiapp.toml
    3. Built-in defaults

    Args:
        start_path: Starting directory for the settings file search (defaults to cwd)

    Returns:
        TiappSettings with the resolved values

    Raises:
        TiappConfigError: If the settings file or environment value is invalid
    """
    settings = TiappSettings()

    config_path = find_config_file(start_path)
    if config_path is not None:
        try:
            with open(config_path) as f:
                document = tomlkit.load(f).unwrap()
        except (OSError, TOMLKitError) as e:
            raise TiappConfigError(
                f"Error reading {config_path}: {e}", str(config_path)
            ) from e

        table = document.get("tiapp", {})
        if not isinstance(table, dict):
            raise TiappConfigError(f"[tiapp] must be a table in {config_path}", table)

        strict = table.get("strict")
        if strict is not None:
            if not isinstance(strict, bool):
                raise TiappConfigError(
                    f"'strict' must be a boolean in {config_path}", strict
                )
            settings.strict = strict
        settings.path = config_path
        logger.debug("Loaded settings from %s", config_path)

    env_value = os.environ.get(STRICT_ENV_VAR)
    if env_value:
        settings.strict = _parse_bool(env_value, STRICT_ENV_VAR)

    return settings
