"""
Helper utilities for the npm launcher.

Provides common functions used across the pipeline:
- Settings loading
- Logging setup
- Opening URLs in the default browser
"""

import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, Any, Optional

import toml
from loguru import logger

from npm_launcher.errors import OpenError

SETTINGS_ENV_VAR = "NPM_LAUNCHER_SETTINGS"


def default_settings() -> Dict[str, Any]:
    """Built-in settings used when no file overrides them."""
    return {
        "registry": {
            "endpoint": "https://api.npms.io/v2/search",
            "timeout": 10.0,
            "encode_query": False,
        },
        "results": {
            "icon_path": "app.png",
        },
        "logging": {
            "level": "WARNING",
        },
    }


def settings_path() -> Path:
    """Settings file location, overridable via $NPM_LAUNCHER_SETTINGS."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).parent.parent / "data" / "settings.toml"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Args:
        path: Settings file; defaults to settings_path()

    Returns:
        Dictionary containing settings with defaults applied

    Example settings.toml:
        [registry]
        endpoint = "https://api.npms.io/v2/search"
        timeout = 5

        [results]
        icon_path = "Images/npm.png"
    """
    defaults = default_settings()
    path = Path(path) if path is not None else settings_path()

    if not path.exists():
        logger.debug(f"Settings file not found at {path}, using defaults")
        return defaults

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return defaults

    merged = _deep_merge(defaults, loaded)
    try:
        _validate_settings(merged)
    except ValueError as e:
        logger.warning(f"Invalid settings in {path}: {e}")
        return defaults

    return merged


def _validate_settings(settings: Dict[str, Any]) -> None:
    """Raise ValueError if a merged setting has the wrong shape."""
    for section in ("registry", "results", "logging"):
        if not isinstance(settings[section], dict):
            raise ValueError(f"[{section}] must be a table")

    registry = settings["registry"]
    if not isinstance(registry["endpoint"], str):
        raise ValueError("registry.endpoint must be a string")
    timeout = registry["timeout"]
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
        raise ValueError("registry.timeout must be a non-negative number")
    if not isinstance(registry["encode_query"], bool):
        raise ValueError("registry.encode_query must be true or false")

    if not isinstance(settings["results"]["icon_path"], str):
        raise ValueError("results.icon_path must be a string")

    level = settings["logging"]["level"]
    if not isinstance(level, str):
        raise ValueError("logging.level must be a string")
    # Raises ValueError for names loguru does not know
    logger.level(level.upper())


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def configure_logging(level: str = "WARNING") -> None:
    """
    Send loguru output to stderr only.

    stdout belongs to the host protocol, so nothing else may write there.
    """
    logger.remove()
    logger.add(sys.stderr, level=str(level).upper())


def _open_command(url: str) -> list:
    if sys.platform.startswith("win"):
        return ["rundll32", "url.dll,FileProtocolHandler", url]
    if sys.platform == "darwin":
        return ["open", url]
    return ["xdg-open", url]


def open_url(url: str) -> None:
    """
    Open URL in the default browser.

    Raises:
        OpenError: The opener is missing or exited non-zero
    """
    cmd = _open_command(url)
    logger.debug(f"Opening {url} via {cmd[0]}")
    try:
        subprocess.run(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except FileNotFoundError as e:
        raise OpenError(f"{cmd[0]} not found, cannot open URL") from e
    except (OSError, subprocess.CalledProcessError) as e:
        raise OpenError(str(e)) from e
