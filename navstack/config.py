# navstack/config.py
# Description: Configuration management for the navstack application.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
CONFIG_PATH_ENV_VAR = "NAVSTACK_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "navstack" / "config.toml"

CONFIG_TOML_CONTENT = """
# Configuration for navstack
[general]
title = "Navigation Stack"
show_breadcrumbs = true

[logging]
# One of TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
log_level = "INFO"
# Leave empty to disable the log file
log_filename = ""
# The TUI owns the terminal, so console logging is off by default
console = false
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)


# --- Merging user tables over the defaults ---
def merge_config_tables(defaults: Dict, overrides: Dict) -> Dict:
    """Overlay a user config table on the defaults; nested tables merge key by key."""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_config_tables(current, value)
        else:
            merged[key] = value
    return merged


def get_config_path() -> Path:
    """Config file location: $NAVSTACK_CONFIG if set, else ~/.config/navstack/config.toml."""
    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


# --- Primary Configuration Loading Logic ---
_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_config(path: Optional[Path] = None, force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads settings from the config file, merged over the built-in defaults.

    A missing file is not an error: the defaults are used as-is. A file that
    cannot be read or parsed is logged and ignored.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload and path is None:
        return _CONFIG_CACHE

    config_path = Path(path) if path is not None else get_config_path()
    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not config_path.exists():
        logger.info(f"Config file not found at {config_path}. Using built-in defaults.")
    else:
        logger.info(f"Loading config from: {config_path}")
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
            loaded_config = merge_config_tables(loaded_config, user_config)
            logger.info(f"Successfully loaded and merged config from {config_path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using built-in defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using built-in defaults.")

    _CONFIG_CACHE = loaded_config
    logger.debug(f"load_config returning config with top-level keys: {list(loaded_config.keys())}")
    return _CONFIG_CACHE


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_config()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def write_default_config(path: Optional[Path] = None) -> Path:
    """
    Writes the default configuration to ``path`` unless a file is already there.

    Returns:
        The path of the config file.
    """
    config_path = Path(path) if path is not None else get_config_path()
    if config_path.exists():
        logger.debug(f"Config file already exists at {config_path}, leaving it alone")
        return config_path
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        toml.dump(DEFAULT_CONFIG_FROM_TOML, f)
    logger.info(f"Created default config file at {config_path}")
    return config_path


def clear_config_cache() -> None:
    global _CONFIG_CACHE
    _CONFIG_CACHE = None

#
# End of config.py
#######################################################################################################################
