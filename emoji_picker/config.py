# emoji_picker/config.py
# Description: Configuration management for the emoji picker.
#
# Settings live in $XDG_CONFIG_HOME/emoji-picker/config.toml (or
# ~/.config/emoji-picker/config.toml). The file is created with defaults on
# first run and is never written back afterwards.
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
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError
#
# Local Imports
from .Cache.emoji_cache import APP_DIR_NAME, EMOJI_URL
#
#######################################################################################################################
#
# Functions:

DEFAULT_GRID_COLUMNS = 4
DEFAULT_GRID_ROWS = 3
DEFAULT_MAX_RESULTS = 12

CONFIG_TOML_CONTENT = f"""# Configuration for emoji-picker
[grid]
columns = {DEFAULT_GRID_COLUMNS}
rows = {DEFAULT_GRID_ROWS}
# Emojis per page. Defaults to columns * rows when unset.
# max_results = {DEFAULT_MAX_RESULTS}

[cache]
url = "{EMOJI_URL}"
# Where emojis.json and metadata.json are stored.
# data_dir = "~/.local/share/{APP_DIR_NAME}"
# Seconds to wait for the first download. 0 waits forever.
fetch_timeout = 0

[logging]
level = "INFO"
# file = "~/.local/share/{APP_DIR_NAME}/{APP_DIR_NAME}.log"
rotation = "1 MB"
retention = "7 days"

[theme]
accent = "#FF75B7"
selected_foreground = "#FFFFFF"
error = "#FF0000"
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)


class PickerConfig(BaseModel):
    """Grid geometry. Immutable once the session starts."""
    model_config = ConfigDict(frozen=True)

    grid_columns: int = Field(DEFAULT_GRID_COLUMNS, gt=0)
    grid_rows: int = Field(DEFAULT_GRID_ROWS, gt=0)
    max_results: int = Field(DEFAULT_MAX_RESULTS, gt=0)


def get_config_path() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_DIR_NAME / "config.toml"


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def load_cli_config_and_ensure_existence(force_reload: bool = False, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from the user's config.toml merged over the built-in defaults.

    If the file doesn't exist it is created from CONFIG_TOML_CONTENT. Errors
    while creating or parsing it are logged and the defaults are used.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _CONFIG_CACHE

    path = config_path or get_config_path()
    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)

    if not path.exists():
        logger.info(f"Config file not found at {path}. Creating with default values.")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(CONFIG_TOML_CONTENT, encoding="utf-8")
            logger.info(f"Created default config file at {path}")
        except OSError as e:
            logger.error(f"Could not create default config file {path}: {e}. Using internal defaults.")
    else:
        try:
            with open(path, "rb") as f:
                user_config = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config)
            logger.info(f"Loaded config from {path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {path}: {e}. Using internal defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {path}: {e}. Using internal defaults.")

    _CONFIG_CACHE = loaded_config
    logger.debug(f"Config loaded with sections: {list(loaded_config.keys())}")
    return loaded_config


def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config_and_ensure_existence()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def load_picker_config(config: Optional[Dict[str, Any]] = None) -> PickerConfig:
    """
    Build the validated grid configuration.

    Invalid values (non-positive or non-integer) are logged and the built-in
    defaults are used instead.
    """
    if config is None:
        config = load_cli_config_and_ensure_existence()
    grid = config.get("grid", {}) if isinstance(config.get("grid"), dict) else {}

    columns = grid.get("columns", DEFAULT_GRID_COLUMNS)
    rows = grid.get("rows", DEFAULT_GRID_ROWS)
    max_results = grid.get("max_results")
    if max_results is None and isinstance(columns, int) and isinstance(rows, int):
        max_results = columns * rows

    try:
        return PickerConfig(
            grid_columns=columns,
            grid_rows=rows,
            max_results=max_results if max_results is not None else DEFAULT_MAX_RESULTS,
        )
    except ValidationError as e:
        logger.warning(f"Invalid [grid] settings ({e.error_count()} errors), using defaults: {e}")
        return PickerConfig()


def get_cache_settings(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the keyword arguments for DatasetCache from the [cache] section."""
    if config is None:
        config = load_cli_config_and_ensure_existence()
    cache = config.get("cache", {}) if isinstance(config.get("cache"), dict) else {}

    data_dir = cache.get("data_dir")
    timeout = cache.get("fetch_timeout", 0)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        logger.warning(f"Config key 'fetch_timeout' has invalid value {timeout!r}. Waiting indefinitely.")
        timeout = 0

    return {
        "data_dir": Path(data_dir).expanduser() if data_dir else None,
        "url": cache.get("url") or EMOJI_URL,
        "timeout": timeout if timeout > 0 else None,
    }

#
# End of config.py
#######################################################################################################################
