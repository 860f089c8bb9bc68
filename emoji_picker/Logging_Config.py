"""
Logging configuration for the emoji picker.

The TUI owns the terminal, so loguru's default stderr sink is replaced by a
rotating file sink next to the dataset cache.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from .Cache.emoji_cache import APP_DIR_NAME, get_data_dir
from .config import get_cache_settings

LOG_LEVEL_ENV_VAR = "EMOJI_PICKER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ROTATION = "1 MB"
DEFAULT_RETENTION = "7 days"


def _logging_section(config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    section = (config or {}).get("logging", {})
    if not isinstance(section, dict):
        logger.warning(f"Config section [logging] is not a table ({section!r}), using defaults")
        return {}
    return section


def _is_known_level(level: str) -> bool:
    try:
        logger.level(level)
    except ValueError:
        return False
    return True


def get_log_level(config: Optional[Dict[str, Any]] = None) -> str:
    """Environment beats config, config beats INFO. Unknown level names fall back to INFO."""
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        level = env_level.upper()
    else:
        level = str(_logging_section(config).get("level", DEFAULT_LOG_LEVEL)).upper()
    if not _is_known_level(level):
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def get_log_file(config: Optional[Dict[str, Any]] = None) -> Path:
    log_file = _logging_section(config).get("file")
    if log_file:
        return Path(log_file).expanduser()
    data_dir = get_cache_settings(config or {})["data_dir"]
    return (data_dir or get_data_dir()) / f"{APP_DIR_NAME}.log"


def configure_logging(config: Optional[Dict[str, Any]] = None) -> Path:
    """
    Configure loguru for the application.

    This should be called once at startup, before the Textual app runs.

    Returns:
        The path of the log file sink.
    """
    logging_section = _logging_section(config)
    level = get_log_level(config)
    log_file = get_log_file(config)

    logger.remove()  # Remove default handler
    try:
        logger.add(
            sink=str(log_file),
            level=level,
            rotation=logging_section.get("rotation", DEFAULT_ROTATION),
            retention=logging_section.get("retention", DEFAULT_RETENTION),
            encoding="utf-8",
        )
    except (TypeError, ValueError) as e:
        logger.add(sink=str(log_file), level=level, rotation=DEFAULT_ROTATION,
                   retention=DEFAULT_RETENTION, encoding="utf-8")
        logger.warning(f"Invalid rotation/retention in [logging] ({e}), using defaults")

    logger.info(f"Logging configured: level={level}, file={log_file}")
    return log_file
