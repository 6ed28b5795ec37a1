# Area: Shared
"""
rps_duel._config — Game configuration
=====================================

Loads settings from (lowest to highest precedence):
    1. Built-in defaults
    2. A JSON config file (optional)
    3. A .env file, loaded into the environment with python-dotenv
    4. Environment variables

CLI flags are applied on top by the caller.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger("rps_duel.config")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> config key
ENV_MAPPINGS = {
    "RPS_LOG_LEVEL": "log_level",
    "RPS_LOG_FILE": "log_file",
    "RPS_MOVE_STYLE": "move_style",
    "RPS_STRICT_TURNS": "strict_turns",
}


class GameConfig(BaseModel):
    """
    Validated settings for a game session.

    Attributes:
        log_level: Level name for the package logger
        log_file: JSON-lines log file, or None for terminal only
        move_style: How moves are rendered ("emoji" or "word")
        strict_turns: Drop out-of-turn choices instead of accepting them
    """
    model_config = ConfigDict(extra="ignore")

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    move_style: Literal["emoji", "word"] = "emoji"
    strict_turns: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("log_file")
    @classmethod
    def _blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


def read_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Read a JSON config file.

    A missing path or file yields an empty dict so defaults apply.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    if not config_path:
        return {}

    path = Path(config_path)
    if not path.exists():
        logger.info(f"Config file {path} not found, using defaults")
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(path), [f"invalid JSON: {e}"]) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(str(path), [f"cannot read config: {e}"]) from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), [f"expected a JSON object, got {type(data).__name__}"], data)
    return data


def env_overrides() -> Dict[str, Any]:
    """Collect config values set through environment variables."""
    overrides: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            overrides[config_key] = os.environ[env_key]
    return overrides


def validate_config(raw: Dict[str, Any], source: Optional[str] = None) -> GameConfig:
    """
    Validate a raw config dict.

    Raises:
        ConfigError: If any value is invalid
    """
    try:
        return GameConfig(**raw)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(source, errors, raw) from e


def load_config(
    config_path: Optional[str] = None,
    dotenv_path: Optional[str] = None,
) -> GameConfig:
    """
    Load and validate configuration from file and environment.

    Args:
        config_path: Optional path to a JSON config file
        dotenv_path: Optional .env path (default: search from cwd)

    Returns:
        The validated GameConfig

    Raises:
        ConfigError: If the file or any value is invalid
    """
    # Existing environment variables win over .env entries
    load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

    raw = read_config_file(config_path)
    raw.update(env_overrides())
    return validate_config(raw, source=config_path)
