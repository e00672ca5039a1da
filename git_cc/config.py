"""Configuration loading for git-cc.

Settings are read from ~/.git-cc/config.yaml when present and may be
overridden by environment variables:
- GIT_CC_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ...)
- GIT_CC_LOG_FILE: Write logs to this file instead of stderr

git-cc only ever reads this file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from git_cc.flow.models import DEFAULT_MESSAGE_CHAR_LIMIT, DEFAULT_SCOPE_CHAR_LIMIT

LOG_LEVEL_ENV_VAR = "GIT_CC_LOG_LEVEL"
LOG_FILE_ENV_VAR = "GIT_CC_LOG_FILE"

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_CONFIG_DIR = Path.home() / ".git-cc"


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""
    pass


class WizardConfig(BaseModel):
    """Settings for a git-cc session."""

    scope_char_limit: int = DEFAULT_SCOPE_CHAR_LIMIT
    message_char_limit: int = DEFAULT_MESSAGE_CHAR_LIMIT
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @field_validator("scope_char_limit", "message_char_limit")
    @classmethod
    def ensure_positive(cls, v):
        """Character limits must allow at least one character."""
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        level = str(v).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v):
        """Expand a leading ~ in the log file path."""
        if v is None:
            return v
        return v.expanduser()


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.git-cc/config.yaml
    """
    return _CONFIG_DIR / "config.yaml"


def get_default_log_file() -> Path:
    """Get the log file used for debug logging when none is configured.

    Returns:
        Path to ~/.git-cc/git-cc.log
    """
    return _CONFIG_DIR / "git-cc.log"


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return data


def load_config(config_file: Optional[Path] = None) -> WizardConfig:
    """Load settings from the config file and environment.

    Args:
        config_file: Config file to read. Defaults to ~/.git-cc/config.yaml.

    Returns:
        The validated configuration. Defaults are used for anything unset.

    Raises:
        ConfigError: If the file is unreadable or holds invalid values.
    """
    config_file = config_file or get_config_file_path()
    data = _read_config_file(config_file)

    if os.environ.get(LOG_LEVEL_ENV_VAR):
        data["log_level"] = os.environ[LOG_LEVEL_ENV_VAR]
    if os.environ.get(LOG_FILE_ENV_VAR):
        data["log_file"] = os.environ[LOG_FILE_ENV_VAR]

    try:
        return WizardConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}")
