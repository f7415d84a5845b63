# Area: Shared
"""
number_guess.config — Game settings
====================================

Settings are layered, later sources winning:
    1. Defaults on GameSettings
    2. JSON config file (--config)
    3. .env file and environment variables (NUMBER_GUESS_*)
    4. Explicit overrides (CLI flags)

Example config.json:
    {
        "player_name": "Alice",
        "max_attempts": 5,
        "non_numeric_policy": "strict",
        "seed": 42
    }
"""

from __future__ import annotations
import json
import logging
import os
import random
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .guess_loop import NonNumericPolicy

logger = logging.getLogger("number_guess.config")

DEFAULT_PLAYER_NAME = "Player"

# Environment variable -> settings key
ENV_MAPPINGS = {
    "NUMBER_GUESS_PLAYER": "player_name",
    "NUMBER_GUESS_MAX_ATTEMPTS": "max_attempts",
    "NUMBER_GUESS_POLICY": "non_numeric_policy",
    "NUMBER_GUESS_SEED": "seed",
    "NUMBER_GUESS_LOG_FILE": "log_file",
    "NUMBER_GUESS_LOG_LEVEL": "log_level",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class GameSettings(BaseModel):
    """Validated settings for one game session."""

    player_name: str = Field(default=DEFAULT_PLAYER_NAME, min_length=1)
    max_attempts: Optional[int] = Field(default=None, ge=1)
    non_numeric_policy: NonNumericPolicy = NonNumericPolicy.REPROMPT
    seed: Optional[int] = None
    log_file: str = "number_guess.log"
    log_level: str = "WARNING"

    @field_validator("player_name")
    @classmethod
    def strip_player_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("player_name must not be blank")
        return value

    @field_validator("non_numeric_policy", mode="before")
    @classmethod
    def lower_policy(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return value

    def make_rng(self) -> Optional[random.Random]:
        """Dedicated random source when a seed is set, else None."""
        if self.seed is None:
            return None
        return random.Random(self.seed)


def read_config_file(config_path: str) -> Dict[str, Any]:
    """Load a JSON config file into a dict."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file is not valid JSON: {config_path}", [str(e)]) from e
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file must contain a JSON object: {config_path}",
            [f"Expected object, got {type(data).__name__}"],
        )
    return data


def read_environment(env_file: Optional[str] = ".env") -> Dict[str, Any]:
    """Collect NUMBER_GUESS_* variables, loading ``env_file`` first if present."""
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    values: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            values[config_key] = os.environ[env_key]
    return values


def load_settings(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    env_file: Optional[str] = ".env",
) -> GameSettings:
    """
    Build GameSettings from all configuration sources.

    Parameters
    ----------
    config_path : str, optional
        Path to a JSON config file.
    overrides : dict, optional
        Highest-priority values; None entries are ignored.
    env_file : str, optional
        .env file to load. None skips it.

    Raises
    ------
    ConfigurationError
        If the file is missing or malformed, or a value is invalid.
    """
    values: Dict[str, Any] = {}
    if config_path:
        values.update(read_config_file(config_path))
    values.update(read_environment(env_file))
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        settings = GameSettings(**values)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError("Invalid game settings", errors) from e

    logger.debug(f"Settings loaded: {settings.model_dump()}")
    return settings
