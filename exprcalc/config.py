# config.py

"""
Runtime settings for the calculator.

Settings come from, in increasing priority: model defaults, ``EXPRCALC_*``
environment variables (a ``.env`` file is loaded first when present) and
explicit overrides such as command-line options.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

logger = logging.getLogger(__name__)

ENV_PREFIX = "EXPRCALC_"


class CalculatorSettings(BaseModel):
    """Model for calculator settings."""
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT, description="Maximum expression nesting depth")
    prompt: str = "> "
    exit_commands: List[str] = Field(default_factory=lambda: ["exit", "quit"])
    show_tree: bool = True
    history_file: Optional[str] = None
    log_level: str = "WARNING"

    @field_validator('exit_commands')
    @classmethod
    def exit_commands_must_not_be_blank(cls, v: List[str]) -> List[str]:
        commands = [c.strip() for c in v if c.strip()]
        if not commands:
            raise ValueError('At least one exit command is required')
        return commands

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'Unknown log level: {v}')
        return level


def _from_environment() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in ("max_depth", "prompt", "show_tree", "history_file", "log_level"):
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    raw_commands = os.getenv(ENV_PREFIX + "EXIT_COMMANDS")
    if raw_commands is not None:
        values["exit_commands"] = raw_commands.split(",")
    return values


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> CalculatorSettings:
    """
    Build settings from the environment and ``overrides``.

    Overrides whose value is None are ignored so unset command-line options do
    not mask the environment.

    Raises:
        ConfigError: If any value fails validation.
    """
    # find_dotenv defaults to searching from this module, not the working directory
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))
    values = _from_environment()
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        settings = CalculatorSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
    logger.debug("Loaded settings: %s", settings)
    return settings
