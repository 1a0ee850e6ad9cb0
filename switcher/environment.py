"""Environment configuration management."""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

load_dotenv()

VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_SETTINGS_FILE = ".switcher.json"


class EnvironmentConfig(BaseModel):
    """Settings read from environment variables (and a .env file)."""

    SWITCHER_WORKSPACE: list[Path] = Field(
        default_factory=lambda: [Path.cwd()], description="Workspace roots, first one is primary"
    )
    SWITCHER_SETTINGS_FILE: Optional[Path] = Field(None, description="Path of the settings file")
    SWITCHER_MAX_HOPS: Optional[int] = Field(None, ge=0, description="Upward walk hop budget")
    SWITCHER_DEBUG: bool = Field(False, description="Enable debug logging")
    SWITCHER_LOG_LEVEL: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @field_validator("SWITCHER_LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return value

    @property
    def settings_file(self) -> Path:
        """The settings file, defaulting to .switcher.json in the first workspace root."""
        if self.SWITCHER_SETTINGS_FILE is not None:
            return self.SWITCHER_SETTINGS_FILE
        return self.SWITCHER_WORKSPACE[0] / DEFAULT_SETTINGS_FILE

    @classmethod
    def load(cls) -> "EnvironmentConfig":
        """Load environment configuration from environment variables."""
        env_vars = {
            "SWITCHER_DEBUG": os.getenv("SWITCHER_DEBUG", "false").lower() in ["true", "1", "yes"],
            "SWITCHER_LOG_LEVEL": os.getenv("SWITCHER_LOG_LEVEL", "INFO").upper(),
        }
        workspace = os.getenv("SWITCHER_WORKSPACE")
        roots = [Path(root) for root in (workspace or "").split(os.pathsep) if root]
        if roots:
            env_vars["SWITCHER_WORKSPACE"] = roots
        settings_file = os.getenv("SWITCHER_SETTINGS_FILE")
        if settings_file:
            env_vars["SWITCHER_SETTINGS_FILE"] = Path(settings_file)
        max_hops = os.getenv("SWITCHER_MAX_HOPS")
        if max_hops:
            env_vars["SWITCHER_MAX_HOPS"] = max_hops

        config = cls(**env_vars)
        configure_logging(config.SWITCHER_LOG_LEVEL, config.SWITCHER_DEBUG)
        return config


def configure_logging(log_level: str = "INFO", debug: bool = False) -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    if debug:
        log_level = "DEBUG"
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )


# Global environment configuration instance
_env_config: Optional[EnvironmentConfig] = None


def get_env_config() -> EnvironmentConfig:
    """Get the environment configuration singleton."""
    global _env_config
    if _env_config is None:
        _env_config = EnvironmentConfig.load()
    return _env_config