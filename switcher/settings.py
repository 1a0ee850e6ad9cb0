"""
Settings File
=============

User-declared folder pairs live in a JSON settings file. Both a plain
``.switcher.json`` and an editor ``settings.json`` using the namespaced
``header-switcher.*`` keys are accepted.
"""

import json
from pathlib import Path
from typing import Any, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from switcher.errors import SettingsError

SETTINGS_NAMESPACE = "header-switcher"


class SwitcherSettings(BaseModel):
    """Validated contents of a settings file."""

    model_config = ConfigDict(extra="ignore")

    folder_pairs: list[list[str]] = Field(default_factory=list)
    max_hops: Optional[int] = Field(None, ge=0)

    @field_validator("folder_pairs")
    @classmethod
    def _check_pairs(cls, pairs: list[list[str]]) -> list[list[str]]:
        for pair in pairs:
            if len(pair) != 2:
                raise ValueError(f"Folder pair must have exactly two folders, got {pair}")
        return pairs

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "SwitcherSettings":
        """Build settings from a mapping, unwrapping namespaced editor keys."""
        prefix = f"{SETTINGS_NAMESPACE}."
        values = {key: value for key, value in data.items() if not key.startswith(prefix)}
        values.update(
            {key[len(prefix):]: value for key, value in data.items() if key.startswith(prefix)}
        )
        return cls(**values)


def load_settings(path: str | Path | None) -> SwitcherSettings:
    """
    Load a settings file.

    Args:
        path: Settings file path, None for defaults

    Returns:
        SwitcherSettings: Defaults when the file does not exist

    Raises:
        SettingsError: If the file is not valid JSON or fails validation
    """
    if path is None:
        return SwitcherSettings()
    path = Path(path)
    if not path.exists():
        logger.debug(f"Settings file not found: {path}, using defaults")
        return SwitcherSettings()

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as error:
        raise SettingsError(f"Invalid JSON in settings file {path}: {error}") from error
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a JSON object")

    try:
        settings = SwitcherSettings.from_mapping(data)
    except ValidationError as error:
        raise SettingsError(f"Invalid settings in {path}: {error}") from error
    logger.debug(f"Loaded {len(settings.folder_pairs)} folder pair(s) from {path}")
    return settings
