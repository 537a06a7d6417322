"""
Settings loading.

Settings live in ``nativesql.json`` in the working directory, using camelCase
keys. Command-line flags override values read from the file.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .models import TranslatorSettings

CONFIG_FILENAME = "nativesql.json"


def get_config_file_path(workspace_path: Path) -> Path:
    """Get the default settings file path for a workspace"""
    return workspace_path / CONFIG_FILENAME


def read_settings_file(config_path: Path) -> dict[str, Any]:
    """Read raw settings payload

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Settings file not found: {config_path}")

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(payload, dict):
        raise ValueError(f"Settings in {config_path} must be a JSON object")
    return payload


def load_settings(
    config_path: Path | None = None,
    workspace_path: Path | None = None,
    **overrides: Any,
) -> TranslatorSettings:
    """Load translator settings

    Args:
        config_path: Explicit settings file; must exist when given
        workspace_path: Directory searched for nativesql.json when no explicit
            path is given (default: current directory). A missing file there
            yields default settings.
        **overrides: Field values applied on top of the file; None values are ignored

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If an explicit settings file does not exist
        ValueError: If the settings file is malformed
    """
    if config_path is not None:
        payload = read_settings_file(config_path)
    else:
        default_path = get_config_file_path(workspace_path or Path.cwd())
        payload = read_settings_file(default_path) if default_path.exists() else {}

    try:
        settings = TranslatorSettings.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e

    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return settings
    return settings.model_copy(update=updates)
