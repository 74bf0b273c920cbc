"""Configuration loader for transguard.

This module loads the YAML settings that control the fragment review stage.
"""

from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from transguard.core.exceptions import ConfigError
from transguard.core.models import ReviewSettings


# ============================================================================
# Configuration Paths
# ============================================================================

def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to configs directory (./configs relative to project root)
    """
    # core/ -> transguard/ -> src/ -> root
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / "configs"


# ============================================================================
# Review Settings Loader
# ============================================================================

def load_review_settings(config_file: Path | str | None = None) -> ReviewSettings:
    """Load review settings from a YAML file.

    Args:
        config_file: Path to settings YAML. If None, loads configs/review.yaml
            and falls back to defaults when that file does not exist

    Returns:
        ReviewSettings with values from the file applied over the defaults

    Raises:
        ConfigError: If an explicit file is missing, YAML parsing fails, or
            a setting is unknown or has the wrong type
    """
    if config_file is None:
        config_path = get_config_dir() / "review.yaml"
        if not config_path.exists():
            return ReviewSettings()
    else:
        config_path = Path(config_file)

    if not config_path.exists():
        raise ConfigError(f"Settings file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse settings YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings file: {e}") from e

    if not data:
        return ReviewSettings()

    if not isinstance(data, dict) or "review" not in data:
        raise ConfigError("Missing 'review' section in settings file")

    return parse_review_settings(data["review"] or {})


def parse_review_settings(review_data: dict[str, Any]) -> ReviewSettings:
    """Build ReviewSettings from the contents of a 'review' section.

    Args:
        review_data: Mapping of setting names to values

    Returns:
        Validated ReviewSettings

    Raises:
        ConfigError: If a key is unknown or a value has the wrong type
    """
    if not isinstance(review_data, dict):
        raise ConfigError("'review' section must be a mapping")

    known = {f.name: f for f in fields(ReviewSettings)}

    for key, value in review_data.items():
        if key not in known:
            available = ", ".join(known)
            raise ConfigError(f"Unknown review setting '{key}'. Available settings: {available}")

        expected = type(known[key].default)
        # bool is a subclass of int, so reject it explicitly for int fields
        if expected is int and isinstance(value, bool):
            raise ConfigError(f"'{key}' must be an integer")
        if not isinstance(value, expected):
            raise ConfigError(f"'{key}' must be of type {expected.__name__}")

    settings = ReviewSettings(**review_data)

    if settings.max_fragment_length < 0:
        raise ConfigError("'max_fragment_length' must not be negative")

    return settings
