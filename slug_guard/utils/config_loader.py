"""Loads the slug-guard YAML configuration."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from slug_guard.models.config import GuardConfig
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


def load_guard_config(file_path: Path | str = "config/slug-guard.yaml") -> GuardConfig:
    """
    Load slug-guard configuration.

    An empty file means all defaults. Calendar type tags missing from the file
    are filled from ``EM_POST_TYPE_EVENT`` / ``EM_POST_TYPE_LOCATION``.

    Args:
        file_path: Path to slug-guard.yaml

    Returns:
        GuardConfig with environment overrides applied

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML is malformed
        ValidationError: If a section doesn't match its model
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        raw_config = yaml.safe_load(path.read_text()) or {}
        config = GuardConfig.model_validate(raw_config).with_env_overrides()
    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise
    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise

    types = config.managed_types
    logger.info(
        "Configuration loaded",
        path=str(path),
        event_type=types.event_type,
        location_type=types.location_type,
        include_generic_types=types.include_generic_types,
    )
    return config
