"""Loads and validates the sync configuration file."""

from pathlib import Path

import structlog
from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from github_template_sync.configuration.exceptions import ConfigError
from github_template_sync.schemas.sync_config import SyncConfig
from github_template_sync.utils.yaml import load_yaml_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_sync_config(path: Path) -> SyncConfig:
    """Load the sync configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        The validated, read-only sync configuration.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does not match the schema.
    """
    try:
        data = load_yaml_file(path)
    except OSError as exc:
        logger.error("Failed to read configuration file", path=str(path), error=str(exc))
        raise ConfigError(f"Unable to read configuration file: {exc}", path=path) from exc
    except (YAMLError, UnicodeDecodeError) as exc:
        logger.error("Failed to parse configuration file", path=str(path), error=str(exc))
        raise ConfigError(f"Configuration file is not valid YAML: {exc}", path=path) from exc

    if not isinstance(data, dict):
        logger.error("Configuration file is not a mapping", path=str(path), actual_type=type(data).__name__)
        raise ConfigError("Configuration file must contain a mapping of options", path=path)

    try:
        config = SyncConfig.model_validate(data)
    except ValidationError as exc:
        logger.error("Configuration file failed validation", path=str(path), errors=exc.errors())
        raise ConfigError(f"Invalid configuration: {exc}", path=path, errors=exc.errors()) from exc

    logger.info(
        "Loaded sync configuration",
        path=str(path),
        org=config.org,
        files_dir=config.files_dir,
        repo_count=len(config.repos),
    )
    return config
