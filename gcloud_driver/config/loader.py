"""YAML configuration loader."""

import os
from pathlib import Path
from typing import Optional, Union

import yaml

from gcloud_driver.config.schema import Config, DriverConfig

CONFIG_ENV_VAR = "GCLOUD_DRIVER_CONFIG"
DEFAULT_CONFIG_PATH = "gcloud-driver.yaml"

PathLike = Union[str, Path]


def config_path(path: Optional[PathLike] = None) -> Path:
    """Resolve the config file location.

    An explicit path wins, then $GCLOUD_DRIVER_CONFIG, then ./gcloud-driver.yaml.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    return Path(path)


def load_config(path: Optional[PathLike] = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file (see config_path for the fallbacks)

    Returns:
        Parsed Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        pydantic.ValidationError: If config doesn't match schema
    """
    path = config_path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        # An empty file is a valid config with all defaults
        data = yaml.safe_load(f) or {}

    return Config.model_validate(data)


def load_config_or_default(path: Optional[PathLike] = None) -> Config:
    """Load configuration, returning defaults if file doesn't exist."""
    try:
        return load_config(path)
    except FileNotFoundError:
        return Config()


def load_driver_config(
    path: Optional[PathLike] = None,
    dry_run: Optional[bool] = None,
    required: bool = False,
) -> DriverConfig:
    """Load the driver section, applying a command-line dry-run override.

    Args:
        path: Path to config file (see config_path for the fallbacks)
        dry_run: Overrides driver.dry_run when not None
        required: Raise instead of falling back to defaults when the file is missing

    Returns:
        DriverConfig ready to build a GcloudDriver from

    Raises:
        FileNotFoundError: If required and the config file doesn't exist
    """
    config = load_config(path) if required else load_config_or_default(path)
    driver = config.driver
    if dry_run is not None and dry_run != driver.dry_run:
        driver = driver.model_copy(update={"dry_run": dry_run})
    return driver
