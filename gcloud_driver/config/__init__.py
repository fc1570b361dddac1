"""Configuration system for gcloud-driver."""

from gcloud_driver.config.schema import Config, DriverConfig
from gcloud_driver.config.loader import (
    config_path,
    load_config,
    load_config_or_default,
    load_driver_config,
)

__all__ = [
    "Config",
    "DriverConfig",
    "config_path",
    "load_config",
    "load_config_or_default",
    "load_driver_config",
]
