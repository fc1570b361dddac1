"""
gcloud-driver - cluster lifecycle management through the gcloud CLI.

This package provides:
- Command assembly for gcloud invocations
- Subprocess execution with a dry-run mode
- Typed parsing of JSON cluster responses
- A driver for creating, listing, describing and deleting clusters,
  submitting jobs and updating instance metadata
"""

from gcloud_driver.config import load_config, Config, DriverConfig
from gcloud_driver.cluster import Cluster, CreateResult, CreateStatus, GcloudDriver
from gcloud_driver.errors import (
    ConfigurationError,
    DriverError,
    ExecutionFailure,
    ParseFailure,
    ProcessSpawnFailure,
)

__version__ = "0.1.0"

__all__ = [
    "load_config",
    "Config",
    "DriverConfig",
    "Cluster",
    "CreateResult",
    "CreateStatus",
    "GcloudDriver",
    "ConfigurationError",
    "DriverError",
    "ExecutionFailure",
    "ParseFailure",
    "ProcessSpawnFailure",
    "__version__",
]
