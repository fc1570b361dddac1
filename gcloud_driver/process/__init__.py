"""Process execution for external cluster tooling."""

from gcloud_driver.process.base import SUCCESS, ProcessResult, ProcessRunner
from gcloud_driver.process.local import SubprocessRunner
from gcloud_driver.process.executor import Executor

__all__ = [
    "SUCCESS",
    "ProcessResult",
    "ProcessRunner",
    "SubprocessRunner",
    "Executor",
]
