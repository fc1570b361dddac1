"""
Shared pytest fixtures for gcloud-driver tests.

This module provides:
- FakeRunner: records gcloud argument vectors and returns canned results
- Sample JSON responses in gcloud's lowerCamelCase format
"""

import json
from typing import Optional, Sequence

import pytest

from gcloud_driver.cluster import GcloudDriver
from gcloud_driver.config import DriverConfig
from gcloud_driver.process import ProcessResult, ProcessRunner


class FakeRunner(ProcessRunner):
    """
    Stand-in for SubprocessRunner.

    Usage:
        def test_list(fake_runner):
            fake_runner.respond(stdout="[]")
            driver = GcloudDriver(runner=fake_runner)
            driver.list_clusters("proj", "region")
            assert fake_runner.last_command[0] == "gcloud"
    """

    def __init__(self):
        self.calls: list[tuple[list[str], bool]] = []
        self._result = ProcessResult(returncode=0, stdout="")

    def respond(self, returncode: int = 0, stdout: str = ""):
        self._result = ProcessResult(returncode=returncode, stdout=stdout)

    def run(self, command: Sequence[str], capture_output: bool = False) -> ProcessResult:
        self.calls.append((list(command), capture_output))
        if capture_output:
            return self._result
        return ProcessResult(returncode=self._result.returncode)

    @property
    def last_command(self) -> Optional[list[str]]:
        return self.calls[-1][0] if self.calls else None


def cluster_json(name: str = "test-cluster", instance_names: Optional[list[str]] = None) -> dict:
    """Build a describe-style cluster record."""
    if instance_names is None:
        instance_names = [f"{name}-m"]
    return {
        "clusterName": name,
        "projectId": "test-project",
        "clusterUuid": "5d7a7b21-8d31-4cf6-9e4c-1a6f9d2f0c11",
        "labels": {"env": "test"},
        "status": {"state": "RUNNING", "stateStartTime": "2026-10-01T12:00:00Z"},
        "config": {
            "configBucket": "dataproc-staging-test",
            "masterConfig": {
                "numInstances": len(instance_names),
                "instanceNames": instance_names,
                "machineTypeUri": "n1-standard-4",
            },
            "workerConfig": {
                "numInstances": 2,
                "instanceNames": [f"{name}-w-0", f"{name}-w-1"],
            },
            "softwareConfig": {"imageVersion": "2.1"},
        },
    }


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def driver(fake_runner):
    return GcloudDriver(runner=fake_runner)


@pytest.fixture
def dry_run_output():
    return []


@pytest.fixture
def dry_driver(fake_runner, dry_run_output):
    return GcloudDriver(
        DriverConfig(dry_run=True),
        runner=fake_runner,
        sink=dry_run_output.append,
    )


@pytest.fixture
def cluster_text():
    return json.dumps(cluster_json())
