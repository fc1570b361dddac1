"""Tests for the gcloud cluster driver."""

import json

import pytest

from gcloud_driver.cluster import CreateStatus, GcloudDriver
from gcloud_driver.config import DriverConfig
from gcloud_driver.errors import ConfigurationError, ExecutionFailure, ParseFailure

from conftest import cluster_json


def region_tokens(command):
    return [token for token in command if token.startswith("--region")]


# =============================================================================
# create
# =============================================================================

def test_create_cluster(driver, fake_runner, cluster_text):
    fake_runner.respond(stdout=cluster_text)

    result = driver.create_cluster("test-cluster", "europe-west1", {"num-workers": "2"})

    assert result.status == CreateStatus.CREATED
    assert result.ok
    assert result.get().cluster_name == "test-cluster"
    command, captured = fake_runner.calls[0]
    assert captured is True
    assert command == [
        "gcloud", "--format=json", "dataproc", "clusters", "create", "test-cluster",
        "--quiet", "--num-workers=2", "--region=europe-west1",
    ]


def test_create_cluster_execution_failure(driver, fake_runner):
    fake_runner.respond(returncode=1, stdout="")

    result = driver.create_cluster("test-cluster", "europe-west1")

    assert result.status == CreateStatus.EXECUTION_FAILURE
    assert not result.ok
    assert result.get() is None


def test_create_cluster_parse_failure(driver, fake_runner):
    fake_runner.respond(stdout="Waiting on operation...")

    result = driver.create_cluster("test-cluster", "europe-west1")

    assert result.status == CreateStatus.PARSE_FAILURE
    assert result.output == "Waiting on operation..."
    with pytest.raises(ParseFailure):
        result.get()


def test_create_cluster_undecodable_output(driver, fake_runner):
    fake_runner.respond(stdout="{\ufffd\ufffd}")
    result = driver.create_cluster("test-cluster", "europe-west1")
    assert result.status == CreateStatus.PARSE_FAILURE


def test_create_cluster_region_overrides_caller(driver, fake_runner, cluster_text):
    fake_runner.respond(stdout=cluster_text)
    options = {"region": "us-central1"}

    driver.create_cluster("test-cluster", "europe-west1", options)

    assert region_tokens(fake_runner.last_command) == ["--region=europe-west1"]
    assert options == {"region": "us-central1"}


def test_create_cluster_with_account(fake_runner, cluster_text):
    fake_runner.respond(stdout=cluster_text)
    driver = GcloudDriver(DriverConfig(account="svc@example.com"), runner=fake_runner)

    driver.create_cluster("test-cluster", "europe-west1")

    assert fake_runner.last_command[:4] == ["gcloud", "--account", "svc@example.com", "--format=json"]


def test_create_cluster_custom_base_command(fake_runner, cluster_text):
    fake_runner.respond(stdout=cluster_text)
    driver = GcloudDriver(DriverConfig(base_command="/opt/google/bin/gcloud"), runner=fake_runner)

    driver.create_cluster("test-cluster", "europe-west1")

    assert fake_runner.last_command[0] == "/opt/google/bin/gcloud"


# =============================================================================
# delete
# =============================================================================

def test_delete_cluster(driver, fake_runner):
    assert driver.delete_cluster("test-cluster", "europe-west1", {"region": "x"}) is True

    command, captured = fake_runner.calls[0]
    assert captured is False
    assert command == [
        "gcloud", "dataproc", "clusters", "delete", "test-cluster", "--async",
        "--quiet", "--region=europe-west1",
    ]


def test_delete_cluster_failure(driver, fake_runner):
    fake_runner.respond(returncode=1)
    assert driver.delete_cluster("test-cluster", "europe-west1") is False
    assert "--async" in fake_runner.last_command


# =============================================================================
# submit
# =============================================================================

def test_submit_pyspark_job(driver, fake_runner):
    ok = driver.submit_job(
        "pyspark",
        "gs://bucket/main.py",
        "europe-west1",
        {"cluster": "test-cluster"},
        ["--date", "2026-10-18"],
    )

    assert ok is True
    assert fake_runner.last_command == [
        "gcloud", "dataproc", "jobs", "submit", "pyspark", "gs://bucket/main.py",
        "--quiet", "--cluster=test-cluster", "--region=europe-west1",
        "--", "--date", "2026-10-18",
    ]


def test_submit_pyspark_without_file(driver, fake_runner):
    with pytest.raises(ConfigurationError):
        driver.submit_job("pyspark", None, "europe-west1", {"cluster": "c"})
    assert fake_runner.calls == []


def test_submit_pyspark_without_file_in_dry_run(dry_driver, fake_runner, dry_run_output):
    with pytest.raises(ConfigurationError):
        dry_driver.submit_job("pyspark", "", "europe-west1")
    assert fake_runner.calls == []
    assert dry_run_output == []


def test_submit_other_job_ignores_file(driver, fake_runner):
    driver.submit_job("spark", "gs://bucket/ignored.jar", "europe-west1", {"class": "Main"})

    command = fake_runner.last_command
    assert "gs://bucket/ignored.jar" not in command
    assert command[:5] == ["gcloud", "dataproc", "jobs", "submit", "spark"]
    assert command[5] == "--quiet"
    assert "--" not in command


def test_submit_job_region_overrides_caller(driver, fake_runner):
    driver.submit_job("spark", None, "europe-west1", {"region": "x", "cluster": "c"})
    assert region_tokens(fake_runner.last_command) == ["--region=europe-west1"]


def test_submit_job_failure(driver, fake_runner):
    fake_runner.respond(returncode=1)
    assert driver.submit_job("hive", None, "europe-west1") is False


# =============================================================================
# list
# =============================================================================

def test_list_clusters(driver, fake_runner):
    fake_runner.respond(stdout=json.dumps([cluster_json("a"), cluster_json("b")]))

    clusters = driver.list_clusters("test-project", "europe-west1")

    assert [c.cluster_name for c in clusters] == ["a", "b"]
    command, captured = fake_runner.calls[0]
    assert captured is True
    assert command == [
        "gcloud", "dataproc", "clusters", "list", "--format=json",
        "--quiet", "--project=test-project", "--region=europe-west1",
    ]


def test_list_clusters_wildcard_filter(driver, fake_runner):
    fake_runner.respond(stdout="[]")
    driver.list_clusters("p", "r", {"status": ""})
    assert fake_runner.last_command[-1] == "--filter=status = *"


def test_list_clusters_filter_order(driver, fake_runner):
    fake_runner.respond(stdout="[]")
    driver.list_clusters("p", "r", {"status": "ACTIVE", "label.x": "1"})
    assert fake_runner.last_command[-1] == "--filter=status = ACTIVE AND label.x = 1"


def test_list_clusters_no_filter_when_empty(driver, fake_runner):
    fake_runner.respond(stdout="[]")
    driver.list_clusters("p", "r", {})
    assert not any(token.startswith("--filter") for token in fake_runner.last_command)


def test_list_clusters_execution_failure(driver, fake_runner):
    fake_runner.respond(returncode=7, stdout="")
    with pytest.raises(ExecutionFailure) as excinfo:
        driver.list_clusters("p", "r")
    assert excinfo.value.command == fake_runner.last_command
    assert excinfo.value.returncode == 7
    assert isinstance(excinfo.value, IOError)


def test_list_clusters_parse_failure(driver, fake_runner):
    fake_runner.respond(stdout="{}")
    with pytest.raises(ParseFailure):
        driver.list_clusters("p", "r")


def test_get_cluster(driver, fake_runner):
    fake_runner.respond(stdout=json.dumps([cluster_json("a"), cluster_json("b")]))
    assert driver.get_cluster("p", "r", "b").cluster_name == "b"
    assert driver.get_cluster("p", "r", "c") is None


# =============================================================================
# master node
# =============================================================================

def test_get_master_node(driver, fake_runner):
    fake_runner.respond(stdout=json.dumps(cluster_json("c", ["inst-0"])))

    assert driver.get_master_node("test-project", "europe-west1", "c") == "inst-0"
    assert fake_runner.last_command == [
        "gcloud", "--format=json", "dataproc", "clusters", "describe", "c",
        "--quiet", "--project=test-project", "--region=europe-west1",
    ]


def test_get_master_node_first_of_many(driver, fake_runner):
    fake_runner.respond(stdout=json.dumps(cluster_json("c", ["c-m-0", "c-m-1", "c-m-2"])))
    assert driver.get_master_node("p", "r", "c") == "c-m-0"


def test_get_master_node_execution_failure(driver, fake_runner):
    fake_runner.respond(returncode=2, stdout="ERROR: (gcloud.dataproc.clusters.describe) NOT_FOUND")
    with pytest.raises(ExecutionFailure) as excinfo:
        driver.get_master_node("p", "r", "c")
    assert excinfo.value.returncode == 2
    assert "NOT_FOUND" in excinfo.value.output


def test_get_master_node_without_instances(driver, fake_runner):
    fake_runner.respond(stdout=json.dumps(cluster_json("c", [])))
    with pytest.raises(ParseFailure):
        driver.get_master_node("p", "r", "c")


# =============================================================================
# metadata
# =============================================================================

def test_update_metadata(driver, fake_runner):
    ok = driver.update_metadata("c-m", {"zone": "europe-west1-b"}, "heartbeat", "1760000000")

    assert ok is True
    assert fake_runner.last_command == [
        "gcloud", "compute", "instances", "add-metadata", "c-m",
        "--quiet", "--zone=europe-west1-b", "--metadata=heartbeat=1760000000",
    ]


def test_update_metadata_overrides_caller_metadata(driver, fake_runner):
    driver.update_metadata("c-m", {"metadata": "old=1"}, "k", "v")
    metadata = [t for t in fake_runner.last_command if t.startswith("--metadata")]
    assert metadata == ["--metadata=k=v"]


# =============================================================================
# dry-run
# =============================================================================

def test_dry_run_spawns_nothing(dry_driver, fake_runner, dry_run_output):
    fake_runner.respond(returncode=1)

    assert dry_driver.create_cluster("c", "r").status == CreateStatus.DRY_RUN
    assert dry_driver.create_cluster("c", "r").get() is None
    assert dry_driver.delete_cluster("c", "r") is True
    assert dry_driver.submit_job("pyspark", "main.py", "r", job_args=["a"]) is True
    assert dry_driver.list_clusters("p", "r") == []
    assert dry_driver.get_master_node("p", "r", "c") is None
    assert dry_driver.update_metadata("c-m", {}, "k", "v") is True

    assert fake_runner.calls == []
    assert len(dry_run_output) == 7


def test_dry_run_prints_command_line(dry_driver, dry_run_output):
    dry_driver.delete_cluster("c", "europe-west1")
    assert dry_run_output == [
        "gcloud dataproc clusters delete c --async --quiet --region=europe-west1"
    ]


def test_dry_run_is_fixed_at_construction(fake_runner):
    config = DriverConfig(dry_run=True)
    driver = GcloudDriver(config, runner=fake_runner, sink=lambda line: None)
    assert driver.dry_run is True
    with pytest.raises(Exception):
        config.dry_run = False
