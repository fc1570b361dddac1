"""Abstract cluster driver interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence

from gcloud_driver.cluster.model import Cluster
from gcloud_driver.errors import ParseFailure


class CreateStatus(str, Enum):
    CREATED = "created"
    EXECUTION_FAILURE = "execution_failure"
    PARSE_FAILURE = "parse_failure"
    DRY_RUN = "dry_run"


@dataclass(frozen=True)
class CreateResult:
    """Outcome of a create-cluster call.

    Keeps a failed invocation apart from a successful one whose output
    could not be parsed.
    """
    status: CreateStatus
    cluster: Optional[Cluster] = None
    output: str = ""
    error: Optional[ParseFailure] = None

    @property
    def ok(self) -> bool:
        return self.status in (CreateStatus.CREATED, CreateStatus.DRY_RUN)

    def get(self) -> Optional[Cluster]:
        """Return the created cluster.

        Returns None when the tool failed or in dry-run mode.

        Raises:
            ParseFailure: If the tool succeeded but its output was unparseable
        """
        if self.status == CreateStatus.PARSE_FAILURE:
            raise self.error
        return self.cluster


class ClusterDriver(ABC):
    """Abstract interface for cluster lifecycle management.

    Implementations delegate to a provider tool:
    - gcloud / Dataproc
    """

    @abstractmethod
    def create_cluster(
        self,
        name: str,
        region: str,
        options: Optional[Mapping[str, str]] = None,
    ) -> CreateResult:
        """Create a cluster.

        Args:
            name: Cluster name
            region: Region to create it in
            options: Extra provider options forwarded as ``--key=value``

        Returns:
            CreateResult tagged with the outcome
        """
        pass

    @abstractmethod
    def delete_cluster(
        self,
        name: str,
        region: str,
        options: Optional[Mapping[str, str]] = None,
    ) -> bool:
        """Delete a cluster without waiting for completion.

        Returns:
            True if the delete request was accepted
        """
        pass

    @abstractmethod
    def submit_job(
        self,
        job_type: str,
        file: Optional[str],
        region: str,
        options: Optional[Mapping[str, str]] = None,
        job_args: Optional[Sequence[str]] = None,
    ) -> bool:
        """Submit a job to a cluster.

        Args:
            job_type: Job kind, e.g. spark, pyspark, hive
            file: Main file, required for file-based job kinds
            region: Region of the cluster
            options: Extra provider options
            job_args: Arguments passed through to the job

        Returns:
            True if the job completed successfully

        Raises:
            ConfigurationError: If the job kind needs a file and none was given
        """
        pass

    @abstractmethod
    def list_clusters(
        self,
        project: str,
        region: str,
        filters: Optional[Mapping[str, Optional[str]]] = None,
    ) -> list[Cluster]:
        """List clusters, optionally restricted by label/status filters.

        Raises:
            ExecutionFailure: If the tool call failed
            ParseFailure: If the response could not be parsed
        """
        pass

    @abstractmethod
    def get_master_node(self, project: str, region: str, cluster_name: str) -> Optional[str]:
        """Look up the name of a cluster's first master instance.

        Raises:
            ExecutionFailure: If the tool call failed
            ParseFailure: If the response could not be parsed or lists no master
        """
        pass

    @abstractmethod
    def update_metadata(
        self,
        node: str,
        options: Optional[Mapping[str, str]],
        key: str,
        value: str,
    ) -> bool:
        """Set a metadata entry on an instance.

        Returns:
            True if the metadata was updated
        """
        pass

    def get_cluster(self, project: str, region: str, name: str) -> Optional[Cluster]:
        """Find a cluster by name among listed clusters.

        Returns:
            Cluster or None if not found
        """
        for cluster in self.list_clusters(project, region):
            if cluster.cluster_name == name:
                return cluster
        return None
