"""Dataproc cluster driver backed by the gcloud command-line tool."""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Sequence

from gcloud_driver.cluster.base import ClusterDriver, CreateResult, CreateStatus
from gcloud_driver.cluster.model import Cluster
from gcloud_driver.cluster.parser import ResponseParser
from gcloud_driver.command import build_command, build_filter, create_option, with_options
from gcloud_driver.config.schema import DriverConfig
from gcloud_driver.errors import ConfigurationError, ExecutionFailure, ParseFailure
from gcloud_driver.process import Executor, ProcessRunner

OPTION_REGION = "region"
OPTION_PROJECT = "project"
OPTION_METADATA = "metadata"
OPTION_FILTER = "filter"

FORMAT_JSON = "--format=json"

JOB_TYPE_PYSPARK = "pyspark"
# Job kinds whose main file is a positional argument
FILE_JOB_TYPES = (JOB_TYPE_PYSPARK,)


class GcloudDriver(ClusterDriver):
    """Manage Dataproc clusters by shelling out to gcloud.

    Every operation builds one command, runs it synchronously and returns
    once the process has exited. Nothing is retried.
    """

    def __init__(
        self,
        config: Optional[DriverConfig] = None,
        runner: Optional[ProcessRunner] = None,
        parser: Optional[ResponseParser] = None,
        sink: Optional[Callable[[str], None]] = None,
    ):
        """Initialize gcloud driver.

        Args:
            config: Driver settings (base command, account, dry-run)
            runner: Process runner, replaced in tests
            parser: Response parser
            sink: Receives command lines in dry-run mode (defaults to print)
        """
        self.config = config or DriverConfig()
        self.parser = parser or ResponseParser()
        self.executor = Executor(
            runner=runner,
            dry_run=self.config.dry_run,
            sink=sink,
            verbose=self.config.verbose,
        )

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    def build_command(
        self,
        subcommand: Sequence[str],
        options: Mapping[str, str],
        job_args: Sequence[str] = (),
    ) -> list[str]:
        return build_command(
            self.config.base_command,
            self.config.account,
            subcommand,
            options,
            job_args,
        )

    def create_cluster(
        self,
        name: str,
        region: str,
        options: Optional[Mapping[str, str]] = None,
    ) -> CreateResult:
        create_options = with_options(options, **{OPTION_REGION: region})
        command = self.build_command(
            [FORMAT_JSON, "dataproc", "clusters", "create", name], create_options
        )
        success, output = self.executor.execute_capturing(command)
        if self.dry_run:
            return CreateResult(status=CreateStatus.DRY_RUN)
        if not success:
            return CreateResult(status=CreateStatus.EXECUTION_FAILURE, output=output)
        try:
            cluster = self.parser.parse_one(output)
        except ParseFailure as e:
            return CreateResult(status=CreateStatus.PARSE_FAILURE, output=output, error=e)
        return CreateResult(status=CreateStatus.CREATED, cluster=cluster, output=output)

    def delete_cluster(
        self,
        name: str,
        region: str,
        options: Optional[Mapping[str, str]] = None,
    ) -> bool:
        delete_options = with_options(options, **{OPTION_REGION: region})
        command = self.build_command(
            ["dataproc", "clusters", "delete", name, create_option("async")], delete_options
        )
        return self.executor.execute(command)

    def submit_job(
        self,
        job_type: str,
        file: Optional[str],
        region: str,
        options: Optional[Mapping[str, str]] = None,
        job_args: Optional[Sequence[str]] = None,
    ) -> bool:
        submit_options = with_options(options, **{OPTION_REGION: region})
        subcommand = ["dataproc", "jobs", "submit", job_type]
        if job_type in FILE_JOB_TYPES:
            # The main file is positional for these job kinds
            if not file:
                raise ConfigurationError(f"A main file is required to submit a {job_type} job")
            subcommand.append(file)
        command = self.build_command(subcommand, submit_options, list(job_args or []))
        return self.executor.execute(command)

    def list_clusters(
        self,
        project: str,
        region: str,
        filters: Optional[Mapping[str, Optional[str]]] = None,
    ) -> list[Cluster]:
        options = {OPTION_PROJECT: project, OPTION_REGION: region}
        if filters:
            options[OPTION_FILTER] = build_filter(filters)
        command = self.build_command(["dataproc", "clusters", "list", FORMAT_JSON], options)

        result = self.executor.execute_for_result(command)
        if self.dry_run:
            return []
        if not result.ok:
            raise ExecutionFailure(
                "Failed to list clusters. gcloud call failed.",
                command=command,
                returncode=result.returncode,
                output=result.stdout,
            )
        return self.parser.parse_many(result.stdout)

    def get_master_node(self, project: str, region: str, cluster_name: str) -> Optional[str]:
        options = {OPTION_PROJECT: project, OPTION_REGION: region}
        command = self.build_command(
            [FORMAT_JSON, "dataproc", "clusters", "describe", cluster_name], options
        )

        result = self.executor.execute_for_result(command)
        if self.dry_run:
            return None
        if not result.ok:
            raise ExecutionFailure(
                "Failed to get master node name.",
                command=command,
                returncode=result.returncode,
                output=result.stdout,
            )
        output = result.stdout
        cluster = self.parser.parse_one(output)
        names = cluster.master_instance_names
        if not names:
            raise ParseFailure(f"Cluster {cluster_name!r} lists no master instances", text=output)
        return names[0]

    def update_metadata(
        self,
        node: str,
        options: Optional[Mapping[str, str]],
        key: str,
        value: str,
    ) -> bool:
        metadata_options = with_options(options, **{OPTION_METADATA: f"{key}={value}"})
        command = self.build_command(
            ["compute", "instances", "add-metadata", node], metadata_options
        )
        return self.executor.execute(command)
