"""Command-line interface for gcloud-driver."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Union

import tyro

from gcloud_driver.cluster import GcloudDriver
from gcloud_driver.config import load_driver_config
from gcloud_driver.errors import ConfigurationError, DriverError


@dataclass
class CreateArgs:
    """Create a cluster and print its master instances."""
    name: str
    """Cluster name"""
    region: Optional[str] = None
    """Region (defaults to driver.default_region)"""
    options: tuple[str, ...] = ()
    """Extra gcloud options as 'key=value' or bare 'key'"""
    config: str = "gcloud-driver.yaml"
    """Path to config file"""
    dry_run: bool = False
    """Print the gcloud command instead of running it"""


@dataclass
class DeleteArgs:
    """Delete a cluster without waiting for completion."""
    name: str
    """Cluster name"""
    region: Optional[str] = None
    """Region (defaults to driver.default_region)"""
    options: tuple[str, ...] = ()
    """Extra gcloud options as 'key=value' or bare 'key'"""
    config: str = "gcloud-driver.yaml"
    """Path to config file"""
    dry_run: bool = False
    """Print the gcloud command instead of running it"""


@dataclass
class SubmitArgs:
    """Submit a job to a cluster."""
    job_type: str
    """Job kind: spark, pyspark, hadoop, hive, ..."""
    file: Optional[str] = None
    """Main file (required for pyspark)"""
    region: Optional[str] = None
    """Region (defaults to driver.default_region)"""
    options: tuple[str, ...] = ()
    """Extra gcloud options as 'key=value' or bare 'key'"""
    job_args: tuple[str, ...] = ()
    """Arguments passed through to the job"""
    config: str = "gcloud-driver.yaml"
    """Path to config file"""
    dry_run: bool = False
    """Print the gcloud command instead of running it"""


@dataclass
class ListArgs:
    """List clusters."""
    project: Optional[str] = None
    """Project (defaults to driver.default_project)"""
    region: Optional[str] = None
    """Region (defaults to driver.default_region)"""
    filters: tuple[str, ...] = ()
    """Filters as 'key=value'; a bare 'key' matches any value"""
    config: str = "gcloud-driver.yaml"
    """Path to config file"""
    dry_run: bool = False
    """Print the gcloud command instead of running it"""


@dataclass
class MasterArgs:
    """Print the master node of a cluster."""
    cluster: str
    """Cluster name"""
    project: Optional[str] = None
    """Project (defaults to driver.default_project)"""
    region: Optional[str] = None
    """Region (defaults to driver.default_region)"""
    config: str = "gcloud-driver.yaml"
    """Path to config file"""
    dry_run: bool = False
    """Print the gcloud command instead of running it"""


@dataclass
class UpdateMetadataArgs:
    """Set a metadata entry on an instance."""
    node: str
    """Instance name"""
    key: str
    """Metadata key"""
    value: str
    """Metadata value"""
    options: tuple[str, ...] = ()
    """Extra gcloud options as 'key=value' or bare 'key', e.g. zone=europe-west1-b"""
    config: str = "gcloud-driver.yaml"
    """Path to config file"""
    dry_run: bool = False
    """Print the gcloud command instead of running it"""


Args = Union[CreateArgs, DeleteArgs, SubmitArgs, ListArgs, MasterArgs, UpdateMetadataArgs]


def parse_options(specs: tuple[str, ...]) -> dict[str, str]:
    """Parse 'key=value' specs into an option map.

    Only the first '=' splits, so 'metadata=a=b' keeps 'a=b' as the value.
    A spec without '=' maps to an empty value.
    """
    options = {}
    for spec in specs:
        key, _, value = spec.partition("=")
        key = key.strip()
        if not key:
            raise ConfigurationError(f"Invalid option spec: {spec!r}")
        options[key] = value
    return options


def make_driver(args: Args) -> GcloudDriver:
    """Build a driver from the config file, applying --dry-run."""
    # --dry-run can only switch dry-run on, never off
    config = load_driver_config(args.config, dry_run=True if args.dry_run else None)
    return GcloudDriver(config)


def resolve(value: Optional[str], default: Optional[str], name: str) -> str:
    """Pick an explicit value or the configured default."""
    if value:
        return value
    if default:
        return default
    raise ConfigurationError(f"No {name} given and no default_{name} configured")


def cmd_create(args: CreateArgs) -> int:
    """Execute create command."""
    driver = make_driver(args)
    region = resolve(args.region, driver.config.default_region, "region")

    result = driver.create_cluster(args.name, region, parse_options(args.options))
    cluster = result.get()
    if cluster is not None:
        print(f"[INFO] Created {cluster.cluster_name}")
        for name in cluster.master_instance_names:
            print(f"  master: {name}")
    elif not result.ok:
        print(f"[ERROR] Failed to create cluster {args.name}")
        if result.output:
            print(result.output)
    return 0 if result.ok else 1


def cmd_delete(args: DeleteArgs) -> int:
    """Execute delete command."""
    driver = make_driver(args)
    region = resolve(args.region, driver.config.default_region, "region")

    if driver.delete_cluster(args.name, region, parse_options(args.options)):
        return 0
    print(f"[ERROR] Failed to delete cluster {args.name}")
    return 1


def cmd_submit(args: SubmitArgs) -> int:
    """Execute submit command."""
    driver = make_driver(args)
    region = resolve(args.region, driver.config.default_region, "region")

    ok = driver.submit_job(
        args.job_type,
        args.file,
        region,
        parse_options(args.options),
        list(args.job_args),
    )
    if not ok:
        print(f"[ERROR] {args.job_type} job failed")
    return 0 if ok else 1


def cmd_list(args: ListArgs) -> int:
    """Execute list command."""
    driver = make_driver(args)
    project = resolve(args.project, driver.config.default_project, "project")
    region = resolve(args.region, driver.config.default_region, "region")

    clusters = driver.list_clusters(project, region, parse_options(args.filters))
    if driver.dry_run:
        return 0

    print("Clusters:")
    print("-" * 60)
    if not clusters:
        print("  No clusters found")
    for cluster in clusters:
        state = cluster.status.state if cluster.status else "?"
        print(f"  {cluster.cluster_name}: {state}")
    return 0


def cmd_master(args: MasterArgs) -> int:
    """Execute master command."""
    driver = make_driver(args)
    project = resolve(args.project, driver.config.default_project, "project")
    region = resolve(args.region, driver.config.default_region, "region")

    node = driver.get_master_node(project, region, args.cluster)
    if node is not None:
        print(node)
    return 0


def cmd_update_metadata(args: UpdateMetadataArgs) -> int:
    """Execute update-metadata command."""
    driver = make_driver(args)

    if driver.update_metadata(args.node, parse_options(args.options), args.key, args.value):
        return 0
    print(f"[ERROR] Failed to update metadata on {args.node}")
    return 1


COMMANDS = {
    "create": (CreateArgs, cmd_create),
    "delete": (DeleteArgs, cmd_delete),
    "submit": (SubmitArgs, cmd_submit),
    "list": (ListArgs, cmd_list),
    "master": (MasterArgs, cmd_master),
    "update-metadata": (UpdateMetadataArgs, cmd_update_metadata),
}


def run(args: Args) -> int:
    """Dispatch parsed arguments to their command."""
    for args_type, handler in COMMANDS.values():
        if isinstance(args, args_type):
            try:
                return handler(args)
            except DriverError as e:
                print(f"[ERROR] {e}", file=sys.stderr)
                return 1
    raise TypeError(f"Unknown command arguments: {args!r}")


def main(argv: Optional[list[str]] = None):
    """Main entry point for gcloud-driver CLI."""
    args = tyro.extras.subcommand_cli_from_dict(
        {name: args_type for name, (args_type, _) in COMMANDS.items()},
        description="Manage Dataproc clusters through gcloud",
        args=argv,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
