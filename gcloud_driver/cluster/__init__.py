"""Cluster lifecycle management through provider tooling."""

from gcloud_driver.cluster.base import ClusterDriver, CreateResult, CreateStatus
from gcloud_driver.cluster.gcloud import GcloudDriver, JOB_TYPE_PYSPARK
from gcloud_driver.cluster.model import Cluster, ClusterConfig, ClusterStatus, InstanceGroupConfig
from gcloud_driver.cluster.parser import ResponseParser, parse_cluster, parse_clusters

__all__ = [
    "ClusterDriver",
    "CreateResult",
    "CreateStatus",
    "GcloudDriver",
    "JOB_TYPE_PYSPARK",
    "Cluster",
    "ClusterConfig",
    "ClusterStatus",
    "InstanceGroupConfig",
    "ResponseParser",
    "parse_cluster",
    "parse_clusters",
]
