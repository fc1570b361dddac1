"""Pydantic models for cluster responses from the external tool."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResponseModel(BaseModel):
    """Base for read-only records parsed from lowerCamelCase JSON."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class InstanceGroupConfig(ResponseModel):
    """Node group (master or workers) of a cluster."""
    num_instances: Optional[int] = Field(default=None, description="Number of instances in the group")
    instance_names: list[str] = Field(default_factory=list, description="Instance names, in order")
    machine_type_uri: Optional[str] = Field(default=None, description="Machine type")
    image_uri: Optional[str] = Field(default=None, description="Boot image")


class ClusterConfig(ResponseModel):
    """Provider-assigned cluster configuration."""
    config_bucket: Optional[str] = Field(default=None, description="Staging bucket")
    master_config: InstanceGroupConfig = Field(description="Master node group")
    worker_config: Optional[InstanceGroupConfig] = Field(default=None, description="Worker node group")


class ClusterStatus(ResponseModel):
    """Current lifecycle state of a cluster."""
    state: Optional[str] = Field(default=None, description="State name, e.g. RUNNING")
    detail: Optional[str] = Field(default=None, description="Human readable detail")
    state_start_time: Optional[str] = Field(default=None, description="When the state was entered")


class Cluster(ResponseModel):
    """Snapshot of a remote cluster."""
    cluster_name: str = Field(description="Cluster name")
    project_id: Optional[str] = Field(default=None, description="Owning project")
    cluster_uuid: Optional[str] = Field(default=None, description="Provider assigned id")
    labels: dict[str, str] = Field(default_factory=dict, description="Cluster labels")
    status: Optional[ClusterStatus] = Field(default=None, description="Current status")
    config: ClusterConfig = Field(description="Cluster configuration")

    @property
    def master_instance_names(self) -> list[str]:
        return self.config.master_config.instance_names
