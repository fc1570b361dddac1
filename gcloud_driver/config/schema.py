"""Pydantic configuration schemas for gcloud-driver."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class DriverConfig(BaseModel):
    """Settings for invoking the external cluster tool.

    Frozen: a driver keeps the config it was built with, so the dry-run
    switch cannot change under in-flight operations.
    """
    model_config = ConfigDict(frozen=True)

    base_command: str = Field(default="gcloud", description="Executable to invoke")
    account: Optional[str] = Field(default=None, description="Account to run commands as")
    dry_run: bool = Field(default=False, description="Print commands instead of running them")
    verbose: bool = Field(default=False, description="Echo commands to stderr before running")
    default_region: Optional[str] = Field(default=None, description="Region used when none is given")
    default_project: Optional[str] = Field(default=None, description="Project used when none is given")


class Config(BaseModel):
    """Root configuration for gcloud-driver."""
    version: str = Field(default="1.0", description="Config schema version")
    driver: DriverConfig = Field(default_factory=DriverConfig, description="Driver configuration")
