"""Configuration management for hyperprov."""

import json
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from hyperprov.core.exceptions import ConfigurationError

DEFAULT_API_KEY_ENV = "IBMCLOUD_API_KEY"


class PowerVSConfig(BaseModel):
    """PowerVS machine sizing for hosted cluster infrastructure."""

    sys_type: str = "s922"
    proc_type: str = "shared"
    processors: str = "0.5"
    memory: int = 32


class HostedClusterConfig(BaseModel):
    """Hosted cluster settings shared by every created cluster."""

    namespace: str = "clusters"
    control_plane_availability_policy: str = "SingleReplica"
    service_cidr: str = "172.31.0.0/16"
    pod_cidr: str = "10.132.0.0/14"


class ToolsConfig(BaseModel):
    """External executables invoked by hyperprov."""

    ibmcloud: str = "ibmcloud"
    oc: str = "oc"
    hypershift: str = "./hypershift-main/bin/hypershift"
    container_service_plugin: str = "container-service"


class ReleaseFeedConfig(BaseModel):
    """Release graph used to pick a default release image."""

    url: str = (
        "https://api.openshift.com/api/upgrades_info/v1/graph?channel=stable-4.12&arch=ppc64le"
    )
    timeout_seconds: float = 30.0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    output: str = "stdout"


class HyperprovConfig(BaseModel):
    """Main hyperprov configuration.

    Field aliases match the camelCase keys of the e2e JSON config documents,
    snake_case names are accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    management_cluster: str = Field(..., alias="managementCluster")
    management_cluster_region: str = Field(..., alias="managementClusterRegion")
    regions: list[str] = Field(..., alias="powervsRegion")
    vpc_regions: list[str] = Field(..., alias="vpcRegion")
    region_zones: dict[str, list[str]] = Field(..., alias="powervsRegionZoneM")
    ssh_key_path: str = Field(..., alias="sshKeyPath")
    pull_secret_path: str = Field(..., alias="pullSecret")
    resource_group: str = Field(..., alias="resourceGroup")
    base_domain: str = Field(..., alias="baseDomain")
    node_pool_replicas: int = Field(2, alias="nodePoolReplicas", ge=0)
    release_image: str | None = Field(None, alias="releaseImage")
    control_plane_operator_image: str | None = Field(None, alias="cpoImage")
    hypershift_operator_image: str | None = Field(None, alias="hypershiftOperatorImage")
    api_key_env: str = Field(DEFAULT_API_KEY_ENV, alias="apiKeyEnv")

    powervs: PowerVSConfig = Field(default_factory=PowerVSConfig)
    hosted_cluster: HostedClusterConfig = Field(default_factory=HostedClusterConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    release_feed: ReleaseFeedConfig = Field(default_factory=ReleaseFeedConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_regions(self) -> "HyperprovConfig":
        """Check region/vpc-region alignment and zone uniqueness.

        Raises:
            ValueError: If the region lists are misaligned or a zone repeats
        """
        if len(self.vpc_regions) != len(self.regions):
            raise ValueError(
                f"vpcRegion must have one entry per powervsRegion "
                f"({len(self.vpc_regions)} != {len(self.regions)})"
            )

        seen: set[str] = set()
        duplicates: list[str] = []
        for region in self.regions:
            for zone in self.region_zones.get(region, []):
                if zone in seen:
                    duplicates.append(zone)
                seen.add(zone)

        if duplicates:
            raise ValueError(f"Zones must be unique across regions: {', '.join(duplicates)}")

        return self

    @classmethod
    def from_file(cls, path: str | Path) -> "HyperprovConfig":
        """Load configuration from a YAML or JSON file.

        Files with a .json suffix are read as JSON, anything else as YAML.

        Args:
            path: Path to configuration file

        Returns:
            HyperprovConfig instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        config_path = Path(path).expanduser()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open() as f:
                if config_path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a mapping: {config_path}")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def get_api_key(self, environ: dict[str, str] | None = None) -> str:
        """Read the cloud API key from the environment.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            API key

        Raises:
            ConfigurationError: If the variable is unset or empty
        """
        env = os.environ if environ is None else environ
        api_key = env.get(self.api_key_env, "")
        if not api_key:
            raise ConfigurationError(f"Environment variable {self.api_key_env} is not set")
        return api_key

    def zones_for(self, region: str) -> list[str]:
        """Get the zones configured for a region.

        Args:
            region: PowerVS region

        Returns:
            Zones for the region, empty if none are configured
        """
        return list(self.region_zones.get(region, []))
