"""Core data models for hyperprov."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ClusterDetails(BaseModel):
    """Subset of the cloud CLI cluster document needed for bootstrap."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    master_url: str = Field(..., alias="masterURL", min_length=1)


class OAuthDiscoveryDocument(BaseModel):
    """OAuth authorization server metadata."""

    model_config = ConfigDict(extra="ignore")

    token_endpoint: str = Field(..., min_length=1)
    issuer: str | None = None
    authorization_endpoint: str | None = None


class ManagingClusterSession(BaseModel):
    """Authenticated session against the managing cluster API server."""

    model_config = ConfigDict(frozen=True)

    api_url: str
    token: str = Field(..., repr=False)


class ReleaseNode(BaseModel):
    """Single release in a release graph."""

    model_config = ConfigDict(extra="ignore")

    version: str | None = None
    payload: str = Field(..., min_length=1)


class ReleaseGraph(BaseModel):
    """Release graph document as served by the release feed."""

    model_config = ConfigDict(extra="ignore")

    nodes: list[ReleaseNode] = Field(default_factory=list)


class ProvisioningRequest(BaseModel):
    """Everything needed to create one hosted cluster in one zone."""

    model_config = ConfigDict(frozen=True)

    region: str
    zone: str
    vpc_region: str
    cluster_name: str
    infra_id: str
    resource_group: str
    ssh_key_path: str
    pull_secret_path: str
    base_domain: str
    node_pool_replicas: int = Field(..., ge=0)
    release_image: str | None = None
    control_plane_operator_image: str | None = None

    namespace: str = "clusters"
    control_plane_availability_policy: str = "SingleReplica"
    service_cidr: str = "172.31.0.0/16"
    pod_cidr: str = "10.132.0.0/14"
    sys_type: str = "s922"
    proc_type: str = "shared"
    processors: str = "0.5"
    memory: int = 32


class ProvisioningStatus(str, Enum):
    """Outcome of a provisioning task."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ProvisioningResult(BaseModel):
    """Result of a single provisioning task."""

    cluster_name: str
    region: str
    zone: str
    status: ProvisioningStatus
    release_image: str | None = None
    error: str | None = None
    error_type: str | None = None
    duration_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        """Whether the cluster was created."""
        return self.status == ProvisioningStatus.SUCCEEDED
