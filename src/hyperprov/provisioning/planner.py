"""Expansion of the configured regions and zones into provisioning requests."""

from hyperprov.core.config import HyperprovConfig
from hyperprov.core.models import ProvisioningRequest

CLUSTER_NAME_SUFFIX = "hyp-e2e"
INFRA_ID_SUFFIX = "hyp-e2e-infra"


def cluster_name(zone: str) -> str:
    """Hosted cluster name for a zone."""
    return f"{zone}-{CLUSTER_NAME_SUFFIX}"


def infra_id(zone: str) -> str:
    """Infrastructure ID for a zone."""
    return f"{zone}-{INFRA_ID_SUFFIX}"


def build_requests(config: HyperprovConfig) -> list[ProvisioningRequest]:
    """Build one provisioning request per configured zone.

    Regions are paired with vpc regions by list index. Requests are ordered
    by region, then by zone as listed in the config.

    Args:
        config: hyperprov configuration

    Returns:
        Provisioning requests
    """
    provisioning_requests = []
    for index, region in enumerate(config.regions):
        vpc_region = config.vpc_regions[index]
        for zone in config.zones_for(region):
            provisioning_requests.append(
                ProvisioningRequest(
                    region=region,
                    zone=zone,
                    vpc_region=vpc_region,
                    cluster_name=cluster_name(zone),
                    infra_id=infra_id(zone),
                    resource_group=config.resource_group,
                    ssh_key_path=config.ssh_key_path,
                    pull_secret_path=config.pull_secret_path,
                    base_domain=config.base_domain,
                    node_pool_replicas=config.node_pool_replicas,
                    release_image=config.release_image,
                    control_plane_operator_image=config.control_plane_operator_image,
                    namespace=config.hosted_cluster.namespace,
                    control_plane_availability_policy=(
                        config.hosted_cluster.control_plane_availability_policy
                    ),
                    service_cidr=config.hosted_cluster.service_cidr,
                    pod_cidr=config.hosted_cluster.pod_cidr,
                    sys_type=config.powervs.sys_type,
                    proc_type=config.powervs.proc_type,
                    processors=config.powervs.processors,
                    memory=config.powervs.memory,
                )
            )
    return provisioning_requests
