"""End-to-end run: bootstrap the managing cluster, then fan out cluster creation."""

import asyncio

from hyperprov.auth.oauth import TokenAcquirer
from hyperprov.bootstrap.environment import EnvironmentBootstrapper
from hyperprov.clients.hypershift import HypershiftCLI
from hyperprov.clients.ibmcloud import IBMCloudCLI
from hyperprov.clients.oc import OcCLI
from hyperprov.clients.release_feed import ReleaseFeedClient
from hyperprov.core.config import HyperprovConfig
from hyperprov.core.models import ProvisioningResult
from hyperprov.provisioning.orchestrator import ProvisioningOrchestrator
from hyperprov.provisioning.planner import build_requests
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


def build_bootstrapper(config: HyperprovConfig, api_key: str) -> EnvironmentBootstrapper:
    """Create a bootstrapper wired to the configured tools."""
    return EnvironmentBootstrapper(
        ibmcloud=IBMCloudCLI(config.tools.ibmcloud),
        oc=OcCLI(config.tools.oc),
        hypershift=HypershiftCLI(config.tools.hypershift),
        token_acquirer=TokenAcquirer(),
        api_key=api_key,
        plugin_name=config.tools.container_service_plugin,
    )


def build_orchestrator(config: HyperprovConfig, api_key: str) -> ProvisioningOrchestrator:
    """Create an orchestrator wired to the configured tools."""
    release_feed = None
    if not config.release_image:
        release_feed = ReleaseFeedClient(
            url=config.release_feed.url,
            timeout=config.release_feed.timeout_seconds,
        )

    return ProvisioningOrchestrator(
        hypershift=HypershiftCLI(config.tools.hypershift),
        api_key=api_key,
        release_feed=release_feed,
    )


def run_e2e(
    config: HyperprovConfig,
    api_key: str,
    bootstrapper: EnvironmentBootstrapper | None = None,
    orchestrator: ProvisioningOrchestrator | None = None,
) -> list[ProvisioningResult]:
    """Bootstrap the managing cluster, then create every hosted cluster.

    Provisioning starts only after bootstrap succeeded. Bootstrap errors
    propagate, per-cluster errors are returned in the results.

    Args:
        config: hyperprov configuration
        api_key: IBM Cloud API key
        bootstrapper: Bootstrapper override (optional)
        orchestrator: Orchestrator override (optional)

    Returns:
        Provisioning results in request order

    Raises:
        BootstrapError: If any bootstrap step fails
    """
    bootstrapper = bootstrapper or build_bootstrapper(config, api_key)
    orchestrator = orchestrator or build_orchestrator(config, api_key)

    bootstrapper.bootstrap(
        cluster_name=config.management_cluster,
        region=config.management_cluster_region,
        hypershift_image=config.hypershift_operator_image,
    )

    provisioning_requests = build_requests(config)
    logger.info("provisioning_requests_built", total=len(provisioning_requests))

    return asyncio.run(orchestrator.provision_all(provisioning_requests))
