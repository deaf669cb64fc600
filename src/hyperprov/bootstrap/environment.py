"""Managing cluster bootstrap."""

from hyperprov.auth.oauth import TokenAcquirer
from hyperprov.clients.hypershift import HypershiftCLI
from hyperprov.clients.ibmcloud import IBMCloudCLI
from hyperprov.clients.oc import OcCLI
from hyperprov.core.exceptions import (
    CloudLoginError,
    ClusterLookupError,
    CommandError,
    PluginInstallError,
    PrereqInstallError,
    SessionLoginError,
)
from hyperprov.core.models import ManagingClusterSession
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


class EnvironmentBootstrapper:
    """Prepares the managing cluster before any hosted cluster is created.

    Steps run in order and the first failure aborts the bootstrap:
    1. Cloud CLI login
    2. Container service plugin install
    3. Managing cluster lookup
    4. OAuth token acquisition
    5. oc login with the token
    6. HyperShift operator install
    """

    def __init__(
        self,
        ibmcloud: IBMCloudCLI,
        oc: OcCLI,
        hypershift: HypershiftCLI,
        token_acquirer: TokenAcquirer,
        api_key: str,
        plugin_name: str = "container-service",
    ):
        """Initialize bootstrapper.

        Args:
            ibmcloud: IBM Cloud CLI wrapper
            oc: OpenShift CLI wrapper
            hypershift: HyperShift CLI wrapper
            token_acquirer: OAuth token acquirer
            api_key: IBM Cloud API key
            plugin_name: Cloud CLI plugin providing cluster commands
        """
        self.ibmcloud = ibmcloud
        self.oc = oc
        self.hypershift = hypershift
        self.token_acquirer = token_acquirer
        self.api_key = api_key
        self.plugin_name = plugin_name

    def bootstrap(
        self,
        cluster_name: str,
        region: str,
        hypershift_image: str | None = None,
    ) -> ManagingClusterSession:
        """Bootstrap the managing cluster.

        Args:
            cluster_name: Managing cluster name
            region: Managing cluster region
            hypershift_image: HyperShift operator image override (optional)

        Returns:
            Session for the managing cluster

        Raises:
            BootstrapError: Subclass naming the step that failed
        """
        logger.info("bootstrap_started", cluster=cluster_name, region=region)

        try:
            self.ibmcloud.login(self.api_key, region)
        except CommandError as e:
            raise CloudLoginError(f"ibmcloud login failed: {e}") from e

        try:
            self.ibmcloud.install_plugin(self.plugin_name)
        except CommandError as e:
            raise PluginInstallError(f"Plugin install failed for {self.plugin_name}: {e}") from e

        try:
            details = self.ibmcloud.get_cluster(cluster_name)
        except CommandError as e:
            raise ClusterLookupError(f"Cluster lookup failed for {cluster_name}: {e}") from e

        token = self.token_acquirer.acquire_token(details.master_url, self.api_key)
        session = ManagingClusterSession(api_url=details.master_url, token=token)

        try:
            self.oc.login(session.token, session.api_url)
        except CommandError as e:
            raise SessionLoginError(f"oc login failed for {session.api_url}: {e}") from e

        try:
            self.hypershift.install(hypershift_image)
        except CommandError as e:
            raise PrereqInstallError(f"HyperShift install failed: {e}") from e

        logger.info("bootstrap_completed", cluster=cluster_name, api_url=session.api_url)
        return session
