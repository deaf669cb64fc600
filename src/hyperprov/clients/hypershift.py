"""HyperShift CLI wrapper."""

from hyperprov.clients.command import CommandRunner
from hyperprov.core.config import DEFAULT_API_KEY_ENV
from hyperprov.core.models import ProvisioningRequest
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


class HypershiftCLI(CommandRunner):
    """Wrapper for the hypershift command-line tool."""

    def __init__(self, executable: str = "./hypershift-main/bin/hypershift"):
        super().__init__(executable)

    def install(self, hypershift_image: str | None = None) -> None:
        """Install the HyperShift operator onto the current cluster.

        Args:
            hypershift_image: Operator image override (optional)

        Raises:
            CommandError: If install fails
        """
        args = ["install"]
        if hypershift_image:
            args.extend(["--hypershift-image", hypershift_image])

        self._run_command(args)
        logger.info("hypershift_install_completed", hypershift_image=hypershift_image)

    @staticmethod
    def create_cluster_args(request: ProvisioningRequest) -> list[str]:
        """Build the create arguments for a provisioning request.

        Args:
            request: Provisioning request

        Returns:
            Argument list for ``hypershift create cluster powervs``
        """
        args = [
            "create",
            "cluster",
            "powervs",
            "--name",
            request.cluster_name,
            "--infra-id",
            request.infra_id,
            "--region",
            request.region,
            "--zone",
            request.zone,
            "--vpc-region",
            request.vpc_region,
            "--resource-group",
            request.resource_group,
            "--base-domain",
            request.base_domain,
            "--pull-secret",
            request.pull_secret_path,
            "--ssh-key",
            request.ssh_key_path,
            "--node-pool-replicas",
            str(request.node_pool_replicas),
            "--namespace",
            request.namespace,
            "--control-plane-availability-policy",
            request.control_plane_availability_policy,
            "--service-cidr",
            request.service_cidr,
            "--cluster-cidr",
            request.pod_cidr,
            "--sys-type",
            request.sys_type,
            "--proc-type",
            request.proc_type,
            "--processors",
            request.processors,
            "--memory",
            str(request.memory),
        ]

        if request.release_image:
            args.extend(["--release-image", request.release_image])
        if request.control_plane_operator_image:
            args.extend(["--control-plane-operator-image", request.control_plane_operator_image])

        return args

    def create_cluster(self, request: ProvisioningRequest, api_key: str) -> None:
        """Create a hosted cluster on PowerVS.

        Blocks until the tool exits. There is no timeout.

        Args:
            request: Provisioning request
            api_key: IBM Cloud API key, passed through the child environment

        Raises:
            CommandError: If creation fails
        """
        self._run_command(
            self.create_cluster_args(request),
            env={DEFAULT_API_KEY_ENV: api_key},
        )
        logger.info("hypershift_create_cluster_completed", cluster_name=request.cluster_name)
