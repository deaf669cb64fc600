"""IBM Cloud CLI wrapper."""

import json

from pydantic import ValidationError

from hyperprov.clients.command import CommandRunner
from hyperprov.core.exceptions import ClusterLookupError
from hyperprov.core.models import ClusterDetails
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


class IBMCloudCLI(CommandRunner):
    """Wrapper for the ibmcloud command-line tool."""

    def __init__(self, executable: str = "ibmcloud"):
        super().__init__(executable)

    def login(self, api_key: str, region: str) -> None:
        """Log in to IBM Cloud.

        Args:
            api_key: IBM Cloud API key
            region: Region to target

        Raises:
            CommandError: If login fails
        """
        self._run_command(["login", f"--apikey={api_key}", "-r", region])
        logger.info("ibmcloud_login_completed", region=region)

    def install_plugin(self, name: str) -> None:
        """Install a CLI plugin, replacing any installed copy.

        Args:
            name: Plugin name

        Raises:
            CommandError: If install fails
        """
        self._run_command(["plugin", "install", name, "-f"])
        logger.info("ibmcloud_plugin_installed", plugin=name)

    def get_cluster(self, name: str) -> ClusterDetails:
        """Fetch cluster connection metadata.

        Args:
            name: Cluster name or ID

        Returns:
            Parsed cluster details

        Raises:
            CommandError: If the command fails
            ClusterLookupError: If the output is not a valid cluster document
        """
        result = self._run_command(["oc", "cluster", "get", "-c", name, "--output", "json"])

        try:
            document = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            logger.error("cluster_json_parse_failed", cluster=name, error=str(e))
            raise ClusterLookupError(f"Failed to parse cluster document for {name}: {e}") from e

        if not isinstance(document, dict):
            raise ClusterLookupError(f"Unexpected cluster document for {name}")

        try:
            details = ClusterDetails.model_validate(document)
        except ValidationError as e:
            raise ClusterLookupError(
                f"Cluster document for {name} has no usable masterURL: {e}"
            ) from e

        logger.info("cluster_details_retrieved", cluster=name, master_url=details.master_url)
        return details
