"""OpenShift CLI wrapper."""

from hyperprov.clients.command import CommandRunner
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


class OcCLI(CommandRunner):
    """Wrapper for the oc command-line tool."""

    def __init__(self, executable: str = "oc"):
        super().__init__(executable)

    def login(self, token: str, server: str) -> None:
        """Log in to a cluster API server with a bearer token.

        Args:
            token: Bearer token
            server: API server URL

        Raises:
            CommandError: If login fails
        """
        self._run_command(["login", f"--token={token}", f"--server={server}"])
        logger.info("oc_login_completed", server=server)
