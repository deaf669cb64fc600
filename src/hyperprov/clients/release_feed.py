"""Release feed client for default release image resolution."""

import requests
from pydantic import ValidationError

from hyperprov.core.exceptions import ReleaseResolutionError
from hyperprov.core.models import ReleaseGraph
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


class ReleaseFeedClient:
    """Reads a release graph and picks a release image from it."""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ):
        """Initialize release feed client.

        Args:
            url: Release graph URL
            timeout: HTTP timeout in seconds
            session: HTTP session (optional)
        """
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_graph(self) -> ReleaseGraph:
        """Fetch and validate the release graph.

        Returns:
            Release graph

        Raises:
            ReleaseResolutionError: If the feed cannot be read or parsed
        """
        try:
            response = self.session.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return ReleaseGraph.model_validate(response.json())
        except requests.RequestException as e:
            logger.error("release_feed_request_failed", url=self.url, error=str(e))
            raise ReleaseResolutionError(f"Failed to read release feed {self.url}: {e}") from e
        except (ValueError, ValidationError) as e:
            logger.error("release_feed_parse_failed", url=self.url, error=str(e))
            raise ReleaseResolutionError(f"Invalid release feed document: {e}") from e

    def latest_release_image(self) -> str:
        """Resolve the default release image.

        The first node of the graph is taken as latest. Nodes are not sorted
        by version, so this follows the order the feed serves.

        Returns:
            Release image pull spec

        Raises:
            ReleaseResolutionError: If the graph has no nodes
        """
        graph = self.get_graph()
        if not graph.nodes:
            raise ReleaseResolutionError(f"Release feed {self.url} returned no releases")

        node = graph.nodes[0]
        logger.info("default_release_resolved", version=node.version, payload=node.payload)
        return node.payload
