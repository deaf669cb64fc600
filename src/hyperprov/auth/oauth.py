"""Headless OAuth implicit-grant token acquisition for OpenShift clusters.

The cluster's OAuth server is asked for a token with ``response_type=token``.
It answers with a chain of redirects whose last location carries the token in
its URL fragment, e.g.::

    https://oauth.example:30181/oauth/token/implicit#access_token=XYZ&token_type=Bearer

Fragments are never sent to servers, so the token is read from the URL the
HTTP client resolved last, not from any header or body.
"""

from urllib.parse import urlencode, urlsplit

import requests
from pydantic import ValidationError

from hyperprov.core.exceptions import (
    DiscoveryError,
    TokenAcquisitionError,
    TokenExtractionError,
)
from hyperprov.core.models import OAuthDiscoveryDocument
from hyperprov.utils.logging import get_logger, mask_secret

logger = get_logger(__name__)

DISCOVERY_PATH = "/.well-known/oauth-authorization-server"
CLIENT_ID = "openshift-challenging-client"
CSRF_HEADER = "X-CSRF-Token"
API_KEY_USERNAME = "apikey"


def build_authorize_url(token_endpoint: str) -> str:
    """Build the implicit-grant authorize URL from a token endpoint.

    Only the scheme and host of the token endpoint are kept.

    Args:
        token_endpoint: OAuth token endpoint URL

    Returns:
        Authorize URL

    Raises:
        DiscoveryError: If the token endpoint is not an absolute URL
    """
    parts = urlsplit(token_endpoint)
    if not parts.scheme or not parts.netloc:
        raise DiscoveryError(f"Token endpoint is not an absolute URL: {token_endpoint}")

    query = urlencode({"client_id": CLIENT_ID, "response_type": "token"})
    return f"{parts.scheme}://{parts.netloc}/oauth/authorize?{query}"


def extract_access_token(url: str) -> str:
    """Extract the access token from a redirect URL fragment.

    Args:
        url: Final redirect URL

    Returns:
        Access token

    Raises:
        TokenExtractionError: If the fragment holds no non-empty access_token
    """
    fragment = urlsplit(url).fragment
    for pair in fragment.split("&"):
        key, sep, value = pair.partition("=")
        if key == "access_token" and sep and value:
            return value

    raise TokenExtractionError("No access_token in final redirect URL fragment")


class TokenAcquirer:
    """Obtains a bearer token for a cluster API server using an API key."""

    def __init__(self, session: requests.Session | None = None, timeout: float = 30.0):
        """Initialize token acquirer.

        Args:
            session: HTTP session (optional)
            timeout: Per-request timeout in seconds
        """
        self.session = session or requests.Session()
        self.timeout = timeout

    def discover(self, endpoint: str) -> OAuthDiscoveryDocument:
        """Fetch the OAuth authorization server metadata.

        Args:
            endpoint: Cluster API server base URL

        Returns:
            Discovery document

        Raises:
            DiscoveryError: If the document cannot be fetched or is malformed
        """
        url = endpoint.rstrip("/") + DISCOVERY_PATH
        logger.debug("fetching_oauth_discovery", url=url)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("oauth_discovery_request_failed", url=url, error=str(e))
            raise DiscoveryError(f"Failed to fetch {url}: {e}") from e

        try:
            document = OAuthDiscoveryDocument.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("oauth_discovery_parse_failed", url=url, error=str(e))
            raise DiscoveryError(f"Invalid OAuth discovery document from {url}: {e}") from e

        logger.info("oauth_discovery_completed", token_endpoint=document.token_endpoint)
        return document

    def authorize(self, authorize_url: str, api_key: str) -> str:
        """Run the authorize request and return the last URL reached.

        Args:
            authorize_url: Implicit-grant authorize URL
            api_key: API key used as the Basic auth password

        Returns:
            URL of the final response after redirects

        Raises:
            TokenAcquisitionError: If the request fails
        """
        try:
            response = self.session.get(
                authorize_url,
                auth=(API_KEY_USERNAME, api_key),
                headers={CSRF_HEADER: "a"},
                allow_redirects=True,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("oauth_authorize_request_failed", url=authorize_url, error=str(e))
            raise TokenAcquisitionError(f"Failed to call {authorize_url}: {e}") from e

        logger.debug(
            "oauth_authorize_completed",
            status_code=response.status_code,
            redirects=len(response.history),
        )
        return response.url

    def acquire_token(self, endpoint: str, api_key: str) -> str:
        """Obtain a bearer token for a cluster API server.

        Args:
            endpoint: Cluster API server base URL
            api_key: API key

        Returns:
            Bearer token

        Raises:
            DiscoveryError: If discovery fails
            TokenExtractionError: If no token is returned
        """
        document = self.discover(endpoint)
        authorize_url = build_authorize_url(document.token_endpoint)
        final_url = self.authorize(authorize_url, api_key)
        token = extract_access_token(final_url)

        logger.info("access_token_acquired", endpoint=endpoint, token=mask_secret(token))
        return token
