"""Parallel hosted cluster provisioning."""

import asyncio
import time
from concurrent.futures import ThreadPoolExecutor

from hyperprov.clients.hypershift import HypershiftCLI
from hyperprov.clients.release_feed import ReleaseFeedClient
from hyperprov.core.exceptions import ClusterCreationError, CommandError, ReleaseResolutionError
from hyperprov.core.models import ProvisioningRequest, ProvisioningResult, ProvisioningStatus
from hyperprov.utils.logging import get_logger

logger = get_logger(__name__)


class ProvisioningOrchestrator:
    """Creates hosted clusters concurrently, one task per request.

    Every task runs in its own worker thread and all of them start at once.
    Failures are isolated: a task that fails is reported in its result and
    never cancels or delays the others. There is no timeout, so a hung
    creation blocks provision_all until it exits.
    """

    def __init__(
        self,
        hypershift: HypershiftCLI,
        api_key: str,
        release_feed: ReleaseFeedClient | None = None,
    ):
        """Initialize provisioning orchestrator.

        Args:
            hypershift: HyperShift CLI wrapper
            api_key: IBM Cloud API key handed to each creation
            release_feed: Release feed for requests without a release image (optional)
        """
        self.hypershift = hypershift
        self.api_key = api_key
        self.release_feed = release_feed

    async def provision_all(
        self, provisioning_requests: list[ProvisioningRequest]
    ) -> list[ProvisioningResult]:
        """Create all clusters and wait for every task to finish.

        Args:
            provisioning_requests: Requests to provision

        Returns:
            One result per request, in request order
        """
        if not provisioning_requests:
            logger.warning("no_provisioning_requests")
            return []

        logger.info("provisioning_started", total=len(provisioning_requests))

        loop = asyncio.get_running_loop()
        with ThreadPoolExecutor(
            max_workers=len(provisioning_requests),
            thread_name_prefix="provision",
        ) as executor:
            tasks = [
                loop.run_in_executor(executor, self.provision_one, request)
                for request in provisioning_requests
            ]
            outcomes = await asyncio.gather(*tasks, return_exceptions=True)

        results = []
        for request, outcome in zip(provisioning_requests, outcomes):
            if isinstance(outcome, BaseException):
                results.append(self._failed_result(request, outcome, 0.0))
            else:
                results.append(outcome)

        succeeded = sum(1 for r in results if r.succeeded)
        logger.info(
            "provisioning_complete",
            total=len(results),
            succeeded=succeeded,
            failed=len(results) - succeeded,
        )
        return results

    def provision_one(self, request: ProvisioningRequest) -> ProvisioningResult:
        """Create a single cluster, containing any failure in the result.

        Args:
            request: Provisioning request

        Returns:
            Provisioning result
        """
        started = time.monotonic()
        logger.info(
            "cluster_creation_started",
            cluster_name=request.cluster_name,
            region=request.region,
            zone=request.zone,
            vpc_region=request.vpc_region,
        )

        try:
            request = self._with_release_image(request)
            try:
                self.hypershift.create_cluster(request, self.api_key)
            except CommandError as e:
                raise ClusterCreationError(
                    f"Failed to create cluster {request.cluster_name}: {e}"
                ) from e
        except Exception as e:
            return self._failed_result(request, e, time.monotonic() - started)

        duration = time.monotonic() - started
        logger.info(
            "cluster_creation_completed",
            cluster_name=request.cluster_name,
            duration_seconds=round(duration, 1),
        )
        return ProvisioningResult(
            cluster_name=request.cluster_name,
            region=request.region,
            zone=request.zone,
            status=ProvisioningStatus.SUCCEEDED,
            release_image=request.release_image,
            duration_seconds=duration,
        )

    def _with_release_image(self, request: ProvisioningRequest) -> ProvisioningRequest:
        """Fill in the default release image when none is configured.

        Each call queries the feed on its own. When the feed cannot be read
        the request is returned unchanged and the tool's default applies.
        """
        if request.release_image or self.release_feed is None:
            return request

        try:
            release_image = self.release_feed.latest_release_image()
        except ReleaseResolutionError as e:
            logger.warning(
                "default_release_unavailable",
                cluster_name=request.cluster_name,
                error=str(e),
            )
            return request

        return request.model_copy(update={"release_image": release_image})

    @staticmethod
    def _failed_result(
        request: ProvisioningRequest, error: BaseException, duration: float
    ) -> ProvisioningResult:
        logger.error(
            "cluster_creation_failed",
            cluster_name=request.cluster_name,
            zone=request.zone,
            error_type=type(error).__name__,
            error=str(error),
        )
        return ProvisioningResult(
            cluster_name=request.cluster_name,
            region=request.region,
            zone=request.zone,
            status=ProvisioningStatus.FAILED,
            release_image=request.release_image,
            error=str(error),
            error_type=type(error).__name__,
            duration_seconds=duration,
        )
