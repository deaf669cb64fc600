"""Pytest configuration and shared fixtures."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from hyperprov.core.config import HyperprovConfig
from hyperprov.core.models import ProvisioningRequest


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Config document in the camelCase e2e format."""
    return {
        "managementCluster": "hyp-mgmt",
        "managementClusterRegion": "jp-tok",
        "powervsRegion": ["osa", "tok"],
        "vpcRegion": ["jp-osa", "jp-tok"],
        "powervsRegionZoneM": {
            "osa": ["osa21", "osa22"],
            "tok": ["tok04"],
        },
        "sshKeyPath": "/root/.ssh/id_rsa.pub",
        "pullSecret": "/root/pull-secret.json",
        "resourceGroup": "hypershift-e2e",
        "baseDomain": "hypershift.example.com",
        "nodePoolReplicas": 2,
    }


@pytest.fixture
def sample_config(sample_config_data: dict[str, Any]) -> HyperprovConfig:
    """Provide a sample hyperprov configuration."""
    return HyperprovConfig(**sample_config_data)


@pytest.fixture
def sample_request() -> ProvisioningRequest:
    """Provide a sample provisioning request."""
    return ProvisioningRequest(
        region="osa",
        zone="osa21",
        vpc_region="jp-osa",
        cluster_name="osa21-hyp-e2e",
        infra_id="osa21-hyp-e2e-infra",
        resource_group="hypershift-e2e",
        ssh_key_path="/root/.ssh/id_rsa.pub",
        pull_secret_path="/root/pull-secret.json",
        base_domain="hypershift.example.com",
        node_pool_replicas=2,
        release_image="quay.io/openshift-release-dev/ocp-release:4.12.0-ppc64le",
    )


@pytest.fixture
def mock_http_response():
    """Factory for mocked requests responses."""

    def _make(
        json_data: Any = None,
        url: str = "",
        status_code: int = 200,
        history: list | None = None,
    ) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.url = url
        response.history = history or []
        response.json.return_value = json_data
        return response

    return _make
