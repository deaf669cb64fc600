"""Unit tests for the HyperShift CLI wrapper."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from hyperprov.clients.hypershift import HypershiftCLI
from hyperprov.core.exceptions import CommandError
from hyperprov.core.models import ProvisioningRequest


def _completed() -> Mock:
    return Mock(returncode=0, stdout="", stderr="")


def _flag(args: list[str], name: str) -> str:
    return args[args.index(name) + 1]


class TestInstall:
    """Tests for operator install."""

    def test_install_default_image(self) -> None:
        """Test install without an image override."""
        cli = HypershiftCLI()

        with patch("subprocess.run", return_value=_completed()) as mock_run:
            cli.install()

        assert mock_run.call_args[0][0] == ["./hypershift-main/bin/hypershift", "install"]

    def test_install_with_image(self) -> None:
        """Test install pins the operator image."""
        cli = HypershiftCLI("hypershift")

        with patch("subprocess.run", return_value=_completed()) as mock_run:
            cli.install("quay.io/hypershift/hypershift-operator:latest")

        assert mock_run.call_args[0][0] == [
            "hypershift",
            "install",
            "--hypershift-image",
            "quay.io/hypershift/hypershift-operator:latest",
        ]


class TestCreateCluster:
    """Tests for hosted cluster creation."""

    def test_create_cluster_args(self, sample_request: ProvisioningRequest) -> None:
        """Test every request field is passed as a flag."""
        args = HypershiftCLI.create_cluster_args(sample_request)

        assert args[:3] == ["create", "cluster", "powervs"]
        assert _flag(args, "--name") == "osa21-hyp-e2e"
        assert _flag(args, "--infra-id") == "osa21-hyp-e2e-infra"
        assert _flag(args, "--region") == "osa"
        assert _flag(args, "--zone") == "osa21"
        assert _flag(args, "--vpc-region") == "jp-osa"
        assert _flag(args, "--resource-group") == "hypershift-e2e"
        assert _flag(args, "--base-domain") == "hypershift.example.com"
        assert _flag(args, "--pull-secret") == "/root/pull-secret.json"
        assert _flag(args, "--ssh-key") == "/root/.ssh/id_rsa.pub"
        assert _flag(args, "--node-pool-replicas") == "2"
        assert _flag(args, "--release-image").endswith("4.12.0-ppc64le")
        assert _flag(args, "--namespace") == "clusters"
        assert _flag(args, "--control-plane-availability-policy") == "SingleReplica"
        assert _flag(args, "--service-cidr") == "172.31.0.0/16"
        assert _flag(args, "--cluster-cidr") == "10.132.0.0/14"
        assert _flag(args, "--sys-type") == "s922"
        assert _flag(args, "--proc-type") == "shared"
        assert _flag(args, "--processors") == "0.5"
        assert _flag(args, "--memory") == "32"
        assert "--control-plane-operator-image" not in args

    def test_create_cluster_args_without_release(
        self, sample_request: ProvisioningRequest
    ) -> None:
        """Test no release flag is passed when no image is set."""
        request = sample_request.model_copy(
            update={"release_image": None, "control_plane_operator_image": "quay.io/cpo:dev"}
        )

        args = HypershiftCLI.create_cluster_args(request)

        assert "--release-image" not in args
        assert _flag(args, "--control-plane-operator-image") == "quay.io/cpo:dev"

    def test_create_cluster_api_key_in_env(self, sample_request: ProvisioningRequest) -> None:
        """Test the API key goes to the child environment, not argv."""
        cli = HypershiftCLI()

        with patch("subprocess.run", return_value=_completed()) as mock_run:
            cli.create_cluster(sample_request, "secret-key")

        cmd = mock_run.call_args[0][0]
        assert not any("secret-key" in arg for arg in cmd)
        assert mock_run.call_args[1]["env"]["IBMCLOUD_API_KEY"] == "secret-key"

    def test_create_cluster_failure(self, sample_request: ProvisioningRequest) -> None:
        """Test creation failure raises CommandError."""
        cli = HypershiftCLI()

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                returncode=1, cmd=["hypershift"], stderr="quota exceeded"
            )
            with pytest.raises(CommandError, match="quota exceeded"):
                cli.create_cluster(sample_request, "secret-key")
