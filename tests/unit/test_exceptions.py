"""Unit tests for custom exceptions."""

import pytest

from hyperprov.core.exceptions import (
    BootstrapError,
    CloudLoginError,
    ClusterCreationError,
    ClusterLookupError,
    CommandError,
    ConfigurationError,
    DiscoveryError,
    HyperprovError,
    PluginInstallError,
    PrereqInstallError,
    ReleaseResolutionError,
    SessionLoginError,
    TokenAcquisitionError,
    TokenExtractionError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy and inheritance."""

    def test_all_exceptions_inherit_from_hyperprov_error(self) -> None:
        """Test that all custom exceptions inherit from HyperprovError."""
        exceptions = [
            ConfigurationError,
            CommandError,
            BootstrapError,
            CloudLoginError,
            PluginInstallError,
            ClusterLookupError,
            DiscoveryError,
            TokenExtractionError,
            SessionLoginError,
            PrereqInstallError,
            ClusterCreationError,
            ReleaseResolutionError,
        ]

        for exc_class in exceptions:
            assert issubclass(exc_class, HyperprovError)

    def test_fatal_bootstrap_family(self) -> None:
        """Test every bootstrap step error is a BootstrapError."""
        for exc_class in [
            CloudLoginError,
            PluginInstallError,
            ClusterLookupError,
            DiscoveryError,
            TokenExtractionError,
            SessionLoginError,
            PrereqInstallError,
        ]:
            assert issubclass(exc_class, BootstrapError)

    def test_token_family(self) -> None:
        """Test token errors share a base."""
        assert issubclass(DiscoveryError, TokenAcquisitionError)
        assert issubclass(TokenExtractionError, TokenAcquisitionError)

    def test_task_errors_not_fatal(self) -> None:
        """Test per-task errors are outside the bootstrap family."""
        assert not issubclass(ClusterCreationError, BootstrapError)
        assert not issubclass(ReleaseResolutionError, BootstrapError)

    def test_command_error_details(self) -> None:
        """Test CommandError keeps command details."""
        exc = CommandError("failed", command=["oc", "login"], returncode=1, stderr="denied")

        assert str(exc) == "failed"
        assert exc.command == ["oc", "login"]
        assert exc.returncode == 1
        assert exc.stderr == "denied"

    def test_command_error_defaults(self) -> None:
        """Test CommandError defaults."""
        exc = CommandError("failed")

        assert exc.command == []
        assert exc.returncode is None

    def test_can_catch_with_base_exception(self) -> None:
        """Test that specific exceptions can be caught with BootstrapError."""
        with pytest.raises(BootstrapError):
            raise ClusterLookupError("cluster not found")
