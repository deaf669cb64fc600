"""Custom exceptions for hyperprov."""


class HyperprovError(Exception):
    """Base exception for all hyperprov errors."""


class ConfigurationError(HyperprovError):
    """Configuration-related errors."""


class CommandError(HyperprovError):
    """External command failed or could not be started."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str | None = None,
    ):
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr


class BootstrapError(HyperprovError):
    """Managing cluster bootstrap failed. Always fatal for the run."""


class CloudLoginError(BootstrapError):
    """Cloud CLI login failed."""


class PluginInstallError(BootstrapError):
    """Cloud CLI plugin installation failed."""


class ClusterLookupError(BootstrapError):
    """Managing cluster not found or its metadata could not be parsed."""


class TokenAcquisitionError(BootstrapError):
    """OAuth token acquisition failed."""


class DiscoveryError(TokenAcquisitionError):
    """OAuth discovery document could not be fetched or parsed."""


class TokenExtractionError(TokenAcquisitionError):
    """No access token in the final redirect fragment."""


class SessionLoginError(BootstrapError):
    """Cluster CLI login with the bearer token failed."""


class PrereqInstallError(BootstrapError):
    """Prerequisite operator install on the managing cluster failed."""


class ClusterCreationError(HyperprovError):
    """Hosted cluster creation failed for a single zone."""


class ReleaseResolutionError(HyperprovError):
    """Default release image could not be resolved from the release feed."""
