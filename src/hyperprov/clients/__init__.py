"""Wrappers for external tools and services."""

from hyperprov.clients.command import CommandRunner
from hyperprov.clients.hypershift import HypershiftCLI
from hyperprov.clients.ibmcloud import IBMCloudCLI
from hyperprov.clients.oc import OcCLI
from hyperprov.clients.release_feed import ReleaseFeedClient

__all__ = [
    "CommandRunner",
    "HypershiftCLI",
    "IBMCloudCLI",
    "OcCLI",
    "ReleaseFeedClient",
]
