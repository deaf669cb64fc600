"""Hosted cluster provisioning."""

from hyperprov.provisioning.orchestrator import ProvisioningOrchestrator
from hyperprov.provisioning.planner import build_requests, cluster_name, infra_id

__all__ = ["ProvisioningOrchestrator", "build_requests", "cluster_name", "infra_id"]
