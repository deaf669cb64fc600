"""Cluster API authentication."""

from hyperprov.auth.oauth import TokenAcquirer, build_authorize_url, extract_access_token

__all__ = ["TokenAcquirer", "build_authorize_url", "extract_access_token"]
