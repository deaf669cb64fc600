"""Managing cluster bootstrap."""

from hyperprov.bootstrap.environment import EnvironmentBootstrapper

__all__ = ["EnvironmentBootstrapper"]
