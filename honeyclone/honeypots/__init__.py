"""Honeypot configuration records and their YAML store."""

from honeyclone.honeypots.models import HoneypotConfig, HoneypotRegistry
from honeyclone.honeypots.store import ConfigStoreError, load_registry, save_registry

__all__ = [
    "HoneypotConfig",
    "HoneypotRegistry",
    "ConfigStoreError",
    "load_registry",
    "save_registry",
]
