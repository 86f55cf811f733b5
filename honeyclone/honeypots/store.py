"""YAML persistence for the honeypot registry.

Usage::

    from honeyclone.honeypots.store import load_registry, save_registry

    registry = load_registry()
    registry.add(honeypot)
    save_registry(registry)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml

from honeyclone.config import settings
from honeyclone.honeypots.models import HoneypotConfig, HoneypotRegistry

logger = logging.getLogger("honeyclone.store")


class ConfigStoreError(Exception):
    """The config file exists but cannot be read, parsed or written."""


def load_registry(path: Optional[Path] = None) -> HoneypotRegistry:
    """Load the registry from *path* (default ``settings.config_file``).

    A missing file yields an empty registry.

    Raises:
        ConfigStoreError: If the file is unreadable or not a valid registry.
    """
    path = Path(path or settings.config_file)
    if not path.exists():
        logger.debug("No config file at %s, starting empty", path)
        return HoneypotRegistry()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigStoreError(f"cannot read {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigStoreError(f"{path}: expected a mapping at the top level")
    entries = raw.get("honeypots") or []
    if not isinstance(entries, list):
        raise ConfigStoreError(f"{path}: 'honeypots' must be a list")

    try:
        honeypots = [HoneypotConfig.from_dict(entry) for entry in entries]
    except (AttributeError, TypeError, ValueError) as exc:
        raise ConfigStoreError(f"{path}: malformed honeypot entry: {exc}") from exc
    return HoneypotRegistry(honeypots=honeypots)


def save_registry(registry: HoneypotRegistry, path: Optional[Path] = None) -> Path:
    """Write *registry* to *path* (default ``settings.config_file``), replacing it."""
    path = Path(path or settings.config_file)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            yaml.safe_dump(registry.to_dict(), sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
    except OSError as exc:
        raise ConfigStoreError(f"cannot write {path}: {exc}") from exc
    logger.info("Configuration saved to %s", path)
    return path
