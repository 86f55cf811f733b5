"""Centralised settings for honeyclone.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Output layout
    # ------------------------------------------------------------------
    templates_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("HONEYCLONE_TEMPLATES_DIR", "./templates")
        )
    )
    images_subdir: str = "assets/images"
    scripts_subdir: str = "scripts"

    # ------------------------------------------------------------------
    # Honeypot config store
    # ------------------------------------------------------------------
    config_file: Path = field(
        default_factory=lambda: Path(
            os.environ.get("HONEYCLONE_CONFIG_FILE", "config.yaml")
        )
    )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    # None keeps the httpx default timeout.
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("HONEYCLONE_REQUEST_TIMEOUT")
    )
    max_attempts: int = field(
        default_factory=lambda: int(os.environ.get("HONEYCLONE_MAX_ATTEMPTS", "1"))
    )
    collision_policy: str = field(
        default_factory=lambda: os.environ.get("HONEYCLONE_COLLISION_POLICY", "overwrite")
    )


# Module-level singleton, import this everywhere:
#   from honeyclone.config import settings
settings = Settings()
