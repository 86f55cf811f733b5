"""Dataclass models for the honeypot configuration file.

Plain Python objects; the store serialises them to and from YAML.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any


@dataclass
class HoneypotConfig:
    name: str
    application: str
    port: int
    template_html_file: str
    detection_endpoint: str
    request_regex: str
    cve: str = ""
    id: int = 0
    date_created: str = ""
    date_updated: str = ""

    # Field order written to disk.
    _KEYS = (
        "id",
        "name",
        "cve",
        "application",
        "port",
        "template_html_file",
        "detection_endpoint",
        "request_regex",
        "date_created",
        "date_updated",
    )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {key: data[key] for key in self._KEYS}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> HoneypotConfig:
        known = {f.name for f in fields(cls)}
        data = {k: v for k, v in raw.items() if k in known}
        data["port"] = int(data.get("port") or 0)
        data["id"] = int(data.get("id") or 0)
        for key in known - {"port", "id"}:
            data[key] = "" if data.get(key) is None else str(data[key])
        return cls(**data)


@dataclass
class HoneypotRegistry:
    honeypots: list[HoneypotConfig] = field(default_factory=list)

    def add(self, honeypot: HoneypotConfig) -> HoneypotConfig:
        """Append *honeypot*, numbering it after the existing entries."""
        honeypot.id = len(self.honeypots) + 1
        self.honeypots.append(honeypot)
        return honeypot

    def to_dict(self) -> dict[str, Any]:
        return {"honeypots": [h.to_dict() for h in self.honeypots]}
