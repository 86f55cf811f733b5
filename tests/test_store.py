"""Tests for the honeypot registry YAML store and field validators."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from honeyclone.honeypots.models import HoneypotConfig, HoneypotRegistry
from honeyclone.honeypots.store import ConfigStoreError, load_registry, save_registry
from honeyclone.honeypots.validation import (
    require,
    validate_cve,
    validate_port,
    validate_regex,
    validate_template_file,
)


def _honeypot(**overrides) -> HoneypotConfig:
    fields = dict(
        name="Jenkins login",
        application="Jenkins",
        port=8080,
        template_html_file="jenkins.html",
        detection_endpoint="/login",
        request_regex=r"^/login\?from=.*",
        cve="CVE-2024-23897",
        date_created="2026-10-18",
        date_updated="2026-10-18",
    )
    fields.update(overrides)
    return HoneypotConfig(**fields)


# ---------------------------------------------------------------------------
# Registry model
# ---------------------------------------------------------------------------

class TestRegistry:
    def test_add_numbers_sequentially(self) -> None:
        registry = HoneypotRegistry()
        first = registry.add(_honeypot(name="a"))
        second = registry.add(_honeypot(name="b"))
        assert (first.id, second.id) == (1, 2)

    def test_to_dict_key_order(self) -> None:
        data = _honeypot(id=3).to_dict()
        assert list(data) == [
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
        ]

    def test_from_dict_fills_missing_and_ignores_unknown(self) -> None:
        hp = HoneypotConfig.from_dict({"id": "2", "name": "x", "port": "22", "extra": 1})
        assert hp.id == 2
        assert hp.port == 22
        assert hp.cve == ""
        assert hp.application == ""


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

class TestStore:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_registry(tmp_path / "config.yaml").honeypots == []

    def test_save_then_load(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        registry = HoneypotRegistry()
        registry.add(_honeypot())
        save_registry(registry, path)

        loaded = load_registry(path)
        assert loaded.honeypots == registry.honeypots

    def test_file_layout(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        registry = HoneypotRegistry()
        registry.add(_honeypot())
        save_registry(registry, path)

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert raw["honeypots"][0]["template_html_file"] == "jenkins.html"
        assert raw["honeypots"][0]["port"] == 8080
        assert path.read_text(encoding="utf-8").startswith("honeypots:")

    def test_uses_settings_path_by_default(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "nested" / "config.yaml"
        monkeypatch.setattr("honeyclone.config.settings.config_file", path)
        registry = HoneypotRegistry()
        registry.add(_honeypot())
        save_registry(registry)
        assert path.exists()
        assert len(load_registry().honeypots) == 1

    def test_empty_file_is_empty_registry(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_registry(path).honeypots == []

    @pytest.mark.parametrize(
        "content",
        [
            "honeypots: [\n",
            "- just\n- a list\n",
            "honeypots: 5\n",
            "honeypots:\n  - port: not-a-number\n",
            "honeypots:\n  - plain string\n",
        ],
    )
    def test_malformed_file_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigStoreError):
            load_registry(path)


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

class TestValidators:
    def test_require(self) -> None:
        assert require("  x ") == "x"
        with pytest.raises(ValueError, match="mandatory"):
            require("   ")

    def test_cve_optional(self) -> None:
        assert validate_cve("") == ""
        assert validate_cve("CVE-2021-44228") == "CVE-2021-44228"
        with pytest.raises(ValueError, match="CVE"):
            validate_cve("2021-44228")

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("65535", 65535), (" 443 ", 443)])
    def test_port_valid(self, raw: str, expected: int) -> None:
        assert validate_port(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "65536", "http", "", "-1"])
    def test_port_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError, match="between 1 and 65535"):
            validate_port(raw)

    def test_regex(self) -> None:
        assert validate_regex(r"^/api/.*$") == r"^/api/.*$"
        with pytest.raises(ValueError, match="Invalid regex"):
            validate_regex("([a-z")

    def test_template_file(self) -> None:
        assert validate_template_file("decoy.html") == "decoy.html"
        with pytest.raises(ValueError, match="plain file name"):
            validate_template_file("../decoy.html")
