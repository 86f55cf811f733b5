"""Field validators for honeypot records.

Each validator returns the cleaned value or raises ``ValueError`` with a
message suitable for showing to the user.
"""

from __future__ import annotations

import re

from honeyclone.mirror.page import validate_output_name

CVE_PATTERN = re.compile(r"CVE-\d{4}-\d{4,5}")


def require(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("This field is mandatory. Please enter a value.")
    return value


def validate_cve(value: str) -> str:
    """Optional field: empty is fine, otherwise it must contain a CVE id."""
    value = value.strip()
    if value and not CVE_PATTERN.search(value):
        raise ValueError("Invalid CVE format. Please try again.")
    return value


def validate_port(value: str) -> int:
    try:
        port = int(require(value))
    except ValueError:
        port = 0
    if not 1 <= port <= 65535:
        raise ValueError("Invalid port. Please enter a number between 1 and 65535.")
    return port


def validate_regex(value: str) -> str:
    value = require(value)
    try:
        re.compile(value)
    except re.error as exc:
        raise ValueError(f"Invalid regex ({exc}). Please try again.") from exc
    return value


def validate_template_file(value: str) -> str:
    value = require(value)
    try:
        return validate_output_name(value)
    except ValueError as exc:
        raise ValueError("Template file must be a plain file name (no directories).") from exc
