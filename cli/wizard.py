"""Interactive prompts that collect a honeypot record."""

from __future__ import annotations

import datetime as dt
from typing import Callable, Optional, TypeVar

import typer

from honeyclone.honeypots.models import HoneypotConfig
from honeyclone.honeypots.validation import (
    require,
    validate_cve,
    validate_port,
    validate_regex,
    validate_template_file,
)

T = TypeVar("T")


def prompt_field(label: str, validator: Callable[[str], T]) -> T:
    """Prompt until *validator* accepts the answer; show its message otherwise."""
    while True:
        raw = typer.prompt(label, default="", show_default=False)
        try:
            return validator(raw)
        except ValueError as exc:
            typer.echo(str(exc))


def collect_honeypot(today: Optional[dt.date] = None) -> HoneypotConfig:
    """Ask for every honeypot field and return the record (``id`` left at 0)."""
    name = prompt_field("Name (mandatory)", require)
    cve = prompt_field("CVE (format CVE-YYYY-NNNNN, optional)", validate_cve)
    application = prompt_field("Application (mandatory)", require)
    port = prompt_field("Port (1-65535, mandatory)", validate_port)
    template = prompt_field(
        "Template HTML file (output file name, mandatory)", validate_template_file
    )
    endpoint = prompt_field("Detection endpoint (mandatory)", require)
    regex = prompt_field("Request regex (mandatory, valid regex)", validate_regex)

    stamp = (today or dt.date.today()).isoformat()
    return HoneypotConfig(
        name=name,
        cve=cve,
        application=application,
        port=port,
        template_html_file=template,
        detection_endpoint=endpoint,
        request_regex=regex,
        date_created=stamp,
        date_updated=stamp,
    )
