"""Top-level mirror operation: fetch, rewrite and save one page."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from honeyclone.config import settings
from honeyclone.mirror.errors import MirrorError
from honeyclone.mirror.fetcher import build_client, check_collision_policy, fetch_page
from honeyclone.mirror.models import MirrorResult, SaveTarget
from honeyclone.mirror.walker import rewrite_document

logger = logging.getLogger("honeyclone.mirror")


def validate_output_name(name: str) -> str:
    """Return *name* stripped, or raise ``ValueError`` if it is not a single relative segment."""
    name = name.strip()
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ValueError(f"output name must be a plain file name, got {name!r}")
    return name


def _check_page_url(url: str) -> None:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise MirrorError("url", f"invalid page URL {url!r}: {exc}") from exc
    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        raise MirrorError("url", f"page URL needs an http(s) scheme and a host: {url!r}")


def _mirror(
    page_url: str,
    output_path: Path,
    targets: SaveTarget,
    client: httpx.Client,
    result: MirrorResult,
) -> None:
    _check_page_url(page_url)

    logger.info("Fetching %s", page_url)
    try:
        response = fetch_page(client, page_url)
    except httpx.InvalidURL as exc:
        raise MirrorError("url", f"invalid page URL {page_url!r}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise MirrorError("fetch", f"error fetching webpage {page_url}: {exc}") from exc

    try:
        doc = BeautifulSoup(
            response.content, "html.parser", on_duplicate_attribute="ignore"
        )
    except ParserRejectedMarkup as exc:
        raise MirrorError("parse", f"error parsing HTML from {page_url}: {exc}") from exc

    result.resources = rewrite_document(doc, page_url, targets, client)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(doc.encode("utf-8"))
    except OSError as exc:
        raise MirrorError("write", f"error writing {output_path}: {exc}") from exc
    logger.info(
        "Saved %s with %d local resource(s)", output_path, len(result.resources)
    )


def mirror_page(
    page_url: str,
    output_name: str,
    targets: SaveTarget,
    client: Optional[httpx.Client] = None,
) -> MirrorResult:
    """Mirror *page_url* into ``targets.output_root / output_name``.

    Never raises for fetch, parse or write failures; those come back as
    ``MirrorResult.error``.  Resources downloaded before a failure stay on
    disk.

    Raises:
        ValueError: If *output_name* is not a plain file name or the
            configured collision policy is unknown.  Checked before any I/O.
    """
    check_collision_policy(settings.collision_policy)
    output_path = targets.output_root / validate_output_name(output_name)
    result = MirrorResult(page_url=page_url, output_path=output_path)

    owns_client = client is None
    if client is None:
        client = build_client()
    try:
        _mirror(page_url, output_path, targets, client, result)
    except MirrorError as exc:
        logger.error("%s", exc)
        result.error = exc
    finally:
        if owns_client:
            client.close()
    return result
