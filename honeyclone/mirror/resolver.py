"""Resolve ``src`` values against the page URL and classify their origin."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import SplitResult, urldefrag, urljoin, urlsplit

from honeyclone.mirror.models import ResourceReference

logger = logging.getLogger("honeyclone.mirror")

_FETCHABLE_SCHEMES = {"http", "https"}

# Browsers drop these from URLs; other control characters make a URL invalid.
_STRIPPED_CHARS = str.maketrans("", "", "\t\n\r")


def _host_key(parts: SplitResult) -> str:
    """Return ``host[:port]`` lower-cased; raises ``ValueError`` on a bad port."""
    host = (parts.hostname or "").lower()
    port = parts.port
    return f"{host}:{port}" if port is not None else host


def classify_reference(raw: str, base_url: str) -> Optional[ResourceReference]:
    """Resolve *raw* against *base_url* and tag it as same- or cross-origin.

    Returns ``None`` when *raw* is empty, holds control characters or cannot
    be parsed.  Tabs and newlines are dropped first.  Relative references
    inherit scheme and host from the base per RFC 3986; the origin check
    is done on the resolved URL so protocol-relative references to another
    host count as cross-origin.
    """
    ref = raw.translate(_STRIPPED_CHARS).strip()
    if not ref or any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in ref):
        return None
    try:
        base = urlsplit(base_url)
        resolved, _fragment = urldefrag(urljoin(base_url, ref))
        parts = urlsplit(resolved)
        same_origin = (
            parts.scheme.lower() in _FETCHABLE_SCHEMES
            and bool(parts.hostname)
            and _host_key(parts) == _host_key(base)
        )
    except ValueError:
        return None
    return ResourceReference(url=resolved, same_origin=same_origin)


def resolve_reference(raw: str, base_url: str) -> Optional[ResourceReference]:
    """Return the same-origin absolute URL for *raw*, or ``None`` to skip it.

    Pure: no I/O besides a diagnostic log line, and the same input always
    yields the same answer.
    """
    reference = classify_reference(raw, base_url)
    if reference is None:
        logger.warning("Invalid resource URL, leaving as is: %r", raw)
        return None
    if not reference.same_origin:
        logger.info("External resource, leaving as is: %s", raw)
        return None
    return reference
