"""Walk a parsed page and point same-origin ``img``/``script`` sources at local copies."""

from __future__ import annotations

import logging
from typing import Iterator, List

import httpx
from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from honeyclone.mirror.errors import FetchError
from honeyclone.mirror.fetcher import download_resource
from honeyclone.mirror.models import REWRITABLE_TAGS, RewrittenResource, SaveTarget
from honeyclone.mirror.resolver import resolve_reference

logger = logging.getLogger("honeyclone.mirror")


def iter_nodes(root: PageElement) -> Iterator[PageElement]:
    """Yield *root* and all descendants, depth-first, pre-order.

    Each node's children are snapshotted when it is visited, so later
    attribute edits (or even insertions) never disturb the walk.
    """
    stack: List[PageElement] = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Tag):
            stack.extend(reversed(list(node.children)))


def rewrite_document(
    doc: BeautifulSoup,
    base_url: str,
    targets: SaveTarget,
    client: httpx.Client,
) -> List[RewrittenResource]:
    """Download same-origin image and script sources and rewrite ``src`` in place.

    Skipped references (malformed, external, failed downloads) keep their
    original value.  Resources are fetched one at a time in document order.
    Returns the rewritten references in that order.
    """
    rewritten: List[RewrittenResource] = []
    for node in iter_nodes(doc):
        if not isinstance(node, Tag) or node.name.lower() not in REWRITABLE_TAGS:
            continue
        src = node.get("src")
        if src is None:
            continue

        reference = resolve_reference(src, base_url)
        if reference is None:
            continue

        tag = node.name.lower()
        try:
            filename = download_resource(client, reference.url, targets.directory_for(tag))
        except FetchError as exc:
            logger.warning("Failed to download resource: %s", exc)
            continue

        local_path = targets.relative_path(tag, filename)
        node["src"] = local_path
        rewritten.append(
            RewrittenResource(tag=tag, original_src=src, url=reference.url, local_path=local_path)
        )
    return rewritten
