"""HTTP fetching for the page itself and for the resources it references."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path, PurePosixPath
from typing import Optional

import httpx

from honeyclone.config import settings
from honeyclone.mirror.errors import FetchError

logger = logging.getLogger("honeyclone.mirror")

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    )
}

COLLISION_POLICIES = ("overwrite", "hash")


def build_client(timeout: Optional[float] = None) -> httpx.Client:
    """Return an ``httpx.Client`` that follows redirects.

    Without *timeout* (or ``settings.request_timeout``) the httpx default
    applies.
    """
    timeout = timeout if timeout is not None else settings.request_timeout
    kwargs = {"headers": _DEFAULT_HEADERS, "follow_redirects": True}
    if timeout is not None:
        kwargs["timeout"] = timeout
    return httpx.Client(**kwargs)


def fetch_page(client: httpx.Client, url: str) -> httpx.Response:
    """GET *url* once.

    Raises:
        httpx.HTTPError: On transport failure or a 4xx/5xx status code.
    """
    response = client.get(url)
    response.raise_for_status()
    return response


def filename_from_url(url: httpx.URL, collision_policy: str = "overwrite") -> str:
    """Derive the local filename from the last segment of *url*'s path.

    With the ``hash`` policy the name is prefixed by a short digest of the
    full URL so distinct resources sharing a basename do not clash.

    Raises:
        ValueError: If the path has no usable last segment.
    """
    name = PurePosixPath(url.path).name
    if name in ("", ".", ".."):
        raise ValueError(f"no filename in path {url.path!r}")
    if collision_policy == "hash":
        digest = hashlib.sha1(str(url).encode("utf-8")).hexdigest()[:10]
        name = f"{digest}-{name}"
    return name


def check_collision_policy(policy: str) -> str:
    """Return *policy* or raise ``ValueError`` if it is not a known policy."""
    if policy not in COLLISION_POLICIES:
        raise ValueError(
            f"unknown collision policy {policy!r}, expected one of {', '.join(COLLISION_POLICIES)}"
        )
    return policy


def _get_with_retry(client: httpx.Client, url: str, max_attempts: int) -> httpx.Response:
    attempts = max(1, max_attempts)
    for attempt in range(1, attempts + 1):
        try:
            response = client.get(url)
        except httpx.InvalidURL as exc:
            raise FetchError(url, f"invalid URL: {exc}") from exc
        except httpx.TransportError as exc:
            if attempt == attempts:
                raise FetchError(url, str(exc)) from exc
            logger.debug("Attempt %d for %s failed: %s", attempt, url, exc)
            continue
        except httpx.HTTPError as exc:
            raise FetchError(url, str(exc)) from exc

        if response.is_success:
            return response
        if response.status_code >= 500 and attempt < attempts:
            logger.debug("Attempt %d for %s returned HTTP %d", attempt, url, response.status_code)
            continue
        raise FetchError(url, f"HTTP {response.status_code}")
    raise FetchError(url, "no attempts made")


def download_resource(
    client: httpx.Client,
    url: str,
    target_dir: Path,
    *,
    collision_policy: Optional[str] = None,
    max_attempts: Optional[int] = None,
) -> str:
    """Download *url* into *target_dir* and return the bare filename.

    The filename is taken from the effective URL after redirects.  An existing
    file with the same name is overwritten.

    Raises:
        FetchError: On any network, status, naming or filesystem failure.
    """
    policy = check_collision_policy(collision_policy or settings.collision_policy)
    attempts = max_attempts if max_attempts is not None else settings.max_attempts

    response = _get_with_retry(client, url, attempts)

    try:
        filename = filename_from_url(response.url, policy)
    except ValueError as exc:
        raise FetchError(url, str(exc)) from exc

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / filename).write_bytes(response.content)
    except OSError as exc:
        raise FetchError(url, f"could not save to {target_dir}: {exc}") from exc

    logger.debug("Saved %s -> %s", url, target_dir / filename)
    return filename
