"""Exceptions raised by the page-mirroring core."""

from __future__ import annotations


class FetchError(Exception):
    """A single resource could not be downloaded or written to disk.

    Always recoverable: the walker leaves the referencing attribute untouched
    and carries on with the rest of the document.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class MirrorError(Exception):
    """Fatal failure of a whole mirror operation.

    ``stage`` is one of ``"url"``, ``"fetch"``, ``"parse"`` or ``"write"``.
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"[{stage}] {message}")
        self.stage = stage
        self.message = message
