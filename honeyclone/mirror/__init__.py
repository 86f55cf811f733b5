"""Page-mirroring package: fetch a page, localise its images and scripts, save it."""

from honeyclone.mirror.errors import FetchError, MirrorError
from honeyclone.mirror.models import MirrorResult, RewrittenResource, SaveTarget
from honeyclone.mirror.page import mirror_page
from honeyclone.mirror.resolver import resolve_reference
from honeyclone.mirror.walker import rewrite_document

__all__ = [
    "mirror_page",
    "rewrite_document",
    "resolve_reference",
    "SaveTarget",
    "MirrorResult",
    "RewrittenResource",
    "MirrorError",
    "FetchError",
]
