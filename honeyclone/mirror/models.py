"""Data models for the page-mirroring core."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import List, Optional

from honeyclone.config import settings
from honeyclone.mirror.errors import MirrorError

# Element tag -> resource category.
IMAGE = "img"
SCRIPT = "script"
REWRITABLE_TAGS = (IMAGE, SCRIPT)


@dataclass(frozen=True)
class SaveTarget:
    """Where downloaded resources land, relative to ``output_root``."""

    output_root: Path
    images_subdir: str = "assets/images"
    scripts_subdir: str = "scripts"

    @classmethod
    def from_settings(cls, output_root: Optional[Path] = None) -> SaveTarget:
        return cls(
            output_root=Path(output_root or settings.templates_dir),
            images_subdir=settings.images_subdir,
            scripts_subdir=settings.scripts_subdir,
        )

    def subdir_for(self, tag: str) -> str:
        """Return the category directory (relative to the root) for *tag*."""
        if tag == SCRIPT:
            return self.scripts_subdir
        return self.images_subdir

    def directory_for(self, tag: str) -> Path:
        return self.output_root / self.subdir_for(tag)

    def relative_path(self, tag: str, filename: str) -> str:
        """Attribute value for a resource saved under *tag*'s directory."""
        return str(PurePosixPath(self.subdir_for(tag)) / filename)


@dataclass(frozen=True)
class ResourceReference:
    """A resolved absolute resource URL and its origin classification."""

    url: str
    same_origin: bool


@dataclass
class RewrittenResource:
    """One ``src`` attribute that now points at a local copy."""

    tag: str
    original_src: str
    url: str
    local_path: str


@dataclass
class MirrorResult:
    """Outcome of :func:`honeyclone.mirror.page.mirror_page`."""

    page_url: str
    output_path: Path
    resources: List[RewrittenResource] = field(default_factory=list)
    error: Optional[MirrorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
