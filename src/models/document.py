"""Local markdown document data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PublishStatus(Enum):
    """Publish state shown next to each document in the status line."""
    PUBLISHED = "published"
    DRAFT = "draft"

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Frontmatter:
    """Markdown frontmatter fields the dev.to API accepts as input.

    Attributes:
        title: Article title (required); used to match remote articles
        published: Publish flag, None when absent (treated as draft)
        tags: Comma separated tag string
        date: RFC 3339 timestamp string
        series: Series name
        canonical_url: Canonical URL of the original post
        cover_image: Cover image URL
    """
    title: str
    published: Optional[bool] = None
    tags: Optional[str] = None
    date: Optional[str] = None
    series: Optional[str] = None
    canonical_url: Optional[str] = None
    cover_image: Optional[str] = None

    @property
    def publish_status(self) -> PublishStatus:
        if self.published:
            return PublishStatus.PUBLISHED
        return PublishStatus.DRAFT


@dataclass(frozen=True)
class Document:
    """A local markdown file read for one sync iteration.

    Attributes:
        file_path: Path of the file on disk
        file_name: Display name (file base name), used in error messages
        raw_content: Full file content, frontmatter included
        frontmatter: Validated frontmatter
        body: Content after the frontmatter block
    """
    file_path: str
    file_name: str
    raw_content: str
    frontmatter: Frontmatter
    body: str

    @property
    def title(self) -> str:
        return self.frontmatter.title
