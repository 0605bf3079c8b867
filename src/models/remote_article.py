"""dev.to article data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RemoteArticle:
    """Article as returned by the dev.to ``/articles/me/all`` endpoint.

    Only id, title, body_markdown and published take part in sync
    decisions. The remaining descriptive fields are carried through so
    callers can display or inspect them.

    Attributes:
        id: Opaque remote identifier used in update URLs
        title: Article title, matched exactly against local frontmatter
        body_markdown: Article markdown as stored remotely
        published: Whether the article is published
    """
    id: int
    title: str
    body_markdown: str
    published: bool = False
    description: str = ""
    cover_image: Optional[str] = None
    published_at: Optional[str] = None
    tag_list: List[str] = field(default_factory=list)
    slug: str = ""
    path: str = ""
    url: str = ""
    canonical_url: str = ""
    published_timestamp: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RemoteArticle":
        """Build an article from one element of the API response.

        Args:
            data: Decoded JSON object for one article

        Returns:
            RemoteArticle

        Raises:
            KeyError: If id, title or body_markdown is missing
            ValueError: If id is not an integer or title or body_markdown
                is not a string
        """
        for key in ('title', 'body_markdown'):
            if not isinstance(data[key], str):
                raise ValueError(f"{key} must be a string, got {type(data[key]).__name__}")

        tag_list = data.get('tag_list') or []
        if isinstance(tag_list, str):
            tag_list = [t.strip() for t in tag_list.split(',') if t.strip()]

        return cls(
            id=int(data['id']),
            title=data['title'],
            body_markdown=data['body_markdown'],
            published=bool(data.get('published', False)),
            description=data.get('description') or "",
            cover_image=data.get('cover_image'),
            published_at=data.get('published_at'),
            tag_list=list(tag_list),
            slug=data.get('slug') or "",
            path=data.get('path') or "",
            url=data.get('url') or "",
            canonical_url=data.get('canonical_url') or "",
            published_timestamp=data.get('published_timestamp') or "",
        )
