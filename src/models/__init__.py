"""Data models for local documents and remote dev.to articles."""

from src.models.document import Document, Frontmatter, PublishStatus
from src.models.remote_article import RemoteArticle

__all__ = ['Document', 'Frontmatter', 'PublishStatus', 'RemoteArticle']
