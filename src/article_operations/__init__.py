"""Article operations for pushing local documents to dev.to."""

from .article_operations import ArticleOperations
from .models import UploadResult

__all__ = [
    "ArticleOperations",
    "UploadResult",
]
