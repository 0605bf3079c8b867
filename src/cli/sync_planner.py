"""Classification of local documents against the remote article index.

This module provides the SyncPlanner class that decides, for one document,
whether the sync must create a new article, update an existing one, or do
nothing. It is a pure function of the document and the index snapshot
fetched at the start of the run: no network access, no retries.
"""

import logging
from typing import Optional, Sequence

from src.cli.models import UploadDecision
from src.file_mapper.content_hasher import ContentHasher
from src.models.document import Document
from src.models.remote_article import RemoteArticle

logger = logging.getLogger(__name__)


class SyncPlanner:
    """Classifies documents as CREATE, UPDATE or NOOP.

    Matching is by exact, case-sensitive title equality; the first remote
    article with the same title wins.

    Change detection compares the digest of the local file's raw content
    (frontmatter included) with the digest of the remote ``body_markdown``.
    Because the two sides do not cover the same text, a document whose
    remote copy does not embed identical frontmatter is always classified
    as UPDATE.

    Example:
        >>> planner = SyncPlanner()
        >>> decision = planner.classify(document, articles)
    """

    def __init__(self, hasher: Optional[ContentHasher] = None):
        self.hasher = hasher or ContentHasher()

    @staticmethod
    def find_remote(
        title: str,
        remote_index: Sequence[RemoteArticle],
    ) -> Optional[RemoteArticle]:
        """Return the first remote article titled exactly title."""
        for article in remote_index:
            if article.title == title:
                return article
        return None

    def classify(
        self,
        document: Document,
        remote_index: Sequence[RemoteArticle],
    ) -> UploadDecision:
        """Decide what to do with one document.

        Args:
            document: Parsed local document
            remote_index: Articles fetched at the start of the run

        Returns:
            UploadDecision: CREATE if no article has the title, UPDATE with
            the article id if content differs, NOOP otherwise
        """
        remote = self.find_remote(document.title, remote_index)
        if remote is None:
            logger.debug(f"{document.file_name}: no remote article titled '{document.title}'")
            return UploadDecision.create()

        local_digest = self.hasher.digest(document.raw_content)
        remote_digest = self.hasher.digest(remote.body_markdown)

        if local_digest != remote_digest:
            logger.debug(f"{document.file_name}: content differs from article {remote.id}")
            return UploadDecision.update(remote.id)

        logger.debug(f"{document.file_name}: article {remote.id} is up to date")
        return UploadDecision.noop()
