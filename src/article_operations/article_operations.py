"""Article create and update operations.

This module provides the ArticleOperations class that sends local document
content to dev.to. Writes are best effort: a failed write is logged and
reported in the returned UploadResult, never raised, so one bad article
does not stop the rest of the run.
"""

import logging
from typing import Callable, Optional

import requests

from ..devto_client.api_wrapper import APIWrapper
from ..devto_client.auth import Authenticator
from ..devto_client.errors import APIAccessError
from ..devto_client.retry_logic import retry_on_transport_error
from .models import UploadResult

logger = logging.getLogger(__name__)


class ArticleOperations:
    """Create and update dev.to articles with retry on transport errors.

    Each write is one request wrapped in retry_on_transport_error. Only
    request-level failures are retried; a response with an error status is
    final for that document.

    Usage:
        ops = ArticleOperations(api)
        result = ops.create_article(content)
        result = ops.update_article(42, content)
    """

    def __init__(self, api: Optional[APIWrapper] = None):
        """Initialize ArticleOperations with optional API wrapper.

        Args:
            api: APIWrapper instance. If None, creates one with
                 default authentication.
        """
        if api is None:
            api = APIWrapper(Authenticator())
        self.api = api

    def create_article(self, body_markdown: str) -> UploadResult:
        """Create a new article from raw document content.

        Args:
            body_markdown: Full raw document content, frontmatter included

        Returns:
            UploadResult describing the outcome
        """
        logger.debug("Creating article")
        return self._send(
            'create',
            None,
            lambda: self.api.create_article(body_markdown),
            "Post was successful",
        )

    def update_article(self, article_id: int, body_markdown: str) -> UploadResult:
        """Replace the content of an existing article.

        Args:
            article_id: Remote article id
            body_markdown: Full raw document content, frontmatter included

        Returns:
            UploadResult describing the outcome
        """
        logger.debug(f"Updating article {article_id}")
        return self._send(
            'update',
            article_id,
            lambda: self.api.update_article(article_id, body_markdown),
            "Update was successful",
        )

    def _send(
        self,
        operation: str,
        article_id: Optional[int],
        request: Callable[[], requests.Response],
        success_message: str,
    ) -> UploadResult:
        config = self.api.config
        try:
            resp = retry_on_transport_error(
                request,
                max_retries=config.max_retries,
                backoff=config.retry_backoff,
            )
        except APIAccessError as e:
            error = self.api.sanitize_credentials(str(e))
            logger.error(f"dev.to {operation} failed: {error}")
            return UploadResult(
                success=False,
                operation=operation,
                article_id=article_id,
                error=error,
            )

        if not 200 <= resp.status_code < 300:
            error = f"dev.to error {resp.status_code} {self.api.sanitize_credentials(resp.text)}"
            logger.error(error)
            return UploadResult(
                success=False,
                operation=operation,
                article_id=article_id,
                status_code=resp.status_code,
                error=error,
            )

        logger.info(success_message)
        return UploadResult(
            success=True,
            operation=operation,
            article_id=article_id,
            status_code=resp.status_code,
        )
