"""API wrapper for the dev.to (Forem) REST API.

This module wraps a requests Session and provides error translation from
HTTP failures to our typed exception hierarchy. It exposes the three
endpoints the sync tool needs: list the account's articles, create an
article, and update an article.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from src.file_mapper.models import SyncConfig
from src.models.remote_article import RemoteArticle

from .auth import Authenticator
from .errors import (
    InvalidCredentialsError,
    APIUnreachableError,
    APIAccessError,
)

logger = logging.getLogger(__name__)


class APIWrapper:
    """Wrapper around a requests Session with dev.to error translation.

    This class provides a thin wrapper over the dev.to API that:
    1. Sends the API key from the Authenticator in the ``api-key`` header
    2. Translates HTTP and transport failures to typed exceptions
    3. Builds RemoteArticle objects from the article index

    The article index call is never retried: without the index no file can
    be classified, so a failure aborts the run. Write calls return the raw
    response and let ArticleOperations decide what a status means.

    Example:
        >>> api = APIWrapper(Authenticator())
        >>> articles = api.fetch_all_articles()
    """

    def __init__(
        self,
        authenticator: Authenticator,
        config: Optional[SyncConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the API wrapper.

        Args:
            authenticator: Authenticator for loading the API key
            config: Sync settings (api_url, per_page, timeout)
            session: requests Session to send requests with (created if None)
        """
        self._authenticator = authenticator
        self.config = config or SyncConfig()
        self._session = session or requests.Session()
        self._api_key: Optional[str] = None

    def _get_api_key(self) -> str:
        """Load the API key on first use.

        Raises:
            MissingCredentialsError: If the key is not configured
        """
        if self._api_key is None:
            self._api_key = self._authenticator.get_credentials().api_key
        return self._api_key

    def _headers(self) -> Dict[str, str]:
        return {
            'api-key': self._get_api_key(),
            'Accept': 'application/json',
        }

    def _url(self, path: str) -> str:
        return f"{self.config.api_url.rstrip('/')}/{path.lstrip('/')}"

    def sanitize_credentials(self, text: str) -> str:
        """Mask the API key in error messages and log text.

        Args:
            text: The error message or log text to sanitize

        Returns:
            str: Text with every occurrence of the API key masked
        """
        if not text or not self._api_key:
            return text
        return text.replace(self._api_key, '***REDACTED***')

    def fetch_all_articles(self) -> List[RemoteArticle]:
        """Fetch every article of the account in a single request.

        Requests ``per_page`` articles at once. Accounts with more articles
        than that are only partially indexed.

        Returns:
            List of RemoteArticle in the order the API returns them

        Raises:
            MissingCredentialsError: If the API key is not configured
            InvalidCredentialsError: If the API rejects the key (401/403)
            APIUnreachableError: On connection failures and timeouts
            APIAccessError: On any other failure or a malformed response
        """
        url = self._url('articles/me/all')
        headers = self._headers()

        try:
            resp = self._session.get(
                url,
                params={'per_page': self.config.per_page},
                headers=headers,
                timeout=self.config.timeout,
            )
        except (ConnectionError, Timeout) as e:
            logger.error(
                f"Article index request failed: {self.sanitize_credentials(str(e))}"
            )
            raise APIUnreachableError(endpoint=url) from e
        except RequestException as e:
            safe_error_msg = self.sanitize_credentials(str(e))
            logger.error(f"Article index request failed: {safe_error_msg}")
            raise APIAccessError(
                f"dev.to API failure while fetching articles: {safe_error_msg}"
            ) from e

        if resp.status_code in (401, 403):
            raise InvalidCredentialsError(endpoint=url, status_code=resp.status_code)

        if not 200 <= resp.status_code < 300:
            raise APIAccessError(
                f"dev.to error {resp.status_code} while fetching articles: "
                f"{self.sanitize_credentials(resp.text)}",
                status_code=resp.status_code,
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise APIAccessError("dev.to returned an article index that is not JSON") from e

        return self._parse_articles(payload)

    def _parse_articles(self, payload: Any) -> List[RemoteArticle]:
        if not isinstance(payload, list):
            raise APIAccessError(
                f"Expected a list of articles, got {type(payload).__name__}"
            )

        articles = []
        for item in payload:
            if not isinstance(item, dict):
                raise APIAccessError(
                    f"Malformed article in index: expected an object, got {type(item).__name__}"
                )
            try:
                articles.append(RemoteArticle.from_api(item))
            except (KeyError, TypeError, ValueError) as e:
                raise APIAccessError(f"Malformed article in index: {e!r}") from e

        logger.info(f"Fetched {len(articles)} article(s) from {self.config.api_url}")
        return articles

    def create_article(self, body_markdown: str) -> requests.Response:
        """POST a new article.

        Args:
            body_markdown: Full raw document content, frontmatter included

        Returns:
            The HTTP response, whatever its status

        Raises:
            requests.RequestException: On transport failures (for retry)
        """
        return self._session.post(
            self._url('articles'),
            json={'body_markdown': body_markdown},
            headers=self._headers(),
            timeout=self.config.timeout,
        )

    def update_article(self, article_id: int, body_markdown: str) -> requests.Response:
        """PUT new content to an existing article.

        Args:
            article_id: Remote article id
            body_markdown: Full raw document content, frontmatter included

        Returns:
            The HTTP response, whatever its status

        Raises:
            requests.RequestException: On transport failures (for retry)
        """
        return self._session.put(
            self._url(f'articles/{int(article_id)}'),
            json={'body_markdown': body_markdown},
            headers=self._headers(),
            timeout=self.config.timeout,
        )
