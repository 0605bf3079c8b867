"""Unit tests for article_operations module."""

from unittest.mock import Mock, patch

from requests.exceptions import ConnectionError, Timeout

from src.article_operations.article_operations import ArticleOperations
from src.article_operations.models import UploadResult
from src.devto_client.api_wrapper import APIWrapper
from src.devto_client.auth import Credentials
from src.file_mapper.models import SyncConfig


def create_mock_api(config=None):
    api = Mock()
    api.config = config or SyncConfig()
    api.sanitize_credentials.side_effect = lambda text: text
    return api


def create_response(status_code=200, text=""):
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    return resp


class TestCreateArticle:
    """Test cases for ArticleOperations.create_article()."""

    def test_success(self):
        api = create_mock_api()
        api.create_article.return_value = create_response(201)

        result = ArticleOperations(api).create_article("raw content")

        assert result == UploadResult(success=True, operation='create', status_code=201)
        api.create_article.assert_called_once_with("raw content")

    def test_error_status_is_not_retried(self):
        api = create_mock_api()
        api.create_article.return_value = create_response(422, '{"error":"title taken"}')

        result = ArticleOperations(api).create_article("raw content")

        assert result.success is False
        assert result.status_code == 422
        assert result.error == 'dev.to error 422 {"error":"title taken"}'
        assert api.create_article.call_count == 1

    @patch('time.sleep')
    def test_succeeds_on_last_attempt(self, mock_sleep):
        api = create_mock_api()
        api.create_article.side_effect = [
            ConnectionError("reset"),
            Timeout("slow"),
            ConnectionError("reset"),
            create_response(201),
        ]

        result = ArticleOperations(api).create_article("raw content")

        assert result.success is True
        assert api.create_article.call_count == 4

    @patch('time.sleep')
    def test_exhausted_retries_give_failed_result(self, mock_sleep):
        api = create_mock_api()
        api.create_article.side_effect = ConnectionError("down")

        result = ArticleOperations(api).create_article("raw content")

        assert result.success is False
        assert result.status_code is None
        assert "after 3 retries" in result.error
        assert api.create_article.call_count == 4

    @patch('time.sleep')
    def test_uses_configured_retry_settings(self, mock_sleep):
        api = create_mock_api(SyncConfig(max_retries=1, retry_backoff=0.5))
        api.create_article.side_effect = ConnectionError("down")

        result = ArticleOperations(api).create_article("raw content")

        assert result.success is False
        assert api.create_article.call_count == 2
        mock_sleep.assert_called_once_with(0.5)


class TestUpdateArticle:
    """Test cases for ArticleOperations.update_article()."""

    def test_success(self):
        api = create_mock_api()
        api.update_article.return_value = create_response(200)

        result = ArticleOperations(api).update_article(7, "raw content")

        assert result.success is True
        assert result.operation == 'update'
        assert result.article_id == 7
        api.update_article.assert_called_once_with(7, "raw content")

    def test_not_found(self):
        api = create_mock_api()
        api.update_article.return_value = create_response(404, "not found")

        result = ArticleOperations(api).update_article(7, "raw content")

        assert result.success is False
        assert result.article_id == 7
        assert result.error == "dev.to error 404 not found"


class TestCredentialMasking:
    """Failed writes never expose the API key."""

    def _api(self, session):
        auth = Mock()
        auth.get_credentials.return_value = Credentials(api_key="secret-key")
        return APIWrapper(auth, config=SyncConfig(retry_backoff=0), session=session)

    def test_error_body_is_masked(self):
        session = Mock()
        session.post.return_value = create_response(422, "rejected key secret-key")

        result = ArticleOperations(self._api(session)).create_article("raw content")

        assert result.success is False
        assert "secret-key" not in result.error
        assert "***REDACTED***" in result.error

    @patch('time.sleep')
    def test_transport_error_is_masked(self, mock_sleep):
        session = Mock()
        session.put.side_effect = ConnectionError("reset while sending secret-key")

        result = ArticleOperations(self._api(session)).update_article(7, "raw content")

        assert result.success is False
        assert "secret-key" not in result.error
