"""Sync command orchestration for CLI.

This module provides the SyncCommand class that orchestrates the entire
sync workflow for the CLI. It coordinates the APIWrapper, SyncPlanner,
ArticleOperations and OutputHandler to push a directory of markdown files
to dev.to.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import requests

from src.article_operations.article_operations import ArticleOperations
from src.article_operations.models import UploadResult
from src.cli.errors import CLIError, ConfigNotFoundError
from src.cli.models import ExitCode, SyncAction, SyncSummary, UploadDecision, UploadStatus
from src.cli.output import OutputHandler
from src.cli.sync_planner import SyncPlanner
from src.devto_client.api_wrapper import APIWrapper
from src.devto_client.auth import Authenticator
from src.devto_client.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
    MissingCredentialsError,
)
from src.file_mapper.config_loader import ConfigLoader
from src.file_mapper.discovery import discover_documents
from src.file_mapper.errors import ConfigError, FilesystemError, FrontmatterError
from src.file_mapper.frontmatter_handler import FrontmatterHandler
from src.file_mapper.models import SyncConfig
from src.models.document import Document

logger = logging.getLogger(__name__)


class SyncCommand:
    """Orchestrates the complete sync workflow for the CLI.

    The sync workflow:
        1. Load configuration
        2. Fetch the account's article index once
        3. For each markdown file under the source directory, in order:
           read it, validate its frontmatter, classify it against the index,
           print its status line, and (unless dry run) create or update the
           remote article
        4. Print a summary and return an exit code

    Files are processed strictly one after another. Reading, frontmatter and
    index errors abort the run; failed uploads are logged, counted and
    skipped.

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> sync_cmd = SyncCommand(output_handler=output)
        >>> exit_code = sync_cmd.run(source="./posts", dry_run=True)
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config: Optional[SyncConfig] = None,
        authenticator: Optional[Authenticator] = None,
        api: Optional[APIWrapper] = None,
        article_operations: Optional[ArticleOperations] = None,
        planner: Optional[SyncPlanner] = None,
        output_handler: Optional[OutputHandler] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize sync command with dependencies.

        Args:
            config_path: Path to configuration YAML file (default file if None)
            config: Already loaded configuration (skips loading)
            authenticator: Authenticator for the dev.to API key (optional)
            api: APIWrapper for the article index and writes (optional)
            article_operations: ArticleOperations for writes (optional)
            planner: SyncPlanner for classification (optional)
            output_handler: OutputHandler for terminal output (optional)
            session: requests Session shared by all API calls (optional)

        Note:
            All dependencies are optional to support testing. In production
            they are created on first run.
        """
        self.config_path = config_path
        self.config = config
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator
        self.api = api
        self.article_operations = article_operations
        self.planner = planner or SyncPlanner()
        self.session = session
        self.summary: Optional[SyncSummary] = None

    def run(
        self,
        source: Union[str, Path] = ".",
        dry_run: bool = False,
    ) -> ExitCode:
        """Execute the sync and translate failures to exit codes.

        Args:
            source: Directory to read markdown files from
            dry_run: If True, classify and display without writing

        Returns:
            ExitCode.SUCCESS when the run completed (even if some uploads
            failed), otherwise the code matching the fatal error
        """
        try:
            self.summary = self.sync(source=source, dry_run=dry_run)
            self.output_handler.print_summary(self.summary)
            return ExitCode.SUCCESS

        except (MissingCredentialsError, InvalidCredentialsError) as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(str(e))
            return ExitCode.AUTH_ERROR

        except (APIUnreachableError, APIAccessError) as e:
            logger.error(f"Could not fetch articles: {e}")
            self.output_handler.error(f"Could not fetch articles: {e}")
            return ExitCode.NETWORK_ERROR

        except FrontmatterError as e:
            logger.error(f"Error extracting front matter from {e.file_path}")
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except (FilesystemError, ConfigError, CLIError) as e:
            logger.error(str(e))
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except Exception as e:
            logger.exception("Unexpected error during sync")
            self.output_handler.error(f"Unexpected error: {e}")
            return ExitCode.GENERAL_ERROR

    def sync(
        self,
        source: Union[str, Path] = ".",
        dry_run: bool = False,
    ) -> SyncSummary:
        """Run the sync workflow.

        Args:
            source: Directory to read markdown files from
            dry_run: If True, classify and display without writing

        Returns:
            SyncSummary of the run

        Raises:
            SyncError: Any fatal error (config, credentials, index fetch,
                file read, frontmatter)
        """
        config = self._load_config()
        self._init_dependencies(config)
        self.output_handler.debug(f"Using dev.to API at {config.api_url}")

        logger.info("Fetching article index")
        with self.output_handler.spinner("Fetching articles from dev.to..."):
            articles = self.api.fetch_all_articles()
        self.output_handler.info(f"Found {len(articles)} article(s) on dev.to")

        summary = SyncSummary(dry_run=dry_run)

        for path in discover_documents(source):
            document = self._read_document(path)
            decision = self.planner.classify(document, articles)

            self.output_handler.print_status(
                document.title,
                UploadStatus.from_decision(decision),
                document.frontmatter.publish_status,
                config.title_width,
            )

            if decision.action is SyncAction.NOOP:
                summary.unchanged.append(document.title)
                continue

            if not dry_run:
                result = self._apply(document, decision)
                if not result.success:
                    self.output_handler.error(
                        f"Failed to {result.operation} '{document.title}': {result.error}"
                    )
                    summary.failed.append(document.title)
                    continue

            if decision.action is SyncAction.CREATE:
                summary.posted.append(document.title)
            else:
                summary.synced.append(document.title)

        return summary

    def _load_config(self) -> SyncConfig:
        """Load configuration unless one was injected.

        Raises:
            ConfigNotFoundError: If an explicit config path does not exist
            ConfigError: If the file is invalid
        """
        if self.config is not None:
            return self.config

        if self.config_path is not None and not Path(self.config_path).exists():
            raise ConfigNotFoundError(self.config_path)

        self.config = ConfigLoader.load(self.config_path)
        logger.debug(f"Loaded config: {self.config}")
        return self.config

    def _init_dependencies(self, config: SyncConfig) -> None:
        if not self.api:
            if not self.authenticator:
                self.authenticator = Authenticator()
            self.api = APIWrapper(
                self.authenticator,
                config=config,
                session=self.session or requests.Session(),
            )

        if not self.article_operations:
            self.article_operations = ArticleOperations(self.api)

    def _read_document(self, path: Path) -> Document:
        """Read and validate one markdown file.

        The file is decoded from its raw bytes so line endings are kept
        exactly as stored; the content hash depends on them.

        Raises:
            FilesystemError: If the file cannot be read or decoded
            FrontmatterError: If the frontmatter is missing or invalid
        """
        try:
            content = path.read_bytes().decode('utf-8')
        except OSError as e:
            raise FilesystemError(str(path), 'read', e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise FilesystemError(str(path), 'read', f"Not valid UTF-8: {e}") from e

        frontmatter, body = FrontmatterHandler.extract(path.name, content)

        return Document(
            file_path=str(path),
            file_name=path.name,
            raw_content=content,
            frontmatter=frontmatter,
            body=body,
        )

    def _apply(self, document: Document, decision: UploadDecision) -> UploadResult:
        """Send the write matching decision and wait for it to finish."""
        if decision.action is SyncAction.UPDATE:
            return self.article_operations.update_article(
                decision.remote_id, document.raw_content
            )
        return self.article_operations.create_article(document.raw_content)
