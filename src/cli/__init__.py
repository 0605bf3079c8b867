"""Command-line interface for devto-sync.

This package provides the `devto-sync` CLI tool that pushes a directory of
local markdown files to dev.to. It integrates frontmatter validation,
change detection against the account's articles, and the dev.to API into
a command-line workflow with status output and error handling.
"""

from .sync_command import SyncCommand
from .sync_planner import SyncPlanner
from .models import ExitCode, SyncAction, SyncSummary, UploadDecision, UploadStatus
from .errors import (
    CLIError,
    ConfigNotFoundError,
)

__all__ = [
    'SyncCommand',
    'SyncPlanner',
    'ExitCode',
    'SyncAction',
    'SyncSummary',
    'UploadDecision',
    'UploadStatus',
    'CLIError',
    'ConfigNotFoundError',
]
