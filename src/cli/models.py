"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses and enums for clean, type-safe data structures,
following the patterns established in src/file_mapper/models.py.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Run completed; individual upload failures are reported
      in the summary but do not change the exit code
    - GENERAL_ERROR (1): Config, file read or frontmatter errors
    - AUTH_ERROR (3): Missing or rejected API key
    - NETWORK_ERROR (4): Article index could not be fetched

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


class SyncAction(Enum):
    """What the sync has to do for one document."""
    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"


@dataclass(frozen=True)
class UploadDecision:
    """Classification of one document against the remote index.

    Attributes:
        action: CREATE, UPDATE or NOOP
        remote_id: Article id to update (only set for UPDATE)

    Example:
        >>> UploadDecision.update(7)
        UploadDecision(action=<SyncAction.UPDATE: 'update'>, remote_id=7)
    """
    action: SyncAction
    remote_id: Optional[int] = None

    @classmethod
    def create(cls) -> "UploadDecision":
        return cls(SyncAction.CREATE)

    @classmethod
    def update(cls, remote_id: int) -> "UploadDecision":
        return cls(SyncAction.UPDATE, remote_id)

    @classmethod
    def noop(cls) -> "UploadDecision":
        return cls(SyncAction.NOOP)


class UploadStatus(Enum):
    """Display status for a document, derived 1:1 from its decision."""
    POSTING = "POSTING"
    SYNCING = "SYNCING"
    UPLOADED = "UPLOADED"

    @classmethod
    def from_decision(cls, decision: UploadDecision) -> "UploadStatus":
        return {
            SyncAction.CREATE: cls.POSTING,
            SyncAction.UPDATE: cls.SYNCING,
            SyncAction.NOOP: cls.UPLOADED,
        }[decision.action]

    @property
    def style(self) -> str:
        return "green" if self is UploadStatus.UPLOADED else "yellow"

    def render(self) -> str:
        return self.value


@dataclass
class SyncSummary:
    """Summary of a sync run for display to the user.

    Attributes:
        posted: Titles of documents created (or to be created in dry run)
        synced: Titles of documents updated (or to be updated in dry run)
        unchanged: Titles of documents already up to date
        failed: Titles of documents whose upload failed
        dry_run: Whether the run skipped network writes

    Example:
        >>> summary = SyncSummary(posted=["Foo"])
        >>> summary.total
        1
    """
    posted: List[str] = field(default_factory=list)
    synced: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    dry_run: bool = False

    @property
    def total(self) -> int:
        return len(self.posted) + len(self.synced) + len(self.unchanged)
