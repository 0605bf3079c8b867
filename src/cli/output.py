"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for spinners, colored output, and formatted text.
Supports verbosity levels and --no-color flag.
"""

from typing import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.text import Text

from src.cli.models import SyncSummary, UploadStatus
from src.models.document import PublishStatus


class OutputHandler:
    """Handles all terminal output using Rich library.

    Provides methods for displaying messages, per-document status lines,
    spinners, and summaries with color coding and verbosity level control.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.info("Found 3 article(s)")
        >>> with handler.spinner("Fetching articles..."):
        ...     # Do work
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def error(self, message: str) -> None:
        """Display error message in red.

        The message is printed as plain text so brackets in file names or
        API responses are not read as markup.
        """
        self.console.print(Text.assemble(("✗ ", "red"), (message, "red")))

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(Text(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(Text(message, style="dim"))

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Args:
            message: Message to display with spinner

        Yields:
            None
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    @staticmethod
    def status_line(
        title: str,
        upload_status: UploadStatus,
        publish_status: PublishStatus,
        width: int = 50,
    ) -> Text:
        """Build the status line for one document.

        The title is cut to ``width`` characters and padded with dots to
        the same width, followed by ``[<UPLOAD STATUS> <publish status>]``.

        Example:
            >>> OutputHandler.status_line("Foo", UploadStatus.POSTING, PublishStatus.DRAFT, 6).plain
            'Foo...[POSTING draft]'
        """
        line = Text()
        line.append(title[:width], style="bold")
        line.append("." * max(width - len(title), 0), style="dim")
        line.append("[", style="bold")
        line.append(upload_status.render(), style=f"bold {upload_status.style}")
        line.append(" ")
        line.append(publish_status.render(), style="bold dim")
        line.append("]", style="bold")
        return line

    def print_status(
        self,
        title: str,
        upload_status: UploadStatus,
        publish_status: PublishStatus,
        width: int = 50,
    ) -> None:
        """Display the status line for one document."""
        self.console.print(
            self.status_line(title, upload_status, publish_status, width),
            soft_wrap=True,
        )

    def print_summary(self, summary: SyncSummary) -> None:
        """Display sync summary with color coding.

        Args:
            summary: Counts collected during the run
        """
        if summary.dry_run:
            self.console.print("\n[bold]Dry Run - Changes Preview:[/bold]")
            posted_label, synced_label = "Would post", "Would sync"
        else:
            self.console.print("\n[bold]Sync Summary:[/bold]")
            posted_label, synced_label = "Posted", "Synced"

        if summary.posted:
            self.console.print(f"  [yellow]+[/yellow] {posted_label}: {len(summary.posted)} article(s)")

        if summary.synced:
            self.console.print(f"  [yellow]↑[/yellow] {synced_label}: {len(summary.synced)} article(s)")

        if summary.unchanged:
            self.console.print(f"  [dim]─[/dim] Unchanged: {len(summary.unchanged)} article(s)")

        if summary.failed:
            self.console.print(f"  [red]✗[/red] Failed: {len(summary.failed)} article(s)")
            for title in summary.failed:
                self.console.print(Text(f"      {title}", style="red"))

        if summary.failed:
            self.console.print("\n[red]Sync completed with upload failures[/red]")
        elif summary.total == 0:
            self.console.print("\n[yellow]No markdown files to sync[/yellow]")
        elif not summary.posted and not summary.synced:
            self.console.print("\n[green]Already in sync. No changes detected.[/green]")
        elif summary.dry_run:
            self.console.print("\n[green]Dry run complete. No changes applied.[/green]")
        else:
            self.console.print("\n[green]Sync completed successfully[/green]")
