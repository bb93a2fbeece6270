"""Display service for worktree listings"""
from typing import List

from rich.console import Console
from rich.markup import escape

from git_spawn.constants import ARROW, NO_WORKTREES_MESSAGE, DETACHED_LABEL
from git_spawn.logging_config import get_logger
from git_spawn.models.worktree import WorktreeRecord

console = Console()
logger = get_logger(__name__)


class DisplayService:
    def show_worktrees(self, records: List[WorktreeRecord]) -> int:
        """Print every git-spawn managed worktree.

        Returns:
            Number of worktrees shown
        """
        managed = [record for record in records if record.is_managed]
        logger.debug(f"{len(managed)} of {len(records)} worktrees are managed")

        if not managed:
            console.print(f"[yellow]{NO_WORKTREES_MESSAGE}[/yellow]")
            return 0

        console.print("[bold]Active worktrees:[/bold]")
        for record in managed:
            branch = record.branch or DETACHED_LABEL
            console.print(f"  [cyan]{escape(record.display_name)}[/cyan] {ARROW} {escape(record.path)}")
            console.print(f"      branch: {escape(branch)}")
        return len(managed)
