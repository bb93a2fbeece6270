"""Git-related services for git-spawn."""

from .operations import GitOperations
from .repo import open_repo
from .worktrees import WorktreeService, parse_worktree_porcelain

__all__ = [
    "GitOperations",
    "WorktreeService",
    "open_repo",
    "parse_worktree_porcelain",
]
