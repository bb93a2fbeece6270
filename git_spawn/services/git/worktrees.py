"""Worktree operations service for git-spawn."""

import os
from typing import List, Optional

import git

from git_spawn.exceptions import GitOperationError
from git_spawn.logging_config import get_logger
from git_spawn.models.worktree import WorktreeRecord
from git_spawn.services.git.repo import open_repo

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_porcelain(output: str) -> List[WorktreeRecord]:
    """Parse `git worktree list --porcelain` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    Records are started by the `worktree` line alone, so blank lines are not
    needed to separate them. The first record is the main working tree.
    """
    records: List[WorktreeRecord] = []
    current: Optional[WorktreeRecord] = None

    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue

        if line.startswith("worktree "):
            current = WorktreeRecord(
                path=line[len("worktree "):],
                is_main=not records,
            )
            records.append(current)
        elif current is None:
            # Attribute line before any worktree line
            continue
        elif line.startswith("branch "):
            branch_ref = line[len("branch "):]
            if branch_ref.startswith(BRANCH_REF_PREFIX):
                branch_ref = branch_ref[len(BRANCH_REF_PREFIX):]
            current.branch = branch_ref
        elif line.startswith("HEAD "):
            current.head = line[len("HEAD "):]
        elif line == "detached":
            current.is_detached = True
        elif line == "bare":
            current.is_bare = True

    return records


class WorktreeService:
    """Service for querying and mutating git worktrees."""

    def __init__(self, repo_path: str):
        """Initialize the worktree service.

        Args:
            repo_path: Path inside the git repository
        """
        self.repo_path = repo_path

    def _get_repo(self) -> git.Repo:
        return open_repo(self.repo_path)

    def list_worktrees(self) -> List[WorktreeRecord]:
        """Get all worktrees of the repository, main working tree first.

        Raises:
            NotARepositoryError: If not inside a repository
            GitOperationError: If git cannot list the worktrees
        """
        repo = self._get_repo()
        try:
            output = repo.git.worktree("list", "--porcelain")
        except git.exc.GitCommandError as e:
            raise GitOperationError.from_command_error("worktree list", e) from e

        records = parse_worktree_porcelain(output)
        logger.debug(f"Found {len(records)} worktrees")
        for record in records:
            logger.debug(f"  {record}")
        return records

    def find_main_worktree(self) -> Optional[WorktreeRecord]:
        """Return the main working tree.

        Relies on git always listing the main working tree first.
        """
        records = self.list_worktrees()
        return records[0] if records else None

    def find_worktree(self, path: str) -> Optional[WorktreeRecord]:
        """Return the listed worktree whose directory is `path`, if any."""
        wanted = os.path.realpath(path)
        for record in self.list_worktrees():
            if os.path.realpath(record.path) == wanted:
                return record
        return None

    def add_worktree(self, path: str, branch_name: str, create_branch: bool) -> None:
        """Create a worktree at `path` for `branch_name`.

        Args:
            path: Directory for the new worktree
            branch_name: Branch to check out in it
            create_branch: Create `branch_name` as a new branch instead of binding
                to an existing one
        """
        repo = self._get_repo()
        if create_branch:
            args = ["add", "-b", branch_name, path]
        else:
            args = ["add", path, branch_name]

        try:
            repo.git.worktree(*args)
        except git.exc.GitCommandError as e:
            error = GitOperationError.from_command_error("worktree add", e)
            logger.error(f"Failed to add worktree at {path}: {error}")
            raise error from e

        logger.info(f"Added worktree at {path} for branch {branch_name}")

    def remove_worktree(self, path: str, force: bool = True) -> None:
        """Remove the worktree at `path`. The branch it had checked out is kept.

        Args:
            path: Path to the worktree directory
            force: Discard uncommitted changes in the worktree
        """
        repo = self._get_repo()
        args = ["remove", path]
        if force:
            args.append("--force")

        try:
            repo.git.worktree(*args)
        except git.exc.GitCommandError as e:
            error = GitOperationError.from_command_error("worktree remove", e)
            logger.error(f"Failed to remove worktree at {path}: {error}")
            raise error from e

        logger.info(f"Removed worktree at {path}")
