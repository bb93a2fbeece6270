"""Git operations service"""

import os
from typing import Optional

import git

from git_spawn.exceptions import GitOperationError, UsageError
from git_spawn.logging_config import get_logger
from git_spawn.services.git.repo import open_repo
from git_spawn.services.git.worktrees import WorktreeService

logger = get_logger(__name__)


class GitOperations:
    """Service for repository-level git queries."""

    def __init__(self, repo_path: str):
        """Initialize the service.

        Args:
            repo_path: Path inside the git repository (string path, not repo object)
        """
        self.repo_path = repo_path
        self.worktree_service = WorktreeService(repo_path)

    def _get_repo(self) -> git.Repo:
        return open_repo(self.repo_path)

    def _rev_parse(self, *args: str) -> str:
        repo = self._get_repo()
        try:
            return repo.git.rev_parse(*args).strip()
        except git.exc.GitCommandError as e:
            raise GitOperationError.from_command_error("rev-parse", e) from e

    def get_repo_root(self) -> str:
        """Top-level directory of the working tree containing repo_path.

        Raises:
            NotARepositoryError: If repo_path is not inside a repository
        """
        return os.path.normpath(self._rev_parse("--show-toplevel"))

    def get_main_repo_root(self) -> str:
        """Directory of the main checkout that all worktrees were spawned from.

        Resolved from git's common directory; when that is not a `.git` directory
        (e.g. a bare repository) the first worktree git lists is used instead.
        """
        repo = self._get_repo()
        common_dir = self._rev_parse("--git-common-dir")
        if not os.path.isabs(common_dir):
            common_dir = os.path.join(repo.working_dir, common_dir)
        common_dir = os.path.normpath(common_dir)

        if os.path.basename(common_dir) == ".git":
            main_root = os.path.dirname(common_dir)
            logger.debug(f"Main repository resolved from common dir: {main_root}")
            return main_root

        main_worktree = self.worktree_service.find_main_worktree()
        if main_worktree is not None:
            logger.debug(f"Main repository resolved from worktree list: {main_worktree.path}")
            return main_worktree.path
        return self.get_repo_root()

    def branch_exists(self, branch_name: str) -> bool:
        """Check whether `branch_name` exists as a local branch."""
        repo = self._get_repo()
        try:
            repo.git.show_ref("--verify", "--quiet", f"refs/heads/{branch_name}")
            return True
        except git.exc.GitCommandError:
            return False

    def get_current_branch(self) -> Optional[str]:
        """Name of the checked out branch, None on a detached HEAD."""
        repo = self._get_repo()
        try:
            return repo.active_branch.name
        except TypeError:
            logger.debug("HEAD is detached")
            return None

    def validate_branch_name(self, branch_name: str) -> None:
        """Reject names git would not accept as a branch.

        Raises:
            UsageError: If the branch name is invalid
        """
        repo = self._get_repo()
        try:
            repo.git.check_ref_format("--branch", branch_name)
        except git.exc.GitCommandError as e:
            raise UsageError(f"Invalid branch name: '{branch_name}'") from e
