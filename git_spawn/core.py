"""Core functionality for git-spawn"""

import os
from typing import Iterable, List, Optional, Union

from rich.console import Console
from rich.markup import escape

from git_spawn.config import Config
from git_spawn.exceptions import (
    NotManagedWorktreeError,
    ProtectedBranchError,
    WorktreeExistsError,
)
from git_spawn.logging_config import get_logger
from git_spawn.models.intent import FileMode
from git_spawn.models.worktree import WorktreeRecord, sanitize_branch_name
from git_spawn.services.display_service import DisplayService
from git_spawn.services.file_linker import FileLinker
from git_spawn.services.git import GitOperations, WorktreeService
from git_spawn.utils.shell import hand_off_to_shell

console = Console()
logger = get_logger(__name__)


class WorktreeManager:
    """Creates, tears down and reports the worktrees git-spawn manages."""

    def __init__(self, cwd: str, config: Union[Config, dict, None] = None):
        """Initialize WorktreeManager.

        Args:
            cwd: Directory the command was invoked from
            config: Configuration dict or Config object
        """
        self.cwd = cwd
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.git_ops = GitOperations(cwd)
        self.worktree_service = self.git_ops.worktree_service
        self.display_service = DisplayService()

    def _finish(self, directory: str) -> str:
        """Land the user in `directory`: exec a shell there, or just return it."""
        if self.config.spawn_shell:
            # With --no-shell the caller prints the bare directory instead
            console.print(f"[green]Opening shell in[/green] {escape(directory)}")
            hand_off_to_shell(directory, self.config.shell)
        return directory

    def _require_managed_worktree(self) -> WorktreeRecord:
        """The listed, managed worktree the command was run from."""
        record = self.worktree_service.find_worktree(self.cwd)
        if record is None or not record.is_managed:
            raise NotManagedWorktreeError(self.cwd)
        return record

    def target_directory(self, branch_name: str) -> str:
        """Sibling directory ../<repo>-<branch> for a new worktree."""
        repo_root = self.git_ops.get_repo_root()
        repo_name = os.path.basename(repo_root)
        return os.path.join(
            os.path.dirname(repo_root),
            f"{repo_name}-{sanitize_branch_name(branch_name)}",
        )

    def create(
        self,
        branch_name: str,
        file_mode: FileMode = FileMode.NONE,
        files: Iterable[str] = (),
    ) -> str:
        """Create a worktree for `branch_name`, optionally sharing or cloning files into it.

        The branch is created when it does not exist locally. If linking files
        fails the worktree is left in place.

        Returns:
            The new worktree directory (only when no shell is spawned)
        """
        self.git_ops.validate_branch_name(branch_name)
        target = self.target_directory(branch_name)
        if os.path.exists(target):
            raise WorktreeExistsError(target)

        main_repo_root = self.git_ops.get_main_repo_root()

        if self.git_ops.branch_exists(branch_name):
            console.print(f"Using existing branch [cyan]{escape(branch_name)}[/cyan]")
            self.worktree_service.add_worktree(target, branch_name, create_branch=False)
        else:
            console.print(f"Creating branch [cyan]{escape(branch_name)}[/cyan]")
            self.worktree_service.add_worktree(target, branch_name, create_branch=True)

        os.chdir(target)

        linker = FileLinker(target)
        if file_mode == FileMode.SHARE:
            linker.create_symlinks(files, main_repo_root)
        elif file_mode == FileMode.CLONE:
            linker.copy_files(files, main_repo_root)

        return self._finish(target)

    def cleanup(self) -> str:
        """Remove the worktree the command was run from and return to the main repository.

        The worktree is removed with --force, discarding uncommitted changes.
        Its branch is never deleted.

        Returns:
            The main repository directory (only when no shell is spawned)
        """
        record = self._require_managed_worktree()
        main_repo_root = self.git_ops.get_main_repo_root()
        branch = self.git_ops.get_current_branch()

        os.chdir(main_repo_root)
        WorktreeService(main_repo_root).remove_worktree(record.path, force=True)

        console.print(f"[green]Removed worktree[/green] {escape(record.path)}")
        if branch:
            console.print(f"Branch [cyan]{escape(branch)}[/cyan] was kept")
        return self._finish(main_repo_root)

    def _bring_files(self, files: Iterable[str], file_mode: FileMode) -> List[str]:
        branch: Optional[str] = self.git_ops.get_current_branch()
        if branch in self.config.protected_branches:
            raise ProtectedBranchError(branch)
        record = self._require_managed_worktree()

        main_repo_root = self.git_ops.get_main_repo_root()
        linker = FileLinker(record.path)
        if file_mode == FileMode.SHARE:
            return linker.create_symlinks(files, main_repo_root)
        return linker.copy_files(files, main_repo_root)

    def share(self, files: Iterable[str]) -> List[str]:
        """Symlink files from the main repository into the current worktree."""
        return self._bring_files(files, FileMode.SHARE)

    def clone(self, files: Iterable[str]) -> List[str]:
        """Copy files from the main repository into the current worktree."""
        return self._bring_files(files, FileMode.CLONE)

    def list_worktrees(self) -> int:
        """Print the managed worktrees. Returns how many were shown."""
        return self.display_service.show_worktrees(self.worktree_service.list_worktrees())
