"""Share (symlink) or clone (copy) files from the main checkout into a worktree."""

import os
import shutil
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

from git_spawn.exceptions import MissingSourceFileError, UnsafeFilePathError
from git_spawn.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


def parse_file_list(raw: str) -> List[str]:
    """Split a comma-separated file list, trimming whitespace and dropping empty entries."""
    return [entry.strip() for entry in raw.split(",") if entry.strip()]


class FileLinker:
    """Links or copies files, relative to the main checkout, into a destination worktree.

    Files are processed in order. A missing source aborts the remaining list;
    files handled before it are left in place.
    """

    def __init__(self, destination: Optional[str] = None):
        """
        Args:
            destination: Worktree directory to place files in (current directory by default)
        """
        self.destination = destination

    def _target_root(self) -> str:
        return self.destination or os.getcwd()

    def _check_contained(self, relative: str, source: str, target: str):
        """Reject entries that escape the worktree or resolve onto their own source.

        The target's parent is resolved rather than the target itself, so an
        existing shared link is still replaced in place.
        """
        normalized = os.path.normpath(relative)
        if os.path.isabs(relative) or normalized == os.pardir or normalized.startswith(os.pardir + os.sep):
            raise UnsafeFilePathError(relative, "path must be relative to the repository root")

        root = os.path.realpath(self._target_root())
        resolved_target = os.path.join(
            os.path.realpath(os.path.dirname(target)), os.path.basename(target)
        )
        if os.path.commonpath([root, resolved_target]) != root:
            raise UnsafeFilePathError(relative, "target lies outside the worktree")
        if resolved_target == os.path.realpath(source):
            raise UnsafeFilePathError(relative, "target is the main repository's own file")

    def _prepare(self, file: str, main_repo_root: str):
        """Resolve source and target for one entry and create the target's parent directories."""
        relative = file.strip()
        source = os.path.join(main_repo_root, relative)
        target = os.path.join(self._target_root(), relative)
        self._check_contained(relative, source, target)

        if not os.path.isfile(source):
            raise MissingSourceFileError(source)

        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return relative, os.path.abspath(source), target

    def create_symlinks(self, files: Iterable[str], main_repo_root: str) -> List[str]:
        """Symlink each file to its absolute path in the main checkout.

        Returns:
            Paths of the links created
        """
        created = []
        for file in files:
            relative, source, target = self._prepare(file, main_repo_root)
            if os.path.lexists(target) and not os.path.isdir(target):
                os.remove(target)
            os.symlink(source, target)
            logger.debug(f"Linked {target} -> {source}")
            console.print(f"[green]Linked[/green] {escape(relative)} -> {escape(source)}")
            created.append(target)
        return created

    def copy_files(self, files: Iterable[str], main_repo_root: str) -> List[str]:
        """Copy each file from the main checkout, overwriting existing copies.

        Returns:
            Paths of the files written
        """
        created = []
        for file in files:
            relative, source, target = self._prepare(file, main_repo_root)
            if os.path.islink(target):
                # Replace a shared link instead of writing through it into the main checkout
                os.remove(target)
            shutil.copy2(source, target)
            logger.debug(f"Copied {source} -> {target}")
            console.print(f"[green]Copied[/green] {escape(relative)}")
            created.append(target)
        return created
