"""Worktree data models."""

import os
import re
from dataclasses import dataclass
from typing import Optional

# <token>-<rest>, split on the first dash
MANAGED_NAME_PATTERN = re.compile(r"^([^-]+)-(.+)$")

# Directory that git keeps its own metadata in
GIT_METADATA_DIR = ".git"


def sanitize_branch_name(branch_name: str) -> str:
    """Replace path separators in a branch name so it can be used as a directory name."""
    return branch_name.replace("/", "-").replace("\\", "-")


def is_managed_name(name: str) -> bool:
    """Check whether a directory basename follows the <repo>-<branch> convention."""
    return MANAGED_NAME_PATTERN.match(name) is not None


@dataclass
class WorktreeRecord:
    """A single entry of `git worktree list --porcelain`."""

    path: str
    branch: Optional[str] = None
    head: Optional[str] = None
    is_main: bool = False  # First entry git lists
    is_detached: bool = False
    is_bare: bool = False

    @property
    def name(self) -> str:
        return os.path.basename(os.path.normpath(self.path))

    @property
    def is_metadata_path(self) -> bool:
        """True if the path lies inside git's own metadata storage."""
        parts = os.path.normpath(self.path).split(os.sep)
        return GIT_METADATA_DIR in parts

    @property
    def is_managed(self) -> bool:
        """True if this worktree looks like one git-spawn created."""
        return (
            not self.is_main
            and not self.is_metadata_path
            and is_managed_name(self.name)
        )

    @property
    def display_name(self) -> str:
        """Everything after the first dash of the directory name."""
        match = MANAGED_NAME_PATTERN.match(self.name)
        return match.group(2) if match else self.name

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = self.branch or "(detached)"
        main_marker = " (main)" if self.is_main else ""
        return f"{branch} @ {self.path}{main_marker}"
