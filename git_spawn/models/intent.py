"""Command intent model and related enums"""
from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Command(Enum):
    """Top-level command requested on the command line."""
    CREATE = "create"
    CLEANUP = "cleanup"
    LIST = "list"
    SHARE = "share"
    CLONE = "clone"
    HELP = "help"
    VERSION = "version"


class FileMode(Enum):
    """How files from the main checkout are brought into a new worktree."""
    NONE = "none"
    SHARE = "share"  # symlink
    CLONE = "clone"  # copy


@dataclass(frozen=True)
class Intent:
    """Normalized result of argument parsing."""
    command: Command
    branch_name: Optional[str] = None
    files: Tuple[str, ...] = ()
    file_mode: FileMode = FileMode.NONE
    verbose: bool = False
    debug: bool = False
    spawn_shell: bool = True
