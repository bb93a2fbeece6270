"""Custom exceptions for git-spawn"""

from typing import Optional


class GitSpawnError(Exception):
    """Base exception for all git-spawn errors."""

    exit_code = 1


class UsageError(GitSpawnError):
    """Exception raised for malformed or conflicting command-line input."""
    pass


class NotARepositoryError(GitSpawnError):
    """Exception raised when the working directory is not inside a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository: {path}")


class WorktreeExistsError(GitSpawnError):
    """Exception raised when the target worktree directory already exists."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory already exists: {path}")


class NotManagedWorktreeError(GitSpawnError):
    """Exception raised when a command needs to run inside a git-spawn worktree."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not in a git-spawn managed worktree: {path}")


class ProtectedBranchError(GitSpawnError):
    """Exception raised when sharing or cloning files onto a protected branch."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"Cannot share or clone files on protected branch '{branch}'")


class MissingSourceFileError(GitSpawnError):
    """Exception raised when a file to share or clone is missing from the main checkout."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found in main repository: {path}")


class UnsafeFilePathError(GitSpawnError):
    """Exception raised when a file entry would resolve outside the worktree or onto its own source."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Refusing to share or clone '{path}': {reason}")


class GitOperationError(GitSpawnError):
    """Exception raised for errors in Git operations."""

    def __init__(
        self,
        operation: str,
        message: Optional[str] = None,
        status: Optional[int] = None,
    ):
        self.operation = operation
        self.message = message
        self.status = status

        error_msg = f"Git operation '{operation}' failed"
        if status is not None:
            error_msg += f" (exit {status})"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)

    @classmethod
    def from_command_error(cls, operation: str, error: Exception) -> "GitOperationError":
        """Build from a GitPython GitCommandError, keeping git's stderr and exit status."""
        stderr = (getattr(error, "stderr", None) or str(error)).strip()
        if stderr.startswith("stderr:"):
            stderr = stderr[len("stderr:"):].strip().strip("'").strip()
        status = getattr(error, "status", None)
        return cls(operation, stderr or None, status if isinstance(status, int) else None)

    @property
    def exit_code(self) -> int:
        """Exit status to propagate, git's own when it is usable."""
        if isinstance(self.status, int) and self.status > 0:
            return self.status
        return 1
