"""Configuration handling for git-spawn"""

import os
from dataclasses import dataclass, field
from typing import List

from git_spawn.constants import DEFAULT_PROTECTED_BRANCHES

DEFAULT_SHELL = "/bin/sh"


def _default_shell() -> str:
    return os.environ.get("SHELL") or DEFAULT_SHELL


@dataclass
class Config:
    """Configuration for git-spawn with validation."""

    # Branches on which share/clone are refused
    protected_branches: List[str] = field(default_factory=lambda: list(DEFAULT_PROTECTED_BRANCHES))

    # Interactive shell handed control after create/cleanup
    shell: str = field(default_factory=_default_shell)
    spawn_shell: bool = True  # False = print the directory instead of exec'ing a shell

    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_protected_branches()
        self._validate_shell()

    def _validate_protected_branches(self):
        """Validate protected_branches list."""
        if not isinstance(self.protected_branches, list):
            raise ValueError("protected_branches must be a list")
        self.protected_branches = [b.strip() for b in self.protected_branches if b and b.strip()]

    def _validate_shell(self):
        """Validate shell is not empty."""
        if not self.shell or not self.shell.strip():
            raise ValueError("shell cannot be empty")
        self.shell = self.shell.strip()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "protected_branches": self.protected_branches,
            "shell": self.shell,
            "spawn_shell": self.spawn_shell,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "protected_branches",
            "shell",
            "spawn_shell",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
