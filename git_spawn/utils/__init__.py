"""Utility functions for git-spawn.

This package provides utility modules:
- shell: Process hand-off to an interactive shell
"""

from .shell import hand_off_to_shell

__all__ = ["hand_off_to_shell"]
