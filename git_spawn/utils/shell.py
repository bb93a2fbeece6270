"""Hand the terminal over to an interactive shell."""

import os

from git_spawn.logging_config import get_logger

logger = get_logger(__name__)


def hand_off_to_shell(directory: str, shell: str) -> None:
    """Replace the current process with `shell` running in `directory`.

    Does not return on success.
    """
    os.chdir(directory)
    logger.debug(f"Starting {shell} in {directory}")
    os.execvp(shell, [shell])
