"""Command-line entry point for git-spawn"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from git_spawn.__version__ import __version__
from git_spawn.config import Config
from git_spawn.constants import PROG_NAME, USAGE_TEXT
from git_spawn.core import WorktreeManager
from git_spawn.exceptions import GitSpawnError, UsageError
from git_spawn.logging_config import get_logger, setup_logging
from git_spawn.models.intent import Command, Intent
from git_spawn.cli.args import parse_args

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _dispatch(intent: Intent, manager: WorktreeManager) -> int:
    if intent.command == Command.CREATE:
        directory = manager.create(intent.branch_name, intent.file_mode, intent.files)
        console.print(directory, markup=False, highlight=False, soft_wrap=True)
    elif intent.command == Command.CLEANUP:
        directory = manager.cleanup()
        console.print(directory, markup=False, highlight=False, soft_wrap=True)
    elif intent.command == Command.SHARE:
        manager.share(intent.files)
    elif intent.command == Command.CLONE:
        manager.clone(intent.files)
    elif intent.command == Command.LIST:
        manager.list_worktrees()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application.

    Returns:
        Process exit status
    """
    if argv is None:
        argv = sys.argv[1:]

    debug = False
    try:
        intent = parse_args(argv)
        debug = intent.debug

        if intent.command == Command.HELP:
            console.print(USAGE_TEXT, markup=False, highlight=False)
            return 0
        if intent.command == Command.VERSION:
            console.print(f"{PROG_NAME} {__version__}", markup=False, highlight=False)
            return 0

        setup_logging(verbose=intent.verbose, debug=intent.debug)

        config = Config(
            spawn_shell=intent.spawn_shell,
            verbose=intent.verbose,
            debug=intent.debug,
        )
        if intent.debug:
            logger.debug(f"Intent: {intent}")
            for key, value in config.to_dict().items():
                logger.debug(f"  {key}: {value}")

        manager = WorktreeManager(os.getcwd(), config)
        return _dispatch(intent, manager)
    except UsageError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        err_console.print(USAGE_TEXT, markup=False, highlight=False)
        return e.exit_code
    except GitSpawnError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if debug:
            err_console.print_exception()
        return e.exit_code
    except OSError as e:
        # Filesystem failures while linking files or starting the shell
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if debug:
            err_console.print_exception()
        return 1
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
