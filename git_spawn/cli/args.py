"""Command-line argument parsing for git-spawn."""

import argparse
from typing import List, Optional, Sequence

from git_spawn.constants import (
    CMD_CLEANUP,
    CMD_CLONE,
    CMD_LIST,
    CMD_SHARE,
    PROG_NAME,
)
from git_spawn.exceptions import UsageError
from git_spawn.models.intent import Command, FileMode, Intent
from git_spawn.services.file_linker import parse_file_list

HELP_FLAGS = ("-h", "--help")
VERSION_FLAG = "--version"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def _common_options() -> argparse.ArgumentParser:
    parser = _ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", action="store_true", dest="help")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--no-shell", action="store_true", dest="no_shell")
    return parser


def _build_parser(command: Optional[str]) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=f"{PROG_NAME} {command}" if command else PROG_NAME,
        allow_abbrev=False,
        add_help=False,
        parents=[_common_options()],
    )
    if command in (CMD_SHARE, CMD_CLONE):
        parser.add_argument("files", nargs="?")
    elif command is None:
        parser.add_argument("branch_name")
        parser.add_argument("--share", metavar="FILES")
        parser.add_argument("--clone", metavar="FILES")
    return parser


def _file_mode(options: argparse.Namespace) -> FileMode:
    if options.share is not None and options.clone is not None:
        raise UsageError("Cannot use both --share and --clone")
    if options.share is not None:
        return FileMode.SHARE
    if options.clone is not None:
        return FileMode.CLONE
    return FileMode.NONE


def _files_for(command: str, raw: Optional[str]) -> List[str]:
    if raw is None:
        raise UsageError(f"'{command}' requires a comma-separated list of files")
    files = parse_file_list(raw)
    if not files:
        raise UsageError(f"'{command}' requires at least one file")
    return files


def parse_args(argv: Sequence[str]) -> Intent:
    """Parse command-line arguments into an Intent.

    The first argument selects the command; anything that is not a command
    word or an option is taken as the branch name of a worktree to create.

    Raises:
        UsageError: On missing, unknown or conflicting arguments
    """
    argv = list(argv)
    if not argv:
        raise UsageError("Missing command or branch name")

    first = argv[0]
    if first in HELP_FLAGS:
        return Intent(command=Command.HELP)
    if first == VERSION_FLAG:
        return Intent(command=Command.VERSION)

    if first in (CMD_CLEANUP, CMD_LIST, CMD_SHARE, CMD_CLONE):
        options = _build_parser(first).parse_args(argv[1:])
    elif first.startswith("-"):
        raise UsageError(f"Unknown option: {first}")
    else:
        options = _build_parser(None).parse_args(argv)

    if options.help:
        return Intent(command=Command.HELP)

    common = dict(
        verbose=options.verbose,
        debug=options.debug,
        spawn_shell=not options.no_shell,
    )

    if first == CMD_CLEANUP:
        return Intent(command=Command.CLEANUP, **common)
    if first == CMD_LIST:
        return Intent(command=Command.LIST, **common)
    if first == CMD_SHARE:
        return Intent(
            command=Command.SHARE,
            files=tuple(_files_for(first, options.files)),
            file_mode=FileMode.SHARE,
            **common,
        )
    if first == CMD_CLONE:
        return Intent(
            command=Command.CLONE,
            files=tuple(_files_for(first, options.files)),
            file_mode=FileMode.CLONE,
            **common,
        )

    file_mode = _file_mode(options)
    files: List[str] = []
    if file_mode == FileMode.SHARE:
        files = _files_for("--share", options.share)
    elif file_mode == FileMode.CLONE:
        files = _files_for("--clone", options.clone)

    return Intent(
        command=Command.CREATE,
        branch_name=options.branch_name,
        files=tuple(files),
        file_mode=file_mode,
        **common,
    )
