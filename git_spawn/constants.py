"""Shared constants for git-spawn."""

PROG_NAME = "git-spawn"

# Commands recognised as the first argument
CMD_CLEANUP = "cleanup"
CMD_LIST = "list"
CMD_SHARE = "share"
CMD_CLONE = "clone"

DEFAULT_PROTECTED_BRANCHES = ["main", "master"]

ARROW = "→"
DETACHED_LABEL = "(detached)"
NO_WORKTREES_MESSAGE = "No active worktrees found"

USAGE_TEXT = f"""\
Usage:
  {PROG_NAME} <branch-name> [--share f1,f2] [--clone f1,f2]
                               Create ../<repo>-<branch> with branch <branch> and open a shell in it
  {PROG_NAME} share f1,f2,...  Symlink files from the main repository into this worktree
  {PROG_NAME} clone f1,f2,...  Copy files from the main repository into this worktree
  {PROG_NAME} cleanup          Remove this worktree (the branch is kept) and return to the main repository
  {PROG_NAME} list             List active worktrees
  {PROG_NAME} --help           Show this help

Options:
  -v, --verbose  Show informational log messages
  --debug        Show debug log messages and write them to ~/.git-spawn/git-spawn.log
  --no-shell     Print the target directory instead of opening a shell
  --version      Show the version

Examples:
  {PROG_NAME} feature/add-auth --share .env,config/local.json
  {PROG_NAME} fix-bug --clone .env
"""
