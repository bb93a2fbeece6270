"""Allow running as `python -m git_spawn`."""

from git_spawn.cli.main import run

run()
