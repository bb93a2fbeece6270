"""Repository access shared by the git services."""

import git

from git_spawn.exceptions import NotARepositoryError


def open_repo(path: str) -> git.Repo:
    """Open the repository containing `path`.

    GitPython repos are lightweight - they don't clone, just open the existing repo,
    so a fresh instance is created for every call.

    Raises:
        NotARepositoryError: If `path` is not inside a git repository
    """
    try:
        return git.Repo(path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise NotARepositoryError(path) from e
