"""Pytest fixtures for git-spawn tests"""
import tempfile
from pathlib import Path
import pytest
import git


def make_repo(repo_path: Path) -> git.Repo:
    """Initialize a repository with one commit on 'main'."""
    repo_path.mkdir(parents=True)
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')
    return repo


@pytest.fixture
def repo_factory():
    """Create extra repositories inside a test."""
    return make_repo


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Configuration that never replaces the test process with a shell."""
    return {
        'protected_branches': ['main', 'master'],
        'shell': '/bin/sh',
        'spawn_shell': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with untracked local files to share."""
    repo_path = temp_dir / "test_repo"
    repo = make_repo(repo_path)

    (repo_path / ".env").write_text("SECRET=1\n")
    (repo_path / "config").mkdir()
    (repo_path / "config" / "local.json").write_text('{"debug": true}\n')

    yield repo

    repo.close()


@pytest.fixture
def repo_path(git_repo):
    """Working directory of the test repository."""
    return Path(git_repo.working_dir)


@pytest.fixture
def managed_worktree(git_repo, repo_path):
    """A worktree following the <repo>-<branch> convention, on branch 'feature-x'."""
    worktree_path = repo_path.parent / "test_repo-feature-x"
    git_repo.git.worktree("add", "-b", "feature-x", str(worktree_path))
    return worktree_path
