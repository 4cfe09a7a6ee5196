"""Pytest fixtures for git-branch-health tests"""
import tempfile
from pathlib import Path
import pytest
import git

from git_branch_health.exceptions import CommandFailure
from git_branch_health.services.git import GitGateway


class FakeGateway(GitGateway):
    """Gateway answering from canned outputs instead of running git.

    responses maps an args tuple to its stdout, or to an exception to raise.
    Commands without a canned response fail like an unknown ref would.
    """

    def __init__(self, responses=None, repo_path="/fake/repo"):
        super().__init__(repo_path)
        self.responses = dict(responses or {})
        self.calls = []

    def run(self, *args):
        self.calls.append(args)
        if args not in self.responses:
            raise CommandFailure(args, self.repo_path, f"fatal: no canned response for {' '.join(args)}", 128)
        response = self.responses[args]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_gateway():
    """Factory for gateways with canned git output."""
    def _make(responses=None):
        return FakeGateway(responses)
    return _make


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'fetch': False,
        'sequential': False,
        'workers': None,
        'dry_run': False,
        'force_delete': False,
        'verbose': False,
        'debug': False,
        'github_token': None,
    }


def commit_file(repo, filename, content, message):
    """Write a file in the working copy and commit it."""
    path = Path(repo.working_dir) / filename
    path.write_text(content)
    repo.index.add([filename])
    return repo.index.commit(message)


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with a local bare origin.

    main is pushed and origin/HEAD points at origin/main, so fetch and the
    remote-tracking refs work without network access.
    """
    origin_path = temp_dir / "origin.git"
    origin = git.Repo.init(origin_path, bare=True)

    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")
    repo.git.branch('-M', 'main')

    repo.create_remote('origin', str(origin_path))
    repo.git.push('-u', 'origin', 'main')
    repo.git.remote('set-head', 'origin', 'main')

    yield repo

    # Cleanup
    repo.close()
    origin.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Create a repository with develop and a few feature branches.

    - develop: three commits ahead of main (including the merge), pushed
    - feature/ahead: two commits on top of develop, not merged
    - feature/merged: merged into develop with --no-ff, pushed
    - feature/stale: branched from main, then develop moved on
    """
    repo = git_repo

    repo.git.checkout('-b', 'develop')
    commit_file(repo, "develop.txt", "develop\n", "Start develop")

    repo.git.checkout('-b', 'feature/merged')
    commit_file(repo, "merged.txt", "merged\n", "Feature to merge")
    repo.git.checkout('develop')
    repo.git.merge('feature/merged', '--no-ff', '-m', 'Merge feature/merged')
    repo.git.push('-u', 'origin', 'develop')

    repo.git.checkout('-b', 'feature/ahead')
    commit_file(repo, "ahead1.txt", "one\n", "Ahead one")
    commit_file(repo, "ahead2.txt", "two\n", "Ahead two")

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature/stale')
    commit_file(repo, "stale.txt", "stale\n", "Stale work")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def conflicting_repo(git_repo):
    """Create a repository where feature/conflict and main edit the same line."""
    repo = git_repo

    commit_file(repo, "file.txt", "line one\nshared line\nline three\n", "Add file")
    repo.git.push('origin', 'main')

    repo.git.checkout('-b', 'feature/conflict')
    commit_file(repo, "file.txt", "line one\nfeature version\nline three\n", "Feature edit")

    repo.git.checkout('main')
    commit_file(repo, "file.txt", "line one\nmain version\nline three\n", "Main edit")
    repo.git.push('origin', 'main')

    repo.git.checkout('-b', 'feature/clean', 'main~1')
    commit_file(repo, "other.txt", "unrelated\n", "Unrelated change")

    repo.git.checkout('main')

    yield repo


@pytest.fixture
def commit():
    """Helper that writes and commits a file: commit(repo, filename, content, message)."""
    return commit_file
