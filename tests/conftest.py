"""Shared test fixtures."""

import hashlib
import tempfile
from pathlib import Path

import git
import pytest
import structlog

from gitrangelog.history import MemoryHistoryStore
from gitrangelog.models import ReportConfig


def oid(name: str) -> str:
    """Deterministic 40 character hex id for a readable commit name."""
    return hashlib.sha1(name.encode("utf-8")).hexdigest()


@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI points structlog at the runner's stderr; undo that after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def linear_store():
    """History start -> X -> Y -> end, with refs pointing at start and end."""
    store = MemoryHistoryStore()
    store.add_commit(oid("start"), [], author_name="alice", message="Initial commit")
    store.add_commit(oid("X"), [oid("start")], author_name="bob", message="Add feature X\n\nDetails")
    store.add_commit(oid("Y"), [oid("X")], author_name="alice", message="Fix Y")
    store.add_commit(oid("end"), [oid("Y")], author_name="carol", message="Release prep")
    store.add_reference("refs/heads/master", oid("start"))
    store.add_reference("refs/heads/develop", oid("end"))
    store.add_symbolic_reference("HEAD", "refs/heads/develop")
    return store


@pytest.fixture
def report_config():
    """Report configuration with example.com URL templates."""
    return ReportConfig(
        projectName="Campaign Manager Service",
        projectRepoURL="https://gitlab.example.com/team/service",
        diffURLTemplate="https://gitlab.example.com/team/service/-/compare/{StartCommitID}...{EndCommitID}",
        commitURLTemplate="https://gitlab.example.com/team/service/-/commit/{CommitID}",
        commitHashDigits=8,
    )


@pytest.fixture
def test_repo():
    """Create a temporary Git repository for testing.

    History on master: Initial commit -> Add main.py -> Fix: Update hello message,
    with a lightweight tag v0.1 and an annotated tag v0.2 on the first two commits.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        repo = git.Repo.init(repo_path, initial_branch="master")

        # Configure git
        repo.config_writer().set_value("user", "name", "Test User").release()
        repo.config_writer().set_value("user", "email", "test@example.com").release()

        # Create initial commit
        (repo_path / "README.md").write_text("# Test Project\n")
        repo.index.add(["README.md"])
        repo.index.commit("Initial commit")
        repo.create_tag("v0.1")

        # Create second commit
        (repo_path / "main.py").write_text("def hello():\n    print('Hello, World!')\n")
        repo.index.add(["main.py"])
        repo.index.commit("Add main.py")
        repo.create_tag("v0.2", message="Release 0.2")

        # Create third commit
        (repo_path / "main.py").write_text("def hello():\n    print('Hello, changelog!')\n")
        repo.index.add(["main.py"])
        repo.index.commit("Fix: Update hello message")

        yield repo_path
