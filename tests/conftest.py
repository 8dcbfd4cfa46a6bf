"""Shared pytest fixtures for conventionalcommit tests."""

import subprocess

import pytest

from conventionalcommit.message import MessageParser


def git(repo_path, *args):
    """Run a git command inside repo_path."""
    subprocess.run(["git", *args], cwd=repo_path, capture_output=True, check=True)


@pytest.fixture
def parser():
    """Create a parser instance."""
    return MessageParser()


@pytest.fixture
def full_message():
    """Commit message with subject, body and every kind of footer."""
    return b"""feat(token): change a thing

more stuff
and more

BREAKING CHANGE: will blow up
BREAKING-CHANGE: maybe not
Fixes #349
Reverts #SOL-934
Approved-by: John Carter
ReviewedBy: Noctis
"""


@pytest.fixture
def mixed_breaks_message():
    """Commit message mixing LF, CRLF and CR line breaks."""
    return b"fix: a broken thing\r\n\r\nIt is now fixed.\rReally.\n\nFixes #12\r\n"


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a temporary git repository with sample commits."""
    repo_path = tmp_path / "test_repo"
    repo_path.mkdir()

    git(repo_path, "init")
    git(repo_path, "config", "user.email", "test@example.com")
    git(repo_path, "config", "user.name", "Test Author")
    git(repo_path, "config", "commit.gpgsign", "false")

    messages = [
        "chore: initial commit\n\nSome setup",
        "feat(core)!: add main function\n\nBREAKING CHANGE: main moved",
        "fix(core): update greeting\n\nCo-Authored-By: Claude <claude@anthropic.com>\nFixes #42",
        "added helper function",
    ]

    for n, message in enumerate(messages):
        (repo_path / f"file{n}.txt").write_text(f"{n}\n")
        git(repo_path, "add", ".")
        git(repo_path, "commit", "-m", message)

    return repo_path
