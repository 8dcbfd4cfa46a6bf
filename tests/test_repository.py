"""Tests for GitRepository class."""

import pytest

from conventionalcommit.git import GitRepository, GitRepositoryError
from conventionalcommit.models import Footer, Reference


@pytest.fixture
def git_repo(temp_git_repo):
    """Create a GitRepository instance from temp repo."""
    return GitRepository(str(temp_git_repo))


class TestGitRepositoryInit:
    """Tests for GitRepository initialization."""

    def test_valid_repository(self, temp_git_repo):
        """Can initialize with valid git repository."""
        repo = GitRepository(str(temp_git_repo))
        assert repo.path == temp_git_repo

    def test_invalid_repository(self, tmp_path):
        """Raises error for non-git directory."""
        with pytest.raises(GitRepositoryError) as exc_info:
            GitRepository(str(tmp_path))

        assert "Not a git repository" in str(exc_info.value)

    def test_missing_path(self, tmp_path):
        """Raises error for a path that does not exist."""
        with pytest.raises(GitRepositoryError):
            GitRepository(str(tmp_path / "missing"))

    def test_repository_name(self, git_repo, temp_git_repo):
        """Repository name is derived from directory."""
        assert git_repo.name == temp_git_repo.name


class TestIterMessages:
    """Tests for iter_messages method."""

    def test_iter_all_messages(self, git_repo):
        """Can iterate over all commit messages."""
        messages = list(git_repo.iter_messages())

        assert len(messages) == 4

    def test_messages_are_bytes(self, git_repo):
        """Messages are raw bytes with a full SHA."""
        for sha, message in git_repo.iter_messages():
            assert len(sha) == 40
            assert isinstance(message, bytes)

    def test_messages_are_in_order(self, git_repo):
        """Messages are returned newest first."""
        messages = [message for _, message in git_repo.iter_messages()]

        assert messages[0].startswith(b"added helper")
        assert messages[-1].startswith(b"chore: initial commit")

    def test_max_count(self, git_repo):
        """max_count limits the number of messages."""
        assert len(list(git_repo.iter_messages(max_count=2))) == 2

    def test_unknown_revision(self, git_repo):
        """An unknown revision raises GitRepositoryError."""
        with pytest.raises(GitRepositoryError):
            list(git_repo.iter_messages(rev="no-such-branch"))


class TestGetMessage:
    """Tests for get_message method."""

    def test_get_head(self, git_repo):
        """HEAD resolves to the newest message."""
        assert git_repo.get_message("HEAD").startswith(b"added helper function")

    def test_get_by_sha(self, git_repo):
        """A commit can be looked up by SHA."""
        sha, message = next(git_repo.iter_messages())

        assert git_repo.get_message(sha) == message

    def test_unknown_sha(self, git_repo):
        """An unknown SHA returns None."""
        assert git_repo.get_message("0" * 40) is None


class TestParseCommits:
    """Tests for parsing commit messages read from the repository."""

    def test_all_commits_parsed(self, git_repo):
        """Every commit with a message is parsed."""
        assert len(list(git_repo.parse_commits())) == 4

    def test_breaking_commit(self, git_repo):
        """Breaking marker and footer are both found."""
        commits = [msg for _, msg in git_repo.parse_commits()]
        feat = next(msg for msg in commits if msg.type == "feat")

        assert feat.scope == "core"
        assert feat.breaking is True
        assert feat.breaking_changes == ["main moved"]
        assert feat.description == "add main function"

    def test_footers_and_references(self, git_repo):
        """Footers and references are sorted apart."""
        commits = [msg for _, msg in git_repo.parse_commits()]
        fix = next(msg for msg in commits if msg.type == "fix")

        assert fix.footers == [Footer(name="Co-Authored-By", value="Claude <claude@anthropic.com>")]
        assert fix.references == [Reference(name="Fixes", value="#42")]

    def test_non_conventional_commit(self, git_repo):
        """Non-conventional commits keep the subject as description."""
        commits = [msg for _, msg in git_repo.parse_commits()]

        assert commits[0].type == ""
        assert commits[0].description == "added helper function"
