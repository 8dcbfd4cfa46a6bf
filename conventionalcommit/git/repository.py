"""GitPython wrapper for reading raw commit messages."""

from pathlib import Path
from typing import Iterator, Optional

from git import Repo
from git.exc import (
    BadName,
    BadObject,
    GitCommandError,
    InvalidGitRepositoryError,
    NoSuchPathError,
)

from conventionalcommit.message import EmptyMessageError, MessageParser
from conventionalcommit.models import Message


class GitRepositoryError(Exception):
    """Exception raised for git repository errors."""

    pass


class GitRepository:
    """Wrapper around GitPython for reading commit messages.

    Messages are handed over as raw bytes so they go through the same
    parsing path as messages read from a file or stdin.
    """

    def __init__(self, path: str):
        """Initialize the repository wrapper.

        Args:
            path: Path to the git repository

        Raises:
            GitRepositoryError: If path is not a valid git repository
        """
        self.path = Path(path)
        self._parser = MessageParser()

        try:
            self._repo = Repo(self.path)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise GitRepositoryError(f"Not a git repository: {path}")

    @property
    def name(self) -> str:
        """Get the repository name from the directory."""
        return self.path.resolve().name

    def iter_messages(
        self,
        rev: Optional[str] = None,
        max_count: Optional[int] = None,
    ) -> Iterator[tuple[str, bytes]]:
        """Iterate over raw commit messages, newest first.

        Args:
            rev: Revision to start from (default: HEAD)
            max_count: Maximum number of commits to read

        Yields:
            (sha, message) tuples
        """
        kwargs = {}
        if max_count:
            kwargs["max_count"] = max_count

        try:
            for git_commit in self._repo.iter_commits(rev=rev, **kwargs):
                yield git_commit.hexsha, self._raw_message(git_commit)
        except (GitCommandError, ValueError) as e:
            raise GitRepositoryError(f"Git command failed: {e}")

    def parse_commits(
        self,
        rev: Optional[str] = None,
        max_count: Optional[int] = None,
    ) -> Iterator[tuple[str, Message]]:
        """Iterate over parsed commit messages, newest first.

        Commits with an empty message are skipped.

        Yields:
            (sha, Message) tuples
        """
        for sha, raw in self.iter_messages(rev=rev, max_count=max_count):
            try:
                yield sha, self._parser.parse(raw)
            except EmptyMessageError:
                continue

    def get_message(self, sha: str) -> Optional[bytes]:
        """Get the raw message of a specific commit.

        Args:
            sha: Full or abbreviated commit SHA, or any revision

        Returns:
            Message bytes or None if the revision is not found
        """
        try:
            git_commit = self._repo.commit(sha)
            return self._raw_message(git_commit)
        except (BadName, BadObject, GitCommandError, ValueError):
            return None

    @staticmethod
    def _raw_message(git_commit) -> bytes:
        """Encode a commit message back into the commit's own encoding."""
        message = git_commit.message
        if isinstance(message, bytes):
            return message
        return message.encode(git_commit.encoding or "utf-8", errors="surrogateescape")
