"""Git operations module."""

from conventionalcommit.git.repository import GitRepository, GitRepositoryError

__all__ = ["GitRepository", "GitRepositoryError"]
