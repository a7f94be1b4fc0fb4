"""
Git helpers for Commity.

Locates the repository the wizard runs in and, on request, records the
rendered message as a commit. All operations go through GitPython.
"""

import logging
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)


class VcsError(Exception):
    """Raised when a git operation cannot be completed."""

    pass


def find_git_repository(start_dir: Path) -> Path | None:
    """
    Find the nearest git work tree containing start_dir.

    Args:
        start_dir: Directory to start searching from.

    Returns:
        Root of the work tree, or None if start_dir is not inside one.
    """
    try:
        repo = Repo(Path(start_dir).resolve(), search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None

    if repo.working_tree_dir is None:
        # Bare repositories have no place for a local .commity.yaml
        return None

    logger.debug(f"Found git repository at {repo.working_tree_dir}")
    return Path(repo.working_tree_dir)


def commit_message(repo_dir: Path, message: str) -> str:
    """
    Create a commit of the staged changes with the given message.

    Args:
        repo_dir: Root of the work tree.
        message: Commit message.

    Returns:
        Short hash of the new commit.

    Raises:
        VcsError: If nothing is staged or git refuses the commit.
    """
    if not message.strip():
        raise VcsError("Refusing to commit with an empty message")

    try:
        repo = Repo(repo_dir)
        # An unborn HEAD has nothing to diff against; any staged entry counts
        if repo.head.is_valid():
            staged = repo.index.diff("HEAD")
        else:
            staged = list(repo.index.entries)
        if not staged:
            raise VcsError("No changes staged for commit")

        commit = repo.index.commit(message)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise VcsError(f"Not a git repository: {repo_dir}") from e
    except GitCommandError as e:
        raise VcsError(f"Git command failed: {e}") from e

    logger.info(f"Created commit {commit.hexsha[:8]}")
    return commit.hexsha[:8]
