"""
Version control integration.

:class:`GitClient` exposes the repository operations the suggestion
pipeline consumes: detection, diffs and diff statistics, staging and
committing.
"""

from .git_client import CommitFailed, GitClient, GitError  # noqa: F401
