"""
Git client implementation for zeus_ai.

This module wraps the handful of Git operations the suggestion pipeline
needs: repository detection, staged/unstaged diffs and their statistics,
staging everything, and committing (optionally signed). All subprocess
calls go through :meth:`GitClient._run` so that unit tests can mock a
single seam.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class CommitFailed(GitError):
    """Raised when ``git commit`` exits with a non-zero status."""

    pass


class GitClient:
    """Client for interacting with a Git working tree."""

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = repo_root if repo_root is not None else Path.cwd()

    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If ``git`` cannot be executed, or the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.error("Unable to execute git: %s", exc)
            raise GitError(f"unable to execute git: {exc}") from exc

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(
                result.stderr.strip()
                or result.stdout.strip()
                or f"git {args[0]} exited with status {result.returncode}"
            )
        return result

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def is_repository(self) -> bool:
        """Return True if the working directory is inside a Git work tree."""
        try:
            result = self._run(["rev-parse", "--is-inside-work-tree"], check=False)
        except GitError:
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def get_diff(self, staged: bool) -> str:
        """Return the unified diff of staged (``--cached``) or unstaged changes."""
        args = ["diff", "--cached"] if staged else ["diff"]
        return self._run(args).stdout

    def get_diff_stats(self, staged: bool) -> str:
        """Return ``git diff --stat`` output for staged or unstaged changes."""
        args = ["diff", "--stat", "--cached"] if staged else ["diff", "--stat"]
        return self._run(args).stdout

    def has_unstaged_changes(self) -> bool:
        """Return True if tracked files have modifications not yet staged."""
        return bool(self._run(["diff", "--name-only"]).stdout.strip())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def stage_all(self) -> None:
        """Stage every change in the work tree, including deletions and new files."""
        self._run(["add", "-A"])

    def commit(self, message: str, sign: bool = False) -> None:
        """Create a commit with the given message.

        Multi-line messages are passed as a single ``-m`` argument. When
        ``sign`` is True the commit is GPG-signed with ``-S``.

        Raises
        ------
        CommitFailed
            If ``git commit`` fails.
        """
        args = ["commit", "-m", message]
        if sign:
            args.append("-S")
        try:
            result = self._run(args)
        except GitError as exc:
            raise CommitFailed(str(exc)) from exc
        logger.debug("git commit output: %s", result.stdout.strip())
