"""
The ``suggest`` pipeline: diff → suggestions → selection → commit.

:func:`run_suggest` makes one pass per invocation:

1. verify the working directory is a Git work tree,
2. optionally stage everything,
3. capture the staged diff, or the unstaged one if the user opts in,
4. resolve the provider from configuration,
5. show diff statistics (best effort),
6. generate suggestions while a spinner runs,
7. let the user choose, edit or quit,
8. resolve the final message (through the editor when asked),
9. print it in dry-run mode, or commit it.

Failures are raised to the caller; the only error swallowed is a
failure to obtain diff statistics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from zeus_ai.config.loader import Config
from zeus_ai.editor import EditorError, edit_message
from zeus_ai.llm.factory import create_provider
from zeus_ai.models import DiffPayload, Selection, SelectionOutcome
from zeus_ai.terminal import (
    Spinner,
    confirm,
    print_success,
    print_warning,
    select_suggestion,
    show_commit_message,
    show_diff_stats,
)
from zeus_ai.vcs.git_client import CommitFailed, GitClient, GitError


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class PipelineError(Exception):
    """Raised when the pipeline cannot proceed."""

    pass


class NotARepository(PipelineError):
    """The working directory is not inside a Git work tree."""

    pass


class NoChanges(PipelineError):
    """There is nothing to describe: no staged diff and no unstaged diff in use."""

    pass


@dataclass(frozen=True)
class SuggestOptions:
    """Flags of the ``suggest`` command."""

    body: bool = False
    edit: bool = False
    sign: bool = False
    dry_run: bool = False
    auto_stage: bool = False
    style: str = "conventional"


def acquire_diff(client: GitClient) -> DiffPayload:
    """Return the staged diff, falling back to unstaged changes if the user agrees.

    Raises
    ------
    NoChanges
        If nothing is staged and there are no unstaged changes, or the
        user declines to use them.
    GitError
        If a Git command fails.
    """
    try:
        staged = client.get_diff(staged=True)
    except GitError as exc:
        raise GitError(f"failed to get diff: {exc}") from exc
    if staged.strip():
        return DiffPayload(staged, staged=True)

    print_warning("No staged changes found.")
    try:
        has_unstaged = client.has_unstaged_changes()
    except GitError as exc:
        raise GitError(f"failed to check for unstaged changes: {exc}") from exc
    if not has_unstaged:
        raise NoChanges("no changes to commit")
    if not confirm("Would you like to use unstaged changes instead?"):
        raise NoChanges("no changes to commit")

    try:
        unstaged = client.get_diff(staged=False)
    except GitError as exc:
        raise GitError(f"failed to get unstaged diff: {exc}") from exc
    payload = DiffPayload(unstaged, staged=False)
    if payload.is_empty():
        raise NoChanges("no changes to commit")
    return payload


def _show_stats(client: GitClient, staged: bool) -> None:
    try:
        stats = client.get_diff_stats(staged=staged)
    except GitError as exc:
        logger.debug("Could not obtain diff statistics: %s", exc)
        return
    if stats.strip():
        show_diff_stats(stats)


def resolve_message(
    outcome: SelectionOutcome,
    suggestions: List[str],
    options: SuggestOptions,
) -> str:
    """Turn a selection outcome into the final commit message.

    A chosen suggestion is used as-is, or opened in the editor when
    ``--edit`` was given. An edit request opens an empty template.
    """
    if outcome.kind is Selection.EDIT:
        message = edit_message("", options.body)
    else:
        message = suggestions[outcome.index]
        if options.edit:
            message = edit_message(message, options.body)
    if not message.strip():
        raise EditorError("commit message is empty; aborting")
    return message


def run_suggest(client: GitClient, config: Config, options: SuggestOptions) -> Optional[str]:
    """Run the suggestion pipeline once.

    Returns
    -------
    Optional[str]
        The message that was committed (or would be, in dry-run mode),
        or ``None`` if the user quit at the selection prompt.

    Raises
    ------
    NotARepository, NoChanges
        When there is nothing to work on.
    LLMError
        If the provider is unknown or generation fails.
    EditorError
        If the editor cannot be run or produces an empty message.
    GitError
        If staging or committing fails.
    """
    if not client.is_repository():
        raise NotARepository("not a git repository")

    if options.auto_stage:
        try:
            client.stage_all()
        except GitError as exc:
            raise GitError(f"failed to stage changes: {exc}") from exc

    payload = acquire_diff(client)
    provider = create_provider(config)
    _show_stats(client, payload.staged)

    try:
        with Spinner(f"🧠 Generating commit message suggestions via {provider.name}..."):
            suggestions = provider.generate_suggestions(payload.text, options.body, options.style)
    except Exception as exc:
        logger.error("Got an error while generating suggestions: %s", exc)
        raise
    print_success(f"Generated {len(suggestions)} suggestions")

    outcome = select_suggestion(suggestions)
    if outcome.kind is Selection.QUIT:
        logger.debug("User quit at the selection prompt")
        return None

    message = resolve_message(outcome, suggestions, options)

    if options.dry_run:
        show_commit_message(message, "📝 Dry run - message that would be committed:")
        return message

    try:
        client.commit(message, sign=options.sign)
    except CommitFailed as exc:
        raise CommitFailed(f"commit failed: {exc}") from exc
    print_success("Commit created successfully")
    return message
