"""
Command line interface for zeus-ai.

This module defines the ``main`` click group used as the entry point of
the ``zeus-ai`` command, with three subcommands:

* ``suggest`` runs the suggestion pipeline in :mod:`zeus_ai.pipeline`,
* ``init`` writes a ``.zeusrc`` configuration file,
* ``version`` prints the program version.

Errors are reported with the step that failed and mapped to the exit
codes below.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import click

from zeus_ai import __version__
from zeus_ai.config.loader import CONFIG_FILE_NAME, ConfigError, load_config, write_config
from zeus_ai.editor import EditorError
from zeus_ai.llm.errors import LLMError, UnsupportedProvider
from zeus_ai.llm.factory import SUPPORTED_PROVIDERS
from zeus_ai.pipeline import NoChanges, NotARepository, SuggestOptions, run_suggest
from zeus_ai.terminal import print_error, print_info, print_success
from zeus_ai.vcs.git_client import GitClient, GitError

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_NO_REPO = 3
EXIT_NO_CHANGES = 4
EXIT_CONFIG_ERROR = 5
EXIT_VCS_FAILURE = 6
EXIT_LLM_FAILURE = 7
EXIT_EDITOR_FAILURE = 8


@click.group()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="zeus-ai")
def main(verbose: bool) -> None:
    """zeus-ai is a Git-aware CLI tool that helps developers generate smart
    commit messages using an LLM.

    It reads the Git diff, asks the configured LLM for commit message
    suggestions, and lets you pick, edit and optionally sign the commit.
    """
    # force=True so repeated invocations (tests) reconfigure handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )


@main.command()
@click.option("--body", is_flag=True, help="Include detailed body text in suggestions.")
@click.option("--edit", is_flag=True, help="Open the selected message in the default editor.")
@click.option("--sign", is_flag=True, help="GPG-sign the commit.")
@click.option("--dry-run", is_flag=True, help="Display the chosen message but don't commit.")
@click.option("--auto-stage", is_flag=True, help="Automatically stage all changes.")
@click.option(
    "--style",
    type=str,
    default=None,
    help="Commit style (e.g. conventional, simple). Defaults to the configured style.",
)
def suggest(
    body: bool,
    edit: bool,
    sign: bool,
    dry_run: bool,
    auto_stage: bool,
    style: Optional[str],
) -> None:
    """Suggest commit messages for staged changes (or unstaged if nothing is staged)."""
    try:
        config = load_config()
    except ConfigError as exc:
        print_error(f"Failed to load config: {exc}")
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

    options = SuggestOptions(
        body=body,
        edit=edit,
        sign=sign,
        dry_run=dry_run,
        auto_stage=auto_stage,
        style=style or config.default_style,
    )
    client = GitClient(Path.cwd())

    try:
        run_suggest(client, config, options)
    except NotARepository as exc:
        print_error(f"Error: {exc}")
        raise click.exceptions.Exit(EXIT_NO_REPO)
    except NoChanges as exc:
        print_error(f"Error: {exc}")
        raise click.exceptions.Exit(EXIT_NO_CHANGES)
    except UnsupportedProvider as exc:
        print_error(f"Failed to create LLM provider: {exc}")
        print_info(f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}", indent=1)
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)
    except LLMError as exc:
        print_error(f"Failed to generate suggestions: {exc}")
        raise click.exceptions.Exit(EXIT_LLM_FAILURE)
    except EditorError as exc:
        print_error(f"Failed to edit message: {exc}")
        raise click.exceptions.Exit(EXIT_EDITOR_FAILURE)
    except GitError as exc:
        print_error(f"Git error: {exc}")
        raise click.exceptions.Exit(EXIT_VCS_FAILURE)
    except (click.exceptions.Exit, click.Abort):
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)


@main.command()
@click.option(
    "--provider",
    default="ollama",
    show_default=True,
    help=f"LLM provider ({', '.join(SUPPORTED_PROVIDERS)}).",
)
@click.option("--api-key", default="", help="API key for the provider.")
@click.option("--model", default="", help="Model to use. Empty selects the provider default.")
@click.option("--style", default="conventional", show_default=True, help="Default commit style.")
def init(provider: str, api_key: str, model: str, style: str) -> None:
    """Create a .zeusrc configuration file in the current directory."""
    if provider.lower() not in SUPPORTED_PROVIDERS:
        print_error(f"Unsupported provider: {provider}")
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)
    try:
        path = write_config(Path.cwd() / CONFIG_FILE_NAME, provider.lower(), api_key, model, style)
    except ConfigError as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)
    print_success(f"Configuration file {path.name} created successfully!")


@main.command()
def version() -> None:
    """Print the version number of zeus-ai."""
    click.echo(f"zeus-ai v{__version__}")
