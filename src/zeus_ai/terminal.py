"""
Terminal presentation for zeus_ai.

Everything the user sees goes through :mod:`click`: status lines, the
progress spinner, y/N confirmations and the suggestion picker. Colours
are stripped automatically by click when output is not a terminal.
"""

from __future__ import annotations

import sys
import threading
import time
from typing import List, Optional, Sequence

import click

from zeus_ai.models import SelectionOutcome, Suggestion


BOX_WIDTH = 55


# ---------------------------------------------------------------------------
# Status lines
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✓ {message}", fg="green"))


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}! {message}", fg="yellow"))


def print_error(message: str, indent: int = 0):
    """Print an error message on stderr."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✖ {message}", fg="red"), err=True)


def print_header(title: str):
    click.echo(click.style("\n┌" + "─" * BOX_WIDTH + "┐", fg="blue"))
    click.echo(click.style(f"  {title}", fg="cyan", bold=True))
    click.echo(click.style("├" + "─" * BOX_WIDTH + "┤", fg="blue"))


def show_diff_stats(stats: str):
    """Print ``git diff --stat`` output between dividers."""
    click.echo(click.style("\n📊 GIT DIFF STATS:", fg="blue"))
    click.echo(stats.rstrip("\n"))
    click.echo(click.style("─" * 40, fg="blue"))


def show_commit_message(message: str, title: str):
    click.echo(click.style(f"\n{title}", bold=True))
    click.echo("-----")
    click.echo(message)
    click.echo("-----")


def confirm(prompt: str) -> bool:
    """Ask a yes/no question; anything but an explicit yes means no."""
    return click.confirm(prompt, default=False)


# ---------------------------------------------------------------------------
# Progress spinner
# ---------------------------------------------------------------------------

class Spinner:
    """Progress indicator shown while a blocking call runs.

    The animation runs on a background thread that only writes to the
    terminal and only listens to a stop event. Leaving the ``with`` block
    sets the event and joins the thread, so the spinner is gone before
    the caller prints anything else, whether the block raised or not.
    When stdout is not a TTY a single static line is printed instead.
    """

    FRAMES = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']

    def __init__(self, message: str, enabled: Optional[bool] = None, interval: float = 0.1):
        self.message = message
        self.enabled = sys.stdout.isatty() if enabled is None else enabled
        self.interval = interval
        self.start_time: Optional[float] = None
        self.elapsed = 0.0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __enter__(self):
        self.start_time = time.time()
        if self.enabled:
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        else:
            click.echo(f"→ {self.message}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
            click.echo("\r" + " " * (len(self.message) + 4) + "\r", nl=False)
        self.elapsed = time.time() - self.start_time
        return False

    @property
    def running(self) -> bool:
        """True while the animation thread is alive. Only tests inspect it."""
        return self._thread is not None and self._thread.is_alive()

    def _spin(self):
        index = 0
        while not self._stop.is_set():
            frame = self.FRAMES[index]
            click.echo(f"\r{click.style(frame, fg='cyan')} {self.message}", nl=False)
            index = (index + 1) % len(self.FRAMES)
            self._stop.wait(self.interval)


# ---------------------------------------------------------------------------
# Suggestion selection
# ---------------------------------------------------------------------------

EDIT_TOKEN = "e"
QUIT_TOKEN = "q"


def _read_line(prompt: str) -> str:
    return click.prompt(prompt, default="", show_default=False)


def _indent(text: str, prefix: str) -> str:
    return text.replace("\n", "\n" + prefix)


def display_suggestions(suggestions: Sequence[str]):
    """Print the numbered list, one title (text before the first blank line) each."""
    print_header("COMMIT MESSAGE SUGGESTIONS")
    for number, suggestion in enumerate(suggestions, start=1):
        title = Suggestion.from_text(suggestion).title
        click.echo(click.style(f"  {number}. {_indent(title, '     ')}", fg="cyan", bold=True))
    click.echo(click.style("├" + "─" * BOX_WIDTH + "┤", fg="blue"))
    click.echo(click.style(f"  {EDIT_TOKEN} - Edit manually", fg="magenta"))
    click.echo(click.style(f"  {QUIT_TOKEN} - Quit without committing", fg="magenta"))
    click.echo(click.style("└" + "─" * BOX_WIDTH + "┘", fg="blue"))


def select_suggestion(suggestions: List[str]) -> SelectionOutcome:
    """Present ``suggestions`` and loop until the user makes a valid choice.

    Accepted input is a 1-based number within the list, ``e`` to write
    the message in an editor, or ``q`` to quit. Anything else prints an
    error and asks again; there is no attempt limit. After a numeric
    choice the full suggestion, body included, is shown once more.

    Raises
    ------
    ValueError
        If ``suggestions`` is empty.
    click.Abort
        If standard input is closed while waiting for a choice.
    """
    if not suggestions:
        raise ValueError("no suggestions to choose from")
    count = len(suggestions)
    display_suggestions(suggestions)

    while True:
        choice = _read_line(f"\n  Select an option (1-{count}/{EDIT_TOKEN}/{QUIT_TOKEN})").strip().lower()
        if choice == EDIT_TOKEN:
            return SelectionOutcome.edit()
        if choice == QUIT_TOKEN:
            return SelectionOutcome.quit()
        try:
            number = int(choice)
        except ValueError:
            number = 0
        if 1 <= number <= count:
            index = number - 1
            show_commit_message(suggestions[index], f"Selected suggestion {index + 1}:")
            return SelectionOutcome.chosen(index)
        print_error(f"Invalid selection. Please choose 1-{count}, {EDIT_TOKEN}, or {QUIT_TOKEN}")
