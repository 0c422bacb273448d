"""
External editor support for writing or refining a commit message.

:func:`edit_message` writes the starting text to a private temporary
file, runs the user's editor attached to the current terminal and reads
the result back, dropping ``#`` comment lines and surrounding blank lines.
The temporary file is removed on every exit path.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Mapping, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


EDITOR_VARIABLES = ("EDITOR", "VISUAL")
FALLBACK_EDITORS = ("nano", "vim", "vi", "notepad")


class EditorError(Exception):
    """Raised when the commit message could not be edited."""

    pass


class NoEditorFound(EditorError):
    """No editor is configured and none of the fallbacks is installed."""

    pass


class EditorFailed(EditorError):
    """The editor process exited with a non-zero status."""

    pass


def find_editor(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the editor command line to run.

    ``$EDITOR`` wins over ``$VISUAL``; both may carry arguments such as
    ``code --wait``. Without either, the first installed editor from
    :data:`FALLBACK_EDITORS` is used.

    Raises
    ------
    NoEditorFound
        If nothing suitable is configured or installed.
    """
    env = environ if environ is not None else os.environ
    for variable in EDITOR_VARIABLES:
        value = env.get(variable, "").strip()
        if value:
            return shlex.split(value, posix=os.name != "nt")
    for candidate in FALLBACK_EDITORS:
        if shutil.which(candidate):
            return [candidate]
    raise NoEditorFound("no suitable editor found, please set EDITOR environment variable")


def message_template(include_body: bool) -> str:
    template = "# Enter your commit message here\n"
    if include_body:
        template += (
            "# First line: a brief summary (50 chars or less)\n\n"
            "# Body: more detailed explanatory text if needed\n"
        )
    return template


def clean_message(content: str) -> str:
    """Drop comment lines and leading or trailing blank lines from edited text."""
    lines = [line for line in content.split("\n") if not line.strip().startswith("#")]
    while lines and not lines[-1].strip():
        lines.pop()
    while lines and not lines[0].strip():
        lines.pop(0)
    return "\n".join(lines)


def edit_message(initial_text: str, include_body: bool = False) -> str:
    """Open ``initial_text`` in the user's editor and return the edited text.

    An empty ``initial_text`` is replaced by a commented template.

    Raises
    ------
    NoEditorFound
        If no editor can be resolved or started.
    EditorFailed
        If the editor exits with a non-zero status.
    """
    command = find_editor()
    with tempfile.NamedTemporaryFile(
        mode="w",
        prefix="zeus-commit-msg-",
        suffix=".txt",
        delete=False,
        encoding="utf-8",
    ) as tmp:
        tmp.write(initial_text or message_template(include_body))
        tmp_path = tmp.name

    try:
        logger.debug("Opening editor %s on %s", command[0], tmp_path)
        try:
            result = subprocess.run(command + [tmp_path])
        except OSError as exc:
            raise NoEditorFound(f"could not start editor '{command[0]}': {exc}") from exc
        if result.returncode != 0:
            raise EditorFailed(f"editor command failed with exit status {result.returncode}")
        content = Path(tmp_path).read_text(encoding="utf-8")
    finally:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)

    return clean_message(content)
