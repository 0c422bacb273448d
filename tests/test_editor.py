import os
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from zeus_ai.editor import (
    EditorFailed,
    NoEditorFound,
    clean_message,
    edit_message,
    find_editor,
    message_template,
)


class TestFindEditor(unittest.TestCase):
    def test_editor_variable_wins(self) -> None:
        self.assertEqual(find_editor({"EDITOR": "vim", "VISUAL": "emacs"}), ["vim"])

    def test_visual_used_when_editor_unset(self) -> None:
        self.assertEqual(find_editor({"EDITOR": " ", "VISUAL": "emacs"}), ["emacs"])

    def test_editor_with_arguments(self) -> None:
        if os.name == "nt":
            self.skipTest("POSIX shell splitting")
        self.assertEqual(find_editor({"EDITOR": "code --wait"}), ["code", "--wait"])

    def test_fallback_to_installed_editor(self) -> None:
        installed = {"vim": "/usr/bin/vim"}
        with patch("zeus_ai.editor.shutil.which", side_effect=installed.get):
            self.assertEqual(find_editor({}), ["vim"])

    def test_no_editor_found(self) -> None:
        with patch("zeus_ai.editor.shutil.which", return_value=None):
            with self.assertRaises(NoEditorFound):
                find_editor({})


class TestCleanMessage(unittest.TestCase):
    def test_drops_comments_and_trailing_blank_lines(self) -> None:
        self.assertEqual(clean_message("feat: x\n# comment\n\nextra\n\n"), "feat: x\n\nextra")

    def test_only_comments(self) -> None:
        self.assertEqual(clean_message(message_template(include_body=True)), "")

    def test_template_mentions_body_only_when_requested(self) -> None:
        self.assertNotIn("Body", message_template(include_body=False))
        self.assertIn("Body", message_template(include_body=True))


def _fake_editor(append="", returncode=0, seen=None):
    def run(command):
        path = Path(command[-1])
        if seen is not None:
            seen.append((command, path.read_text(encoding="utf-8")))
        if append:
            with path.open("a", encoding="utf-8") as handle:
                handle.write(append)
        return SimpleNamespace(returncode=returncode)

    return run


def test_edit_message_round_trip(monkeypatch):
    monkeypatch.setenv("EDITOR", "myeditor")
    seen = []
    with patch("zeus_ai.editor.subprocess.run", side_effect=_fake_editor("\n# comment\n\nextra\n\n", seen=seen)):
        result = edit_message("feat: x")

    assert result == "feat: x\n\nextra"
    command, initial = seen[0]
    assert command[0] == "myeditor"
    assert initial == "feat: x"
    assert not Path(command[-1]).exists()


def test_edit_message_uses_template_for_empty_text(monkeypatch):
    monkeypatch.setenv("EDITOR", "myeditor")
    seen = []
    with patch("zeus_ai.editor.subprocess.run", side_effect=_fake_editor("fix: typo\n", seen=seen)):
        result = edit_message("", include_body=True)

    assert seen[0][1] == message_template(include_body=True)
    assert result == "fix: typo"


def test_edit_message_editor_failure_removes_file(monkeypatch):
    monkeypatch.setenv("EDITOR", "myeditor")
    seen = []
    with patch("zeus_ai.editor.subprocess.run", side_effect=_fake_editor(returncode=2, seen=seen)):
        with pytest.raises(EditorFailed, match="exit status 2"):
            edit_message("feat: x")
    assert not Path(seen[0][0][-1]).exists()


def test_edit_message_editor_cannot_start(monkeypatch):
    monkeypatch.setenv("EDITOR", "does-not-exist")
    with patch("zeus_ai.editor.subprocess.run", side_effect=FileNotFoundError("does-not-exist")):
        with pytest.raises(NoEditorFound):
            edit_message("feat: x")


def test_edit_message_without_editor(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("VISUAL", raising=False)
    with patch("zeus_ai.editor.shutil.which", return_value=None), patch("zeus_ai.editor.subprocess.run") as run:
        with pytest.raises(NoEditorFound):
            edit_message("feat: x")
    run.assert_not_called()
