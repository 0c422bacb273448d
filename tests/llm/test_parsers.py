"""Tests for the strict-JSON and numbered-list response parsers."""

import json
import unittest

import pytest

from zeus_ai.llm.errors import CardinalityError, MalformedResponse
from zeus_ai.llm.parsers import (
    parse_json_suggestions,
    parse_numbered_suggestions,
    strip_thinking_tags,
)


def _payload(*entries):
    return json.dumps({"suggestions": list(entries)})


THREE = _payload(
    {"title": "feat(cli): add suggest command", "body": "Adds the command."},
    {"title": "feat: add suggestions"},
    {"title": "chore: wire up cli", "body": ""},
)


class TestParseJsonSuggestions(unittest.TestCase):
    def test_titles_only_without_body(self):
        result = parse_json_suggestions(THREE, include_body=False)
        self.assertEqual(
            result,
            ["feat(cli): add suggest command", "feat: add suggestions", "chore: wire up cli"],
        )

    def test_body_appended_after_blank_line_when_requested(self):
        result = parse_json_suggestions(THREE, include_body=True)
        self.assertEqual(result[0], "feat(cli): add suggest command\n\nAdds the command.")
        # Missing or empty bodies leave the title alone.
        self.assertEqual(result[1], "feat: add suggestions")
        self.assertEqual(result[2], "chore: wire up cli")

    def test_strips_json_code_fence(self):
        fenced = "Here you go:\n```json\n" + THREE + "\n```\n"
        self.assertEqual(len(parse_json_suggestions(fenced, include_body=False)), 3)

    def test_strips_bare_code_fence(self):
        fenced = "```\n" + THREE + "\n```"
        self.assertEqual(len(parse_json_suggestions(fenced, include_body=False)), 3)

    def test_bare_fence_after_lead_in_text(self):
        fenced = "Sure:\n```\n" + THREE + "\n```"
        self.assertEqual(len(parse_json_suggestions(fenced, include_body=False)), 3)

    def test_upper_case_fence_tag(self):
        fenced = "```JSON\n" + THREE + "\n```"
        result = parse_json_suggestions(fenced, include_body=True)
        self.assertEqual(result[0], "feat(cli): add suggest command\n\nAdds the command.")

    def test_invalid_json_raises_malformed(self):
        with self.assertRaises(MalformedResponse):
            parse_json_suggestions("not json at all", include_body=False)

    def test_missing_suggestions_key_raises_malformed(self):
        with self.assertRaises(MalformedResponse):
            parse_json_suggestions(json.dumps({"messages": []}), include_body=False)

    def test_entry_without_title_raises_malformed(self):
        bad = _payload({"title": "a"}, {"body": "no title"}, {"title": "c"})
        with self.assertRaises(MalformedResponse):
            parse_json_suggestions(bad, include_body=False)


@pytest.mark.parametrize("count", [0, 1, 2, 4, 5])
def test_json_parser_rejects_wrong_cardinality(count):
    content = _payload(*({"title": f"fix: thing {i}"} for i in range(count)))
    with pytest.raises(CardinalityError) as excinfo:
        parse_json_suggestions(content, include_body=False)
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == count


class TestParseNumberedSuggestions(unittest.TestCase):
    def test_five_well_formed_entries(self):
        content = "\n".join(
            [
                "1. feat: add login",
                "2. fix: handle empty diff",
                "3: docs: describe config",
                "4. refactor: split parser",
                "5. test: cover editor",
            ]
        )
        result = parse_numbered_suggestions(content)
        self.assertEqual(len(result), 5)
        self.assertEqual(result[0], "feat: add login")
        self.assertEqual(result[2], "docs: describe config")
        for suggestion in result:
            self.assertNotRegex(suggestion, r"^[1-5][.:]")

    def test_preamble_ignored_and_continuation_lines_kept(self):
        content = (
            "Here are five suggestions:\n\n"
            "1. feat: add login\n"
            "\n"
            "Adds a login form.\n"
            "Validates input.\n"
            "2. fix: handle empty diff\n"
        )
        result = parse_numbered_suggestions(content)
        self.assertEqual(result, ["feat: add login\n\nAdds a login form.\nValidates input.", "fix: handle empty diff"])

    def test_indented_markers_are_recognised(self):
        result = parse_numbered_suggestions("  1. one\n  2. two\n")
        self.assertEqual(result, ["one", "two"])

    def test_marker_without_space_starts_a_suggestion(self):
        content = "1.feat: add login\nwith details\n2.fix: handle empty diff\n"
        result = parse_numbered_suggestions(content)
        self.assertEqual(result, ["feat: add login\nwith details", "fix: handle empty diff"])

    def test_mixed_marker_spacing_keeps_every_suggestion(self):
        content = "1.feat: add login\n2. fix: handle empty diff\n3:docs: readme\nmore docs\n"
        result = parse_numbered_suggestions(content)
        self.assertEqual(result, ["feat: add login", "fix: handle empty diff", "docs: readme\nmore docs"])

    def test_no_markers_returns_empty_list(self):
        self.assertEqual(parse_numbered_suggestions("I could not understand the diff."), [])

    def test_variable_count_is_not_enforced(self):
        result = parse_numbered_suggestions("1. only one\n2. and two")
        self.assertEqual(len(result), 2)


class TestThinkingFilter(unittest.TestCase):
    def test_removes_think_block(self):
        self.assertEqual(strip_thinking_tags("<think>reasoning...</think>Answer"), "Answer")

    def test_removes_multiline_blocks_case_insensitively(self):
        text = "<THINKING>first\nsecond</THINKING>\n\n1. feat: x"
        self.assertEqual(strip_thinking_tags(text), "1. feat: x")

    def test_removes_every_supported_tag(self):
        text = "<thought>a</thought><reasoning>b</reasoning>keep"
        self.assertEqual(strip_thinking_tags(text), "keep")


if __name__ == "__main__":
    unittest.main()
