"""Tests for prompt construction."""

import unittest

from zeus_ai.llm.prompts import (
    OutputMode,
    build_json_prompt,
    build_numbered_prompt,
    build_prompt,
)


DIFF = "diff --git a/app.py b/app.py\n+print('hello')\n"


class TestJsonPrompt(unittest.TestCase):
    def test_embeds_diff_verbatim_in_fence(self):
        prompt = build_json_prompt(DIFF, include_body=False, style="simple")
        self.assertIn("```diff\n" + DIFF + "\n```", prompt)

    def test_requires_exactly_three_suggestions(self):
        prompt = build_json_prompt(DIFF, include_body=False, style="simple")
        self.assertIn("exactly 3", prompt)
        self.assertIn('"suggestions"', prompt)
        self.assertTrue(prompt.endswith("Do not include any commentary or markdown."))

    def test_conventional_rules_only_for_conventional_style(self):
        conventional = build_json_prompt(DIFF, include_body=False, style="conventional")
        simple = build_json_prompt(DIFF, include_body=False, style="simple")
        self.assertIn("CONVENTIONAL COMMITS RULES", conventional)
        self.assertNotIn("CONVENTIONAL COMMITS RULES", simple)

    def test_body_rules_only_when_requested(self):
        with_body = build_json_prompt(DIFF, include_body=True, style="simple")
        without_body = build_json_prompt(DIFF, include_body=False, style="simple")
        self.assertIn("BODY REQUIREMENTS", with_body)
        self.assertNotIn("BODY REQUIREMENTS", without_body)


class TestNumberedPrompt(unittest.TestCase):
    def test_asks_for_five_numbered_entries(self):
        prompt = build_numbered_prompt(DIFF, include_body=False, style="simple")
        self.assertIn(DIFF, prompt)
        self.assertIn("generate 5", prompt)
        self.assertIn("Number each suggestion from 1 to 5.", prompt)

    def test_body_and_style_clauses(self):
        prompt = build_numbered_prompt(DIFF, include_body=True, style="conventional")
        self.assertIn("Conventional Commits format", prompt)
        self.assertIn("detailed body", prompt)
        self.assertNotIn("single line", prompt)

        title_only = build_numbered_prompt(DIFF, include_body=False, style="simple")
        self.assertIn("single line (title only)", title_only)
        self.assertNotIn("Conventional Commits", title_only)


def test_build_prompt_dispatches_on_mode():
    assert build_prompt(DIFF, False, "simple", OutputMode.JSON) == build_json_prompt(DIFF, False, "simple")
    assert build_prompt(DIFF, True, "conventional", OutputMode.NUMBERED) == build_numbered_prompt(
        DIFF, True, "conventional"
    )


def test_build_prompt_is_deterministic():
    assert build_prompt(DIFF, True, "conventional", OutputMode.JSON) == build_prompt(
        DIFF, True, "conventional", OutputMode.JSON
    )


if __name__ == "__main__":
    unittest.main()
