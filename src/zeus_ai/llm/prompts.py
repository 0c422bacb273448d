"""
Prompt construction for commit message suggestions.

Two prompt families exist, one per backend output mode. JSON-mode
backends are asked for exactly three suggestions wrapped in a
``{"suggestions": [...]}`` object; free-text backends are asked for five
numbered entries. Both embed the diff verbatim. The backend is expected,
but not guaranteed, to honour the requested format, so the parsers in
:mod:`zeus_ai.llm.parsers` validate rather than assume compliance.
"""

from __future__ import annotations

from enum import Enum
from textwrap import dedent


class OutputMode(Enum):
    """How a backend is asked to format its reply."""

    JSON = "json"
    NUMBERED = "numbered"


JSON_SUGGESTION_COUNT = 3
NUMBERED_SUGGESTION_COUNT = 5

_JSON_HEADER = dedent(
    """
    You are a commit message generator. Analyze this git diff and respond with JSON containing exactly 3 commit message suggestions in the following format:

    {
      "suggestions": [
        {
          "title": "commit title",
          "body": "commit body (optional)"
        }
      ]
    }

    STRICT REQUIREMENTS:
    1. Response must be valid JSON
    2. Include exactly 3 suggestions
    3. Title must follow Conventional Commits format when requested
    4. Omit "body" field when not requested
    5. Escape all special JSON characters
    6. Do NOT include the git diff in your response
    7. Do NOT include any commentary or markdown

    Git Diff:
    """
).lstrip()

_CONVENTIONAL_RULES = dedent(
    """
    CONVENTIONAL COMMITS RULES:
    - Title format: "type(scope): description"
    - Types: feat, fix, docs, style, refactor, test, chore
    - Scope: optional component name
    - Description: imperative mood, lowercase, no period
    """
).lstrip()

_BODY_RULES = dedent(
    """
    BODY REQUIREMENTS:
    - Separate from title by blank line
    - Explain "what" and "why" not "how"
    - Wrap lines at 72 characters
    """
).lstrip()


def build_json_prompt(diff: str, include_body: bool, style: str) -> str:
    """Build the prompt for backends that must answer with three JSON suggestions."""
    parts = [_JSON_HEADER, "```diff\n", diff, "\n```\n\n"]
    if style == "conventional":
        parts.append(_CONVENTIONAL_RULES)
    if include_body:
        parts.append(_BODY_RULES)
    parts.append(
        "\nRespond ONLY with valid JSON in this exact format. "
        "Do not include any commentary or markdown."
    )
    return "".join(parts)


def build_numbered_prompt(diff: str, include_body: bool, style: str) -> str:
    """Build the prompt for backends that answer with a numbered list."""
    prompt = (
        "You are an expert developer analyzing a git diff to create commit messages. \n"
        "Below is the git diff:\n\n"
        f"{diff}\n\n"
        f"Please generate {NUMBERED_SUGGESTION_COUNT} concise and descriptive git commit "
        "messages based on the changes in the diff."
    )
    if style == "conventional":
        prompt += " Follow the Conventional Commits format (type(scope): description)."
    if include_body:
        prompt += " For each message, include a title and a detailed body explaining the changes."
    else:
        prompt += " Each message should be a single line (title only)."
    prompt += f" Number each suggestion from 1 to {NUMBERED_SUGGESTION_COUNT}."
    return prompt


def build_prompt(diff: str, include_body: bool, style: str, mode: OutputMode) -> str:
    """Return the instruction text matching ``mode``."""
    if mode is OutputMode.JSON:
        return build_json_prompt(diff, include_body, style)
    return build_numbered_prompt(diff, include_body, style)
