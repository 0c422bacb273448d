"""
Response parsers turning raw backend text into suggestion strings.

Two strategies are kept deliberately separate because they encode
different contracts with different backend families:

* :func:`parse_json_suggestions` is the strict-JSON contract. The reply
  must decode to ``{"suggestions": [...]}`` with exactly three entries,
  otherwise a :class:`MalformedResponse` or :class:`CardinalityError` is
  raised.
* :func:`parse_numbered_suggestions` is the free-text contract. It
  recovers a best-effort, variable-length list from prose that is
  expected to number its entries ``1.`` to ``5.``.

Both return flat strings: the title, optionally followed by a blank line
and the body.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from zeus_ai.llm.errors import CardinalityError, MalformedResponse
from zeus_ai.llm.prompts import JSON_SUGGESTION_COUNT
from zeus_ai.models import Suggestion


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


_THINKING_PATTERNS = [
    r"<think>.*?</think>",
    r"<thinking>.*?</thinking>",
    r"<thought>.*?</thought>",
    r"<reasoning>.*?</reasoning>",
]

_MARKER = re.compile(r"^[1-5][.:]")
_FENCE = re.compile(r"```[A-Za-z0-9_+-]*[ \t]*\n?")
_NUMBERED_BLOCK = re.compile(
    r"^[1-5][.:](.+)(?:\n(?:[^\n1-5].*(?:\n|$))*)", re.MULTILINE
)


def strip_thinking_tags(text: str) -> str:
    """Remove reasoning blocks that some models emit before their answer.

    Parameters
    ----------
    text : str
        The raw backend reply.

    Returns
    -------
    str
        The reply without ``<think>``-style blocks, stripped of
        surrounding whitespace.

    Examples
    --------
    >>> strip_thinking_tags("<think>reasoning...</think>Answer")
    'Answer'
    """
    result = text
    for pattern in _THINKING_PATTERNS:
        result = re.sub(pattern, "", result, flags=re.DOTALL | re.IGNORECASE)
    return result.strip()


def _strip_code_fence(content: str) -> str:
    # Opening fence anywhere, with any language tag; closing fence after it.
    fence = _FENCE.search(content)
    if fence:
        content = content[fence.end():]
        end = content.find("```")
        if end >= 0:
            content = content[:end]
    return content.strip()


def parse_json_suggestions(content: str, include_body: bool) -> List[str]:
    """Decode a strict-JSON reply into exactly three suggestions.

    Parameters
    ----------
    content : str
        Raw reply text, optionally wrapped in a fenced code block.
    include_body : bool
        Whether bodies were requested. Bodies are dropped otherwise.

    Returns
    -------
    List[str]
        Three suggestions, each ``title`` or ``title\\n\\nbody``.

    Raises
    ------
    MalformedResponse
        If the reply is not JSON of the expected shape.
    CardinalityError
        If the reply does not contain exactly three suggestions.
    """
    cleaned = _strip_code_fence(content)
    try:
        data: Any = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.error("Failed to decode JSON suggestions: %s", exc)
        raise MalformedResponse(f"invalid JSON response: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("suggestions"), list):
        raise MalformedResponse("invalid JSON response: missing 'suggestions' list")

    entries = data["suggestions"]
    if len(entries) != JSON_SUGGESTION_COUNT:
        raise CardinalityError(JSON_SUGGESTION_COUNT, len(entries))

    suggestions: List[str] = []
    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("title"), str):
            raise MalformedResponse("invalid JSON response: suggestion without a title")
        body = entry.get("body")
        if not (include_body and isinstance(body, str) and body.strip()):
            body = None
        suggestions.append(Suggestion(entry["title"].strip(), body and body.strip()).render())
    return suggestions


def _flush(current: Optional[List[str]], suggestions: List[str]) -> None:
    if current is None:
        return
    text = "\n".join(current).strip()
    if text:
        suggestions.append(text)


def parse_numbered_suggestions(content: str) -> List[str]:
    """Recover suggestions from a numbered free-text reply.

    A line starting with ``1.``-``5.`` (or ``1:``-``5:``) opens a new
    suggestion with the rest of that line, minus one separating space;
    following lines are appended verbatim until the next marker. When
    that scan finds nothing, a multi-line
    regular expression picks up numbered blocks instead. The result has
    no fixed length and may be empty.
    """
    suggestions: List[str] = []
    current: Optional[List[str]] = None

    for line in content.splitlines():
        stripped = line.strip()
        marker = _MARKER.match(stripped)
        if marker:
            _flush(current, suggestions)
            remainder = stripped[marker.end():]
            if remainder[:1].isspace():
                remainder = remainder[1:]
            current = [remainder]
        elif current is not None:
            current.append(line)
    _flush(current, suggestions)

    if not suggestions:
        logger.debug("No numbered suggestions found line by line; trying block scan")
        suggestions = [m.group(0).strip() for m in _NUMBERED_BLOCK.finditer(content)]

    cleaned: List[str] = []
    for suggestion in suggestions:
        suggestion = suggestion.strip()
        if _MARKER.match(suggestion):
            suggestion = _MARKER.sub("", suggestion, count=1).strip()
        if suggestion:
            cleaned.append(suggestion)
    return cleaned
