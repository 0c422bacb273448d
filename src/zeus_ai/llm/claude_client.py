"""
Client for the Anthropic Messages API.

Claude is a free-text backend with a fixed token budget. The reply is a
list of content blocks; the text blocks are concatenated and parsed as a
numbered list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from zeus_ai.llm.base import DEFAULT_REQUEST_TIMEOUT, LLMProvider
from zeus_ai.llm.errors import MalformedResponse
from zeus_ai.llm.prompts import OutputMode


CLAUDE_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 2000


@dataclass
class ClaudeClient(LLMProvider):
    """Client for Anthropic Claude models."""

    name = "claude"
    output_mode = OutputMode.NUMBERED
    default_model = "claude-3-sonnet-20240229"

    api_key: str = ""
    model: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        if not self.model:
            self.model = self.default_model

    def _complete(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": MAX_TOKENS,
        }
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "User-Agent": "zeus-ai/1.0",
        }
        data = self._post_json(CLAUDE_URL, payload, headers)
        blocks = data.get("content")
        if not blocks:
            raise MalformedResponse("claude returned no content")
        return "".join(
            block.get("text", "")
            for block in blocks
            if isinstance(block, dict) and block.get("type") == "text"
        )
