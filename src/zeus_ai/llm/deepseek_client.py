"""
Client for the DeepSeek chat-completions API.

DeepSeek is a free-text backend: it is asked for five numbered
suggestions and its reply goes through the numbered-list parser, so the
number of suggestions returned is best effort.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from zeus_ai.llm.base import DEFAULT_REQUEST_TIMEOUT, LLMProvider, first_choice_content
from zeus_ai.llm.prompts import OutputMode


DEEPSEEK_URL = "https://api.deepseek.com/v1/chat/completions"


@dataclass
class DeepSeekClient(LLMProvider):
    """Client for DeepSeek-hosted models."""

    name = "deepseek"
    output_mode = OutputMode.NUMBERED
    default_model = "deepseek-coder"

    api_key: str = ""
    model: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    temperature: float = 0.7

    def __post_init__(self) -> None:
        if not self.model:
            self.model = self.default_model

    def _complete(self, prompt: str) -> str:
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.temperature,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        data = self._post_json(DEEPSEEK_URL, payload, headers)
        return first_choice_content(data, self.name)
