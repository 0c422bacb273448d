"""
Client for the OpenRouter chat-completions API.

OpenRouter is asked for a ``json_object`` response and follows the
strict-JSON contract: exactly three suggestions or an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from zeus_ai.llm.base import DEFAULT_REQUEST_TIMEOUT, LLMProvider, first_choice_content
from zeus_ai.llm.prompts import OutputMode


OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
REFERER = "https://github.com/amosehiguese/zeus-ai"


@dataclass
class OpenRouterClient(LLMProvider):
    """Client for OpenRouter-hosted models."""

    name = "openrouter"
    output_mode = OutputMode.JSON
    default_model = "deepseek/deepseek-coder"

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
            "response_format": {"type": "json_object"},
            "stream": False,
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": REFERER,
        }
        data = self._post_json(OPENROUTER_URL, payload, headers)
        return first_choice_content(data, self.name)
