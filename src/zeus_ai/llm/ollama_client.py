"""
Client for a local Ollama server.

Ollama is the one backend that runs on the developer's machine, so the
client first probes ``/api/version`` and fails fast with an actionable
message when nothing is listening, instead of timing out inside the
generation request. Generation uses ``/api/generate`` with
``format: "json"`` and the strict-JSON contract.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests

from zeus_ai.llm.base import DEFAULT_REQUEST_TIMEOUT, LLMProvider
from zeus_ai.llm.errors import BackendUnreachable, MalformedResponse
from zeus_ai.llm.prompts import OutputMode


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


DEFAULT_OLLAMA_URL = "http://localhost:11434"
PROBE_TIMEOUT = 5.0


@dataclass
class OllamaClient(LLMProvider):
    """Client for interacting with an Ollama server.

    Parameters
    ----------
    model : str, optional
        Name of the model to use. Defaults to ``deepseek-coder``.
    base_url : str, optional
        Base URL of the Ollama server including the port.
    request_timeout : float, optional
        Timeout in seconds for the generation request.
    temperature : float, optional
        Sampling temperature passed via the ``options`` payload.
    """

    name = "ollama"
    output_mode = OutputMode.JSON
    default_model = "deepseek-coder"

    model: str = ""
    base_url: str = DEFAULT_OLLAMA_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    temperature: float = 0.7

    def __post_init__(self) -> None:
        if not self.model:
            self.model = self.default_model
        self.base_url = self.base_url.rstrip("/")

    def _endpoint(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def check_alive(self) -> None:
        """Raise :class:`BackendUnreachable` unless the server answers."""
        url = self._endpoint("/api/version")
        try:
            response = requests.get(url, timeout=PROBE_TIMEOUT)
        except requests.RequestException as exc:
            logger.error("Ollama liveness probe failed: %s", exc)
            raise BackendUnreachable(
                f"ollama server not running at {self.base_url}. "
                "Start Ollama or use a different provider"
            ) from exc
        if response.status_code != 200:
            raise BackendUnreachable(
                f"ollama server at {self.base_url} answered the version probe with "
                f"status {response.status_code}. Start Ollama or use a different provider"
            )

    def _complete(self, prompt: str) -> str:
        self.check_alive()
        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "format": "json",
            "stream": False,
            "options": {"temperature": self.temperature},
        }
        data = self._post_json(self._endpoint("/api/generate"), payload)
        # /api/generate answers with 'response'; /api/chat would use 'message'.
        if isinstance(data.get("response"), str):
            return data["response"]
        message = data.get("message")
        if isinstance(message, dict) and isinstance(message.get("content"), str):
            return message["content"]
        raise MalformedResponse("unexpected response structure from ollama")
