"""
Common behaviour for language-model provider adapters.

Every adapter builds its prompt through :mod:`zeus_ai.llm.prompts`,
performs exactly one blocking HTTP exchange via :mod:`requests`, and
hands the extracted reply text to the parser matching its declared
:class:`OutputMode`. HTTP errors, timeouts and undecodable envelopes are
turned into :class:`LLMError` subclasses; nothing is retried.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional

import requests

from zeus_ai.llm.errors import BackendError, BackendUnreachable, MalformedResponse
from zeus_ai.llm.parsers import (
    parse_json_suggestions,
    parse_numbered_suggestions,
    strip_thinking_tags,
)
from zeus_ai.llm.prompts import OutputMode, build_prompt


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


DEFAULT_REQUEST_TIMEOUT = 30.0


class LLMProvider(ABC):
    """Base class for backend adapters.

    Subclasses set :attr:`name` and :attr:`output_mode` and implement
    :meth:`_complete`, which sends a rendered prompt and returns the raw
    reply text.
    """

    name: ClassVar[str] = ""
    output_mode: ClassVar[OutputMode] = OutputMode.JSON

    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def generate_suggestions(self, diff: str, include_body: bool, style: str) -> List[str]:
        """Ask the backend for commit message suggestions for ``diff``.

        Raises
        ------
        LLMError
            If the backend is unreachable, answers with an error status,
            or its reply cannot be parsed.
        """
        prompt = build_prompt(diff, include_body, style, self.output_mode)
        raw = self._complete(prompt)
        return self._parse(raw, include_body)

    @abstractmethod
    def _complete(self, prompt: str) -> str:
        raise NotImplementedError

    def _parse(self, raw: str, include_body: bool) -> List[str]:
        text = strip_thinking_tags(raw)
        if self.output_mode is OutputMode.JSON:
            return parse_json_suggestions(text, include_body)
        suggestions = parse_numbered_suggestions(text)
        if not suggestions:
            logger.error("%s reply contained no numbered suggestions: %r", self.name, text)
            raise MalformedResponse(f"{self.name} returned no recognisable suggestions")
        return suggestions

    def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """POST ``payload`` as JSON and return the decoded JSON object."""
        logger.debug("Sending request to %s at %s (model %s)", self.name, url, payload.get("model"))
        try:
            response = requests.post(
                url,
                json=payload,
                headers=headers,
                timeout=self.request_timeout,
            )
        except requests.RequestException as exc:
            logger.error("Failed to reach %s: %s", self.name, exc)
            raise BackendUnreachable(f"failed to send request to {self.name}: {exc}") from exc
        if response.status_code != 200:
            logger.error(
                "%s returned non-200 status %s: %s", self.name, response.status_code, response.text
            )
            raise BackendError(self.name, response.status_code, response.text)
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Failed to parse %s response: %s", self.name, exc)
            raise MalformedResponse(f"failed to parse {self.name} response") from exc
        if not isinstance(data, dict):
            raise MalformedResponse(f"unexpected response structure from {self.name}")
        return data


def first_choice_content(data: Dict[str, Any], backend: str) -> str:
    """Extract ``choices[0].message.content`` from a chat-completions reply."""
    choices = data.get("choices")
    if not choices:
        raise MalformedResponse(f"{backend} returned no suggestions")
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise MalformedResponse(f"unexpected response structure from {backend}")
    return content
