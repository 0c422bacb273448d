"""
Provider selection by configured name.

The set of backends is closed: an unknown name raises
:class:`UnsupportedProvider` rather than falling back to a default.
"""

from __future__ import annotations

from typing import Callable, Dict

from zeus_ai.config.loader import Config
from zeus_ai.llm.base import LLMProvider
from zeus_ai.llm.claude_client import ClaudeClient
from zeus_ai.llm.deepseek_client import DeepSeekClient
from zeus_ai.llm.errors import UnsupportedProvider
from zeus_ai.llm.ollama_client import OllamaClient
from zeus_ai.llm.openrouter_client import OpenRouterClient


_BUILDERS: Dict[str, Callable[[Config], LLMProvider]] = {
    "ollama": lambda cfg: OllamaClient(
        model=cfg.model, base_url=cfg.ollama_url, request_timeout=cfg.request_timeout
    ),
    "openrouter": lambda cfg: OpenRouterClient(
        api_key=cfg.api_key, model=cfg.model, request_timeout=cfg.request_timeout
    ),
    "claude": lambda cfg: ClaudeClient(
        api_key=cfg.api_key, model=cfg.model, request_timeout=cfg.request_timeout
    ),
    "deepseek": lambda cfg: DeepSeekClient(
        api_key=cfg.api_key, model=cfg.model, request_timeout=cfg.request_timeout
    ),
}

SUPPORTED_PROVIDERS = tuple(_BUILDERS)


def create_provider(config: Config) -> LLMProvider:
    """Return the adapter named by ``config.provider`` (case-insensitive)."""
    builder = _BUILDERS.get(config.provider.strip().lower())
    if builder is None:
        raise UnsupportedProvider(config.provider)
    return builder(config)
