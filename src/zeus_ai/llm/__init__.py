"""
Language model integration for zeus_ai.

This package contains one adapter per backend (a local Ollama server and
the OpenRouter, Claude and DeepSeek hosted APIs), the prompt builders and
response parsers they share, and :func:`create_provider` which picks an
adapter from the resolved configuration.
"""

from .base import LLMProvider  # noqa: F401
from .errors import (  # noqa: F401
    BackendError,
    BackendUnreachable,
    CardinalityError,
    LLMError,
    MalformedResponse,
    UnsupportedProvider,
)
from .factory import SUPPORTED_PROVIDERS, create_provider  # noqa: F401
