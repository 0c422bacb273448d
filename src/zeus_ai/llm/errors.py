"""
Exceptions raised while talking to a language-model backend.

Every failure is surfaced to the caller; nothing here is retried.
"""

from __future__ import annotations


class LLMError(Exception):
    """Raised when communication with the LLM backend fails."""

    pass


class BackendUnreachable(LLMError):
    """The backend could not be reached (connection refused, timeout, DNS)."""

    pass


class BackendError(LLMError):
    """The backend answered with a non-success HTTP status."""

    def __init__(self, backend: str, status_code: int, body: str) -> None:
        self.backend = backend
        self.status_code = status_code
        self.body = body
        super().__init__(f"{backend} returned status {status_code}: {body}")


class MalformedResponse(LLMError):
    """The backend reply could not be decoded into suggestions."""

    pass


class CardinalityError(LLMError):
    """A strict-JSON backend returned the wrong number of suggestions."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} suggestions, got {actual}")


class UnsupportedProvider(LLMError):
    """The configured provider name does not match any known backend."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unsupported provider: {name}")
