import pytest

from zeus_ai.config.loader import Config
from zeus_ai.llm.claude_client import ClaudeClient
from zeus_ai.llm.deepseek_client import DeepSeekClient
from zeus_ai.llm.errors import UnsupportedProvider
from zeus_ai.llm.factory import SUPPORTED_PROVIDERS, create_provider
from zeus_ai.llm.ollama_client import OllamaClient
from zeus_ai.llm.openrouter_client import OpenRouterClient
from zeus_ai.llm.prompts import OutputMode


@pytest.mark.parametrize(
    "name, cls, mode",
    [
        ("ollama", OllamaClient, OutputMode.JSON),
        ("openrouter", OpenRouterClient, OutputMode.JSON),
        ("claude", ClaudeClient, OutputMode.NUMBERED),
        ("deepseek", DeepSeekClient, OutputMode.NUMBERED),
    ],
)
def test_create_provider_by_name(name, cls, mode):
    provider = create_provider(Config(provider=name, api_key="k"))
    assert isinstance(provider, cls)
    assert provider.output_mode is mode
    assert provider.name == name


def test_provider_name_is_case_insensitive():
    assert isinstance(create_provider(Config(provider="  Claude ")), ClaudeClient)


def test_config_values_are_passed_through():
    provider = create_provider(
        Config(provider="openrouter", api_key="secret", model="x/y", request_timeout=12.5)
    )
    assert provider.api_key == "secret"
    assert provider.model == "x/y"
    assert provider.request_timeout == 12.5

    ollama = create_provider(Config(provider="ollama", ollama_url="http://gpu-box:11434"))
    assert ollama.base_url == "http://gpu-box:11434"
    assert ollama.model == "deepseek-coder"


def test_unknown_provider_fails_closed():
    with pytest.raises(UnsupportedProvider) as excinfo:
        create_provider(Config(provider="gpt-local"))
    assert "gpt-local" in str(excinfo.value)


def test_supported_providers_listing():
    assert set(SUPPORTED_PROVIDERS) == {"ollama", "openrouter", "claude", "deepseek"}
