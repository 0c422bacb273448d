"""
Configuration loader for zeus_ai.

Settings are layered, lowest precedence first:

1. built-in defaults,
2. ``~/.zeusrc`` in the user's home directory,
3. the nearest ``.zeusrc`` found walking up from the working directory,
4. ``ZEUS_*`` environment variables.

``.zeusrc`` files are YAML mappings with the keys ``provider``,
``api_key``, ``model``, ``default_style``, ``request_timeout`` and
``ollama_url``. A missing file is fine; an unreadable or malformed one
raises :class:`ConfigError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILE_NAME = ".zeusrc"
ENV_PREFIX = "ZEUS_"

_STRING_KEYS = ("provider", "api_key", "model", "default_style", "ollama_url")
_KNOWN_KEYS = _STRING_KEYS + ("request_timeout",)


class ConfigError(Exception):
    """Raised when a configuration file or variable is invalid."""

    pass


@dataclass(frozen=True)
class Config:
    """Resolved settings for one invocation."""

    provider: str = "ollama"
    api_key: str = ""
    model: str = ""
    default_style: str = "conventional"
    request_timeout: float = 30.0
    ollama_url: str = "http://localhost:11434"


def _get_home_directory() -> Path:
    return Path.home()


def _find_project_config(start: Path) -> Optional[Path]:
    """Return the nearest ``.zeusrc`` at or above ``start``."""
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Failed to read or parse configuration file %s: %s", path, exc)
        raise ConfigError(f"failed to read config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping of settings")
    unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown keys in %s: %s", path, ", ".join(unknown))
    return {key: value for key, value in data.items() if key in _KNOWN_KEYS}


def _coerce(values: Mapping[str, Any], source: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in values.items():
        if value is None:
            continue
        if key == "request_timeout":
            try:
                timeout = float(value)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"'request_timeout' in {source} must be a number") from exc
            if timeout <= 0:
                raise ConfigError(f"'request_timeout' in {source} must be positive")
            result[key] = timeout
        else:
            result[key] = str(value).strip()
    return result


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    values = {}
    for key in _KNOWN_KEYS:
        raw = environ.get(ENV_PREFIX + key.upper(), "")
        if raw:
            values[key] = raw
    return values


def load_config(
    start_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Resolve the configuration for the current invocation.

    Args:
        start_dir: Directory to start the ``.zeusrc`` search from.
            Defaults to the current working directory.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        The resolved :class:`Config`.

    Raises:
        ConfigError: If a configuration file is malformed or a value has
            the wrong type.
    """
    start = start_dir if start_dir is not None else Path.cwd()
    env = environ if environ is not None else os.environ

    layers: List[Path] = []
    home_config = _get_home_directory() / CONFIG_FILE_NAME
    if home_config.is_file():
        layers.append(home_config)
    project_config = _find_project_config(start)
    if project_config is not None and project_config.resolve() != home_config.resolve():
        layers.append(project_config)

    config = Config()
    for path in layers:
        config = replace(config, **_coerce(_read_config_file(path), str(path)))
        logger.debug("Loaded configuration from: %s", path)
    config = replace(config, **_coerce(_env_overrides(env), "environment"))

    logger.debug(
        "Resolved configuration: provider=%s model=%s style=%s",
        config.provider,
        config.model or "(provider default)",
        config.default_style,
    )
    return config


def write_config(
    path: Path,
    provider: str,
    api_key: str,
    model: str,
    style: str,
) -> Path:
    """Write a ``.zeusrc`` file with the given settings and return its path."""
    settings = {
        "provider": provider,
        "api_key": api_key,
        "model": model,
        "default_style": style,
    }
    content = "# zeus-ai configuration\n" + yaml.safe_dump(settings, default_flow_style=False, sort_keys=False)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to write config file: {exc}") from exc
    logger.debug("Wrote configuration to: %s", path)
    return path
