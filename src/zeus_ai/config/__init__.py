"""
Configuration loading for zeus_ai.

Settings come from built-in defaults, ``.zeusrc`` YAML files and
``ZEUS_*`` environment variables. See :mod:`zeus_ai.config.loader` for
the precedence rules.
"""

from .loader import Config, ConfigError, load_config, write_config  # noqa: F401
