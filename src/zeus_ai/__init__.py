"""
Top-level package for zeus_ai.

zeus-ai suggests commit messages for a Git repository's pending changes
using a pluggable language-model backend. The CLI entry point lives in
:mod:`zeus_ai.cli`.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
