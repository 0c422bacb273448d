#!/usr/bin/env python
"""
Thin wrapper script to invoke the zeus_ai CLI.

Running ``python zeus.py`` is equivalent to running the ``zeus-ai``
console script installed via ``pyproject.toml``.
"""

from zeus_ai.cli import main


if __name__ == "__main__":
    main(prog_name="zeus-ai")
