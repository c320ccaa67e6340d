#!/usr/bin/env python
"""
Thin wrapper script to invoke the commitz CLI.

Running ``python run_commitz.py`` is equivalent to running the ``commitz``
console script installed via ``pyproject.toml``.
"""

from commitz.cli import main


if __name__ == "__main__":
    main(prog_name="commitz")
