"""
Top-level package for commitz.

This package exposes the main CLI entry point via the ``commitz.cli``
module. Library users can import the classifier and composer directly
from :mod:`commitz.analysis` and :mod:`commitz.message`.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("commitz")
except PackageNotFoundError:
    # Running from a source checkout without an installed distribution
    __version__ = "0.0.0.dev0"

# Library code never configures handlers; the CLI does that.
logging.getLogger(__name__).addHandler(logging.NullHandler())
