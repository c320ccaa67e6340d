"""
Configuration for commitz.

Provides the loader for the optional settings file and the immutable
:class:`Settings` record. See :mod:`commitz.config.loader` for details.
"""

from .loader import ConfigError, load_config  # noqa: F401
from .settings import Settings, build_settings  # noqa: F401
