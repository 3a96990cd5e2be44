"""Public package surface for ``myprog`` layered configuration.

Resolution order is defaults, then ``.myprog.json`` files found in the
candidate directories, then an explicit ``--config`` file, then command-line
flags. :func:`initialize` builds the final :class:`Configuration` explicitly;
:func:`get_configuration` offers the same value as a compute-once accessor.
"""

from __future__ import annotations

from .core import initialize
from .domain.config import DEFAULT_CONFIGURATION, Configuration, FileConfiguration, Options
from .domain.errors import ConfigError, FatalConfigError, InvalidFormat, NotFound
from .observability import bind_trace_id, get_logger
from .runtime import ConfigurationHolder, get_configuration

__all__ = [
    "Configuration",
    "ConfigurationHolder",
    "ConfigError",
    "DEFAULT_CONFIGURATION",
    "FatalConfigError",
    "FileConfiguration",
    "InvalidFormat",
    "NotFound",
    "Options",
    "bind_trace_id",
    "get_configuration",
    "get_logger",
    "initialize",
]
