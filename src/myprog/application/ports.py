"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts adapters must satisfy so the composition root
can orchestrate behaviour without depending on concrete implementations.

Contents
--------
* :class:`PathResolver` – yields candidate configuration file paths.
* :class:`FileLoader` – decodes one configuration file.

System Role
-----------
:func:`myprog.core.initialize` accepts any object satisfying these protocols,
which is how tests drive it with in-memory doubles.
"""

from __future__ import annotations

from typing import Iterable, Protocol

from ..domain.config import FileConfiguration


class PathResolver(Protocol):
    """Discover candidate configuration files.

    Methods
    -------
    :meth:`directories`
        Candidate directories, lowest precedence first.
    :meth:`config_files`
        The configuration file path inside each candidate directory.
    """

    def directories(self) -> Iterable[str]:
        """Yield candidate directories in precedence order."""

    def config_files(self) -> Iterable[str]:
        """Yield candidate configuration file paths in precedence order."""


class FileLoader(Protocol):
    """Decode a configuration file into :class:`FileConfiguration`."""

    def load(self, path: str) -> FileConfiguration:
        """Read *path*, raising ``NotFound``, ``InvalidFormat`` or ``FatalConfigError``."""
