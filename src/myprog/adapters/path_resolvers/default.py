"""Filesystem path resolution for configuration files.

Purpose
-------
Implement the :class:`myprog.application.ports.PathResolver` protocol by
encapsulating where ``.myprog.json`` files are searched for.

Contents
--------
* :data:`CONFIG_FILE_NAME` – file name probed in every candidate directory.
* :data:`DEFAULT_CONFIG_DIR` – the fixed external candidate directory.
* :class:`DefaultPathResolver` – yields candidate directories in priority order.

System Role
-----------
Feeds deterministic path lists into :func:`myprog.core.initialize`. It
respects an environment override for the fixed directory (for tests and custom
deployments) and emits observability events about discovered paths.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, List, Mapping

from ...observability import log_debug

CONFIG_FILE_NAME = ".myprog.json"
DEFAULT_CONFIG_DIR = "/etc/myprog"
CONFIG_DIR_ENV = "MYPROG_CONFIG_DIR"


class DefaultPathResolver:
    """Resolve candidate directories for ``.myprog.json``.

    Candidates, lowest precedence first:

    1. the fixed external directory (``$MYPROG_CONFIG_DIR`` or ``/etc/myprog``);
    2. the directory containing the running executable;
    3. the parent of the user's home directory.

    Examples
    --------
    >>> resolver = DefaultPathResolver(
    ...     env={"MYPROG_CONFIG_DIR": "/opt/demo"},
    ...     executable=Path("/usr/local/bin/myprog"),
    ...     home=Path("/home/demo"),
    ... )
    >>> [Path(p).as_posix() for p in resolver.directories()]
    ['/opt/demo', '/usr/local/bin', '/home']
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        executable: Path | None = None,
        home: Path | None = None,
    ) -> None:
        """Store the context required to resolve filesystem locations.

        Parameters
        ----------
        env:
            Optional environment mapping layered over ``os.environ`` values
            (useful for deterministic tests).
        executable:
            Path of the running executable. Defaults to the resolved script
            path from ``sys.argv[0]`` (falling back to ``sys.executable``).
        home:
            The user's home directory. Defaults to :meth:`Path.home`; when it
            cannot be determined the home candidate is skipped.
        """

        self.env = {**os.environ, **(env or {})}
        self.executable = executable
        self.home = home

    def directories(self) -> Iterable[str]:
        """Return candidate directories, lowest precedence first, without duplicates."""

        seen: set[str] = set()
        paths: List[str] = []
        for candidate in (self._fixed_dir(), self._executable_dir(), self._home_parent()):
            if candidate is None:
                continue
            text = str(candidate)
            if text in seen:
                continue
            seen.add(text)
            paths.append(text)
        log_debug("path_candidates", layer="candidate", path=None, count=len(paths))
        return paths

    def config_files(self) -> Iterable[str]:
        """Return the ``.myprog.json`` path inside each candidate directory."""

        return [str(Path(directory) / CONFIG_FILE_NAME) for directory in self.directories()]

    def _fixed_dir(self) -> Path:
        return Path(self.env.get(CONFIG_DIR_ENV) or DEFAULT_CONFIG_DIR)

    def _executable_dir(self) -> Path | None:
        if self.executable is not None:
            return self.executable.parent
        script = sys.argv[0] if sys.argv else ""
        if script and script != "-c":
            return Path(script).resolve().parent
        if sys.executable:
            return Path(sys.executable).resolve().parent
        return None

    def _home_parent(self) -> Path | None:
        home = self.home
        if home is None:
            try:
                home = Path.home()
            except RuntimeError:
                return None
        return home.parent
