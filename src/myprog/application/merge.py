"""Application-layer merge policy.

Purpose
-------
Fold file layers and command-line options over a :class:`Configuration` while
tracking which files contributed. Free of I/O so it can be reused by other
composition roots.

Contents
    - ``merge_file_configuration``: apply one file layer.
    - ``merge_layers``: apply a sequence of file layers via a simple loop.
    - ``apply_options``: apply command-line overrides, the final layer.

System Role
-----------
Receives decoded files from :mod:`myprog.core` and applies precedence
(``defaults → candidate files → --config file → command line``). Later layers
win; a file only overrides the keys it contains.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable

from ..domain.config import Configuration, FileConfiguration, Options


def merge_file_configuration(config: Configuration, file_config: FileConfiguration, *, path: str) -> Configuration:
    """Return *config* with the keys present in *file_config* applied over it.

    ``directory`` becomes the parent directory of *path* and *path* is appended
    to ``sources``.

    Examples
    --------
    >>> base = Configuration()
    >>> layer = FileConfiguration.from_mapping({"verbose": True}, path="/etc/myprog/.myprog.json")
    >>> merged = merge_file_configuration(base, layer, path="/etc/myprog/.myprog.json")
    >>> merged.verbose, Path(merged.directory).as_posix(), merged.names
    (True, '/etc/myprog', ())
    """

    changes: dict[str, object] = {
        "directory": str(Path(path).parent),
        "sources": (*config.sources, path),
    }
    if "verbose" in file_config.present:
        changes["verbose"] = file_config.verbose
    if "names" in file_config.present:
        changes["names"] = file_config.names
    return replace(config, **changes)


def merge_layers(config: Configuration, layers: Iterable[tuple[str, FileConfiguration]]) -> Configuration:
    """Merge ``(path, file_config)`` *layers* ordered from lowest to highest precedence.

    Examples
    --------
    >>> layers = [
    ...     ("a/.myprog.json", FileConfiguration(names=("x",), present=frozenset({"names"}))),
    ...     ("b/.myprog.json", FileConfiguration(verbose=True, present=frozenset({"verbose"}))),
    ... ]
    >>> merged = merge_layers(Configuration(), layers)
    >>> merged.verbose, merged.names, merged.directory
    (True, ('x',), 'b')
    """

    for path, file_config in layers:
        config = merge_file_configuration(config, file_config, path=path)
    return config


def apply_options(config: Configuration, options: Options) -> Configuration:
    """Apply command-line overrides; ``-v`` forces ``verbose`` on regardless of files."""

    if options.verbose > 0:
        return replace(config, verbose=True)
    return config
