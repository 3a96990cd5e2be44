"""Domain-level configuration value objects.

Purpose
-------
Anchor the immutable value objects that flow through resolution. This module
belongs to the domain layer and contains no I/O.

Contents
--------
* :class:`Options` – typed result of parsing the command line.
* :class:`FileConfiguration` – the settings stored in one ``.myprog.json`` file.
* :class:`Configuration` – the final, application-level settings.
* :data:`DEFAULT_CONFIGURATION` – the hard-coded defaults every resolution
  starts from.

System Role
-----------
:func:`myprog.core.initialize` folds file layers and options over
:data:`DEFAULT_CONFIGURATION` and hands the resulting :class:`Configuration` to
every consumer.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import InvalidFormat


@dataclass(frozen=True, slots=True)
class Options:
    """Structured result of parsing the process arguments.

    Attributes
    ----------
    input:
        Required positional input path.
    config:
        Optional explicit configuration file given with ``-c/--config``.
    verbose:
        Number of times ``-v`` was repeated.
    """

    input: Path
    config: Path | None = None
    verbose: int = 0


@dataclass(frozen=True, slots=True)
class FileConfiguration:
    """Settings as stored in a ``.myprog.json`` file.

    Why
    ----
    Files may set only some keys; :attr:`present` remembers which ones so the
    merge policy only overrides what the file actually states. A file missing
    ``verbose`` or ``names`` is therefore a partial override rather than a
    malformed file.

    Examples
    --------
    >>> cfg = FileConfiguration.from_mapping({"names": ["a", "b"]}, path="demo")
    >>> cfg.names, sorted(cfg.present)
    (('a', 'b'), ['names'])
    """

    verbose: bool = False
    names: tuple[str, ...] = ()
    present: frozenset[str] = field(default=frozenset(), compare=False, repr=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object], *, path: str) -> FileConfiguration:
        """Decode a parsed JSON object, raising :class:`InvalidFormat` on type mismatches.

        Unknown keys are ignored.
        """

        present: set[str] = set()
        verbose = False
        names: tuple[str, ...] = ()

        if "verbose" in data:
            value = data["verbose"]
            if not isinstance(value, bool):
                raise InvalidFormat(f"File {path}: 'verbose' must be a boolean, got {type(value).__name__}")
            verbose = value
            present.add("verbose")

        if "names" in data:
            raw = data["names"]
            if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
                raise InvalidFormat(f"File {path}: 'names' must be an array of strings")
            names = tuple(raw)
            present.add("names")

        return cls(verbose=verbose, names=names, present=frozenset(present))

    def as_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of the file settings."""

        return {"verbose": self.verbose, "names": list(self.names)}

    def to_json(self) -> str:
        """Render the settings as pretty-printed JSON.

        Examples
        --------
        >>> print(FileConfiguration(verbose=True, names=("a",)).to_json())
        {
          "verbose": true,
          "names": [
            "a"
          ]
        }
        """

        return json.dumps(self.as_dict(), indent=2)

    @classmethod
    def dump_defaults(cls) -> str:
        """Return the default file settings, useful for creating an initial config file."""

        return cls().to_json()


@dataclass(frozen=True, slots=True)
class Configuration:
    """Final, global configuration of the program.

    Why
    ----
    Consumers need one read-only object combining defaults, file overrides and
    command-line options, in that order.

    Attributes
    ----------
    verbose:
        Whether verbose behaviour was requested.
    directory:
        Directory that supplied the highest-precedence file layer, or ``""``
        when no file contributed.
    names:
        Names taken from the highest-precedence file that sets them.
    sources:
        Every file merged, lowest precedence first.

    Examples
    --------
    >>> cfg = Configuration()
    >>> cfg.verbose, cfg.directory
    (False, '')
    """

    verbose: bool = False
    directory: str = ""
    names: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        """Return a plain ``dict`` copy suitable for serialisation."""

        return {
            "verbose": self.verbose,
            "directory": self.directory,
            "names": list(self.names),
            "sources": list(self.sources),
        }

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialise the configuration to JSON.

        Examples
        --------
        >>> Configuration(verbose=True).to_json()
        '{"verbose":true,"directory":"","names":[],"sources":[]}'
        """

        return json.dumps(self.as_dict(), indent=indent, separators=(",", ":"), ensure_ascii=False)


DEFAULT_CONFIGURATION = Configuration()
"""Hard-coded defaults applied before any file or command-line layer."""
