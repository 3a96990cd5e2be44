"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by adapters, the composition root, and the
CLI. The hierarchy lives in the domain layer so adapters can raise it without
depending on outer layers.

Contents
--------
* :class:`ConfigError` – umbrella base class for all configuration issues.
* :class:`NotFound` – an optional configuration file is missing.
* :class:`InvalidFormat` – a file exists but cannot be decoded.
* :class:`FatalConfigError` – an unrecoverable I/O failure.

System Role
-----------
The composition root treats :class:`NotFound` and :class:`InvalidFormat` as
"no override" and lets :class:`FatalConfigError` propagate. Only the CLI entry
point turns it into an exit code.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``myprog``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class NotFound(ConfigError):
    """Represents a missing-but-optional configuration file.

    Why
    ----
    Absence of ``.myprog.json`` in a candidate directory is the normal case and
    must never abort resolution.
    """


class InvalidFormat(ConfigError):
    """Raised when a configuration file cannot be decoded into settings.

    Typical Sources
    ---------------
    Syntax errors reported by :mod:`json`, non UTF-8 payloads, a top-level
    value that is not an object, or keys carrying the wrong JSON type.
    """


class FatalConfigError(ConfigError):
    """Raised when a configuration file exists but cannot be opened or read.

    Why
    ----
    Permission problems and similar failures mean the operator's intent is
    unknown; continuing with partial configuration would hide the problem.

    What
    ----
    Wraps the originating :class:`OSError` (available as ``__cause__``) and
    keeps the offending path on :attr:`path`.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
