"""Composition root for ``myprog`` configuration.

Purpose
-------
Provide the single entry point that orchestrates option parsing, path
resolution, file loading, and merge policy enforcement.

Contents
--------
* :func:`initialize` – high-level API returning the final :class:`Configuration`.
* :func:`load_file_configuration` – load one file, mapping recoverable failures
  to ``None``.
* :func:`collect_layers` – load every candidate file that produced settings.

System Role
-----------
This module connects the adapters (path resolver, JSON loader) with the domain
value objects while emitting structured observability signals. It is the
canonical place to adjust precedence rules.
"""

from __future__ import annotations

import sys
from typing import Iterable

from .adapters.file_loaders.structured import JSONFileLoader
from .adapters.path_resolvers.default import DefaultPathResolver
from .application.merge import apply_options, merge_file_configuration, merge_layers
from .application.ports import FileLoader, PathResolver
from .domain.config import DEFAULT_CONFIGURATION, Configuration, FileConfiguration, Options
from .domain.errors import InvalidFormat, NotFound
from .observability import bind_trace_id, log_debug, log_info, log_warning, make_event


def initialize(
    options: Options | None = None,
    *,
    resolver: PathResolver | None = None,
    loader: FileLoader | None = None,
) -> Configuration:
    """Resolve the final configuration.

    What
    ----
    Starts from :data:`DEFAULT_CONFIGURATION`, merges every candidate
    ``.myprog.json`` (lowest precedence first), then the explicit ``--config``
    file, then the command-line overrides.

    Parameters
    ----------
    options:
        Parsed command line. When ``None`` the process arguments are parsed,
        which raises :class:`click.UsageError` if they are invalid; no file is
        touched in that case.
    resolver:
        Source of candidate file paths; defaults to :class:`DefaultPathResolver`.
    loader:
        File decoder; defaults to :class:`JSONFileLoader`.

    Raises
    ------
    FatalConfigError
        A configuration file exists but could not be read.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> root = Path(tmp.name)
    >>> _ = (root / ".myprog.json").write_text('{"names": ["demo"]}', encoding="utf-8")
    >>> resolver = DefaultPathResolver(
    ...     env={"MYPROG_CONFIG_DIR": str(root)},
    ...     executable=root / "missing" / "myprog",
    ...     home=root / "missing" / "home",
    ... )
    >>> cfg = initialize(Options(input=Path("in.txt"), verbose=1), resolver=resolver)
    >>> cfg.verbose, cfg.names, cfg.directory == str(root)
    (True, ('demo',), True)
    >>> tmp.cleanup()
    """

    if options is None:
        from .cli import parse_options  # cli imports this module

        options = parse_options(sys.argv[1:])

    resolver = resolver or DefaultPathResolver()
    loader = loader or JSONFileLoader()

    bind_trace_id(None)

    config = merge_layers(DEFAULT_CONFIGURATION, collect_layers(resolver.config_files(), loader))

    if options.config is not None:
        explicit = str(options.config)
        file_config = load_file_configuration(explicit, loader, layer="explicit")
        if file_config is not None:
            config = merge_file_configuration(config, file_config, path=explicit)
            log_debug("layer_merged", **make_event("explicit", explicit))

    config = apply_options(config, options)
    log_info(
        "configuration_resolved",
        layer="final",
        path=None,
        verbose=config.verbose,
        directory=config.directory,
        total_layers=len(config.sources),
    )
    return config


def collect_layers(paths: Iterable[str], loader: FileLoader) -> list[tuple[str, FileConfiguration]]:
    """Load every file in *paths*, returning ``(path, file_config)`` for those that loaded.

    Examples
    --------
    >>> collect_layers(["/nonexistent/.myprog.json"], JSONFileLoader())
    []
    """

    collected: list[tuple[str, FileConfiguration]] = []
    for path in paths:
        file_config = load_file_configuration(path, loader, layer="candidate")
        if file_config is None:
            continue
        log_debug("layer_merged", **make_event("candidate", path, {"keys": sorted(file_config.present)}))
        collected.append((path, file_config))
    return collected


def load_file_configuration(path: str, loader: FileLoader, *, layer: str = "candidate") -> FileConfiguration | None:
    """Load *path*, returning ``None`` when it is missing or malformed.

    Missing candidate files are expected and only logged at debug level; a
    missing explicit ``--config`` file is logged as a warning. Malformed files
    have already been reported by the loader. :class:`FatalConfigError`
    propagates unchanged.
    """

    try:
        return loader.load(path)
    except NotFound:
        if layer == "explicit":
            log_warning("config_file_missing", layer=layer, path=path)
        else:
            log_debug("config_file_missing", layer=layer, path=path)
        return None
    except InvalidFormat:
        return None


__all__ = [
    "initialize",
    "collect_layers",
    "load_file_configuration",
]
