"""Configuration file loader.

Purpose
-------
Convert an on-disk ``.myprog.json`` artifact into a
:class:`~myprog.domain.config.FileConfiguration`. Failure classification
(missing, malformed, unreadable) lives here so the composition root only has
to decide what each class of failure means.

Contents
--------
* :class:`BaseFileLoader` – shared helpers for reading files and validating
  mapping outputs.
* :class:`JSONFileLoader` – loader for the JSON file format.

System Role
-----------
Invoked by :func:`myprog.core.initialize` once per candidate directory and
once for an explicit ``--config`` file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from ...domain.config import FileConfiguration
from ...domain.errors import FatalConfigError, InvalidFormat, NotFound
from ...observability import log_debug, log_error


class BaseFileLoader:
    """Common utilities shared by file loaders."""

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes.

        Raises
        ------
        NotFound
            When nothing exists at *path*.
        InvalidFormat
            When *path* is a directory; it holds no JSON to decode.
        FatalConfigError
            For every other failure to open or read (permissions, I/O errors).

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b'{"verbose": true}')
        >>> tmp.close()
        >>> BaseFileLoader()._read(tmp.name)[:3]
        b'{"v'
        >>> Path(tmp.name).unlink()
        """

        try:
            with open(path, "rb") as handle:
                payload = handle.read()
        except FileNotFoundError as exc:
            raise NotFound(f"Configuration file not found: {path}") from exc
        except IsADirectoryError as exc:
            log_error("config_file_invalid", layer="file", path=path, error=str(exc))
            raise InvalidFormat(f"Could not parse JSON in {path}: not a regular file") from exc
        except OSError as exc:
            log_error("config_file_fatal", layer="file", path=path, error=str(exc))
            raise FatalConfigError(f"Error opening config file {path}: {exc}", path=path) from exc
        log_debug("config_file_read", layer="file", path=path, size=len(payload))
        return payload

    @staticmethod
    def _ensure_mapping(data: object, *, path: str) -> Mapping[str, object]:
        """Ensure *data* is a JSON object, otherwise raise ``InvalidFormat``.

        Examples
        --------
        >>> BaseFileLoader._ensure_mapping({"verbose": True}, path="demo")
        {'verbose': True}
        >>> BaseFileLoader._ensure_mapping([1], path="demo")
        Traceback (most recent call last):
        ...
        myprog.domain.errors.InvalidFormat: File demo did not produce a mapping
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        return data


class JSONFileLoader(BaseFileLoader):
    """Load ``.myprog.json`` documents."""

    def load(self, path: str) -> FileConfiguration:
        """Return the file settings stored at *path*.

        Raises
        ------
        NotFound
            The file does not exist.
        InvalidFormat
            The file is not valid UTF-8 JSON (including numbers past the
            interpreter's digit limit and nesting too deep to parse), is not
            an object, or carries values of the wrong type.
        FatalConfigError
            The file exists but cannot be read.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', delete=False, encoding='utf-8')
        >>> _ = tmp.write('{"verbose": true, "names": ["a"]}')
        >>> tmp.close()
        >>> JSONFileLoader().load(tmp.name)
        FileConfiguration(verbose=True, names=('a',))
        >>> Path(tmp.name).unlink()
        """

        payload = self._read(path)
        try:
            data = json.loads(payload.decode("utf-8"))
            result = FileConfiguration.from_mapping(self._ensure_mapping(data, path=path), path=path)
        except (ValueError, RecursionError) as exc:
            log_error("config_file_invalid", layer="file", path=path, format="json", error=str(exc))
            raise InvalidFormat(f"Could not parse JSON in {path}: {exc}") from exc
        except InvalidFormat as exc:
            log_error("config_file_invalid", layer="file", path=path, format="json", error=str(exc))
            raise
        log_debug("config_file_loaded", layer="file", path=path, format="json", keys=sorted(result.present))
        return result
