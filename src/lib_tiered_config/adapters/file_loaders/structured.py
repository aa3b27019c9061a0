"""Structured configuration file loaders.

Purpose
-------
Convert on-disk tier files into Python mappings that the merge callback
understands. Adapters are small wrappers around ``json``/``tomllib``/
``yaml.safe_load`` so error handling and observability live in one place.

Contents
--------
* :class:`BaseFileLoader` – shared helpers for reading files and validating
  mapping outputs.
* :class:`JSONFileLoader` / :class:`TOMLFileLoader` / :class:`YAMLFileLoader`
  – one loader per format.
* :data:`FILE_LOADERS` – registry of loaders keyed by suffix.
* :func:`load_config_file` – default file-loader callback used by
  :func:`lib_tiered_config.core.build`.

System Role
-----------
Invoked once per candidate path of a tier chain. Missing files become empty
mappings; every other failure propagates and aborts the build call.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import yaml

from ...application.ports import FileLoader
from ...domain.errors import InvalidFormat, NotFound, UnsupportedExtension
from ...observability import log_debug, log_error


class BaseFileLoader:
    """Common utilities shared by the structured file loaders."""

    def _read(self, path: str) -> bytes:
        """Read *path* as bytes, raising :class:`NotFound` when the file is missing.

        Side Effects
        ------------
        Emits ``config_file_read`` debug events.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile(delete=False)
        >>> _ = tmp.write(b'{"key": 1}')
        >>> tmp.close()
        >>> BaseFileLoader()._read(tmp.name)[:4]
        b'{"ke'
        >>> Path(tmp.name).unlink()
        """

        file_path = Path(path)
        if not file_path.is_file():
            raise NotFound(f"Configuration file not found: {path}")
        payload = file_path.read_bytes()
        log_debug("config_file_read", path=path, size=len(payload))
        return payload

    @staticmethod
    def _ensure_mapping(data: object, *, path: str) -> Mapping[str, object]:
        """Ensure *data* behaves like a mapping, otherwise raise ``InvalidFormat``.

        Examples
        --------
        >>> BaseFileLoader._ensure_mapping({"key": 1}, path="demo")
        {'key': 1}
        >>> BaseFileLoader._ensure_mapping([1], path="demo")
        Traceback (most recent call last):
        ...
        lib_tiered_config.domain.errors.InvalidFormat: File demo did not produce a mapping
        """

        if not isinstance(data, Mapping):
            raise InvalidFormat(f"File {path} did not produce a mapping")
        return data


class JSONFileLoader(BaseFileLoader):
    """Load JSON documents."""

    def load(self, path: str) -> Mapping[str, object]:
        """Return mapping extracted from JSON file at *path*."""

        try:
            data = json.loads(self._read(path))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            log_error("config_file_invalid", path=path, format="json", error=str(exc))
            raise InvalidFormat(f"Invalid JSON in {path}: {exc}") from exc
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", path=path, format="json")
        return result


class TOMLFileLoader(BaseFileLoader):
    """Load TOML documents using the standard library parser."""

    def load(self, path: str) -> Mapping[str, object]:
        """Return mapping extracted from TOML file at *path*.

        Examples
        --------
        >>> from tempfile import NamedTemporaryFile
        >>> tmp = NamedTemporaryFile('w', suffix='.toml', delete=False, encoding='utf-8')
        >>> _ = tmp.write('host = "db"')
        >>> tmp.close()
        >>> TOMLFileLoader().load(tmp.name)["host"]
        'db'
        >>> Path(tmp.name).unlink()
        """

        try:
            text = self._read(path).decode("utf-8")
            data = tomllib.loads(text)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            log_error("config_file_invalid", path=path, format="toml", error=str(exc))
            raise InvalidFormat(f"Invalid TOML in {path}: {exc}") from exc
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", path=path, format="toml")
        return result


class YAMLFileLoader(BaseFileLoader):
    """Load YAML documents; an empty document yields an empty mapping."""

    def load(self, path: str) -> Mapping[str, object]:
        """Return mapping extracted from YAML file at *path*."""

        try:
            data = yaml.safe_load(self._read(path))
        except yaml.YAMLError as exc:
            log_error("config_file_invalid", path=path, format="yaml", error=str(exc))
            raise InvalidFormat(f"Invalid YAML in {path}: {exc}") from exc
        if data is None:
            data = {}
        result = self._ensure_mapping(data, path=path)
        log_debug("config_file_loaded", path=path, format="yaml")
        return result


FILE_LOADERS: dict[str, FileLoader] = {
    ".json": JSONFileLoader(),
    ".toml": TOMLFileLoader(),
    ".yaml": YAMLFileLoader(),
    ".yml": YAMLFileLoader(),
}


def load_config_file(path: str) -> dict[str, object]:
    """Load *path* with the loader registered for its suffix.

    Why
    ----
    Tier chains name many files that do not exist; absence must read as an
    empty config while real problems still surface.

    Returns
    -------
    dict[str, object]
        Parsed mapping, or ``{}`` when the file is missing.

    Raises
    ------
    UnsupportedExtension
        When no loader is registered for the suffix.
    InvalidFormat
        When the file exists but cannot be parsed into a mapping.

    Examples
    --------
    >>> load_config_file('/nonexistent/base/pg.json')
    {}
    >>> load_config_file('/nonexistent/base/pg.ini')
    Traceback (most recent call last):
    ...
    lib_tiered_config.domain.errors.UnsupportedExtension: Config build works with: .json, .toml, .yaml, .yml files only. Unsupported extension: .ini
    """

    suffix = Path(path).suffix.lower()
    loader = FILE_LOADERS.get(suffix)
    if loader is None:
        supported = ", ".join(FILE_LOADERS)
        raise UnsupportedExtension(f"Config build works with: {supported} files only. Unsupported extension: {suffix}")
    try:
        data = loader.load(path)
    except NotFound:
        log_debug("config_file_missing", path=path)
        return {}
    return dict(data)
