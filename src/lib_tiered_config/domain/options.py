"""Domain value objects describing what to load and how to document it.

Purpose
-------
Hold the declarative request types consumed by the composition root and the
documentation writer. The module performs no I/O.

Contents
--------
* :data:`Config` – alias for the mutable mapping produced per logical config.
* :data:`DEFAULT_EXTENSIONS` – default candidate suffixes in ascending priority.
* :class:`KeyOptions` – how one key path is sourced from the environment.
* :class:`ConfigOptions` – one logical config request (file name, validator,
  environment key options, optional result-map key).
* :class:`LoaderParams` – directory layout shared by every request of a build.
* :class:`ConfigDocOptions` – documentation metadata for one config file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Hashable, Mapping, Sequence

Config = dict[Any, Any]
"""Mutable mapping returned for each logical config name."""

EnvParser = Callable[[str], object]
Validator = Callable[[Config], "object | Awaitable[object]"]
Merger = Callable[..., Config]
FileLoaderFn = Callable[[str], "Mapping[Any, Any] | Awaitable[Mapping[Any, Any]]"]

DEFAULT_EXTENSIONS: tuple[str, ...] = ("json", "toml", "yaml")
"""Candidate suffixes loaded per tier, lowest priority first."""

DEFAULT_BASE_DIR = "base"
DEFAULT_PRIORITY_DIR = "local"


@dataclass(frozen=True, slots=True)
class KeyOptions:
    """Describe how a dotted key path is overridden from the environment.

    Attributes
    ----------
    env:
        Name of the environment variable. ``None`` disables the override.
    parser:
        Converts the raw string (``int``, ``json.loads`` ...). Identity when
        omitted. Returning ``None`` leaves the merged value untouched.
    description:
        Free text reused by documentation tooling; ignored by the loader.
    """

    env: str | None = None
    parser: EnvParser | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigOptions:
    """One logical config request.

    Attributes
    ----------
    file_name:
        Name shared by every tier file (``pg`` -> ``base/pg.json``...). It is
        also the result-map key unless :attr:`key` is set.
    validate:
        Optional validator; ``None`` return means success.
    key_options:
        Mapping from dotted key paths to :class:`KeyOptions`, processed in
        insertion order.
    key:
        Explicit result-map key (any hashable, e.g. an ``object()`` sentinel).

    Examples
    --------
    >>> ConfigOptions("pg").result_key
    'pg'
    >>> ConfigOptions("pg", key=42).result_key
    42
    """

    file_name: str
    validate: Validator | None = None
    key_options: Mapping[str, KeyOptions] = field(default_factory=dict)
    key: Hashable | None = None

    @property
    def result_key(self) -> Hashable:
        """Return the key under which the loaded config is published."""

        return self.file_name if self.key is None else self.key


@dataclass(frozen=True, slots=True)
class LoaderParams:
    """Directory layout used to expand a file name into its tier chain.

    Attributes
    ----------
    dir:
        Directory containing the tier subdirectories.
    env:
        Environment name selecting the middle tier (``test``, ``production``).
    base_dir / priority_dir:
        Names of the lowest and highest priority tiers.
    sorted_extension:
        Candidate suffixes in ascending priority, without the leading dot.
    """

    dir: str
    env: str
    base_dir: str = DEFAULT_BASE_DIR
    priority_dir: str = DEFAULT_PRIORITY_DIR
    sorted_extension: Sequence[str] = DEFAULT_EXTENSIONS

    @property
    def tiers(self) -> tuple[str, str, str]:
        """Return tier directory names in ascending priority."""

        return (self.base_dir, self.env, self.priority_dir)


@dataclass(frozen=True, slots=True)
class ConfigDocOptions:
    """Documentation metadata for a single config file.

    ``key_options`` maps each documented key path to its cell values, keyed by
    the column identifiers passed to :func:`lib_tiered_config.docs.write_doc`.
    """

    file_name: str
    description: str | None = None
    key_options: Mapping[str, Mapping[str, object]] | None = None
