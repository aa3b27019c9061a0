"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by adapters, the composition root, and
consuming applications. The hierarchy lives in the domain layer so outer layers
may depend on it without the reverse being true.

Contents
--------
* :class:`ConfigError` – umbrella base class for all configuration-related
  issues.
* :class:`InvalidFormat` – parsing problems while reading files.
* :class:`NotFound` – raised when a candidate configuration file is missing.
* :class:`UnsupportedExtension` – a candidate path has no registered loader.
* :class:`InvalidKeyPath` – a dotted key path cannot be written.
* :class:`ConfigValidationError` – a single config entry failed validation.
* :class:`ConfigsBuildError` – aggregate of every validation failure in one
  build call.
* :func:`create_config_validation_error` – wrap a validator payload exactly once.

System Role
-----------
Adapters raise the loader errors; :mod:`lib_tiered_config.core` treats
:class:`NotFound` as absence and collects validation failures into
:class:`ConfigsBuildError`. Callers catch :class:`ConfigError` to handle all
library failures uniformly.
"""

from __future__ import annotations

from typing import Iterable


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_tiered_config``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidFormat(ConfigError):
    """Raised when a configuration file cannot be parsed into a mapping.

    Typical Sources
    ---------------
    Structured file loaders (:mod:`json`, :mod:`tomllib`, :mod:`yaml`).
    """


class NotFound(ConfigError):
    """Represents a missing-but-optional configuration file.

    Why
    ----
    Most candidates of a tier chain do not exist on disk. The default file
    loader converts this signal into an empty mapping.
    """


class UnsupportedExtension(ConfigError):
    """Raised when no loader is registered for a candidate's suffix."""


class InvalidKeyPath(ConfigError, ValueError):
    """Raised when a dotted key path cannot be written into a config tree.

    Examples include descending through a scalar (``"host.name"`` where
    ``host`` is a string) or indexing a list with a non-integer segment.
    """


class ConfigValidationError(ConfigError):
    """Signal that the config loaded for ``file_name`` failed its validator.

    What
    ----
    Carries the originating file name and the opaque validator payload
    (``None`` never reaches this class). When the payload is an exception it is
    chained as ``__cause__`` so tracebacks show the original failure.

    Examples
    --------
    >>> err = ConfigValidationError("pg", ["host is undefined"])
    >>> str(err)
    'Config validation error. See cause for more info. File name: pg'
    >>> err.cause
    ['host is undefined']
    """

    def __init__(self, file_name: str, cause: object) -> None:
        super().__init__(f"Config validation error. See cause for more info. File name: {file_name}")
        self.file_name = file_name
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class ConfigsBuildError(ConfigError):
    """Aggregate failure wrapping every per-entry validation error of a build.

    Examples
    --------
    >>> err = ConfigsBuildError([ConfigValidationError("pg", "boom")])
    >>> [e.file_name for e in err.errors]
    ['pg']
    """

    def __init__(self, errors: Iterable[ConfigValidationError]) -> None:
        super().__init__("Configs build error. See cause for more info.")
        self.errors: tuple[ConfigValidationError, ...] = tuple(errors)
        self.cause = self.errors


def create_config_validation_error(file_name: str, cause: object) -> ConfigValidationError:
    """Return ``cause`` unchanged when it already is a validation error, otherwise wrap it.

    Why
    ----
    Validators may raise :class:`ConfigValidationError` themselves (for example
    when composing other validators); wrapping it again would bury the original
    file name.

    Examples
    --------
    >>> inner = ConfigValidationError("db", "bad")
    >>> create_config_validation_error("pg", inner) is inner
    True
    >>> create_config_validation_error("pg", "bad").file_name
    'pg'
    """

    if isinstance(cause, ConfigValidationError):
        return cause
    return ConfigValidationError(file_name, cause)
