"""Environment variable overlay adapter.

Purpose
-------
Write environment-sourced values into a merged configuration at the key paths
declared by :class:`lib_tiered_config.domain.options.KeyOptions`. It forms the
final precedence step of every config pipeline.

Key behaviours
--------------
* Override-if-present: a missing variable, or a parser returning ``None``,
  leaves the merged value untouched.
* Key paths are processed in declaration order; later aliases win.
* Nested paths (``connections.0.host``) grow lists and mappings on demand via
  :func:`lib_tiered_config.application.key_path.set_value`.
* Emits structured logging via :mod:`lib_tiered_config.observability`, naming
  the variable but never its value.
"""

from __future__ import annotations

import os
from typing import Mapping

from ...application.key_path import set_value
from ...domain.options import Config, KeyOptions
from ...observability import log_debug


class EnvOverlay:
    """Apply ``key path -> KeyOptions`` overrides from an environment mapping."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the overlay with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`, looked up on
            every call so late ``monkeypatch.setenv`` calls are honoured.
        """

        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        """Return the active variable source."""

        return os.environ if self._environ is None else self._environ

    def apply(self, config: Config, key_options: Mapping[str, KeyOptions]) -> Config:
        """Mutate *config* with every declared override that is present.

        Examples
        --------
        >>> overlay = EnvOverlay(environ={'PG_PORT': '6432'})
        >>> overlay.apply({'port': 5432, 'host': 'db'}, {
        ...     'port': KeyOptions(env='PG_PORT', parser=int),
        ...     'host': KeyOptions(env='PG_HOST'),
        ... })
        {'port': 6432, 'host': 'db'}
        """

        for key_path, options in key_options.items():
            value = self.value_for(options)
            if value is None:
                continue
            set_value(config, key_path, value)
            log_debug("env_override_applied", key_path=key_path, env=options.env)
        return config

    def value_for(self, options: KeyOptions) -> object | None:
        """Return the parsed value for *options* or ``None`` when absent.

        Examples
        --------
        >>> overlay = EnvOverlay(environ={'RETRIES': '3'})
        >>> overlay.value_for(KeyOptions(env='RETRIES', parser=int))
        3
        >>> overlay.value_for(KeyOptions(env='MISSING')) is None
        True
        """

        if options.env is None:
            return None
        raw = self.environ.get(options.env)
        if raw is None:
            return None
        parse = options.parser or _identity
        return parse(raw)


def _identity(value: str) -> str:
    return value
