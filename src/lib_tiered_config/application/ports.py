"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts that adapters must satisfy so the composition
root can orchestrate the tier pipeline without depending on concrete
implementations.

Contents
--------
* :class:`PathResolver` – expands a logical config name into its tier chain.
* :class:`FileLoader` – parses one structured configuration file.
* :class:`EnvOverlay` – writes environment-sourced values into a merged config.

System Role
-----------
These protocols keep the dependency rule intact: ``core`` talks to
abstractions, tests substitute doubles, and adapters stay replaceable.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from ..domain.options import Config, KeyOptions


@runtime_checkable
class PathResolver(Protocol):
    """Expand a logical config name into candidate file paths.

    Why
    ----
    Keep directory and suffix conventions out of the loading pipeline. The
    returned order is the merge order: lowest priority first.
    """

    def chain(self, name: str) -> list[str]:
        """Return candidate paths for *name* in ascending priority."""


@runtime_checkable
class FileLoader(Protocol):
    """Parse a structured configuration file into a mapping.

    Why
    ----
    Segregate parsing concerns (JSON/TOML/YAML) from orchestration logic.
    """

    def load(self, path: str) -> Mapping[str, object]:
        """Read *path* and return a mapping or raise ``NotFound``/``InvalidFormat``."""


@runtime_checkable
class EnvOverlay(Protocol):
    """Override declared key paths with values taken from the environment."""

    def apply(self, config: Config, key_options: Mapping[str, KeyOptions]) -> Config:
        """Mutate and return *config* with every present override written in."""
