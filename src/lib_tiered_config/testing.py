"""Test doubles that keep tier pipelines observable and predictable.

Purpose
    Let applications and the test-suite exercise :func:`lib_tiered_config.build`
    without touching the filesystem.

Contents
    - ``InMemoryFileLoader``: serves fragments from a ``path -> mapping`` table
      and records every requested path.
    - ``last_write_wins``: shallow merge callback where later fragments win.

System Integration
    Both helpers match the injected collaborator signatures of
    :func:`lib_tiered_config.core.build` (``load_config_file`` and ``merge``).
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping


class InMemoryFileLoader:
    """Serve config fragments from memory; unknown paths read as empty configs.

    Fragments are deep-copied on every load so overlays applied by one build
    never leak into the next.

    Examples
    --------
    >>> loader = InMemoryFileLoader({"./config/base/pg.json": {"host": "db"}})
    >>> loader("./config/base/pg.json"), loader("./config/local/pg.json")
    ({'host': 'db'}, {})
    >>> loader.requested
    ['./config/base/pg.json', './config/local/pg.json']
    """

    def __init__(self, files: Mapping[str, Mapping[Any, Any]] | None = None) -> None:
        self.files = dict(files or {})
        self.requested: list[str] = []

    def __call__(self, path: str) -> dict[Any, Any]:
        self.requested.append(path)
        return deepcopy(dict(self.files.get(path, {})))


def last_write_wins(*configs: Mapping[Any, Any]) -> dict[Any, Any]:
    """Merge *configs* left to right into a new dict; top-level keys only.

    Examples
    --------
    >>> last_write_wins({}, {"host": "a", "port": 1}, {"host": "b"})
    {'host': 'b', 'port': 1}
    """

    merged: dict[Any, Any] = {}
    for config in configs:
        merged.update(config)
    return merged
