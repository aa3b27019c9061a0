from __future__ import annotations

from lib_tiered_config.testing import InMemoryFileLoader, last_write_wins


def test_in_memory_loader_returns_copies() -> None:
    loader = InMemoryFileLoader({"base/pg.json": {"connections": [{"host": "a"}]}})
    first = loader("base/pg.json")
    first["connections"].append({"host": "b"})
    assert loader("base/pg.json") == {"connections": [{"host": "a"}]}


def test_in_memory_loader_treats_unknown_paths_as_empty() -> None:
    loader = InMemoryFileLoader()
    assert loader("missing.json") == {}
    assert loader.requested == ["missing.json"]


def test_last_write_wins_is_shallow() -> None:
    merged = last_write_wins({}, {"db": {"host": "a", "port": 1}}, {"db": {"host": "b"}})
    assert merged == {"db": {"host": "b"}}
