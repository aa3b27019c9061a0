"""Environment overlay tests: override-if-present semantics."""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_tiered_config.adapters.env.default import EnvOverlay
from lib_tiered_config.domain.options import KeyOptions


def test_present_variable_overrides_value() -> None:
    overlay = EnvOverlay(environ={"PG_HOST": "host-from-env", "PG_PORT": "123"})
    config = {"host": "priority-host", "port": 3}
    overlay.apply(config, {"host": KeyOptions(env="PG_HOST"), "port": KeyOptions(env="PG_PORT", parser=int)})
    assert config == {"host": "host-from-env", "port": 123}


def test_absent_variable_keeps_merged_value() -> None:
    config = {"host": "base-host"}
    EnvOverlay(environ={}).apply(config, {"host": KeyOptions(env="PG_HOST")})
    assert config == {"host": "base-host"}


def test_parser_returning_none_keeps_merged_value() -> None:
    config = {"debug": False}
    overlay = EnvOverlay(environ={"DEBUG": "maybe"})
    overlay.apply(config, {"debug": KeyOptions(env="DEBUG", parser=lambda raw: {"1": True, "0": False}.get(raw))})
    assert config == {"debug": False}


def test_options_without_env_are_ignored() -> None:
    config = {"host": "base-host"}
    EnvOverlay(environ={"HOST": "x"}).apply(config, {"host": KeyOptions(description="documented only")})
    assert config == {"host": "base-host"}


def test_later_alias_wins() -> None:
    overlay = EnvOverlay(environ={"A": "first", "B": "second"})
    config: dict = {}
    overlay.apply(
        config,
        {
            "db": KeyOptions(env="A", parser=lambda raw: {"host": raw, "port": 1}),
            "db.host": KeyOptions(env="B"),
        },
    )
    assert config == {"db": {"host": "second", "port": 1}}


def test_nested_overrides_grow_lists() -> None:
    overlay = EnvOverlay(environ={"PG_HOST_1": "h1", "PG_HOST_2": "h2", "PG_PORT_2": "2"})
    config = {"connections": [{"host": "base-host", "port": 123}]}
    overlay.apply(
        config,
        {
            "connections.0.host": KeyOptions(env="PG_HOST_1"),
            "connections.1.host": KeyOptions(env="PG_HOST_2"),
            "connections.1.port": KeyOptions(env="PG_PORT_2", parser=int),
        },
    )
    assert config == {"connections": [{"host": "h1", "port": 123}, {"host": "h2", "port": 2}]}


def test_parser_can_decode_structures() -> None:
    config: dict = {}
    EnvOverlay(environ={"HOSTS": '["a", "b"]'}).apply(config, {"cluster.hosts": KeyOptions(env="HOSTS", parser=json.loads)})
    assert config == {"cluster": {"hosts": ["a", "b"]}}


def test_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    overlay = EnvOverlay()
    monkeypatch.setenv("LIB_TIERED_CONFIG_TEST_HOST", "from-os")
    config = overlay.apply({}, {"host": KeyOptions(env="LIB_TIERED_CONFIG_TEST_HOST")})
    assert config == {"host": "from-os"}


@given(st.dictionaries(st.sampled_from(["A", "B", "C"]), st.text(max_size=5), max_size=3))
def test_key_overwritten_iff_variable_present(environ) -> None:
    config = {"a": "orig-a", "b": "orig-b", "c": "orig-c"}
    EnvOverlay(environ=environ).apply(config, {name.lower(): KeyOptions(env=name) for name in ("A", "B", "C")})
    for name in ("A", "B", "C"):
        expected = environ.get(name, f"orig-{name.lower()}")
        assert config[name.lower()] == expected
