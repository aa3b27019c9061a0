from __future__ import annotations

from lib_tiered_config.domain.errors import (
    ConfigError,
    ConfigsBuildError,
    ConfigValidationError,
    InvalidFormat,
    InvalidKeyPath,
    NotFound,
    UnsupportedExtension,
    create_config_validation_error,
)


def test_error_hierarchy() -> None:
    for error_cls in (InvalidFormat, NotFound, UnsupportedExtension, InvalidKeyPath, ConfigValidationError, ConfigsBuildError):
        assert issubclass(error_cls, ConfigError)
    assert issubclass(InvalidKeyPath, ValueError)


def test_validation_error_keeps_payload_and_file_name() -> None:
    payload = ["host is undefined", "port is undefined"]
    error = ConfigValidationError("pg", payload)
    assert error.file_name == "pg"
    assert error.cause == payload
    assert "File name: pg" in str(error)
    assert error.__cause__ is None


def test_validation_error_chains_exception_payload() -> None:
    original = ValueError("port must be positive")
    error = ConfigValidationError("pg", original)
    assert error.__cause__ is original


def test_create_config_validation_error_does_not_double_wrap() -> None:
    inner = ConfigValidationError("db", "bad")
    assert create_config_validation_error("pg", inner) is inner
    wrapped = create_config_validation_error("pg", "bad")
    assert isinstance(wrapped, ConfigValidationError)
    assert wrapped.file_name == "pg"


def test_build_error_collects_causes_in_order() -> None:
    first = ConfigValidationError("pg", "a")
    second = ConfigValidationError("redis", "b")
    error = ConfigsBuildError([first, second])
    assert error.errors == (first, second)
    assert str(error) == "Configs build error. See cause for more info."
