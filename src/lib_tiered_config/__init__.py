"""Public package surface for ``lib_tiered_config``.

Load configuration fragments from ``base``/``<env>``/``local`` tier
directories, merge them in priority order with a caller-supplied merge
function, overlay environment variables at dotted key paths, and validate every
config of a batch while collecting all failures into one error.
"""

from __future__ import annotations

from .core import build, build_or_throw
from .docs import write_doc
from .domain.errors import (
    ConfigError,
    ConfigsBuildError,
    ConfigValidationError,
    InvalidFormat,
    InvalidKeyPath,
    NotFound,
    UnsupportedExtension,
    create_config_validation_error,
)
from .domain.options import DEFAULT_EXTENSIONS, Config, ConfigDocOptions, ConfigOptions, KeyOptions
from .observability import bind_trace_id, get_logger

__all__ = [
    "Config",
    "ConfigDocOptions",
    "ConfigError",
    "ConfigOptions",
    "ConfigValidationError",
    "ConfigsBuildError",
    "DEFAULT_EXTENSIONS",
    "InvalidFormat",
    "InvalidKeyPath",
    "KeyOptions",
    "NotFound",
    "UnsupportedExtension",
    "bind_trace_id",
    "build",
    "build_or_throw",
    "create_config_validation_error",
    "get_logger",
    "write_doc",
]
