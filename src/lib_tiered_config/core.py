"""Composition root for ``lib_tiered_config``.

Purpose
-------
Provide the entry points that orchestrate tier chain expansion, file loading,
merging, environment overlay, and validation for a batch of logical configs.

Contents
--------
* :func:`build` – load every requested config concurrently and return
  ``(ConfigsBuildError | None, configs)``.
* :func:`build_or_throw` – same pipeline, raising the aggregate error.
* :func:`create_config_loader` – bind a directory layout, file loader and merge
  callback into a ``name -> Config`` coroutine.
* :func:`load_validated_config` – run one config through load, overlay and
  validation.

System Role
-----------
This module wires adapters (path resolver, file loaders, environment overlay)
and emits structured observability signals. Merge semantics stay with the
caller; the root only guarantees the order in which fragments reach ``merge``.

Concurrency
-----------
Every candidate of a chain is loaded concurrently, and every config of a batch
runs its pipeline concurrently, on the running event loop thread. There is no
cancellation: a failing load propagates out of :func:`build` while sibling
pipelines run to completion.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Awaitable, Callable, Hashable, Mapping, Sequence

from .adapters.env.default import EnvOverlay
from .adapters.file_loaders.structured import load_config_file as _default_file_loader
from .adapters.path_resolvers.default import TieredPathResolver
from .application import ports
from .domain.errors import ConfigsBuildError, ConfigValidationError, InvalidKeyPath, create_config_validation_error
from .domain.options import (
    DEFAULT_BASE_DIR,
    DEFAULT_EXTENSIONS,
    DEFAULT_PRIORITY_DIR,
    Config,
    ConfigOptions,
    FileLoaderFn,
    LoaderParams,
    Merger,
    Validator,
)
from .observability import bind_trace_id, log_debug, log_error, log_info, make_event

ConfigLoader = Callable[[str], Awaitable[Config]]
ConfEntry = tuple[Hashable, tuple[ConfigValidationError | None, Config]]
BuildResult = tuple[ConfigsBuildError | None, dict[Hashable, Config]]


async def build(
    *,
    dir: str,
    env: str,
    merge: Merger,
    config_options: Sequence[ConfigOptions],
    base_dir: str = DEFAULT_BASE_DIR,
    priority_dir: str = DEFAULT_PRIORITY_DIR,
    sorted_extension: Sequence[str] = DEFAULT_EXTENSIONS,
    env_source: Mapping[str, str] | None = None,
    load_config_file: FileLoaderFn | None = None,
) -> BuildResult:
    """Load, merge, overlay and validate every requested config.

    Why
    ----
    Services usually need several config files at start-up and want to report
    every invalid one at once instead of failing on the first.

    Parameters
    ----------
    dir:
        Directory holding the tier subdirectories.
    env:
        Name of the environment tier (``test``, ``production`` ...).
    merge:
        ``merge({}, *fragments)`` callback; its semantics are the caller's.
    config_options:
        Logical configs to load.
    base_dir / priority_dir:
        Lowest and highest priority tier names.
    sorted_extension:
        Candidate suffixes in ascending priority.
    env_source:
        Variables consulted by ``key_options``; defaults to :data:`os.environ`.
    load_config_file:
        ``path -> mapping`` callback (may be async). Must return ``{}`` for
        absent files. Defaults to
        :func:`lib_tiered_config.adapters.file_loaders.structured.load_config_file`.

    Returns
    -------
    tuple[ConfigsBuildError | None, dict[Hashable, Config]]
        The aggregate validation error (``None`` when every config passed) and
        one config per request, keyed by ``key`` or ``file_name``. Failed
        entries are still present in the mapping.

    Raises
    ------
    Exception
        Anything raised by the file loader (other than absence) or by
        ``merge`` propagates unchanged.

    Side Effects
    ------------
    Clears the active trace identifier and emits structured log events.
    """

    bind_trace_id(None)
    params = LoaderParams(
        dir=dir,
        env=env,
        base_dir=base_dir,
        priority_dir=priority_dir,
        sorted_extension=tuple(sorted_extension),
    )
    load_config = create_config_loader(params, merge=merge, load_config_file=load_config_file)
    overlay = EnvOverlay(environ=env_source)

    entries: list[ConfEntry] = await asyncio.gather(
        *(_to_config_entry(options, load_config, overlay) for options in config_options)
    )

    errors = [error for _, (error, _) in entries if error is not None]
    configs = {key: config for key, (_, config) in entries}
    log_info("configs_built", configs=len(configs), failures=len(errors))
    return (ConfigsBuildError(errors) if errors else None), configs


async def build_or_throw(
    *,
    dir: str,
    env: str,
    merge: Merger,
    config_options: Sequence[ConfigOptions],
    base_dir: str = DEFAULT_BASE_DIR,
    priority_dir: str = DEFAULT_PRIORITY_DIR,
    sorted_extension: Sequence[str] = DEFAULT_EXTENSIONS,
    env_source: Mapping[str, str] | None = None,
    load_config_file: FileLoaderFn | None = None,
) -> dict[Hashable, Config]:
    """Run :func:`build` and raise its :class:`ConfigsBuildError` on any validation failure.

    Parameters mirror :func:`build`.
    """

    error, configs = await build(
        dir=dir,
        env=env,
        merge=merge,
        config_options=config_options,
        base_dir=base_dir,
        priority_dir=priority_dir,
        sorted_extension=sorted_extension,
        env_source=env_source,
        load_config_file=load_config_file,
    )
    if error is not None:
        raise error
    return configs


def create_config_loader(
    params: LoaderParams,
    *,
    merge: Merger,
    load_config_file: FileLoaderFn | None = None,
) -> ConfigLoader:
    """Return a coroutine function loading and merging the tier chain of a name.

    What
    ----
    Expands the name with :class:`TieredPathResolver`, loads every candidate
    concurrently, then calls ``merge({}, *fragments)`` with fragments in chain
    order (lowest priority first).

    Everything runs on the event loop thread. Async loaders interleave; a
    synchronous loader (the default one included) finishes each file before
    the next candidate starts, so slow storage should be wrapped in a
    coroutine.
    """

    resolver: ports.PathResolver = TieredPathResolver(params)
    load_file = load_config_file or _default_file_loader

    async def load_fragment(path: str) -> object:
        return await _resolve(load_file(path))

    async def load_config(name: str) -> Config:
        fragments = await asyncio.gather(*(load_fragment(path) for path in resolver.chain(name)))
        return merge({}, *fragments)

    return load_config


async def load_validated_config(
    options: ConfigOptions,
    load_config: ConfigLoader,
    env_overlay: ports.EnvOverlay,
) -> tuple[object | None, Config]:
    """Return ``(validation_failure_or_None, config)`` for one logical config.

    The environment overlay always runs, then the validator runs exactly once
    on the overlaid config. A returned non-``None`` value, a raised exception,
    or an awaitable resolving to non-``None`` counts as failure. A key path the
    overlay cannot write is this config's failure too; the validator is skipped.
    """

    config = await load_config(options.file_name)
    try:
        env_overlay.apply(config, options.key_options)
    except InvalidKeyPath as exc:
        return exc, config
    failure = await _run_validator(options.validate or _accept_all, config)
    return failure, config


async def _to_config_entry(
    options: ConfigOptions,
    load_config: ConfigLoader,
    env_overlay: ports.EnvOverlay,
) -> ConfEntry:
    """Run one pipeline and attribute any validation failure to its file name."""

    failure, config = await load_validated_config(options, load_config, env_overlay)
    error = None
    if failure is not None:
        error = create_config_validation_error(options.file_name, failure)
        log_error("config_validation_failed", **make_event(options.file_name, None))
    else:
        log_debug("config_loaded", **make_event(options.file_name, None, {"keys": len(config)}))
    return options.result_key, (error, config)


async def _run_validator(validate: Validator, config: Config) -> object | None:
    """Invoke *validate* and normalise raised exceptions into failure payloads."""

    try:
        return await _resolve(validate(config))
    except Exception as exc:
        return exc


async def _resolve(value: object) -> object:
    """Await *value* when it is awaitable, otherwise return it unchanged."""

    if inspect.isawaitable(value):
        return await value
    return value


def _accept_all(config: Config) -> None:
    return None


__all__ = [
    "build",
    "build_or_throw",
    "create_config_loader",
    "load_validated_config",
]
