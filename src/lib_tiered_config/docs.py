"""Markdown documentation tables for tiered configuration files.

Purpose
-------
Render a human-readable description of the expected shape of each config file
(key paths, environment variables, types ...) so README sections stay in step
with the ``key_options`` declared in code.

Contents
    - ``write_doc``: public entry point returning the whole document.
    - ``_doc_head`` / ``_config_section`` / ``_row``: small formatting helpers.

System Role
-----------
Independent of the loading pipeline; shares only
:class:`lib_tiered_config.domain.options.ConfigDocOptions`. Performs no I/O.
"""

from __future__ import annotations

import os
from typing import Mapping, Sequence

from .domain.options import ConfigDocOptions

DEFAULT_HEADER = "## Configuration"


def write_doc(
    *,
    key_headers: Mapping[str, str],
    config_options: Sequence[ConfigDocOptions],
    header: str | None = None,
    description: str | None = None,
    empty_value_placeholder: str = "",
) -> str:
    """Return a markdown document with one section per config file.

    Parameters
    ----------
    key_headers:
        Column identifier -> column label, in display order. A leading ``key``
        column is always added.
    config_options:
        Per-file documentation in output order.
    header:
        Document heading; ``"## Configuration"`` when omitted.
    description:
        Optional paragraph placed below the heading.
    empty_value_placeholder:
        Text rendered for cells without a value.

    Examples
    --------
    >>> doc = write_doc(
    ...     key_headers={"env": "env variable"},
    ...     config_options=[
    ...         ConfigDocOptions("pg", "database", {"host": {"env": "PG_HOST"}, "port": {}}),
    ...         ConfigDocOptions("cache"),
    ...     ],
    ...     empty_value_placeholder="-",
    ... )
    >>> print(doc, end="")
    ## Configuration
    ### pg - database
    |key|env variable|
    |-|-|
    |host|PG_HOST|
    |port|-|
    ### cache
    """

    data_keys = list(key_headers)
    header_line = _table_line(["key", *key_headers.values()])
    separator_line = _table_line(["-"] * (len(data_keys) + 1))

    doc = _doc_head(header, description)
    for options in config_options:
        doc += _config_section(options, header_line, separator_line, data_keys, empty_value_placeholder)
    return doc


def _doc_head(header: str | None, description: str | None) -> str:
    head = (header if header is not None else DEFAULT_HEADER) + os.linesep
    if description is not None:
        head += description + os.linesep
    return head


def _config_section(
    options: ConfigDocOptions,
    header_line: str,
    separator_line: str,
    data_keys: Sequence[str],
    placeholder: str,
) -> str:
    """Render the heading and, when key documentation exists, the table of one config."""

    title = f"### {options.file_name}"
    if options.description is not None:
        title += f" - {options.description}"
    if options.key_options is None:
        return os.linesep.join([title, ""])
    rows = "".join(_row(key, cells, data_keys, placeholder) for key, cells in options.key_options.items())
    return os.linesep.join([title, header_line, separator_line, rows])


def _row(key: str, cells: Mapping[str, object], data_keys: Sequence[str], placeholder: str) -> str:
    values = [placeholder if cells.get(name) is None else str(cells[name]) for name in data_keys]
    return _table_line([key, *values]) + os.linesep


def _table_line(columns: Sequence[str]) -> str:
    return "|" + "|".join(columns) + "|"
