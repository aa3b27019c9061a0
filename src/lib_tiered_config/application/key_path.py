"""Dotted key-path injection into nested configuration trees.

Purpose
-------
Write a value at a location such as ``"connections.0.host"`` inside a tree of
mappings and lists, creating intermediate containers on demand. The module is
pure (no I/O) so both the environment overlay and tests can drive it directly.

Contents
    - ``set_value``: public entry point; mutates and returns the root.
    - ``may_be_cast_to_int``: decides whether a new intermediate container is a
      list or a mapping, based on the *next* segment.
    - ``_descend`` / ``_attach`` / ``_assign``: helpers that walk and grow the
      tree one segment at a time.

Container rules
    * Existing segments are reused as-is, whatever their type.
    * Missing segments get a list when the following segment looks like an
      integer, a mapping otherwise. New containers are appended to list parents
      and stored by key on mapping parents.
    * The final segment is overwritten unconditionally. On a list it may be any
      integer-like segment: ``-1`` counts from the end, ``1e2`` and ``0x10``
      address positions 100 and 16 (the list is padded with ``None``).
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from ..domain.errors import InvalidKeyPath

_RADIX_PREFIXES = ("0x", "0o", "0b")


def may_be_cast_to_int(segment: str | None) -> bool:
    """Return ``True`` when *segment* reads as an integral number.

    Numeric text follows the usual config conventions: surrounding whitespace
    is ignored, blank text counts as ``0``, ``0x``/``0o``/``0b`` literals and
    exponents are accepted, digit separators (``1_000``) are not.

    Examples
    --------
    >>> may_be_cast_to_int("0"), may_be_cast_to_int("12"), may_be_cast_to_int("2.0")
    (True, True, True)
    >>> may_be_cast_to_int(""), may_be_cast_to_int("0x10"), may_be_cast_to_int("1e2")
    (True, True, True)
    >>> may_be_cast_to_int("host"), may_be_cast_to_int("1.5"), may_be_cast_to_int("1_000")
    (False, False, False)
    >>> may_be_cast_to_int(None)
    False
    """

    return _integer_value(segment) is not None


def _integer_value(segment: str | None) -> int | None:
    """Return the integer *segment* stands for, or ``None`` when it is not one."""

    if segment is None:
        return None
    text = segment.strip()
    if not text:
        return 0
    if "_" in text or not text.isascii():
        return None
    if text[:2].lower() in _RADIX_PREFIXES:
        try:
            return int(text, 0)
        except ValueError:
            return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not number.is_integer():
        return None
    return int(number)


def set_value(root: Any, key_path: str, value: object) -> Any:
    """Write *value* at *key_path* inside *root* and return *root*.

    Raises
    ------
    InvalidKeyPath
        When the path descends through a scalar, or its final segment on a
        list is not integer-like or counts back past the first element.

    Examples
    --------
    >>> set_value({}, "db.host", "localhost")
    {'db': {'host': 'localhost'}}
    >>> set_value({}, "connections.0.host", "a")
    {'connections': [{'host': 'a'}]}
    >>> cfg = {"connections": [{"host": "a", "port": 1}]}
    >>> set_value(cfg, "connections.1.host", "b")["connections"]
    [{'host': 'a', 'port': 1}, {'host': 'b'}]
    """

    segments = key_path.split(".")
    target = root
    for index, segment in enumerate(segments[:-1]):
        target = _descend(target, segment, segments[index + 1], key_path)
    _assign(target, segments[-1], value, key_path)
    return root


def _descend(container: Any, segment: str, next_segment: str, key_path: str) -> Any:
    """Return the child stored under *segment*, attaching a new one when absent."""

    if isinstance(container, MutableMapping):
        if segment in container:
            return container[segment]
    elif isinstance(container, list):
        position = _list_index(segment)
        if position is not None and position < len(container):
            return container[position]
    else:
        raise InvalidKeyPath(f"Cannot descend into {type(container).__name__} at {segment!r} of {key_path!r}")
    return _attach(container, segment, [] if may_be_cast_to_int(next_segment) else {})


def _attach(container: MutableMapping[Any, Any] | list[Any], segment: str, child: Any) -> Any:
    """Store *child* under *segment* (lists always append) and return it."""

    if isinstance(container, list):
        container.append(child)
    else:
        container[segment] = child
    return child


def _assign(container: Any, segment: str, value: object, key_path: str) -> None:
    """Overwrite the final *segment* of *key_path* with *value*."""

    if isinstance(container, MutableMapping):
        container[segment] = value
        return
    if not isinstance(container, list):
        raise InvalidKeyPath(f"Cannot assign {segment!r} of {key_path!r} on {type(container).__name__}")
    position = _integer_value(segment)
    if position is None:
        raise InvalidKeyPath(f"List segment {segment!r} of {key_path!r} is not an index")
    if position < 0:
        if -position > len(container):
            raise InvalidKeyPath(f"List segment {segment!r} of {key_path!r} is out of range")
        position += len(container)
    if position < len(container):
        container[position] = value
        return
    container.extend([None] * (position - len(container)))
    container.append(value)


def _list_index(segment: str) -> int | None:
    """Return the list position named by *segment* (canonical non-negative integers only)."""

    if segment.isdecimal() and str(int(segment)) == segment:
        return int(segment)
    return None
