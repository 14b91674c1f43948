"""Structural navigation over the node model.

A path is a ``|``-separated list of segments.  Each segment is either a
declared field of a registered node, a decimal index into a tuple payload,
or the reserved ``some`` marker that unwraps one level of optionality.

Every failure is reported as :class:`AttributeNotFound`, whichever segment
broke, so callers can try one path and fall back to another.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any

from .errors import AttributeNotFound
from .nodes import NODE_TYPES

log = logging.getLogger(__name__)

PATH_DELIMITER = "|"
UNWRAP = "some"

_MISS = object()


def _step(value: Any, segment: str) -> Any:
    """Resolve one segment on *value*; return ``_MISS`` if it does not apply."""
    if value is None:
        return _MISS
    if segment == UNWRAP:
        return value
    if isinstance(value, tuple):
        if not segment.isdigit():
            return _MISS
        index = int(segment)
        return value[index] if index < len(value) else _MISS

    cls = type(value)
    if NODE_TYPES.get(cls.__name__) is not cls:
        return _MISS
    names = {f.name for f in dataclasses.fields(value)}
    if segment not in names:
        return _MISS
    return getattr(value, segment)


def attribute(path: str, value: Any, expected: type | tuple[type, ...] = object) -> Any:
    """Return the value reached from *value* along *path*.

    Parameters
    ----------
    path:
        Segments joined by ``|``, e.g. ``"line_style|some|color"``.
    value:
        Root node to start from.
    expected:
        Type (or tuple of types) the final value must be an instance of.

    Raises
    ------
    AttributeNotFound
        If any segment does not resolve, or the result has the wrong type.
    """
    current = value
    for segment in path.split(PATH_DELIMITER):
        current = _step(current, segment)
        if current is _MISS:
            log.debug("Path %r: segment %r not found on %s", path, segment, type(value).__name__)
            raise AttributeNotFound(label=path, parent=type(value).__name__)
    if not isinstance(current, expected):
        log.debug(
            "Path %r: got %s, expected %s", path, type(current).__name__, expected
        )
        raise AttributeNotFound(label=path, parent=type(value).__name__)
    return current


def attribute_label(label: str, value: Any, expected: type | tuple[type, ...] = object) -> Any:
    """Single-field form of :func:`attribute`."""
    if PATH_DELIMITER in label:
        raise ValueError(f"Label must be a single segment: {label!r}")
    return attribute(label, value, expected)


def type_tag(value: Any) -> Enum | None:
    """Return the variant tag of a modifier or font provider, if it has one."""
    tag = getattr(type(value), "kind", None)
    return tag if isinstance(tag, Enum) else None
