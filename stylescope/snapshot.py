"""Load node snapshots from JSON.

A snapshot is a JSON object tree.  Every object carries a ``"kind"`` key
naming a registered node class; the remaining keys are that class's
fields.  Lists become tuples, enum fields take the enum's value and
colour fields also accept a colour string such as ``"red"`` or
``"#ff000080"``::

    {"kind": "Text",
     "storage": {"kind": "VerbatimStorage", "verbatim": "Hello"},
     "modifiers": [{"kind": "WeightModifier", "weight": "bold"}]}

Unknown kinds, unknown fields, bad enum values and field values of the
wrong type are rejected here, before any inspection runs.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import types
import typing
from enum import Enum
from pathlib import Path
from typing import Any

from . import nodes
from .errors import SnapshotError
from .nodes import NODE_TYPES, Color, Text

log = logging.getLogger(__name__)

_hints_cache: dict[type, dict[str, Any]] = {}


def _hints(cls: type) -> dict[str, Any]:
    if cls not in _hints_cache:
        _hints_cache[cls] = typing.get_type_hints(cls, vars(nodes))
    return _hints_cache[cls]


def _members(hint: Any) -> tuple[Any, ...]:
    """Flatten a Union / Optional hint into its member types."""
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        return typing.get_args(hint)
    return (hint,)


def _convert_scalar(value: Any, hint: Any, where: str) -> Any:
    members = _members(hint)
    if not isinstance(value, str):
        if float in members and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return value
    for member in members:
        if typing.get_origin(member) is not None or not isinstance(member, type):
            continue
        if issubclass(member, Enum):
            try:
                return member(value)
            except ValueError:
                allowed = ", ".join(m.value for m in member)
                raise SnapshotError(
                    f"{where}: {value!r} is not a valid {member.__name__} ({allowed})"
                ) from None
        if member is Color:
            try:
                return Color.named(value)
            except ValueError as e:
                raise SnapshotError(f"{where}: bad colour {value!r}: {e}") from None
    return value


def _matches(value: Any, hint: Any) -> bool:
    """True if *value* fits the resolved field hint *hint*."""
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        return any(_matches(value, member) for member in typing.get_args(hint))
    if origin is tuple:
        if not isinstance(value, tuple):
            return False
        args = typing.get_args(hint)
        if len(args) == 2 and args[1] is Ellipsis:
            return all(_matches(item, args[0]) for item in value)
        return len(args) == len(value) and all(map(_matches, value, args))
    if hint is Any:
        return True
    if hint is type(None):
        return value is None
    if isinstance(value, bool):
        return hint is bool
    if hint is float:
        return isinstance(value, (int, float))
    if isinstance(hint, type):
        return isinstance(value, hint)
    return True


def _describe(hint: Any) -> str:
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        return " | ".join(_describe(member) for member in typing.get_args(hint))
    if origin is tuple:
        return f"list of {_describe(typing.get_args(hint)[0])}"
    if hint is type(None):
        return "null"
    return getattr(hint, "__name__", str(hint))


def _build(obj: Any, where: str = "$") -> Any:
    if isinstance(obj, list):
        return tuple(_build(item, f"{where}[{i}]") for i, item in enumerate(obj))
    if not isinstance(obj, dict):
        return obj

    kind = obj.get("kind")
    if kind is None:
        raise SnapshotError(f"{where}: object has no 'kind'")
    cls = NODE_TYPES.get(kind)
    if cls is None:
        raise SnapshotError(f"{where}: unknown node kind {kind!r}")

    hints = _hints(cls)
    declared = {f.name for f in dataclasses.fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, raw in obj.items():
        if key == "kind":
            continue
        if key not in declared:
            raise SnapshotError(f"{where}: {kind} has no field {key!r}")
        path = f"{where}.{key}"
        value = _build(raw, path)
        value = _convert_scalar(value, hints[key], path)
        if not _matches(value, hints[key]):
            raise SnapshotError(
                f"{path}: expected {_describe(hints[key])}, got {type(value).__name__} {raw!r}"
            )
        kwargs[key] = value

    try:
        return cls(**kwargs)
    except TypeError as e:
        raise SnapshotError(f"{where}: cannot build {kind}: {e}") from None


def load_node(data: Any) -> Any:
    """Build a node tree from already-decoded JSON data."""
    node = _build(data)
    log.debug("Loaded %s snapshot", type(node).__name__)
    return node


def load_text(data: Any) -> Text:
    node = load_node(data)
    if not isinstance(node, Text):
        raise SnapshotError(f"$: expected a Text node, got {type(node).__name__}")
    return node


def load_snapshot(path: str | Path) -> Text:
    """Read a JSON snapshot file whose root is a ``Text`` node."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise SnapshotError(f"{path}: not UTF-8 JSON: {e}") from None
    except json.JSONDecodeError as e:
        raise SnapshotError(f"{path}: invalid JSON: {e}") from None
    return load_text(data)
