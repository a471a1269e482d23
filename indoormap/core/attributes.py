"""Typed attribute access on parsed elements.

Works with any ElementTree-compatible element (``xml.etree`` or ``lxml``):
only ``tag``, ``get()`` and child iteration are used. Absent attributes
yield the caller's default; present but undecodable ones raise
MalformedContentError.
"""

from __future__ import annotations
import re
from enum import Enum
from typing import Any, Iterator, Optional, TypeVar

from indoormap.core.errors import MalformedContentError

E = TypeVar("E", bound=Enum)

_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})

# Plain ASCII decimal notation only: no padding, underscores, inf or nan
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _fail(node: Any, name: str, value: str, expected: str) -> MalformedContentError:
    return MalformedContentError(
        f"<{node.tag}> attribute '{name}': expected {expected}, got '{value}'"
    )


def float_attribute(node: Any, name: str, default: Optional[float] = 0.0) -> Optional[float]:
    value = node.get(name)
    if value is None:
        return default
    if not _FLOAT_RE.fullmatch(value):
        raise _fail(node, name, value, "a number")
    return float(value)


def int_attribute(node: Any, name: str, default: int = 0) -> int:
    value = node.get(name)
    if value is None:
        return default
    if not _INT_RE.fullmatch(value):
        raise _fail(node, name, value, "an integer")
    return int(value)


def bool_attribute(node: Any, name: str, default: bool = False) -> bool:
    value = node.get(name)
    if value is None:
        return default
    token = value.strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise _fail(node, name, value, "a boolean")


def str_attribute(node: Any, name: str, default: str = "") -> str:
    value = node.get(name)
    return default if value is None else value


def enum_attribute(node: Any, name: str, enum_cls: type[E], default: int = 0) -> E:
    """Decode an ordinal into `enum_cls`, members taken in definition order.

    Ordinals outside the enumeration are rejected rather than clamped.
    """
    ordinal = int_attribute(node, name, default)
    members = list(enum_cls)
    if not 0 <= ordinal < len(members):
        raise MalformedContentError(
            f"<{node.tag}> attribute '{name}': {ordinal} is not a valid "
            f"{enum_cls.__name__} (0..{len(members) - 1})"
        )
    return members[ordinal]


def children(node: Any, tag: str) -> Iterator[Any]:
    """Direct children named `tag`, in document order."""
    for child in node:
        if child.tag == tag:
            yield child


def first_child(node: Any, tag: str) -> Optional[Any]:
    return next(children(node, tag), None)
